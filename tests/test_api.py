"""Tests for the high-level cgrep API."""


class TestSearchFunction:
    """Tests for the search() function."""

    def test_whole_identifier(self) -> None:
        """A pattern never matches part of an identifier."""
        from cgrep import search

        hits = search("char *tmpname;\nint tmp;\n", "tmp")
        assert [(h.lineno, h.text) for h in hits] == [(2, "int tmp;")]

    def test_chain_suffixes(self) -> None:
        """Both the chain and its trailing component match."""
        from cgrep import search

        source = "x = ptr->val;\n"
        assert len(search(source, "val")) == 1
        assert len(search(source, "ptr->val")) == 1

    def test_chain_head_matches_as_it_arrives(self) -> None:
        """The head is a complete one-component chain when it is checked."""
        from cgrep import search

        assert len(search("x = ptr->val;\n", "ptr")) == 1

    def test_missing_component(self) -> None:
        from cgrep import search

        assert search("x = ptr->memb_x;\n", "memb") == []
        assert search("x = ptr->val;\n", "memb") == []

    def test_chain_across_comment_and_lines(self) -> None:
        from cgrep import search

        hits = search("x = ptr /* c */\n   ->\n   val;\n", r"ptr->val")
        assert [h.lineno for h in hits] == [3]

    def test_source_name(self) -> None:
        from cgrep import search

        hit = search("tmp;\n", "tmp", source_name="a.c")[0]
        assert hit.source_name == "a.c"
        assert hit.format(line_numbers=True) == "a.c:    1: tmp;"

    def test_strings(self) -> None:
        from cgrep import HitKind, SearchConfig, search

        hits = search('puts("abc");\n', config=SearchConfig(strings_only=True))
        assert [(h.kind, h.text) for h in hits] == [(HitKind.STRING, "abc")]

    def test_comments(self) -> None:
        from cgrep import SearchConfig, search

        hits = search("x;\n/* hello */\n", config=SearchConfig(comments_only=True))
        assert [(h.text, h.lineno) for h in hits] == [(" hello ", 2)]

    def test_findings(self) -> None:
        from cgrep import HitKind, SearchConfig, search

        hits = search("a->b.c\n", r"b\.c|c", config=SearchConfig(interactive=True))
        assert [h.text for h in hits] == ["b.c", "c"]
        assert all(h.kind is HitKind.FINDING for h in hits)


class TestReplaceFunction:
    """Tests for the replace() function."""

    def test_replace_bare(self) -> None:
        from cgrep import replace

        assert replace("foo = foo + 1;\n", "foo", "bar") == "bar = bar + 1;\n"

    def test_chain_head_untouched(self) -> None:
        from cgrep import replace

        assert replace("foo.bar = foo->x;\n", "foo", "baz") == "foo.bar = foo->x;\n"

    def test_literals_untouched(self) -> None:
        from cgrep import replace

        source = 'foo("foo"); /* foo */ foo;\n'
        assert replace(source, "foo", "f") == 'f("foo"); /* foo */ f;\n'
