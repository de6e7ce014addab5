"""Error-path and malformed input tests.

Tests that exercise the exception hierarchy and graceful handling of
input the lexer was not written for. Malformed C is never an error: the
lexer approximates and carries on.
"""

import pytest

from cgrep import replace, search
from cgrep.config import SearchConfig
from cgrep.driver import SourcePass
from cgrep.errors import CgrepError, ConfigError, EditorError, PatternError, SourceError
from cgrep.pattern import compile_pattern

# =========================================================================
# Exception construction and formatting
# =========================================================================


class TestErrorFormatting:
    """Verify error messages carry their context."""

    def test_pattern_error(self) -> None:
        err = PatternError("a(", "missing ), unterminated subpattern")
        assert str(err).startswith("illegal pattern 'a('")
        assert err.pattern == "a("
        assert "unterminated" in err.reason

    def test_source_error(self) -> None:
        err = SourceError("gone.c", "No such file or directory")
        assert str(err) == "cannot open gone.c: No such file or directory"
        assert err.source_file == "gone.c"

    def test_editor_error(self) -> None:
        err = EditorError("me", "cannot execute")
        assert str(err) == "Editor 'me': cannot execute"
        assert err.command == "me"

    @pytest.mark.parametrize(
        "err",
        [
            ConfigError("x"),
            PatternError("p", "r"),
            SourceError("f", "r"),
            EditorError("c", "m"),
        ],
    )
    def test_is_cgrep_error(self, err: Exception) -> None:
        assert isinstance(err, CgrepError)


# =========================================================================
# Misuse of the API
# =========================================================================


class TestApiMisuse:
    """Wrong calls fail with ConfigError before any input is read."""

    def test_search_without_pattern(self) -> None:
        with pytest.raises(ConfigError):
            search("int x;\n")

    def test_scan_in_replace_mode(self) -> None:
        run = SourcePass(SearchConfig(replacement="y"), compile_pattern("x"))
        with pytest.raises(ConfigError):
            list(run.scan(["x;\n"]))

    def test_rewrite_in_search_mode(self) -> None:
        run = SourcePass(SearchConfig(), compile_pattern("x"))
        with pytest.raises(ConfigError):
            list(run.rewrite(["x;\n"]))

    def test_bad_pattern(self) -> None:
        with pytest.raises(PatternError):
            search("x\n", "[")


# =========================================================================
# Malformed source
# =========================================================================


class TestMalformedSource:
    """The lexer never fails on odd input."""

    @pytest.mark.parametrize(
        "source",
        [
            "",
            "\\",
            '"',
            "'",
            "/*",
            "/* *",
            "->",
            "-",
            "/",
            "a.",
            ".a",
            "\x00\x01\x7f",
            "\udcff",
        ],
    )
    def test_search_terminates(self, source: str) -> None:
        assert isinstance(search(source, "a"), list)

    def test_empty_source_replace(self) -> None:
        assert replace("", "a", "b") == ""

    def test_nul_bytes_preserved(self) -> None:
        assert replace("a\x00a;\n", "a", "b") == "b\x00b;\n"

    def test_unterminated_comment_hides_rest(self) -> None:
        assert search("/* open\nint tmp;\n", "tmp") == []

    def test_unterminated_string_ends_at_newline(self) -> None:
        hits = search('s = "open\nint tmp;\n', "tmp")
        assert [h.lineno for h in hits] == [2]
