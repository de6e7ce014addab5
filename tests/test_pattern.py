"""Tests for the full-match pattern predicate."""

from __future__ import annotations

import pytest

from cgrep.errors import CgrepError, PatternError
from cgrep.pattern import Pattern, compile_pattern


class TestFullMatch:
    """The whole candidate must match."""

    @pytest.mark.parametrize(
        "pattern,candidate,expected",
        [
            ("tmp", "tmp", True),
            ("tmp", "tmpname", False),
            ("tmp", "mytmp", False),
            ("reg*", "register", False),
            ("reg.*", "register", True),
            ("x|abc|d", "abc", True),
            ("x|abc|d", "ab", False),
            ("x|abc|d", "dx", False),
            (r"structure\.member", "structure.member", True),
            ("ptr->val", "ptr->val", True),
        ],
    )
    def test_matches(self, pattern: str, candidate: str, expected: bool) -> None:
        assert compile_pattern(pattern).matches(candidate) is expected

    def test_no_match_before_trailing_newline(self) -> None:
        assert not compile_pattern("tmp").matches("tmp\n")

    def test_callable(self) -> None:
        pattern = compile_pattern("a|b")
        assert pattern("a")
        assert not pattern("c")

    def test_keeps_source(self) -> None:
        pattern = compile_pattern("x+")
        assert isinstance(pattern, Pattern)
        assert pattern.source == "x+"


class TestIllegalPattern:
    """Compile failures."""

    @pytest.mark.parametrize("pattern", ["(", "a)", "[z-a]", "*x"])
    def test_raises_pattern_error(self, pattern: str) -> None:
        with pytest.raises(PatternError) as excinfo:
            compile_pattern(pattern)
        assert excinfo.value.pattern == pattern
        assert "illegal pattern" in str(excinfo.value)

    def test_is_cgrep_error(self) -> None:
        with pytest.raises(CgrepError):
            compile_pattern("(")
