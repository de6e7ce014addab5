"""
cgrep: egrep for C source programs

Searches C-like source for whole identifiers and ``a.b->c`` chains rather
than substrings. A pattern is a regular expression that must match a whole
identifier chain, or any trailing part of one, so ``tmp`` never matches
``tmpname`` and ``ptr->val`` is found across comments and line breaks.
Strings and comments are never searched, but can be listed on their own.

Quick Start:
    >>> from cgrep import search, replace
    >>> [hit.text for hit in search("x = ptr->val;\\ny = tmpname;\\n", "val")]
    ['x = ptr->val;']

    >>> replace("foo = foo + 1;\\n", "foo", "bar")
    'bar = bar + 1;\\n'

Command line:
    cgrep -n "ptr->val" *.c
    cgrep -r new_name old_name file.c
"""

from cgrep.chain import ChainAccumulator, ChainSuffix
from cgrep.config import SearchConfig, SearchMode
from cgrep.driver import Hit, HitKind, SourcePass
from cgrep.errors import (
    CgrepError,
    ConfigError,
    EditorError,
    PatternError,
    SourceError,
)
from cgrep.events import Event, EventType
from cgrep.lexer import Lexer, LexState
from cgrep.matcher import ChainHit, MatchPolicy, SuffixMatcher
from cgrep.pattern import Pattern, compile_pattern

__version__ = "1.0.0"


def search(
    source: str,
    pattern: str | None = None,
    *,
    config: SearchConfig | None = None,
    source_name: str | None = None,
) -> list[Hit]:
    """Search C source text.

    Args:
        source: Source text
        pattern: Full-match regular expression (omit when listing strings
            or comments)
        config: Search configuration (line search if None)
        source_name: Name reported with each hit

    Returns:
        Hits in source order

    Raises:
        PatternError: If the pattern does not compile
        ConfigError: If the configuration needs a pattern and none is given

    Example:
        >>> hits = search("a->b.c\\n", "b\\\\.c", config=SearchConfig(interactive=True))
        >>> [(h.text, h.lineno) for h in hits]
        [('b.c', 1)]
    """
    if config is None:
        config = SearchConfig()
    compiled = compile_pattern(pattern) if pattern is not None else None
    return list(SourcePass(config, compiled, source_name).scan([source]))


def replace(source: str, pattern: str, replacement: str) -> str:
    """Rewrite every bare identifier in ``source`` that matches ``pattern``.

    Identifiers that are part of a ``.``/``->`` chain are left alone; all
    other text is reproduced exactly.
    """
    config = SearchConfig(replacement=replacement)
    return "".join(SourcePass(config, compile_pattern(pattern)).rewrite([source]))


__all__ = [
    # Main API
    "replace",
    "search",
    "__version__",
    # Configuration
    "SearchConfig",
    "SearchMode",
    # Pipeline
    "ChainAccumulator",
    "ChainHit",
    "ChainSuffix",
    "Event",
    "EventType",
    "LexState",
    "Lexer",
    "MatchPolicy",
    "Pattern",
    "SourcePass",
    "SuffixMatcher",
    "compile_pattern",
    # Results
    "Hit",
    "HitKind",
    # Errors
    "CgrepError",
    "ConfigError",
    "EditorError",
    "PatternError",
    "SourceError",
]
