"""Full-match pattern predicate.

Patterns are regular expressions tested against whole candidate strings:
``tmp`` matches the identifier ``tmp`` but not ``tmpname``, and ``reg*``
does not match ``register`` while ``reg.*`` does. Use ``\\.`` for a literal
member dot, e.g. ``structure\\.member``.

"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from cgrep.errors import PatternError


@dataclass(frozen=True, slots=True)
class Pattern:
    """A compiled, immutable full-match predicate.

    Attributes:
        source: Pattern text as given by the user

    """

    source: str
    _regex: re.Pattern[str] = field(repr=False, compare=False)

    def matches(self, candidate: str) -> bool:
        """Return True if the whole of ``candidate`` matches."""
        return self._regex.fullmatch(candidate) is not None

    def __call__(self, candidate: str) -> bool:
        return self.matches(candidate)


def compile_pattern(pattern: str) -> Pattern:
    """Compile ``pattern`` for full-string matching.

    Raises:
        PatternError: If the pattern is not a valid regular expression
    """
    try:
        regex = re.compile(pattern)
    except re.error as exc:
        raise PatternError(pattern, str(exc)) from exc
    return Pattern(pattern, regex)
