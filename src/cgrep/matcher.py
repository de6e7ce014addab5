"""Suffix matching of identifier chains.

Every time a chain gains a component, each recorded suffix is tested
against the full-match pattern, longest first. The whole suffix list is
rescanned on every component, so ``ptr->memb.x`` re-tests ``ptr->memb.x``,
``memb.x`` and ``x`` even though the shorter prefixes were seen before.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from cgrep.chain import ChainSuffix
from cgrep.pattern import Pattern


class MatchPolicy(Enum):
    """How many suffixes a check reports.

    - FIRST: stop at the first matching suffix (line marking)
    - ALL: every matching suffix is an independent hit (findings)
    - BARE: single-component chains only (replacement)

    """

    FIRST = auto()
    ALL = auto()
    BARE = auto()


@dataclass(frozen=True, slots=True)
class ChainHit:
    """A chain suffix that matched.

    Attributes:
        text: The matching suffix, e.g. ``memb.x``
        lineno: Line of the suffix's first component

    """

    text: str
    lineno: int


class SuffixMatcher:
    """Tests chain suffixes against a compiled pattern."""

    __slots__ = ("_pattern", "_policy")

    def __init__(self, pattern: Pattern, policy: MatchPolicy = MatchPolicy.FIRST) -> None:
        self._pattern = pattern
        self._policy = policy

    @property
    def policy(self) -> MatchPolicy:
        return self._policy

    def check(self, text: str, suffixes: Sequence[ChainSuffix]) -> list[ChainHit]:
        """Return the matching suffixes of ``text``, longest first.

        Args:
            text: Chain text
            suffixes: Component boundaries of ``text``, longest first

        Returns:
            Hits in suffix order; at most one unless the policy is ALL.
        """
        if self._policy is MatchPolicy.BARE and len(suffixes) != 1:
            return []
        hits: list[ChainHit] = []
        matches = self._pattern.matches
        for suffix in suffixes:
            candidate = text[suffix.start :]
            if matches(candidate):
                hits.append(ChainHit(candidate, suffix.lineno))
                if self._policy is not MatchPolicy.ALL:
                    break
        return hits
