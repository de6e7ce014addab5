"""Identifier chain accumulation.

cgrep matches whole identifier chains such as ``ptr->memb.x``. The
accumulator folds WORD and DOT events into the chain text and records a
suffix boundary for every component, so that when ``x`` arrives the matcher
can try ``ptr->memb.x``, then ``memb.x``, then ``x``.

Comments and line ends are transparent: ``ptr /* note */\\n->val`` is the
single chain ``ptr->val``.

Thread Safety:
ChainAccumulator instances are local to one source pass.

"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from cgrep.events import Event, EventType


@dataclass(frozen=True, slots=True)
class ChainSuffix:
    """Start of one chain component.

    Attributes:
        start: Offset of the component within the chain text
        lineno: Line on which the component was seen

    """

    start: int
    lineno: int


class _Previous(Enum):
    """Class of the last event that affected the chain."""

    OTHER = auto()
    WORD = auto()
    DOT = auto()


class ChainAccumulator:
    """Builds ``ident(.ident|->ident)*`` chains from lexical events.

    Usage:
        >>> acc = ChainAccumulator()
        >>> acc.advance(Event(EventType.WORD, "ptr", 1))
        True
        >>> acc.advance(Event(EventType.DOT, "->", 1))
        False
        >>> acc.advance(Event(EventType.WORD, "val", 2))
        True
        >>> acc.text, [s.start for s in acc.suffixes]
        ('ptr->val', [0, 5])

    """

    __slots__ = ("_text", "_suffixes", "_previous", "_separator")

    def __init__(self) -> None:
        self._text = ""
        self._suffixes: list[ChainSuffix] = []
        self._previous = _Previous.OTHER
        self._separator = ""

    @property
    def text(self) -> str:
        """The chain so far, e.g. ``ptr->memb.x``."""
        return self._text

    @property
    def suffixes(self) -> Sequence[ChainSuffix]:
        """Component boundaries, longest suffix first."""
        return self._suffixes

    @property
    def first_lineno(self) -> int | None:
        """Line of the first component of a live chain, None when broken."""
        if not self._suffixes:
            return None
        return self._suffixes[0].lineno

    def advance(self, event: Event) -> bool:
        """Fold one event into the chain.

        Returns:
            True if the event was a WORD, i.e. the chain has a new last
            component that should be checked against the pattern.
        """
        event_type = event.type
        if event_type is EventType.WORD:
            if self._previous is _Previous.DOT:
                self._text += self._separator
                self._suffixes.append(ChainSuffix(len(self._text), event.lineno))
                self._text += event.text
            else:
                self._text = event.text
                self._suffixes = [ChainSuffix(0, event.lineno)]
            self._previous = _Previous.WORD
            self._separator = ""
            return True

        if event_type is EventType.DOT:
            if self._previous is _Previous.WORD:
                self._separator = event.text
                self._previous = _Previous.DOT
            else:
                self.reset()
        elif event_type is EventType.OTHER or event_type is EventType.STRING:
            self.reset()
        return False

    def reset(self) -> None:
        """Break the chain; the next WORD starts a new one."""
        self._text = ""
        self._suffixes = []
        self._previous = _Previous.OTHER
        self._separator = ""
