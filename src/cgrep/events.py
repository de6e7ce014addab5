"""Event and EventType definitions for the cgrep lexer.

The lexer turns a character stream into lexical events. WORD, DOT and
OTHER feed the chain accumulator; STRING and COMMENT carry literal bodies
for the listing modes; LINE_END hands each completed raw line to the
driver.

Thread Safety:
Event is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class EventType(Enum):
    """Event types produced by the lexer."""

    WORD = auto()  # identifier: letter (letter | digit | _)*
    DOT = auto()  # . or ->
    OTHER = auto()  # any other token; breaks a chain
    STRING = auto()  # body of a "double quoted" literal
    COMMENT = auto()  # body of a /* comment */
    LINE_END = auto()  # raw line text including its terminator


@dataclass(frozen=True, slots=True)
class Event:
    """A lexical event.

    Attributes:
        type: The event type
        text: Word, separator, literal body or raw line
        lineno: Line number (1-indexed). Literal bodies carry the line
            they opened on.
        start: Column offset of a WORD within its line, -1 otherwise
        end: Column offset just past a WORD, -1 otherwise

    """

    type: EventType
    text: str
    lineno: int
    start: int = -1
    end: int = -1

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Event({self.type.name}, {val!r}, {self.lineno})"
