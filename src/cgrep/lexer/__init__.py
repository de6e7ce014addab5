"""Character-at-a-time lexer for C-like source.

The lexer is a finite-state approximation of C: it separates comments,
string and character literals from identifier chains and punctuation,
which is all cgrep needs to match whole identifiers.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexState
├── core.py              # Lexer class (state-keyed dispatch + line buffer)
└── states.py            # LexState enum, character classes

Usage:
    >>> from cgrep.lexer import Lexer
    >>> for event in Lexer().tokenize(["p->next = 0;\\n"]):
    ...     print(event)
Event(WORD, 'p', 1)
Event(DOT, '->', 1)
Event(WORD, 'next', 1)
Event(OTHER, '=', 1)
Event(OTHER, '0', 1)
Event(OTHER, ';', 1)
Event(LINE_END, 'p->next = 0;\\n', 1)
Event(LINE_END, '', 2)

"""

from cgrep.lexer.core import Lexer
from cgrep.lexer.states import LexState

__all__ = ["LexState", "Lexer"]
