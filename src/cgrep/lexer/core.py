"""State-machine lexer for C-like source text.

Consumes the input one character at a time. Each state has a handler in a
state-keyed dispatch table; a handler either consumes the character or
hands it back so it is dispatched again under NORMAL. This one-character
reprocess is the only lookback: input is never re-read.

The lexer owns the current line buffer. Every character is appended to it
after dispatch, so a WORD's ``start``/``end`` columns are
offsets into the raw line that the following LINE_END carries.

Thread Safety:
Lexer instances are single-use. Create one per source.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from cgrep.events import Event, EventType
from cgrep.lexer.states import (
    WHITESPACE,
    LexState,
    is_identifier_char,
    is_letter,
)


class Lexer:
    """Incremental lexer emitting WORD/DOT/OTHER, literal and line events.

    Usage:
        >>> lexer = Lexer()
        >>> [e.text for e in lexer.tokenize(["a.b"]) if e.type is EventType.WORD]
        ['a', 'b']

    Never fails: an unterminated comment runs to end of input and an
    unterminated string ends at the line boundary.

    """

    __slots__ = (
        "_state",
        "_resume_state",  # State AFTER_BACKSLASH returns to
        "_lineno",
        "_line",  # Raw characters of the current line
        "_word_start",  # Column where the current identifier began
        "_literal",  # Body of the string or comment being scanned
        "_literal_lineno",  # Line the literal opened on
    )

    def __init__(self) -> None:
        self._state = LexState.NORMAL
        self._resume_state = LexState.NORMAL
        self._lineno = 1
        self._line: list[str] = []
        self._word_start = 0
        self._literal: list[str] = []
        self._literal_lineno = 1

    @property
    def state(self) -> LexState:
        return self._state

    @property
    def lineno(self) -> int:
        """Number of the line currently being scanned."""
        return self._lineno

    def tokenize(self, chunks: Iterable[str]) -> Iterator[Event]:
        """Lex a stream of text chunks.

        Args:
            chunks: Source text in any chunking (a list with the whole
                text, or successive reads from a file)

        Yields:
            Events in source order. The last event is always the LINE_END
            of the final (possibly empty) line.
        """
        out: list[Event] = []
        for chunk in chunks:
            for char in chunk:
                self._step(char, out)
                if out:
                    yield from out
                    out.clear()
        self._finish(out)
        yield from out

    def _step(self, char: str, out: list[Event]) -> None:
        """Dispatch one character, then add it to the line buffer."""
        while not _DISPATCH[self._state](self, char, out):
            pass
        self._line.append(char)
        if char == "\n":
            self._end_line(out)

    def _end_line(self, out: list[Event]) -> None:
        out.append(Event(EventType.LINE_END, "".join(self._line), self._lineno))
        self._line.clear()
        self._lineno += 1

    def _finish(self, out: list[Event]) -> None:
        """Flush pending state at end of input."""
        state = self._state
        if state is LexState.AFTER_BACKSLASH:
            state = self._resume_state
        if state is LexState.IN_IDENTIFIER:
            self._emit_word(out)
        elif state in (LexState.IN_COMMENT, LexState.AFTER_STAR_IN_COMMENT):
            self._emit_literal(EventType.COMMENT, out)
        elif state is LexState.IN_DOUBLE_QUOTE:
            self._emit_literal(EventType.STRING, out)
        self._state = LexState.NORMAL
        self._end_line(out)

    # =========================================================================
    # Emitters
    # =========================================================================

    def _emit(self, event_type: EventType, text: str, out: list[Event]) -> None:
        out.append(Event(event_type, text, self._lineno))

    def _emit_word(self, out: list[Event]) -> None:
        start = self._word_start
        end = len(self._line)
        word = "".join(self._line[start:end])
        out.append(Event(EventType.WORD, word, self._lineno, start, end))

    def _begin_literal(self) -> None:
        self._literal.clear()
        self._literal_lineno = self._lineno

    def _emit_literal(self, event_type: EventType, out: list[Event]) -> None:
        body = "".join(self._literal)
        self._literal.clear()
        out.append(Event(event_type, body, self._literal_lineno))

    # =========================================================================
    # State handlers: return False to reprocess the character under NORMAL
    # =========================================================================

    def _lex_normal(self, char: str, out: list[Event]) -> bool:
        if char == ".":
            self._emit(EventType.DOT, ".", out)
        elif char == "-":
            self._state = LexState.AFTER_MINUS
        elif char == "/":
            self._state = LexState.AFTER_SLASH
        elif char == "\\":
            self._resume_state = LexState.NORMAL
            self._state = LexState.AFTER_BACKSLASH
        elif char == '"':
            self._begin_literal()
            self._state = LexState.IN_DOUBLE_QUOTE
        elif char == "'":
            self._state = LexState.IN_SINGLE_QUOTE
        elif is_letter(char):
            self._word_start = len(self._line)
            self._state = LexState.IN_IDENTIFIER
        elif char not in WHITESPACE:
            self._emit(EventType.OTHER, char, out)
        return True

    def _lex_after_minus(self, char: str, out: list[Event]) -> bool:
        self._state = LexState.NORMAL
        if char == ">":
            self._emit(EventType.DOT, "->", out)
            return True
        return False

    def _lex_after_slash(self, char: str, out: list[Event]) -> bool:
        if char == "*":
            self._begin_literal()
            self._state = LexState.IN_COMMENT
            return True
        self._state = LexState.NORMAL
        return False

    def _lex_in_comment(self, char: str, out: list[Event]) -> bool:
        self._literal.append(char)
        if char == "*":
            self._state = LexState.AFTER_STAR_IN_COMMENT
        return True

    def _lex_after_star(self, char: str, out: list[Event]) -> bool:
        if char == "/":
            # Drop the '*' of the closing '*/'
            self._literal.pop()
            self._emit_literal(EventType.COMMENT, out)
            self._state = LexState.NORMAL
            return True
        self._literal.append(char)
        if char != "*":
            self._state = LexState.IN_COMMENT
        return True

    def _lex_in_identifier(self, char: str, out: list[Event]) -> bool:
        if is_identifier_char(char):
            return True
        self._emit_word(out)
        self._state = LexState.NORMAL
        return False

    def _lex_in_double_quote(self, char: str, out: list[Event]) -> bool:
        if char == '"' or char == "\n":
            self._emit_literal(EventType.STRING, out)
            self._state = LexState.NORMAL
            return True
        self._literal.append(char)
        if char == "\\":
            self._resume_state = LexState.IN_DOUBLE_QUOTE
            self._state = LexState.AFTER_BACKSLASH
        return True

    def _lex_in_single_quote(self, char: str, out: list[Event]) -> bool:
        if char == "'" or char == "\n":
            self._emit(EventType.OTHER, "'", out)
            self._state = LexState.NORMAL
        elif char == "\\":
            self._resume_state = LexState.IN_SINGLE_QUOTE
            self._state = LexState.AFTER_BACKSLASH
        return True

    def _lex_after_backslash(self, char: str, out: list[Event]) -> bool:
        if self._resume_state is LexState.IN_DOUBLE_QUOTE:
            self._literal.append(char)
        self._state = self._resume_state
        return True


_DISPATCH: dict[LexState, Callable[[Lexer, str, list[Event]], bool]] = {
    LexState.NORMAL: Lexer._lex_normal,
    LexState.AFTER_MINUS: Lexer._lex_after_minus,
    LexState.AFTER_SLASH: Lexer._lex_after_slash,
    LexState.IN_COMMENT: Lexer._lex_in_comment,
    LexState.AFTER_STAR_IN_COMMENT: Lexer._lex_after_star,
    LexState.IN_IDENTIFIER: Lexer._lex_in_identifier,
    LexState.IN_DOUBLE_QUOTE: Lexer._lex_in_double_quote,
    LexState.IN_SINGLE_QUOTE: Lexer._lex_in_single_quote,
    LexState.AFTER_BACKSLASH: Lexer._lex_after_backslash,
}
