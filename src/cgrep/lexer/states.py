"""Lexical states and character classes.

This module defines the finite state machine states for the lexer
and the character class predicates used by the transition rules.
Character classes are ASCII, as in the C locale.
"""

from __future__ import annotations

from enum import Enum, auto


class LexState(Enum):
    """Lexical context governing the next character.

    - NORMAL: Between tokens
    - AFTER_SLASH: Saw ``/``, a comment may start
    - IN_COMMENT: Inside ``/* ... */``
    - AFTER_STAR_IN_COMMENT: Saw ``*`` inside a comment, it may end
    - AFTER_BACKSLASH: The next character is consumed unexamined
    - IN_DOUBLE_QUOTE: Inside a string literal
    - IN_SINGLE_QUOTE: Inside a character literal
    - IN_IDENTIFIER: Accumulating an identifier
    - AFTER_MINUS: Saw ``-``, an arrow may follow

    """

    NORMAL = auto()
    AFTER_SLASH = auto()
    IN_COMMENT = auto()
    AFTER_STAR_IN_COMMENT = auto()
    AFTER_BACKSLASH = auto()
    IN_DOUBLE_QUOTE = auto()
    IN_SINGLE_QUOTE = auto()
    IN_IDENTIFIER = auto()
    AFTER_MINUS = auto()


# isspace() in the C locale
WHITESPACE = frozenset(" \t\n\v\f\r")


def is_letter(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z")


def is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def is_identifier_char(c: str) -> bool:
    """Characters that extend an identifier once it has started."""
    return is_letter(c) or is_digit(c) or c == "_"
