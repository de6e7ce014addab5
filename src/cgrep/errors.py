"""Exception classes for cgrep.

Provides standardized exceptions for error handling throughout cgrep.
Every fatal condition raises a CgrepError subclass; the command line
front end turns these into a diagnostic and a non-zero exit status.
"""

from __future__ import annotations


class CgrepError(Exception):
    """Base exception for all cgrep errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(CgrepError):
    """Invalid option combination.

    Raised before any source is processed, e.g. when replace mode is
    combined with a reporting option or a required pattern is missing.
    """

    pass


class PatternError(CgrepError):
    """The search pattern could not be compiled."""

    def __init__(self, pattern: str, reason: str) -> None:
        """Initialize pattern error.

        Args:
            pattern: The pattern text as given by the user
            reason: Message from the regular expression compiler
        """
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"illegal pattern {pattern!r}: {reason}")


class SourceError(CgrepError):
    """A source file could not be opened or written.

    This is the only non-fatal error: the run skips the source and
    continues with the next one.
    """

    def __init__(self, source_file: str, reason: str) -> None:
        """Initialize source error.

        Args:
            source_file: Path of the failing source
            reason: Description of the I/O failure
        """
        self.source_file = source_file
        self.reason = reason
        super().__init__(f"cannot open {source_file}: {reason}")


class EditorError(CgrepError):
    """The editor command for interactive review could not be executed."""

    def __init__(self, command: str, message: str) -> None:
        self.command = command
        super().__init__(f"Editor '{command}': {message}")
