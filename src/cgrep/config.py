"""Search configuration for cgrep.

A SearchConfig is built once per run, validated before any source is
opened, and then shared read-only by every source pass.

Usage:
    config = SearchConfig(line_numbers=True)
    config.validate(has_sources=True)
    for hit in SourcePass(config, compile_pattern("ptr->val")).scan(chunks):
        print(hit.format(line_numbers=config.line_numbers))

"""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass, field
from enum import Enum, auto

from cgrep.errors import ConfigError

EDITOR_ENV_VAR = "CGREP_EDITOR"
DEFAULT_EDITOR = "me"


class SearchMode(Enum):
    """What a source pass produces.

    - LINES: every line holding a matching chain
    - FILES: the source name, once, at the first matching line
    - FINDINGS: every matching chain suffix, for interactive review
    - LITERALS: string and/or comment bodies, no pattern involved
    - REPLACE: the rewritten source text

    """

    LINES = auto()
    FILES = auto()
    FINDINGS = auto()
    LITERALS = auto()
    REPLACE = auto()


def default_editor() -> str:
    """Editor command for interactive review, from the environment."""
    return os.environ.get(EDITOR_ENV_VAR) or DEFAULT_EDITOR


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Immutable search configuration.

    Attributes:
        list_files: Report only the names of sources with a match
        line_numbers: Prefix reported lines with their line number
        strings_only: Report every double-quoted string body (no pattern)
        comments_only: Report every comment body (no pattern)
        interactive: Collect findings for review in an external editor
        replacement: Rewrite matching bare identifiers with this text
        report_chain_start: Report chains spread over several lines at the
            line of their first component instead of their last
        editor: Command used for interactive review

    """

    list_files: bool = False
    line_numbers: bool = False
    strings_only: bool = False
    comments_only: bool = False
    interactive: bool = False
    replacement: str | None = None
    report_chain_start: bool = False
    editor: str = field(default_factory=default_editor)

    @classmethod
    def from_dict(cls, config_dict: dict) -> SearchConfig:
        """Create SearchConfig from dictionary.

        Only includes keys that are valid SearchConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = SearchConfig.from_dict({"line_numbers": True, "bogus": 1})
            >>> config.line_numbers
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    @property
    def mode(self) -> SearchMode:
        if self.replacement is not None:
            return SearchMode.REPLACE
        if self.strings_only or self.comments_only:
            return SearchMode.LITERALS
        if self.interactive:
            return SearchMode.FINDINGS
        if self.list_files:
            return SearchMode.FILES
        return SearchMode.LINES

    @property
    def needs_pattern(self) -> bool:
        """String and comment listings take no pattern."""
        return self.mode is not SearchMode.LITERALS

    def validate(self, *, has_sources: bool) -> None:
        """Reject option combinations that cannot run.

        Args:
            has_sources: Whether named sources were given (otherwise the
                run reads standard input)

        Raises:
            ConfigError: If the combination is invalid
        """
        if self.replacement is not None:
            others = (
                self.list_files
                or self.line_numbers
                or self.strings_only
                or self.comments_only
                or self.interactive
                or self.report_chain_start
            )
            if others:
                raise ConfigError("replace mode cannot be combined with other options")
        if not has_sources and (self.interactive or self.list_files):
            raise ConfigError("interactive and file-list modes require a filename")
        if self.interactive:
            try:
                argv = shlex.split(self.editor)
            except ValueError as exc:
                raise ConfigError(f"bad editor command {self.editor!r}: {exc}") from exc
            if not argv:
                raise ConfigError("interactive mode requires an editor command")


__all__ = [
    "DEFAULT_EDITOR",
    "EDITOR_ENV_VAR",
    "SearchConfig",
    "SearchMode",
    "default_editor",
]
