"""Tests for SearchConfig: modes, validation and from_dict()."""

from __future__ import annotations

import dataclasses

import pytest

from cgrep.config import DEFAULT_EDITOR, EDITOR_ENV_VAR, SearchConfig, SearchMode
from cgrep.errors import ConfigError


class TestModes:
    """The mode derived from the option flags."""

    @pytest.mark.parametrize(
        "options,mode",
        [
            ({}, SearchMode.LINES),
            ({"line_numbers": True}, SearchMode.LINES),
            ({"list_files": True}, SearchMode.FILES),
            ({"interactive": True}, SearchMode.FINDINGS),
            ({"interactive": True, "list_files": True}, SearchMode.FINDINGS),
            ({"strings_only": True}, SearchMode.LITERALS),
            ({"comments_only": True, "interactive": True}, SearchMode.LITERALS),
            ({"replacement": "x"}, SearchMode.REPLACE),
            ({"replacement": ""}, SearchMode.REPLACE),
        ],
    )
    def test_mode(self, options: dict, mode: SearchMode) -> None:
        assert SearchConfig(**options).mode is mode

    def test_needs_pattern(self) -> None:
        assert SearchConfig().needs_pattern
        assert SearchConfig(replacement="x").needs_pattern
        assert not SearchConfig(strings_only=True).needs_pattern
        assert not SearchConfig(comments_only=True).needs_pattern


class TestValidate:
    """Option combinations rejected before any source is read."""

    @pytest.mark.parametrize(
        "flag",
        [
            "list_files",
            "line_numbers",
            "strings_only",
            "comments_only",
            "interactive",
            "report_chain_start",
        ],
    )
    def test_replace_excludes_other_options(self, flag: str) -> None:
        config = SearchConfig(replacement="x", **{flag: True})
        with pytest.raises(ConfigError):
            config.validate(has_sources=True)

    def test_replace_alone_is_valid(self) -> None:
        SearchConfig(replacement="x").validate(has_sources=False)

    @pytest.mark.parametrize("flag", ["list_files", "interactive"])
    def test_filename_required(self, flag: str) -> None:
        config = SearchConfig(**{flag: True})
        with pytest.raises(ConfigError):
            config.validate(has_sources=False)
        config.validate(has_sources=True)

    def test_interactive_needs_editor(self) -> None:
        with pytest.raises(ConfigError):
            SearchConfig(interactive=True, editor="  ").validate(has_sources=True)

    def test_unbalanced_editor_quotes(self) -> None:
        with pytest.raises(ConfigError):
            SearchConfig(interactive=True, editor="vi '").validate(has_sources=True)

    def test_editor_only_checked_when_interactive(self) -> None:
        SearchConfig(editor="vi '").validate(has_sources=True)

    def test_combinable_reports(self) -> None:
        SearchConfig(line_numbers=True, strings_only=True).validate(has_sources=False)


class TestEditorDefault:
    """The editor command comes from the environment."""

    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(EDITOR_ENV_VAR, raising=False)
        assert SearchConfig().editor == DEFAULT_EDITOR

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(EDITOR_ENV_VAR, "emacs -nw")
        assert SearchConfig().editor == "emacs -nw"


class TestSearchConfigFromDict:
    """Test SearchConfig.from_dict() factory method."""

    def test_from_dict_basic(self) -> None:
        config = SearchConfig.from_dict({"line_numbers": True, "replacement": None})
        assert config.line_numbers is True
        assert config.list_files is False

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = SearchConfig.from_dict({"list_files": True, "unknown_key": "ignored"})
        assert config.list_files is True

    def test_from_dict_empty(self) -> None:
        assert SearchConfig.from_dict({}) == SearchConfig()

    def test_frozen(self) -> None:
        config = SearchConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.line_numbers = True  # type: ignore[misc]
