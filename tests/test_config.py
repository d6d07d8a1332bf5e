"""Tests for environment-driven theme selection."""

from __future__ import annotations

import pytest

from enquirer.config import THEMES, get_default_theme, theme_from_name
from enquirer.themes import (
    ColoredTheme,
    ColorfulTheme,
    CustomPromptCharacterTheme,
    SimpleTheme,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ENQUIRER_THEME", "ENQUIRER_PROMPT_CHARACTER", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


class TestThemeFromName:
    """theme_from_name builds registered themes."""

    @pytest.mark.parametrize(
        "name, cls",
        [
            ("simple", SimpleTheme),
            ("custom", CustomPromptCharacterTheme),
            ("colorful", ColorfulTheme),
            ("colored", ColoredTheme),
        ],
    )
    def test_known_names(self, name: str, cls: type) -> None:
        assert isinstance(theme_from_name(name), cls)

    def test_name_is_case_insensitive(self) -> None:
        assert isinstance(theme_from_name("  Colored "), ColoredTheme)

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown theme"):
            theme_from_name("neon")

    def test_fresh_instance_each_call(self) -> None:
        assert theme_from_name("colored") is not theme_from_name("colored")

    def test_registry_lists_every_theme(self) -> None:
        assert set(THEMES) == {"simple", "custom", "colorful", "colored"}


class TestGetDefaultTheme:
    """get_default_theme reads ENQUIRER_THEME and honours NO_COLOR."""

    def test_defaults_to_simple(self) -> None:
        assert isinstance(get_default_theme(), SimpleTheme)

    def test_env_selects_theme(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENQUIRER_THEME", "colorful")
        assert isinstance(get_default_theme(), ColorfulTheme)

    def test_no_color_disables_styled_themes(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ENQUIRER_THEME", "colored")
        monkeypatch.setenv("NO_COLOR", "1")
        assert isinstance(get_default_theme(), SimpleTheme)

    def test_empty_no_color_is_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENQUIRER_THEME", "colored")
        monkeypatch.setenv("NO_COLOR", "")
        assert isinstance(get_default_theme(), ColoredTheme)

    def test_custom_prompt_character(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENQUIRER_THEME", "custom")
        monkeypatch.setenv("ENQUIRER_PROMPT_CHARACTER", ">")
        theme = get_default_theme()
        assert isinstance(theme, CustomPromptCharacterTheme)
        assert theme.prompt_character == ">"

    def test_no_color_keeps_custom_theme(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENQUIRER_THEME", "custom")
        monkeypatch.setenv("NO_COLOR", "1")
        assert isinstance(get_default_theme(), CustomPromptCharacterTheme)

    def test_unknown_env_theme_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENQUIRER_THEME", "neon")
        with pytest.raises(ValueError):
            get_default_theme()
