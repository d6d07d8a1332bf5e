"""Environment-driven theme selection.

``ENQUIRER_THEME``
    Name of the theme returned by :func:`get_default_theme` (``simple``,
    ``custom``, ``colorful`` or ``colored``).  Defaults to ``simple``.

``ENQUIRER_PROMPT_CHARACTER``
    Prompt terminator for the ``custom`` theme.  Defaults to ``:``.

``NO_COLOR``
    When set to a non-empty value, styled themes fall back to ``simple``.
"""

from __future__ import annotations

import os
from typing import Callable

from enquirer.themes import (
    ColoredTheme,
    ColorfulTheme,
    CustomPromptCharacterTheme,
    SimpleTheme,
    Theme,
)

THEME_ENV_VAR = "ENQUIRER_THEME"
PROMPT_CHARACTER_ENV_VAR = "ENQUIRER_PROMPT_CHARACTER"
NO_COLOR_ENV_VAR = "NO_COLOR"

DEFAULT_THEME_NAME = "simple"


def _custom_theme() -> Theme:
    return CustomPromptCharacterTheme(
        os.environ.get(PROMPT_CHARACTER_ENV_VAR) or ":"
    )


THEMES: dict[str, Callable[[], Theme]] = {
    "simple": SimpleTheme,
    "custom": _custom_theme,
    "colorful": ColorfulTheme,
    "colored": ColoredTheme,
}

_STYLED_THEMES = frozenset({"colorful", "colored"})


def theme_from_name(name: str) -> Theme:
    """Build a fresh instance of the theme registered as *name*."""
    key = name.strip().lower()
    factory = THEMES.get(key)
    if factory is None:
        known = ", ".join(sorted(THEMES))
        raise ValueError(f"Unknown theme {name!r} (expected one of: {known})")
    return factory()


def get_default_theme() -> Theme:
    """Return the theme selected by the environment."""
    name = os.environ.get(THEME_ENV_VAR) or DEFAULT_THEME_NAME
    if os.environ.get(NO_COLOR_ENV_VAR) and name.strip().lower() in _STYLED_THEMES:
        name = DEFAULT_THEME_NAME
    return theme_from_name(name)
