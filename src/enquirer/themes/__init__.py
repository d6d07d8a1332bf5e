"""Prompt themes."""

from enquirer.themes.base import (
    PASSWORD_MASK,
    SelectionStyle,
    TextSink,
    Theme,
    format_key_choices,
)
from enquirer.themes.colored import ColoredTheme
from enquirer.themes.colorful import ColorfulTheme
from enquirer.themes.simple import CustomPromptCharacterTheme, SimpleTheme

__all__ = [
    "PASSWORD_MASK",
    "ColoredTheme",
    "ColorfulTheme",
    "CustomPromptCharacterTheme",
    "SelectionStyle",
    "SimpleTheme",
    "TextSink",
    "Theme",
    "format_key_choices",
]
