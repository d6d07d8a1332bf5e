"""enquirer: themeable terminal rendering for interactive prompts."""

# Configuration
from enquirer.config import THEMES, get_default_theme, theme_from_name

# Errors
from enquirer.errors import RenderError

# Renderer
from enquirer.renderer import Renderer

# Styling
from enquirer.style import Style

# Terminal interface and implementation
from enquirer.terminal import ProcessTerminal, Terminal

# Themes
from enquirer.themes import (
    PASSWORD_MASK,
    ColoredTheme,
    ColorfulTheme,
    CustomPromptCharacterTheme,
    SelectionStyle,
    SimpleTheme,
    TextSink,
    Theme,
    format_key_choices,
)

# Utilities
from enquirer.utils import strip_ansi, visible_width

__all__ = [
    # Configuration
    "THEMES",
    "get_default_theme",
    "theme_from_name",
    # Errors
    "RenderError",
    # Renderer
    "Renderer",
    # Styling
    "Style",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    # Themes
    "PASSWORD_MASK",
    "ColoredTheme",
    "ColorfulTheme",
    "CustomPromptCharacterTheme",
    "SelectionStyle",
    "SimpleTheme",
    "TextSink",
    "Theme",
    "format_key_choices",
    # Utilities
    "strip_ansi",
    "visible_width",
]
