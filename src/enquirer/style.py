"""ANSI text styling used by the coloured themes."""

from __future__ import annotations

from dataclasses import dataclass, replace

_RESET = "\x1b[0m"
_BOLD = "1"
_DIM = "2"
_ITALIC = "3"
_UNDERLINE = "4"

# SGR foreground colour codes
_COLORS = {
    "black": "30",
    "red": "31",
    "green": "32",
    "yellow": "33",
    "blue": "34",
    "magenta": "35",
    "cyan": "36",
    "white": "37",
}


@dataclass(frozen=True)
class Style:
    """An immutable set of text attributes.

    Builder methods return a new style, so presets can be shared freely::

        Style().cyan().bold().apply_to("?")
    """

    color: str | None = None
    is_bold: bool = False
    is_dim: bool = False
    is_italic: bool = False
    is_underline: bool = False

    # -- builders -----------------------------------------------------------

    def fg(self, color: str) -> Style:
        if color not in _COLORS:
            raise ValueError(f"Unknown colour: {color!r}")
        return replace(self, color=color)

    def black(self) -> Style:
        return self.fg("black")

    def red(self) -> Style:
        return self.fg("red")

    def green(self) -> Style:
        return self.fg("green")

    def yellow(self) -> Style:
        return self.fg("yellow")

    def blue(self) -> Style:
        return self.fg("blue")

    def magenta(self) -> Style:
        return self.fg("magenta")

    def cyan(self) -> Style:
        return self.fg("cyan")

    def white(self) -> Style:
        return self.fg("white")

    def bold(self) -> Style:
        return replace(self, is_bold=True)

    def dim(self) -> Style:
        return replace(self, is_dim=True)

    def italic(self) -> Style:
        return replace(self, is_italic=True)

    def underline(self) -> Style:
        return replace(self, is_underline=True)

    # -- rendering ----------------------------------------------------------

    @property
    def codes(self) -> list[str]:
        """SGR parameters in a stable order."""
        codes: list[str] = []
        if self.color is not None:
            codes.append(_COLORS[self.color])
        if self.is_bold:
            codes.append(_BOLD)
        if self.is_dim:
            codes.append(_DIM)
        if self.is_italic:
            codes.append(_ITALIC)
        if self.is_underline:
            codes.append(_UNDERLINE)
        return codes

    def apply_to(self, text: str) -> str:
        """Wrap *text* in this style's escape sequence.

        Empty styles and empty text come back unchanged.
        """
        codes = self.codes
        if not codes or not text:
            return text
        return f"\x1b[{';'.join(codes)}m{text}{_RESET}"
