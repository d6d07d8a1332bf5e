"""Theme protocol shared by every prompt theme.

A theme turns a prompt event into text.  Every formatting method writes into
a caller-supplied sink (anything with a ``write(str)`` method, typically an
:class:`io.StringIO`) and has a plain-text default here, so concrete themes
only override what they want to look different.

Themes must stay pure: no I/O beyond the sink, no state beyond their style
configuration.  Errors raised by the sink propagate to the caller.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Protocol


class TextSink(Protocol):
    """Anything a theme can write formatted text into."""

    def write(self, s: str, /) -> int: ...


class SelectionStyle(Enum):
    """Rendering state of one selectable list item."""

    CHECKBOX_UNCHECKED_SELECTED = "checkbox_unchecked_selected"
    CHECKBOX_UNCHECKED_UNSELECTED = "checkbox_unchecked_unselected"
    CHECKBOX_CHECKED_SELECTED = "checkbox_checked_selected"
    CHECKBOX_CHECKED_UNSELECTED = "checkbox_checked_unselected"
    MENU_SELECTED = "menu_selected"
    MENU_UNSELECTED = "menu_unselected"


_SIMPLE_SELECTION_PREFIXES = {
    SelectionStyle.CHECKBOX_UNCHECKED_SELECTED: "> [ ] ",
    SelectionStyle.CHECKBOX_UNCHECKED_UNSELECTED: "  [ ] ",
    SelectionStyle.CHECKBOX_CHECKED_SELECTED: "> [x] ",
    SelectionStyle.CHECKBOX_CHECKED_UNSELECTED: "  [x] ",
    SelectionStyle.MENU_SELECTED: "> ",
    SelectionStyle.MENU_UNSELECTED: "  ",
}

PASSWORD_MASK = "[hidden]"


def format_key_choices(default: int | None, choices: Sequence[str]) -> str:
    """Join key *choices* with ``/``, uppercasing the one at *default*.

    >>> format_key_choices(1, ["y", "n", "p"])
    'y/N/p'
    >>> format_key_choices(None, ["y", "n", "p"])
    'y/n/p'

    Keys whose uppercase form has a different length (``ß`` -> ``SS``) are
    left as they are.
    """
    return "/".join(
        _upper_key(choice) if pos == default else choice
        for pos, choice in enumerate(choices)
    )


def _upper_key(choice: str) -> str:
    upper = choice.upper()
    return upper if len(upper) == len(choice) else choice


class Theme:
    """Base theme: unstyled output for every prompt event."""

    def format_prompt(self, out: TextSink, prompt: str) -> None:
        """Multi-line question header."""
        out.write(f"{prompt}:")

    def format_singleline_prompt(
        self,
        out: TextSink,
        prompt: str,
        default: str | None = None,
    ) -> None:
        """Single-line input prompt, with the default shown inline."""
        if default is not None:
            out.write(f"{prompt} [{default}]: ")
        else:
            out.write(f"{prompt}: ")

    def format_error(self, out: TextSink, err: str) -> None:
        out.write(f"error: {err}")

    def format_confirmation_prompt(
        self,
        out: TextSink,
        prompt: str,
        default: bool | None = None,
    ) -> None:
        out.write(prompt)
        if default is True:
            out.write(" [Y/n] ")
        elif default is False:
            out.write(" [y/N] ")

    def format_key_prompt(
        self,
        out: TextSink,
        prompt: str,
        default: int | None,
        choices: Sequence[str],
    ) -> None:
        out.write(prompt)
        out.write(f" [{self.format_key_choices(default, choices)}] ")

    def format_key_choices(
        self, default: int | None, choices: Sequence[str]
    ) -> str:
        """Key list shared by every theme; override the decoration, not this."""
        return format_key_choices(default, choices)

    def format_confirmation_prompt_selection(
        self,
        out: TextSink,
        prompt: str,
        selection: bool,
    ) -> None:
        out.write(f"{prompt} {'yes' if selection else 'no'}")

    def format_single_prompt_selection(
        self,
        out: TextSink,
        prompt: str,
        selection: str,
    ) -> None:
        out.write(f"{prompt}: {selection}")

    def format_multi_prompt_selection(
        self,
        out: TextSink,
        prompt: str,
        selections: Sequence[str],
    ) -> None:
        out.write(f"{prompt}: ")
        out.write(", ".join(selections))

    def format_password_prompt_selection(
        self, out: TextSink, prompt: str
    ) -> None:
        """Committed password answer; only ever shows the mask."""
        self.format_single_prompt_selection(out, prompt, PASSWORD_MASK)

    def format_selection(
        self,
        out: TextSink,
        text: str,
        style: SelectionStyle,
    ) -> None:
        out.write(f"{_SIMPLE_SELECTION_PREFIXES[style]}{text}")
