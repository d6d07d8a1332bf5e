"""A colourful variant of the simple theme."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from enquirer.style import Style
from enquirer.themes.base import SelectionStyle, TextSink, Theme


@dataclass
class ColorfulTheme(Theme):
    """Simple layout with role-based colours.

    Each field styles one role: default values, error markers, UI
    indicators, inactive/active list items, yes/no answers, and values
    embedded in prompts.
    """

    defaults_style: Style = field(default_factory=lambda: Style().dim())
    error_style: Style = field(default_factory=lambda: Style().red())
    indicator_style: Style = field(default_factory=lambda: Style().cyan().bold())
    inactive_style: Style = field(default_factory=lambda: Style().dim())
    active_style: Style = field(default_factory=Style)
    yes_style: Style = field(default_factory=lambda: Style().green())
    no_style: Style = field(default_factory=lambda: Style().red())
    values_style: Style = field(default_factory=lambda: Style().cyan())

    def format_singleline_prompt(
        self,
        out: TextSink,
        prompt: str,
        default: str | None = None,
    ) -> None:
        if default is not None:
            out.write(f"{prompt} [{self.defaults_style.apply_to(default)}]: ")
        else:
            out.write(f"{prompt}: ")

    def format_error(self, out: TextSink, err: str) -> None:
        out.write(f"{self.error_style.apply_to('error')}: {err}")

    def format_confirmation_prompt(
        self,
        out: TextSink,
        prompt: str,
        default: bool | None = None,
    ) -> None:
        out.write(prompt)
        if default is True:
            out.write(f" {self.defaults_style.apply_to('[Y/n]')} ")
        elif default is False:
            out.write(f" {self.defaults_style.apply_to('[y/N]')} ")

    def format_confirmation_prompt_selection(
        self,
        out: TextSink,
        prompt: str,
        selection: bool,
    ) -> None:
        answer = (
            self.yes_style.apply_to("yes")
            if selection
            else self.no_style.apply_to("no")
        )
        out.write(f"{prompt} {answer}")

    def format_single_prompt_selection(
        self,
        out: TextSink,
        prompt: str,
        selection: str,
    ) -> None:
        out.write(f"{prompt}: {self.values_style.apply_to(selection)}")

    def format_multi_prompt_selection(
        self,
        out: TextSink,
        prompt: str,
        selections: Sequence[str],
    ) -> None:
        out.write(f"{prompt}: ")
        out.write(", ".join(self.values_style.apply_to(s) for s in selections))

    def format_selection(
        self,
        out: TextSink,
        text: str,
        style: SelectionStyle,
    ) -> None:
        pointer = self.indicator_style.apply_to(">")
        check = self.indicator_style.apply_to("x")
        active = self.active_style.apply_to(text)
        inactive = self.inactive_style.apply_to(text)

        if style is SelectionStyle.CHECKBOX_UNCHECKED_SELECTED:
            out.write(f"{pointer} [ ] {active}")
        elif style is SelectionStyle.CHECKBOX_UNCHECKED_UNSELECTED:
            out.write(f"  [ ] {inactive}")
        elif style is SelectionStyle.CHECKBOX_CHECKED_SELECTED:
            out.write(f"{pointer} [{check}] {active}")
        elif style is SelectionStyle.CHECKBOX_CHECKED_UNSELECTED:
            out.write(f"  [{check}] {inactive}")
        elif style is SelectionStyle.MENU_SELECTED:
            out.write(f"{pointer} {active}")
        else:
            out.write(f"  {inactive}")
