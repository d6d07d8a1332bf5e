"""Glyph-prefixed coloured theme.

Prompts are prefixed with ``?`` and end in ``›``; committed answers are
prefixed with ``✔`` and separated from the prompt by ``·``; errors get a
``✘``.  Example rendering of a key prompt and its answer::

    ? Do you want to continue? (y/N/p) ›
    ✔ Do you want to continue? · n
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from enquirer.style import Style
from enquirer.themes.base import SelectionStyle, TextSink, Theme

_PASSWORD_MASK = "********"


@dataclass
class ColoredTheme(Theme):
    """Coloured theme with ``?``/``✔``/``❯`` glyphs.

    ``inline_selections`` controls whether a committed multi-selection lists
    the chosen values on the prompt line.  ``is_sort`` switches the checkbox
    glyphs to the ordering-mode look, where the picked-up item is marked
    with ``❯`` and unchecked items get no mark.
    """

    defaults_style: Style = field(default_factory=lambda: Style().yellow().bold())
    prompts_style: Style = field(default_factory=lambda: Style().bold())
    prefixes_style: Style = field(default_factory=lambda: Style().cyan())
    values_style: Style = field(default_factory=lambda: Style().green())
    errors_style: Style = field(default_factory=lambda: Style().red())
    selected_style: Style = field(default_factory=lambda: Style().cyan().bold())
    unselected_style: Style = field(default_factory=Style)
    inline_selections: bool = True
    is_sort: bool = False

    def with_inline_selections(self, value: bool) -> ColoredTheme:
        """Return a copy of this theme with ``inline_selections`` set to *value*."""
        return replace(self, inline_selections=value)

    def with_sort(self, value: bool) -> ColoredTheme:
        """Return a copy of this theme with ``is_sort`` set to *value*."""
        return replace(self, is_sort=value)

    # -- glyph helpers ------------------------------------------------------

    def _question(self, prompt: str) -> str:
        return f"{self.prefixes_style.apply_to('?')} {self.prompts_style.apply_to(prompt)}"

    def _answered(self, prompt: str) -> str:
        return (
            f"{self.values_style.apply_to('✔')} "
            f"{self.prompts_style.apply_to(prompt)} "
            f"{self.defaults_style.apply_to('·')}"
        )

    @property
    def _caret(self) -> str:
        return self.defaults_style.apply_to("›")

    # -- Theme --------------------------------------------------------------

    def format_error(self, out: TextSink, err: str) -> None:
        out.write(
            f"{self.errors_style.apply_to('✘')} {self.errors_style.apply_to(err)}"
        )

    def format_prompt(self, out: TextSink, prompt: str) -> None:
        out.write(f"{self._question(prompt)} {self._caret}")

    def format_singleline_prompt(
        self,
        out: TextSink,
        prompt: str,
        default: str | None = None,
    ) -> None:
        details = f" ({default})" if default is not None else ""
        out.write(
            f"{self._question(prompt)}"
            f"{self.defaults_style.apply_to(details)} {self._caret} "
        )

    def format_single_prompt_selection(
        self,
        out: TextSink,
        prompt: str,
        selection: str,
    ) -> None:
        out.write(f"{self._answered(prompt)} {self.values_style.apply_to(selection)}")

    def format_confirmation_prompt(
        self,
        out: TextSink,
        prompt: str,
        default: bool | None = None,
    ) -> None:
        if default is True:
            hint = self.defaults_style.apply_to("(Y/n)")
            echo = self.prefixes_style.apply_to("true")
        elif default is False:
            hint = self.defaults_style.apply_to("(y/N)")
            echo = self.prefixes_style.apply_to("false")
        else:
            hint = echo = ""
        out.write(f"{self._question(prompt)} {hint} {self._caret} {echo} ")

    def format_key_prompt(
        self,
        out: TextSink,
        prompt: str,
        default: int | None,
        choices: Sequence[str],
    ) -> None:
        keys = self.defaults_style.apply_to(
            f"({self.format_key_choices(default, choices)})"
        )
        out.write(f"{self._question(prompt)} {keys} {self._caret} ")

    def format_confirmation_prompt_selection(
        self,
        out: TextSink,
        prompt: str,
        selection: bool,
    ) -> None:
        answer = "true" if selection else "false"
        out.write(f"{self._answered(prompt)} {self.values_style.apply_to(answer)}")

    def format_password_prompt_selection(
        self, out: TextSink, prompt: str
    ) -> None:
        self.format_single_prompt_selection(out, prompt, _PASSWORD_MASK)

    def format_selection(
        self,
        out: TextSink,
        text: str,
        style: SelectionStyle,
    ) -> None:
        unchecked = self.defaults_style.apply_to(" " if self.is_sort else "✔")

        if style is SelectionStyle.CHECKBOX_CHECKED_SELECTED:
            glyph = self.values_style.apply_to("❯" if self.is_sort else "✔")
            label = self.selected_style.apply_to(text)
        elif style is SelectionStyle.CHECKBOX_CHECKED_UNSELECTED:
            glyph = self.values_style.apply_to("✔")
            label = self.unselected_style.apply_to(text)
        elif style is SelectionStyle.CHECKBOX_UNCHECKED_SELECTED:
            glyph = unchecked
            label = self.selected_style.apply_to(text)
        elif style is SelectionStyle.CHECKBOX_UNCHECKED_UNSELECTED:
            glyph = unchecked
            label = self.unselected_style.apply_to(text)
        elif style is SelectionStyle.MENU_SELECTED:
            glyph = self.values_style.apply_to("❯")
            label = self.selected_style.apply_to(text)
        else:
            glyph = self.defaults_style.apply_to(" ")
            label = self.unselected_style.apply_to(text)

        out.write(f"{glyph} {label}")

    def format_multi_prompt_selection(
        self,
        out: TextSink,
        prompt: str,
        selections: Sequence[str],
    ) -> None:
        out.write(self._answered(prompt))
        if self.inline_selections and selections:
            values = ", ".join(self.values_style.apply_to(s) for s in selections)
            out.write(f" {values}")
