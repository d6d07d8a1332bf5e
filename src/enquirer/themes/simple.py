"""Unstyled themes."""

from __future__ import annotations

from collections.abc import Sequence

from enquirer.themes.base import TextSink, Theme


class SimpleTheme(Theme):
    """The default theme: plain text, ``:`` terminated prompts."""


class CustomPromptCharacterTheme(Theme):
    """The simple theme with a custom prompt character in place of ``:``."""

    def __init__(self, prompt_character: str = ":") -> None:
        self.prompt_character = prompt_character

    def __repr__(self) -> str:
        return f"CustomPromptCharacterTheme(prompt_character={self.prompt_character!r})"

    def format_prompt(self, out: TextSink, prompt: str) -> None:
        out.write(f"{prompt}{self.prompt_character}")

    def format_singleline_prompt(
        self,
        out: TextSink,
        prompt: str,
        default: str | None = None,
    ) -> None:
        if default is not None:
            out.write(f"{prompt} [{default}]{self.prompt_character} ")
        else:
            out.write(f"{prompt}{self.prompt_character} ")

    def format_single_prompt_selection(
        self,
        out: TextSink,
        prompt: str,
        selection: str,
    ) -> None:
        out.write(f"{prompt}{self.prompt_character} {selection}")

    def format_multi_prompt_selection(
        self,
        out: TextSink,
        prompt: str,
        selections: Sequence[str],
    ) -> None:
        out.write(f"{prompt}{self.prompt_character} ")
        out.write(", ".join(selections))
