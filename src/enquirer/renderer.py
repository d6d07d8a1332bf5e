"""Theme-aware terminal renderer with erasable line accounting.

A :class:`Renderer` is created for one prompt interaction.  It asks its
theme to format each prompt event, writes the result to the terminal and
remembers how many lines that took, so the widget driving the interaction
can later erase exactly what was drawn.

Two counters are kept:

``height``
    Lines of the current body (list items, error lines, ...).
``prompt_height``
    Lines of the most recent prompt line.  A prompt write rolls everything
    counted so far into this counter and starts a new body, which lets
    :meth:`Renderer.clear_preserve_prompt` redraw the body while keeping the
    question on screen.

Counters are only updated once the terminal write has succeeded, so a
failed render leaves the accounting as it was.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Sequence
from typing import Callable

from enquirer.config import get_default_theme
from enquirer.errors import RenderError
from enquirer.terminal import Terminal
from enquirer.themes import SelectionStyle, TextSink, Theme
from enquirer.utils import visible_width

logger = logging.getLogger(__name__)

FormatFn = Callable[[TextSink], None]


class Renderer:
    """Renders prompt events with a theme and tracks the lines written."""

    def __init__(self, term: Terminal, theme: Theme | None = None) -> None:
        self._term = term
        self._theme = theme if theme is not None else get_default_theme()
        self._height = 0
        self._prompt_height = 0
        self._prompts_reset_height = True

    # -- properties ---------------------------------------------------------

    @property
    def term(self) -> Terminal:
        return self._term

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def height(self) -> int:
        return self._height

    @property
    def prompt_height(self) -> int:
        return self._prompt_height

    @property
    def prompts_reset_height(self) -> bool:
        """Whether prompt writes start a new body (default ``True``)."""
        return self._prompts_reset_height

    @prompts_reset_height.setter
    def prompts_reset_height(self, value: bool) -> None:
        self._prompts_reset_height = value

    # -- structural operations ---------------------------------------------

    def add_line(self) -> None:
        """Account for one line written outside the renderer."""
        self._height += 1

    def clear(self) -> None:
        """Erase everything this renderer is responsible for."""
        lines = self._height + self._prompt_height
        logger.debug(
            "Clearing %d lines (height=%d, prompt_height=%d)",
            lines,
            self._height,
            self._prompt_height,
        )
        self._term.clear_last_lines(lines)
        self._height = 0
        self._prompt_height = 0

    def clear_preserve_prompt(self, item_sizes: Sequence[int | str]) -> None:
        """Erase the body but keep the prompt line.

        *item_sizes* describes the body lines: either their lengths or the
        rendered strings themselves.  Each item wider than the terminal has
        wrapped and costs one extra physical line.  This is a heuristic: an
        item wrapping over three or more rows still only counts once.
        """
        _, columns = self._term.size()
        overflow = sum(1 for item in item_sizes if _item_width(item) > columns)
        lines = self._height + overflow
        logger.debug(
            "Clearing %d body lines (height=%d, wrapped=%d), keeping %d prompt lines",
            lines,
            self._height,
            overflow,
            self._prompt_height,
        )
        self._term.clear_last_lines(lines)
        self._height = 0

    # -- render methods -----------------------------------------------------

    def error(self, err: str) -> None:
        self._write_formatted_line(lambda buf: self._theme.format_error(buf, err))

    def prompt(self, prompt: str) -> None:
        self._write_formatted_prompt(
            lambda buf: self._theme.format_prompt(buf, prompt)
        )

    def input_prompt(self, prompt: str, default: str | None = None) -> None:
        self._write_formatted_str(
            lambda buf: self._theme.format_singleline_prompt(buf, prompt, default)
        )

    def password_prompt(self, prompt: str) -> None:
        def fmt(buf: TextSink) -> None:
            # Return to column 0 so the prompt overwrites any echoed input
            buf.write("\r")
            self._theme.format_singleline_prompt(buf, prompt, None)

        self._write_formatted_str(fmt)

    def confirmation_prompt(self, prompt: str, default: bool | None = None) -> None:
        self._write_formatted_str(
            lambda buf: self._theme.format_confirmation_prompt(buf, prompt, default)
        )

    def key_prompt(
        self,
        prompt: str,
        default: int | None,
        choices: Sequence[str],
    ) -> None:
        self._write_formatted_str(
            lambda buf: self._theme.format_key_prompt(buf, prompt, default, choices)
        )

    def confirmation_prompt_selection(self, prompt: str, selection: bool) -> None:
        self._write_formatted_prompt(
            lambda buf: self._theme.format_confirmation_prompt_selection(
                buf, prompt, selection
            )
        )

    def key_prompt_selection(self, prompt: str, key: str) -> None:
        self._write_formatted_prompt(
            lambda buf: self._theme.format_single_prompt_selection(buf, prompt, key)
        )

    def single_prompt_selection(self, prompt: str, selection: str) -> None:
        self._write_formatted_prompt(
            lambda buf: self._theme.format_single_prompt_selection(
                buf, prompt, selection
            )
        )

    def multi_prompt_selection(
        self, prompt: str, selections: Sequence[str]
    ) -> None:
        self._write_formatted_prompt(
            lambda buf: self._theme.format_multi_prompt_selection(
                buf, prompt, selections
            )
        )

    def password_prompt_selection(self, prompt: str) -> None:
        self._write_formatted_prompt(
            lambda buf: self._theme.format_password_prompt_selection(buf, prompt)
        )

    def selection(self, text: str, style: SelectionStyle) -> None:
        self._write_formatted_line(
            lambda buf: self._theme.format_selection(buf, text, style)
        )

    # -- write strategies ---------------------------------------------------

    def _format(self, fmt: FormatFn) -> str:
        buf = io.StringIO()
        try:
            fmt(buf)
        except (OSError, ValueError) as err:
            logger.debug("Theme %r failed to format output: %s", self._theme, err)
            raise RenderError(f"Failed to format prompt output: {err}") from err
        return buf.getvalue()

    def _write_formatted_str(self, fmt: FormatFn) -> None:
        text = self._format(fmt)
        self._term.write_raw(text)
        self._height += text.count("\n")

    def _write_formatted_line(self, fmt: FormatFn) -> None:
        text = self._format(fmt)
        self._term.write_line(text)
        self._height += text.count("\n") + 1

    def _write_formatted_prompt(self, fmt: FormatFn) -> None:
        text = self._format(fmt)
        self._term.write_line(text)
        height = self._height + text.count("\n") + 1
        if self._prompts_reset_height:
            self._prompt_height = height
            self._height = 0
        else:
            self._height = height


def _item_width(item: int | str) -> int:
    if isinstance(item, str):
        return visible_width(item)
    return item
