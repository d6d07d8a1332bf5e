"""Terminal abstraction used by the prompt renderer.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation that writes to ``sys.stdout`` and erases lines via ANSI
escape sequences.
"""

from __future__ import annotations

import os
import sys
from typing import Protocol, TextIO

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_CURSOR_UP = "\x1b[1A"
_CLEAR_LINE = "\x1b[2K\r"

_DEFAULT_ROWS = 24
_DEFAULT_COLUMNS = 80


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for the terminal operations the renderer needs."""

    def write_raw(self, text: str) -> None: ...

    def write_line(self, text: str) -> None: ...

    def clear_last_lines(self, n: int) -> None: ...

    def size(self) -> tuple[int, int]: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal backed by a text stream (``sys.stdout`` by default).

    Every write is flushed immediately so the cursor position seen by the
    user matches what the renderer has accounted for.  Write errors are not
    caught: a terminal that cannot be written to ends the interaction.

    If the ``ENQUIRER_WRITE_LOG`` environment variable names a file, all
    output is also appended there.  Failures to write the log are ignored.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._write_log_path: str = os.environ.get("ENQUIRER_WRITE_LOG", "")

    # -- Terminal protocol --------------------------------------------------

    def write_raw(self, text: str) -> None:
        """Write *text* without a trailing newline."""
        self._write(text)

    def write_line(self, text: str) -> None:
        """Write *text* followed by a newline."""
        self._write(text + "\n")

    def clear_last_lines(self, n: int) -> None:
        """Erase the *n* lines above the cursor and move the cursor up.

        The cursor ends at the start of the topmost erased line.
        """
        if n < 0:
            raise ValueError(f"Cannot clear a negative number of lines: {n}")
        if n == 0:
            return
        self._write((_CURSOR_UP + _CLEAR_LINE) * n)

    def size(self) -> tuple[int, int]:
        """Return ``(rows, columns)``, falling back to 24x80."""
        try:
            size = os.get_terminal_size(self._stream.fileno())
        except (AttributeError, ValueError, OSError):
            return _DEFAULT_ROWS, _DEFAULT_COLUMNS
        return size.lines, size.columns

    # -- private ------------------------------------------------------------

    def _write(self, data: str) -> None:
        self._stream.write(data)
        self._stream.flush()

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a", encoding="utf-8") as f:
                    f.write(data)
            except OSError:
                pass
