"""Exceptions raised by the rendering core."""

from __future__ import annotations


class RenderError(OSError):
    """A theme failed to format a prompt event.

    Subclasses :class:`OSError` so callers can treat formatting failures and
    terminal I/O failures the same way.  The underlying sink error is kept as
    ``__cause__``.
    """
