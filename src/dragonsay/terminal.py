"""Render targets: where frames and captions are written."""

from __future__ import annotations

import os
import shutil
from typing import TYPE_CHECKING, Protocol

import click

from dragonsay.constants import FALLBACK_TERMINAL_WIDTH

if TYPE_CHECKING:
    from typing import TextIO

# Erase the display and move the cursor home.
CLEAR_SEQUENCE = "\r\x1b[2J\r\x1b[H"


class TerminalError(OSError):
    """Raised when writing to or clearing the terminal fails."""


class RenderTarget(Protocol):
    """Terminal surface driven by the sequencer."""

    def current_width(self) -> int:
        """Return the width of the surface in columns."""
        ...

    def write_line(self, text: str) -> None:
        """Write text followed by a newline."""
        ...

    def clear_screen(self) -> None:
        """Erase the surface and move the cursor home."""
        ...


class ClickTerminal:
    """RenderTarget writing through ``click.echo``.

    Clearing is a no-op when the stream is not a TTY, so piped output stays
    free of escape sequences.
    """

    def __init__(
        self,
        file: TextIO | None = None,
        fallback_width: int = FALLBACK_TERMINAL_WIDTH,
    ) -> None:
        self._file = file
        self.fallback_width = fallback_width

    @property
    def stream(self) -> TextIO:
        if self._file is not None:
            return self._file
        return click.get_text_stream("stdout")

    def is_terminal(self) -> bool:
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    def current_width(self) -> int:
        """Return the width of the stream's terminal, or the fallback width.

        The default stdout honors ``COLUMNS``; an injected file is measured
        through its own descriptor.
        """
        if self._file is None:
            return shutil.get_terminal_size((self.fallback_width, 24)).columns
        try:
            columns = os.get_terminal_size(self._file.fileno()).columns
        except (AttributeError, ValueError, OSError):
            return self.fallback_width
        return columns or self.fallback_width

    def write_line(self, text: str) -> None:
        try:
            click.echo(text, file=self.stream)
        except OSError as exc:
            raise TerminalError(f"failed to write to terminal: {exc}") from exc

    def clear_screen(self) -> None:
        if not self.is_terminal():
            return
        try:
            click.echo(CLEAR_SEQUENCE, file=self.stream, nl=False)
            self.stream.flush()
        except OSError as exc:
            raise TerminalError(f"failed to clear terminal: {exc}") from exc


__all__ = ["CLEAR_SEQUENCE", "ClickTerminal", "RenderTarget", "TerminalError"]
