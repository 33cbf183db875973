"""Terminal abstraction for absolute-cursor line output.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation that writes ANSI escape sequences to ``sys.stdout``.

Every position is absolute (row/column from the screen origin). Output from
other processes sharing the terminal can move the real cursor at any time,
so nothing here tracks or relies on where the cursor was left.
"""

from __future__ import annotations

import os
import sys
from typing import Protocol, TextIO

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_CLEAR_LINE = "\x1b[2K\r"
_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_CURSOR_TO_FMT = "\x1b[{};{}H"

_DEFAULT_ROWS = 24
_DEFAULT_COLUMNS = 80


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for the terminal operations the display engine needs."""

    def size(self) -> tuple[int, int]: ...

    def clear_screen(self) -> None: ...

    def move_cursor_to(self, row: int, col: int = 0) -> None: ...

    def clear_line(self) -> None: ...

    def write(self, data: str) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal backed by ``sys.stdout``.

    Write failures (for example a detached terminal) are not caught: there is
    no way to keep displaying once the surface is gone.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._write_log_path: str = os.environ.get("FA_WRITE_LOG", "")

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    # -- size ---------------------------------------------------------------

    def size(self) -> tuple[int, int]:
        """Return ``(rows, columns)``, falling back to 24x80 off a terminal."""
        try:
            size = os.get_terminal_size(self.stream.fileno())
        except (AttributeError, ValueError, OSError):
            return _DEFAULT_ROWS, _DEFAULT_COLUMNS
        return size.lines, size.columns

    # -- write --------------------------------------------------------------

    def write(self, data: str) -> None:
        """Write data to stdout and optionally to the write log."""
        self._raw_write(data)

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a") as f:
                    f.write(data)
            except OSError:
                pass

    # -- cursor / screen manipulation --------------------------------------

    def move_cursor_to(self, row: int, col: int = 0) -> None:
        """Place the cursor at zero-based *row* and *col*."""
        self._raw_write(_CURSOR_TO_FMT.format(row + 1, col + 1))

    def clear_line(self) -> None:
        self._raw_write(_CLEAR_LINE)

    def clear_screen(self) -> None:
        self._raw_write(_CLEAR_SCREEN)

    # -- private: raw write ------------------------------------------------

    def _raw_write(self, data: str) -> None:
        stream = self.stream
        stream.write(data)
        stream.flush()
