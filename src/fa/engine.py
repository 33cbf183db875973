"""Display engine: routes input lines into pattern-triggered screen spaces.

The engine splits the usable terminal rows into one ``Space`` per trigger,
draws a header at the top of each, then handles input one line at a time:

1. render the line to fit the terminal width;
2. offer it to every space in trigger order -- a matching, eligible space
   activates (header and history replay) and becomes the only printing
   space, stopping every other one. A space visited earlier in the pass
   may already have shown the line before it was stopped;
3. push the rendered line into the shared history.

All terminal writes go through :class:`~fa.terminal.Terminal` using
absolute cursor positions only.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fa.history import HistoryBuffer
from fa.render import header_line, render_line
from fa.space import Space, SpaceState, partition_rows

if TYPE_CHECKING:
    from fa.config import Options
    from fa.source import LineSource
    from fa.terminal import Terminal

logger = logging.getLogger(__name__)


class DisplayEngine:
    """Owns the spaces and the history for one program run."""

    def __init__(self, terminal: Terminal, options: Options) -> None:
        self._terminal = terminal
        self._options = options
        self._spaces: list[Space] = []
        self._history = HistoryBuffer(options.history_lines)
        self._cols = 0
        self._started = False

    # -- properties ---------------------------------------------------------

    @property
    def spaces(self) -> list[Space]:
        return self._spaces

    @property
    def history(self) -> HistoryBuffer:
        return self._history

    @property
    def printing_space(self) -> Space | None:
        """The space currently in ``PRINTING`` state, if any."""
        for space in self._spaces:
            if space.state is SpaceState.PRINTING:
                return space
        return None

    # -- lifecycle ----------------------------------------------------------

    def start(self) -> None:
        """Measure the terminal, lay out the spaces and draw their headers.

        Raises:
            ValueError: if the terminal is too small for the configured spaces.
        """
        rows, cols = self._terminal.size()
        if cols < 2:
            raise ValueError(f"terminal is too narrow ({cols} columns)")
        usable_rows = rows - self._options.reserved_rows
        regions = partition_rows(usable_rows, len(self._options.triggers))

        self._cols = cols
        self._spaces = [
            Space(
                start_row=start,
                row_count=count,
                trigger=trigger,
                header=header_line(
                    cols, trigger.pattern if self._options.label_headers else None
                ),
            )
            for (start, count), trigger in zip(regions, self._options.triggers)
        ]
        logger.debug(
            "Terminal %dx%d, %d usable rows split into %s",
            rows, cols, usable_rows, regions,
        )

        self._terminal.clear_screen()
        for space in self._spaces:
            self._write_row(space.start_row, space.header)
        self._started = True

    def run(self, source: LineSource) -> int:
        """Process lines from *source* until end of stream.

        Returns the number of lines processed.
        """
        if not self._started:
            self.start()

        count = 0
        while True:
            line, end_of_stream = source.read_line()
            if end_of_stream:
                break
            if not line:
                continue
            self.feed(line)
            count += 1

        logger.info("End of %s after %d lines", source.name, count)
        return count

    # -- dispatch -----------------------------------------------------------

    def feed(self, line: str) -> None:
        """Dispatch a single raw input line to the spaces."""
        rendered = render_line(line, self._cols)
        restart_on_find = self._options.restart_on_find

        for space in self._spaces:
            if space.is_eligible(restart_on_find) and space.matches(line):
                # Only one space prints: the last one to activate.
                for other in self._spaces:
                    if other is not space:
                        other.stop()
                self._activate(space)

            if space.state is SpaceState.PRINTING:
                self._print(space, rendered)

        self._history.push(rendered)

    def _activate(self, space: Space) -> None:
        if self._options.clear_on_restart:
            for row in space.rows():
                self._terminal.move_cursor_to(row)
                self._terminal.clear_line()

        # Header takes the first row; replay only what fits below it.
        room = space.row_count - 1
        replay = self._history.snapshot()[-room:] if room else []
        self._write_row(space.start_row, space.header)
        for offset, line in enumerate(replay, start=1):
            self._write_row(space.start_row + offset, line)

        space.activate(1 + len(replay))
        logger.debug(
            "Activated space at row %d (%r), replayed %d history lines",
            space.start_row, space.trigger.pattern, len(replay),
        )

    def _print(self, space: Space, rendered: str) -> None:
        if space.is_full:
            space.stop()
            return
        self._write_row(space.next_row, rendered)
        space.advance()

    def _write_row(self, row: int, text: str) -> None:
        self._terminal.move_cursor_to(row)
        self._terminal.clear_line()
        self._terminal.write(text)
