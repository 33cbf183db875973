"""Screen spaces: one region of terminal rows per pattern trigger.

Each ``Space`` owns a contiguous run of rows, a compiled trigger and a
two-state machine:

* ``FINDING`` -- waiting for the trigger to match; lines are not shown.
* ``PRINTING`` -- the space was activated and shows every line until its
  region is full, then drops back to ``FINDING``.

The space only tracks state and row arithmetic. Drawing is done by the
display engine, which is also the one deciding when a space must stop
printing because another space took over.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass


class SpaceState(enum.Enum):
    FINDING = "finding"
    PRINTING = "printing"


@dataclass
class Space:
    start_row: int
    row_count: int
    trigger: re.Pattern[str]
    header: str
    state: SpaceState = SpaceState.FINDING
    cursor_offset: int = 0

    def __post_init__(self) -> None:
        if self.start_row < 0:
            raise ValueError(f"start_row must be >= 0, got {self.start_row}")
        if self.row_count < 1:
            raise ValueError(f"row_count must be >= 1, got {self.row_count}")

    # -- queries ------------------------------------------------------------

    @property
    def end_row(self) -> int:
        """One past the last row of the region."""
        return self.start_row + self.row_count

    @property
    def is_full(self) -> bool:
        return self.cursor_offset >= self.row_count

    @property
    def next_row(self) -> int:
        """Absolute terminal row the next line will be written to."""
        return self.start_row + self.cursor_offset

    def rows(self) -> range:
        return range(self.start_row, self.end_row)

    def matches(self, line: str) -> bool:
        return self.trigger.search(line) is not None

    def is_eligible(self, restart_on_find: bool) -> bool:
        """Whether a trigger match may (re)activate this space."""
        return restart_on_find or self.state is SpaceState.FINDING

    # -- transitions --------------------------------------------------------

    def activate(self, rows_written: int) -> None:
        """Enter ``PRINTING`` after *rows_written* header/history rows."""
        self.cursor_offset = min(rows_written, self.row_count)
        self.state = SpaceState.FINDING if self.is_full else SpaceState.PRINTING

    def advance(self) -> None:
        """Account for one printed line; stop printing once the region is full."""
        self.cursor_offset += 1
        if self.is_full:
            self.state = SpaceState.FINDING

    def stop(self) -> None:
        self.state = SpaceState.FINDING


def partition_rows(total_rows: int, count: int) -> list[tuple[int, int]]:
    """Split *total_rows* into *count* contiguous ``(start_row, row_count)`` pairs.

    Shares are equal; any remainder goes to the last region.

    Raises:
        ValueError: if *count* is not in ``1..total_rows``.
    """
    if count < 1:
        raise ValueError("at least one space is required")
    if count > total_rows:
        raise ValueError(
            f"{count} spaces do not fit in {total_rows} usable terminal rows"
        )

    share = total_rows // count
    regions: list[tuple[int, int]] = []
    for i in range(count):
        start = i * share
        rows = share if i < count - 1 else total_rows - start
        regions.append((start, rows))
    return regions
