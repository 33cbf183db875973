"""Bounded FIFO of the most recently rendered lines."""

from __future__ import annotations

from collections import deque


class HistoryBuffer:
    """Keeps the last *capacity* rendered lines, oldest first.

    A single buffer is shared by every space; whichever space activates
    next replays the current contents regardless of which lines it
    would itself have shown. A capacity of 0 stores nothing.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"history capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._lines: deque[str] = deque(maxlen=capacity)

    def push(self, line: str) -> None:
        """Append *line*; the oldest line drops out once at capacity."""
        self._lines.append(line)

    def snapshot(self) -> list[str]:
        """Return a copy of the buffered lines in insertion order."""
        return list(self._lines)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._lines)
