"""Runtime options for the display engine."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Options:
    """Validated, immutable display options.

    ``triggers`` order is both the top-to-bottom layout of the spaces and
    the order in which they are offered each input line.
    """

    triggers: tuple[re.Pattern[str], ...]
    restart_on_find: bool = False
    clear_on_restart: bool = False
    history_lines: int = 0
    label_headers: bool = False
    reserved_rows: int = 1

    def __post_init__(self) -> None:
        if not self.triggers:
            raise ValueError("at least one pattern is required")
        if self.history_lines < 0:
            raise ValueError(f"history_lines must be >= 0, got {self.history_lines}")
        if self.reserved_rows < 0:
            raise ValueError(f"reserved_rows must be >= 0, got {self.reserved_rows}")

    @classmethod
    def from_patterns(
        cls,
        patterns: Iterable[str],
        *,
        restart_on_find: bool = False,
        clear_on_restart: bool = False,
        history_lines: int = 0,
        label_headers: bool = False,
        reserved_rows: int = 1,
    ) -> Options:
        """Compile *patterns* and build the options.

        Raises:
            re.error: if a pattern is not a valid regular expression.
            ValueError: if no pattern is given or a count is negative.
        """
        return cls(
            triggers=tuple(re.compile(p) for p in patterns),
            restart_on_find=restart_on_find,
            clear_on_restart=clear_on_restart,
            history_lines=history_lines,
            label_headers=label_headers,
            reserved_rows=reserved_rows,
        )
