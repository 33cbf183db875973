"""fa: route matching lines of a text stream into per-pattern screen spaces."""

__version__ = "0.3.0"

from fa.config import Options
from fa.engine import DisplayEngine
from fa.history import HistoryBuffer
from fa.render import header_line, render_line
from fa.source import LineSource
from fa.space import Space, SpaceState, partition_rows
from fa.terminal import ProcessTerminal, Terminal

__all__ = [
    "DisplayEngine",
    "HistoryBuffer",
    "LineSource",
    "Options",
    "ProcessTerminal",
    "Space",
    "SpaceState",
    "Terminal",
    "header_line",
    "partition_rows",
    "render_line",
]
