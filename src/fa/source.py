"""Line sources: standard input or a file, read one line at a time."""

from __future__ import annotations

import io
import logging
import sys
from typing import BinaryIO, TextIO

logger = logging.getLogger(__name__)


class LineSource:
    """Pulls lines from a text stream on demand.

    ``read_line`` returns ``(text, end_of_stream)``. A failed read is logged
    and reported as an empty, non-final read so the caller simply asks again.
    """

    def __init__(
        self, stream: TextIO, name: str = "<stream>", *, owns_stream: bool = True
    ) -> None:
        self._stream = stream
        self._owns_stream = owns_stream
        self.name = name
        self._wrapper: io.TextIOWrapper | None = None

    @classmethod
    def stdin(cls) -> LineSource:
        return cls.from_binary(sys.stdin.buffer, name="<stdin>", owns_stream=False)

    @classmethod
    def from_binary(
        cls, buffer: BinaryIO, name: str = "<stream>", *, owns_stream: bool = True
    ) -> LineSource:
        """Read UTF-8 lines from a byte stream.

        Undecodable bytes become U+FFFD rather than failing the read, so
        one bad byte never costs the lines buffered around it.
        """
        stream = io.TextIOWrapper(buffer, encoding="utf-8", errors="replace", newline="")
        source = cls(stream, name=name, owns_stream=owns_stream)
        if not owns_stream:
            # Closing or collecting the wrapper would close *buffer* too.
            source._wrapper = stream
        return source

    @classmethod
    def open(cls, path: str) -> LineSource:
        """Open *path* for reading.

        Raises:
            OSError: if the file cannot be opened.
        """
        stream = open(path, encoding="utf-8", errors="replace", newline="")
        return cls(stream, name=path)

    def read_line(self) -> tuple[str, bool]:
        try:
            line = self._stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Error reading %s: %s", self.name, e)
            return "", False
        return line, line == ""

    def close(self) -> None:
        if self._owns_stream:
            self._stream.close()
        elif self._wrapper is not None:
            self._wrapper.detach()
            self._wrapper = None

    def __enter__(self) -> LineSource:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
