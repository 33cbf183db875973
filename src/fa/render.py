"""Line rendering: fit raw input lines and space headers to the terminal width."""

from __future__ import annotations


def _split_terminator(line: str) -> tuple[str, str]:
    """Split *line* into its text and trailing line terminator (if any)."""
    if line.endswith("\r\n"):
        return line[:-2], "\r\n"
    if line.endswith("\n"):
        return line[:-1], "\n"
    return line, ""


def render_line(line: str, cols: int) -> str:
    """Return *line* bounded to fit within *cols* columns.

    A line whose text (terminator excluded) is at least *cols* characters
    long is cut to its first ``cols - 1`` characters and given a single
    ``"\\n"`` terminator. Shorter lines pass through unchanged, so rendering
    an already-rendered line is a no-op.
    """
    text, _ = _split_terminator(line)
    if len(text) >= cols:
        return text[: max(cols - 1, 0)] + "\n"
    return line


def header_line(cols: int, label: str | None = None) -> str:
    """Build the decorative separator drawn at the top of each space.

    The header is ``cols - 1`` characters of ``-`` plus a newline. When
    *label* is given it is embedded near the left edge (``-- label ----``)
    and clipped so the header never exceeds the same width. Control
    characters in the label are shown escaped (``\\n``, ``\\t``) so the
    header always stays on one row.
    """
    width = max(cols - 1, 0)
    if not label:
        return "-" * width + "\n"
    label = "".join(c if c.isprintable() else repr(c)[1:-1] for c in label)
    text = f"-- {label} "
    return text[:width].ljust(width, "-") + "\n"
