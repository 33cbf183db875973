"""CLI entry point for fa. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import re
import sys

import click

from fa import __version__
from fa.config import Options
from fa.engine import DisplayEngine
from fa.source import LineSource
from fa.terminal import ProcessTerminal

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _validate_patterns(ctx, param, value):
    for pattern in value:
        try:
            re.compile(pattern)
        except re.error as e:
            raise click.BadParameter(f"invalid regular expression {pattern!r}: {e}")
    return value


def _setup_logging(level: str, log_file: str | None) -> None:
    kwargs = {"filename": log_file} if log_file else {"stream": sys.stderr}
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=_LOG_FORMAT,
        force=True,
        **kwargs,
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("patterns", metavar="REGEX...", nargs=-1, required=True,
                callback=_validate_patterns)
@click.option("-f", "--file", "input_path", default=None, metavar="PATH",
              help="File or pipe to read. If omitted, stdin is used.")
@click.option("-r", "--restart-on-find", is_flag=True,
              help="Restart a space each time its REGEX is found again, "
                   "without waiting for it to fill.")
@click.option("-c", "--clear-on-restart", is_flag=True,
              help="Blank a space before drawing into it again.")
@click.option("-H", "--history", "history_lines", type=click.IntRange(min=0),
              default=0, show_default=True, envvar="FA_HISTORY_LINES",
              help="Recent lines to replay at the top of a space when it activates.")
@click.option("-l", "--label", "label_headers", is_flag=True,
              help="Show each space's REGEX in its header.")
@click.option("--log-level", default="warning",
              type=click.Choice(["debug", "info", "warning", "error"]))
@click.option("--log-file", default=None, metavar="PATH",
              help="Write log messages here instead of stderr.")
@click.version_option(__version__, prog_name="fa")
def main(patterns, input_path, restart_on_find, clear_on_restart, history_lines,
         label_headers, log_level, log_file):
    """Human-friendly wall-of-text handler.

    Watches a stream of lines and shows the ones matching each REGEX in a
    screen region of its own, stacked top to bottom in the order given.
    """
    _setup_logging(log_level, log_file)

    options = Options.from_patterns(
        patterns,
        restart_on_find=restart_on_find,
        clear_on_restart=clear_on_restart,
        history_lines=history_lines,
        label_headers=label_headers,
    )

    if input_path:
        try:
            source = LineSource.open(input_path)
        except OSError as e:
            raise click.FileError(input_path, hint=e.strerror or str(e))
    else:
        source = LineSource.stdin()

    engine = DisplayEngine(ProcessTerminal(), options)
    with source:
        try:
            engine.start()
        except ValueError as e:
            raise click.ClickException(str(e))
        try:
            engine.run(source)
        except KeyboardInterrupt:
            sys.exit(130)
