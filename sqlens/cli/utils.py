"""CLI utility functions for sqlens."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    """Route library logging through Rich on stderr.

    WARNING by default, INFO with --verbose, DEBUG with --debug.
    """
    level = logging.WARNING
    if verbose:
        level = logging.INFO
    if debug:
        level = logging.DEBUG

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=debug,
        rich_tracebacks=debug,
    )
    logger = logging.getLogger("sqlens")
    logger.handlers = [handler]
    logger.setLevel(level)
    logger.propagate = False


def read_sql(sql: str | None, file: Path | None) -> str:
    """SQL text from --sql, a file argument, or stdin (in that order)."""
    if sql is not None:
        return sql
    if file is not None:
        return file.read_text(encoding="utf-8")
    if sys.stdin.isatty():
        raise click.UsageError("Provide SQL with --sql, a FILE argument, or stdin")
    return click.get_text_stream("stdin").read()
