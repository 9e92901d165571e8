"""CLI utilities for sqlens.

Rich-based formatting helpers and logging setup shared by the CLI commands.
"""

from __future__ import annotations

from sqlens.cli.formatting import (
    build_graph_tree,
    format_error,
    format_parse_error,
    format_warning,
)
from sqlens.cli.utils import configure_logging, read_sql

__all__ = [
    "build_graph_tree",
    "configure_logging",
    "format_error",
    "format_parse_error",
    "format_warning",
    "read_sql",
]
