"""Parsing port and its sqlglot implementation."""

from sqlens.parsing.port import SqlParser
from sqlens.parsing.sqlglot_parser import SqlglotParser, error_from_message

__all__ = ["SqlParser", "SqlglotParser", "error_from_message"]
