"""sqlglot adapter for the parsing port."""

from __future__ import annotations

import logging
import re

import sqlglot
from sqlglot import exp
from sqlglot.errors import SqlglotError

from sqlens.config import Dialect
from sqlens.domain import Failure, ParseError, ParseOutcome, Success

logger = logging.getLogger(__name__)

# sqlglot reports positions as "Line 1, Col: 20"
_LINE_PATTERN = re.compile(r"\bline\s*:?\s*(\d+)", re.IGNORECASE)
_COLUMN_PATTERN = re.compile(r"\bcol(?:umn)?\s*:?\s*(\d+)", re.IGNORECASE)
# sqlglot underlines the offending token with ANSI escapes
_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

DEFAULT_PARSE_MESSAGE = "SQL parse error"
TOO_DEEP_MESSAGE = "Query is too deeply nested to parse."


def extract_position(message: str, pattern: re.Pattern[str]) -> int | None:
    """Pull the first integer captured by pattern out of a parser message."""
    match = pattern.search(message)
    if match is None:
        return None
    return int(match.group(1))


def first_line(message: str) -> str:
    """First line of a parser message, without highlighting escapes."""
    cleaned = _ANSI_PATTERN.sub("", message).strip()
    if not cleaned:
        return DEFAULT_PARSE_MESSAGE
    return cleaned.splitlines()[0].strip()


def error_from_message(message: str) -> ParseError:
    """Translate a free-text parser failure into a PARSE_ERROR."""
    raw = message or DEFAULT_PARSE_MESSAGE
    return ParseError.parse_error(
        first_line(raw),
        line=extract_position(raw, _LINE_PATTERN),
        column=extract_position(raw, _COLUMN_PATTERN),
    )


class SqlglotParser:
    """
    Parse SQL with sqlglot.

    Returns the sqlglot expression tree untouched; only the extractors look
    inside it.
    """

    def __init__(self, dialect: Dialect | None = None) -> None:
        self.dialect = dialect or Dialect.GENERIC

    def parse(self, sql: str) -> ParseOutcome[exp.Expression]:
        try:
            expression = sqlglot.parse_one(sql, read=self.dialect.sqlglot_dialect)
        except SqlglotError as e:
            error = error_from_message(str(e))
            logger.info("Parser rejected query: %s", error.summary())
            return Failure(error)
        except RecursionError:
            logger.info("Parser hit the recursion limit")
            return Failure(ParseError.parse_error(TOO_DEEP_MESSAGE))

        if expression is None:
            return Failure(ParseError.parse_error("No SQL statement could be parsed."))

        return Success(expression)
