"""Pre-parse validation of raw SQL text.

Validators are plain functions `text -> ParseError | None`, run in order.
The first error stops the chain. New checks are appended to the sequence
without touching the existing ones.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from sqlens.domain import ParseError

logger = logging.getLogger(__name__)

DEFAULT_MAX_QUERY_LENGTH = 100_000
SUPPORTED_PREFIXES = ("SELECT", "WITH")

Validator = Callable[[str | None], ParseError | None]


def check_not_empty(sql: str | None) -> ParseError | None:
    """Reject missing or whitespace-only input."""
    if sql is None or not sql.strip():
        return ParseError.empty_input()
    return None


def check_length(max_length: int = DEFAULT_MAX_QUERY_LENGTH) -> Validator:
    """Build a validator rejecting text longer than max_length characters."""

    def _check(sql: str | None) -> ParseError | None:
        if sql is not None and len(sql) > max_length:
            return ParseError.too_long(len(sql), max_length)
        return None

    return _check


def check_statement_kind(sql: str | None) -> ParseError | None:
    """Only SELECT and WITH statements are supported."""
    upper = (sql or "").lstrip().upper()
    if not upper.startswith(SUPPORTED_PREFIXES):
        return ParseError.unsupported_statement()
    return None


def default_validators(
    max_length: int = DEFAULT_MAX_QUERY_LENGTH,
) -> tuple[Validator, ...]:
    """Empty input, then length, then statement kind."""
    return (check_not_empty, check_length(max_length), check_statement_kind)


def validate(
    sql: str | None, validators: Sequence[Validator] | None = None
) -> ParseError | None:
    """
    Run validators in order and return the first error.

    Args:
        sql: Raw SQL text (may be None)
        validators: Checks to run (defaults to default_validators())

    Returns:
        The first ParseError produced, or None when every check passes
    """
    if validators is None:
        validators = default_validators()

    for validator in validators:
        error = validator(sql)
        if error is not None:
            logger.info("Query rejected before parsing: %s", error.code.value)
            return error
    return None
