"""Parsing port - the only contract the pipeline has with a SQL parser."""

from __future__ import annotations

from typing import Any, Protocol

from sqlens.domain import ParseOutcome


class SqlParser(Protocol):
    """
    Parse SQL text into an opaque AST.

    Implementations never raise: parser failures come back as
    Failure(ParseError) with code PARSE_ERROR.
    """

    def parse(self, sql: str) -> ParseOutcome[Any]: ...
