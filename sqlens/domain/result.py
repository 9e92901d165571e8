"""Tagged success/failure results and the error model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


class ErrorCode(str, Enum):
    """Error taxonomy for a failed analysis."""

    EMPTY_INPUT = "EMPTY_INPUT"
    QUERY_TOO_LONG = "QUERY_TOO_LONG"
    UNSUPPORTED_STATEMENT = "UNSUPPORTED_STATEMENT"
    PARSE_ERROR = "PARSE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ParseError(BaseModel):
    """
    A terminal error for one analysis request.

    Line and column are only known for PARSE_ERROR, and only when the
    parser reported a position.
    """

    code: ErrorCode
    message: str
    line: int | None = None
    column: int | None = None
    suggestion: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def empty_input(cls) -> ParseError:
        return cls(code=ErrorCode.EMPTY_INPUT, message="SQL query must not be empty.")

    @classmethod
    def too_long(cls, actual: int, maximum: int) -> ParseError:
        return cls(
            code=ErrorCode.QUERY_TOO_LONG,
            message=f"Query length {actual} exceeds the maximum of {maximum} characters.",
        )

    @classmethod
    def unsupported_statement(cls) -> ParseError:
        return cls(
            code=ErrorCode.UNSUPPORTED_STATEMENT,
            message="Only SELECT and WITH (CTE) statements are supported.",
            suggestion="Start your query with SELECT or WITH.",
        )

    @classmethod
    def parse_error(
        cls, message: str, line: int | None = None, column: int | None = None
    ) -> ParseError:
        suggestion = None
        if line is not None:
            suggestion = "Check the SQL syntax near the reported position."
        return cls(
            code=ErrorCode.PARSE_ERROR,
            message=message,
            line=line,
            column=column,
            suggestion=suggestion,
        )

    @classmethod
    def internal_error(cls, message: str) -> ParseError:
        return cls(code=ErrorCode.INTERNAL_ERROR, message=message)

    def summary(self) -> str:
        position = ""
        if self.line is not None:
            position = f" (line {self.line}"
            if self.column is not None:
                position += f", column {self.column}"
            position += ")"
        return f"{self.code.value}: {self.message}{position}"


@dataclass(frozen=True)
class Success(Generic[T]):
    """A stage completed and produced a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """A stage failed with exactly one error."""

    error: ParseError

    @property
    def is_success(self) -> bool:
        return False


ParseOutcome = Union[Success[T], Failure]
