"""Tests for pre-parse validation."""

import pytest

from sqlens.domain import ErrorCode, ParseError
from sqlens.validation import (
    check_length,
    check_not_empty,
    check_statement_kind,
    default_validators,
    validate,
)


class TestEmptyInput:
    """Tests for the empty/blank check."""

    @pytest.mark.parametrize("sql", [None, "", "   ", "\n\t  \n"])
    def test_blank_input_rejected(self, sql: str | None) -> None:
        """Test that missing or blank input is EMPTY_INPUT."""
        error = validate(sql)
        assert error is not None
        assert error.code == ErrorCode.EMPTY_INPUT
        assert error.message == "SQL query must not be empty."

    def test_non_blank_passes(self) -> None:
        """Test that non-blank input passes the empty check."""
        assert check_not_empty("SELECT 1") is None


class TestQueryLength:
    """Tests for the length check."""

    def test_exactly_at_limit_passes(self) -> None:
        """Test that input at the limit is accepted."""
        sql = "SELECT " + "x" * (100_000 - 7)
        assert len(sql) == 100_000
        assert validate(sql) is None

    def test_over_limit_rejected(self) -> None:
        """Test that input over the limit reports both lengths."""
        sql = "SELECT " + "x" * 100_000
        error = validate(sql)
        assert error is not None
        assert error.code == ErrorCode.QUERY_TOO_LONG
        assert str(len(sql)) in error.message
        assert "100000" in error.message

    def test_custom_limit(self) -> None:
        """Test a length check with a custom limit."""
        check = check_length(10)
        assert check("SELECT 1") is None
        error = check("SELECT * FROM t")
        assert error is not None
        assert error.code == ErrorCode.QUERY_TOO_LONG

    def test_long_non_select_reports_length_first(self) -> None:
        """Test that the length check runs before the statement check."""
        error = validate("DELETE " + "x" * 100_001)
        assert error is not None
        assert error.code == ErrorCode.QUERY_TOO_LONG


class TestStatementKind:
    """Tests for the SELECT/WITH check."""

    @pytest.mark.parametrize(
        "sql",
        [
            "SELECT * FROM t",
            "select * from t",
            "   \n  SeLeCt 1",
            "WITH x AS (SELECT 1) SELECT * FROM x",
            "with x as (select 1) select * from x",
        ],
    )
    def test_supported_statements_pass(self, sql: str) -> None:
        """Test that SELECT and WITH pass in any case and indentation."""
        assert check_statement_kind(sql) is None
        assert validate(sql) is None

    @pytest.mark.parametrize(
        "sql",
        [
            "INSERT INTO t VALUES (1)",
            "UPDATE t SET a = 1",
            "DELETE FROM t",
            "  drop table t",
            "(SELECT 1)",
        ],
    )
    def test_other_statements_rejected(self, sql: str) -> None:
        """Test that other statements are UNSUPPORTED_STATEMENT."""
        error = validate(sql)
        assert error is not None
        assert error.code == ErrorCode.UNSUPPORTED_STATEMENT
        assert error.suggestion == "Start your query with SELECT or WITH."


class TestValidatorChain:
    """Tests for chain ordering and extension."""

    def test_default_order(self) -> None:
        """Test the default validator order."""
        validators = default_validators()
        assert validators[0] is check_not_empty
        assert validators[2] is check_statement_kind

    def test_first_failure_wins(self) -> None:
        """Test that the chain stops at the first error."""
        calls = []

        def first(sql):
            calls.append("first")
            return ParseError.internal_error("first")

        def second(sql):
            calls.append("second")
            return ParseError.internal_error("second")

        error = validate("SELECT 1", [first, second])
        assert error is not None
        assert error.message == "first"
        assert calls == ["first"]

    def test_appended_check_runs_last(self) -> None:
        """Test that an appended check runs after the defaults."""

        def no_semicolons(sql):
            if ";" in sql:
                return ParseError.parse_error("Multiple statements are not supported.")
            return None

        validators = default_validators() + (no_semicolons,)
        assert validate("SELECT 1", validators) is None
        error = validate("SELECT 1; SELECT 2", validators)
        assert error is not None
        assert error.code == ErrorCode.PARSE_ERROR
        # Earlier checks still win
        error = validate("", validators)
        assert error is not None
        assert error.code == ErrorCode.EMPTY_INPUT
