"""End-to-end analysis: validate → parse → extract → diagnose → project."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import cast

from sqlens.adapters.projection import (
    DiagramResponse,
    ErrorResponse,
    project_error,
    project_graph,
)
from sqlens.config import DEFAULT_COMPLEXITY_THRESHOLD, SqlensConfig
from sqlens.core.builder import DiagramBuilder
from sqlens.domain import Failure, ParseError, ParseOutcome, QueryGraph, Success
from sqlens.parsing import SqlglotParser, SqlParser
from sqlens.validation import Validator, default_validators, validate

logger = logging.getLogger(__name__)


class QueryAnalyzer:
    """
    Turn SQL text into a query graph or exactly one error.

    Holds no per-request state, so one instance can serve any number of
    concurrent requests.
    """

    def __init__(
        self,
        validators: Sequence[Validator] | None = None,
        parser: SqlParser | None = None,
        builder: DiagramBuilder | None = None,
        complexity_threshold: int = DEFAULT_COMPLEXITY_THRESHOLD,
    ) -> None:
        self.validators = tuple(validators) if validators is not None else default_validators()
        self.parser = parser or SqlglotParser()
        self.builder = builder or DiagramBuilder()
        self.complexity_threshold = complexity_threshold

    @classmethod
    def from_config(cls, config: SqlensConfig) -> QueryAnalyzer:
        return cls(
            validators=default_validators(config.limits.max_query_length),
            parser=SqlglotParser(config.dialect),
            complexity_threshold=config.limits.complexity_threshold,
        )

    def analyze(self, sql: str | None) -> ParseOutcome[QueryGraph]:
        """Validate, parse and extract. Never raises."""
        error = validate(sql, self.validators)
        if error is not None:
            return Failure(error)

        try:
            parsed = self.parser.parse(cast(str, sql))
        except Exception as e:
            logger.exception("Parser raised instead of returning a failure")
            return Failure(
                ParseError.internal_error(f"Unexpected error while parsing the query: {e}")
            )
        if isinstance(parsed, Failure):
            return parsed

        try:
            graph = self.builder.build(parsed.value)
        except Exception as e:
            logger.exception("Failed to build query graph")
            return Failure(
                ParseError.internal_error(
                    f"Unexpected error while building the query graph: {e}"
                )
            )

        if graph.has_likely_cartesian_product:
            logger.info(
                "Possible cartesian product: %s not joined",
                ", ".join(node.id for node in graph.isolated_nodes),
            )
        return Success(graph)

    def complexity_warning(self, graph: QueryGraph) -> str | None:
        """Non-fatal warning for graphs above the complexity threshold."""
        if graph.complexity <= self.complexity_threshold:
            return None
        logger.info(
            "Query complexity %d above threshold %d",
            graph.complexity,
            self.complexity_threshold,
        )
        return (
            f"Very complex query detected ({graph.complexity} tables). "
            "Performance may be impacted."
        )

    def run(self, sql: str | None) -> DiagramResponse | ErrorResponse:
        """Analyze and project the outcome for the presentation layer."""
        outcome = self.analyze(sql)
        if isinstance(outcome, Failure):
            return project_error(outcome.error)
        graph = outcome.value
        return project_graph(graph, warning=self.complexity_warning(graph))
