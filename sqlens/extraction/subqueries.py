"""Subquery nodes from derived tables in FROM.

Registered so the node kind has an extractor, but inactive: derived tables
are not turned into nodes yet and contribute nothing to the graph.
"""

from __future__ import annotations

from sqlglot import exp

from sqlens.domain import TableNode
from sqlens.extraction.base import NodeExtractor


class SubqueryExtractor(NodeExtractor):
    """Placeholder for Subquery nodes with nested graphs."""

    def can_handle(self, ast: exp.Expression) -> bool:
        return False

    def extract(self, ast: exp.Expression) -> list[TableNode]:
        return []
