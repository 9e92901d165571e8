"""Ordered registry of node and edge extractors."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from sqlens.extraction.base import EdgeExtractor, NodeExtractor
from sqlens.extraction.ctes import CteExtractor
from sqlens.extraction.joins import JoinEdgeExtractor
from sqlens.extraction.subqueries import SubqueryExtractor
from sqlens.extraction.tables import BaseTableExtractor


@dataclass(frozen=True)
class ExtractorRegistry:
    """
    Extractors in registration order.

    Built once at startup and shared read-only between requests. Results of
    applicable extractors are concatenated in this order.
    """

    node_extractors: tuple[NodeExtractor, ...] = field(default_factory=tuple)
    edge_extractors: tuple[EdgeExtractor, ...] = field(default_factory=tuple)

    @classmethod
    def of(
        cls,
        node_extractors: Sequence[NodeExtractor] = (),
        edge_extractors: Sequence[EdgeExtractor] = (),
    ) -> ExtractorRegistry:
        return cls(tuple(node_extractors), tuple(edge_extractors))

    def with_node_extractor(self, extractor: NodeExtractor) -> ExtractorRegistry:
        """New registry with extractor appended to the node extractors."""
        return ExtractorRegistry(self.node_extractors + (extractor,), self.edge_extractors)

    def with_edge_extractor(self, extractor: EdgeExtractor) -> ExtractorRegistry:
        """New registry with extractor appended to the edge extractors."""
        return ExtractorRegistry(self.node_extractors, self.edge_extractors + (extractor,))


def default_registry() -> ExtractorRegistry:
    """CTEs first, then FROM/JOIN tables, then (inactive) subqueries; joins for edges."""
    return ExtractorRegistry.of(
        node_extractors=[CteExtractor(), BaseTableExtractor(), SubqueryExtractor()],
        edge_extractors=[JoinEdgeExtractor()],
    )
