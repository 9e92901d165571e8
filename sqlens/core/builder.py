"""Graph assembly from the extractor registry."""

from __future__ import annotations

import logging

from sqlglot import exp

from sqlens.domain import GraphBuilder, QueryGraph
from sqlens.extraction import ExtractorRegistry, default_registry

logger = logging.getLogger(__name__)


class DiagramBuilder:
    """
    Build a QueryGraph by running every applicable extractor.

    Nodes come from node extractors and edges from edge extractors, each in
    registration order. No cross-checking is done: an edge may reference a
    node id that no extractor produced.
    """

    def __init__(self, registry: ExtractorRegistry | None = None) -> None:
        self.registry = registry or default_registry()

    def build(self, ast: exp.Expression) -> QueryGraph:
        graph = GraphBuilder()

        for node_extractor in self.registry.node_extractors:
            if not node_extractor.can_handle(ast):
                continue
            nodes = node_extractor.extract(ast)
            logger.debug("%s produced %d nodes", type(node_extractor).__name__, len(nodes))
            for node in nodes:
                graph.add_node(node)

        for edge_extractor in self.registry.edge_extractors:
            if not edge_extractor.can_handle(ast):
                continue
            edges = edge_extractor.extract(ast)
            logger.debug("%s produced %d edges", type(edge_extractor).__name__, len(edges))
            for edge in edges:
                graph.add_edge(edge)

        result = graph.build()
        logger.debug("Built %s", result.summary())
        return result
