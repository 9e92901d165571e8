"""QueryGraph - the immutable graph of one analysed query."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from sqlens.domain.edge import JoinEdge
from sqlens.domain.node import Subquery, TableNode

logger = logging.getLogger(__name__)


class QueryGraph(BaseModel):
    """
    Nodes (tables, CTEs, subqueries) and the join edges between them.

    Key properties:
    - Node ids are unique and nodes keep insertion order
    - Edges may reference ids that are not nodes (dangling edges are kept)
    - Built once through GraphBuilder, never mutated afterwards
    """

    nodes: tuple[TableNode, ...] = Field(default_factory=tuple)
    edges: tuple[JoinEdge, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @property
    def complexity(self) -> int:
        return len(self.nodes)

    @property
    def node_ids(self) -> list[str]:
        return [node.id for node in self.nodes]

    @property
    def isolated_nodes(self) -> list[TableNode]:
        """Nodes that appear in no edge as source or target."""
        endpoints: set[str] = set()
        for edge in self.edges:
            endpoints.add(edge.source_id)
            endpoints.add(edge.target_id)
        return [node for node in self.nodes if node.id not in endpoints]

    @property
    def has_likely_cartesian_product(self) -> bool:
        """
        True if some node takes part in no join edge.

        Heuristic only: two nodes that are each joined to a third node but
        not to each other are not reported.
        """
        return bool(self.isolated_nodes)

    @property
    def dangling_edges(self) -> list[JoinEdge]:
        """Edges whose source or target id is not a node of this graph."""
        ids = set(self.node_ids)
        return [
            edge
            for edge in self.edges
            if edge.source_id not in ids or edge.target_id not in ids
        ]

    def get_node(self, node_id: str) -> TableNode | None:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def summary(self) -> str:
        return f"QueryGraph: {len(self.nodes)} nodes, {len(self.edges)} edges"


class GraphBuilder:
    """Accumulates nodes and edges, then freezes them into a QueryGraph."""

    def __init__(self) -> None:
        self._nodes: dict[str, TableNode] = {}
        self._edges: list[JoinEdge] = []

    def add_node(self, node: TableNode) -> GraphBuilder:
        if node.id in self._nodes:
            logger.debug("Dropping duplicate node id %r", node.id)
            return self
        self._nodes[node.id] = node
        return self

    def add_edge(self, edge: JoinEdge) -> GraphBuilder:
        self._edges.append(edge)
        return self

    def build(self) -> QueryGraph:
        graph = QueryGraph(nodes=tuple(self._nodes.values()), edges=tuple(self._edges))
        for edge in graph.dangling_edges:
            logger.debug(
                "Keeping dangling edge %s -> %s", edge.source_id, edge.target_id
            )
        return graph


Subquery.model_rebuild()
QueryGraph.model_rebuild()
