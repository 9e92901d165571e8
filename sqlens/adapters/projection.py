"""Projection of graphs and errors into transport DTOs.

The presentation layer only ever sees these shapes; node, edge and graph
domain types stay inside the pipeline.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sqlens.domain import ParseError, QueryGraph, Subquery, TableNode
from sqlens.domain.edge import JoinEdge
from sqlens.extraction.conditions import node_columns


class _Dto(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    def to_dict(self) -> dict[str, Any]:
        """Wire representation: camelCase keys, unset optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class NodeDto(_Dto):
    id: str
    type: str
    name: str
    alias: str | None = None
    columns: list[str] = Field(default_factory=list)
    inner_graph: DiagramResponse | None = None


class EdgeDto(_Dto):
    id: str
    source_id: str
    target_id: str
    join_type: str
    condition: str | None = None


class DiagramResponse(_Dto):
    """Successful analysis."""

    nodes: list[NodeDto] = Field(default_factory=list)
    edges: list[EdgeDto] = Field(default_factory=list)
    warning: str | None = None


class ErrorResponse(_Dto):
    """Failed analysis."""

    code: str
    message: str
    line: int | None = None
    column: int | None = None
    suggestion: str | None = None


def edge_id(edge: JoinEdge) -> str:
    return f"{edge.source_id}__{edge.target_id}"


def project_node(node: TableNode, columns: dict[str, list[str]]) -> NodeDto:
    inner = None
    if isinstance(node, Subquery):
        inner = project_graph(node.inner_graph)
    return NodeDto(
        id=node.id,
        type=node.kind.value,
        name=node.name,
        alias=node.alias,
        columns=columns.get(node.id, []),
        inner_graph=inner,
    )


def project_edge(edge: JoinEdge) -> EdgeDto:
    return EdgeDto(
        id=edge_id(edge),
        source_id=edge.source_id,
        target_id=edge.target_id,
        join_type=edge.join_type.value,
        condition=edge.condition or None,
    )


def project_graph(graph: QueryGraph, warning: str | None = None) -> DiagramResponse:
    """
    Project a graph, recursing into subquery graphs.

    Node columns are recomputed from the edge conditions and grouped by
    node id.
    """
    columns = node_columns(edge.condition for edge in graph.edges)
    return DiagramResponse(
        nodes=[project_node(node, columns) for node in graph.nodes],
        edges=[project_edge(edge) for edge in graph.edges],
        warning=warning,
    )


def project_error(error: ParseError) -> ErrorResponse:
    return ErrorResponse(
        code=error.code.value,
        message=error.message,
        line=error.line,
        column=error.column,
        suggestion=error.suggestion,
    )


NodeDto.model_rebuild()
DiagramResponse.model_rebuild()
