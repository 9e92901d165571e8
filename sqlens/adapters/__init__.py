"""Adapters - projections of pipeline results for outer surfaces."""

from sqlens.adapters.projection import (
    DiagramResponse,
    EdgeDto,
    ErrorResponse,
    NodeDto,
    edge_id,
    project_error,
    project_graph,
)

__all__ = [
    "DiagramResponse",
    "EdgeDto",
    "ErrorResponse",
    "NodeDto",
    "edge_id",
    "project_error",
    "project_graph",
]
