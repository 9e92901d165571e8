"""Domain layer - query graph primitives and the result/error model.

This layer knows nothing about the SQL parser or the transport:
- Nodes (tables, CTEs, subqueries), join edges, the graph and its builder
- The Success/Failure union and the ParseError taxonomy
"""

from sqlens.domain.edge import JoinEdge, JoinType
from sqlens.domain.graph import GraphBuilder, QueryGraph
from sqlens.domain.node import (
    NODE_BACKGROUNDS,
    BaseTable,
    Cte,
    NodeKind,
    Subquery,
    TableNode,
)
from sqlens.domain.result import ErrorCode, Failure, ParseError, ParseOutcome, Success

__all__ = [
    # Nodes
    "NODE_BACKGROUNDS",
    "BaseTable",
    "Cte",
    "NodeKind",
    "Subquery",
    "TableNode",
    # Edges
    "JoinEdge",
    "JoinType",
    # Graph
    "GraphBuilder",
    "QueryGraph",
    # Results
    "ErrorCode",
    "Failure",
    "ParseError",
    "ParseOutcome",
    "Success",
]
