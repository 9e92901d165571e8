"""Extraction layer - the only code that looks inside the parsed AST."""

from sqlens.extraction.base import EdgeExtractor, NodeExtractor
from sqlens.extraction.conditions import (
    edge_columns,
    infer_source,
    node_columns,
    referenced_nodes,
)
from sqlens.extraction.ctes import CteExtractor
from sqlens.extraction.joins import JoinEdgeExtractor, resolve_join_type
from sqlens.extraction.registry import ExtractorRegistry, default_registry
from sqlens.extraction.subqueries import SubqueryExtractor
from sqlens.extraction.tables import BaseTableExtractor

__all__ = [
    # Interfaces
    "EdgeExtractor",
    "NodeExtractor",
    # Extractors
    "BaseTableExtractor",
    "CteExtractor",
    "JoinEdgeExtractor",
    "SubqueryExtractor",
    "resolve_join_type",
    # Registry
    "ExtractorRegistry",
    "default_registry",
    # Condition analysis
    "edge_columns",
    "infer_source",
    "node_columns",
    "referenced_nodes",
]
