"""Core analysis functionality for sqlens.

Graph assembly from the extractor registry and the end-to-end pipeline,
usable without the CLI or HTTP server.
"""

from sqlens.core.builder import DiagramBuilder
from sqlens.core.pipeline import QueryAnalyzer

__all__ = ["DiagramBuilder", "QueryAnalyzer"]
