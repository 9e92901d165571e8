"""
sqlens: turn SQL SELECT/WITH text into a graph of tables and joins.

Architecture:
    SQL text → Validation → Parsing (sqlglot) → Extraction → QueryGraph → Projection

Layers:
    - domain/: Pure types (result union, errors, nodes, join edges, graph)
    - validation.py: Pre-parse checks, first failure wins
    - parsing/: Port to the external SQL parser (sqlglot adapter)
    - extraction/: Pluggable node/edge extractors and the join condition analyzer
    - core/: Graph assembly and the end-to-end analysis pipeline
    - adapters/: Projection of graphs and errors into transport DTOs

Key Concepts:
    - Nothing inside the pipeline raises; every stage returns Success or Failure
    - Only extraction/ knows concrete AST node types
    - A graph is built once per query and never mutated afterwards
"""

__version__ = "0.1.0"
