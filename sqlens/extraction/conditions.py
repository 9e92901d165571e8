"""Token-level analysis of JOIN conditions.

Works on the condition text, not on an expression tree:
- infer which node a JOIN actually comes from (`o.customer_id = c.id` with
  target `c` comes from `o`)
- collect the columns each node contributes to its joins

Operator precedence, parenthesis nesting and non-equality predicates are
ignored. A compound condition like `a.x = b.y AND a.z = c.w` only yields
approximate groupings.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

# Token separators: whitespace, parentheses, comparison/arithmetic operators, commas
_TOKEN_SPLIT = re.compile(r"[\s()=<>!,+\-*/%|]+")
_CLAUSE_SPLIT = re.compile(r"\s+(?:AND|OR)\s+", re.IGNORECASE)
_QUOTE_CHARS = '"`[]'


def split_reference(token: str) -> tuple[str, str] | None:
    """
    Split a `ref.field` token at its last dot.

    Returns None for tokens that are not qualified references: no dot,
    nothing before or after the dot, string literals and numbers.

    Examples:
        split_reference("o.customer_id") → ("o", "customer_id")
        split_reference("sales.orders.id") → ("sales.orders", "id")
        split_reference("1.5") → None
    """
    if "'" in token:
        return None
    cleaned = token.strip(_QUOTE_CHARS).replace('"."', ".").replace("`.`", ".")
    cleaned = cleaned.replace("].[", ".")
    dot = cleaned.rfind(".")
    if dot <= 0 or dot == len(cleaned) - 1:
        return None
    ref, field = cleaned[:dot], cleaned[dot + 1 :]
    if ref[0].isdigit():
        return None
    return ref, field


def _references(text: str) -> list[tuple[str, str]]:
    refs = []
    for token in _TOKEN_SPLIT.split(text):
        parsed = split_reference(token)
        if parsed is not None:
            refs.append(parsed)
    return refs


def referenced_nodes(condition: str) -> list[str]:
    """Distinct `ref` parts of every `ref.field` token, in first-seen order."""
    seen: dict[str, None] = {}
    for ref, _ in _references(condition or ""):
        seen.setdefault(ref, None)
    return list(seen)


def infer_source(condition: str, target_id: str, default_id: str) -> str:
    """
    Infer the node a JOIN comes from.

    Collects every referenced node, drops the join target and returns the
    first one left. Falls back to default_id (the item right before the
    JOIN) when nothing is left.
    """
    refs = [ref for ref in referenced_nodes(condition) if ref != target_id]
    if not refs:
        return default_id
    return refs[0]


def column_references(condition: str) -> list[tuple[str, str]]:
    """
    (ref, field) pairs in a condition, in order.

    The condition is split on AND/OR, each clause on its first '=', and
    each side is scanned for `ref.field` tokens.
    """
    if not condition or not condition.strip():
        return []

    pairs: list[tuple[str, str]] = []
    for clause in _CLAUSE_SPLIT.split(condition):
        for side in clause.split("=", 1):
            pairs.extend(_references(side))
    return pairs


def edge_columns(condition: str) -> tuple[str, ...]:
    """Every referenced field of a single condition, in order."""
    return tuple(field for _, field in column_references(condition))


def node_columns(conditions: Iterable[str]) -> dict[str, list[str]]:
    """
    Map node id → columns it contributes across all conditions.

    Columns keep first-seen order and are deduplicated per node.

    Example:
        node_columns(["o.customer_id = c.id"]) → {"o": ["customer_id"], "c": ["id"]}
    """
    grouped: dict[str, dict[str, None]] = {}
    for condition in conditions:
        for ref, field in column_references(condition):
            grouped.setdefault(ref, {}).setdefault(field, None)
    return {ref: list(fields) for ref, fields in grouped.items()}
