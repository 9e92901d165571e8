"""Join edges from the JOIN clauses of a SELECT."""

from __future__ import annotations

import logging

from sqlglot import exp

from sqlens.domain import JoinEdge, JoinType
from sqlens.extraction.base import EdgeExtractor, from_item, item_id, joins
from sqlens.extraction.conditions import edge_columns, infer_source

logger = logging.getLogger(__name__)


def resolve_join_type(join: exp.Join) -> JoinType:
    """LEFT, RIGHT, FULL, CROSS checked in that order; anything else is INNER."""
    side = join.side
    if side == "LEFT":
        return JoinType.LEFT
    if side == "RIGHT":
        return JoinType.RIGHT
    if side == "FULL":
        return JoinType.FULL
    if join.kind == "CROSS":
        return JoinType.CROSS
    return JoinType.INNER


def join_condition(join: exp.Join, join_type: JoinType) -> str:
    """ON condition text; empty for CROSS joins and joins without ON."""
    if not join_type.has_condition:
        return ""
    on = join.args.get("on")
    if on is None:
        return ""
    return on.sql()


class JoinEdgeExtractor(EdgeExtractor):
    """
    One JoinEdge per JOIN clause.

    The target is the joined item. The source is read from the condition,
    because a JOIN often hangs off an earlier JOIN rather than the FROM
    table; without a usable condition it is the item right before the JOIN.
    """

    def can_handle(self, ast: exp.Expression) -> bool:
        return isinstance(ast, exp.Select) and bool(joins(ast))

    def extract(self, ast: exp.Expression) -> list[JoinEdge]:
        if not isinstance(ast, exp.Select):
            return []

        first = from_item(ast)
        previous_id = item_id(first) if first is not None else ""

        edges = []
        for join in joins(ast):
            join_type = resolve_join_type(join)
            target_id = item_id(join.this)
            condition = join_condition(join, join_type)
            source_id = infer_source(condition, target_id, previous_id)
            if source_id != previous_id:
                logger.debug(
                    "Join to %r inferred from %r instead of %r",
                    target_id,
                    source_id,
                    previous_id,
                )

            edges.append(
                JoinEdge(
                    source_id=source_id,
                    target_id=target_id,
                    join_type=join_type,
                    condition=condition,
                    columns=edge_columns(condition),
                )
            )
            previous_id = target_id

        return edges
