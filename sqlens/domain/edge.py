"""Join edges and join types."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class JoinType(str, Enum):
    """How two relations are combined."""

    INNER = "INNER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    FULL = "FULL"
    CROSS = "CROSS"

    @property
    def color(self) -> str:
        return _JOIN_STYLES[self][0]

    @property
    def line_style(self) -> str:
        return _JOIN_STYLES[self][1]

    @property
    def arrow(self) -> str:
        return _JOIN_STYLES[self][2]

    @property
    def is_bidirectional(self) -> bool:
        return self is JoinType.FULL

    @property
    def has_condition(self) -> bool:
        return self is not JoinType.CROSS


# (color, line style, arrow glyph)
_JOIN_STYLES: dict[JoinType, tuple[str, str, str]] = {
    JoinType.INNER: ("#21808d", "solid", "→"),
    JoinType.LEFT: ("#a84b2f", "solid", "→"),
    JoinType.RIGHT: ("#6b21a8", "solid", "←"),
    JoinType.FULL: ("#c0152f", "solid", "↔"),
    JoinType.CROSS: ("#626c71", "dashed", "—"),
}


class JoinEdge(BaseModel):
    """
    A JOIN between two nodes.

    `source_id` is inferred from the join condition and may name a node
    that is not part of the graph.
    """

    source_id: str
    target_id: str
    join_type: JoinType
    condition: str = ""
    columns: tuple[str, ...] = Field(default_factory=tuple)

    model_config = {"frozen": True}

    @property
    def is_bidirectional(self) -> bool:
        return self.join_type.is_bidirectional

    @property
    def has_condition(self) -> bool:
        return self.join_type.has_condition
