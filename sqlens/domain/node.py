"""Table nodes - the relations a query reads from."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Annotated, Literal, Union

from pydantic import BaseModel, Field, computed_field

if TYPE_CHECKING:
    from sqlens.domain.graph import QueryGraph


class NodeKind(str, Enum):
    """Node kinds, also used as the node type on the wire."""

    TABLE = "table"
    SUBQUERY = "subquery"
    CTE = "cte"


# Background hint per node kind for the diagram
NODE_BACKGROUNDS: dict[NodeKind, str] = {
    NodeKind.TABLE: "#ffffff",
    NodeKind.SUBQUERY: "#fff3cd",
    NodeKind.CTE: "#cfe2ff",
}

SUBQUERY_DISPLAY_NAME = "(subquery)"


class _NodeBase(BaseModel):
    name: str
    alias: str | None = None

    model_config = {"frozen": True}

    @property
    def display_label(self) -> str:
        """'name (alias)' when aliased, otherwise just the name."""
        if self.alias:
            return f"{self.name} ({self.alias})"
        return self.name

    @property
    def background_color(self) -> str:
        return NODE_BACKGROUNDS[self.kind]  # type: ignore[attr-defined]


class BaseTable(_NodeBase):
    """A physical table referenced in FROM or JOIN."""

    kind: Literal[NodeKind.TABLE] = NodeKind.TABLE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def id(self) -> str:
        return self.alias or self.name


class Cte(_NodeBase):
    """
    A common table expression defined in a WITH clause.

    `recursive` is reserved for recursion detection and is currently
    always False.
    """

    kind: Literal[NodeKind.CTE] = NodeKind.CTE
    recursive: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def id(self) -> str:
        return f"cte_{self.name}"


class Subquery(_NodeBase):
    """A derived table in FROM, carrying the full graph of its inner query."""

    kind: Literal[NodeKind.SUBQUERY] = NodeKind.SUBQUERY
    name: str = SUBQUERY_DISPLAY_NAME
    alias: str
    inner_graph: QueryGraph

    @computed_field  # type: ignore[prop-decorator]
    @property
    def id(self) -> str:
        return f"subquery_{self.alias}"


TableNode = Annotated[Union[BaseTable, Cte, Subquery], Field(discriminator="kind")]
