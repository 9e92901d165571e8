"""Abstract base classes for node and edge extractors."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sqlglot import exp

from sqlens.domain import JoinEdge, TableNode


class NodeExtractor(ABC):
    """Produces graph nodes from one kind of construct in the AST."""

    @abstractmethod
    def can_handle(self, ast: exp.Expression) -> bool:
        """Whether this extractor applies to the given statement.

        Args:
            ast: Parsed statement.

        Returns:
            True if extract() should be called for it.
        """
        pass

    @abstractmethod
    def extract(self, ast: exp.Expression) -> list[TableNode]:
        """Extract nodes in the order they appear in the statement.

        Args:
            ast: Parsed statement accepted by can_handle().

        Returns:
            List of nodes.
        """
        pass


class EdgeExtractor(ABC):
    """Produces join edges from the AST."""

    @abstractmethod
    def can_handle(self, ast: exp.Expression) -> bool:
        """Whether this extractor applies to the given statement."""
        pass

    @abstractmethod
    def extract(self, ast: exp.Expression) -> list[JoinEdge]:
        """Extract edges in the order their JOIN clauses appear."""
        pass


# AST helpers shared by the concrete extractors


def from_item(select: exp.Select) -> exp.Expression | None:
    """The item of the top-level FROM clause, if any."""
    for child in select.iter_expressions():
        if isinstance(child, exp.From):
            return child.this
    return None


def joins(select: exp.Select) -> list[exp.Join]:
    return [j for j in select.args.get("joins") or [] if isinstance(j, exp.Join)]


def item_id(item: exp.Expression) -> str:
    """Node id of a FROM/JOIN item: alias, else table name, else SQL text."""
    if isinstance(item, exp.Table):
        return item.alias or item.name
    return item.alias or item.sql()
