"""Base table nodes from FROM and JOIN clauses."""

from __future__ import annotations

from sqlglot import exp

from sqlens.domain import BaseTable, TableNode
from sqlens.extraction.base import NodeExtractor, from_item, joins


def table_node(table: exp.Table) -> BaseTable:
    return BaseTable(name=table.name, alias=table.alias or None)


class BaseTableExtractor(NodeExtractor):
    """
    One BaseTable per plain table in the top-level FROM and JOIN items.

    Subqueries and other non-table items are left to other extractors.
    """

    def can_handle(self, ast: exp.Expression) -> bool:
        return isinstance(ast, exp.Select)

    def extract(self, ast: exp.Expression) -> list[TableNode]:
        if not isinstance(ast, exp.Select):
            return []
        items = [from_item(ast)] + [join.this for join in joins(ast)]
        return [table_node(item) for item in items if isinstance(item, exp.Table)]
