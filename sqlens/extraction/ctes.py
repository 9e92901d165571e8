"""CTE nodes from the WITH clause."""

from __future__ import annotations

from sqlglot import exp

from sqlens.domain import Cte, TableNode
from sqlens.extraction.base import NodeExtractor


def _ctes(ast: exp.Expression) -> list[exp.CTE]:
    for child in ast.iter_expressions():
        if isinstance(child, exp.With):
            return [cte for cte in child.expressions if isinstance(cte, exp.CTE)]
    return []


class CteExtractor(NodeExtractor):
    """One Cte node per common table expression, keyed by its alias."""

    def can_handle(self, ast: exp.Expression) -> bool:
        return isinstance(ast, exp.Select) and bool(_ctes(ast))

    def extract(self, ast: exp.Expression) -> list[TableNode]:
        # Unaliased CTEs fall back to their literal text
        return [Cte(name=cte.alias or cte.sql()) for cte in _ctes(ast)]
