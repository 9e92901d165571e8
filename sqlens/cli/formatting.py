"""Rich formatting utilities for CLI output.

Panels for errors, warnings and successes, and a tree view of an analysed
query.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.tree import Tree

from sqlens.adapters import DiagramResponse, ErrorResponse
from sqlens.domain import JoinType

_NODE_COLORS = {"table": "green", "cte": "blue", "subquery": "yellow"}


def format_error(message: str, context: str | None = None) -> Panel:
    """Create formatted error panel.

    Args:
        message: Error message
        context: Optional context hint for resolution

    Returns:
        Panel with error formatting
    """
    content = f"[bold red]{message}[/bold red]"
    if context:
        content += f"\n\n[dim]{context}[/dim]"

    return Panel(
        content,
        title="[bold red]Error[/bold red]",
        border_style="red",
        width=78,
        expand=False,
    )


def format_warning(message: str, context: str | None = None) -> Panel:
    """Create formatted warning panel."""
    content = f"[bold yellow]{message}[/bold yellow]"
    if context:
        content += f"\n\n[dim]{context}[/dim]"

    return Panel(
        content,
        title="[bold yellow]Warning[/bold yellow]",
        border_style="yellow",
        width=78,
        expand=False,
    )


def format_parse_error(error: ErrorResponse) -> Panel:
    """Error panel for a failed analysis, with position and suggestion."""
    lines = [f"[dim]Code:[/dim] {error.code}"]
    if error.line is not None:
        position = f"line {error.line}"
        if error.column is not None:
            position += f", column {error.column}"
        lines.append(f"[dim]Position:[/dim] {position}")
    if error.suggestion:
        lines.append(error.suggestion)
    return format_error(error.message, "\n".join(lines))


def _node_label(node_type: str, name: str, alias: str | None, columns: list[str]) -> str:
    color = _NODE_COLORS.get(node_type, "white")
    label = f"[{color}]{name}[/{color}]"
    if alias:
        label += f" [dim]({alias})[/dim]"
    label += f" [dim]{node_type}[/dim]"
    if columns:
        label += f"  [cyan]{', '.join(columns)}[/cyan]"
    return label


def build_graph_tree(diagram: DiagramResponse, title: str = "query") -> Tree:
    """Build a Rich Tree listing nodes, then edges with their join styling."""
    tree = Tree(f"[bold]{title}[/bold]")

    nodes = tree.add(f"[bold]Nodes[/bold] [dim]({len(diagram.nodes)})[/dim]")
    for node in diagram.nodes:
        branch = nodes.add(_node_label(node.type, node.name, node.alias, node.columns))
        if node.inner_graph is not None:
            branch.add(build_graph_tree(node.inner_graph, title=node.id))

    edges = tree.add(f"[bold]Joins[/bold] [dim]({len(diagram.edges)})[/dim]")
    for edge in diagram.edges:
        join_type = JoinType(edge.join_type)
        label = (
            f"{edge.source_id} [{join_type.color}]{join_type.arrow} "
            f"{join_type.value}[/{join_type.color}] {edge.target_id}"
        )
        if edge.condition:
            label += f"  [dim]ON {edge.condition}[/dim]"
        edges.add(label)

    return tree
