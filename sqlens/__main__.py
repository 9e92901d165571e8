"""Command-line interface for sqlens."""

from __future__ import annotations

import json
import traceback
from pathlib import Path

import click
import yaml
from pydantic import ValidationError
from rich.console import Console

from sqlens.adapters import project_error, project_graph
from sqlens.cli import (
    build_graph_tree,
    configure_logging,
    format_parse_error,
    format_warning,
    read_sql,
)
from sqlens.config import SqlensConfig, find_config, load_config
from sqlens.core import QueryAnalyzer
from sqlens.domain import Failure

console = Console()


def _load_config_or_exit(config: Path | None, debug: bool) -> tuple[SqlensConfig, Path | None]:
    """Load explicit or discovered config; defaults when none is found."""
    try:
        if config:
            return load_config(config), config
        found_config = find_config()
        if found_config is None:
            return SqlensConfig(), None
        return load_config(found_config), found_config
    except FileNotFoundError as e:
        if debug:
            console.print(traceback.format_exc())
        console.print(f"[red]Config file not found:[/red] {e}")
        raise click.ClickException(str(e))
    except yaml.YAMLError as e:
        if debug:
            console.print(traceback.format_exc())
        console.print(f"[red]YAML parsing error:[/red] {e}")
        raise click.ClickException(str(e))
    except ValidationError as e:
        if debug:
            console.print(traceback.format_exc())
        console.print(f"[red]Config validation error:[/red] {e}")
        raise click.ClickException(str(e))


@click.group()
@click.version_option()
def cli() -> None:
    """Visualize the structure of SQL queries.

    Analyze a query:

        $ sqlens analyze --sql "SELECT * FROM a JOIN b ON a.id = b.a_id"

    Or serve the HTTP API:

        $ sqlens serve
    """
    pass


@cli.command()
@click.argument(
    "file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--sql", "-s", help="SQL text to analyze (instead of FILE or stdin)")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["tree", "json"]),
    default="tree",
    show_default=True,
    help="Output a Rich tree or the JSON response",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to sqlens.yml config file (auto-detected if not specified)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
@click.option(
    "--debug",
    is_flag=True,
    help="Show debug logging and full exception stacktraces",
)
def analyze(
    file: Path | None,
    sql: str | None,
    output_format: str,
    config: Path | None,
    verbose: bool,
    debug: bool,
) -> None:
    """Analyze a SELECT/WITH query into tables and joins.

    Examples:

        # Analyze a file
        sqlens analyze query.sql

        # Pipe SQL in and get JSON
        cat query.sql | sqlens analyze --format json
    """
    configure_logging(verbose=verbose, debug=debug)
    cfg, _ = _load_config_or_exit(config, debug)
    text = read_sql(sql, file)

    analyzer = QueryAnalyzer.from_config(cfg)
    outcome = analyzer.analyze(text)

    if isinstance(outcome, Failure):
        error = project_error(outcome.error)
        if output_format == "json":
            click.echo(json.dumps(error.to_dict(), indent=2))
        else:
            console.print(format_parse_error(error))
        raise SystemExit(1)

    graph = outcome.value
    diagram = project_graph(graph, warning=analyzer.complexity_warning(graph))

    if output_format == "json":
        click.echo(json.dumps(diagram.to_dict(), indent=2))
        return

    console.print(build_graph_tree(diagram, title=str(file) if file else "query"))
    console.print()
    console.print(
        f"[dim]Complexity:[/dim] {graph.complexity}  "
        f"[dim]Joins:[/dim] {len(graph.edges)}"
    )
    if graph.has_likely_cartesian_product:
        unjoined = ", ".join(node.id for node in graph.isolated_nodes)
        console.print(
            format_warning(
                "Possible cartesian product",
                f"Not joined to any other table: {unjoined}",
            )
        )
    if verbose and graph.dangling_edges:
        for edge in graph.dangling_edges:
            console.print(
                f"[yellow]Join endpoint not in graph:[/yellow] "
                f"{edge.source_id} -> {edge.target_id}"
            )
    if diagram.warning:
        console.print(format_warning(diagram.warning))


@cli.command()
def init() -> None:
    """Create a sqlens.yml config file.

    Generates a starter config file in the current directory
    with sensible defaults.
    """
    config_path = Path("sqlens.yml")

    if config_path.exists():
        console.print(f"[yellow]{config_path} already exists[/yellow]")
        raise click.ClickException("Config file already exists")

    template = """\
# sqlens configuration

# SQL dialect used to parse queries (generic, postgres, mysql, snowflake,
# bigquery, redshift, duckdb, trino, tsql)
dialect: generic

limits:
  max_query_length: 100000
  complexity_threshold: 20   # warn above this many tables

server:
  host: 127.0.0.1
  port: 8000
"""

    config_path.write_text(template, encoding="utf-8")
    console.print(f"[green]Created {config_path}[/green]")
    console.print("\nEdit the file and run:")
    console.print("  sqlens analyze query.sql")


@cli.command()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to sqlens.yml config file",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Show full exception stacktraces for troubleshooting",
)
def validate(config: Path | None, debug: bool) -> None:
    """Validate configuration and show the effective settings."""
    cfg, config_path = _load_config_or_exit(config, debug)

    if config_path is None:
        console.print("[yellow]No sqlens.yml found, using defaults[/yellow]")
    else:
        console.print(f"[green]Config valid:[/green] {config_path}")

    console.print(f"  [dim]Dialect:[/dim]              {cfg.dialect.value}")
    console.print(f"  [dim]Max query length:[/dim]     {cfg.limits.max_query_length}")
    console.print(f"  [dim]Complexity threshold:[/dim] {cfg.limits.complexity_threshold}")
    console.print(f"  [dim]Server:[/dim]               {cfg.server.host}:{cfg.server.port}")


@cli.command()
@click.option("--host", help="Bind address (overrides config)")
@click.option("--port", type=int, help="Port (overrides config)")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to sqlens.yml config file",
)
@click.option("--debug", is_flag=True, help="Show debug logging")
def serve(host: str | None, port: int | None, config: Path | None, debug: bool) -> None:
    """Serve the analysis API over HTTP.

    POST {"sql": "..."} to /api/sql/analyze.
    """
    import uvicorn

    from sqlens.app.server import create_app

    configure_logging(verbose=True, debug=debug)
    cfg, _ = _load_config_or_exit(config, debug)

    app = create_app(cfg)
    uvicorn.run(
        app,
        host=host or cfg.server.host,
        port=port or cfg.server.port,
        log_level="debug" if debug else "info",
    )


if __name__ == "__main__":
    cli()
