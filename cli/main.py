"""
depgraph CLI

Command-line interface for the project dependency graph builder.
Loads project dependency data, walks it from the startup projects and
shows or exports the resulting "requires" edges.

Commands:
    depgraph show <source>      Print the reachable dependency edges
    depgraph export <source>    Write the edges as DOT, Mermaid or JSON

Usage:
    $ depgraph show MySolution.sln
    $ depgraph show deps.json --root app --root tools
    $ depgraph export MySolution.sln -f dot -o deps.dot
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from depgraph import __version__
from depgraph.exceptions import DependencyGraphError
from depgraph.graph import GraphBuilder
from depgraph.index import DependencyIndex
from depgraph.models import BuildResult, Edge, MissingPolicy
from depgraph.render import SINKS, get_sink
from depgraph.sources import load_source

# Initialize Typer app and Rich consoles
app = typer.Typer(
    name="depgraph",
    help="depgraph: Show the project dependency graph reachable from startup projects",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


# Defaults
DEFAULT_FORMAT = "dot"
FORMAT_ENVVAR = "DEPGRAPH_FORMAT"


def _source_argument():
    return typer.Argument(
        ...,
        help="Dependency data: a .json manifest or a .sln solution file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    )


def _roots_option():
    return typer.Option(
        None,
        "--root",
        "-r",
        help="Root project id (repeatable). Overrides the startup projects in the source.",
    )


def _skip_unknown_option():
    return typer.Option(
        False,
        "--skip-unknown",
        help="Skip references to unknown projects instead of failing",
    )


def _no_references_option():
    return typer.Option(
        False,
        "--no-references",
        help="Ignore <ProjectReference> items in project files (solutions only)",
    )


@app.command()
def show(
    source: Path = _source_argument(),
    roots: Optional[list[str]] = _roots_option(),
    skip_unknown: bool = _skip_unknown_option(),
    no_references: bool = _no_references_option(),
) -> None:
    """
    Print the dependency edges reachable from the startup projects.

    Edges are listed in traversal order: each project's requirements
    appear together, in declaration order, when the project is first
    visited.
    """
    console.print(f"\n[bold blue]📂 Loading:[/bold blue] {source}\n")

    index, result, root_ids = _run(source, roots, skip_unknown, no_references)

    if result.edges:
        _print_edge_table(result.edges)
    else:
        console.print("[yellow]No dependency edges reachable from the roots.[/yellow]")

    console.print()
    _print_summary(index, result, root_ids)

    if result.skipped_ids:
        console.print(
            f"\n[yellow]⚠️  {len(result.skipped_ids)} unknown reference(s) skipped:[/yellow]"
        )
        for project_id in result.skipped_ids[:5]:
            console.print(f"   • {project_id}")
        if len(result.skipped_ids) > 5:
            console.print(f"   ... and {len(result.skipped_ids) - 5} more")


@app.command()
def export(
    source: Path = _source_argument(),
    output_format: str = typer.Option(
        DEFAULT_FORMAT,
        "--format",
        "-f",
        envvar=FORMAT_ENVVAR,
        help=f"Output format: {', '.join(SINKS)}",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="File to write (default: stdout)",
        dir_okay=False,
        resolve_path=True,
    ),
    roots: Optional[list[str]] = _roots_option(),
    skip_unknown: bool = _skip_unknown_option(),
    no_references: bool = _no_references_option(),
) -> None:
    """
    Render the dependency edges as DOT, Mermaid or JSON.
    """
    try:
        sink = get_sink(output_format)
    except ValueError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    _, result, _ = _run(source, roots, skip_unknown, no_references)
    text = sink.render(result.edges)

    if output is None:
        typer.echo(text, nl=False)
        return

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
    except OSError as e:
        err_console.print(f"[bold red]Error:[/bold red] cannot write {output}: {e.strerror}")
        raise typer.Exit(1)

    err_console.print(f"[green]✓[/green] Wrote {result.edge_count} edge(s) to {output}")


# Helper functions

def _run(
    source: Path,
    roots: Optional[list[str]],
    skip_unknown: bool,
    no_references: bool,
) -> tuple[DependencyIndex, BuildResult, list[str]]:
    """Load the source and build its edges, exiting with status 1 on failure."""
    policy = MissingPolicy.SKIP if skip_unknown else MissingPolicy.RAISE

    try:
        index, default_roots = load_source(
            source, include_references=not no_references
        ).load()
        root_ids = list(roots) if roots else default_roots
        builder = GraphBuilder(index, policy=policy)
        result = builder.run(root_ids)
    except DependencyGraphError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e.message}")
        raise typer.Exit(1)

    return index, result, root_ids


def _print_edge_table(edges: list[Edge]) -> None:
    """Print the edges in traversal order."""
    table = Table(title="Dependencies", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Project", style="cyan")
    table.add_column("Requires", style="bold")

    for position, edge in enumerate(edges, start=1):
        table.add_row(str(position), edge.from_name, edge.to_name)

    console.print(table)


def _print_summary(index: DependencyIndex, result: BuildResult, root_ids: list[str]) -> None:
    """Print a summary panel after building."""
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Label", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Roots", ", ".join(root_ids) if root_ids else "-")
    table.add_row("Projects in source", str(len(index)))
    table.add_row("Reachable projects", str(result.reachable_count))
    table.add_row("Edges", str(result.edge_count))
    table.add_row("Skipped references", str(len(result.skipped_ids)))

    panel = Panel(table, title="[bold green]✓ Graph Built[/bold green]", border_style="green")
    console.print(panel)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]depgraph[/bold] version {__version__}")
        raise typer.Exit()


# Version and logging options
@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log traversal details to stderr",
    ),
) -> None:
    """
    depgraph: Show the project dependency graph reachable from startup projects.
    """
    _configure_logging(verbose)


if __name__ == "__main__":
    app()
