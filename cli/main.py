"""
astgraph CLI

Command-line interface for the program graph engine.
Provides commands for extracting, summarizing, searching and comparing
the graphs of Python source files.

Commands:
    astgraph extract <file>                 Print the graph pattern of a file
    astgraph summary <file>                 Show node, edge and degree statistics
    astgraph search <file> <start> <goal>   Find a path between two names
    astgraph compare <file_a> <file_b>      Check coarse structural equivalence

Usage:
    $ astgraph extract main.py --abstract
    $ astgraph search main.py main println
"""

import logging
from collections import Counter
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.panel import Panel
from rich import box

from astgraph import __version__
from astgraph.errors import ExtractionError
from astgraph.graph import Graph, extract_graph_from_file, is_isomorphic
from astgraph.models import NodeKind, Relation
from astgraph.query import PatternBuilder
from astgraph.search import find_path

# Initialize Typer app and Rich console
app = typer.Typer(
    name="astgraph",
    help="astgraph: program graphs from Python source code",
    add_completion=False,
)
console = Console()


def _existing_file(help_text: str) -> Path:
    return typer.Argument(
        ...,
        help=help_text,
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    )


def _load_graph(path: Path) -> Graph:
    """Extract a graph, turning extraction failures into exit code 1."""
    try:
        return extract_graph_from_file(path)
    except (ExtractionError, FileNotFoundError) as e:
        console.print(f"[bold red]Error:[/bold red] {path}: {e}")
        raise typer.Exit(1)


@app.command()
def extract(
    path: Path = _existing_file("Python file to extract"),
    abstract: bool = typer.Option(
        False,
        "--abstract",
        "-a",
        help="Render node kinds instead of names",
    ),
) -> None:
    """
    Print the graph pattern of a Python file, one edge per line.
    """
    graph = _load_graph(path)
    builder = PatternBuilder(graph)
    pattern = builder.abstract() if abstract else builder.concrete()

    # Patterns contain square brackets; keep rich markup out of them.
    console.print(pattern, markup=False, highlight=False, soft_wrap=True)


@app.command()
def summary(
    path: Path = _existing_file("Python file to summarize"),
) -> None:
    """
    Show node and edge counts per kind and relation.
    """
    graph = _load_graph(path)
    _print_summary(graph, path)


@app.command()
def search(
    path: Path = _existing_file("Python file to search"),
    start: str = typer.Argument(..., help="Name of the start node"),
    goal: str = typer.Argument(..., help="Name of the node to reach"),
) -> None:
    """
    Find the shortest path between two named nodes.
    """
    graph = _load_graph(path)

    if start not in graph:
        console.print(f"[yellow]Unknown start node '{start}'.[/yellow]")
        raise typer.Exit(1)

    path_nodes = find_path(graph, start, goal)
    if path_nodes is None:
        console.print(f"No path from [cyan]{start}[/cyan] to [cyan]{goal}[/cyan].")
        return

    console.print(" -> ".join(node.name for node in path_nodes), markup=False, soft_wrap=True)


@app.command()
def compare(
    first: Path = _existing_file("First Python file"),
    second: Path = _existing_file("Second Python file"),
) -> None:
    """
    Check whether two files produce structurally equivalent graphs.

    Compares node and edge counts and the histograms of node kinds and
    edge relations. Names and wiring are not compared.
    """
    g1 = _load_graph(first)
    g2 = _load_graph(second)

    if is_isomorphic(g1, g2):
        console.print("[bold green]✓ Structurally equivalent[/bold green]")
    else:
        console.print("[bold yellow]✗ Not equivalent[/bold yellow]")


# Helper functions for output formatting

def _print_summary(graph: Graph, path: Path) -> None:
    """Print a summary panel for one graph."""
    kinds = Counter(node.kind for node in graph.nodes)
    relations = Counter(edge.relation for edge in graph.edges)

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Label", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Nodes", str(graph.node_count))
    for kind in NodeKind:
        table.add_row(f"  {kind.value}", str(kinds[kind]))
    table.add_row("Edges", str(graph.edge_count))
    for relation in Relation:
        table.add_row(f"  {relation.value}", str(relations[relation]))
    table.add_row("Degree sequence", str(graph.degree_sequence()))

    panel = Panel(table, title=f"[bold green]{path.name}[/bold green]", border_style="green")
    console.print(panel)


# Version and logging
@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log extraction and search details",
    ),
) -> None:
    """
    astgraph: program graphs from Python source code.
    """
    if version:
        console.print(f"[bold]astgraph[/bold] version {__version__}")
        raise typer.Exit()

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


if __name__ == "__main__":
    app()
