"""Command-line interface for owlviz."""

import logging
import math
import sys

import click

from .filters.pipeline import FilterConfig, FilterPipeline
from .filters.search import SearchFilter
from .graph.model_graph import OntologyGraph
from .graph.node_types import EdgeType, NodeType
from .layout.config import LayoutConfig
from .layout.simulation import ForceSimulation
from .logging_config import setup_logging
from .output.formatter import (
    build_snapshot,
    format_search_results,
    format_snapshot,
    format_statistics,
)
from .parser import parse_file
from .schema.errors import MalformedError, ParseError, SchemaLoadError
from .statistics import compute_statistics

FORMAT_OPTION = click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)


def _filter_options(func):
    """Attach the options that describe a FilterConfig."""
    options = [
        click.option(
            "--node-type",
            "node_types",
            multiple=True,
            type=click.Choice([t.value for t in NodeType]),
            help="Show only nodes of this type (repeatable)",
        ),
        click.option(
            "--edge-type",
            "edge_types",
            multiple=True,
            type=click.Choice([t.value for t in EdgeType]),
            help="Show only edges of this type (repeatable)",
        ),
        click.option("--min-degree", type=int, default=0, help="Minimum node degree"),
        click.option("--max-degree", type=int, default=None, help="Maximum node degree"),
        click.option(
            "--collapse/--no-collapse",
            default=False,
            help="Collapse subclass hierarchies onto their roots",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_filter_config(
    node_types: tuple[str, ...],
    edge_types: tuple[str, ...],
    min_degree: int,
    max_degree: int | None,
    collapse: bool,
) -> FilterConfig:
    return FilterConfig(
        node_types=frozenset(NodeType(t) for t in node_types) if node_types else None,
        edge_types=frozenset(EdgeType(t) for t in edge_types) if edge_types else None,
        min_degree=min_degree,
        max_degree=math.inf if max_degree is None else max_degree,
        collapse_subclasses=collapse,
    )


def _load_graph(path: str) -> OntologyGraph:
    """Load and parse an ontology file, exiting with code 2 on failure."""
    try:
        return parse_file(path)
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except MalformedError as e:
        click.echo(f"Malformed ontology: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)
    except ParseError as e:
        click.echo(f"Parse error: {e}", err=True)
        sys.exit(2)


def _apply_filters(graph: OntologyGraph, config: FilterConfig) -> None:
    try:
        FilterPipeline.from_config(config).apply(graph)
    except ValueError as e:
        click.echo(f"Invalid filter options: {e}", err=True)
        sys.exit(2)


@click.group()
@click.version_option(package_name="owlviz")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """owlviz: layout and filtering engine for OWL ontology diagrams."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)


@main.command()
@click.argument("ontology_file", type=click.Path(exists=True))
@FORMAT_OPTION
@_filter_options
def stats(ontology_file: str, output_format: str, **filter_options):
    """Print statistics for the visible part of an ontology.

    ONTOLOGY_FILE is a JSON or YAML ontology description.

    Exit codes:
      0 - Success
      2 - File, parse or option error
    """
    graph = _load_graph(ontology_file)
    _apply_filters(graph, _build_filter_config(**filter_options))

    click.echo(format_statistics(compute_statistics(graph), output_format))  # type: ignore
    sys.exit(0)


@main.command()
@click.argument("ontology_file", type=click.Path(exists=True))
@FORMAT_OPTION
@_filter_options
@click.option("--ticks", type=int, default=300, help="Maximum number of layout ticks")
@click.option("--seed", type=int, default=0, help="Seed for initial placement")
@click.option("--charge", type=float, default=-500.0, help="Charge strength")
@click.option("--link-strength", type=float, default=1.0, help="Link strength")
def layout(
    ontology_file: str,
    output_format: str,
    ticks: int,
    seed: int,
    charge: float,
    link_strength: float,
    **filter_options,
):
    """Run the force layout and print the positioned snapshot.

    ONTOLOGY_FILE is a JSON or YAML ontology description.

    Exit codes:
      0 - Success
      2 - File, parse or option error
    """
    graph = _load_graph(ontology_file)
    _apply_filters(graph, _build_filter_config(**filter_options))

    try:
        config = LayoutConfig(charge_strength=charge, link_strength=link_strength, seed=seed)
    except ValueError as e:
        click.echo(f"Invalid layout options: {e}", err=True)
        sys.exit(2)

    simulation = ForceSimulation(config)
    performed = simulation.run(graph, ticks)
    click.echo(
        f"Ran {performed} ticks ({simulation.state.value}, alpha={simulation.alpha:.4f})",
        err=True,
    )

    click.echo(format_snapshot(build_snapshot(graph), output_format))  # type: ignore
    sys.exit(0)


@main.command()
@click.argument("ontology_file", type=click.Path(exists=True))
@FORMAT_OPTION
@_filter_options
def snapshot(ontology_file: str, output_format: str, **filter_options):
    """Print the visible nodes and edges of an ontology without layout.

    ONTOLOGY_FILE is a JSON or YAML ontology description.
    """
    graph = _load_graph(ontology_file)
    _apply_filters(graph, _build_filter_config(**filter_options))

    click.echo(format_snapshot(build_snapshot(graph), output_format))  # type: ignore
    sys.exit(0)


@main.command()
@click.argument("ontology_file", type=click.Path(exists=True))
@click.argument("query")
@FORMAT_OPTION
@click.option("--limit", type=int, default=10, help="Maximum number of matches")
def search(ontology_file: str, query: str, output_format: str, limit: int):
    """Rank the nodes of an ontology against a search query.

    ONTOLOGY_FILE is a JSON or YAML ontology description.

    Exit codes:
      0 - At least one match
      1 - No matches
      2 - File or parse error
    """
    graph = _load_graph(ontology_file)
    matches = SearchFilter(query).rank(graph)[:limit]

    click.echo(format_search_results(matches, output_format))  # type: ignore
    sys.exit(0 if matches else 1)


if __name__ == "__main__":
    main()
