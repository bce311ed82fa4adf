"""Output formatting for snapshots, statistics and search results."""

import json
from typing import Any, Literal

from ..filters.search import SearchMatch
from ..graph.model_graph import OntologyGraph
from ..statistics import GraphStatistics, compute_statistics

OutputFormat = Literal["text", "json"]


def build_snapshot(
    graph: OntologyGraph, stats: GraphStatistics | None = None
) -> dict[str, Any]:
    """Build the read-only snapshot a renderer consumes.

    Args:
        graph: The graph to snapshot.
        stats: Precomputed statistics; computed when omitted.

    Returns:
        A dictionary with visible ``nodes``, visible ``edges`` and
        ``statistics``.
    """
    if stats is None:
        stats = compute_statistics(graph)

    nodes = []
    for node in graph.visible_nodes():
        x, y = node.position if node.position is not None else (None, None)
        nodes.append({
            "id": node.id,
            "type": node.type.value,
            "label": node.label,
            "x": x,
            "y": y,
        })

    edges = [
        {
            "id": edge.id,
            "type": edge.type.value,
            "source": edge.source,
            "target": edge.target,
            "label": edge.label,
        }
        for edge in graph.visible_edges()
    ]

    return {"nodes": nodes, "edges": edges, "statistics": stats.to_dict()}


def format_snapshot(snapshot: dict[str, Any], format: OutputFormat = "text") -> str:
    """Format a snapshot for output."""
    if format == "json":
        return json.dumps(snapshot, indent=2)

    lines = [f"NODES ({len(snapshot['nodes'])}):"]
    for node in snapshot["nodes"]:
        position = ""
        if node["x"] is not None:
            position = f" @ ({node['x']:.2f}, {node['y']:.2f})"
        lines.append(f"  {node['id']} [{node['type']}] {node['label']}{position}")
    if not snapshot["nodes"]:
        lines.append("  (none)")

    lines.append("")
    lines.append(f"EDGES ({len(snapshot['edges'])}):")
    for edge in snapshot["edges"]:
        lines.append(
            f"  {edge['id']} [{edge['type']}] {edge['source']} -> {edge['target']}"
            f" {edge['label']}".rstrip()
        )
    if not snapshot["edges"]:
        lines.append("  (none)")

    return "\n".join(lines)


def format_statistics(stats: GraphStatistics, format: OutputFormat = "text") -> str:
    """Format statistics for output."""
    if format == "json":
        return json.dumps(stats.to_dict(), indent=2)

    lines = [
        f"Nodes: {stats.node_count} visible of {stats.total_node_count}",
        f"Edges: {stats.edge_count} visible of {stats.total_edge_count}",
        f"Degree: min {stats.min_degree}, max {stats.max_degree}, "
        f"avg {stats.average_degree:.2f}",
        f"Components: {stats.component_count}",
        f"Density: {stats.density:.4f}",
        f"Individuals: {stats.individual_count}",
    ]

    lines.append("")
    lines.append("NODE TYPES:")
    for name, count in sorted(stats.node_type_counts.items()):
        lines.append(f"  {name}: {count}")
    if not stats.node_type_counts:
        lines.append("  (none)")

    lines.append("")
    lines.append("EDGE TYPES:")
    for name, count in sorted(stats.edge_type_counts.items()):
        lines.append(f"  {name}: {count}")
    if not stats.edge_type_counts:
        lines.append("  (none)")

    return "\n".join(lines)


def format_search_results(
    matches: list[SearchMatch], format: OutputFormat = "text"
) -> str:
    """Format ranked search matches for output."""
    if format == "json":
        data = [
            {
                "id": match.node_id,
                "label": match.label,
                "kind": match.kind.name.lower(),
                "score": match.score,
            }
            for match in matches
        ]
        return json.dumps(data, indent=2)

    if not matches:
        return "No matches"
    return "\n".join(f"{rank}. {match}" for rank, match in enumerate(matches, start=1))
