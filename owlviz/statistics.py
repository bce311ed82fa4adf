"""Summary statistics over the visible part of an ontology graph."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

import networkx as nx

from .graph.model_graph import OntologyGraph


@dataclass
class GraphStatistics:
    """Counts and degree figures for the visible subgraph."""

    node_count: int = 0
    edge_count: int = 0
    total_node_count: int = 0
    total_edge_count: int = 0
    node_type_counts: dict[str, int] = field(default_factory=dict)
    edge_type_counts: dict[str, int] = field(default_factory=dict)
    min_degree: int = 0
    max_degree: int = 0
    average_degree: float = 0.0
    component_count: int = 0
    density: float = 0.0
    individual_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "node_count": self.node_count,
            "edge_count": self.edge_count,
            "total_node_count": self.total_node_count,
            "total_edge_count": self.total_edge_count,
            "node_type_counts": dict(self.node_type_counts),
            "edge_type_counts": dict(self.edge_type_counts),
            "min_degree": self.min_degree,
            "max_degree": self.max_degree,
            "average_degree": self.average_degree,
            "component_count": self.component_count,
            "density": self.density,
            "individual_count": self.individual_count,
        }


def compute_statistics(graph: OntologyGraph) -> GraphStatistics:
    """Compute statistics over the currently visible nodes and edges.

    Degrees count visible edges only, a self-loop counting once.
    Density is ``edges / (n * (n - 1) / 2)`` and 0 for fewer than two
    nodes.

    Args:
        graph: The graph to summarize. It is not modified.

    Returns:
        The computed statistics.
    """
    nodes = list(graph.visible_nodes())
    edges = list(graph.visible_edges())

    degrees: Counter[str] = Counter({node.id: 0 for node in nodes})
    for edge in edges:
        degrees[edge.source] += 1
        if edge.target != edge.source:
            degrees[edge.target] += 1

    stats = GraphStatistics(
        node_count=len(nodes),
        edge_count=len(edges),
        total_node_count=graph.node_count(),
        total_edge_count=graph.edge_count(),
        node_type_counts=dict(Counter(node.type.value for node in nodes)),
        edge_type_counts=dict(Counter(edge.type.value for edge in edges)),
        individual_count=sum(len(node.individuals) for node in nodes),
    )

    if nodes:
        values = [degrees[node.id] for node in nodes]
        stats.min_degree = min(values)
        stats.max_degree = max(values)
        stats.average_degree = sum(values) / len(values)
        stats.component_count = nx.number_weakly_connected_components(
            graph.visible_subgraph()
        )

    if len(nodes) >= 2:
        stats.density = len(edges) / (len(nodes) * (len(nodes) - 1) / 2)

    return stats
