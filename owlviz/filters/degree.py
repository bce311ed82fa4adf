"""Degree filter."""

import math
from collections import Counter

from .base import FilterVerdict, GraphFilter


class DegreeFilter(GraphFilter):
    """Show only nodes whose degree lies within ``[min_degree, max_degree]``.

    Degree is counted over the full topology, not the filtered subgraph.
    """

    def __init__(
        self, min_degree: int = 0, max_degree: float = math.inf, enabled: bool = True
    ):
        if min_degree < 0:
            raise ValueError("min_degree must not be negative")
        if max_degree < min_degree:
            raise ValueError("max_degree must not be below min_degree")
        super().__init__(enabled)
        self.min_degree = min_degree
        self.max_degree = max_degree

    def evaluate(self, graph) -> FilterVerdict:
        # One pass over the edges instead of a scan per node.
        degrees: Counter[str] = Counter()
        for edge in graph.edges():
            if edge.merged:
                continue
            degrees[edge.source] += 1
            if edge.target != edge.source:
                degrees[edge.target] += 1

        return FilterVerdict(
            hidden_nodes={
                node.id
                for node in graph.nodes()
                if not self.min_degree <= degrees[node.id] <= self.max_degree
            }
        )

    def __repr__(self) -> str:
        return f"DegreeFilter({self.min_degree}, {self.max_degree})"
