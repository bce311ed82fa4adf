"""Edge type filter."""

from typing import Iterable

from ..graph.node_types import EdgeType
from .base import GraphFilter


class EdgeTypeFilter(GraphFilter):
    """Show only edges whose type is in the allowed set."""

    def __init__(self, allowed_types: Iterable[EdgeType], enabled: bool = True):
        super().__init__(enabled)
        self.allowed_types = frozenset(EdgeType(t) for t in allowed_types)

    def hides_edge(self, graph, edge) -> bool:
        return edge.type not in self.allowed_types

    def __repr__(self) -> str:
        types = sorted(t.value for t in self.allowed_types)
        return f"EdgeTypeFilter({types})"
