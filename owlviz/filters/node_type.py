"""Node type filter."""

from typing import Iterable

from ..graph.node_types import NodeType
from .base import GraphFilter


class NodeTypeFilter(GraphFilter):
    """Show only nodes whose type is in the allowed set."""

    def __init__(self, allowed_types: Iterable[NodeType], enabled: bool = True):
        super().__init__(enabled)
        self.allowed_types = frozenset(NodeType(t) for t in allowed_types)

    def hides_node(self, graph, node) -> bool:
        return node.type not in self.allowed_types

    def __repr__(self) -> str:
        types = sorted(t.value for t in self.allowed_types)
        return f"NodeTypeFilter({types})"
