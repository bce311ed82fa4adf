"""Subclass hierarchy collapse filter."""

from collections import defaultdict, deque

from ..graph.model_graph import OntologyGraph
from ..graph.node_types import EdgeType
from .base import FilterVerdict, GraphFilter


class SubclassCollapseFilter(GraphFilter):
    """Collapse subclass hierarchies onto their roots.

    When enabled, every SUBCLASS_OF edge is hidden and each hierarchy root
    (a node without a superclass) hides all descendants reachable through
    SUBCLASS_OF edges. The hidden ids are recorded on the root. Roots
    passed to ``expand`` keep their subtree and its subclass edges visible.
    """

    def __init__(self, enabled: bool = True):
        super().__init__(enabled)
        self.expanded: set[str] = set()

    def expand(self, root_id: str) -> None:
        self.expanded.add(root_id)

    def collapse(self, root_id: str) -> None:
        self.expanded.discard(root_id)

    def evaluate(self, graph: OntologyGraph) -> FilterVerdict:
        children: dict[str, list[str]] = defaultdict(list)
        has_parent: set[str] = set()
        subclass_edges = []
        for edge in graph.edges():
            if edge.type == EdgeType.SUBCLASS_OF and not edge.merged and not edge.is_loop:
                children[edge.target].append(edge.source)
                has_parent.add(edge.source)
                subclass_edges.append(edge)

        verdict = FilterVerdict()
        shown_by_expansion: set[str] = set()

        for node in graph.nodes():
            if node.merged or node.id in has_parent or node.id not in children:
                continue

            descendants = _descendants(node.id, children)
            if node.id in self.expanded:
                shown_by_expansion |= descendants | {node.id}
                continue

            verdict.hidden_nodes |= descendants
            verdict.collapsed[node.id] = descendants

        verdict.hidden_edges = {
            edge.id
            for edge in subclass_edges
            if not (edge.source in shown_by_expansion and edge.target in shown_by_expansion)
        }
        return verdict

    def __repr__(self) -> str:
        return f"SubclassCollapseFilter(enabled={self.enabled})"


def _descendants(root_id: str, children: dict[str, list[str]]) -> set[str]:
    """Collect every node below a root by breadth-first traversal."""
    found: set[str] = set()
    queue = deque(children.get(root_id, []))
    while queue:
        current = queue.popleft()
        if current in found or current == root_id:
            continue
        found.add(current)
        queue.extend(children.get(current, []))
    return found
