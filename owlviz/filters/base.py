"""Base classes for visibility filters."""

from dataclasses import dataclass, field

from ..graph.model_graph import OntologyGraph


@dataclass
class FilterVerdict:
    """The elements a filter votes to hide."""

    hidden_nodes: set[str] = field(default_factory=set)
    hidden_edges: set[str] = field(default_factory=set)
    collapsed: dict[str, set[str]] = field(default_factory=dict)

    def merge(self, other: "FilterVerdict") -> None:
        """Merge another verdict into this one."""
        self.hidden_nodes |= other.hidden_nodes
        self.hidden_edges |= other.hidden_edges
        for root, members in other.collapsed.items():
            self.collapsed.setdefault(root, set()).update(members)


class GraphFilter:
    """A visibility policy over the full graph topology.

    Subclasses override ``hides_node`` and/or ``hides_edge``, or
    ``evaluate`` when the policy needs a traversal.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def hides_node(self, graph: OntologyGraph, node) -> bool:
        return False

    def hides_edge(self, graph: OntologyGraph, edge) -> bool:
        return False

    def evaluate(self, graph: OntologyGraph) -> FilterVerdict:
        """Evaluate the policy against every node and edge of the graph."""
        return FilterVerdict(
            hidden_nodes={n.id for n in graph.nodes() if self.hides_node(graph, n)},
            hidden_edges={e.id for e in graph.edges() if self.hides_edge(graph, e)},
        )
