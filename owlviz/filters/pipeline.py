"""Filter pipeline that combines independent visibility policies."""

import logging
import math
from dataclasses import dataclass, field

from ..graph.model_graph import OntologyGraph
from ..graph.node_types import EdgeType, NodeType
from .base import FilterVerdict, GraphFilter
from .degree import DegreeFilter
from .edge_type import EdgeTypeFilter
from .node_type import NodeTypeFilter
from .subclass_collapse import SubclassCollapseFilter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterConfig:
    """Immutable description of the filters to enable."""

    node_types: frozenset[NodeType] | None = None
    edge_types: frozenset[EdgeType] | None = None
    min_degree: int = 0
    max_degree: float = math.inf
    collapse_subclasses: bool = False

    def build_filters(self) -> list[GraphFilter]:
        """Create the filters this configuration describes."""
        filters: list[GraphFilter] = []
        if self.node_types is not None:
            filters.append(NodeTypeFilter(self.node_types))
        if self.edge_types is not None:
            filters.append(EdgeTypeFilter(self.edge_types))
        if self.min_degree > 0 or self.max_degree != math.inf:
            filters.append(DegreeFilter(self.min_degree, self.max_degree))
        if self.collapse_subclasses:
            filters.append(SubclassCollapseFilter())
        return filters


@dataclass
class FilterResult:
    """Visible elements after applying a pipeline."""

    visible_nodes: set[str] = field(default_factory=set)
    visible_edges: set[str] = field(default_factory=set)


class FilterPipeline:
    """Combine filters with independent AND semantics.

    Every enabled filter is evaluated against the full topology. A node
    is visible iff no enabled filter hides it and it is not a merged
    equivalent; an edge is visible iff both endpoints are visible and no
    enabled filter hides it. Application is idempotent and does not
    depend on the order filters were added.
    """

    def __init__(self, filters: list[GraphFilter] | None = None):
        self._filters: list[GraphFilter] = list(filters or [])

    @classmethod
    def from_config(cls, config: FilterConfig) -> "FilterPipeline":
        return cls(config.build_filters())

    @property
    def filters(self) -> list[GraphFilter]:
        return list(self._filters)

    @property
    def enabled_filters(self) -> list[GraphFilter]:
        return [f for f in self._filters if f.enabled]

    def add(self, graph_filter: GraphFilter) -> None:
        self._filters.append(graph_filter)

    def remove(self, graph_filter: GraphFilter) -> None:
        self._filters.remove(graph_filter)

    def clear(self) -> None:
        self._filters.clear()

    def apply(self, graph: OntologyGraph) -> FilterResult:
        """Set visibility flags on the graph in place.

        Returns:
            The ids of the nodes and edges left visible.
        """
        verdict = FilterVerdict()
        for graph_filter in self.enabled_filters:
            verdict.merge(graph_filter.evaluate(graph))
        return _apply_verdict(graph, verdict)

    def reset(self, graph: OntologyGraph) -> FilterResult:
        """Restore default visibility, ignoring every filter."""
        return _apply_verdict(graph, FilterVerdict())


def _apply_verdict(graph: OntologyGraph, verdict: FilterVerdict) -> FilterResult:
    result = FilterResult()

    for node in graph.nodes():
        graph.set_visible(node.id, node.id not in verdict.hidden_nodes)
        node.collapsed = set(verdict.collapsed.get(node.id, set()))
        if node.visible:
            result.visible_nodes.add(node.id)

    for edge in graph.edges():
        graph.set_edge_visible(edge.id, edge.id not in verdict.hidden_edges)
        if edge.visible:
            result.visible_edges.add(edge.id)

    logger.debug(
        "Filters left %d of %d nodes and %d of %d edges visible",
        len(result.visible_nodes),
        graph.node_count(),
        len(result.visible_edges),
        graph.edge_count(),
    )
    return result
