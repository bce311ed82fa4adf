"""OntologyGraph wrapper around networkx for parsed ontologies."""

import math
from dataclasses import dataclass, field
from typing import Iterator

import networkx as nx

from .node_types import BASE_RADIUS, DEFAULT_REST_LENGTHS, EdgeType, NodeType

Vector = tuple[float, float]

# Display label lookup order.
PREFERRED_LANGUAGES = ("en", "undefined", "IRI-based")


class GraphFrozenError(Exception):
    """Raised when the topology of a built graph is modified."""


def local_name(iri: str) -> str:
    """Get the local name of an IRI (the part after '#' or the last '/')."""
    stripped = iri.rstrip("/#")
    for separator in ("#", "/", ":"):
        if separator in stripped:
            return stripped.rsplit(separator, 1)[1]
    return stripped


def pick_label(labels: dict[str, str]) -> str | None:
    """Pick a display label from a language map."""
    for language in PREFERRED_LANGUAGES:
        if labels.get(language):
            return labels[language]
    for language in sorted(labels):
        if labels[language]:
            return labels[language]
    return None


def compute_radius(node_type: NodeType, individual_count: int = 0) -> float:
    """Compute a node radius scaled by its number of individuals."""
    base = BASE_RADIUS[node_type]
    if individual_count <= 0:
        return base
    return base * (1.0 + math.log10(1 + individual_count))


@dataclass
class Node:
    """A class-like node of the ontology graph."""

    id: str
    type: NodeType
    iri: str
    labels: dict[str, str] = field(default_factory=dict)
    comment: dict[str, str] = field(default_factory=dict)
    position: Vector | None = None
    velocity: Vector = (0.0, 0.0)
    pinned: bool = False
    visible: bool = True
    radius: float = 0.0
    equivalent_group: str | None = None
    individuals: list[str] = field(default_factory=list)
    attributes: set[str] = field(default_factory=set)
    equivalents: list[str] = field(default_factory=list)
    collapsed: set[str] = field(default_factory=set)

    def __post_init__(self):
        if not self.radius:
            self.radius = compute_radius(self.type, len(self.individuals))

    @property
    def label(self) -> str:
        return pick_label(self.labels) or local_name(self.iri) or self.id

    @property
    def merged(self) -> bool:
        """Whether this node was merged into an equivalence representative."""
        return self.equivalent_group is not None


@dataclass
class Edge:
    """A property instance connecting two nodes."""

    id: str
    type: EdgeType
    source: str
    target: str
    label: str = ""
    iri: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    inverse_edge_id: str | None = None
    characteristics: set[str] = field(default_factory=set)
    cardinality: dict[str, int] = field(default_factory=dict)
    visible: bool = True
    equivalent_group: str | None = None

    @property
    def rest_length(self) -> float:
        return DEFAULT_REST_LENGTHS[self.type]

    @property
    def merged(self) -> bool:
        return self.equivalent_group is not None

    @property
    def is_loop(self) -> bool:
        return self.source == self.target


@dataclass
class OntologyMetadata:
    """Descriptive metadata from the ontology header."""

    iri: str = ""
    title: dict[str, str] = field(default_factory=dict)
    version: str | None = None
    description: dict[str, str] = field(default_factory=dict)
    authors: list[str] = field(default_factory=list)
    namespaces: dict[str, str] = field(default_factory=dict)


class OntologyGraph:
    """A graph representation of a parsed ontology.

    Wraps a networkx MultiDiGraph keyed by node id and edge id. The
    topology is frozen once the builder is done; afterwards only the
    position, velocity, pinned and visible fields change.
    """

    def __init__(self, metadata: OntologyMetadata | None = None):
        """Initialize an empty ontology graph."""
        self._graph = nx.MultiDiGraph()
        self._edges: dict[str, Edge] = {}
        self.metadata = metadata or OntologyMetadata()

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Get the underlying networkx graph."""
        return self._graph

    @property
    def frozen(self) -> bool:
        return nx.is_frozen(self._graph)

    # -------------------------------------------------------------------------
    # Construction (builder only)
    # -------------------------------------------------------------------------

    def add_node(self, node: Node) -> None:
        """Add a node to the graph.

        Raises:
            GraphFrozenError: If the graph has already been frozen.
            ValueError: If a node with the same id exists.
        """
        if self.frozen:
            raise GraphFrozenError(f"Cannot add node '{node.id}' to a frozen graph")
        if self._graph.has_node(node.id):
            raise ValueError(f"Duplicate node id '{node.id}'")
        self._graph.add_node(node.id, node=node)

    def add_edge(self, edge: Edge) -> None:
        """Add an edge between two existing nodes.

        Raises:
            GraphFrozenError: If the graph has already been frozen.
            ValueError: If the id is taken or an endpoint is missing.
        """
        if self.frozen:
            raise GraphFrozenError(f"Cannot add edge '{edge.id}' to a frozen graph")
        if edge.id in self._edges:
            raise ValueError(f"Duplicate edge id '{edge.id}'")
        for endpoint in (edge.source, edge.target):
            if not self._graph.has_node(endpoint):
                raise ValueError(f"Edge '{edge.id}' references unknown node '{endpoint}'")
        self._edges[edge.id] = edge
        self._graph.add_edge(edge.source, edge.target, key=edge.id, edge=edge)

    def freeze(self) -> None:
        """Freeze the topology. Node and edge fields stay mutable."""
        nx.freeze(self._graph)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def node(self, node_id: str) -> Node | None:
        """Get a node by id."""
        if self._graph.has_node(node_id):
            return self._graph.nodes[node_id]["node"]
        return None

    def edge(self, edge_id: str) -> Edge | None:
        """Get an edge by id."""
        return self._edges.get(edge_id)

    def has_node(self, node_id: str) -> bool:
        return self._graph.has_node(node_id)

    def nodes(self) -> list[Node]:
        """Get all nodes in insertion order."""
        return [data["node"] for _, data in self._graph.nodes(data=True)]

    def edges(self) -> list[Edge]:
        """Get all edges in insertion order."""
        return list(self._edges.values())

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return len(self._edges)

    def incident_edges(self, node_id: str) -> Iterator[Edge]:
        """Iterate over edges where the node is source or target.

        Edges merged into an equivalent property are skipped.
        """
        for edge in self._edges.values():
            if edge.merged:
                continue
            if edge.source == node_id or edge.target == node_id:
                yield edge

    def degree(self, node_id: str) -> int:
        """Count edges incident to a node in either direction.

        A self-loop counts once.
        """
        return sum(1 for _ in self.incident_edges(node_id))

    def neighbors(self, node_id: str) -> Iterator[str]:
        """Iterate over adjacent node ids in edge order, without duplicates."""
        seen = {node_id}
        for edge in self.incident_edges(node_id):
            other = edge.target if edge.source == node_id else edge.source
            if other not in seen:
                seen.add(other)
                yield other

    def visible_nodes(self) -> Iterator[Node]:
        return (node for node in self.nodes() if node.visible)

    def visible_edges(self) -> Iterator[Edge]:
        return (edge for edge in self._edges.values() if edge.visible)

    def subclass_parents(self, node_id: str) -> list[str]:
        """Get the superclasses of a node via SUBCLASS_OF edges."""
        return [
            target
            for _, target, data in self._graph.out_edges(node_id, data=True)
            if data["edge"].type == EdgeType.SUBCLASS_OF
        ]

    def subclass_children(self, node_id: str) -> list[str]:
        """Get the direct subclasses of a node via SUBCLASS_OF edges."""
        return [
            source
            for source, _, data in self._graph.in_edges(node_id, data=True)
            if data["edge"].type == EdgeType.SUBCLASS_OF
        ]

    def visible_subgraph(self) -> nx.MultiDiGraph:
        """Get a read-only view restricted to visible nodes and edges."""
        return nx.subgraph_view(
            self._graph,
            filter_node=lambda n: self._graph.nodes[n]["node"].visible,
            filter_edge=lambda u, v, k: self._edges[k].visible,
        )

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------

    def set_visible(self, node_id: str, visible: bool) -> None:
        """Set node visibility. Merged equivalents always stay hidden."""
        node = self.node(node_id)
        if node is not None:
            node.visible = visible and not node.merged

    def set_edge_visible(self, edge_id: str, visible: bool) -> None:
        """Set edge visibility. Edges to hidden endpoints stay hidden."""
        edge = self._edges.get(edge_id)
        if edge is None:
            return
        if visible:
            visible = (
                not edge.merged
                and self.node(edge.source).visible
                and self.node(edge.target).visible
            )
        edge.visible = visible

    def set_position(self, node_id: str, position: Vector) -> None:
        node = self.node(node_id)
        if node is not None:
            node.position = (float(position[0]), float(position[1]))

    def set_velocity(self, node_id: str, velocity: Vector) -> None:
        node = self.node(node_id)
        if node is not None:
            node.velocity = (float(velocity[0]), float(velocity[1]))

    def set_pinned(self, node_id: str, pinned: bool) -> None:
        """Pin or release a node. Pinned nodes lose their velocity."""
        node = self.node(node_id)
        if node is not None:
            node.pinned = pinned
            if pinned:
                node.velocity = (0.0, 0.0)
