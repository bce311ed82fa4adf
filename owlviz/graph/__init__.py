"""Graph layer for representing ontologies as networkx graphs."""

from .node_types import EdgeType, NodeType
from .model_graph import (
    Edge,
    GraphFrozenError,
    Node,
    OntologyGraph,
    OntologyMetadata,
)
from .builder import build_graph

__all__ = [
    "EdgeType",
    "NodeType",
    "Edge",
    "GraphFrozenError",
    "Node",
    "OntologyGraph",
    "OntologyMetadata",
    "build_graph",
]
