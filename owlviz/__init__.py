"""owlviz: graph model, force layout and filters for OWL ontology diagrams."""

from .filters import FilterConfig, FilterPipeline, SearchFilter
from .graph import Edge, EdgeType, Node, NodeType, OntologyGraph
from .layout import ForceSimulation, LayoutConfig
from .parser import parse, parse_file
from .schema.errors import (
    DanglingReferenceError,
    MalformedError,
    ParseError,
    UnknownTypeError,
)
from .statistics import GraphStatistics, compute_statistics

__all__ = [
    "FilterConfig",
    "FilterPipeline",
    "SearchFilter",
    "Edge",
    "EdgeType",
    "Node",
    "NodeType",
    "OntologyGraph",
    "ForceSimulation",
    "LayoutConfig",
    "parse",
    "parse_file",
    "DanglingReferenceError",
    "MalformedError",
    "ParseError",
    "UnknownTypeError",
    "GraphStatistics",
    "compute_statistics",
]
