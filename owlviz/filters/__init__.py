"""Visibility filters and search ranking for ontology graphs."""

from .base import FilterVerdict, GraphFilter
from .degree import DegreeFilter
from .edge_type import EdgeTypeFilter
from .node_type import NodeTypeFilter
from .pipeline import FilterConfig, FilterPipeline, FilterResult
from .search import MatchKind, SearchFilter, SearchMatch
from .subclass_collapse import SubclassCollapseFilter

__all__ = [
    "FilterVerdict",
    "GraphFilter",
    "DegreeFilter",
    "EdgeTypeFilter",
    "NodeTypeFilter",
    "FilterConfig",
    "FilterPipeline",
    "FilterResult",
    "MatchKind",
    "SearchFilter",
    "SearchMatch",
    "SubclassCollapseFilter",
]
