"""Output formatting for graph snapshots and statistics."""

from .formatter import (
    build_snapshot,
    format_search_results,
    format_snapshot,
    format_statistics,
)

__all__ = [
    "build_snapshot",
    "format_search_results",
    "format_snapshot",
    "format_statistics",
]
