"""Search ranking over node labels, IRIs and comments."""

from dataclasses import dataclass
from enum import IntEnum

from ..graph.model_graph import Node, OntologyGraph

FUZZY_THRESHOLD = 0.8


class MatchKind(IntEnum):
    """How a node matched a query. Lower values rank first."""

    EXACT = 0
    PREFIX = 1
    SUBSTRING = 2
    FUZZY = 3
    IRI = 4
    COMMENT = 5


@dataclass(frozen=True)
class SearchMatch:
    """A single ranked search hit."""

    node_id: str
    label: str
    kind: MatchKind
    score: float

    def __str__(self) -> str:
        return f"{self.kind.name.lower()}: {self.label} ({self.node_id})"


def levenshtein(a: str, b: str) -> int:
    """Compute the edit distance between two strings."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (char_a != char_b),
                )
            )
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Levenshtein similarity in ``[0, 1]``; 1 means identical."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein(a, b) / longest


class SearchFilter:
    """Rank nodes against a query for highlighting; never hides anything.

    Matches are ordered by kind (exact label, label prefix, label
    substring, fuzzy label, IRI substring, comment substring), then by
    label similarity, label and id. Comparisons ignore case.
    """

    def __init__(self, query: str, visible_only: bool = False):
        self.query = query.strip()
        self.visible_only = visible_only

    def rank(self, graph: OntologyGraph) -> list[SearchMatch]:
        if not self.query:
            return []

        matches = []
        for node in graph.nodes():
            if node.merged or (self.visible_only and not node.visible):
                continue
            match = self.match(node)
            if match is not None:
                matches.append(match)

        matches.sort(key=lambda m: (m.kind, -m.score, m.label.lower(), m.node_id))
        return matches

    def match(self, node: Node) -> SearchMatch | None:
        """Find the best way a node matches the query, if any."""
        query = self.query.lower()
        labels = [text.lower() for text in node.labels.values() if text]
        best_score = max((similarity(query, label) for label in labels), default=0.0)

        kind = None
        if query in labels:
            kind = MatchKind.EXACT
        elif any(label.startswith(query) for label in labels):
            kind = MatchKind.PREFIX
        elif any(query in label for label in labels):
            kind = MatchKind.SUBSTRING
        elif best_score >= FUZZY_THRESHOLD:
            kind = MatchKind.FUZZY
        elif query in node.iri.lower():
            kind = MatchKind.IRI
        elif any(query in text.lower() for text in node.comment.values()):
            kind = MatchKind.COMMENT

        if kind is None:
            return None
        return SearchMatch(node_id=node.id, label=node.label, kind=kind, score=best_score)
