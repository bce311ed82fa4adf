"""Entry points turning raw ontology descriptions into graphs."""

from pathlib import Path

from .graph.builder import build_graph
from .graph.model_graph import OntologyGraph
from .schema.loader import decode_document, load_document


def parse(raw: dict) -> OntologyGraph:
    """Parse a raw structural description into an OntologyGraph.

    Performs no I/O. Either the whole description is accepted or an
    error is raised; no partial graph is ever returned.

    Args:
        raw: The raw description (``header``, ``namespace``, ``class``,
            ``classAttribute``, ``property``, ``propertyAttribute``).

    Returns:
        The built graph with its topology frozen.

    Raises:
        MalformedError: If the description is structurally invalid.
        DanglingReferenceError: If a reference names an unknown node.
        UnknownTypeError: If a type tag is not recognized.
    """
    return build_graph(decode_document(raw))


def parse_file(path: str | Path) -> OntologyGraph:
    """Load a JSON or YAML description file and parse it.

    Raises:
        SchemaLoadError: If the file cannot be loaded.
        ParseError: If the description cannot be parsed.
    """
    return parse(load_document(path))
