"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from owlviz.parser import parse, parse_file


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def minimal_raw() -> dict:
    """Return two classes joined by one object property."""
    return {
        "header": {"iri": "http://example.org/test", "title": "Test Ontology"},
        "namespace": [{"prefix": "ex", "iri": "http://example.org/test#"}],
        "class": [
            {"id": "A", "type": "owl:Class", "label": {"en": "A"}},
            {"id": "B", "type": "owl:Class", "label": {"en": "B"}},
        ],
        "property": [
            {
                "id": "p1",
                "type": "owl:ObjectProperty",
                "domain": "A",
                "range": "B",
                "label": {"en": "relates to"},
            }
        ],
    }


@pytest.fixture
def chain_raw() -> dict:
    """Return a subclass chain A -> B -> C."""
    return {
        "class": [
            {"id": "A", "type": "owl:Class", "label": "A"},
            {"id": "B", "type": "owl:Class", "label": "B"},
            {"id": "C", "type": "owl:Class", "label": "C"},
        ],
        "property": [
            {"id": "s1", "type": "rdfs:SubClassOf", "domain": "A", "range": "B"},
            {"id": "s2", "type": "rdfs:SubClassOf", "domain": "B", "range": "C"},
        ],
    }


@pytest.fixture
def equivalent_raw() -> dict:
    """Return two equivalent classes with their own individuals."""
    return {
        "class": [
            {"id": "X", "type": "owl:Class", "label": {"en": "X"}},
            {"id": "Y", "type": "owl:Class", "label": {"en": "Y", "de": "Ypsilon"}},
        ],
        "classAttribute": [
            {
                "id": "X",
                "equivalent": ["Y"],
                "individuals": ["http://example.org/x1", "http://example.org/shared"],
            },
            {
                "id": "Y",
                "individuals": ["http://example.org/y1", "http://example.org/shared"],
            },
        ],
        "property": [],
    }


@pytest.fixture
def minimal_graph(minimal_raw):
    """Return a graph parsed from the minimal description."""
    return parse(minimal_raw)


@pytest.fixture
def chain_graph(chain_raw):
    return parse(chain_raw)


@pytest.fixture
def family_graph(examples_dir):
    """Return the graph of the family example ontology."""
    return parse_file(examples_dir / "family.yaml")
