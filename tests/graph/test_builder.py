"""Tests for parsing raw descriptions into graphs."""

import pytest

from owlviz.graph.node_types import EdgeType, NodeType
from owlviz.parser import parse, parse_file
from owlviz.schema.errors import (
    DanglingReferenceError,
    MalformedError,
    ParseError,
    UnknownTypeError,
)


def _snapshot(graph):
    nodes = {
        n.id: (n.type, n.iri, n.labels, n.visible, n.equivalent_group, tuple(n.individuals))
        for n in graph.nodes()
    }
    edges = {
        e.id: (e.type, e.source, e.target, e.label, e.inverse_edge_id, e.visible)
        for e in graph.edges()
    }
    return nodes, edges


class TestParseBasics:
    def test_two_classes_one_property(self, minimal_raw):
        graph = parse(minimal_raw)

        assert graph.node_count() == 2
        assert graph.edge_count() == 1
        assert graph.degree("A") == 1
        assert graph.degree("B") == 1

    def test_edge_endpoints_and_label(self, minimal_graph):
        edge = minimal_graph.edge("p1")

        assert edge.type == EdgeType.OBJECT_PROPERTY
        assert (edge.source, edge.target) == ("A", "B")
        assert edge.label == "relates to"
        assert edge.rest_length == 200.0

    def test_metadata(self, minimal_graph):
        metadata = minimal_graph.metadata

        assert metadata.iri == "http://example.org/test"
        assert metadata.title == {"undefined": "Test Ontology"}
        assert metadata.namespaces == {"ex": "http://example.org/test#"}

    def test_parse_is_idempotent(self, examples_dir):
        first = parse_file(examples_dir / "family.yaml")
        second = parse_file(examples_dir / "family.yaml")

        assert _snapshot(first) == _snapshot(second)

    def test_graph_is_frozen(self, minimal_graph):
        assert minimal_graph.frozen

    def test_empty_ontology(self):
        graph = parse({"class": [], "property": []})

        assert graph.node_count() == 0
        assert graph.edge_count() == 0


class TestAttributeMerging:
    def test_attribute_record_fills_gaps(self, examples_dir):
        graph = parse_file(examples_dir / "minimal.json")

        node = graph.node("A")
        assert node.iri == "http://example.org/minimal#Person"
        assert node.label == "Person"

    def test_label_falls_back_to_iri_local_name(self, examples_dir):
        graph = parse_file(examples_dir / "minimal.json")

        assert graph.node("B").label == "Organization"
        assert graph.node("B").labels == {"IRI-based": "Organization"}

    def test_label_falls_back_to_id(self):
        graph = parse({"class": [{"id": "Lonely", "type": "owl:Class"}], "property": []})

        assert graph.node("Lonely").label == "Lonely"

    def test_class_record_wins_over_attribute_record(self):
        graph = parse({
            "class": [{"id": "A", "type": "owl:Class", "label": {"en": "Primary"}}],
            "classAttribute": [{"id": "A", "label": {"en": "Secondary", "de": "Zweite"}}],
            "property": [],
        })

        assert graph.node("A").labels == {"en": "Primary", "de": "Zweite"}

    def test_external_attribute_changes_type(self, family_graph):
        assert family_graph.node("6").type == NodeType.EXTERNAL

    def test_explicit_position_and_pin(self):
        graph = parse({
            "class": [{"id": "A", "type": "owl:Class", "x": 10, "y": -5, "pinned": True}],
            "property": [],
        })

        node = graph.node("A")
        assert node.position == (10.0, -5.0)
        assert node.pinned

    def test_single_coordinate_is_malformed(self):
        with pytest.raises(MalformedError):
            parse({"class": [{"id": "A", "type": "owl:Class", "x": 10}], "property": []})

    def test_property_characteristics(self, family_graph):
        edge = family_graph.edge("p3")

        assert "functional" in edge.characteristics


class TestInverseResolution:
    def test_missing_direction_is_synthesized(self, family_graph):
        inverse = family_graph.edge("p3-inverse")

        assert inverse is not None
        assert (inverse.source, inverse.target) == ("4", "3")
        assert inverse.type == EdgeType.OBJECT_PROPERTY
        assert inverse.inverse_edge_id == "p3"
        assert family_graph.edge("p3").inverse_edge_id == "p3-inverse"

    def test_declared_pair_is_linked(self):
        graph = parse({
            "class": [
                {"id": "A", "type": "owl:Class"},
                {"id": "B", "type": "owl:Class"},
            ],
            "property": [
                {"id": "p", "type": "owl:ObjectProperty", "domain": "A", "range": "B", "inverse": "q"},
                {"id": "q", "type": "owl:ObjectProperty", "domain": "B", "range": "A"},
            ],
        })

        assert graph.edge_count() == 2
        assert graph.edge("p").inverse_edge_id == "q"
        assert graph.edge("q").inverse_edge_id == "p"


class TestEquivalenceMerging:
    def test_single_visible_representative(self, equivalent_raw):
        graph = parse(equivalent_raw)

        visible = [n.id for n in graph.visible_nodes()]
        assert visible == ["X"]

    def test_individuals_are_unioned(self, equivalent_raw):
        graph = parse(equivalent_raw)

        assert graph.node("X").individuals == [
            "http://example.org/x1",
            "http://example.org/shared",
            "http://example.org/y1",
        ]

    def test_hidden_member_points_at_representative(self, equivalent_raw):
        graph = parse(equivalent_raw)

        hidden = graph.node("Y")
        assert not hidden.visible
        assert hidden.equivalent_group == "X"
        assert graph.node("X").equivalents == ["Y"]

    def test_missing_languages_are_merged(self, equivalent_raw):
        graph = parse(equivalent_raw)

        assert graph.node("X").labels == {"en": "X", "de": "Ypsilon"}

    def test_radius_scales_with_individuals(self, equivalent_raw):
        graph = parse(equivalent_raw)

        assert graph.node("X").radius > graph.node("Y").radius

    def test_edges_are_redirected_to_representative(self, family_graph):
        # "5" (Human) is merged into "2" (Person)
        assert family_graph.node("5").equivalent_group == "2"
        assert all(e.source != "5" and e.target != "5" for e in family_graph.edges())

    def test_equivalent_properties(self):
        graph = parse({
            "class": [
                {"id": "A", "type": "owl:Class"},
                {"id": "B", "type": "owl:Class"},
            ],
            "property": [
                {"id": "p2", "type": "owl:ObjectProperty", "domain": "A", "range": "B",
                 "equivalent": ["p1"], "attributes": ["transitive"]},
                {"id": "p1", "type": "owl:ObjectProperty", "domain": "A", "range": "B"},
            ],
        })

        assert graph.edge("p1").visible
        assert "transitive" in graph.edge("p1").characteristics
        assert not graph.edge("p2").visible
        assert graph.edge("p2").equivalent_group == "p1"


class TestSetOperators:
    def test_operand_edges(self, family_graph):
        first = family_graph.edge("union-7-3-0")
        second = family_graph.edge("union-7-4-1")

        assert family_graph.node("7").type == NodeType.UNION
        assert first.type == EdgeType.SET_OPERATOR_LINK
        assert (first.source, first.target) == ("7", "3")
        assert (second.source, second.target) == ("7", "4")

    def test_unknown_operand(self):
        with pytest.raises(DanglingReferenceError) as exc_info:
            parse({
                "class": [{"id": "U", "type": "owl:unionOf", "union": ["ghost"]}],
                "property": [],
            })

        assert exc_info.value.ref_id == "ghost"


class TestParseErrors:
    def test_dangling_range(self, examples_dir):
        with pytest.raises(DanglingReferenceError) as exc_info:
            parse_file(examples_dir / "invalid" / "dangling_reference.json")

        assert exc_info.value.ref_id == "missing"
        assert exc_info.value.owner == "p1"

    def test_unknown_class_type(self, examples_dir):
        with pytest.raises(UnknownTypeError) as exc_info:
            parse_file(examples_dir / "invalid" / "unknown_type.json")

        assert exc_info.value.raw_type == "owl:Mystery"

    def test_unknown_property_type(self):
        with pytest.raises(UnknownTypeError):
            parse({
                "class": [{"id": "A", "type": "owl:Class"}],
                "property": [{"id": "p", "type": "rdf:Mystery", "domain": "A", "range": "A"}],
            })

    def test_missing_range(self):
        with pytest.raises(MalformedError) as exc_info:
            parse({
                "class": [{"id": "A", "type": "owl:Class"}],
                "property": [{"id": "p", "type": "owl:ObjectProperty", "domain": "A"}],
            })

        assert "range" in str(exc_info.value)

    def test_duplicate_class_id(self):
        with pytest.raises(MalformedError):
            parse({
                "class": [
                    {"id": "A", "type": "owl:Class"},
                    {"id": "A", "type": "owl:Thing"},
                ],
                "property": [],
            })

    def test_synthesized_id_collision(self):
        with pytest.raises(MalformedError):
            parse({
                "class": [
                    {"id": "U", "type": "owl:unionOf", "union": ["A"]},
                    {"id": "A", "type": "owl:Class"},
                ],
                "property": [
                    {"id": "union-U-A-0", "type": "owl:ObjectProperty", "domain": "A", "range": "U"},
                ],
            })

    def test_all_errors_share_a_base(self, examples_dir):
        with pytest.raises(ParseError):
            parse_file(examples_dir / "invalid" / "dangling_reference.json")

    def test_missing_arrays(self, examples_dir):
        with pytest.raises(MalformedError):
            parse_file(examples_dir / "invalid" / "missing_class_array.json")
