"""Tests for subclass hierarchy collapse."""

from owlviz.filters.node_type import NodeTypeFilter
from owlviz.filters.pipeline import FilterPipeline
from owlviz.filters.subclass_collapse import SubclassCollapseFilter
from owlviz.graph.node_types import NodeType
from owlviz.parser import parse


class TestSubclassCollapse:
    def test_chain_collapses_onto_root(self, chain_graph):
        result = FilterPipeline([SubclassCollapseFilter()]).apply(chain_graph)

        assert result.visible_nodes == {"C"}
        assert result.visible_edges == set()
        assert not chain_graph.node("A").visible
        assert not chain_graph.node("B").visible
        assert chain_graph.node("C").collapsed == {"A", "B"}

    def test_disabled_filter_shows_hierarchy(self, chain_graph):
        result = FilterPipeline([SubclassCollapseFilter(enabled=False)]).apply(chain_graph)

        assert result.visible_nodes == {"A", "B", "C"}
        assert result.visible_edges == {"s1", "s2"}
        assert chain_graph.node("C").collapsed == set()

    def test_expand_root(self, chain_graph):
        collapse = SubclassCollapseFilter()
        pipeline = FilterPipeline([collapse])
        pipeline.apply(chain_graph)

        collapse.expand("C")
        result = pipeline.apply(chain_graph)

        assert result.visible_nodes == {"A", "B", "C"}
        assert result.visible_edges == {"s1", "s2"}
        assert chain_graph.node("C").collapsed == set()

    def test_collapse_again_after_expand(self, chain_graph):
        collapse = SubclassCollapseFilter()
        pipeline = FilterPipeline([collapse])
        collapse.expand("C")
        pipeline.apply(chain_graph)

        collapse.collapse("C")
        result = pipeline.apply(chain_graph)

        assert result.visible_nodes == {"C"}

    def test_hides_edges_touching_descendants(self, family_graph):
        result = FilterPipeline([SubclassCollapseFilter()]).apply(family_graph)

        assert result.visible_nodes == {"1", "2", "6", "7", "8"}
        assert result.visible_edges == {"p4"}
        assert family_graph.node("2").collapsed == {"3", "4"}

    def test_composes_with_other_filters(self, family_graph):
        pipeline = FilterPipeline(
            [SubclassCollapseFilter(), NodeTypeFilter([NodeType.CLASS, NodeType.DATATYPE])]
        )

        result = pipeline.apply(family_graph)

        assert result.visible_nodes == {"2", "8"}
        assert family_graph.node("2").collapsed == {"3", "4"}

    def test_diamond_hierarchy(self):
        graph = parse({
            "class": [
                {"id": "Top", "type": "owl:Class"},
                {"id": "L", "type": "owl:Class"},
                {"id": "R", "type": "owl:Class"},
                {"id": "Bottom", "type": "owl:Class"},
            ],
            "property": [
                {"id": "s1", "type": "rdfs:SubClassOf", "domain": "L", "range": "Top"},
                {"id": "s2", "type": "rdfs:SubClassOf", "domain": "R", "range": "Top"},
                {"id": "s3", "type": "rdfs:SubClassOf", "domain": "Bottom", "range": "L"},
                {"id": "s4", "type": "rdfs:SubClassOf", "domain": "Bottom", "range": "R"},
            ],
        })

        result = FilterPipeline([SubclassCollapseFilter()]).apply(graph)

        assert result.visible_nodes == {"Top"}
        assert graph.node("Top").collapsed == {"L", "R", "Bottom"}

    def test_subclass_self_loop_is_ignored(self):
        graph = parse({
            "class": [{"id": "A", "type": "owl:Class"}],
            "property": [
                {"id": "s1", "type": "rdfs:SubClassOf", "domain": "A", "range": "A"},
            ],
        })

        result = FilterPipeline([SubclassCollapseFilter()]).apply(graph)

        assert result.visible_nodes == {"A"}
        assert result.visible_edges == set()
