"""Node and edge type definitions for the ontology graph."""

from enum import Enum


class NodeType(str, Enum):
    """Types of nodes in the ontology graph."""

    CLASS = "class"
    THING = "thing"
    NOTHING = "nothing"
    DATATYPE = "datatype"
    EXTERNAL = "external"
    DEPRECATED = "deprecated"

    # Set operators
    UNION = "union"
    INTERSECTION = "intersection"
    COMPLEMENT = "complement"
    DISJOINT_UNION = "disjoint_union"

    @property
    def is_set_operator(self) -> bool:
        return self in SET_OPERATOR_TYPES


class EdgeType(str, Enum):
    """Types of edges (property instances) in the ontology graph."""

    OBJECT_PROPERTY = "object_property"
    DATATYPE_PROPERTY = "datatype_property"

    # Class axioms
    SUBCLASS_OF = "subclass_of"
    DISJOINT_WITH = "disjoint_with"
    EQUIVALENT_CLASS = "equivalent_class"

    # Property axioms
    INVERSE = "inverse"
    TRANSITIVE = "transitive"
    SYMMETRIC = "symmetric"
    FUNCTIONAL = "functional"
    INVERSE_FUNCTIONAL = "inverse_functional"

    # Restrictions
    ALL_VALUES_FROM = "all_values_from"
    SOME_VALUES_FROM = "some_values_from"

    # Owner -> operand, synthesized for set operator nodes
    SET_OPERATOR_LINK = "set_operator_link"


SET_OPERATOR_TYPES = frozenset({
    NodeType.UNION,
    NodeType.INTERSECTION,
    NodeType.COMPLEMENT,
    NodeType.DISJOINT_UNION,
})

NODE_TYPE_TAGS: dict[str, NodeType] = {
    "owl:Class": NodeType.CLASS,
    "rdfs:Class": NodeType.CLASS,
    "owl:equivalentClass": NodeType.CLASS,
    "owl:Thing": NodeType.THING,
    "owl:Nothing": NodeType.NOTHING,
    "rdfs:Datatype": NodeType.DATATYPE,
    "rdfs:Literal": NodeType.DATATYPE,
    "owl:ExternalClass": NodeType.EXTERNAL,
    "owl:DeprecatedClass": NodeType.DEPRECATED,
    "owl:unionOf": NodeType.UNION,
    "owl:intersectionOf": NodeType.INTERSECTION,
    "owl:complementOf": NodeType.COMPLEMENT,
    "owl:disjointUnionOf": NodeType.DISJOINT_UNION,
}

EDGE_TYPE_TAGS: dict[str, EdgeType] = {
    "owl:ObjectProperty": EdgeType.OBJECT_PROPERTY,
    "owl:DatatypeProperty": EdgeType.DATATYPE_PROPERTY,
    "rdfs:SubClassOf": EdgeType.SUBCLASS_OF,
    "owl:disjointWith": EdgeType.DISJOINT_WITH,
    "owl:equivalentClass": EdgeType.EQUIVALENT_CLASS,
    "owl:inverseOf": EdgeType.INVERSE,
    "owl:TransitiveProperty": EdgeType.TRANSITIVE,
    "owl:SymmetricProperty": EdgeType.SYMMETRIC,
    "owl:FunctionalProperty": EdgeType.FUNCTIONAL,
    "owl:InverseFunctionalProperty": EdgeType.INVERSE_FUNCTIONAL,
    "owl:allValuesFrom": EdgeType.ALL_VALUES_FROM,
    "owl:someValuesFrom": EdgeType.SOME_VALUES_FROM,
}

# Keys of the class attribute lists that describe set operator operands.
SET_OPERATOR_KEYS: dict[str, str] = {
    "union": "union",
    "intersection": "intersection",
    "complement": "complement",
    "disjoint_union": "disjointUnion",
}

BASE_RADIUS: dict[NodeType, float] = {
    NodeType.CLASS: 50.0,
    NodeType.EXTERNAL: 50.0,
    NodeType.DEPRECATED: 50.0,
    NodeType.THING: 30.0,
    NodeType.NOTHING: 30.0,
    NodeType.DATATYPE: 25.0,
    NodeType.UNION: 40.0,
    NodeType.INTERSECTION: 40.0,
    NodeType.COMPLEMENT: 40.0,
    NodeType.DISJOINT_UNION: 40.0,
}

DEFAULT_CLASS_DISTANCE = 200.0
DEFAULT_DATATYPE_DISTANCE = 120.0

DEFAULT_REST_LENGTHS: dict[EdgeType, float] = {
    EdgeType.OBJECT_PROPERTY: DEFAULT_CLASS_DISTANCE,
    EdgeType.DATATYPE_PROPERTY: DEFAULT_DATATYPE_DISTANCE,
    EdgeType.SUBCLASS_OF: DEFAULT_CLASS_DISTANCE,
    EdgeType.DISJOINT_WITH: 250.0,
    EdgeType.EQUIVALENT_CLASS: DEFAULT_CLASS_DISTANCE,
    EdgeType.INVERSE: DEFAULT_CLASS_DISTANCE,
    EdgeType.TRANSITIVE: DEFAULT_CLASS_DISTANCE,
    EdgeType.SYMMETRIC: DEFAULT_CLASS_DISTANCE,
    EdgeType.FUNCTIONAL: DEFAULT_CLASS_DISTANCE,
    EdgeType.INVERSE_FUNCTIONAL: DEFAULT_CLASS_DISTANCE,
    EdgeType.ALL_VALUES_FROM: DEFAULT_CLASS_DISTANCE,
    EdgeType.SOME_VALUES_FROM: DEFAULT_CLASS_DISTANCE,
    EdgeType.SET_OPERATOR_LINK: 100.0,
}
