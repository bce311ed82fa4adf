"""Builder for converting an OntologyDocument into an OntologyGraph."""

import logging
from typing import Any

import networkx as nx

from ..schema.errors import DanglingReferenceError, MalformedError, UnknownTypeError
from ..schema.models import OntologyDocument
from .model_graph import (
    Edge,
    Node,
    OntologyGraph,
    OntologyMetadata,
    compute_radius,
    local_name,
    pick_label,
)
from .node_types import (
    EDGE_TYPE_TAGS,
    NODE_TYPE_TAGS,
    SET_OPERATOR_KEYS,
    EdgeType,
    NodeType,
)

logger = logging.getLogger(__name__)

CHARACTERISTIC_TYPES = {
    EdgeType.FUNCTIONAL: "functional",
    EdgeType.INVERSE_FUNCTIONAL: "inverse_functional",
    EdgeType.TRANSITIVE: "transitive",
    EdgeType.SYMMETRIC: "symmetric",
}


def build_graph(document: OntologyDocument) -> OntologyGraph:
    """Build a frozen OntologyGraph from a decoded document.

    Args:
        document: The decoded ontology description.

    Returns:
        An OntologyGraph with its topology frozen.

    Raises:
        MalformedError: On duplicate ids or incomplete records.
        DanglingReferenceError: If a reference names an unknown id.
        UnknownTypeError: If a type tag is not recognized.
    """
    class_records = _merge_records(
        [c.model_dump() for c in document.all_classes()],
        [a.model_dump() for a in document.all_class_attributes()],
        kind="class",
    )
    property_records = _merge_records(
        [p.model_dump() for p in document.properties],
        [a.model_dump() for a in document.property_attributes],
        kind="property",
    )

    nodes = {record["id"]: _build_node(record) for record in class_records}
    representatives = _merge_equivalent_nodes(nodes, class_records)

    edges = [_build_edge(record, nodes, representatives) for record in property_records]
    edges.extend(_resolve_inverses(edges, property_records))
    _merge_equivalent_edges(edges, property_records)
    edges.extend(_build_set_operator_edges(class_records, nodes, representatives))

    graph = OntologyGraph(_build_metadata(document))
    for node in nodes.values():
        graph.add_node(node)
    for edge in edges:
        try:
            graph.add_edge(edge)
        except ValueError as e:
            raise MalformedError(str(e)) from e
    graph.freeze()

    logger.debug(
        "Built graph with %d nodes and %d edges", graph.node_count(), graph.edge_count()
    )
    return graph


def _build_metadata(document: OntologyDocument) -> OntologyMetadata:
    header = document.header
    return OntologyMetadata(
        iri=header.iri,
        title=dict(header.title),
        version=header.version,
        description=dict(header.description),
        authors=list(header.author),
        namespaces={ns.prefix: ns.iri for ns in document.namespace},
    )


# -----------------------------------------------------------------------------
# Record merging
# -----------------------------------------------------------------------------


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}


def _fill_gaps(primary: dict, secondary: dict) -> None:
    """Fill empty fields of primary from secondary, in place.

    Language maps are merged per language, primary entries win.
    """
    for key, value in secondary.items():
        current = primary.get(key)
        if _is_empty(current):
            primary[key] = value
        elif isinstance(current, dict) and isinstance(value, dict):
            primary[key] = {**value, **current}


def _merge_records(
    records: list[dict], attribute_records: list[dict], kind: str
) -> list[dict]:
    """Merge attribute records into their primary records by id."""
    by_id: dict[str, dict] = {}
    for record in records:
        if record["id"] in by_id:
            raise MalformedError(f"Duplicate {kind} id '{record['id']}'")
        by_id[record["id"]] = record

    for attribute in attribute_records:
        record = by_id.get(attribute["id"])
        if record is None:
            logger.debug("Ignoring %s attributes for unknown id '%s'", kind, attribute["id"])
            continue
        _fill_gaps(record, attribute)

    return list(by_id.values())


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


# -----------------------------------------------------------------------------
# Nodes
# -----------------------------------------------------------------------------


def _resolve_node_type(record: dict) -> NodeType:
    tag = record["type"]
    node_type = NODE_TYPE_TAGS.get(tag)
    if node_type is None:
        raise UnknownTypeError(tag, record["id"])

    flags = {a.lower() for a in record["attributes"]}
    if node_type == NodeType.CLASS:
        if "deprecated" in flags:
            return NodeType.DEPRECATED
        if "external" in flags:
            return NodeType.EXTERNAL
    return node_type


def _build_node(record: dict) -> Node:
    node_id = record["id"]
    iri = record["iri"] or node_id

    labels = dict(record["label"])
    if not pick_label(labels):
        labels = {"IRI-based": local_name(iri) or node_id}

    x, y = record["x"], record["y"]
    if (x is None) != (y is None):
        raise MalformedError(f"Class '{node_id}' has only one coordinate")
    position = (float(x), float(y)) if x is not None else None

    return Node(
        id=node_id,
        type=_resolve_node_type(record),
        iri=iri,
        labels=labels,
        comment=dict(record["comment"]),
        position=position,
        pinned=bool(record["pinned"]),
        individuals=_unique([i["iri"] for i in record["individuals"]]),
        attributes={a.lower() for a in record["attributes"]},
    )


def _merge_equivalent_nodes(
    nodes: dict[str, Node], class_records: list[dict]
) -> dict[str, str]:
    """Collapse equivalence clusters onto their lowest id.

    Returns:
        A mapping from merged-away node id to its representative id.
    """
    clusters = nx.Graph()
    for record in class_records:
        for other in record["equivalent"]:
            if other not in nodes:
                raise DanglingReferenceError(other, record["id"])
            if other != record["id"]:
                clusters.add_edge(record["id"], other)

    representatives: dict[str, str] = {}
    for component in nx.connected_components(clusters):
        members = sorted(component)
        rep = nodes[members[0]]
        for member_id in members[1:]:
            member = nodes[member_id]
            rep.attributes |= member.attributes
            rep.individuals = _unique(rep.individuals + member.individuals)
            rep.labels = {**member.labels, **rep.labels}
            rep.comment = {**member.comment, **rep.comment}
            rep.equivalents.append(member_id)

            member.visible = False
            member.equivalent_group = rep.id
            representatives[member_id] = rep.id

        rep.radius = compute_radius(rep.type, len(rep.individuals))
        logger.debug("Merged equivalent classes %s into '%s'", members[1:], rep.id)

    return representatives


# -----------------------------------------------------------------------------
# Edges
# -----------------------------------------------------------------------------


def _resolve_reference(
    ref: str | None,
    field_name: str,
    owner: str,
    nodes: dict[str, Node],
    representatives: dict[str, str],
) -> str:
    if ref is None:
        raise MalformedError(f"Property '{owner}' is missing its {field_name}")
    if ref not in nodes:
        raise DanglingReferenceError(ref, owner)
    return representatives.get(ref, ref)


def _characteristics(record: dict, edge_type: EdgeType) -> set[str]:
    flags = {
        a.lower().replace(" ", "_").replace("inversefunctional", "inverse_functional")
        for a in record["attributes"]
    }
    result = flags & set(CHARACTERISTIC_TYPES.values())
    if edge_type in CHARACTERISTIC_TYPES:
        result.add(CHARACTERISTIC_TYPES[edge_type])
    return result


def _cardinality(record: dict) -> dict[str, int]:
    values = {
        "min": record["min_cardinality"],
        "max": record["max_cardinality"],
        "exact": record["cardinality"],
    }
    return {key: value for key, value in values.items() if value is not None}


def _build_edge(
    record: dict, nodes: dict[str, Node], representatives: dict[str, str]
) -> Edge:
    edge_id = record["id"]
    edge_type = EDGE_TYPE_TAGS.get(record["type"])
    if edge_type is None:
        raise UnknownTypeError(record["type"], edge_id)

    source = _resolve_reference(record["domain"], "domain", edge_id, nodes, representatives)
    target = _resolve_reference(record["range"], "range", edge_id, nodes, representatives)

    iri = record["iri"] or edge_id
    labels = dict(record["label"])
    label = pick_label(labels) or local_name(iri) or edge_id

    return Edge(
        id=edge_id,
        type=edge_type,
        source=source,
        target=target,
        label=label,
        iri=iri,
        labels=labels,
        characteristics=_characteristics(record, edge_type),
        cardinality=_cardinality(record),
    )


def _resolve_inverses(edges: list[Edge], records: list[dict]) -> list[Edge]:
    """Link declared inverse pairs and synthesize missing directions.

    Returns:
        The synthesized edges, in declaration order of their partners.
    """
    by_id = {edge.id: edge for edge in edges}
    synthesized: list[Edge] = []

    for edge, record in zip(edges, records):
        inverse_id = record["inverse"]
        if not inverse_id or inverse_id == edge.id:
            continue

        partner = by_id.get(inverse_id)
        if partner is None:
            partner = Edge(
                id=inverse_id,
                type=edge.type,
                source=edge.target,
                target=edge.source,
                label=f"inverse of {edge.label}",
                iri=inverse_id,
                characteristics=set(edge.characteristics),
            )
            by_id[inverse_id] = partner
            synthesized.append(partner)
            logger.debug("Synthesized inverse '%s' of '%s'", inverse_id, edge.id)

        edge.inverse_edge_id = partner.id
        if partner.inverse_edge_id is None:
            partner.inverse_edge_id = edge.id

    return synthesized


def _merge_equivalent_edges(edges: list[Edge], records: list[dict]) -> None:
    """Collapse equivalent properties onto their lowest id."""
    by_id = {edge.id: edge for edge in edges}
    clusters = nx.Graph()
    for record in records:
        for other in record["equivalent"]:
            if other not in by_id:
                raise DanglingReferenceError(other, record["id"])
            if other != record["id"]:
                clusters.add_edge(record["id"], other)

    for component in nx.connected_components(clusters):
        members = sorted(component)
        rep = by_id[members[0]]
        for member_id in members[1:]:
            member = by_id[member_id]
            rep.characteristics |= member.characteristics
            rep.labels = {**member.labels, **rep.labels}
            member.visible = False
            member.equivalent_group = rep.id


def _build_set_operator_edges(
    class_records: list[dict],
    nodes: dict[str, Node],
    representatives: dict[str, str],
) -> list[Edge]:
    """Create one owner -> operand edge per listed set operand."""
    edges: list[Edge] = []
    for record in class_records:
        owner = record["id"]
        for key, op_name in SET_OPERATOR_KEYS.items():
            for index, operand in enumerate(record[key]):
                if operand not in nodes:
                    raise DanglingReferenceError(operand, owner)
                edges.append(
                    Edge(
                        id=f"{op_name}-{owner}-{operand}-{index}",
                        type=EdgeType.SET_OPERATOR_LINK,
                        source=representatives.get(owner, owner),
                        target=representatives.get(operand, operand),
                        label=op_name,
                    )
                )
    return edges
