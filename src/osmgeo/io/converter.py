"""Converters between OSM JSON elements and domain models.

This module handles the conversion between the element dictionaries of the
OSM JSON format (as served by the Overpass API and the ``.json`` endpoints
of the OSM API) and our domain models (Node, Way, Relation).
"""

from collections.abc import Iterable, Mapping
from typing import Any

from osmgeo.domain.entity import Entity
from osmgeo.domain.factory import ENTITY_CLASSES, create_entity
from osmgeo.domain.ids import entity_id_from_osm, osm_id
from osmgeo.domain.node import Node
from osmgeo.domain.relation import Member, Relation
from osmgeo.domain.way import Way
from osmgeo.exceptions import GraphFormatError
from osmgeo.graph.graph import Graph


def _common_attrs(element: Mapping[str, Any], entity_type: str) -> dict[str, Any]:
    if "id" not in element:
        raise GraphFormatError(f"{entity_type} element without id")

    attrs: dict[str, Any] = {
        "id": entity_id_from_osm(entity_type, element["id"]),
        "tags": dict(element.get("tags") or {}),
        "visible": element.get("visible", True),
    }
    if element.get("version") is not None:
        attrs["version"] = str(element["version"])
    if element.get("user") is not None:
        attrs["user"] = element["user"]
    return attrs


def element_to_entity(element: Mapping[str, Any]) -> Entity:
    """Convert one OSM JSON element to a domain entity.

    Nodes without coordinates (as in ``out ids`` responses) get no location.

    Args:
        element: Element dictionary with at least ``type`` and ``id``

    Returns:
        Node, Way or Relation

    Raises:
        GraphFormatError: If the element type is unknown or required
            fields are missing
    """
    entity_type = element.get("type")
    if entity_type not in ENTITY_CLASSES:
        raise GraphFormatError(f"unknown element type {entity_type!r}")

    attrs = _common_attrs(element, entity_type)

    if entity_type == "node":
        if "lat" in element and "lon" in element:
            attrs["loc"] = (float(element["lon"]), float(element["lat"]))

    elif entity_type == "way":
        attrs["nodes"] = tuple(
            entity_id_from_osm("node", ref) for ref in element.get("nodes", ())
        )

    else:
        members = []
        for raw in element.get("members", ()):
            try:
                member_type = raw["type"]
                ref = raw["ref"]
            except KeyError as e:
                raise GraphFormatError(
                    f"relation {element['id']} has a member without {e.args[0]}"
                ) from e
            if member_type not in ENTITY_CLASSES:
                raise GraphFormatError(
                    f"relation {element['id']} has a member of unknown type {member_type!r}"
                )
            members.append(
                Member(
                    id=entity_id_from_osm(member_type, ref),
                    type=member_type,
                    role=raw.get("role", ""),
                )
            )
        attrs["members"] = tuple(members)

    return create_entity(entity_type, **attrs)


def entity_to_element(entity: Entity) -> dict[str, Any]:
    """Convert a domain entity back to an OSM JSON element."""
    element: dict[str, Any] = {"type": entity.type, "id": int(osm_id(entity.id))}

    if isinstance(entity, Node) and entity.loc is not None:
        element["lon"], element["lat"] = entity.loc
    elif isinstance(entity, Way):
        element["nodes"] = [int(osm_id(n)) for n in entity.nodes]
    elif isinstance(entity, Relation):
        element["members"] = [
            {"type": m.type, "ref": int(osm_id(m.id)), "role": m.role} for m in entity.members
        ]

    if entity.tags:
        element["tags"] = dict(entity.tags)
    if entity.version is not None:
        element["version"] = int(entity.version)
    if entity.user is not None:
        element["user"] = entity.user
    if not entity.visible:
        element["visible"] = False
    return element


def graph_from_elements(elements: Iterable[Mapping[str, Any]]) -> Graph:
    """Build a graph from OSM JSON elements.

    Later elements with the same id replace earlier ones.

    Raises:
        GraphFormatError: If any element cannot be converted
    """
    entities: dict[str, Entity] = {}
    for element in elements:
        entity = element_to_entity(element)
        entities[entity.id] = entity
    return Graph(entities.values())
