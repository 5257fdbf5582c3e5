"""Construction of entities by kind."""

from typing import Any

from osmgeo.domain.entity import Entity
from osmgeo.domain.ids import entity_type as type_of_id
from osmgeo.domain.node import Node
from osmgeo.domain.relation import Relation
from osmgeo.domain.way import Way
from osmgeo.exceptions import InvalidEntityTypeError

ENTITY_CLASSES: dict[str, type[Entity]] = {
    "node": Node,
    "way": Way,
    "relation": Relation,
}


def create_entity(entity_type: str | None = None, **attrs: Any) -> Entity:
    """Create an entity of the kind named by ``entity_type``.

    When no type is given it is taken from the id prefix.

    Args:
        entity_type: ``node``, ``way`` or ``relation``
        **attrs: Entity attributes, ``id`` included

    Returns:
        Node, Way or Relation

    Raises:
        InvalidEntityTypeError: If the type is unknown
        InvalidEntityIdError: If no type is given and the id has no valid prefix
    """
    if entity_type is None:
        entity_type = type_of_id(attrs["id"])

    cls = ENTITY_CLASSES.get(entity_type)
    if cls is None:
        raise InvalidEntityTypeError(entity_type)
    return cls(**attrs)
