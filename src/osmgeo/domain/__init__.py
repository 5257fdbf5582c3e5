"""Domain models for osmgeo.

This module contains the map entity model. All entities are:

- Immutable (frozen dataclasses); edits return new versions
- Versioned through a local edit counter
- Compared and cached by identity

Key classes:
- Entity: Shared behaviour of all entities
- Node: A located point or way vertex
- Way: An ordered node sequence (line or area)
- Relation / Member: Role-labelled groups of entities
- Turn / TurnLeg: Manoeuvres through a junction
- IdAllocator: Source of ids for new entities
"""

from osmgeo.domain.entity import ABSENT, Entity
from osmgeo.domain.factory import create_entity
from osmgeo.domain.ids import IdAllocator, entity_id_from_osm, entity_type, osm_id
from osmgeo.domain.node import Node
from osmgeo.domain.relation import Member, Relation
from osmgeo.domain.turn import Turn, TurnLeg
from osmgeo.domain.way import Way

__all__: list[str] = [
    "ABSENT",
    # Core types
    "Entity",
    "IdAllocator",
    "Member",
    "Node",
    "Relation",
    "Turn",
    "TurnLeg",
    "Way",
    # Helpers
    "create_entity",
    "entity_id_from_osm",
    "entity_type",
    "osm_id",
]
