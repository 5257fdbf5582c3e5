"""Helpers for "simple" multipolygons.

A simple multipolygon is a relation tagged only ``type=multipolygon`` with a
single outer member; mappers often put the area tags on that outer way
instead of the relation.
"""

from osmgeo.domain.entity import Entity
from osmgeo.domain.relation import Relation
from osmgeo.graph.protocol import Resolver


def _sole_untagged_multipolygon(entity: Entity, graph: Resolver) -> Relation | None:
    if entity.type != "way":
        return None

    parents = graph.parent_relations(entity)
    if len(parents) != 1:
        return None

    parent = parents[0]
    if not parent.is_multipolygon() or len(parent.tags) > 1:
        return None
    return parent


def is_simple_multipolygon_outer_member(entity: Entity, graph: Resolver) -> Relation | None:
    """The simple multipolygon ``entity`` is the outer member of, if any.

    Returns:
        The parent relation, or None when ``entity`` is not a way, is an
        inner member, or the relation has other outer members
    """
    parent = _sole_untagged_multipolygon(entity, graph)
    if parent is None:
        return None

    for member in parent.members:
        if member.id == entity.id and member.role and member.role != "outer":
            return None
        if member.id != entity.id and (not member.role or member.role == "outer"):
            return None

    return parent


def simple_multipolygon_outer_member(entity: Entity, graph: Resolver) -> Entity | None:
    """The single outer member of the simple multipolygon ``entity`` belongs to.

    Returns:
        The outer way, or None when there is no such relation, it has more
        than one outer member, or the outer way is not loaded
    """
    parent = _sole_untagged_multipolygon(entity, graph)
    if parent is None:
        return None

    outer_member = None
    for member in parent.members:
        if not member.role or member.role == "outer":
            if outer_member is not None:
                return None
            outer_member = member

    if outer_member is None:
        return None
    return graph.get(outer_member.id)
