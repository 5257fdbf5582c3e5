"""Reverse the direction of a way.

Reverses the node order and corrects direction-dependent tags other than
``oneway`` (correcting a backwards oneway is the usual reason to reverse a
way). The following transforms are applied:

    Keys:
          *:right=* <-> *:left=*
        *:forward=* <-> *:backward=*
       direction=up <-> direction=down
         incline=up <-> incline=down
            *=right <-> *=left

    Relation member roles:
       forward <-> backward
         north <-> south
          east <-> west

Numeric ``incline`` values are negated.
"""

import logging
import re
from collections.abc import Mapping

from osmgeo.domain.way import Way
from osmgeo.graph.protocol import Resolver

logger = logging.getLogger(__name__)

KEY_REPLACEMENTS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r":right$"), ":left"),
    (re.compile(r":left$"), ":right"),
    (re.compile(r":forward$"), ":backward"),
    (re.compile(r":backward$"), ":forward"),
]

ROLE_REVERSALS: dict[str, str] = {
    "forward": "backward",
    "backward": "forward",
    "north": "south",
    "south": "north",
    "east": "west",
    "west": "east",
}

_NUMERIC = re.compile(r"^([+\-]?)(?=[\d.])")
_UP_DOWN = {"up": "down", "down": "up"}
_LEFT_RIGHT = {"left": "right", "right": "left"}


def reverse_key(key: str) -> str:
    """Swap a trailing left/right or forward/backward key suffix."""
    for pattern, replacement in KEY_REPLACEMENTS:
        if pattern.search(key):
            return pattern.sub(replacement, key)
    return key


def reverse_value(key: str, value: str) -> str:
    """Reverse a tag value given its (original) key.

    Examples:
        >>> reverse_value("incline", "10%")
        '-10%'
        >>> reverse_value("incline", "-10%")
        '10%'
        >>> reverse_value("side", "left")
        'right'
    """
    if key == "incline" and _NUMERIC.search(value):
        return _NUMERIC.sub(lambda m: "" if m.group(1) == "-" else "-", value, count=1)
    if key in ("incline", "direction"):
        return _UP_DOWN.get(value, value)
    return _LEFT_RIGHT.get(value, value)


def reverse_tags(tags: Mapping[str, str]) -> dict[str, str]:
    """Direction-corrected copy of a tag mapping."""
    return {reverse_key(k): reverse_value(k, v) for k, v in tags.items()}


def reverse_way(graph: Resolver, way_id: str) -> Resolver:
    """Reverse a way and fix up its tags and relation roles.

    Args:
        graph: Graph containing the way
        way_id: Id of the way to reverse

    Returns:
        New graph with the way and any affected relations replaced
    """
    way = graph.entity(way_id)
    if not isinstance(way, Way):
        raise TypeError(f"Cannot reverse non-way entity '{way_id}'")

    for relation in graph.parent_relations(way):
        for index, member in enumerate(relation.members):
            role = ROLE_REVERSALS.get(member.role)
            if member.id == way.id and role is not None:
                relation = relation.update_member(index, role=role)
                graph = graph.replace(relation)

    logger.debug("Reversed way %s", way_id)
    return graph.replace(way.update(nodes=way.nodes[::-1], tags=reverse_tags(way.tags)))
