"""Junction reconstruction and turn inference.

Given a vertex, ``Intersection`` collects the highways meeting there and
pre-splits the ones that pass through it, so that every highway at the
junction starts or ends at the vertex. ``Intersection.turns`` then lists the
manoeuvres available from an incoming leg and annotates each with the
restriction relations that affect it. ``infer_restriction`` classifies a
turn by the angle between its legs.
"""

import logging
import math
import re

from osmgeo.domain.turn import Turn, TurnLeg
from osmgeo.domain.way import Way
from osmgeo.geo.geometry import angle
from osmgeo.geo.projection import Projection
from osmgeo.graph.protocol import Resolver

logger = logging.getLogger(__name__)

# Bearing thresholds, in degrees, for classifying a turn.
U_TURN_MAX_ANGLE = 23
RIGHT_TURN_MAX_ANGLE = 158
LEFT_TURN_MIN_ANGLE = 202
U_TURN_MIN_ANGLE = 336

_SPLIT_SUFFIX = re.compile(r"-(?:a|b)")


def original_way_id(way_id: str) -> str:
    """Strip the ``-a``/``-b`` suffix of a pre-split way fragment."""
    return _SPLIT_SUFFIX.split(way_id, maxsplit=1)[0]


class Intersection:
    """Highways meeting at a vertex, with the turns between them.

    Ways through the vertex are split into an ``<id>-a`` fragment ending at
    the vertex and an ``<id>-b`` fragment starting there. The split only
    exists in ``graph``; the original way is left in place and the real
    split is up to whoever later adds a restriction.

    Attributes:
        vertex_id: The junction node
        graph: Graph containing the split fragments
        highways: Highway ways and fragments with the vertex as an endpoint
    """

    def __init__(self, graph: Resolver, vertex_id: str) -> None:
        vertex = graph.entity(vertex_id)
        highways: list[Way] = []

        for way in graph.parent_ways(vertex):
            if not way.tags.get("highway") or way.is_area() or way.is_degenerate():
                continue

            if way.affix(vertex_id):
                highways.append(way)
                continue

            idx = way.nodes.index(vertex_id, 1)
            way_a = Way(id=f"{way.id}-a", tags=way.tags, nodes=way.nodes[: idx + 1])
            way_b = Way(id=f"{way.id}-b", tags=way.tags, nodes=way.nodes[idx:])
            graph = graph.replace(way_a).replace(way_b)
            highways.extend((way_a, way_b))
            logger.debug("Pre-split %s at %s", way.id, vertex_id)

        self.vertex_id = vertex_id
        self.graph = graph
        self.highways = highways

    def _with_restriction(self, from_: TurnLeg, to: TurnLeg, u: bool = False) -> Turn:
        restriction: str | None = None
        indirect = False

        for relation in self.graph.parent_relations(self.graph.entity(from_.way)):
            if relation.tags.get("type") != "restriction":
                continue

            f = relation.member_by_role("from")
            v = relation.member_by_role("via")
            t = relation.member_by_role("to")
            if not (f and f.id == from_.way and v and v.id == self.vertex_id and t):
                continue

            if t.id == to.way:
                restriction = relation.id
                indirect = False
            elif relation.tags.get("restriction", "").startswith("only_"):
                restriction = relation.id
                indirect = True

        return Turn(
            from_=from_,
            via=self.vertex_id,
            to=to,
            restriction=restriction,
            indirect_restriction=indirect,
            u=u,
        )

    def turns(self, from_node_id: str | None) -> list[Turn]:
        """Turns available when entering the junction from a node.

        Args:
            from_node_id: A node on the incoming highway

        Returns:
            Candidate turns, each annotated with affecting restrictions;
            empty when the highway cannot be driven towards the vertex
        """
        if not from_node_id:
            return []

        way = next((w for w in self.highways if w.contains(from_node_id)), None)
        if way is None:
            return []

        vertex_id = self.vertex_id
        oneway = way.tags.get("oneway")
        if (way.first() == vertex_id and oneway == "yes") or (
            way.last() == vertex_id and oneway == "-1"
        ):
            logger.debug("No turns from %s: oneway away from %s", way.id, vertex_id)
            return []

        from_ = TurnLeg(
            node=way.nodes[1 if way.first() == vertex_id else len(way.nodes) - 2],
            way=original_way_id(way.id),
        )
        turns: list[Turn] = []

        for parent in self.highways:
            if parent is way:
                continue

            index = parent.nodes.index(vertex_id)
            parent_way_id = original_way_id(parent.id)
            parent_oneway = parent.tags.get("oneway")

            # backward
            if parent.first() != vertex_id and parent_oneway != "yes":
                to = TurnLeg(node=parent.nodes[index - 1], way=parent_way_id)
                turns.append(self._with_restriction(from_, to))

            # forward
            if parent.last() != vertex_id and parent_oneway != "-1":
                to = TurnLeg(node=parent.nodes[index + 1], way=parent_way_id)
                turns.append(self._with_restriction(from_, to))

        if oneway not in ("yes", "-1"):
            turns.append(self._with_restriction(from_, from_, u=True))

        return turns


def infer_restriction(
    graph: Resolver,
    from_: TurnLeg,
    via: str,
    to: TurnLeg,
    projection: Projection,
) -> str:
    """Classify a turn by the angle between its legs at the via node.

    The angle from the incoming leg to the outgoing leg is measured in
    projected space, in degrees normalized to [0, 360).

    Returns:
        ``no_u_turn``, ``no_right_turn``, ``no_left_turn`` or
        ``no_straight_on``
    """
    from_way = graph.entity(from_.way)
    from_node = graph.entity(from_.node)
    to_way = graph.entity(to.way)
    to_node = graph.entity(to.node)
    via_node = graph.entity(via)

    from_oneway = (from_way.tags.get("oneway") == "yes" and from_way.last() == via) or (
        from_way.tags.get("oneway") == "-1" and from_way.first() == via
    )
    to_oneway = (to_way.tags.get("oneway") == "yes" and to_way.first() == via) or (
        to_way.tags.get("oneway") == "-1" and to_way.last() == via
    )

    bearing = math.degrees(
        angle(via_node, from_node, projection) - angle(via_node, to_node, projection)
    )
    while bearing < 0:
        bearing += 360

    if from_node.id == to_node.id:
        return "no_u_turn"
    if (bearing < U_TURN_MAX_ANGLE or bearing > U_TURN_MIN_ANGLE) and from_oneway and to_oneway:
        return "no_u_turn"
    if bearing < RIGHT_TURN_MAX_ANGLE:
        return "no_right_turn"
    if bearing > LEFT_TURN_MIN_ANGLE:
        return "no_left_turn"
    return "no_straight_on"
