"""Way entities: ordered node sequences forming lines and areas.

A way whose first and last node are the same is closed; a closed way with
area tags is an area. Derived geometry (extent, area, GeoJSON, geometry kind)
depends on the resolved child nodes and is memoized by the graph against the
way's identity.
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from osmgeo.domain import ids
from osmgeo.domain.entity import Entity
from osmgeo.domain.tags import AREA_KEYS, ONE_WAY_TAGS
from osmgeo.geo.area import spherical_area
from osmgeo.geo.extent import Extent
from osmgeo.geo.geometry import cross

if TYPE_CHECKING:
    from osmgeo.graph.protocol import Resolver

logger = logging.getLogger(__name__)

# Implied layers, checked in order when no explicit layer tag is present.
# Each entry is (key, value); a value of None matches any value.
IMPLIED_LAYERS: list[tuple[str, str | None, int]] = [
    ("location", "overground", 1),
    ("location", "underground", -1),
    ("location", "underwater", -10),
    ("power", "line", 10),
    ("power", "minor_line", 10),
    ("aerialway", None, 10),
    ("bridge", None, 1),
    ("cutting", None, -1),
    ("tunnel", None, -1),
    ("waterway", None, -1),
    ("man_made", "pipeline", -10),
    ("boundary", None, -10),
]


@dataclass(frozen=True, eq=False, repr=False)
class Way(Entity):
    """An ordered sequence of node ids.

    Node ids may repeat at non-adjacent positions; first == last marks a
    closed way.

    Attributes:
        nodes: Node ids in way order
    """

    type: ClassVar[str] = "way"

    nodes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "nodes", tuple(self.nodes))

    def copy(
        self,
        allocator: ids.IdAllocator,
        deep: bool = False,
        resolver: "Resolver | None" = None,
    ) -> list[Entity]:
        """Copy the way, optionally with fresh copies of its nodes.

        A deep copy allocates one new node per distinct child node, so a
        closed way stays closed.

        Returns:
            The way copy first, followed by any node copies
        """
        copies = super().copy(allocator)
        if not deep or resolver is None:
            return copies

        nodes: list[str] = []
        replacements: dict[str, str] = {}
        for old_id in self.nodes:
            new_id = replacements.get(old_id)
            if new_id is None:
                child = resolver.entity(old_id).copy(allocator)
                new_id = replacements[old_id] = child[0].id
                copies.extend(child)
            nodes.append(new_id)

        copies[0] = copies[0].update(nodes=tuple(nodes))
        return copies

    def extent(self, resolver: "Resolver | None" = None) -> Extent:
        """Bounding box of the resolvable child nodes."""
        if resolver is None:
            raise ValueError("Way extent requires a resolver")

        def compute() -> Extent:
            extent = Extent()
            for node_id in self.nodes:
                node = resolver.get(node_id)
                if node is not None:
                    extent._extend(node.extent(resolver))
            return extent

        return resolver.transient(self, "extent", compute)

    def first(self) -> str | None:
        return self.nodes[0] if self.nodes else None

    def last(self) -> str | None:
        return self.nodes[-1] if self.nodes else None

    def contains(self, node_id: str) -> bool:
        return node_id in self.nodes

    def affix(self, node_id: str) -> str | None:
        """``"prefix"`` or ``"suffix"`` if ``node_id`` is an endpoint."""
        if self.nodes and self.nodes[0] == node_id:
            return "prefix"
        if self.nodes and self.nodes[-1] == node_id:
            return "suffix"
        return None

    def layer(self) -> float:
        """Vertical layer, from the layer tag or implied by other tags.

        An explicit layer is clamped to [-10, 10]. A layer tag that is not a
        number counts as 0.
        """
        explicit = self.tags.get("layer")
        if explicit is not None:
            try:
                value = float(explicit)
            except ValueError:
                return 0
            if math.isnan(value):
                return 0
            return max(-10.0, min(value, 10.0))

        for key, value, layer in IMPLIED_LAYERS:
            tag = self.tags.get(key)
            if tag and (value is None or tag == value):
                return layer
        return 0

    def is_one_way(self) -> bool:
        """Check for an explicit or implied oneway restriction."""
        oneway = self.tags.get("oneway")
        if oneway in ("yes", "1", "-1"):
            return True
        if oneway in ("no", "0"):
            return False

        return any(
            key in ONE_WAY_TAGS and value in ONE_WAY_TAGS[key] for key, value in self.tags.items()
        )

    def is_closed(self) -> bool:
        return len(self.nodes) > 0 and self.first() == self.last()

    def is_convex(self, resolver: "Resolver") -> bool | None:
        """Check whether a closed way turns in only one direction.

        Collinear vertices are ignored.

        Returns:
            True or False for closed, non-degenerate ways; None otherwise
        """
        if not self.is_closed() or self.is_degenerate():
            return None

        nodes = list(dict.fromkeys(resolver.child_nodes(self)))
        coords = [n.loc for n in nodes]
        n = len(coords)
        prev = 0

        for i in range(n):
            res = cross(coords[(i + 1) % n], coords[i], coords[(i + 2) % n])
            curr = 1 if res > 0 else -1 if res < 0 else 0
            if curr == 0:
                continue
            if prev and curr != prev:
                return False
            prev = curr
        return True

    def is_area(self) -> bool:
        """Check whether the way represents an area rather than a line.

        ``area=yes`` always makes an area; otherwise the way must be closed,
        not tagged ``area=no``, and carry an area key with a value that is
        not one of that key's linear exceptions.
        """
        if self.tags.get("area") == "yes":
            return True
        if not self.is_closed() or self.tags.get("area") == "no":
            return False
        return any(
            key in AREA_KEYS and value not in AREA_KEYS[key] for key, value in self.tags.items()
        )

    def is_degenerate(self) -> bool:
        """Too few distinct nodes: under 3 for areas, under 2 for lines."""
        return len(set(self.nodes)) < (3 if self.is_area() else 2)

    def are_adjacent(self, n1: str, n2: str) -> bool:
        """Check whether two node ids are neighbours anywhere in the way."""
        for i, node in enumerate(self.nodes):
            if node == n1:
                if i > 0 and self.nodes[i - 1] == n2:
                    return True
                if i + 1 < len(self.nodes) and self.nodes[i + 1] == n2:
                    return True
        return False

    def geometry(self, graph: "Resolver") -> str:
        """``"area"`` or ``"line"``."""
        return graph.transient(self, "geometry", lambda: "area" if self.is_area() else "line")

    def add_node(self, node_id: str, index: int | None = None) -> "Way":
        """Insert a node id, appending when ``index`` is None."""
        nodes = list(self.nodes)
        nodes.insert(len(nodes) if index is None else index, node_id)
        return self.update(nodes=tuple(nodes))

    def update_node(self, node_id: str, index: int) -> "Way":
        """Replace the node id at ``index``."""
        nodes = list(self.nodes)
        nodes[index] = node_id
        return self.update(nodes=tuple(nodes))

    def replace_node(self, needle: str, replacement: str) -> "Way":
        """Replace every occurrence of ``needle``; ``self`` if absent."""
        if needle not in self.nodes:
            return self
        return self.update(nodes=tuple(replacement if n == needle else n for n in self.nodes))

    def remove_node(self, node_id: str) -> "Way":
        """Remove every occurrence of a node id.

        Consecutive duplicates left behind are collapsed. A closed way whose
        endpoint was removed is closed again on its new first node.
        """
        nodes: list[str] = []
        for node in self.nodes:
            if node != node_id and (not nodes or nodes[-1] != node):
                nodes.append(node)

        if (
            len(self.nodes) > 1
            and self.first() == node_id
            and self.last() == node_id
            and nodes
            and nodes[-1] != nodes[0]
        ):
            nodes.append(nodes[0])

        return self.update(nodes=tuple(nodes))

    def as_jxon(self, changeset_id: str | None = None) -> dict[str, Any]:
        """Structure of the ``<way>`` element of an osmChange upload."""
        way: dict[str, Any] = {
            "@id": self.osm_id(),
            "@version": self.version or 0,
            "nd": [{"keyAttributes": {"ref": ids.osm_id(node_id)}} for node_id in self.nodes],
            "tag": [{"keyAttributes": {"k": k, "v": v}} for k, v in self.tags.items()],
        }
        if changeset_id:
            way["@changeset"] = changeset_id
        return {"way": way}

    def as_geojson(self, resolver: "Resolver") -> dict[str, Any]:
        """GeoJSON geometry: a Polygon for closed areas, else a LineString."""

        def compute() -> dict[str, Any]:
            coordinates = [list(n.loc) for n in resolver.child_nodes(self)]
            if self.is_area() and self.is_closed():
                return {"type": "Polygon", "coordinates": [coordinates]}
            return {"type": "LineString", "coordinates": coordinates}

        return resolver.transient(self, "geojson", compute)

    def area(self, resolver: "Resolver") -> float:
        """Spherical area of the way's ring, in steradians.

        Open ways are closed on their first node. OSM polygons are assumed not
        to span a hemisphere, so an area over 2*pi means the ring was wound
        the other way and is recomputed reversed. Rings too small to measure
        report 0.
        """

        def compute() -> float:
            ring = [n.loc for n in resolver.child_nodes(self)]
            if not self.is_closed() and ring:
                ring.append(ring[0])

            area = spherical_area([ring])
            if area > 2 * math.pi:
                logger.debug("Reversing ring winding for area of %s", self.id)
                area = spherical_area([ring[::-1]])

            return 0.0 if math.isnan(area) else area

        return resolver.transient(self, "area", compute)
