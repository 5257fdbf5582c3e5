"""Node entities: points and way vertices."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from osmgeo.domain.entity import Entity
from osmgeo.geo.extent import Extent
from osmgeo.geo.geometry import Coordinate

if TYPE_CHECKING:
    from osmgeo.graph.protocol import Resolver


@dataclass(frozen=True, eq=False, repr=False)
class Node(Entity):
    """A located entity.

    Attributes:
        loc: ``(lon, lat)`` in degrees, None while unplaced
    """

    type: ClassVar[str] = "node"

    loc: Coordinate | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.loc is not None:
            object.__setattr__(self, "loc", (self.loc[0], self.loc[1]))

    def extent(self, resolver: "Resolver | None" = None) -> Extent:  # noqa: ARG002
        """Zero-area extent at the node's location."""
        if self.loc is None:
            return Extent()
        return Extent(self.loc)

    def move(self, loc: Sequence[float]) -> "Node":
        """Return a new version at ``loc``."""
        return self.update(loc=(loc[0], loc[1]))

    def geometry(self, graph: "Resolver") -> str:
        """``"vertex"`` if the node belongs to a way, else ``"point"``."""
        return graph.transient(
            self, "geometry", lambda: "vertex" if graph.parent_ways(self) else "point"
        )

    def is_highway_intersection(self, resolver: "Resolver") -> bool:
        """Check whether more than one highway line passes through the node."""

        def compute() -> bool:
            highways = [
                parent
                for parent in resolver.parent_ways(self)
                if parent.tags.get("highway") and parent.geometry(resolver) == "line"
            ]
            return len(highways) > 1

        return resolver.transient(self, "is_highway_intersection", compute)
