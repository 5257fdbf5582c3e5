"""Relation entities: ordered, role-labelled groups of other entities."""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, ClassVar

from osmgeo.domain.entity import Entity
from osmgeo.geo.extent import Extent

if TYPE_CHECKING:
    from osmgeo.graph.protocol import Resolver


@dataclass(frozen=True)
class Member:
    """A reference from a relation to another entity.

    Attributes:
        id: Entity id of the member
        type: Entity type of the member (node, way or relation)
        role: Role of the member within the relation
    """

    id: str
    type: str
    role: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type, "role": self.role}


@dataclass(frozen=True, eq=False, repr=False)
class Relation(Entity):
    """A relation over nodes, ways and other relations.

    Attributes:
        members: Members in relation order
    """

    type: ClassVar[str] = "relation"

    members: tuple[Member, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "members", tuple(self.members))

    def member_by_role(self, role: str) -> Member | None:
        """First member with the given role."""
        return next((m for m in self.members if m.role == role), None)

    def update_member(self, index: int, **changes: Any) -> "Relation":
        """Return a new version with the member at ``index`` changed."""
        members = list(self.members)
        members[index] = replace(members[index], **changes)
        return self.update(members=tuple(members))

    def is_multipolygon(self) -> bool:
        return self.tags.get("type") == "multipolygon"

    def is_restriction(self) -> bool:
        return self.tags.get("type") == "restriction"

    def extent(self, resolver: "Resolver | None" = None) -> Extent:
        """Union of the extents of resolvable members.

        Nested relations are followed once; cycles are cut.
        """
        if resolver is None:
            raise ValueError("Relation extent requires a resolver")
        return resolver.transient(self, "extent", lambda: self._member_extent(resolver, set()))

    def _member_extent(self, resolver: "Resolver", seen: set[str]) -> Extent:
        seen.add(self.id)
        extent = Extent()
        for member in self.members:
            entity = resolver.get(member.id)
            if entity is None or entity.id in seen:
                continue
            if isinstance(entity, Relation):
                extent._extend(entity._member_extent(resolver, seen))
            else:
                extent._extend(entity.extent(resolver))
        return extent
