"""The graph surface the entity model and algorithms depend on."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from osmgeo.domain.entity import Entity
    from osmgeo.domain.node import Node
    from osmgeo.domain.relation import Relation
    from osmgeo.domain.way import Way

T = TypeVar("T")


class Resolver(Protocol):
    """Immutable snapshot mapping entity ids to entities.

    Implementations memoize derived values per entity identity through
    ``transient``; replacing an entity with a new value must never return a
    value computed for the old one.
    """

    def entity(self, entity_id: str) -> "Entity": ...

    def has_entity(self, entity_id: str) -> bool: ...

    def get(self, entity_id: str) -> "Entity | None": ...

    def parent_ways(self, entity: "Entity") -> list["Way"]: ...

    def parent_relations(self, entity: "Entity") -> list["Relation"]: ...

    def child_nodes(self, way: "Way") -> list["Node"]: ...

    def replace(self, entity: "Entity") -> "Resolver": ...

    def transient(self, entity: "Entity", key: str, compute: Callable[[], T]) -> T: ...
