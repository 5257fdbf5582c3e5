"""In-memory graph snapshots.

A Graph is an immutable mapping from entity id to entity plus reverse
indexes from nodes to their parent ways and from any entity to its parent
relations. ``replace`` and ``remove`` return new snapshots; the receiver is
left untouched.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

from osmgeo.domain.entity import Entity
from osmgeo.domain.node import Node
from osmgeo.domain.relation import Relation
from osmgeo.domain.way import Way
from osmgeo.exceptions import EntityNotFoundError

T = TypeVar("T")

# Parent indexes map a child id to an insertion-ordered set of parent ids.
_ParentIndex = dict[str, dict[str, None]]


class Graph:
    """Snapshot of a set of entities.

    Derived values are cached per snapshot and keyed by entity identity: a
    cache entry is only returned for the exact entity object it was computed
    for.

    Example:
        graph = Graph([Node(id="n1", loc=(0, 0)), Node(id="n2", loc=(1, 1)),
                       Way(id="w1", nodes=("n1", "n2"))])
        way = graph.entity("w1")
        graph.child_nodes(way)  # [Node(id='n1', v=0), Node(id='n2', v=0)]
    """

    def __init__(self, entities: Iterable[Entity] = ()) -> None:
        self._entities: dict[str, Entity] = {}
        self._parent_ways: _ParentIndex = {}
        self._parent_rels: _ParentIndex = {}
        self._transients: dict[str, tuple[Entity, dict[str, Any]]] = {}

        for entity in entities:
            self._entities[entity.id] = entity
            self._index(entity)

    @classmethod
    def _from_parts(
        cls,
        entities: dict[str, Entity],
        parent_ways: _ParentIndex,
        parent_rels: _ParentIndex,
    ) -> "Graph":
        graph = cls.__new__(cls)
        graph._entities = entities
        graph._parent_ways = parent_ways
        graph._parent_rels = parent_rels
        graph._transients = {}
        return graph

    def _index(self, entity: Entity) -> None:
        if isinstance(entity, Way):
            for node_id in entity.nodes:
                self._parent_ways.setdefault(node_id, {})[entity.id] = None
        elif isinstance(entity, Relation):
            for member in entity.members:
                self._parent_rels.setdefault(member.id, {})[entity.id] = None

    def _unindex(self, entity: Entity) -> None:
        if isinstance(entity, Way):
            for node_id in entity.nodes:
                parents = self._parent_ways.get(node_id)
                if parents is not None:
                    parents.pop(entity.id, None)
        elif isinstance(entity, Relation):
            for member in entity.members:
                parents = self._parent_rels.get(member.id)
                if parents is not None:
                    parents.pop(entity.id, None)

    def _copy(self) -> "Graph":
        return Graph._from_parts(
            dict(self._entities),
            {k: dict(v) for k, v in self._parent_ways.items()},
            {k: dict(v) for k, v in self._parent_rels.items()},
        )

    def entity(self, entity_id: str) -> Entity:
        """Entity with the given id.

        Raises:
            EntityNotFoundError: If the id is not in the graph
        """
        entity = self._entities.get(entity_id)
        if entity is None:
            raise EntityNotFoundError(entity_id)
        return entity

    def get(self, entity_id: str) -> Entity | None:
        """Entity with the given id, or None."""
        return self._entities.get(entity_id)

    def has_entity(self, entity_id: str) -> bool:
        return entity_id in self._entities

    def parent_ways(self, entity: Entity) -> list[Way]:
        """Ways containing ``entity``, in the order they entered the graph."""
        parents = self._parent_ways.get(entity.id, {})
        return [self._entities[way_id] for way_id in parents]  # type: ignore[misc]

    def parent_relations(self, entity: Entity) -> list[Relation]:
        """Relations with ``entity`` as a member."""
        parents = self._parent_rels.get(entity.id, {})
        return [self._entities[rel_id] for rel_id in parents]  # type: ignore[misc]

    def child_nodes(self, way: Way) -> list[Node]:
        """Nodes of ``way`` in way order, repeats included."""
        return [self.entity(node_id) for node_id in way.nodes]  # type: ignore[misc]

    def replace(self, entity: Entity) -> "Graph":
        """Snapshot with ``entity`` inserted or substituted by id."""
        if self._entities.get(entity.id) is entity:
            return self

        graph = self._copy()
        previous = graph._entities.get(entity.id)
        if previous is not None:
            graph._unindex(previous)
        graph._entities[entity.id] = entity
        graph._index(entity)
        return graph

    def remove(self, entity: Entity) -> "Graph":
        """Snapshot without ``entity``."""
        if entity.id not in self._entities:
            return self

        graph = self._copy()
        graph._unindex(graph._entities.pop(entity.id))
        return graph

    def transient(self, entity: Entity, key: str, compute: Callable[[], T]) -> T:
        """Memoized derived value of ``entity``.

        Args:
            entity: Entity the value derives from
            key: Name of the derived value
            compute: Computes the value on a cache miss

        Returns:
            Cached or freshly computed value
        """
        cached = self._transients.get(entity.id)
        if cached is None or cached[0] is not entity:
            cached = (entity, {})
            self._transients[entity.id] = cached

        values = cached[1]
        if key not in values:
            values[key] = compute()
        return values[key]

    def entities(self) -> list[Entity]:
        """All entities in insertion order."""
        return list(self._entities.values())

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities.values())

    def __len__(self) -> int:
        return len(self._entities)
