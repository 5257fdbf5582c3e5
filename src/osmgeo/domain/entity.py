"""Immutable, versioned map entities.

An entity is a frozen value. Every edit goes through ``update`` (or a
method built on it) and produces a new entity with the version counter ``v``
incremented; the old value stays valid and unchanged. Derived geometry is
memoized by the graph against the identity of each entity value, so a new
value never sees a stale cache entry.

Entity kinds form a closed set: ``Node``, ``Way`` and ``Relation``.
"""

import re
from collections.abc import Mapping
from dataclasses import MISSING, dataclass, field, fields, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from osmgeo.domain import ids
from osmgeo.domain.tags import DEPRECATED_TAGS, UNINTERESTING_KEYS, UNINTERESTING_PREFIXES
from osmgeo.geo.extent import Extent

if TYPE_CHECKING:
    from osmgeo.graph.protocol import Resolver


class _Absent:
    """Marker for removing an attribute through ``Entity.update``."""

    _instance: ClassVar["_Absent | None"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()

E = TypeVar("E", bound="Entity")

_VALUE_SEPARATOR = re.compile(r";\s*")


@dataclass(frozen=True, eq=False)
class Entity:
    """Base of all map entities.

    Entities compare and hash by identity: two values with equal fields are
    still distinct versions as far as caching is concerned.

    Attributes:
        id: Type-prefixed id (``n1``, ``w-3``); negative means not yet saved
        tags: Key/value tags, exposed read-only
        v: Local edit counter, incremented by every ``update``
        visible: False for deleted entities
        version: Server version string, None for new entities
        user: Name of the last editor on the server
    """

    type: ClassVar[str] = "entity"

    id: str
    tags: Mapping[str, str] = field(default_factory=dict)
    v: int = 0
    visible: bool = True
    version: str | None = None
    user: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))

    @property
    def key(self) -> str:
        """Identity of this entity version, ``"<id>v<v>"``."""
        return f"{self.id}v{self.v}"

    def osm_id(self) -> str:
        """Numeric OSM id without the type prefix."""
        return ids.osm_id(self.id)

    def is_new(self) -> bool:
        """Check whether the entity has never been saved to the server."""
        return int(self.osm_id()) < 0

    def update(self: E, **attrs: Any) -> E:
        """Return a new version with ``attrs`` merged over this one.

        An attribute passed as ``ABSENT`` is reset to its default rather than
        overwritten. The version counter ``v`` is always incremented.

        Raises:
            TypeError: For unknown attributes, or for removing ``id``
        """
        defaults = {f.name: f for f in fields(self)}
        changes: dict[str, Any] = {}
        for name, value in attrs.items():
            if value is ABSENT and name in defaults:
                f = defaults[name]
                if f.default is not MISSING:
                    value = f.default
                elif f.default_factory is not MISSING:
                    value = f.default_factory()
                else:
                    raise TypeError(f"Attribute '{name}' cannot be removed")
            changes[name] = value
        changes["v"] = self.v + 1
        return replace(self, **changes)

    def copy(self, allocator: ids.IdAllocator) -> list["Entity"]:
        """Copy this entity under a freshly allocated id.

        Returns a list so that composite entities can append copies of their
        children after the copy of themselves.
        """
        return [replace(self, id=allocator.next_id(self.type), user=None, version=None)]

    def merge_tags(self: E, tags: Mapping[str, str]) -> E:
        """Merge tags into this entity.

        Missing keys are added. Differing values are combined as a
        semicolon-separated union, existing values first. Returns ``self``
        when nothing changes.
        """
        merged = dict(self.tags)
        changed = False
        for k, t2 in tags.items():
            t1 = merged.get(k)
            if not t1:
                changed = True
                merged[k] = t2
            elif t1 != t2:
                changed = True
                values = _VALUE_SEPARATOR.split(t1) + _VALUE_SEPARATOR.split(t2)
                merged[k] = ";".join(dict.fromkeys(values))
        return self.update(tags=merged) if changed else self

    def extent(self, resolver: "Resolver | None" = None) -> Extent:
        """Bounding box of the entity; empty unless a kind defines its geometry."""
        return Extent()

    def intersects(self, extent: Extent, resolver: "Resolver") -> bool:
        """Check whether this entity's extent intersects ``extent``."""
        return self.extent(resolver).intersects(extent)

    def is_used(self, resolver: "Resolver") -> bool:
        """Check whether the entity carries real tags or belongs to a relation."""
        return any(k != "area" for k in self.tags) or len(resolver.parent_relations(self)) > 0

    def has_interesting_tags(self) -> bool:
        """Check for any tag besides attribution and import bookkeeping."""
        return any(
            key not in UNINTERESTING_KEYS and not key.startswith(UNINTERESTING_PREFIXES)
            for key in self.tags
        )

    def is_highway_intersection(self, resolver: "Resolver") -> bool:  # noqa: ARG002
        return False

    def deprecated_tags(self) -> dict[str, str]:
        """Tags matching the deprecated tag table."""
        deprecated: dict[str, str] = {}
        for entry in DEPRECATED_TAGS:
            old_key, old_value = next(iter(entry["old"].items()))
            value = self.tags.get(old_key)
            if value is not None and (value == old_value or old_value == "*"):
                deprecated[old_key] = value
        return deprecated

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, v={self.v})"
