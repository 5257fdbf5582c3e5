"""Entity identifiers.

Entity ids are the OSM numeric id prefixed with the first letter of the
entity type (``n123``, ``w-4``, ``r7``). Negative numbers mark entities that
have not been persisted yet.
"""

from osmgeo.exceptions import InvalidEntityIdError, InvalidEntityTypeError

ENTITY_TYPES: dict[str, str] = {"n": "node", "w": "way", "r": "relation"}


def entity_id_from_osm(entity_type: str, osm_id: int | str) -> str:
    """Build an entity id from a type name and an OSM id.

    Examples:
        >>> entity_id_from_osm("way", 42)
        'w42'
    """
    if entity_type not in ENTITY_TYPES.values():
        raise InvalidEntityTypeError(entity_type)
    return f"{entity_type[0]}{osm_id}"


def osm_id(entity_id: str) -> str:
    """Strip the type prefix from an entity id."""
    return entity_id[1:]


def entity_type(entity_id: str) -> str:
    """Entity type named by an id's prefix.

    Raises:
        InvalidEntityIdError: If the prefix is not n, w or r
    """
    try:
        return ENTITY_TYPES[entity_id[0]]
    except (IndexError, KeyError):
        raise InvalidEntityIdError(entity_id) from None


class IdAllocator:
    """Hands out ids for new entities.

    Each entity type counts down from -1 independently. Components that
    create entities receive an allocator explicitly, so id generation is
    deterministic within a session and trivially reset in tests.

    Example:
        allocator = IdAllocator()
        allocator.next_id("node")  # 'n-1'
        allocator.next_id("node")  # 'n-2'
        allocator.next_id("way")   # 'w-1'
    """

    def __init__(self) -> None:
        self._next: dict[str, int] = {"node": -1, "way": -1, "relation": -1}

    def next_id(self, entity_type: str) -> str:
        """Allocate the next unused id for an entity type."""
        if entity_type not in self._next:
            raise InvalidEntityTypeError(entity_type)
        value = self._next[entity_type]
        self._next[entity_type] = value - 1
        return entity_id_from_osm(entity_type, value)

    def peek(self, entity_type: str) -> str:
        """Id the next allocation for ``entity_type`` would return."""
        if entity_type not in self._next:
            raise InvalidEntityTypeError(entity_type)
        return entity_id_from_osm(entity_type, self._next[entity_type])
