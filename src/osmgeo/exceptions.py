"""Exception hierarchy for osmgeo."""


class OsmGeoError(Exception):
    """Base exception for all osmgeo errors."""

    pass


class EntityError(OsmGeoError):
    """Errors related to entities and their identifiers."""

    pass


class EntityNotFoundError(EntityError):
    """Requested entity is not present in the graph."""

    def __init__(self, entity_id: str) -> None:
        self.entity_id = entity_id
        super().__init__(f"Entity '{entity_id}' not found in graph")


class InvalidEntityIdError(EntityError):
    """Entity id is not a type-prefixed OSM id."""

    def __init__(self, entity_id: str) -> None:
        self.entity_id = entity_id
        super().__init__(f"Invalid entity id '{entity_id}'")


class InvalidEntityTypeError(EntityError):
    """Entity type is not one of node, way or relation."""

    def __init__(self, entity_type: str) -> None:
        self.entity_type = entity_type
        super().__init__(f"Unknown entity type '{entity_type}'")


class GraphError(OsmGeoError):
    """Errors related to building or loading graphs."""

    pass


class GraphLoadError(GraphError):
    """Error loading OSM data into a graph."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load OSM data '{path}': {reason}")


class GraphFormatError(GraphError):
    """OSM data is structurally invalid."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid OSM data: {details}")


class ExportError(OsmGeoError):
    """Error writing exported geometry."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to export '{path}': {reason}")
