"""Writers for exporting graphs.

This module provides the GeoJSONWriter class for writing the ways of a
graph as a GeoJSON FeatureCollection, and write_osm_json for saving a
whole graph back to OSM JSON.
"""

import json
import logging
from pathlib import Path
from typing import Any

from osmgeo.domain.way import Way
from osmgeo.exceptions import EntityNotFoundError, ExportError
from osmgeo.graph.graph import Graph
from osmgeo.io.converter import entity_to_element

logger = logging.getLogger(__name__)


def way_feature(way: Way, graph: Graph) -> dict[str, Any]:
    """Build the GeoJSON Feature of a way.

    Args:
        way: The way to export
        graph: Graph resolving the way's nodes

    Returns:
        Feature with the way's tags as properties and its entity id as id

    Raises:
        EntityNotFoundError: If a node of the way is not in the graph
    """
    return {
        "type": "Feature",
        "id": way.id,
        "properties": dict(way.tags),
        "geometry": way.as_geojson(graph),
    }


class GeoJSONWriter:
    """Writes ways as a GeoJSON FeatureCollection.

    Ways whose nodes are not all loaded are skipped.

    Example:
        writer = GeoJSONWriter(graph, Path("ways.geojson"))
        writer.add_ways(graph)
        writer.save()
    """

    def __init__(self, graph: Graph, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            graph: Graph the exported ways belong to
            output_path: Path where the collection will be saved
        """
        self._graph = graph
        self._output_path = output_path
        self._features: list[dict[str, Any]] = []
        self._skipped: list[str] = []

    def add_way(self, way: Way) -> bool:
        """Add one way to the collection.

        Returns:
            False if the way was skipped because it is incomplete
        """
        try:
            feature = way_feature(way, self._graph)
        except EntityNotFoundError as e:
            logger.debug("Skipping incomplete way %s: %s", way.id, e)
            self._skipped.append(way.id)
            return False

        self._features.append(feature)
        return True

    def add_ways(self, graph: Graph | None = None) -> int:
        """Add every visible way of ``graph`` (default: the writer's graph).

        Returns:
            Number of ways added
        """
        source = graph if graph is not None else self._graph
        added = 0
        for entity in source:
            if isinstance(entity, Way) and entity.visible and self.add_way(entity):
                added += 1
        return added

    @property
    def feature_count(self) -> int:
        return len(self._features)

    @property
    def skipped(self) -> list[str]:
        """Ids of ways skipped as incomplete."""
        return list(self._skipped)

    def to_dict(self) -> dict[str, Any]:
        """The FeatureCollection as a dictionary."""
        return {"type": "FeatureCollection", "features": list(self._features)}

    def save(self) -> None:
        """Save the collection to the output path.

        Raises:
            ExportError: If the file cannot be written
        """
        try:
            with open(self._output_path, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, ensure_ascii=False)
        except OSError as e:
            raise ExportError(str(self._output_path), str(e)) from e

        logger.debug("Wrote %d features to %s", len(self._features), self._output_path)


def write_osm_json(graph: Graph, output_path: Path, generator: str = "osmgeo") -> None:
    """Write every entity of ``graph`` as an OSM JSON document.

    Args:
        graph: Graph to write
        output_path: Path where the document will be saved
        generator: Value of the document's ``generator`` field

    Raises:
        ExportError: If the file cannot be written
    """
    document = {
        "version": 0.6,
        "generator": generator,
        "elements": [entity_to_element(entity) for entity in graph],
    }
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(document, f, ensure_ascii=False, indent=1)
    except OSError as e:
        raise ExportError(str(output_path), str(e)) from e
