"""OSM JSON reader for loading map data.

This module provides the OsmJsonReader class for loading OSM JSON files
and building graph snapshots from their elements.
"""

import json
import logging
from pathlib import Path
from typing import Any

from osmgeo.exceptions import GraphFormatError, GraphLoadError
from osmgeo.graph.graph import Graph
from osmgeo.io.converter import graph_from_elements

logger = logging.getLogger(__name__)


class OsmJsonReader:
    """Loads OSM JSON files and builds a graph.

    Accepts the ``{"elements": [...]}`` documents produced by the Overpass
    API (``[out:json]``) and the OSM API ``.json`` endpoints.

    Example:
        reader = OsmJsonReader(Path("map.json"))
        reader.load()
        way = reader.graph.entity("w42")
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the OSM JSON file
        """
        self._path = path
        self._data: dict[str, Any] | None = None
        self._graph: Graph | None = None

    def load(self) -> None:
        """Load the file and build the graph.

        Raises:
            FileNotFoundError: If the file does not exist
            GraphLoadError: If the file is not valid JSON
            GraphFormatError: If the document or an element is malformed
        """
        if not self._path.exists():
            raise FileNotFoundError(f"OSM file not found: {self._path}")

        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise GraphLoadError(str(self._path), str(e)) from e

        if not isinstance(data, dict) or not isinstance(data.get("elements"), list):
            raise GraphFormatError("expected an object with an 'elements' list")

        self._data = data
        self._graph = graph_from_elements(data["elements"])
        logger.debug("Loaded %d entities from %s", len(self._graph), self._path)

    @property
    def graph(self) -> Graph:
        """Return the loaded graph.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._graph is None:
            raise RuntimeError("OSM data not loaded. Call load() first.")

        return self._graph

    @property
    def element_count(self) -> int:
        """Return the number of elements in the file.

        Duplicate elements are counted, so this can exceed ``len(graph)``.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._data is None:
            raise RuntimeError("OSM data not loaded. Call load() first.")

        return len(self._data["elements"])

    @property
    def generator(self) -> str | None:
        """Return the ``generator`` field of the document, if any.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._data is None:
            raise RuntimeError("OSM data not loaded. Call load() first.")

        return self._data.get("generator")

    def close(self) -> None:
        """Release the loaded data."""
        self._data = None
        self._graph = None

    def __enter__(self) -> "OsmJsonReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
