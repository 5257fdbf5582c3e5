"""Map data I/O layer for osmgeo.

This module handles reading OSM JSON documents and writing GeoJSON. It
provides a thin layer between file formats and the domain models; the core
algorithms never import it.

Key responsibilities:
- Load OSM JSON (Overpass or OSM API) into a Graph
- Convert elements to and from domain entities
- Export way geometry as a GeoJSON FeatureCollection

Key classes:
- OsmJsonReader: Load OSM JSON files
- GeoJSONWriter: Save way geometry
"""

from osmgeo.io.converter import element_to_entity, entity_to_element, graph_from_elements
from osmgeo.io.reader import OsmJsonReader
from osmgeo.io.writer import GeoJSONWriter, way_feature, write_osm_json

__all__ = [
    "GeoJSONWriter",
    "OsmJsonReader",
    "element_to_entity",
    "entity_to_element",
    "graph_from_elements",
    "way_feature",
    "write_osm_json",
]
