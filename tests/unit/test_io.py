"""Unit tests for the map data I/O layer.

Tests for OsmJsonReader, GeoJSONWriter, and converter functions.
"""

import json
from pathlib import Path

import pytest

from osmgeo.domain import Node, Relation, Way
from osmgeo.exceptions import ExportError, GraphFormatError, GraphLoadError
from osmgeo.graph import Graph
from osmgeo.io import (
    GeoJSONWriter,
    OsmJsonReader,
    element_to_entity,
    entity_to_element,
    graph_from_elements,
    write_osm_json,
)

ELEMENTS = [
    {"type": "node", "id": 1, "lat": 52.5, "lon": 13.4, "version": 2, "user": "alice"},
    {"type": "node", "id": 2, "lat": 52.5, "lon": 13.5},
    {"type": "node", "id": 3, "lat": 52.6, "lon": 13.5},
    {"type": "way", "id": 10, "nodes": [1, 2, 3], "tags": {"highway": "residential"}},
    {
        "type": "relation",
        "id": 100,
        "tags": {"type": "route"},
        "members": [
            {"type": "way", "ref": 10, "role": "forward"},
            {"type": "node", "ref": 1, "role": ""},
        ],
    },
]


@pytest.fixture
def osm_file(tmp_path: Path) -> Path:
    """Write a small OSM JSON document."""
    path = tmp_path / "map.json"
    path.write_text(json.dumps({"version": 0.6, "generator": "test", "elements": ELEMENTS}))
    return path


class TestConverter:
    """Tests for element conversion."""

    def test_node(self) -> None:
        """Test node location is (lon, lat) and metadata is kept."""
        node = element_to_entity(ELEMENTS[0])

        assert isinstance(node, Node)
        assert node.id == "n1"
        assert node.loc == (13.4, 52.5)
        assert node.version == "2"
        assert node.user == "alice"

    def test_node_without_location(self) -> None:
        """Test nodes from id-only responses have no location."""
        node = element_to_entity({"type": "node", "id": 5})
        assert node.loc is None

    def test_way(self) -> None:
        """Test way node refs become node ids."""
        way = element_to_entity(ELEMENTS[3])

        assert isinstance(way, Way)
        assert way.id == "w10"
        assert way.nodes == ("n1", "n2", "n3")
        assert way.tags["highway"] == "residential"

    def test_relation(self) -> None:
        """Test relation members become typed member ids."""
        relation = element_to_entity(ELEMENTS[4])

        assert isinstance(relation, Relation)
        assert [(m.id, m.type, m.role) for m in relation.members] == [
            ("w10", "way", "forward"),
            ("n1", "node", ""),
        ]

    def test_unknown_type(self) -> None:
        """Test unknown element types are rejected."""
        with pytest.raises(GraphFormatError, match="unknown element type"):
            element_to_entity({"type": "area", "id": 1})

    def test_missing_id(self) -> None:
        """Test elements need an id."""
        with pytest.raises(GraphFormatError, match="without id"):
            element_to_entity({"type": "node", "lat": 0, "lon": 0})

    def test_bad_member(self) -> None:
        """Test malformed relation members are rejected."""
        with pytest.raises(GraphFormatError, match="without ref"):
            element_to_entity({"type": "relation", "id": 1, "members": [{"type": "way"}]})
        with pytest.raises(GraphFormatError, match="unknown type"):
            element_to_entity(
                {"type": "relation", "id": 1, "members": [{"type": "area", "ref": 1}]}
            )

    def test_entity_to_element(self) -> None:
        """Test entities convert back to the element layout."""
        for element in ELEMENTS:
            converted = entity_to_element(element_to_entity(element))
            for key in ("type", "id", "nodes", "lat", "lon", "tags", "version", "user"):
                if key in element:
                    assert converted[key] == element[key]

    def test_deleted_entity_keeps_visibility(self) -> None:
        """Test visible=False survives conversion both ways."""
        element = entity_to_element(Node(id="n7", loc=(1, 2), visible=False))
        assert element["visible"] is False
        assert element_to_entity(element).visible is False

        assert "visible" not in entity_to_element(Node(id="n8", loc=(1, 2)))

    def test_graph_from_elements(self) -> None:
        """Test all elements land in one graph with parent indexes."""
        graph = graph_from_elements(ELEMENTS)

        assert len(graph) == 5
        assert [w.id for w in graph.parent_ways(graph.entity("n2"))] == ["w10"]
        assert [r.id for r in graph.parent_relations(graph.entity("w10"))] == ["r100"]

    def test_duplicate_elements_replace(self) -> None:
        """Test a later element with the same id wins."""
        graph = graph_from_elements(
            ELEMENTS[:3]
            + [
                {"type": "way", "id": 10, "nodes": [1, 2]},
                {"type": "way", "id": 10, "nodes": [2, 3]},
            ]
        )
        assert graph.entity("w10").nodes == ("n2", "n3")
        assert graph.parent_ways(graph.entity("n1")) == []


class TestOsmJsonReader:
    """Tests for OsmJsonReader class."""

    def test_load(self, osm_file: Path) -> None:
        """Test loading a document into a graph."""
        reader = OsmJsonReader(osm_file)
        reader.load()

        assert reader.element_count == 5
        assert reader.generator == "test"
        assert reader.graph.entity("w10").nodes == ("n1", "n2", "n3")

    def test_load_nonexistent_file(self) -> None:
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = OsmJsonReader(Path("nonexistent.json"))
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_graph_before_load(self) -> None:
        """Test accessing graph before loading raises RuntimeError."""
        reader = OsmJsonReader(Path("map.json"))
        with pytest.raises(RuntimeError, match="OSM data not loaded"):
            _ = reader.graph

    def test_element_count_before_load(self) -> None:
        """Test accessing element_count before loading raises RuntimeError."""
        reader = OsmJsonReader(Path("map.json"))
        with pytest.raises(RuntimeError, match="OSM data not loaded"):
            _ = reader.element_count

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test unparseable files raise GraphLoadError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(GraphLoadError):
            OsmJsonReader(path).load()

    def test_missing_elements(self, tmp_path: Path) -> None:
        """Test documents without an elements list are rejected."""
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"version": 0.6}))
        with pytest.raises(GraphFormatError):
            OsmJsonReader(path).load()

    def test_context_manager(self, osm_file: Path) -> None:
        """Test the reader loads on entry and releases on exit."""
        with OsmJsonReader(osm_file) as reader:
            assert len(reader.graph) == 5

        with pytest.raises(RuntimeError):
            _ = reader.graph


class TestWriters:
    """Tests for GeoJSONWriter and write_osm_json."""

    def test_geojson_feature_collection(self, tmp_path: Path) -> None:
        """Test ways are written as features with tags as properties."""
        graph = graph_from_elements(ELEMENTS)
        output = tmp_path / "ways.geojson"

        writer = GeoJSONWriter(graph, output)
        assert writer.add_ways() == 1
        writer.save()

        data = json.loads(output.read_text())
        assert data["type"] == "FeatureCollection"
        (feature,) = data["features"]
        assert feature["id"] == "w10"
        assert feature["properties"] == {"highway": "residential"}
        assert feature["geometry"] == {
            "type": "LineString",
            "coordinates": [[13.4, 52.5], [13.5, 52.5], [13.5, 52.6]],
        }

    def test_geojson_area_polygon(self, tmp_path: Path) -> None:
        """Test closed area ways become polygons."""
        graph = graph_from_elements(
            ELEMENTS[:3]
            + [{"type": "way", "id": 11, "nodes": [1, 2, 3, 1], "tags": {"landuse": "grass"}}]
        )
        writer = GeoJSONWriter(graph, tmp_path / "areas.geojson")
        writer.add_ways()

        geometry = writer.to_dict()["features"][0]["geometry"]
        assert geometry["type"] == "Polygon"
        assert len(geometry["coordinates"][0]) == 4

    def test_incomplete_way_skipped(self, tmp_path: Path) -> None:
        """Test ways with missing nodes are skipped and reported."""
        graph = Graph([Node(id="n1", loc=(0, 0)), Way(id="w1", nodes=("n1", "n2"))])
        writer = GeoJSONWriter(graph, tmp_path / "out.geojson")

        assert writer.add_ways() == 0
        assert writer.skipped == ["w1"]
        assert writer.feature_count == 0

    def test_geojson_unwritable(self, tmp_path: Path) -> None:
        """Test write failures raise ExportError."""
        writer = GeoJSONWriter(Graph(), tmp_path / "missing" / "out.geojson")
        with pytest.raises(ExportError):
            writer.save()

    def test_write_osm_json_reloads(self, tmp_path: Path) -> None:
        """Test a written document loads back into an equivalent graph."""
        graph = graph_from_elements(ELEMENTS)
        output = tmp_path / "copy.json"
        write_osm_json(graph, output)

        with OsmJsonReader(output) as reader:
            reloaded = reader.graph
            assert reader.generator == "osmgeo"

        assert [e.id for e in reloaded] == [e.id for e in graph]
        assert reloaded.entity("n1").loc == (13.4, 52.5)
        assert reloaded.entity("r100").members == graph.entity("r100").members

    def test_write_osm_json_keeps_deleted(self, tmp_path: Path) -> None:
        """Test a deleted entity reloads as deleted."""
        graph = graph_from_elements(ELEMENTS).replace(Node(id="n9", loc=(0, 0), visible=False))
        output = tmp_path / "deleted.json"
        write_osm_json(graph, output)

        with OsmJsonReader(output) as reader:
            assert reader.graph.entity("n9").visible is False
            assert reader.graph.entity("n1").visible is True
