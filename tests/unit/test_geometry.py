"""Unit tests for the geometric primitives."""

import math

import pytest

from osmgeo.domain import Node
from osmgeo.geo import RawMercator
from osmgeo.geo.geometry import (
    METERS_PER_DEGREE_LAT,
    angle,
    choose_edge,
    cross,
    edge_equal,
    euclidean_distance,
    interp,
    lat_to_meters,
    line_intersection,
    lon_to_meters,
    meters_to_lat,
    meters_to_lon,
    path_intersections,
    path_length,
    point_in_polygon,
    polygon_contains_polygon,
    polygon_intersects_polygon,
    round_coords,
    spherical_distance,
)

SQUARE = [(0, 0), (0, 2), (2, 2), (2, 0), (0, 0)]


@pytest.fixture
def projection() -> RawMercator:
    """Create the default planar projection."""
    return RawMercator()


class TestPrimitives:
    """Tests for interpolation, cross product and distances."""

    def test_round_coords_floors(self) -> None:
        """Test both components are floored."""
        assert round_coords((1.7, -1.2)) == (1, -2)

    def test_interp_midpoint(self) -> None:
        """Test interpolation at t=0.5."""
        assert interp((0, 0), (2, 4), 0.5) == (1.0, 2.0)

    def test_interp_extrapolates(self) -> None:
        """Test t outside [0, 1] extrapolates along the line."""
        assert interp((0, 0), (1, 1), 2) == (2, 2)

    def test_cross_sign(self) -> None:
        """Test cross product sign follows turn direction."""
        assert cross((0, 0), (1, 0), (0, 1)) > 0
        assert cross((0, 0), (0, 1), (1, 0)) < 0
        assert cross((0, 0), (1, 1), (2, 2)) == 0

    def test_euclidean_distance(self) -> None:
        """Test the 3-4-5 triangle."""
        assert euclidean_distance((0, 0), (3, 4)) == 5

    def test_edge_equal_either_order(self) -> None:
        """Test node-id pairs match regardless of order."""
        assert edge_equal(("n1", "n2"), ("n2", "n1"))
        assert edge_equal(("n1", "n2"), ("n1", "n2"))
        assert not edge_equal(("n1", "n2"), ("n1", "n3"))


class TestMeterConversions:
    """Tests for degree/meter conversions."""

    def test_lat_to_meters(self) -> None:
        """Test one degree of latitude."""
        assert lat_to_meters(1) == METERS_PER_DEGREE_LAT

    def test_lon_to_meters_shrinks_with_latitude(self) -> None:
        """Test a degree of longitude is half as long at 60 degrees."""
        assert lon_to_meters(1, 60) == pytest.approx(lon_to_meters(1, 0) / 2)

    def test_lon_to_meters_at_pole(self) -> None:
        """Test longitude spans no distance at the poles."""
        assert lon_to_meters(1, 90) == 0
        assert lon_to_meters(1, -95) == 0
        assert meters_to_lon(100, 90) == 0

    def test_inverse_conversions(self) -> None:
        """Test meters_to_* undo *_to_meters."""
        assert meters_to_lat(lat_to_meters(0.25)) == pytest.approx(0.25)
        assert meters_to_lon(lon_to_meters(0.25, 45), 45) == pytest.approx(0.25)

    def test_spherical_distance_along_meridian(self) -> None:
        """Test distance between points on the same meridian."""
        assert spherical_distance((10, 0), (10, 1)) == pytest.approx(METERS_PER_DEGREE_LAT)


class TestAngleAndEdges:
    """Tests for projected bearings and nearest edge selection."""

    def test_angle_east_is_zero(self, projection: RawMercator) -> None:
        """Test a node due east lies at angle 0."""
        a = Node(id="n1", loc=(0, 0))
        b = Node(id="n2", loc=(1, 0))
        assert angle(a, b, projection) == pytest.approx(0)

    def test_angle_north_points_up_screen(self, projection: RawMercator) -> None:
        """Test north maps to negative planar y."""
        a = Node(id="n1", loc=(0, 0))
        b = Node(id="n2", loc=(0, 1))
        assert angle(a, b, projection) == pytest.approx(-math.pi / 2)

    def test_choose_edge_picks_nearest(self, projection: RawMercator) -> None:
        """Test the nearest edge and the projected point on it."""
        nodes = [
            Node(id="n1", loc=(0, 0)),
            Node(id="n2", loc=(1, 0)),
            Node(id="n3", loc=(2, 0)),
        ]
        choice = choose_edge(nodes, projection((1.5, 0.1)), projection)

        assert choice is not None
        assert choice.index == 2
        assert choice.loc[0] == pytest.approx(1.5)
        assert choice.loc[1] == pytest.approx(0, abs=1e-9)
        assert choice.distance > 0

    def test_choose_edge_clamps_to_endpoint(self, projection: RawMercator) -> None:
        """Test points beyond the polyline snap to its end."""
        nodes = [Node(id="n1", loc=(0, 0)), Node(id="n2", loc=(1, 0))]
        choice = choose_edge(nodes, projection((3, 0)), projection)

        assert choice is not None
        assert choice.index == 1
        assert choice.loc[0] == pytest.approx(1)

    def test_choose_edge_single_node(self, projection: RawMercator) -> None:
        """Test a polyline without edges yields None."""
        assert choose_edge([Node(id="n1", loc=(0, 0))], (0, 0), projection) is None

    def test_choose_edge_zero_length_edge(self, projection: RawMercator) -> None:
        """Test a repeated node does not divide by zero."""
        nodes = [Node(id="n1", loc=(1, 1)), Node(id="n2", loc=(1, 1))]
        choice = choose_edge(nodes, projection((0, 0)), projection)

        assert choice is not None
        assert choice.loc[0] == pytest.approx(1)
        assert choice.loc[1] == pytest.approx(1)


class TestIntersections:
    """Tests for segment and path intersections."""

    def test_crossing_segments(self) -> None:
        """Test crossing diagonals meet in the middle."""
        assert line_intersection([(0, 0), (2, 2)], [(0, 2), (2, 0)]) == (1.0, 1.0)

    def test_disjoint_segments(self) -> None:
        """Test segments whose lines cross outside both segments."""
        assert line_intersection([(0, 0), (1, 1)], [(3, 0), (4, -1)]) is None

    def test_parallel_segments(self) -> None:
        """Test parallel segments never intersect."""
        assert line_intersection([(0, 0), (2, 0)], [(0, 1), (2, 1)]) is None

    def test_collinear_segments(self) -> None:
        """Test overlapping collinear segments report no intersection."""
        assert line_intersection([(0, 0), (2, 0)], [(1, 0), (3, 0)]) is None

    def test_path_intersections(self) -> None:
        """Test a zigzag crossing a straight line twice."""
        zigzag = [(0, -1), (1, 1), (2, -1)]
        line = [(-1, 0), (3, 0)]
        hits = path_intersections(zigzag, line)

        assert len(hits) == 2
        assert hits[0] == pytest.approx((0.5, 0.0))
        assert hits[1] == pytest.approx((1.5, 0.0))


class TestPolygons:
    """Tests for point and polygon containment."""

    def test_point_inside(self) -> None:
        """Test a point at the center of a square."""
        assert point_in_polygon((1, 1), SQUARE)

    def test_point_outside(self) -> None:
        """Test a point beyond the square."""
        assert not point_in_polygon((3, 3), SQUARE)

    def test_open_ring(self) -> None:
        """Test a ring without a repeated first vertex."""
        assert point_in_polygon((1, 1), SQUARE[:-1])

    def test_polygon_contains_polygon(self) -> None:
        """Test containment of a smaller square."""
        inner = [(0.5, 0.5), (0.5, 1.5), (1.5, 1.5), (1.5, 0.5), (0.5, 0.5)]
        assert polygon_contains_polygon(SQUARE, inner)
        assert not polygon_contains_polygon(inner, SQUARE)

    def test_polygon_intersects_by_vertex(self) -> None:
        """Test overlap detected through a contained vertex."""
        other = [(1, 1), (1, 3), (3, 3), (3, 1), (1, 1)]
        assert polygon_intersects_polygon(SQUARE, other)

    def test_polygon_intersects_by_segments(self) -> None:
        """Test a cross shape only detected with segment checks."""
        bar = [(-1, 0.5), (-1, 1.5), (3, 1.5), (3, 0.5), (-1, 0.5)]
        assert not polygon_intersects_polygon(SQUARE, bar)
        assert polygon_intersects_polygon(SQUARE, bar, check_segments=True)

    def test_path_length(self) -> None:
        """Test length of an L-shaped path."""
        assert path_length([(0, 0), (3, 0), (3, 4)]) == 7
        assert path_length([(0, 0)]) == 0
