"""Unit tests for the planar projection and spherical area."""

import math

import pytest

from osmgeo.geo import RawMercator, spherical_area
from osmgeo.geo.projection import mercator_raw, mercator_raw_invert


class TestRawMercator:
    """Tests for RawMercator."""

    def test_origin(self) -> None:
        """Test (0, 0) maps to the translation."""
        projection = RawMercator(translate=(10.0, 20.0))
        x, y = projection((0, 0))
        assert x == pytest.approx(10)
        assert y == pytest.approx(20)

    def test_y_grows_southwards(self) -> None:
        """Test northern points get smaller planar y."""
        projection = RawMercator()
        assert projection((0, 10))[1] < projection((0, 0))[1] < projection((0, -10))[1]

    def test_longitude_is_linear(self) -> None:
        """Test x is proportional to longitude."""
        projection = RawMercator(scale=1.0)
        assert projection((90, 0))[0] == pytest.approx(math.pi / 2)

    def test_invert_round_trip(self) -> None:
        """Test invert recovers the original location."""
        projection = RawMercator(scale=1000.0, translate=(5.0, -7.0))
        lon, lat = projection.invert(projection((13.4, 52.5)))
        assert lon == pytest.approx(13.4)
        assert lat == pytest.approx(52.5)

    def test_with_scale_returns_new_projection(self) -> None:
        """Test scale accessor leaves the original unchanged."""
        projection = RawMercator()
        scaled = projection.with_scale(256)

        assert scaled.scale == 256
        assert projection.scale == pytest.approx(512 / math.pi)
        assert scaled((1, 1))[0] != projection((1, 1))[0]

    def test_with_translate(self) -> None:
        """Test translate accessor."""
        projection = RawMercator().with_translate((3, 4))
        assert projection.translate == (3.0, 4.0)

    def test_raw_formulas_are_inverse(self) -> None:
        """Test the raw Mercator formulas invert each other."""
        lam, phi = mercator_raw_invert(*mercator_raw(0.3, -0.6))
        assert lam == pytest.approx(0.3)
        assert phi == pytest.approx(-0.6)


class TestSphericalArea:
    """Tests for spherical_area."""

    def test_small_square_near_equator(self) -> None:
        """Test a 1 degree square is about one square degree in steradians."""
        ring = [(0, 0), (0, 1), (1, 1), (1, 0), (0, 0)]
        expected = math.radians(1) ** 2
        area = spherical_area([ring])
        assert min(area, 4 * math.pi - area) == pytest.approx(expected, rel=1e-3)

    def test_winding_selects_complement(self) -> None:
        """Test the two windings of a ring sum to the whole sphere."""
        ring = [(0, 0), (0, 1), (1, 1), (1, 0), (0, 0)]
        total = spherical_area([ring]) + spherical_area([ring[::-1]])
        assert total == pytest.approx(4 * math.pi)

    def test_closing_vertex_optional(self) -> None:
        """Test an explicitly closed ring equals the open one."""
        closed = [(0, 0), (0, 1), (1, 1), (1, 0), (0, 0)]
        assert spherical_area([closed]) == pytest.approx(spherical_area([closed[:-1]]))

    def test_empty_ring_is_nan(self) -> None:
        """Test a ring without vertices has no area."""
        assert math.isnan(spherical_area([[]]))
