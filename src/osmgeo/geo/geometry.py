"""Geometric primitives for feature placement, snapping and validation.

This module provides the stateless math used throughout osmgeo:
- Interpolation and the 2D cross product
- Planar (Euclidean) and local-scale spherical distances
- Degree <-> meter conversions on a fixed-radius Earth
- Bearings between projected nodes
- Nearest edge of a polyline to a point
- Segment/path intersections
- Point-in-polygon and polygon containment/intersection tests
- Path length

Points are ``(x, y)`` pairs. Call sites decide whether those are planar
(projected) or geographic ``(lon, lat)`` coordinates; the two are never mixed
within one call. Degenerate inputs (parallel segments, empty polylines) yield
``None`` rather than raising.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from osmgeo.domain.node import Node
    from osmgeo.geo.projection import Projection

Coordinate = tuple[float, float]

# 2 * pi * r / 360 for the WGS84 polar radius (6356752.314245179 m)
METERS_PER_DEGREE_LAT = 110946.257617
# 2 * pi * r / 360 for the WGS84 equatorial radius (6378137.0 m)
METERS_PER_DEGREE_LON = 111319.490793


@dataclass(frozen=True, slots=True)
class EdgeChoice:
    """Result of choosing the polyline edge nearest to a point.

    Attributes:
        index: Index of the edge's end vertex, i.e. where a node splitting
            that edge would be inserted
        distance: Planar distance from the point to the edge
        loc: Geographic location of the nearest point on the edge
    """

    index: int
    distance: float
    loc: Coordinate


def round_coords(c: Sequence[float]) -> Coordinate:
    """Floor both components of a coordinate."""
    return (math.floor(c[0]), math.floor(c[1]))


def interp(p1: Sequence[float], p2: Sequence[float], t: float) -> Coordinate:
    """Linearly interpolate between two points.

    ``t`` is not restricted to ``[0, 1]``; values outside extrapolate.

    Examples:
        >>> interp((0, 0), (2, 4), 0.5)
        (1.0, 2.0)
    """
    return (p1[0] + (p2[0] - p1[0]) * t, p1[1] + (p2[1] - p1[1]) * t)


def cross(o: Sequence[float], a: Sequence[float], b: Sequence[float]) -> float:
    """2D cross product of OA and OB vectors.

    This is the z-component of their 3D cross product, twice the signed area
    of triangle OAB.

    Returns:
        Positive if OAB makes a counter-clockwise turn, negative for a
        clockwise turn, zero if the points are collinear
    """
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Planar distance between two points."""
    x = a[0] - b[0]
    y = a[1] - b[1]
    return math.sqrt(x * x + y * y)


def lat_to_meters(d_lat: float) -> float:
    """Convert a latitude difference in degrees to meters."""
    return d_lat * METERS_PER_DEGREE_LAT


def lon_to_meters(d_lon: float, at_lat: float) -> float:
    """Convert a longitude difference in degrees to meters at a latitude.

    Returns 0 at or beyond the poles.
    """
    if abs(at_lat) >= 90:
        return 0.0
    return d_lon * METERS_PER_DEGREE_LON * abs(math.cos(math.radians(at_lat)))


def meters_to_lat(m: float) -> float:
    """Convert meters to a latitude difference in degrees."""
    return m / METERS_PER_DEGREE_LAT


def meters_to_lon(m: float, at_lat: float) -> float:
    """Convert meters to a longitude difference in degrees at a latitude.

    Returns 0 at or beyond the poles.
    """
    if abs(at_lat) >= 90:
        return 0.0
    return m / METERS_PER_DEGREE_LON / abs(math.cos(math.radians(at_lat)))


def spherical_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Equirectangular approximation of the distance between two lon/lat points.

    Longitude is scaled at the mean latitude of the two points. Adequate for
    the local distances an editor deals with, not for long geodesics.

    Returns:
        Distance in meters
    """
    x = lon_to_meters(a[0] - b[0], (a[1] + b[1]) / 2)
    y = lat_to_meters(a[1] - b[1])
    return math.sqrt(x * x + y * y)


def edge_equal(a: Sequence[str], b: Sequence[str]) -> bool:
    """Check whether two node-id pairs describe the same edge in either order."""
    return (a[0] == b[0] and a[1] == b[1]) or (a[0] == b[1] and a[1] == b[0])


def angle(a: "Node", b: "Node", projection: "Projection") -> float:
    """Counter-clockwise angle between the positive X axis and the line a -> b.

    Both nodes are projected first, so the angle is measured in planar space.

    Returns:
        Angle in radians in the range (-pi, pi]
    """
    pa = projection(a.loc)
    pb = projection(b.loc)
    return math.atan2(pb[1] - pa[1], pb[0] - pa[0])


def choose_edge(
    nodes: Sequence["Node"],
    point: Sequence[float],
    projection: "Projection",
) -> EdgeChoice | None:
    """Choose the polyline edge closest to a projected point.

    The distance to an edge is the distance to the orthogonal projection of
    ``point`` onto that edge, clamped to the edge's endpoints. When two edges
    are exactly equally close, the first one wins.

    Args:
        nodes: Nodes of the polyline, in order
        point: Point in projected (planar) coordinates
        projection: Projection used to place the nodes

    Returns:
        EdgeChoice, or None if the polyline has fewer than two nodes
    """
    points = [projection(n.loc) for n in nodes]
    best: EdgeChoice | None = None
    min_distance = math.inf

    for i in range(len(points) - 1):
        o = points[i]
        s = (points[i + 1][0] - o[0], points[i + 1][1] - o[1])
        v = (point[0] - o[0], point[1] - o[1])
        length_sq = s[0] * s[0] + s[1] * s[1]

        # Zero-length edges collapse onto their start vertex
        proj = (v[0] * s[0] + v[1] * s[1]) / length_sq if length_sq else 0.0

        if proj < 0:
            p = o
        elif proj > 1:
            p = points[i + 1]
        else:
            p = (o[0] + proj * s[0], o[1] + proj * s[1])

        d = euclidean_distance(p, point)
        if d < min_distance:
            min_distance = d
            best = EdgeChoice(index=i + 1, distance=d, loc=projection.invert(p))

    return best


def line_intersection(
    a: Sequence[Sequence[float]],
    b: Sequence[Sequence[float]],
) -> Coordinate | None:
    """Intersection point of two finite segments.

    Uses the vector cross product formulation: with p + t*r and q + u*s the
    segments intersect where both t and u lie in [0, 1]. Parallel and
    collinear segments report no intersection; overlaps are not resolved.

    Args:
        a: Segment as a pair of points
        b: Segment as a pair of points

    Returns:
        Intersection point, or None

    Examples:
        >>> line_intersection([(0, 0), (2, 2)], [(0, 2), (2, 0)])
        (1.0, 1.0)
    """
    p, p2 = a[0], a[1]
    q, q2 = b[0], b[1]
    r = (p2[0] - p[0], p2[1] - p[1])
    s = (q2[0] - q[0], q2[1] - q[1])
    qp = (q[0] - p[0], q[1] - p[1])

    u_numerator = qp[0] * r[1] - qp[1] * r[0]
    denominator = r[0] * s[1] - r[1] * s[0]

    if u_numerator and denominator:
        u = u_numerator / denominator
        t = (qp[0] * s[1] - qp[1] * s[0]) / denominator

        if 0 <= t <= 1 and 0 <= u <= 1:
            return interp(p, p2, t)

    return None


def path_intersections(
    path1: Sequence[Sequence[float]],
    path2: Sequence[Sequence[float]],
) -> list[Coordinate]:
    """All pairwise segment intersections between two polylines."""
    intersections: list[Coordinate] = []
    for i in range(len(path1) - 1):
        for j in range(len(path2) - 1):
            hit = line_intersection((path1[i], path1[i + 1]), (path2[j], path2[j + 1]))
            if hit is not None:
                intersections.append(hit)
    return intersections


def point_in_polygon(point: Sequence[float], polygon: Sequence[Sequence[float]]) -> bool:
    """Determine if a point is inside a polygon using ray casting.

    Casts a horizontal ray from the point and counts crossings with the ring
    edges (even-odd rule). The ring need not repeat its first vertex.

    Examples:
        >>> point_in_polygon((1, 1), [(0, 0), (0, 2), (2, 2), (2, 0), (0, 0)])
        True
        >>> point_in_polygon((3, 3), [(0, 0), (0, 2), (2, 2), (2, 0), (0, 0)])
        False
    """
    x, y = point[0], point[1]
    inside = False
    j = len(polygon) - 1

    for i in range(len(polygon)):
        xi, yi = polygon[i][0], polygon[i][1]
        xj, yj = polygon[j][0], polygon[j][1]

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def polygon_contains_polygon(
    outer: Sequence[Sequence[float]],
    inner: Sequence[Sequence[float]],
) -> bool:
    """Check whether every vertex of ``inner`` lies inside ``outer``."""
    return all(point_in_polygon(point, outer) for point in inner)


def polygon_intersects_polygon(
    outer: Sequence[Sequence[float]],
    inner: Sequence[Sequence[float]],
    check_segments: bool = False,
) -> bool:
    """Check whether two polygons overlap.

    Vertex containment is tested first; edge crossings only when
    ``check_segments`` is set and no vertex of ``inner`` lies in ``outer``.
    """
    if any(point_in_polygon(point, outer) for point in inner):
        return True
    if not check_segments:
        return False

    for i in range(len(outer) - 1):
        for j in range(len(inner) - 1):
            if line_intersection((outer[i], outer[i + 1]), (inner[j], inner[j + 1])) is not None:
                return True
    return False


def path_length(path: Sequence[Sequence[float]]) -> float:
    """Sum of the planar lengths of consecutive path segments."""
    return sum(euclidean_distance(path[i], path[i + 1]) for i in range(len(path) - 1))
