"""Spherical polygon area.

Areas are computed on the unit sphere, in steradians, by summing the signed
areas of the spherical trapezoids each ring edge forms with the south pole.
A clockwise ring (in lon/lat with north up) yields its small interior area;
a counter-clockwise ring yields the complement, ``4*pi - area``.
"""

import math
from collections.abc import Sequence


def _ring_sum(ring: Sequence[Sequence[float]]) -> float:
    # Closed rings repeat their first vertex; the closing edge is added below.
    points = list(ring)
    if len(points) > 1 and tuple(points[0][:2]) == tuple(points[-1][:2]):
        points = points[:-1]
    if not points:
        return math.nan

    terms: list[float] = []
    lam0 = math.radians(points[0][0])
    phi0 = math.radians(points[0][1]) / 2 + math.pi / 4
    cos_phi0, sin_phi0 = math.cos(phi0), math.sin(phi0)

    for lon, lat in [(p[0], p[1]) for p in points[1:]] + [(points[0][0], points[0][1])]:
        lam = math.radians(lon)
        phi = math.radians(lat) / 2 + math.pi / 4
        d_lam = lam - lam0
        sd_lam = 1 if d_lam >= 0 else -1
        ad_lam = sd_lam * d_lam
        cos_phi, sin_phi = math.cos(phi), math.sin(phi)
        k = sin_phi0 * sin_phi
        u = cos_phi0 * cos_phi + k * math.cos(ad_lam)
        v = k * sd_lam * math.sin(ad_lam)
        terms.append(math.atan2(v, u))
        lam0, cos_phi0, sin_phi0 = lam, cos_phi, sin_phi

    return math.fsum(terms)


def spherical_area(rings: Sequence[Sequence[Sequence[float]]]) -> float:
    """Area of a GeoJSON-style polygon on the unit sphere.

    Args:
        rings: Polygon rings of ``(lon, lat)`` degrees; the first is the
            exterior, any further rings are holes

    Returns:
        Area in steradians, in ``[0, 4*pi)``; NaN for a polygon without
        vertices
    """
    area = 2 * math.fsum(_ring_sum(ring) for ring in rings)
    if math.isnan(area):
        return area
    return 4 * math.pi + area if area < 0 else area
