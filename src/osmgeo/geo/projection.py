"""Raw planar projection.

The editor only ever shows a small region that does not cross the
antimeridian, so the projection here is the bare Mercator formula plus a
scale and a translation. There is no clipping, no spherical rotation and no
adaptive resampling.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Protocol

from osmgeo.geo.geometry import Coordinate


class Projection(Protocol):
    """Forward/inverse mapping between lon/lat degrees and planar coordinates."""

    def __call__(self, point: Sequence[float]) -> Coordinate: ...

    def invert(self, point: Sequence[float]) -> Coordinate: ...


def mercator_raw(lam: float, phi: float) -> Coordinate:
    """Spherical Mercator for angles in radians."""
    return (lam, math.log(math.tan(math.pi / 4 + phi / 2)))


def mercator_raw_invert(x: float, y: float) -> Coordinate:
    """Inverse of ``mercator_raw``, returning radians."""
    return (x, 2 * math.atan(math.exp(y)) - math.pi / 2)


@dataclass(frozen=True)
class RawMercator:
    """Mercator projection with scale and translation only.

    Planar y grows downwards (screen convention): northern points get
    smaller y values.

    Attributes:
        scale: Planar units per radian
        translate: Planar offset added after scaling
    """

    scale: float = 512 / math.pi
    translate: Coordinate = (0.0, 0.0)

    def __call__(self, point: Sequence[float]) -> Coordinate:
        x, y = mercator_raw(math.radians(point[0]), math.radians(point[1]))
        return (x * self.scale + self.translate[0], self.translate[1] - y * self.scale)

    def invert(self, point: Sequence[float]) -> Coordinate:
        """Map a planar point back to lon/lat degrees."""
        lam, phi = mercator_raw_invert(
            (point[0] - self.translate[0]) / self.scale,
            (self.translate[1] - point[1]) / self.scale,
        )
        return (math.degrees(lam), math.degrees(phi))

    def with_scale(self, scale: float) -> "RawMercator":
        """Return a copy using a different scale."""
        return replace(self, scale=float(scale))

    def with_translate(self, translate: Sequence[float]) -> "RawMercator":
        """Return a copy using a different translation."""
        return replace(self, translate=(float(translate[0]), float(translate[1])))
