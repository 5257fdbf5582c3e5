"""Axis-aligned bounding boxes.

An Extent is a ``(min, max)`` pair of points with ``min <= max`` on both
axes. The empty extent, ``min=(+inf, +inf)`` and ``max=(-inf, -inf)``, is the
identity of ``extend`` and the result of intersecting disjoint extents.
"""

import math
from collections.abc import Iterator, Sequence
from decimal import Decimal
from typing import Any, Union

from osmgeo.geo.geometry import Coordinate, meters_to_lat, meters_to_lon

ExtentLike = Union["Extent", Sequence[Any]]


def _format_number(value: float) -> str:
    """Format a number the way ECMAScript Number#toString does."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    # repr yields the shortest round-tripping digits, as ECMAScript does
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    n = k + exponent
    prefix = "-" if value < 0 else ""

    if k <= n <= 21:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * -n + digits

    mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
    e = n - 1
    return f"{prefix}{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"


def _is_point_pair(value: Any) -> bool:
    return (
        isinstance(value, Sequence)
        and len(value) == 2
        and isinstance(value[0], Sequence)
        and isinstance(value[1], Sequence)
        and len(value[0]) == 2
        and len(value[1]) == 2
    )


class Extent:
    """Axis-aligned bounding box over two-coordinate points.

    Construction accepts:
    - nothing: the empty extent
    - a single point: a zero-area extent at that point
    - two points: ``Extent(min, max)``
    - a ``(min, max)`` pair
    - another Extent, which is copied

    Operations other than ``_extend`` return new extents.

    Example:
        extent = Extent((0, 0), (2, 2))
        extent.intersects(Extent((1, 1), (3, 3)))  # True
    """

    __slots__ = ("max", "min")

    def __init__(self, min: Any = None, max: Any = None) -> None:  # noqa: A002
        if isinstance(min, Extent):
            self.min: Coordinate = min.min
            self.max: Coordinate = min.max
        elif max is None and _is_point_pair(min):
            self.min = (min[0][0], min[0][1])
            self.max = (min[1][0], min[1][1])
        else:
            lo = min if min is not None else (math.inf, math.inf)
            hi = max if max is not None else (min if min is not None else (-math.inf, -math.inf))
            self.min = (lo[0], lo[1])
            self.max = (hi[0], hi[1])

    def __iter__(self) -> Iterator[Coordinate]:
        yield self.min
        yield self.max

    def __getitem__(self, index: int) -> Coordinate:
        return (self.min, self.max)[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Extent):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"Extent({self.min!r}, {self.max!r})"

    def equals(self, other: ExtentLike) -> bool:
        """Component-wise equality with another extent."""
        return self == Extent(other)

    def is_empty(self) -> bool:
        """Check whether min exceeds max on either axis."""
        return self.min[0] > self.max[0] or self.min[1] > self.max[1]

    def extend(self, other: ExtentLike) -> "Extent":
        """Return the smallest extent covering both extents."""
        other = Extent(other)
        return Extent(
            (min(other.min[0], self.min[0]), min(other.min[1], self.min[1])),
            (max(other.max[0], self.max[0]), max(other.max[1], self.max[1])),
        )

    def _extend(self, other: "Extent") -> None:
        """Grow this extent in place to cover ``other``.

        Only used while accumulating a freshly created extent.
        """
        self.min = (min(other.min[0], self.min[0]), min(other.min[1], self.min[1]))
        self.max = (max(other.max[0], self.max[0]), max(other.max[1], self.max[1]))

    def area(self) -> float:
        """Absolute area of the box."""
        return abs((self.max[0] - self.min[0]) * (self.max[1] - self.min[1]))

    def center(self) -> Coordinate:
        """Midpoint of the box."""
        return ((self.min[0] + self.max[0]) / 2, (self.min[1] + self.max[1]) / 2)

    def polygon(self) -> list[Coordinate]:
        """Closed boundary ring, starting and ending at ``min``."""
        return [
            (self.min[0], self.min[1]),
            (self.min[0], self.max[1]),
            (self.max[0], self.max[1]),
            (self.max[0], self.min[1]),
            (self.min[0], self.min[1]),
        ]

    def contains(self, other: ExtentLike) -> bool:
        """Check whether ``other`` lies entirely within this extent."""
        other = Extent(other)
        return (
            other.min[0] >= self.min[0]
            and other.min[1] >= self.min[1]
            and other.max[0] <= self.max[0]
            and other.max[1] <= self.max[1]
        )

    def intersects(self, other: ExtentLike) -> bool:
        """Check whether the two extents overlap or touch."""
        other = Extent(other)
        return (
            other.min[0] <= self.max[0]
            and other.min[1] <= self.max[1]
            and other.max[0] >= self.min[0]
            and other.max[1] >= self.min[1]
        )

    def intersection(self, other: ExtentLike) -> "Extent":
        """Overlapping region of the two extents, or the empty extent."""
        other = Extent(other)
        if not self.intersects(other):
            return Extent()
        return Extent(
            (max(other.min[0], self.min[0]), max(other.min[1], self.min[1])),
            (min(other.max[0], self.max[0]), min(other.max[1], self.max[1])),
        )

    def percent_contained_in(self, other: ExtentLike) -> float:
        """Fraction of this extent's area covered by ``other``.

        Returns:
            Ratio in [0, 1]; 0 when either area is zero or infinite
        """
        a1 = self.intersection(other).area()
        a2 = self.area()

        if math.isinf(a1) or math.isinf(a2) or a1 == 0 or a2 == 0:
            return 0.0
        return a1 / a2

    def pad_by_meters(self, meters: float) -> "Extent":
        """Grow the extent by a metric distance on every side.

        Meters are converted to degrees at the latitude of the extent's
        center, so the padding is only locally accurate.
        """
        d_lat = meters_to_lat(meters)
        d_lon = meters_to_lon(meters, self.center()[1])
        return Extent(
            (self.min[0] - d_lon, self.min[1] - d_lat),
            (self.max[0] + d_lon, self.max[1] + d_lat),
        )

    def to_param(self) -> str:
        """Serialize as ``"minX,minY,maxX,maxY"``."""
        return ",".join(
            _format_number(v) for v in (self.min[0], self.min[1], self.max[0], self.max[1])
        )
