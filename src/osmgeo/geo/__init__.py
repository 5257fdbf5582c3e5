"""Geometry primitives for osmgeo.

This module contains stateless geometry used by the entity model and the
junction and joining algorithms:

- Distances, bearings and degree/meter conversions
- Segment and polygon intersection tests
- Extent: axis-aligned bounding boxes
- RawMercator: scale + translate planar projection
- spherical_area: polygon area on the unit sphere
"""

from osmgeo.geo.area import spherical_area
from osmgeo.geo.extent import Extent
from osmgeo.geo.geometry import (
    EdgeChoice,
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
from osmgeo.geo.projection import Projection, RawMercator

__all__ = [
    "EdgeChoice",
    "Extent",
    "Projection",
    "RawMercator",
    "angle",
    "choose_edge",
    "cross",
    "edge_equal",
    "euclidean_distance",
    "interp",
    "lat_to_meters",
    "line_intersection",
    "lon_to_meters",
    "meters_to_lat",
    "meters_to_lon",
    "path_intersections",
    "path_length",
    "point_in_polygon",
    "polygon_contains_polygon",
    "polygon_intersects_polygon",
    "round_coords",
    "spherical_area",
    "spherical_distance",
]
