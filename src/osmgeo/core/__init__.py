"""Core algorithms for osmgeo.

This module contains the graph algorithms built on the entity model:

- Junction reconstruction and turn enumeration (Intersection)
- Turn restriction classification by bearing (infer_restriction)
- Way stitching into connected chains (join_ways)
- Simple multipolygon detection

All functions are pure with respect to their inputs: graphs are read and
new graph snapshots are returned, never modified in place.

Key classes:
- Intersection: Highways at a vertex and the turns between them
- JoinedChain: A run of connected ways with its resolved nodes
"""

from osmgeo.core.intersection import Intersection, infer_restriction, original_way_id
from osmgeo.core.join import JoinedChain, join_ways
from osmgeo.core.multipolygon import (
    is_simple_multipolygon_outer_member,
    simple_multipolygon_outer_member,
)

__all__ = [
    "Intersection",
    "JoinedChain",
    "infer_restriction",
    "is_simple_multipolygon_outer_member",
    "join_ways",
    "original_way_id",
    "simple_multipolygon_outer_member",
]
