"""osmgeo - Geometric and structural core of a map feature editor.

osmgeo provides the planar and geodesic geometry used to place, snap and
validate map features, together with an immutable, versioned entity model
(nodes, ways, relations) that supports copy-on-write edits, derived-geometry
caching, turn-restriction inference at junctions and way stitching.

Example:
    >>> from osmgeo.geo import Extent
    >>> Extent((0, 0), (2, 2)).intersection(Extent((1, 1), (3, 3)))
    Extent((1, 1), (2, 2))
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
