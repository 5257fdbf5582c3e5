"""Graph snapshots for osmgeo.

Key classes:
- Resolver: Protocol of the graph operations the core relies on
- Graph: In-memory implementation with identity-keyed derived-value caching
"""

from osmgeo.graph.graph import Graph
from osmgeo.graph.protocol import Resolver

__all__ = [
    "Graph",
    "Resolver",
]
