"""Graph-transforming actions.

Actions take a graph and return a new graph; they never mutate entities.

Key functions:
- reverse_way: Reverse a way, correcting direction-dependent tags and roles
"""

from osmgeo.actions.reverse import reverse_key, reverse_tags, reverse_value, reverse_way

__all__ = [
    "reverse_key",
    "reverse_tags",
    "reverse_value",
    "reverse_way",
]
