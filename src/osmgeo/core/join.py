"""Stitching way fragments into connected chains.

``join_ways`` groups ways (or relation members referring to ways) whose
endpoints coincide into chains, reversing fragments where needed. Joining is
greedy: each chain end takes the first pending fragment, in input order,
that attaches to it. The result is deterministic but not guaranteed to be
the pairing with the fewest chains.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol

from osmgeo.actions.reverse import reverse_way
from osmgeo.domain.node import Node
from osmgeo.graph.protocol import Resolver

logger = logging.getLogger(__name__)


class MemberLike(Protocol):
    """Anything with a ``type`` and an ``id``: a Way or a relation Member."""

    @property
    def id(self) -> str: ...

    @property
    def type(self) -> str: ...


@dataclass
class JoinedChain:
    """A run of connected members.

    Attributes:
        members: Members in chain order; tagged members traversed backwards
            are replaced by their reversed versions
        nodes: Resolved nodes along the chain, shared endpoints not repeated
    """

    members: list[Any] = field(default_factory=list)
    nodes: list[Node] = field(default_factory=list)

    def is_closed(self) -> bool:
        return bool(self.nodes) and self.nodes[0].id == self.nodes[-1].id

    def node_ids(self) -> list[str]:
        return [n.id for n in self.nodes]

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.members)


def join_ways(
    members: Iterable[MemberLike],
    graph: Resolver,
    reverse_tagged: bool = True,
) -> list[JoinedChain]:
    """Join members into sequences of connecting ways.

    Non-way members and members missing from the graph are ignored. A member
    with ``tags`` (i.e. a Way rather than a relation Member) that has to be
    traversed backwards is replaced in the output by its reversed version,
    tags corrected.

    Args:
        members: Ways or relation members, in preference order
        graph: Graph resolving member ids
        reverse_tagged: Reverse tags of tagged members traversed backwards

    Returns:
        Chains in the order they were started
    """
    candidates = list(members)
    pending = [m for m in candidates if m.type == "way" and graph.has_entity(m.id)]
    if len(pending) < len(candidates):
        logger.debug("Ignoring %d non-way or incomplete members", len(candidates) - len(pending))

    def resolve(member: MemberLike) -> list[Node]:
        return graph.child_nodes(graph.entity(member.id))  # type: ignore[arg-type]

    def reverse(member: MemberLike) -> Any:
        if reverse_tagged and getattr(member, "tags", None) is not None:
            return reverse_way(graph, member.id).entity(member.id)
        return member

    joined: list[JoinedChain] = []

    while pending:
        member = pending.pop(0)
        current = JoinedChain(members=[member], nodes=list(resolve(member)))
        joined.append(current)
        nodes = current.nodes

        while pending and nodes and nodes[0].id != nodes[-1].id:
            first = nodes[0].id
            last = nodes[-1].id
            found: tuple[int, Any, list[Node], bool] | None = None

            for i, candidate in enumerate(pending):
                what = resolve(candidate)
                if not what:
                    continue

                if last == what[0].id:
                    found = (i, candidate, what[1:], True)
                elif last == what[-1].id:
                    found = (i, reverse(candidate), what[:-1][::-1], True)
                elif first == what[-1].id:
                    found = (i, candidate, what[:-1], False)
                elif first == what[0].id:
                    found = (i, reverse(candidate), what[1:][::-1], False)
                else:
                    continue
                break

            if found is None:
                break

            i, member, what, append = found
            if append:
                current.members.append(member)
                nodes.extend(what)
            else:
                current.members.insert(0, member)
                nodes[:0] = what
            del pending[i]

    return joined
