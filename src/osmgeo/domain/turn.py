"""Turns through a junction vertex.

Turns are derived values: they are produced by intersection inference, never
stored in a graph.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TurnLeg:
    """One side of a turn.

    Attributes:
        node: The node next to the junction on this leg
        way: Id of the original (unsplit) way carrying the leg
    """

    node: str
    way: str

    def to_dict(self) -> dict[str, str]:
        return {"node": self.node, "way": self.way}


@dataclass(frozen=True)
class Turn:
    """A candidate manoeuvre from one way to another (or back onto itself).

    Attributes:
        from_: Incoming leg
        via: Junction vertex id
        to: Outgoing leg
        restriction: Id of the restriction relation affecting this turn
        indirect_restriction: True when the turn is only restricted because
            an ``only_*`` restriction points at a different way
        u: True for the U-turn back onto the incoming way
    """

    from_: TurnLeg
    via: str
    to: TurnLeg
    restriction: str | None = None
    indirect_restriction: bool = False
    u: bool = False

    @property
    def is_restricted(self) -> bool:
        return self.restriction is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize in the ``{from, via, to}`` layout used by edit actions."""
        data: dict[str, Any] = {
            "from": self.from_.to_dict(),
            "via": {"node": self.via},
            "to": self.to.to_dict(),
        }
        if self.restriction is not None:
            data["restriction"] = self.restriction
        if self.indirect_restriction:
            data["indirect_restriction"] = True
        if self.u:
            data["u"] = True
        return data
