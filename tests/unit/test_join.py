"""Unit tests for way joining and multipolygon helpers."""

from itertools import permutations

import pytest

from osmgeo.core import (
    JoinedChain,
    is_simple_multipolygon_outer_member,
    join_ways,
    simple_multipolygon_outer_member,
)
from osmgeo.domain import Member, Node, Relation, Way
from osmgeo.graph import Graph


@pytest.fixture
def graph() -> Graph:
    """Create a graph of way fragments.

    w1, w2 and w3 form one line n1-n2-n3-n4 with w3 drawn backwards; w4 is
    disconnected; w5 closes a triangle with w1 and w2.
    """
    return Graph(
        [Node(id=f"n{i}", loc=(i, 0)) for i in range(1, 7)]
        + [
            Way(id="w1", nodes=("n1", "n2")),
            Way(id="w2", nodes=("n2", "n3")),
            Way(id="w3", tags={"highway": "path", "incline": "up"}, nodes=("n4", "n3")),
            Way(id="w4", nodes=("n5", "n6")),
            Way(id="w5", nodes=("n3", "n1")),
        ]
    )


def ways(graph: Graph, *ids: str) -> list:
    """Look up ways by id."""
    return [graph.entity(way_id) for way_id in ids]


class TestJoinWays:
    """Tests for join_ways."""

    def test_appends_and_reverses(self, graph: Graph) -> None:
        """Test fragments are chained and a backwards fragment reversed."""
        chains = join_ways(ways(graph, "w1", "w2", "w3", "w4"), graph)

        assert len(chains) == 2
        assert chains[0].node_ids() == ["n1", "n2", "n3", "n4"]
        assert [m.id for m in chains[0].members] == ["w1", "w2", "w3"]
        assert chains[1].node_ids() == ["n5", "n6"]

    def test_reversed_member_has_corrected_tags(self, graph: Graph) -> None:
        """Test a tagged member traversed backwards is replaced by its reversal."""
        chain = join_ways(ways(graph, "w1", "w2", "w3"), graph)[0]
        reversed_w3 = chain.members[2]

        assert reversed_w3 is not graph.entity("w3")
        assert reversed_w3.nodes == ("n3", "n4")
        assert reversed_w3.tags["incline"] == "down"

    def test_reverse_tagged_disabled(self, graph: Graph) -> None:
        """Test members are kept as-is when reversal is turned off."""
        chain = join_ways(ways(graph, "w1", "w2", "w3"), graph, reverse_tagged=False)[0]
        assert chain.members[2] is graph.entity("w3")
        assert chain.node_ids() == ["n1", "n2", "n3", "n4"]

    def test_prepends(self, graph: Graph) -> None:
        """Test a fragment attaching before the chain start is prepended."""
        chain = join_ways(ways(graph, "w2", "w1"), graph)[0]
        assert [m.id for m in chain] == ["w1", "w2"]
        assert chain.node_ids() == ["n1", "n2", "n3"]

    def test_prepends_reversed(self) -> None:
        """Test a fragment sharing the chain start is reversed and prepended."""
        graph = Graph(
            [Node(id=f"n{i}", loc=(i, 0)) for i in range(1, 4)]
            + [
                Way(id="w1", tags={"x": "left"}, nodes=("n2", "n1")),
                Way(id="w2", nodes=("n2", "n3")),
            ]
        )
        chain = join_ways(ways(graph, "w2", "w1"), graph)[0]

        assert chain.node_ids() == ["n1", "n2", "n3"]
        assert chain.members[0].id == "w1"
        assert chain.members[0].nodes == ("n1", "n2")
        assert chain.members[0].tags["x"] == "right"

    def test_input_order_does_not_change_nodes(self) -> None:
        """Test every ordering of mixed-direction fragments gives the same nodes."""
        graph = Graph(
            [Node(id=f"n{i}", loc=(i, 0)) for i in range(1, 6)]
            + [
                Way(id="w1", nodes=("n1", "n2")),
                Way(id="w2", nodes=("n3", "n2")),
                Way(id="w3", nodes=("n3", "n4")),
                Way(id="w4", nodes=("n5", "n4")),
            ]
        )

        for order in permutations(["w1", "w2", "w3", "w4"]):
            chains = join_ways(ways(graph, *order), graph)
            assert len(chains) == 1, order
            assert sorted(chains[0].node_ids()) == ["n1", "n2", "n3", "n4", "n5"], order

    def test_closed_ring(self, graph: Graph) -> None:
        """Test joining stops once the chain closes."""
        chains = join_ways(ways(graph, "w1", "w2", "w5", "w4"), graph)

        assert chains[0].is_closed()
        assert chains[0].node_ids() == ["n1", "n2", "n3", "n1"]
        assert len(chains[0]) == 3
        assert not chains[1].is_closed()

    def test_relation_members(self, graph: Graph) -> None:
        """Test relation members are joined and non-ways ignored."""
        members = [
            Member(id="w2", type="way", role="outer"),
            Member(id="n1", type="node", role="label"),
            Member(id="w9", type="way", role="outer"),
            Member(id="w3", type="way", role="outer"),
        ]
        chains = join_ways(members, graph)

        assert len(chains) == 1
        assert chains[0].members == [members[0], members[3]]
        assert chains[0].node_ids() == ["n2", "n3", "n4"]

    def test_generator_input(self, graph: Graph) -> None:
        """Test any iterable of members is accepted."""
        chains = join_ways((w for w in ways(graph, "w1", "w2")), graph)
        assert chains[0].node_ids() == ["n1", "n2", "n3"]

    def test_empty(self, graph: Graph) -> None:
        """Test joining nothing."""
        assert join_ways([], graph) == []

    def test_joined_chain_defaults(self) -> None:
        """Test an empty chain is open."""
        chain = JoinedChain()
        assert not chain.is_closed()
        assert len(chain) == 0


class TestSimpleMultipolygon:
    """Tests for the simple multipolygon helpers."""

    @pytest.fixture
    def mp_graph(self) -> Graph:
        """Create an untagged multipolygon with one outer and one inner ring."""
        return Graph(
            [
                Way(id="w1", nodes=("n1", "n2", "n3", "n1")),
                Way(id="w2", nodes=("n4", "n5", "n6", "n4")),
                Relation(
                    id="r1",
                    tags={"type": "multipolygon"},
                    members=(
                        Member(id="w1", type="way", role="outer"),
                        Member(id="w2", type="way", role="inner"),
                    ),
                ),
            ]
        )

    def test_outer_member(self, mp_graph: Graph) -> None:
        """Test the outer way belongs to the simple multipolygon."""
        parent = is_simple_multipolygon_outer_member(mp_graph.entity("w1"), mp_graph)
        assert parent is mp_graph.entity("r1")

    def test_inner_member(self, mp_graph: Graph) -> None:
        """Test an inner way is not the outer member."""
        assert is_simple_multipolygon_outer_member(mp_graph.entity("w2"), mp_graph) is None

    def test_outer_of_inner(self, mp_graph: Graph) -> None:
        """Test the outer way can be found from an inner one."""
        outer = simple_multipolygon_outer_member(mp_graph.entity("w2"), mp_graph)
        assert outer is mp_graph.entity("w1")

    def test_tagged_relation_is_not_simple(self, mp_graph: Graph) -> None:
        """Test a relation carrying area tags is not simple."""
        relation = mp_graph.entity("r1").update(
            tags={"type": "multipolygon", "building": "yes"}
        )
        graph = mp_graph.replace(relation)

        assert is_simple_multipolygon_outer_member(graph.entity("w1"), graph) is None
        assert simple_multipolygon_outer_member(graph.entity("w2"), graph) is None

    def test_two_outers_not_simple(self, mp_graph: Graph) -> None:
        """Test a second outer member disqualifies the relation."""
        relation = mp_graph.entity("r1")
        relation = relation.update(
            members=relation.members + (Member(id="w3", type="way", role="outer"),)
        )
        graph = mp_graph.replace(Way(id="w3", nodes=("n7", "n8", "n9", "n7"))).replace(relation)

        assert is_simple_multipolygon_outer_member(graph.entity("w1"), graph) is None
        assert simple_multipolygon_outer_member(graph.entity("w2"), graph) is None

    def test_non_way(self, mp_graph: Graph) -> None:
        """Test only ways can be members of a simple multipolygon."""
        assert is_simple_multipolygon_outer_member(Node(id="n1"), mp_graph) is None
