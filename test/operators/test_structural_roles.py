import pytest

from netroles.elements import BinaryRelation, Partition, Ranking
from netroles.exceptions import DomainMismatchError
from netroles.network import Direction, Network
from netroles.operators import BINARYRELATION, EQUIVALENCE, RANKING

DIRECTED_PAIRS = {(0, 3), (0, 10), (3, 0), (3, 10), (10, 0), (10, 3), (7, 4), (7, 5)}
SWAPPED_PAIRS = DIRECTED_PAIRS | {(7, 6), (8, 5), (8, 9), (9, 5), (9, 8)}


def off_diagonal(ranking):
    return {(i, j) for i, j in ranking.pairs() if i != j}


def test_strong_structural_equivalence(incoming):
    """Nodes with identical neighbourhoods are equivalent."""
    op = EQUIVALENCE.strong_structural().of(incoming).make()
    assert op.relative(Partition.top(11)) == [0, 1, 2, 0, 3, 4, 5, 6, 7, 8, 0]


def test_strong_structural_equivalence_swapping(swapping):
    """Adjacent nodes with otherwise equal neighbourhoods become equivalent."""
    op = EQUIVALENCE.strong_structural().of(swapping).make()
    assert op.relative(Partition.top(11)) == [0, 1, 2, 0, 3, 4, 5, 6, 7, 7, 0]


def test_strong_structural_ranking(incoming):
    """i ranks below j iff the neighbours of i are neighbours of j."""
    op = RANKING.strong_structural().of(incoming).make()
    result = op.relative(Ranking.top(11))
    assert off_diagonal(result) == DIRECTED_PAIRS
    assert all(result.contains(i, i) for i in range(11))


def test_strong_structural_ranking_swapping(swapping):
    """The swapping view also matches ties inside the compared dyad."""
    op = RANKING.strong_structural().of(swapping).make()
    assert off_diagonal(op.relative(Ranking.top(11))) == SWAPPED_PAIRS


def test_strong_structural_is_constant(incoming, three_classes):
    """Structural roles ignore the input structure."""
    op = EQUIVALENCE.strong_structural().of(incoming).make()
    assert op.is_constant()
    expected = op.relative(Partition.top(11))
    assert op.relative(three_classes) == expected
    assert op.relative(Partition.bottom(11)) == expected
    # interior of a constant operator is one meet
    assert op.interior(three_classes) == three_classes.infimum(expected)
    assert op.closure(three_classes) == three_classes.supremum(expected)


def test_weak_structural_transposes_the_dyad(incoming):
    """A tie between the compared nodes matches the reverse tie."""
    op = EQUIVALENCE.weak_structural().of(incoming).make()
    assert op.relative(Partition.top(11)) == [0, 1, 2, 0, 3, 4, 5, 6, 7, 7, 0]


def test_weak_structural_with_both_directions(network):
    """Two views are combined by meet; one view repeated counts once."""
    outgoing = network.view(Direction.OUTGOING)
    incoming = network.view(Direction.INCOMING)
    both = EQUIVALENCE.weak_structural().of(incoming, outgoing).make()
    single = EQUIVALENCE.weak_structural().of(incoming, incoming).make()
    top = Partition.top(11)
    assert both.relative(top) == single.relative(top)


def test_weak_structural_directed_directions():
    """On directed networks the two directions refine each other."""
    # 0 -> 2, 1 -> 2, 3 -> 0, 3 -> 1, 3 -> 2
    network = Network.from_adjacency(
        [
            [0, 0, 1, 0],
            [0, 0, 1, 0],
            [0, 0, 0, 0],
            [1, 1, 1, 0],
        ],
        directed=True,
    )
    outgoing = network.view(Direction.OUTGOING)
    incoming = network.view(Direction.INCOMING)
    top = Partition.top(4)

    out_only = EQUIVALENCE.weak_structural().of(outgoing).make().relative(top)
    in_only = EQUIVALENCE.weak_structural().of(incoming).make().relative(top)
    both = EQUIVALENCE.weak_structural().of(outgoing, incoming).make().relative(top)
    first = (
        EQUIVALENCE.weak_structural().of(outgoing, incoming).unidirectional().make()
    ).relative(top)

    assert out_only == [0, 0, 1, 2]
    assert in_only == [0, 0, 1, 2]
    assert both == out_only.infimum(in_only)
    assert first == out_only


def test_weak_structural_rejects_mismatched_directions(network):
    """Both directions must cover the same nodes."""
    other = Network.from_adjacency([[None], [1, None]], directed=False)
    with pytest.raises(DomainMismatchError, match="mismatched in node numbers"):
        EQUIVALENCE.weak_structural().of(network.view(), other.view())


def test_structural_relation_with_swap_aware_predicate(swapping):
    """Relations over transposable views accept swap-aware predicates."""
    op = (
        BINARYRELATION.strong_structural()
        .of(swapping)
        .comp_predicate(lambda lhs, rhs, a, b: a.weight == b.weight, swap_aware=True)
        .make()
    )
    result = op.relative(BinaryRelation.top(11))
    ranking = RANKING.strong_structural().of(swapping).make().relative(Ranking.top(11))
    assert result.to_matrix().tolist() == ranking.to_matrix().tolist()


def test_strong_structural_ranking_through_transposable_cast(incoming, three_classes):
    """Casting the directed view to a transposable one changes nothing."""
    direct = RANKING.strong_structural().of(incoming).make()
    cast = RANKING.strong_structural().of(incoming.as_transposable()).make()
    ranking = three_classes.to_ranking()
    assert direct.relative(ranking) == cast.relative(ranking)
    assert direct.interior(ranking) == cast.interior(ranking)
