import numpy as np
import pytest

from netroles.elements import BinaryRelation, Partition, Ranking, normalize_labels
from netroles.exceptions import DomainMismatchError, InvalidElementError


def test_labels_are_normalized_by_first_occurrence():
    """Class ids follow the order in which classes first appear."""
    assert normalize_labels([5, 5, 2, 7, 2]).tolist() == [0, 0, 1, 2, 1]
    assert Partition([3, 1, 3]) == Partition([0, 1, 0])
    assert Partition([3, 1, 3]) == [9, 4, 9]


def test_partition_meet_and_join():
    """Infimum is the common refinement, supremum the transitive union."""
    a = Partition([0, 0, 1, 1, 2])
    b = Partition([0, 1, 1, 2, 2])

    assert a.infimum(b) == [0, 1, 2, 3, 4]
    assert a.supremum(b) == [0, 0, 0, 0, 0]
    assert (a & b) == a.infimum(b)
    assert (a | b) == a.supremum(b)

    c = Partition([0, 0, 1, 2, 2])
    assert a.supremum(c) == [0, 0, 1, 1, 1]
    assert a.infimum(c) == [0, 0, 1, 2, 3]


def test_partition_order_is_refinement():
    """a <= b iff every class of a lies inside a class of b."""
    fine = Partition([0, 1, 2, 2])
    coarse = Partition([0, 0, 1, 1])
    assert fine <= coarse
    assert not coarse <= fine
    assert Partition.bottom(4) <= fine <= Partition.top(4)


def test_partition_accessors():
    """Classes, representatives and matrix agree with the labels."""
    p = Partition([0, 1, 0, 2, 1])
    assert p.count_classes() == 3
    assert p.classes() == [[0, 2], [1, 4], [3]]
    assert p.representatives() == {0: 0, 1: 1, 2: 3}
    assert p.contains(1, 4)
    assert not p.contains(0, 1)
    matrix = p.to_matrix()
    assert matrix[0, 2] and matrix[2, 0]
    assert not matrix[0, 3]
    assert Partition.from_matrix(matrix) == p


def test_partition_from_matrix_rejects_non_equivalence():
    """A non-transitive matrix is not an equivalence."""
    matrix = np.array([[1, 1, 0], [1, 1, 1], [0, 1, 1]], dtype=bool)
    with pytest.raises(InvalidElementError):
        Partition.from_matrix(matrix)


def test_domain_sizes_must_agree():
    """Combining values over different node counts fails."""
    with pytest.raises(DomainMismatchError):
        Partition([0, 0]).infimum(Partition([0, 0, 0]))
    with pytest.raises(DomainMismatchError):
        Ranking.identity(2).supremum(Ranking.identity(3))


def test_ranking_must_be_a_preorder():
    """Rankings are reflexive and transitive."""
    with pytest.raises(InvalidElementError):
        Ranking.from_matrix([[0, 1], [0, 1]])
    with pytest.raises(InvalidElementError):
        Ranking.from_matrix([[1, 1, 0], [0, 1, 1], [0, 0, 1]])
    chain = Ranking.closure_of([[0, 1, 0], [0, 0, 1], [0, 0, 0]])
    assert chain.contains(0, 2)
    assert chain.contains(1, 1)
    assert not chain.contains(2, 0)


def test_ranking_supremum_stays_transitive():
    """The join of two rankings is closed transitively."""
    a = Ranking.closure_of([[0, 1, 0], [0, 0, 0], [0, 0, 0]])
    b = Ranking.closure_of([[0, 0, 0], [0, 0, 1], [0, 0, 0]])
    joined = a.supremum(b)
    assert joined.contains(0, 2)
    assert a <= joined and b <= joined
    assert a.infimum(b) == Ranking.identity(3)


def test_ranking_symmetrize_gives_mutual_classes():
    """Strongly connected nodes form one class."""
    ranking = Ranking.closure_of(
        [[0, 1, 0, 0], [1, 0, 1, 0], [0, 0, 0, 0], [0, 0, 1, 0]]
    )
    assert ranking.symmetrize() == [0, 0, 1, 2]
    assert ranking.symmetric_core() == Ranking.from_partition(Partition([0, 0, 1, 2]))
    assert ranking.invert().contains(2, 0)
    assert ranking.less_equal_than(2) == [0, 1, 2, 3]
    assert ranking.greater_equal_than(3) == [2, 3]


def test_ranking_from_domination_fills_the_diagonal():
    """Domination results always become valid rankings."""
    matrix = np.array([[0, 1, 0], [0, 0, 1], [0, 0, 0]], dtype=bool)
    ranking = Ranking.from_domination(matrix)
    assert all(ranking.contains(i, i) for i in range(3))
    assert ranking.contains(0, 2)


def test_binary_relation_operations():
    """Relations support inclusion meet, join and transitive closure."""
    r = BinaryRelation.from_pairs(3, [(0, 1), (1, 2)])
    s = BinaryRelation.from_pairs(3, [(1, 0)])

    assert (r | s).count_pairs() == 3
    assert (r & s) == BinaryRelation.empty(3)
    assert r.invert() == BinaryRelation.from_pairs(3, [(1, 0), (2, 1)])
    assert (r | s).symmetric_core() == BinaryRelation.from_pairs(3, [(0, 1), (1, 0)])

    closed = r.close_transitively()
    assert closed == BinaryRelation.from_pairs(3, [(0, 1), (1, 2), (0, 2)])
    assert not closed.is_reflexive()

    cyclic = (r | s).close_transitively()
    assert cyclic.contains(0, 0) and cyclic.contains(1, 1)
    assert not cyclic.contains(2, 2)
    assert cyclic.is_transitive()
    assert cyclic.to_matrix().astype(int).tolist() == [[1, 1, 1], [1, 1, 1], [0, 0, 0]]
    assert not (r | s).is_transitive()


def test_binary_relation_conversions():
    """Partitions and rankings embed into relations."""
    p = Partition([0, 0, 1])
    relation = p.to_relation()
    assert relation.is_reflexive() and relation.is_symmetric()
    assert relation.to_ranking() == p.to_ranking()
    assert sorted(relation.pairs()) == [(0, 0), (0, 1), (1, 0), (1, 1), (2, 2)]


def test_lattice_bounds():
    """Top and bottom bound every value."""
    relation = BinaryRelation.from_pairs(3, [(0, 2)])
    assert BinaryRelation.bottom(3) <= relation <= BinaryRelation.top(3)
    assert Ranking.bottom(3) <= Ranking.closure_of(relation.matrix) <= Ranking.top(3)


def test_values_are_immutable_and_hashable():
    """Stored matrices are read-only, equal values hash equally."""
    ranking = Ranking.identity(2)
    with pytest.raises(ValueError):
        ranking.matrix[0, 1] = True
    assert hash(ranking) == hash(Ranking.identity(2))
    assert len({Partition([0, 1]), Partition([1, 0]), Partition([0, 0])}) == 2


def test_to_dataframe():
    """Values render as boolean DataFrames indexed by node."""
    frame = Partition([0, 0, 1]).to_dataframe()
    assert frame.shape == (3, 3)
    assert frame.index.name == "node"
    assert bool(frame.loc[0, 1])
    assert not bool(frame.loc[0, 2])
