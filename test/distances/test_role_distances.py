import numpy as np
import pytest

import netroles
from netroles import distances
from netroles.distances import DistanceMatrix
from netroles.elements import BinaryRelation, Partition
from netroles.exceptions import InvalidElementError, UnsupportedConfigurationError
from netroles.operators import BINARYRELATION


def test_regular_distance_counts_unmatched_ties(incoming, three_classes):
    """Each tie whose target class is missing at j costs one."""
    op = distances.EQUIVALENCE.regular().of(incoming).make()
    matrix = op.apply(three_classes)
    assert matrix.distance(0, 1) == 0
    assert matrix.distance(4, 0) == 1
    assert matrix.distance(1, 4) == 1
    assert matrix.distance(5, 1) == 0
    assert matrix.distance(6, 7) == 1


def test_zero_distance_matches_domination(incoming, three_classes):
    """Pairs at distance zero are exactly the dominated pairs."""
    for builder, roles in (
        (distances.BINARYRELATION.regular(), BINARYRELATION.regular()),
        (distances.BINARYRELATION.equitable(), BINARYRELATION.equitable()),
        (distances.BINARYRELATION.weak(), BINARYRELATION.weak()),
    ):
        matrix = builder.of(incoming).make().apply(three_classes.to_relation())
        expected = roles.of(incoming).make().relative(three_classes.to_relation())
        assert matrix.threshold(0) == expected


def test_equitable_distance_uses_multiplicities(incoming, three_classes):
    """Exact matching charges surplus ties of the same class."""
    op = distances.EQUIVALENCE.equitable().of(incoming).make()
    matrix = op.apply(three_classes)
    assert matrix.distance(5, 1) == 1
    assert matrix.distance(1, 5) == 1
    assert matrix.distance(0, 3) == 0


def test_strictness_lowers_distances(incoming, three_classes):
    """Each tie of j may absorb up to p ties of i."""
    structure = three_classes.to_relation()
    exact = distances.BINARYRELATION.equitable().of(incoming).make().apply(structure)
    relaxed = (
        distances.BINARYRELATION.regular().of(incoming).strictness(2).make().apply(structure)
    )
    assert exact.distance(1, 5) == 1
    assert relaxed.distance(1, 5) == 0
    assert (relaxed.to_numpy() <= exact.to_numpy()).all()



def test_strictness_on_equivalence_distances(incoming, three_classes):
    """Counting distances accept a strictness for every value type."""
    relaxed = distances.EQUIVALENCE.regular().of(incoming).strictness(2).make()
    weak = distances.EQUIVALENCE.weak().of(incoming).strictness(2).make()
    as_relation = (
        distances.BINARYRELATION.regular().of(incoming).strictness(2).make()
    )

    matrix = relaxed.apply(three_classes)
    assert matrix.distance(1, 5) == 0
    assert np.array_equal(
        matrix.to_numpy(), as_relation.apply(three_classes.to_relation()).to_numpy()
    )
    assert weak.apply(three_classes).distance(0, 0) == 0

    with pytest.raises(UnsupportedConfigurationError):
        distances.EQUIVALENCE.regular().of(incoming).strictness(0)


def test_distances_reachable_from_package():
    assert netroles.distances is distances
    assert netroles.DistanceMatrix is DistanceMatrix


def test_fail_and_substitution_costs(incoming, three_classes):
    """Cost models weigh unmatched and substituted ties."""
    failing = (
        distances.EQUIVALENCE.regular()
        .of(incoming)
        .fail_cost(lambda tie: 5)
        .make()
        .apply(three_classes)
    )
    assert failing.distance(4, 0) == 5

    substituting = (
        distances.EQUIVALENCE.regular()
        .of(incoming)
        .subst_cost(lambda tie, other: 3 if other is None else 0)
        .make()
        .apply(three_classes)
    )
    assert substituting.distance(4, 0) == 3
    assert substituting.distance(0, 1) == 0


def test_exact_substitution_costs(incoming, three_classes):
    """The cheapest assignment is found with substitution costs."""
    op = (
        distances.EQUIVALENCE.equitable()
        .of(incoming)
        .subst_cost(lambda tie, other: 4 if other is None else 1)
        .make()
    )
    matrix = op.apply(three_classes)
    # 5 -> 1: three ties substituted at 1, one tie dropped at 4
    assert matrix.distance(5, 1) == 7
    assert matrix.distance(0, 0) == 0


def test_structural_distances(incoming):
    """Structural distances count ties without a partner to the same node."""
    top = Partition.top(11)
    strong = distances.EQUIVALENCE.strong_structural().of(incoming).make().apply(top)
    weak = distances.EQUIVALENCE.weak_structural().of(incoming).make().apply(top)

    assert strong.distance(0, 3) == 0
    assert strong.distance(8, 9) == 1
    assert weak.distance(8, 9) == 0
    assert strong.distance(4, 7) == 1
    assert strong.distance(7, 4) == 0
    assert strong.distance(1, 2) == 1


def test_symmetrizing_distances(incoming):
    """Both directions of a distance can be combined."""
    top = Partition.top(11)
    strong = distances.EQUIVALENCE.strong_structural().of(incoming).make().apply(top)
    basic = distances.EQUIVALENCE.basic()

    added = basic.symmetrize_add(11).apply(strong)
    assert added.distance(4, 7) == 1
    assert added.distance(7, 4) == 1
    assert basic.symmetrize_max(11).apply(strong).distance(7, 4) == 1
    assert basic.symmetrize_min(11).apply(strong).distance(4, 7) == 0
    assert basic.symmetrize_min(11).is_nondecreasing()
    assert basic.symmetrize_add(11).is_nonincreasing()


def test_distance_builders_reject_predicates_for_equivalences(incoming):
    """The same comparator rules apply to distance builders."""
    with pytest.raises(UnsupportedConfigurationError):
        distances.EQUIVALENCE.regular().of(incoming).comp_predicate(lambda a, b: True)


def test_distance_matrix_is_lazy():
    """Entries are computed once, on demand."""
    calls = []

    def distance(i, j):
        calls.append((i, j))
        return abs(i - j)

    matrix = DistanceMatrix(3, distance)
    assert matrix.distance(0, 2) == 2
    assert matrix(0, 2) == 2
    assert calls == [(0, 2)]
    assert matrix.to_numpy(progress=False).tolist() == [[0, 1, 2], [1, 0, 1], [2, 1, 0]]
    assert len(calls) == 9
    assert matrix.threshold(1) == BinaryRelation.from_pairs(
        3, [(0, 0), (0, 1), (1, 0), (1, 1), (1, 2), (2, 1), (2, 2)]
    )
    assert matrix.to_dataframe().shape == (3, 3)


def test_distance_matrix_from_numpy():
    """Precomputed matrices must be square and non-negative."""
    matrix = DistanceMatrix.from_numpy(np.array([[0, 2], [1, 0]]))
    assert matrix.distance(0, 1) == 2
    assert matrix == DistanceMatrix(2, lambda i, j: [[0, 2], [1, 0]][i][j])
    with pytest.raises(InvalidElementError):
        DistanceMatrix.from_numpy([[0, -1], [1, 0]])
    with pytest.raises(InvalidElementError):
        DistanceMatrix.from_numpy([[0, 1, 2]])
