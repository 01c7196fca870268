import pytest

from netroles.elements import BinaryRelation, Partition, Ranking
from netroles.exceptions import ConvergenceError, DomainMismatchError
from netroles.operators import (
    BINARYRELATION,
    EQUIVALENCE,
    RANKING,
    FunctionRoleOperator,
    max_rounds,
)
from netroles.traits import OperatorTraits


def test_round_cap():
    """The iteration cap grows quadratically with the domain."""
    assert max_rounds(0) == 2
    assert max_rounds(11) == 123


def test_oscillating_operator_does_not_converge():
    """Inconsistent traits are caught by the round cap."""
    fine, coarse = Partition.bottom(2), Partition.top(2)
    calls = []

    def flip(p):
        calls.append(p)
        return coarse if p == fine else fine

    shrinking = FunctionRoleOperator(flip, OperatorTraits(isotone=True, nonincreasing=True))
    with pytest.raises(ConvergenceError, match="after 6 rounds on a domain of 2 nodes"):
        shrinking.interior(fine)
    assert len(calls) == max_rounds(2)

    growing = FunctionRoleOperator(flip, OperatorTraits(isotone=True, nondecreasing=True))
    with pytest.raises(ConvergenceError, match="closure did not reach"):
        growing.closure(coarse)


def test_restrict_refines_against_the_input(incoming, three_classes):
    """Non-constant operators without monotonicity traits meet with the input."""
    op = EQUIVALENCE.regular().of(incoming).make()
    assert not op.is_constant() and not op.is_nonincreasing()
    assert op.restrict(three_classes) == op.relative_refining(three_classes, three_classes)
    assert op.restrict(three_classes) == three_classes.infimum(op.relative(three_classes))
    assert op.extend(three_classes) == op.relative_coarsening(three_classes, three_classes)

    relation = three_classes.to_relation()
    relational = BINARYRELATION.regular().of(incoming).make()
    assert relational.restrict(relation) == relational.relative_refining(relation, relation)


def test_function_operator_restrict_and_extend():
    """Without monotonicity traits each step meets or joins with the input."""
    target = Partition([0, 0, 1, 1])
    op = FunctionRoleOperator(lambda p: target, OperatorTraits.isotone_only())
    start = Partition([0, 1, 1, 1])
    assert op.restrict(start) == start.infimum(target)
    assert op.extend(start) == start.supremum(target)
    assert op(start) == target
    assert op.interior(start) == [0, 1, 2, 2]
    assert op.closure(start) == [0, 0, 0, 0]


def test_basic_equivalence_operators(three_classes):
    """Forward, constant, meet and join operators."""
    basic = EQUIVALENCE.basic()
    assert basic.forward().relative(three_classes) == three_classes
    assert basic.forward().interior(three_classes) == three_classes

    discrete = Partition.bottom(11)
    constant = basic.produce_constant(discrete)
    assert constant.is_constant()
    assert constant.relative(Partition.top(11)) == discrete
    with pytest.raises(DomainMismatchError):
        constant.relative(Partition.top(3))

    half = Partition([0] * 6 + [1] * 5)
    assert basic.meet_with_constant(half).relative(three_classes) == [0, 0, 0, 0, 1, 1, 2, 3, 3, 3, 3]
    assert basic.meet_with_constant(half).is_nonincreasing()
    assert basic.join_with_constant(half).relative(three_classes) == [0] * 11
    assert basic.join_with_constant(half).is_nondecreasing()


def test_basic_ranking_operators():
    """Rankings can be inverted and reduced to their symmetric part."""
    basic = RANKING.basic()
    chain = Ranking.closure_of([[0, 1, 0], [1, 0, 1], [0, 0, 0]])
    assert basic.symmetrize().relative(chain) == Ranking.from_partition(Partition([0, 0, 1]))
    assert basic.invert().relative(chain) == chain.invert()
    assert not basic.invert().is_isotone()


def test_basic_relation_operators():
    """Relations can be inverted, symmetrized and closed."""
    basic = BINARYRELATION.basic()
    relation = BinaryRelation.from_pairs(3, [(0, 1), (1, 2), (2, 1)])
    assert basic.invert().relative(relation) == relation.invert()
    assert basic.symmetrize().relative(relation) == BinaryRelation.from_pairs(
        3, [(1, 2), (2, 1)]
    )
    closed = basic.close_transitively().closure(relation)
    assert closed == relation.close_transitively()
    assert closed.contains(0, 2)
    assert not closed.contains(0, 0)
