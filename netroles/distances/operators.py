"""
Distance operators: role operators that grade instead of decide.

``DistanceOperator.apply(structure)`` returns a lazy ``DistanceMatrix``
whose zero entries coincide with the pairs the corresponding role operator
would relate. Builders share their configuration with the role operator
builders and add a cost model (``fail_cost`` or ``subst_cost``).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Callable, Optional, Type, TypeVar

from netroles.algorithms.domination import regular_test
from netroles.comparators import compile_comparison
from netroles.distances.algorithms import (
    FailCost,
    SubstCost,
    role_distance,
    structural_distance,
    unit_fail_cost,
)
from netroles.distances.distance_matrix import DistanceMatrix
from netroles.elements.lattice import LatticeElement
from netroles.elements.partition import Partition
from netroles.elements.ranking import Ranking
from netroles.elements.relation import BinaryRelation
from netroles.exceptions import DomainMismatchError
from netroles.operators.builders import ConfigurableBuilder
from netroles.traits import OperatorTraits

L = TypeVar("L", bound=LatticeElement)
D = TypeVar("D", bound="DistanceOperatorBuilder")

PairDistance = Callable[[int, int], int]


class DistanceOperator:
    """Maps a role structure (or a distance matrix) to a distance matrix."""

    def __init__(
        self,
        n: int,
        distances: Callable[[Any], PairDistance],
        traits: OperatorTraits,
        element_type: Optional[Type[Any]] = None,
    ):
        self._n = n
        self._distances = distances
        self._traits = traits
        self._element_type = element_type

    @property
    def traits(self) -> OperatorTraits:
        return self._traits

    def is_isotone(self) -> bool:
        return self._traits.isotone

    def is_constant(self) -> bool:
        return self._traits.constant

    def is_nonincreasing(self) -> bool:
        return self._traits.nonincreasing

    def is_nondecreasing(self) -> bool:
        return self._traits.nondecreasing

    def apply(self, structure: Any) -> DistanceMatrix:
        if self._element_type is not None and not isinstance(
            structure, self._element_type
        ):
            raise TypeError(
                f"expected {self._element_type.__name__}, got {type(structure).__name__}"
            )
        if structure.size != self._n:
            raise DomainMismatchError(
                f"operator is defined on {self._n} nodes, value has {structure.size}"
            )
        return DistanceMatrix(self._n, self._distances(structure))

    def __call__(self, structure: Any) -> DistanceMatrix:
        return self.apply(structure)


class DistanceOperatorBuilder(ConfigurableBuilder[L]):
    """Base of all distance operator builders."""

    default_traits = OperatorTraits.isotone_only()
    # counting distances are defined for any strictness on every value type
    strictness_needs_relation = False

    def __init__(self, element_type: Type[L]):
        super().__init__(element_type)
        self._fail_cost: FailCost = unit_fail_cost
        self._subst_cost: Optional[SubstCost] = None

    def fail_cost(self: D, cost: FailCost) -> D:
        """Cost of a tie of ``i`` left without a compatible partner."""
        self._fail_cost = cost
        self._subst_cost = None
        return self

    def subst_cost(self: D, cost: SubstCost) -> D:
        """
        Cost of matching a tie of ``i`` to a tie of ``j``; ``cost(tie, None)``
        is the cost of leaving the tie unmatched.
        """
        self._subst_cost = cost
        self._fail_cost = unit_fail_cost
        return self

    @abstractmethod
    def _pair_distances(self) -> Callable[[Any], PairDistance]:
        """Map a role structure to its pairwise distance function."""

    def make(self) -> DistanceOperator:
        self._validate()
        return DistanceOperator(
            self.view.count_nodes(),
            self._pair_distances(),
            self.default_traits,
            self._element_type,
        )


class RegularDistanceBuilder(DistanceOperatorBuilder[L]):
    supports_equitable = True

    def _pair_distances(self) -> Callable[[Any], PairDistance]:
        view, strictness = self.view, self._strictness
        fail, subst = self._fail_cost, self._subst_cost
        base = compile_comparison(self._comparison)

        def distances(structure: Any) -> PairDistance:
            test = regular_test(view, structure, base)
            return lambda i, j: role_distance(view, i, j, test, strictness, fail, subst)

        return distances


class WeakDistanceBuilder(DistanceOperatorBuilder[L]):
    supports_equitable = True
    default_traits = OperatorTraits.constant_isotone()

    def _pair_distances(self) -> Callable[[Any], PairDistance]:
        view, strictness = self.view, self._strictness
        fail, subst = self._fail_cost, self._subst_cost
        test = compile_comparison(self._comparison)

        def distances(structure: Any) -> PairDistance:
            return lambda i, j: role_distance(view, i, j, test, strictness, fail, subst)

        return distances


class StructuralDistanceBuilder(DistanceOperatorBuilder[L]):
    default_traits = OperatorTraits.constant_isotone()
    transpose = False

    def _pair_distances(self) -> Callable[[Any], PairDistance]:
        view, transpose = self.view, self.transpose
        fail, subst = self._fail_cost, self._subst_cost
        test = compile_comparison(self._comparison)

        def distances(structure: Any) -> PairDistance:
            return lambda i, j: structural_distance(
                view, i, j, test, transpose, fail, subst
            )

        return distances


class WeakStructuralDistanceBuilder(StructuralDistanceBuilder[L]):
    transpose = True


class BasicDistanceOperators:
    """Operators combining the two directions of a distance matrix over ``n`` nodes."""

    def symmetrize_add(self, n: int) -> DistanceOperator:
        return _symmetrizing(
            n, lambda a, b: a + b, OperatorTraits(isotone=True, nonincreasing=True)
        )

    def symmetrize_max(self, n: int) -> DistanceOperator:
        return _symmetrizing(n, max, OperatorTraits(isotone=True, nonincreasing=True))

    def symmetrize_min(self, n: int) -> DistanceOperator:
        return _symmetrizing(n, min, OperatorTraits(isotone=True, nondecreasing=True))


def _symmetrizing(
    n: int, combine: Callable[[int, int], int], traits: OperatorTraits
) -> DistanceOperator:
    def distances(matrix: DistanceMatrix) -> PairDistance:
        return lambda i, j: combine(matrix.distance(i, j), matrix.distance(j, i))

    return DistanceOperator(n, distances, traits, DistanceMatrix)


class DistanceOperatorBundle:
    """Fresh distance builders for one value type."""

    def __init__(self, element_type: Type[LatticeElement]):
        self.element_type = element_type

    def regular(self) -> RegularDistanceBuilder:
        return RegularDistanceBuilder(self.element_type)

    def equitable(self) -> RegularDistanceBuilder:
        return self.regular().equitable()

    def weak(self) -> WeakDistanceBuilder:
        return WeakDistanceBuilder(self.element_type)

    def weakly_equitable(self) -> WeakDistanceBuilder:
        return self.weak().equitable()

    def strong_structural(self) -> StructuralDistanceBuilder:
        return StructuralDistanceBuilder(self.element_type)

    def weak_structural(self) -> WeakStructuralDistanceBuilder:
        return WeakStructuralDistanceBuilder(self.element_type)

    def basic(self) -> BasicDistanceOperators:
        return BasicDistanceOperators()

    def __repr__(self) -> str:
        return f"DistanceOperatorBundle({self.element_type.__name__})"


EQUIVALENCE = DistanceOperatorBundle(Partition)
RANKING = DistanceOperatorBundle(Ranking)
BINARYRELATION = DistanceOperatorBundle(BinaryRelation)
