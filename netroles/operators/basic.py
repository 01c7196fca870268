"""Elementary role operators that do not look at a network."""

from __future__ import annotations

from typing import Generic, Type, TypeVar

from netroles.elements.lattice import LatticeElement
from netroles.elements.ranking import Ranking
from netroles.elements.relation import BinaryRelation
from netroles.exceptions import DomainMismatchError
from netroles.operators.base import FunctionRoleOperator, RoleOperator
from netroles.traits import OperatorTraits

L = TypeVar("L", bound=LatticeElement)


class BasicRoleOperators(Generic[L]):
    """Identity and constant operators for one lattice value type."""

    def __init__(self, element_type: Type[L]):
        self.element_type = element_type

    def forward(self) -> RoleOperator[L]:
        return FunctionRoleOperator(lambda structure: structure, OperatorTraits.identity())

    def produce_constant(self, value: L) -> RoleOperator[L]:
        def produce(structure: L) -> L:
            _check_same_size(structure, value)
            return value

        return FunctionRoleOperator(produce, OperatorTraits.constant_isotone())

    def meet_with_constant(self, value: L) -> RoleOperator[L]:
        return FunctionRoleOperator(
            lambda structure: structure.infimum(value),
            OperatorTraits(isotone=True, nonincreasing=True),
        )

    def join_with_constant(self, value: L) -> RoleOperator[L]:
        return FunctionRoleOperator(
            lambda structure: structure.supremum(value),
            OperatorTraits(isotone=True, nondecreasing=True),
        )


class RankingBasicOperators(BasicRoleOperators[Ranking]):
    def __init__(self):
        super().__init__(Ranking)

    def symmetrize(self) -> RoleOperator[Ranking]:
        """Keep only the pairs related in both directions."""
        return FunctionRoleOperator(
            lambda ranking: ranking.symmetric_core(),
            OperatorTraits(isotone=True, nonincreasing=True),
        )

    def invert(self) -> RoleOperator[Ranking]:
        return FunctionRoleOperator(lambda ranking: ranking.invert(), OperatorTraits.none())


class RelationBasicOperators(BasicRoleOperators[BinaryRelation]):
    def __init__(self):
        super().__init__(BinaryRelation)

    def invert(self) -> RoleOperator[BinaryRelation]:
        return FunctionRoleOperator(
            lambda relation: relation.invert(), OperatorTraits.none()
        )

    def symmetrize(self) -> RoleOperator[BinaryRelation]:
        return FunctionRoleOperator(
            lambda relation: relation.symmetric_core(),
            OperatorTraits(isotone=True, nonincreasing=True),
        )

    def close_transitively(self) -> RoleOperator[BinaryRelation]:
        return FunctionRoleOperator(
            lambda relation: relation.close_transitively(),
            OperatorTraits(isotone=True, nondecreasing=True),
        )


def _check_same_size(structure: LatticeElement, value: LatticeElement) -> None:
    if structure.size != value.size:
        raise DomainMismatchError(
            f"constant is defined on {value.size} nodes, input has {structure.size}"
        )
