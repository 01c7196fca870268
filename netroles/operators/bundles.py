"""Entry points grouping the operator builders by lattice value type."""

from __future__ import annotations

from typing import Generic, Type, TypeVar

from netroles.elements.lattice import LatticeElement
from netroles.elements.partition import Partition
from netroles.elements.ranking import Ranking
from netroles.elements.relation import BinaryRelation
from netroles.operators.basic import (
    BasicRoleOperators,
    RankingBasicOperators,
    RelationBasicOperators,
)
from netroles.operators.builders import (
    GenericRolesBuilder,
    RegularRolesBuilder,
    StrongStructuralRolesBuilder,
    WeakRolesBuilder,
    WeakStructuralRolesBuilder,
)

L = TypeVar("L", bound=LatticeElement)
O = TypeVar("O", bound=BasicRoleOperators)


class RoleOperatorBundle(Generic[L, O]):
    """Fresh builders for one value type; every call starts a new builder."""

    def __init__(self, element_type: Type[L], basic_operators: O):
        self.element_type = element_type
        self._basic = basic_operators

    def regular(self) -> RegularRolesBuilder[L]:
        return RegularRolesBuilder(self.element_type)

    def equitable(self) -> RegularRolesBuilder[L]:
        return self.regular().equitable()

    def weak(self) -> WeakRolesBuilder[L]:
        return WeakRolesBuilder(self.element_type)

    def weakly_equitable(self) -> WeakRolesBuilder[L]:
        return self.weak().equitable()

    def strong_structural(self) -> StrongStructuralRolesBuilder[L]:
        return StrongStructuralRolesBuilder(self.element_type)

    def weak_structural(self) -> WeakStructuralRolesBuilder[L]:
        return WeakStructuralRolesBuilder(self.element_type)

    def generic(self) -> GenericRolesBuilder[L]:
        return GenericRolesBuilder(self.element_type)

    def basic(self) -> O:
        return self._basic

    def __repr__(self) -> str:
        return f"RoleOperatorBundle({self.element_type.__name__})"


EQUIVALENCE = RoleOperatorBundle(Partition, BasicRoleOperators(Partition))
RANKING = RoleOperatorBundle(Ranking, RankingBasicOperators())
BINARYRELATION = RoleOperatorBundle(BinaryRelation, RelationBasicOperators())
