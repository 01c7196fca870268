from netroles.operators.base import FunctionRoleOperator, RoleOperator, max_rounds
from netroles.operators.basic import (
    BasicRoleOperators,
    RankingBasicOperators,
    RelationBasicOperators,
)
from netroles.operators.builders import (
    ConfigurableBuilder,
    GenericRolesBuilder,
    NeighborhoodRoleOperator,
    RegularRolesBuilder,
    RoleOperatorBuilder,
    StrongStructuralRolesBuilder,
    WeakRolesBuilder,
    WeakStructuralRolesBuilder,
)
from netroles.operators.bundles import (
    BINARYRELATION,
    EQUIVALENCE,
    RANKING,
    RoleOperatorBundle,
)

__all__ = [
    "BINARYRELATION",
    "EQUIVALENCE",
    "RANKING",
    "BasicRoleOperators",
    "ConfigurableBuilder",
    "FunctionRoleOperator",
    "GenericRolesBuilder",
    "NeighborhoodRoleOperator",
    "RankingBasicOperators",
    "RegularRolesBuilder",
    "RelationBasicOperators",
    "RoleOperator",
    "RoleOperatorBuilder",
    "RoleOperatorBundle",
    "StrongStructuralRolesBuilder",
    "WeakRolesBuilder",
    "WeakStructuralRolesBuilder",
    "max_rounds",
]
