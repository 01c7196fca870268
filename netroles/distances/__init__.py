"""Graded role comparisons: distance matrices and the operators producing them."""

from netroles.distances.algorithms import (
    loose_distance,
    matched_distance,
    role_distance,
    structural_distance,
)
from netroles.distances.distance_matrix import DistanceMatrix
from netroles.distances.operators import (
    BINARYRELATION,
    EQUIVALENCE,
    RANKING,
    BasicDistanceOperators,
    DistanceOperator,
    DistanceOperatorBuilder,
    DistanceOperatorBundle,
    RegularDistanceBuilder,
    StructuralDistanceBuilder,
    WeakDistanceBuilder,
    WeakStructuralDistanceBuilder,
)

__all__ = [
    "BINARYRELATION",
    "EQUIVALENCE",
    "RANKING",
    "BasicDistanceOperators",
    "DistanceMatrix",
    "DistanceOperator",
    "DistanceOperatorBuilder",
    "DistanceOperatorBundle",
    "RegularDistanceBuilder",
    "StructuralDistanceBuilder",
    "WeakDistanceBuilder",
    "WeakStructuralDistanceBuilder",
    "loose_distance",
    "matched_distance",
    "role_distance",
    "structural_distance",
]
