"""Role equivalences, rankings and relations on networks."""

import importlib

from netroles.comparators import (
    ComparisonResult,
    PartialComparison,
    PredicateComparison,
    WeakComparison,
    swap_aware,
)
from netroles.elements import BinaryRelation, Partition, Ranking
from netroles.network import Direction, Network, Tie
from netroles.operators import BINARYRELATION, EQUIVALENCE, RANKING, RoleOperator
from netroles.traits import OperatorTraits

__all__ = [
    "BINARYRELATION",
    "EQUIVALENCE",
    "RANKING",
    "BinaryRelation",
    "ComparisonResult",
    "Direction",
    "DistanceMatrix",
    "Network",
    "OperatorTraits",
    "PartialComparison",
    "Partition",
    "PredicateComparison",
    "Ranking",
    "RoleOperator",
    "Tie",
    "WeakComparison",
    "distances",
    "swap_aware",
]


def __getattr__(name):
    if name == "distances":
        return importlib.import_module("netroles.distances")
    if name == "DistanceMatrix":
        return importlib.import_module("netroles.distances").DistanceMatrix
    raise AttributeError(name)
