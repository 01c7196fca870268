"""Neighbour matching algorithms shared by role and distance operators."""

from netroles.algorithms.domination import (
    build_element,
    compatibility_edges,
    dominates,
    domination_matrix,
    domination_partition,
    regular_test,
)
from netroles.algorithms.matching import (
    maximum_assignment_savings,
    maximum_matching_size,
    saturates_left,
)
from netroles.algorithms.structural import structurally_dominates, transposed_target

__all__ = [
    "build_element",
    "compatibility_edges",
    "dominates",
    "domination_matrix",
    "domination_partition",
    "regular_test",
    "maximum_assignment_savings",
    "maximum_matching_size",
    "saturates_left",
    "structurally_dominates",
    "transposed_target",
]
