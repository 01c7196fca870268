"""
Role distances: how many (or how costly) ties of ``i`` fail to be matched by
ties of ``j``.

Every function here is the counting analogue of one domination test in
``netroles.algorithms``: the distance is zero exactly when the domination
test succeeds.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

import numpy as np

from netroles.algorithms.matching import maximum_assignment_savings
from netroles.algorithms.structural import structural_targets
from netroles.comparators import ContextPredicate
from netroles.network.views import TransposableNetworkView

FailCost = Callable[[Any], int]
SubstCost = Callable[[Any, Optional[Any]], int]

# compatible(a, b) for positions a in the ties of i and b in the ties of j
PositionTest = Callable[[int, int], bool]


def unit_fail_cost(tie: Any) -> int:
    return 1


def position_test(
    i: int,
    j: int,
    ties_i: Sequence[Any],
    ties_j: Sequence[Any],
    test: Optional[ContextPredicate],
) -> PositionTest:
    if test is None:
        return lambda a, b: True
    return lambda a, b: test(i, j, ties_i[a], ties_j[b])


def loose_distance(
    ties_i: Sequence[Any],
    ties_j: Sequence[Any],
    compatible: PositionTest,
    fail_cost: FailCost,
    subst_cost: Optional[SubstCost],
) -> int:
    """Every tie of ``i`` is compared against its best tie of ``j``."""
    total = 0
    for a, tie_i in enumerate(ties_i):
        if subst_cost is not None:
            cost = subst_cost(tie_i, None)
            for b, tie_j in enumerate(ties_j):
                if compatible(a, b):
                    cost = min(cost, subst_cost(tie_i, tie_j))
            total += cost
        elif not any(compatible(a, b) for b in range(len(ties_j))):
            total += fail_cost(tie_i)
    return total


def matched_distance(
    ties_i: Sequence[Any],
    ties_j: Sequence[Any],
    compatible: PositionTest,
    fail_cost: FailCost,
    subst_cost: Optional[SubstCost],
    capacity: int = 1,
) -> int:
    """
    Cost of the best assignment of the ties of ``i`` to ties of ``j``, each
    tie of ``j`` absorbing up to ``capacity`` ties of ``i``.

    An unassigned tie costs ``fail_cost(tie)`` (or ``subst_cost(tie, None)``);
    an assigned tie costs nothing (or ``subst_cost(tie_i, tie_j)``). The
    minimum is found as ``sum of unassigned costs - maximum savings``.
    """
    if not ties_i:
        return 0
    if subst_cost is not None:
        deletion = np.array([subst_cost(tie, None) for tie in ties_i], dtype=np.int64)
    else:
        deletion = np.array([fail_cost(tie) for tie in ties_i], dtype=np.int64)
    savings = np.zeros((len(ties_i), len(ties_j)), dtype=np.int64)
    for a, tie_i in enumerate(ties_i):
        for b, tie_j in enumerate(ties_j):
            if not compatible(a, b):
                continue
            if subst_cost is not None:
                savings[a, b] = deletion[a] - subst_cost(tie_i, tie_j)
            else:
                savings[a, b] = deletion[a]
    return int(deletion.sum()) - maximum_assignment_savings(savings, capacity)


def role_distance(
    view: TransposableNetworkView,
    i: int,
    j: int,
    test: Optional[ContextPredicate],
    strictness: Optional[int] = None,
    fail_cost: FailCost = unit_fail_cost,
    subst_cost: Optional[SubstCost] = None,
) -> int:
    """Distance of ``i`` from being dominated by ``j`` (see ``dominates``)."""
    ties_i = view.ties(i, j, i)
    ties_j = view.ties(i, j, j)
    compatible = position_test(i, j, ties_i, ties_j, test)
    if strictness is not None and strictness < len(ties_i):
        if i == j:
            return 0
        return matched_distance(
            ties_i, ties_j, compatible, fail_cost, subst_cost, strictness
        )
    return loose_distance(ties_i, ties_j, compatible, fail_cost, subst_cost)


def structural_distance(
    view: TransposableNetworkView,
    i: int,
    j: int,
    test: Optional[ContextPredicate],
    transpose: bool = False,
    fail_cost: FailCost = unit_fail_cost,
    subst_cost: Optional[SubstCost] = None,
) -> int:
    """Distance of ``i`` from being structurally dominated by ``j``."""
    if i == j:
        return 0
    ties_i = view.ties(i, j, i)
    ties_j = view.ties(i, j, j)
    targets_i = structural_targets(view, i, j, i, ties_i, transpose)
    targets_j = structural_targets(view, i, j, j, ties_j, transpose)
    base = position_test(i, j, ties_i, ties_j, test)

    def same_target(a: int, b: int) -> bool:
        return targets_i[a] == targets_j[b] and base(a, b)

    return matched_distance(ties_i, ties_j, same_target, fail_cost, subst_cost)
