"""
Strong and weak structural domination.

Structural roles compare ties by the *identity* of their targets rather than
by the role of the targets: node ``i`` is dominated by ``j`` if every tie of
``i`` can be matched injectively to a compatible tie of ``j`` that leads to
the very same node. The weak variant transposes the dyad between the two
compared nodes first, so a tie ``i -> j`` is matched by a tie ``j -> i``.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from netroles.algorithms.matching import group_by_target, saturates_left
from netroles.comparators import ContextPredicate
from netroles.network.views import TransposableNetworkView


def transposed_target(i: int, j: int, target: int) -> int:
    """Swap the roles of i and j in a target of node j."""
    if target == j:
        return i
    if target == i:
        return j
    return target


def structural_targets(
    view: TransposableNetworkView,
    i: int,
    j: int,
    node: int,
    ties: Sequence[Any],
    transpose: bool,
) -> List[int]:
    targets = [view.tie_target(i, j, node, tie) for tie in ties]
    if transpose and node == j:
        targets = [transposed_target(i, j, target) for target in targets]
    return targets


def structurally_dominates(
    view: TransposableNetworkView,
    i: int,
    j: int,
    test: Optional[ContextPredicate],
    transpose: bool = False,
) -> bool:
    """
    True if node ``i`` is structurally dominated by node ``j``.

    Ties are grouped by target; within each target group the ties of ``i``
    must be matched injectively into the ties of ``j`` the test accepts.
    """
    if i == j:
        return True
    ties_i = view.ties(i, j, i)
    ties_j = view.ties(i, j, j)
    if len(ties_i) > len(ties_j):
        return False

    groups_i = group_by_target(structural_targets(view, i, j, i, ties_i, transpose))
    groups_j = group_by_target(structural_targets(view, i, j, j, ties_j, transpose))

    for target, positions_i in groups_i.items():
        positions_j = groups_j.get(target, [])
        if len(positions_i) > len(positions_j):
            return False
        if test is None:
            continue
        edges = [
            (a, b)
            for a, pos_i in enumerate(positions_i)
            for b, pos_j in enumerate(positions_j)
            if test(i, j, ties_i[pos_i], ties_j[pos_j])
        ]
        if not saturates_left(len(positions_i), len(positions_j), edges):
            return False
    return True
