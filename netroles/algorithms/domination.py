"""
Pairwise neighbour domination, the engine behind every role notion.

Node ``i`` is dominated by node ``j`` if the ties of ``i`` can be matched to
compatible ties of ``j``:

* loose (``strictness=None``): every tie of ``i`` has *some* compatible tie
  of ``j`` (set-based comparison);
* exact (``strictness=1``): the ties of ``i`` can be matched injectively
  (multiset comparison, "equitable");
* strictness ``p``: every tie of ``j`` may absorb up to ``p`` ties of ``i``.

Whether two ties are compatible is decided by a contextual predicate
``test(lhs, rhs, tie_i, tie_j)``, where ``None`` accepts every pair.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence, Type, TypeVar

import numpy as np
from numpy.typing import NDArray

from netroles.algorithms.matching import saturates_left
from netroles.comparators import ContextPredicate
from netroles.elements.lattice import LatticeElement
from netroles.elements.partition import Partition
from netroles.network.views import TransposableNetworkView

L = TypeVar("L", bound=LatticeElement)

Dominated = Callable[[int, int], bool]


def regular_test(
    view: TransposableNetworkView,
    structure: LatticeElement,
    base: Optional[ContextPredicate],
) -> ContextPredicate:
    """
    Compatibility relative to a role structure: tie ``ri`` of ``i`` is matched
    by tie ``rj`` of ``j`` only if the target of ``ri`` is related to the
    target of ``rj`` in ``structure`` (and ``base`` accepts the pair).
    """
    related = structure.membership()

    def test(i: int, j: int, tie_i: Any, tie_j: Any) -> bool:
        target_i = view.tie_target(i, j, i, tie_i)
        target_j = view.tie_target(i, j, j, tie_j)
        if not related(target_i, target_j):
            return False
        return base is None or base(i, j, tie_i, tie_j)

    return test


def compatibility_edges(
    i: int,
    j: int,
    ties_i: Sequence[Any],
    ties_j: Sequence[Any],
    test: Optional[ContextPredicate],
) -> list[tuple[int, int]]:
    """All (position in ties_i, position in ties_j) pairs the test accepts."""
    if test is None:
        return [(a, b) for a in range(len(ties_i)) for b in range(len(ties_j))]
    return [
        (a, b)
        for a, tie_i in enumerate(ties_i)
        for b, tie_j in enumerate(ties_j)
        if test(i, j, tie_i, tie_j)
    ]


def dominates(
    view: TransposableNetworkView,
    i: int,
    j: int,
    test: Optional[ContextPredicate],
    strictness: Optional[int] = None,
) -> bool:
    """
    True if node ``i`` is dominated by node ``j``.

    Args:
        view: Tie accessor; ties are read as ``ties(i, j, i)`` and
            ``ties(i, j, j)``
        i: Node whose ties must be matched
        j: Node whose ties absorb them
        test: Tie compatibility, None for "always compatible"
        strictness: None for loose matching, p >= 1 for p-approximate
            matching (1 is exact)
    """
    ties_i = view.ties(i, j, i)
    ties_j = view.ties(i, j, j)
    deg_i, deg_j = len(ties_i), len(ties_j)

    if strictness is not None and strictness < deg_i:
        if i == j:
            return True
        if deg_i > strictness * deg_j:
            return False
        edges = compatibility_edges(i, j, ties_i, ties_j, test)
        return saturates_left(deg_i, deg_j, edges, capacity=strictness)

    # loose matching (strictness >= deg_i behaves the same)
    if deg_i == 0:
        return True
    if deg_j == 0:
        return False
    if test is None:
        return True
    for tie_i in ties_i:
        if not any(test(i, j, tie_i, tie_j) for tie_j in ties_j):
            return False
    return True


def domination_matrix(
    n: int, dominated: Dominated, candidates: Optional[NDArray[np.bool_]] = None
) -> NDArray[np.bool_]:
    """
    Boolean matrix ``m`` with ``m[i, j]`` iff ``dominated(i, j)``.

    Only pairs set in ``candidates`` are tested; the others stay False.
    """
    result = np.zeros((n, n), dtype=bool)
    for i in range(n):
        for j in range(n):
            if candidates is not None and not candidates[i, j]:
                continue
            result[i, j] = dominated(i, j)
    return result


def domination_partition(
    n: int, dominated: Dominated, candidates: Optional[Partition] = None
) -> Partition:
    """
    Partition into classes of mutually dominating nodes.

    Each node is only compared against one representative of every class
    found so far, which is exact whenever domination is transitive. With
    ``candidates``, nodes are only grouped within a candidate class, giving
    the common refinement of ``candidates`` and the unrestricted result.
    """
    same_candidate = candidates.membership() if candidates is not None else None
    labels = np.empty(n, dtype=np.int64)
    representatives: list[int] = []
    for node in range(n):
        for class_id, rep in enumerate(representatives):
            if same_candidate is not None and not same_candidate(node, rep):
                continue
            if dominated(node, rep) and dominated(rep, node):
                labels[node] = class_id
                break
        else:
            labels[node] = len(representatives)
            representatives.append(node)
    return Partition(labels)


def build_element(
    element_type: Type[L],
    n: int,
    dominated: Dominated,
    candidates: Optional[LatticeElement] = None,
) -> L:
    """
    Turn a pairwise domination test into a lattice value of the given type,
    optionally restricted to pairs related in ``candidates``.
    """
    if issubclass(element_type, Partition):
        return domination_partition(n, dominated, candidates)  # type: ignore[return-value,arg-type]
    mask = candidates.to_matrix() if candidates is not None else None
    result = element_type.from_domination(domination_matrix(n, dominated, mask))
    if candidates is not None:
        result = result.infimum(candidates)
    return result
