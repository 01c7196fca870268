"""
Bipartite matching primitives for neighbour comparisons.

The left side always holds the ties of the node being dominated, the right
side the ties of the dominating node. A right-hand tie may absorb up to
``capacity`` left-hand ties, which models strictness-p comparisons.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import networkx as nx
import numpy as np
from numpy.typing import NDArray
from scipy.optimize import linear_sum_assignment

Edge = Tuple[int, int]


def maximum_matching_size(
    n_left: int, n_right: int, edges: Sequence[Edge], capacity: int = 1
) -> int:
    """
    Size of a maximum bipartite matching where every right vertex may be
    matched ``capacity`` times.

    Args:
        n_left: Number of left vertices
        n_right: Number of right vertices
        edges: Pairs (left, right) of compatible vertices
        capacity: Copies of each right vertex

    Returns:
        Number of matched left vertices
    """
    if n_left == 0 or not edges:
        return 0
    graph = nx.Graph()
    left_nodes = [("l", a) for a in range(n_left)]
    graph.add_nodes_from(left_nodes, bipartite=0)
    graph.add_nodes_from(
        (("r", b, copy) for b in range(n_right) for copy in range(capacity)),
        bipartite=1,
    )
    graph.add_edges_from(
        (("l", a), ("r", b, copy)) for a, b in edges for copy in range(capacity)
    )
    matching = nx.bipartite.hopcroft_karp_matching(graph, top_nodes=left_nodes)
    return sum(1 for node in left_nodes if node in matching)


def saturates_left(
    n_left: int, n_right: int, edges: Sequence[Edge], capacity: int = 1
) -> bool:
    """True if every left vertex can be matched simultaneously."""
    if n_left == 0:
        return True
    if n_left > capacity * n_right:
        return False
    covered = {a for a, _ in edges}
    if len(covered) < n_left:
        return False
    return maximum_matching_size(n_left, n_right, edges, capacity) == n_left


def maximum_assignment_savings(savings: NDArray[np.int64], capacity: int = 1) -> int:
    """
    Largest total of ``savings[a, b]`` over an assignment of left rows to
    right columns, each column usable ``capacity`` times and each row at most
    once. Rows may stay unassigned; negative savings are never taken.

    Solved with ``scipy.optimize.linear_sum_assignment``.
    """
    if savings.size == 0:
        return 0
    clipped = np.maximum(savings, 0)
    if capacity > 1:
        clipped = np.tile(clipped, (1, capacity))
    rows, cols = linear_sum_assignment(clipped, maximize=True)
    return int(clipped[rows, cols].sum())


def group_by_target(targets: Sequence[int]) -> dict[int, List[int]]:
    """Positions of equal targets, keyed by target node."""
    groups: dict[int, List[int]] = {}
    for position, target in enumerate(targets):
        groups.setdefault(target, []).append(position)
    return groups
