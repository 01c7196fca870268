"""
Minimal network storage consumed by the views.

Nodes are the integers ``0..n-1``; every tie carries a stable index so that
operators and comparators can refer back to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Optional, Sequence

import networkx as nx

from netroles.exceptions import InvalidElementError


@dataclass(frozen=True)
class Tie:
    """A single relationship between ``left`` and ``right``."""

    index: int
    left: int
    right: int
    weight: Any = 1
    data: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def is_loop(self) -> bool:
        return self.left == self.right

    def reversed(self) -> "Tie":
        """The same tie (same index) read from its right endpoint."""
        return Tie(self.index, self.right, self.left, self.weight, self.data)


class Network:
    """
    Directed or undirected network with per-node incidence lists.

    For undirected networks each tie is listed at both endpoints, oriented
    per endpoint: a node's outgoing ties all start at it (``left == node``)
    and its incoming ties all end at it (``right == node``). The copy read
    from the far endpoint is ``tie.reversed()`` and keeps the tie index.
    """

    def __init__(
        self,
        n: int,
        ties: Iterable[Tie],
        directed: bool = True,
        node_labels: Optional[Sequence[Hashable]] = None,
    ):
        self._n = n
        self._directed = directed
        self._ties: List[Tie] = list(ties)
        self.node_labels: List[Hashable] = (
            list(node_labels) if node_labels is not None else list(range(n))
        )
        if len(self.node_labels) != n:
            raise InvalidElementError(
                f"expected {n} node labels, got {len(self.node_labels)}"
            )

        self._outgoing: List[List[Tie]] = [[] for _ in range(n)]
        self._incoming: List[List[Tie]] = [[] for _ in range(n)]
        for tie in self._ties:
            if not (0 <= tie.left < n and 0 <= tie.right < n):
                raise InvalidElementError(
                    f"tie {tie.index} connects nodes outside 0..{n - 1}"
                )
            self._outgoing[tie.left].append(tie)
            self._incoming[tie.right].append(tie)
            if not directed and not tie.is_loop():
                mirrored = tie.reversed()
                self._outgoing[tie.right].append(mirrored)
                self._incoming[tie.left].append(mirrored)

    # ------------------------------------------------------------------ #
    # construction
    # ------------------------------------------------------------------ #

    @classmethod
    def from_networkx(cls, graph: nx.Graph, weight: str = "weight") -> "Network":
        """
        Wrap a networkx graph. Nodes are renumbered 0..n-1 in iteration order;
        the original node keys are kept in ``node_labels``.
        """
        labels = list(graph.nodes())
        position = {node: idx for idx, node in enumerate(labels)}
        ties = [
            Tie(idx, position[u], position[v], data.get(weight, 1), dict(data))
            for idx, (u, v, data) in enumerate(graph.edges(data=True))
        ]
        return cls(len(labels), ties, directed=graph.is_directed(), node_labels=labels)

    @classmethod
    def from_adjacency(
        cls, rows: Sequence[Sequence[Any]], directed: bool = True
    ) -> "Network":
        """
        Build a network from a square or lower-triangular adjacency.

        Entries that are ``None``, ``False`` or ``0`` mean "no tie"; any other
        value becomes the tie weight. Undirected networks only read the lower
        triangle (including the diagonal), so a symmetric square matrix and
        its lower-triangular rows give the same network.
        """
        n = len(rows)
        ties: List[Tie] = []
        for i, row in enumerate(rows):
            if len(row) > n:
                raise InvalidElementError(
                    f"row {i} has {len(row)} entries for {n} nodes"
                )
            for j, value in enumerate(row):
                if value is None or value is False or value == 0:
                    continue
                if not directed and j > i:
                    continue
                if directed:
                    ties.append(Tie(len(ties), i, j, value))
                else:
                    ties.append(Tie(len(ties), j, i, value))
        return cls(n, ties, directed=directed)

    def to_networkx(self) -> nx.Graph:
        graph: nx.Graph = nx.MultiDiGraph() if self._directed else nx.MultiGraph()
        graph.add_nodes_from(range(self._n))
        for tie in self._ties:
            graph.add_edge(tie.left, tie.right, index=tie.index, weight=tie.weight)
        return graph

    # ------------------------------------------------------------------ #
    # accessors
    # ------------------------------------------------------------------ #

    @property
    def directed(self) -> bool:
        return self._directed

    def count_nodes(self) -> int:
        return self._n

    def count_ties(self) -> int:
        return len(self._ties)

    def ties(self) -> List[Tie]:
        return list(self._ties)

    def tie(self, index: int) -> Tie:
        return self._ties[index]

    def ties_from(self, node: int) -> List[Tie]:
        """Ties leaving ``node`` (all incident ties, oriented away, if undirected)."""
        return self._outgoing[node]

    def ties_to(self, node: int) -> List[Tie]:
        """Ties entering ``node`` (all incident ties, oriented towards it, if undirected)."""
        return self._incoming[node]

    def view(self, direction=None):
        """Directed view over this network; see ``NetworkView.from_network``."""
        from netroles.network.views import Direction, NetworkView

        return NetworkView.from_network(self, direction or Direction.OUTGOING)

    def swapping_view(self, direction=None):
        """Transposable view for comparing nodes across undirected dyads."""
        from netroles.network.views import SwappingNetworkView

        return SwappingNetworkView(self.view(direction))

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Network({kind}, nodes={self._n}, ties={len(self._ties)})"
