from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Sequence

import networkx as nx
import numpy as np
from numpy.typing import NDArray

from netroles.elements.lattice import (
    LatticeElement,
    as_square_boolean,
    labels_from_components,
)
from netroles.exceptions import InvalidElementError


def normalize_labels(raw: Sequence[int] | NDArray[np.int64]) -> NDArray[np.int64]:
    """
    Relabel so that classes are numbered in order of their first occurrence.

    ``[5, 5, 2, 7, 2]`` becomes ``[0, 0, 1, 2, 1]``.
    """
    values = np.asarray(raw)
    if values.size == 0:
        return np.zeros(0, dtype=np.int64)
    if values.ndim != 1:
        raise InvalidElementError(f"expected a flat label array, got shape {values.shape}")
    _, first_index, inverse = np.unique(values, return_index=True, return_inverse=True)
    order = np.argsort(first_index, kind="stable")
    rank = np.empty_like(order)
    rank[order] = np.arange(order.size)
    return rank[inverse.reshape(-1)].astype(np.int64)


class Partition(LatticeElement):
    """
    Equivalence over the nodes 0..n-1, stored as a normalized label array.

    Two nodes are equivalent iff they carry the same label. The lattice order
    is refinement: ``a <= b`` iff every class of ``a`` lies inside a class of
    ``b``. The finest partition (all singletons) is the bottom, the partition
    with a single class is the top.
    """

    __slots__ = ("_labels", "_hash")

    def __init__(self, labels: Sequence[int] | NDArray[np.int64]):
        normalized = normalize_labels(labels)
        normalized.flags.writeable = False
        self._labels: NDArray[np.int64] = normalized
        self._hash: int | None = None

    # ------------------------------------------------------------------ #
    # constructors
    # ------------------------------------------------------------------ #

    @classmethod
    def discrete(cls, n: int) -> "Partition":
        """Every node in its own class."""
        return cls(np.arange(n))

    @classmethod
    def trivial(cls, n: int) -> "Partition":
        """All nodes in one class."""
        return cls(np.zeros(n, dtype=np.int64))

    @classmethod
    def top(cls, n: int) -> "Partition":
        return cls.trivial(n)

    @classmethod
    def bottom(cls, n: int) -> "Partition":
        return cls.discrete(n)

    @classmethod
    def from_matrix(cls, matrix) -> "Partition":
        """
        Build a partition from an equivalence matrix.

        Raises:
            InvalidElementError: If the matrix is not reflexive, symmetric and
                transitive.
        """
        array = as_square_boolean(matrix)
        partition = cls.from_domination(array)
        if not np.array_equal(partition.to_matrix(), array):
            raise InvalidElementError("matrix does not describe an equivalence")
        return partition

    @classmethod
    def from_domination(cls, matrix: NDArray[np.bool_]) -> "Partition":
        """Classes are the connected components of mutual domination."""
        n = matrix.shape[0]
        core = np.triu(matrix & matrix.T, 1)
        graph = nx.Graph()
        graph.add_nodes_from(range(n))
        rows, cols = np.nonzero(core)
        graph.add_edges_from(zip(rows.tolist(), cols.tolist()))
        return cls(labels_from_components(n, nx.connected_components(graph)))

    # ------------------------------------------------------------------ #
    # accessors
    # ------------------------------------------------------------------ #

    @property
    def size(self) -> int:
        return int(self._labels.size)

    @property
    def labels(self) -> NDArray[np.int64]:
        """Read-only normalized label array."""
        return self._labels

    def label(self, node: int) -> int:
        return int(self._labels[node])

    def count_classes(self) -> int:
        return int(self._labels.max()) + 1 if self._labels.size else 0

    def classes(self) -> List[List[int]]:
        """Members of each class, indexed by class id."""
        members: List[List[int]] = [[] for _ in range(self.count_classes())]
        for node, label in enumerate(self._labels.tolist()):
            members[label].append(node)
        return members

    def representatives(self) -> Dict[int, int]:
        """Map each class id to its smallest member."""
        reps: Dict[int, int] = {}
        for node, label in enumerate(self._labels.tolist()):
            reps.setdefault(label, node)
        return reps

    def contains(self, i: int, j: int) -> bool:
        return bool(self._labels[i] == self._labels[j])

    def membership(self) -> Callable[[int, int], bool]:
        """Fast `contains` over plain Python lists for tight loops."""
        labels = self._labels.tolist()
        return lambda i, j: labels[i] == labels[j]

    def to_matrix(self) -> NDArray[np.bool_]:
        return self._labels[:, None] == self._labels[None, :]

    # ------------------------------------------------------------------ #
    # lattice operations
    # ------------------------------------------------------------------ #

    def infimum(self, other: "Partition") -> "Partition":
        """Common refinement: nodes stay together iff both partitions agree."""
        self._check_domain(other)
        if self.size == 0:
            return self
        combined = self._labels * (other.count_classes()) + other._labels
        return Partition(combined)

    def supremum(self, other: "Partition") -> "Partition":
        """Finest partition coarser than both, i.e. components of their union."""
        self._check_domain(other)
        graph = nx.Graph()
        graph.add_nodes_from(range(self.size))
        for labels in (self._labels, other._labels):
            first: Dict[int, int] = {}
            for node, label in enumerate(labels.tolist()):
                anchor = first.setdefault(label, node)
                if anchor != node:
                    graph.add_edge(anchor, node)
        return Partition(labels_from_components(self.size, nx.connected_components(graph)))

    def less_equal(self, other: "Partition") -> bool:
        """True if self refines other."""
        self._check_domain(other)
        return self.infimum(other).count_classes() == self.count_classes()

    # ------------------------------------------------------------------ #
    # conversions
    # ------------------------------------------------------------------ #

    def to_ranking(self):
        from netroles.elements.ranking import Ranking

        return Ranking.from_partition(self)

    def to_relation(self):
        from netroles.elements.relation import BinaryRelation

        return BinaryRelation.from_partition(self)

    def tolist(self) -> List[int]:
        return self._labels.tolist()

    def __iter__(self) -> Iterator[int]:
        return iter(self._labels.tolist())

    def __getitem__(self, node: int) -> int:
        return int(self._labels[node])

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Partition):
            return np.array_equal(self._labels, other._labels)
        if isinstance(other, (list, tuple)):
            return self.tolist() == normalize_labels(other).tolist()
        return NotImplemented

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(("Partition", self._labels.tobytes()))
        return self._hash

    def __repr__(self) -> str:
        return f"Partition({self.tolist()})"
