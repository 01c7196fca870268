"""
Shared capability of the lattice value types role operators work on.

Every role operator is written once against ``LatticeElement`` and then
instantiated for partitions, rankings and general binary relations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Iterable, Tuple, TypeVar

import networkx as nx
import numpy as np
import pandas as pd
from numpy.typing import NDArray

from netroles.exceptions import DomainMismatchError, InvalidElementError

L = TypeVar("L", bound="LatticeElement")


class LatticeElement(ABC):
    """
    Immutable value over the node set ``0..size-1`` supporting the lattice
    operations used by the refinement and fixpoint algorithms.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of nodes in the domain."""

    @abstractmethod
    def contains(self, i: int, j: int) -> bool:
        """Return True if node i is related to node j."""

    def membership(self) -> Callable[[int, int], bool]:
        """Membership test suited for tight loops; defaults to `contains`."""
        return self.contains

    @abstractmethod
    def infimum(self: L, other: L) -> L:
        """Greatest lower bound of self and other."""

    @abstractmethod
    def supremum(self: L, other: L) -> L:
        """Least upper bound of self and other."""

    @abstractmethod
    def to_matrix(self) -> NDArray[np.bool_]:
        """Return a fresh boolean matrix m with m[i, j] == contains(i, j)."""

    @classmethod
    @abstractmethod
    def from_domination(cls: type[L], matrix: NDArray[np.bool_]) -> L:
        """Build a value from a pairwise domination matrix."""

    @classmethod
    @abstractmethod
    def top(cls: type[L], n: int) -> L:
        """Largest value over n nodes."""

    @classmethod
    @abstractmethod
    def bottom(cls: type[L], n: int) -> L:
        """Smallest value over n nodes."""

    def less_equal(self: L, other: L) -> bool:
        """Lattice order: True if self lies below other."""
        self._check_domain(other)
        return bool(np.all(~self.to_matrix() | other.to_matrix()))

    def __le__(self: L, other: L) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.less_equal(other)

    def __ge__(self: L, other: L) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return other.less_equal(self)

    def __and__(self: L, other: L) -> L:
        return self.infimum(other)

    def __or__(self: L, other: L) -> L:
        return self.supremum(other)

    def __len__(self) -> int:
        return self.size

    def pairs(self) -> Iterable[Tuple[int, int]]:
        """Iterate over all related pairs (i, j) in row-major order."""
        rows, cols = np.nonzero(self.to_matrix())
        return zip(rows.tolist(), cols.tolist())

    def to_dataframe(self) -> pd.DataFrame:
        """Boolean relation matrix as a pandas DataFrame indexed by node."""
        index = pd.RangeIndex(self.size, name="node")
        return pd.DataFrame(self.to_matrix(), index=index, columns=index.rename(None))

    def _check_domain(self, other: "LatticeElement") -> None:
        if self.size != other.size:
            raise DomainMismatchError(
                f"domain sizes differ: {self.size} vs {other.size}"
            )


class MatrixElement(LatticeElement):
    """Lattice value backed by a read-only boolean matrix."""

    __slots__ = ("_matrix", "_hash")

    def __init__(self, matrix: NDArray[np.bool_]):
        self._matrix = as_square_boolean(matrix)
        self._matrix.flags.writeable = False
        self._hash: int | None = None

    @property
    def size(self) -> int:
        return self._matrix.shape[0]

    @property
    def matrix(self) -> NDArray[np.bool_]:
        """Read-only view of the underlying matrix."""
        return self._matrix

    def contains(self, i: int, j: int) -> bool:
        return bool(self._matrix[i, j])

    def membership(self) -> Callable[[int, int], bool]:
        """Fast `contains` over plain Python lists for tight loops."""
        rows = self._matrix.tolist()
        return lambda i, j: rows[i][j]

    def to_matrix(self) -> NDArray[np.bool_]:
        return self._matrix.copy()

    def less_equal(self, other: "MatrixElement") -> bool:
        self._check_domain(other)
        return not bool(np.any(self._matrix & ~other._matrix))

    def count_pairs(self) -> int:
        """Number of related pairs, including the diagonal."""
        return int(np.count_nonzero(self._matrix))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return np.array_equal(self._matrix, other._matrix)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((type(self).__name__, self.size, self._matrix.tobytes()))
        return self._hash

    def __repr__(self) -> str:
        rows = ["".join("1" if x else "0" for x in row) for row in self._matrix]
        return f"{type(self).__name__}([{', '.join(rows)}])"


def as_square_boolean(matrix) -> NDArray[np.bool_]:
    """Copy arbitrary nested sequences into a square boolean numpy matrix."""
    array = np.array(matrix, dtype=bool, copy=True)
    if array.size == 0:
        return np.zeros((0, 0), dtype=bool)
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise InvalidElementError(
            f"expected a square matrix, got shape {array.shape}"
        )
    return array


def matrix_to_digraph(matrix: NDArray[np.bool_]) -> nx.DiGraph:
    """Directed graph on nodes 0..n-1 with an edge for every True entry."""
    graph = nx.DiGraph()
    graph.add_nodes_from(range(matrix.shape[0]))
    rows, cols = np.nonzero(matrix)
    graph.add_edges_from(zip(rows.tolist(), cols.tolist()))
    return graph


def digraph_to_matrix(graph: nx.DiGraph, n: int) -> NDArray[np.bool_]:
    matrix = np.zeros((n, n), dtype=bool)
    for u, v in graph.edges():
        matrix[u, v] = True
    return matrix


def transitive_closure(
    matrix: NDArray[np.bool_], reflexive: bool | None
) -> NDArray[np.bool_]:
    """
    Transitive closure of a boolean relation via networkx.

    ``reflexive=True`` adds the diagonal. ``reflexive=False`` adds a loop only
    for nodes lying on a cycle, which is the plain transitive closure;
    ``reflexive=None`` keeps just the loops already present.
    """
    closure = nx.transitive_closure(matrix_to_digraph(matrix), reflexive=reflexive)
    return digraph_to_matrix(closure, matrix.shape[0])


def is_transitive(matrix: NDArray[np.bool_]) -> bool:
    """True if m[i, k] and m[k, j] imply m[i, j]."""
    as_int = matrix.astype(np.int64)
    composed = (as_int @ as_int) > 0
    return not bool(np.any(composed & ~matrix))


def labels_from_components(n: int, components: Iterable[Iterable[int]]) -> NDArray[np.int64]:
    """Label array assigning each node the index of the component containing it."""
    labels = np.empty(n, dtype=np.int64)
    for class_id, component in enumerate(components):
        for node in component:
            labels[node] = class_id
    return labels
