from __future__ import annotations

import networkx as nx
import numpy as np
from numpy.typing import NDArray

from netroles.elements.lattice import (
    MatrixElement,
    as_square_boolean,
    is_transitive,
    labels_from_components,
    matrix_to_digraph,
    transitive_closure,
)
from netroles.elements.partition import Partition
from netroles.exceptions import InvalidElementError


class Ranking(MatrixElement):
    """
    Preorder over the nodes 0..n-1.

    ``contains(i, j)`` reads "node i ranks at or below node j". The relation
    is always reflexive and transitive. Rankings are ordered by inclusion;
    the identity is the bottom and the universal relation is the top.
    """

    __slots__ = ()

    @classmethod
    def from_matrix(cls, matrix) -> "Ranking":
        """
        Wrap a boolean matrix that already is a preorder.

        Raises:
            InvalidElementError: If the matrix is not reflexive or not transitive.
        """
        array = as_square_boolean(matrix)
        if not bool(np.all(np.diagonal(array))):
            raise InvalidElementError("ranking matrix must be reflexive")
        if not is_transitive(array):
            raise InvalidElementError("ranking matrix must be transitive")
        return cls(array)

    @classmethod
    def closure_of(cls, matrix) -> "Ranking":
        """Smallest preorder containing the given relation."""
        return cls(transitive_closure(as_square_boolean(matrix), reflexive=True))

    @classmethod
    def from_partition(cls, partition: Partition) -> "Ranking":
        return cls(partition.to_matrix())

    @classmethod
    def identity(cls, n: int) -> "Ranking":
        return cls(np.eye(n, dtype=bool))

    @classmethod
    def universal(cls, n: int) -> "Ranking":
        return cls(np.ones((n, n), dtype=bool))

    @classmethod
    def top(cls, n: int) -> "Ranking":
        return cls.universal(n)

    @classmethod
    def bottom(cls, n: int) -> "Ranking":
        return cls.identity(n)

    @classmethod
    def from_domination(cls, matrix: NDArray[np.bool_]) -> "Ranking":
        """
        Domination under a transitive comparison is already a preorder; other
        comparisons are closed to keep the ranking invariant.
        """
        array = np.array(matrix, dtype=bool, copy=True)
        np.fill_diagonal(array, True)
        if is_transitive(array):
            return cls(array)
        return cls(transitive_closure(array, reflexive=True))

    def infimum(self, other: "Ranking") -> "Ranking":
        self._check_domain(other)
        return Ranking(self._matrix & other._matrix)

    def supremum(self, other: "Ranking") -> "Ranking":
        self._check_domain(other)
        union = self._matrix | other._matrix
        if is_transitive(union):
            return Ranking(union)
        return Ranking(transitive_closure(union, reflexive=True))

    def invert(self) -> "Ranking":
        """Swap the direction of every comparison."""
        return Ranking(self._matrix.T)

    def symmetric_core(self) -> "Ranking":
        """Ranking relating only nodes that rank at or below each other."""
        return Ranking(self._matrix & self._matrix.T)

    def symmetrize(self) -> Partition:
        """Partition into mutually ranked nodes (strongly connected components)."""
        graph = matrix_to_digraph(self._matrix)
        return Partition(
            labels_from_components(self.size, nx.strongly_connected_components(graph))
        )

    def to_partition(self) -> Partition:
        return self.symmetrize()

    def to_relation(self):
        from netroles.elements.relation import BinaryRelation

        return BinaryRelation(self._matrix)

    def greater_equal_than(self, node: int) -> list[int]:
        """Nodes ranked at or above the given node."""
        return np.flatnonzero(self._matrix[node]).tolist()

    def less_equal_than(self, node: int) -> list[int]:
        """Nodes ranked at or below the given node."""
        return np.flatnonzero(self._matrix[:, node]).tolist()
