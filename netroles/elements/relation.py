from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from netroles.elements.lattice import (
    MatrixElement,
    as_square_boolean,
    is_transitive,
    transitive_closure,
)
from netroles.elements.partition import Partition
from netroles.elements.ranking import Ranking


class BinaryRelation(MatrixElement):
    """
    General binary relation over the nodes 0..n-1, ordered by inclusion.

    Neither reflexivity, symmetry nor transitivity is required, which makes
    this the lattice of choice for approximate (strictness-p) role notions.
    """

    __slots__ = ()

    @classmethod
    def from_matrix(cls, matrix) -> "BinaryRelation":
        return cls(as_square_boolean(matrix))

    @classmethod
    def from_pairs(cls, n: int, pairs) -> "BinaryRelation":
        matrix = np.zeros((n, n), dtype=bool)
        for i, j in pairs:
            matrix[i, j] = True
        return cls(matrix)

    @classmethod
    def from_partition(cls, partition: Partition) -> "BinaryRelation":
        return cls(partition.to_matrix())

    @classmethod
    def from_ranking(cls, ranking: Ranking) -> "BinaryRelation":
        return cls(ranking.matrix)

    @classmethod
    def identity(cls, n: int) -> "BinaryRelation":
        return cls(np.eye(n, dtype=bool))

    @classmethod
    def universal(cls, n: int) -> "BinaryRelation":
        return cls(np.ones((n, n), dtype=bool))

    @classmethod
    def empty(cls, n: int) -> "BinaryRelation":
        return cls(np.zeros((n, n), dtype=bool))

    @classmethod
    def top(cls, n: int) -> "BinaryRelation":
        return cls.universal(n)

    @classmethod
    def bottom(cls, n: int) -> "BinaryRelation":
        return cls.empty(n)

    @classmethod
    def from_domination(cls, matrix: NDArray[np.bool_]) -> "BinaryRelation":
        return cls(matrix)

    def infimum(self, other: "BinaryRelation") -> "BinaryRelation":
        self._check_domain(other)
        return BinaryRelation(self._matrix & other._matrix)

    def supremum(self, other: "BinaryRelation") -> "BinaryRelation":
        self._check_domain(other)
        return BinaryRelation(self._matrix | other._matrix)

    def invert(self) -> "BinaryRelation":
        return BinaryRelation(self._matrix.T)

    def symmetric_core(self) -> "BinaryRelation":
        """Pairs related in both directions."""
        return BinaryRelation(self._matrix & self._matrix.T)

    def close_transitively(self) -> "BinaryRelation":
        """
        Smallest transitive relation containing this one. A node becomes
        related to itself only if it lies on a cycle.
        """
        return BinaryRelation(transitive_closure(self._matrix, reflexive=False))

    def to_ranking(self) -> Ranking:
        """Smallest ranking containing this relation."""
        return Ranking.closure_of(self._matrix)

    def is_reflexive(self) -> bool:
        return bool(np.all(np.diagonal(self._matrix)))

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self._matrix, self._matrix.T))

    def is_transitive(self) -> bool:
        return is_transitive(self._matrix)
