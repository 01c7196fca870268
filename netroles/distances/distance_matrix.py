"""Lazily evaluated integer distance matrices."""

from __future__ import annotations

from typing import Callable

import numpy as np
import pandas as pd
from numpy.typing import NDArray
from tqdm import tqdm

from netroles.elements.relation import BinaryRelation
from netroles.exceptions import InvalidElementError


class DistanceMatrix:
    """
    Square matrix of non-negative integer distances over ``n`` nodes.

    Entries are computed on first access through ``distance_function`` and
    cached. ``d(i, j)`` is 0 exactly when ``i`` is dominated by ``j`` under
    the role notion that produced the matrix.
    """

    def __init__(self, n: int, distance_function: Callable[[int, int], int]):
        self._n = n
        self._function = distance_function
        self._values = np.zeros((n, n), dtype=np.int64)
        self._known = np.zeros((n, n), dtype=bool)

    @classmethod
    def from_numpy(cls, matrix) -> "DistanceMatrix":
        values = np.asarray(matrix, dtype=np.int64)
        if values.ndim != 2 or values.shape[0] != values.shape[1]:
            raise InvalidElementError(f"expected a square matrix, got shape {values.shape}")
        if (values < 0).any():
            raise InvalidElementError("distances must be non-negative")
        result = cls(values.shape[0], lambda i, j: int(values[i, j]))
        result._values[:] = values
        result._known[:] = True
        return result

    @property
    def size(self) -> int:
        return self._n

    def distance(self, i: int, j: int) -> int:
        if not self._known[i, j]:
            value = int(self._function(i, j))
            if value < 0:
                raise InvalidElementError(
                    f"negative distance {value} between nodes {i} and {j}"
                )
            self._values[i, j] = value
            self._known[i, j] = True
        return int(self._values[i, j])

    def __call__(self, i: int, j: int) -> int:
        return self.distance(i, j)

    def to_numpy(self, progress: bool = False) -> NDArray[np.int64]:
        """Evaluate every entry; ``progress`` shows a tqdm bar over the rows."""
        for i in tqdm(range(self._n), desc="distances", disable=not progress):
            for j in range(self._n):
                self.distance(i, j)
        return self._values.copy()

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self.to_numpy())

    def threshold(self, k: int) -> BinaryRelation:
        """Relation of all pairs at distance at most ``k``."""
        return BinaryRelation.from_matrix(self.to_numpy() <= k)

    def __len__(self) -> int:
        return self._n

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DistanceMatrix):
            return NotImplemented
        return self._n == other._n and np.array_equal(self.to_numpy(), other.to_numpy())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        evaluated = int(self._known.sum())
        return f"DistanceMatrix(n={self._n}, evaluated={evaluated})"
