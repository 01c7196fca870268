"""Lattice value types role operators work on."""

from netroles.elements.lattice import LatticeElement, MatrixElement
from netroles.elements.partition import Partition, normalize_labels
from netroles.elements.ranking import Ranking
from netroles.elements.relation import BinaryRelation

__all__ = [
    "LatticeElement",
    "MatrixElement",
    "Partition",
    "normalize_labels",
    "Ranking",
    "BinaryRelation",
]
