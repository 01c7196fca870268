"""
Role operators and the fixpoint driver.

A role operator maps a role structure (partition, ranking or binary
relation) to another one of the same type. ``relative`` performs a single
refinement step; ``interior`` and ``closure`` iterate it until nothing
changes, yielding the largest fixed point below and the smallest fixed
point above the input.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

from netroles.elements.lattice import LatticeElement
from netroles.elements.partition import Partition
from netroles.exceptions import ConvergenceError
from netroles.logger import roles_logger
from netroles.traits import OperatorTraits

L = TypeVar("L", bound=LatticeElement)


class RoleOperator(ABC, Generic[L]):
    """
    Immutable operator over one lattice value type.

    Subclasses implement ``relative``; they may override
    ``relative_refining`` and ``relative_coarsening`` when the combined
    result can be computed more cheaply than by meet or join afterwards.
    """

    def __init__(self, traits: OperatorTraits):
        self._traits = traits

    @property
    def traits(self) -> OperatorTraits:
        return self._traits

    def is_isotone(self) -> bool:
        return self._traits.isotone

    def is_constant(self) -> bool:
        return self._traits.constant

    def is_nonincreasing(self) -> bool:
        return self._traits.nonincreasing

    def is_nondecreasing(self) -> bool:
        return self._traits.nondecreasing

    # ------------------------------------------------------------------ #
    # single steps
    # ------------------------------------------------------------------ #

    @abstractmethod
    def relative(self, structure: L) -> L:
        """One refinement step relative to the given role structure."""

    def relative_refining(self, structure: L, to_refine: L) -> L:
        """``to_refine`` met with ``relative(structure)``."""
        return to_refine.infimum(self.relative(structure))

    def relative_coarsening(self, structure: L, to_coarsen: L) -> L:
        """``to_coarsen`` joined with ``relative(structure)``."""
        return to_coarsen.supremum(self.relative(structure))

    def apply(self, structure: L) -> L:
        return self.relative(structure)

    def __call__(self, structure: L) -> L:
        return self.apply(structure)

    def restrict(self, structure: L) -> L:
        """One step of the interior iteration."""
        if self.is_nonincreasing():
            return self.relative(structure)
        return self.relative_refining(structure, structure)

    def extend(self, structure: L) -> L:
        """One step of the closure iteration."""
        if self.is_nondecreasing():
            return self.relative(structure)
        return self.relative_coarsening(structure, structure)

    # ------------------------------------------------------------------ #
    # fixpoints
    # ------------------------------------------------------------------ #

    @roles_logger.log_execution
    def interior(self, structure: L) -> L:
        """Largest fixed point of ``restrict`` below the input."""
        if self.is_constant():
            return self.restrict(structure)
        return _iterate_to_fixpoint(structure, self.restrict, "interior")

    @roles_logger.log_execution
    def closure(self, structure: L) -> L:
        """Smallest fixed point of ``extend`` above the input."""
        if self.is_constant():
            return self.extend(structure)
        return _iterate_to_fixpoint(structure, self.extend, "closure")

    def __repr__(self) -> str:
        flags = [
            name
            for name in ("isotone", "constant", "nonincreasing", "nondecreasing")
            if getattr(self._traits, name)
        ]
        return f"{type(self).__name__}({', '.join(flags)})"


def max_rounds(size: int) -> int:
    """
    Upper bound on the rounds of a fixpoint iteration.

    Each round strictly shrinks or grows a relation over ``size`` nodes, so
    more than ``size * size`` changes are impossible.
    """
    return size * size + 2


def _iterate_to_fixpoint(start: L, step: Callable[[L], L], operation: str) -> L:
    current = start
    limit = max_rounds(start.size)
    for round_number in range(1, limit + 1):
        following = step(current)
        if not roles_logger.disabled:
            roles_logger.subsection(f"{operation} round {round_number}")
            if isinstance(following, Partition):
                roles_logger.classes(following.labels)
            else:
                roles_logger.matrix(following.to_matrix())
        if following == current:
            if not roles_logger.disabled:
                roles_logger.info(
                    f"{operation} stable after {round_number} rounds"
                )
            return current
        current = following
    ConvergenceError.raise_non_convergence(operation, limit, start.size)


class FunctionRoleOperator(RoleOperator[L]):
    """Role operator defined by a plain step function."""

    def __init__(self, function: Callable[[L], L], traits: OperatorTraits):
        super().__init__(traits)
        self._function = function

    def relative(self, structure: L) -> L:
        return self._function(structure)
