"""
Custom exceptions for role operators and their lattice values.
"""

from __future__ import annotations
from typing import NoReturn


class RoleError(Exception):
    """Base exception for role analysis errors."""

    pass


class UnsupportedConfigurationError(RoleError):
    """Raised when an operator builder is configured in a way it cannot honour."""

    @staticmethod
    def raise_predicate_unsupported(kind: str) -> NoReturn:
        """
        Raises an UnsupportedConfigurationError for predicate comparators on
        lattice types that need ordering information.

        Args:
            kind: Name of the lattice type the builder produces

        Raises:
            UnsupportedConfigurationError: Always raised
        """
        from netroles.logger import roles_logger

        message = (
            "setting bi-predicates as comparators is not supported "
            "for rankings and equivalences"
        )
        if not roles_logger.disabled:
            roles_logger.error(f"{message} (requested for {kind})")
        raise UnsupportedConfigurationError(message)


class IllegalComparatorResultError(RoleError):
    """Raised when a partial comparator returns something other than a ComparisonResult."""

    pass


class ConvergenceError(RoleError):
    """Raised when a fixpoint iteration exceeds its round cap."""

    @staticmethod
    def raise_non_convergence(operation: str, rounds: int, size: int) -> NoReturn:
        """
        Raises a ConvergenceError when interior or closure did not stabilise.

        Finite lattice height makes this unreachable for correct lattice
        operations, so hitting it signals an internal invariant violation.

        Args:
            operation: "interior" or "closure"
            rounds: Number of rounds performed before giving up
            size: Domain size of the lattice values involved

        Raises:
            ConvergenceError: Always raised with detailed error information
        """
        from netroles.logger import roles_logger

        message = (
            f"{operation} did not reach a fixed point after {rounds} rounds "
            f"on a domain of {size} nodes. "
            f"This indicates an inconsistent lattice operation or operator traits."
        )
        if not roles_logger.disabled:
            roles_logger.error(message)
        raise ConvergenceError(message)


class DomainMismatchError(RoleError, ValueError):
    """Raised when lattice values or views disagree on the number of nodes."""

    pass


class InvalidElementError(RoleError, ValueError):
    """Raised when raw input does not describe a valid lattice value."""

    pass
