"""Monotonicity traits a role operator declares."""

from __future__ import annotations

from dataclasses import dataclass

from netroles.exceptions import UnsupportedConfigurationError


@dataclass(frozen=True)
class OperatorTraits:
    """
    Declared monotonicity class of a role operator.

    Attributes:
        isotone: a <= b implies op(a) <= op(b)
        constant: op ignores its input
        nonincreasing: op(a) <= a for all a
        nondecreasing: op(a) >= a for all a

    The traits are promises, not checks. The fixpoint driver trusts them to
    skip the meet or join with the running value.
    """

    isotone: bool = True
    constant: bool = False
    nonincreasing: bool = False
    nondecreasing: bool = False

    def __post_init__(self):
        if self.constant and not self.isotone:
            raise UnsupportedConfigurationError(
                "a constant operator is necessarily isotone"
            )

    @classmethod
    def isotone_only(cls) -> "OperatorTraits":
        return cls(isotone=True)

    @classmethod
    def constant_isotone(cls) -> "OperatorTraits":
        return cls(isotone=True, constant=True)

    @classmethod
    def identity(cls) -> "OperatorTraits":
        return cls(isotone=True, nonincreasing=True, nondecreasing=True)

    @classmethod
    def none(cls) -> "OperatorTraits":
        return cls(isotone=False)
