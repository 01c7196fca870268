"""
Comparator strategies for deciding whether one tie can stand in for another.

Exactly three strategies exist and every refinement algorithm handles all of
them:

* ``WeakComparison``: a total preorder ``cmp(a, b) -> int``; tie ``a`` is
  compatible with ``b`` iff ``cmp(a, b) <= 0``.
* ``PartialComparison``: ``cmp(a, b) -> ComparisonResult``; compatible iff
  the result is LESS or EQUAL.
* ``PredicateComparison``: ``pred(a, b) -> bool``. Only general relations
  accept it, since rankings and equivalences need ordering information.

Each strategy compiles to a contextual predicate
``test(lhs, rhs, tie_i, tie_j) -> bool`` that the algorithms call while
comparing node ``lhs`` against node ``rhs``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

from netroles.exceptions import IllegalComparatorResultError

ContextPredicate = Callable[[int, int, Any, Any], bool]


class ComparisonResult(Enum):
    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"
    INCOMPARABLE = "incomparable"

    @staticmethod
    def of_int(value: int) -> "ComparisonResult":
        """Map a three-way integer comparison result onto the enum."""
        if value < 0:
            return ComparisonResult.LESS
        if value > 0:
            return ComparisonResult.GREATER
        return ComparisonResult.EQUAL

    def invert(self) -> "ComparisonResult":
        if self is ComparisonResult.LESS:
            return ComparisonResult.GREATER
        if self is ComparisonResult.GREATER:
            return ComparisonResult.LESS
        return self


@dataclass(frozen=True)
class WeakComparison:
    """Total preorder given as a three-way comparison function."""

    cmp: Callable[[Any, Any], int]

    def compile(self) -> ContextPredicate:
        cmp = self.cmp

        def test(lhs: int, rhs: int, tie_i: Any, tie_j: Any) -> bool:
            return cmp(tie_i, tie_j) <= 0

        return test


@dataclass(frozen=True)
class PartialComparison:
    """Partial order given as a function returning ``ComparisonResult``."""

    cmp: Callable[[Any, Any], ComparisonResult]

    def compile(self) -> ContextPredicate:
        cmp = self.cmp

        def test(lhs: int, rhs: int, tie_i: Any, tie_j: Any) -> bool:
            result = cmp(tie_i, tie_j)
            if result is ComparisonResult.LESS or result is ComparisonResult.EQUAL:
                return True
            if (
                result is ComparisonResult.GREATER
                or result is ComparisonResult.INCOMPARABLE
            ):
                return False
            raise IllegalComparatorResultError(
                f"partial comparator returned {result!r}, "
                f"expected a ComparisonResult"
            )

        return test


@dataclass(frozen=True)
class PredicateComparison:
    """
    Boolean compatibility test between two ties.

    A swap-aware predicate has the signature ``pred(lhs, rhs, tie_i, tie_j)``
    and receives the pair of nodes being compared, which is what a
    transposable view needs to reinterpret ties across the compared dyad.
    """

    pred: Callable[..., bool]
    swap_aware: bool = False

    def compile(self) -> ContextPredicate:
        pred = self.pred
        if self.swap_aware:

            def aware(lhs: int, rhs: int, tie_i: Any, tie_j: Any) -> bool:
                return bool(pred(lhs, rhs, tie_i, tie_j))

            return aware

        def plain(lhs: int, rhs: int, tie_i: Any, tie_j: Any) -> bool:
            return bool(pred(tie_i, tie_j))

        return plain


Comparison = Union[WeakComparison, PartialComparison, PredicateComparison]


def compile_comparison(comparison: Optional[Comparison]) -> Optional[ContextPredicate]:
    """Contextual predicate for a strategy; None means every pair is compatible."""
    if comparison is None:
        return None
    return comparison.compile()


def comparison_of(obj: Any) -> Comparison:
    """Accept a ready strategy or wrap a plain callable as a weak comparison."""
    if isinstance(obj, (WeakComparison, PartialComparison, PredicateComparison)):
        return obj
    if callable(obj):
        return WeakComparison(obj)
    raise TypeError(f"cannot use {type(obj).__name__} as a comparator")


def weak_from_key(key: Callable[[Any], Any]) -> WeakComparison:
    """Weak comparison ordering ties by ``key(tie)``."""

    def cmp(a: Any, b: Any) -> int:
        ka, kb = key(a), key(b)
        return (ka > kb) - (ka < kb)

    return WeakComparison(cmp)


def partial_from_less_equal(leq: Callable[[Any, Any], bool]) -> PartialComparison:
    """Partial comparison derived from a ``<=`` test."""

    def cmp(a: Any, b: Any) -> ComparisonResult:
        below, above = leq(a, b), leq(b, a)
        if below and above:
            return ComparisonResult.EQUAL
        if below:
            return ComparisonResult.LESS
        if above:
            return ComparisonResult.GREATER
        return ComparisonResult.INCOMPARABLE

    return PartialComparison(cmp)


def swap_aware(pred: Callable[[int, int, Any, Any], bool]) -> PredicateComparison:
    """Mark ``pred(lhs, rhs, tie_i, tie_j)`` as safe for transposable views."""
    return PredicateComparison(pred, swap_aware=True)
