"""
Fluent builders turning a network view and a comparator into role operators.

Usage:
    op = (
        EQUIVALENCE.regular()
        .of(network.view(Direction.INCOMING))
        .comp_weak(lambda a, b: (a.weight > b.weight) - (a.weight < b.weight))
        .make()
    )
    roles = op.interior(Partition.trivial(n))

Every builder accepts exactly one comparator strategy; setting a new one
replaces the previous choice. Misconfigurations raise
``UnsupportedConfigurationError`` while configuring or in ``make()``,
before any operator runs.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Callable, Generic, List, Optional, Tuple, Type, TypeVar

from netroles.algorithms.domination import Dominated, build_element, dominates, regular_test
from netroles.algorithms.structural import structurally_dominates
from netroles.comparators import (
    Comparison,
    PartialComparison,
    PredicateComparison,
    WeakComparison,
    comparison_of,
    compile_comparison,
)
from netroles.elements.lattice import LatticeElement
from netroles.elements.relation import BinaryRelation
from netroles.exceptions import DomainMismatchError, UnsupportedConfigurationError
from netroles.network.views import NetworkView, TransposableNetworkView, transposable
from netroles.operators.base import RoleOperator
from netroles.traits import OperatorTraits

L = TypeVar("L", bound=LatticeElement)
B = TypeVar("B", bound="ConfigurableBuilder")

Dominance = Callable[[Any], Dominated]


class NeighborhoodRoleOperator(RoleOperator[L]):
    """Role operator deciding pairwise domination over a network view."""

    def __init__(
        self,
        element_type: Type[L],
        n: int,
        dominance: Dominance,
        traits: OperatorTraits,
    ):
        super().__init__(traits)
        self._element_type = element_type
        self._n = n
        self._dominance = dominance

    @property
    def element_type(self) -> Type[L]:
        return self._element_type

    def count_nodes(self) -> int:
        return self._n

    def _check(self, *values: L) -> None:
        for value in values:
            if not isinstance(value, self._element_type):
                raise TypeError(
                    f"expected {self._element_type.__name__}, got {type(value).__name__}"
                )
            if value.size != self._n:
                raise DomainMismatchError(
                    f"operator is defined on {self._n} nodes, value has {value.size}"
                )

    def relative(self, structure: L) -> L:
        self._check(structure)
        return build_element(self._element_type, self._n, self._dominance(structure))

    def relative_refining(self, structure: L, to_refine: L) -> L:
        self._check(structure, to_refine)
        return build_element(
            self._element_type, self._n, self._dominance(structure), to_refine
        )


class ConfigurableBuilder(Generic[L]):
    """
    Configuration shared by role and distance builders: the view, the
    comparator strategy and the matching mode.
    """

    supports_equitable = False
    strictness_needs_relation = True

    def __init__(self, element_type: Type[L]):
        self._element_type = element_type
        self._views: List[TransposableNetworkView] = []
        self._directed: List[bool] = []
        self._comparison: Optional[Comparison] = None
        self._strictness: Optional[int] = None

    # ------------------------------------------------------------------ #
    # view
    # ------------------------------------------------------------------ #

    def of(self: B, *args: Any) -> B:
        """
        Fix the network view, either as ``of(view)`` or ``of(n, view)``.

        Directed ``NetworkView`` objects and ``TransposableNetworkView``
        objects are both accepted.
        """
        n, views = _split_of_arguments(args)
        if len(views) != 1:
            raise UnsupportedConfigurationError(
                f"{type(self).__name__} takes exactly one network view"
            )
        self._set_views(n, views)
        return self

    def _set_views(self, n: Optional[int], views: List[Any]) -> None:
        self._directed = [isinstance(view, NetworkView) for view in views]
        self._views = [transposable(view) for view in views]
        if n is not None and n != self._views[0].count_nodes():
            raise DomainMismatchError(
                f"declared {n} nodes but the view has {self._views[0].count_nodes()}"
            )
        self._check_predicate(self._comparison)

    @property
    def view(self) -> TransposableNetworkView:
        if not self._views:
            raise UnsupportedConfigurationError(
                "no network view configured; call of(view) first"
            )
        return self._views[0]

    # ------------------------------------------------------------------ #
    # comparators
    # ------------------------------------------------------------------ #

    def comp_weak(self: B, cmp: Callable[[Any, Any], int]) -> B:
        """Compare ties by a total preorder ``cmp(a, b) -> int``."""
        return self._set_comparison(WeakComparison(cmp))

    def comp_partial(self: B, cmp: Callable[[Any, Any], Any]) -> B:
        """Compare ties by a partial order returning ``ComparisonResult``."""
        return self._set_comparison(PartialComparison(cmp))

    def comp_predicate(
        self: B, pred: Callable[..., bool], swap_aware: bool = False
    ) -> B:
        """Compare ties by a boolean predicate (binary relations only)."""
        if isinstance(pred, PredicateComparison):
            return self._set_comparison(pred)
        return self._set_comparison(PredicateComparison(pred, swap_aware))

    def comp(self: B, comparator: Any) -> B:
        """Accept any comparator strategy; plain callables are weak comparators."""
        return self._set_comparison(comparison_of(comparator))

    def _set_comparison(self: B, comparison: Comparison) -> B:
        self._check_predicate(comparison)
        self._comparison = comparison
        return self

    def _check_predicate(self, comparison: Optional[Comparison]) -> None:
        check_predicate(self._element_type, self._directed, comparison)

    # ------------------------------------------------------------------ #
    # matching mode
    # ------------------------------------------------------------------ #

    def equitable(self: B) -> B:
        """Require multiplicity-exact matching of neighbours."""
        self._require_equitable_support()
        self._strictness = 1
        return self

    def loose(self: B) -> B:
        """Set-based matching of neighbours."""
        self._require_equitable_support()
        self._strictness = None
        return self

    def strictness(self: B, p: int) -> B:
        """Let every tie absorb up to ``p`` ties of the dominated node."""
        self._require_equitable_support()
        if self.strictness_needs_relation and not issubclass(
            self._element_type, BinaryRelation
        ):
            raise UnsupportedConfigurationError(
                "strictness is only supported for binary relations"
            )
        if p < 1:
            raise UnsupportedConfigurationError(f"strictness must be >= 1, got {p}")
        self._strictness = p
        return self

    def _require_equitable_support(self) -> None:
        if not self.supports_equitable:
            raise UnsupportedConfigurationError(
                f"{type(self).__name__} does not support matching modes"
            )

    def _validate(self) -> None:
        if not self._views:
            raise UnsupportedConfigurationError(
                "no network view configured; call of(view) first"
            )
        self._check_predicate(self._comparison)


class RoleOperatorBuilder(ConfigurableBuilder[L]):
    """Base of all role operator builders."""

    default_traits = OperatorTraits.isotone_only()

    def traits(self: B, traits: OperatorTraits) -> B:
        raise UnsupportedConfigurationError(
            f"{type(self).__name__} fixes its operator traits"
        )

    def _operator_traits(self) -> OperatorTraits:
        return self.default_traits

    @abstractmethod
    def _dominance(self) -> Dominance:
        """Map a role structure to its pairwise domination test."""

    def make(self) -> NeighborhoodRoleOperator[L]:
        self._validate()
        return NeighborhoodRoleOperator(
            self._element_type,
            self.view.count_nodes(),
            self._dominance(),
            self._operator_traits(),
        )


class WeakRolesBuilder(RoleOperatorBuilder[L]):
    """
    Weak roles: ties are compared by the comparator alone, ignoring the
    roles of their targets. Without a comparator this separates isolated
    from non-isolated nodes.
    """

    supports_equitable = True
    default_traits = OperatorTraits.constant_isotone()

    def _dominance(self) -> Dominance:
        view, strictness = self.view, self._strictness
        test = compile_comparison(self._comparison)

        def dominance(structure: Any) -> Dominated:
            return lambda i, j: dominates(view, i, j, test, strictness)

        return dominance


class RegularRolesBuilder(RoleOperatorBuilder[L]):
    """
    Regular roles: a tie of i is matched by a tie of j only if their targets
    are related in the current role structure.
    """

    supports_equitable = True

    def _dominance(self) -> Dominance:
        view, strictness = self.view, self._strictness
        base = compile_comparison(self._comparison)

        def dominance(structure: Any) -> Dominated:
            test = regular_test(view, structure, base)
            return lambda i, j: dominates(view, i, j, test, strictness)

        return dominance


class StrongStructuralRolesBuilder(RoleOperatorBuilder[L]):
    """Strong structural roles: ties must lead to the very same node."""

    default_traits = OperatorTraits.constant_isotone()

    def _dominance(self) -> Dominance:
        view = self.view
        test = compile_comparison(self._comparison)

        def dominance(structure: Any) -> Dominated:
            return lambda i, j: structurally_dominates(view, i, j, test)

        return dominance


class WeakStructuralRolesBuilder(RoleOperatorBuilder[L]):
    """
    Weak structural roles: as strong structural, but a tie between the two
    compared nodes is matched by the tie in the opposite direction.

    ``of(one_direction, other_direction)`` combines two views (typically
    incoming and outgoing) by meet; ``unidirectional()`` only uses the first.
    """

    default_traits = OperatorTraits.constant_isotone()

    def __init__(self, element_type: Type[L]):
        super().__init__(element_type)
        self._unidirectional = False

    def of(self: B, *args: Any) -> B:
        n, views = _split_of_arguments(args)
        if not 1 <= len(views) <= 2:
            raise UnsupportedConfigurationError(
                "weak structural roles take one or two network views"
            )
        if len(views) == 2 and views[1] is views[0]:
            views = views[:1]
        if len(views) == 2 and views[0].count_nodes() != views[1].count_nodes():
            raise DomainMismatchError("mismatched in node numbers between directions")
        self._set_views(n, views)
        return self

    def unidirectional(self: B) -> B:
        """Only use the first view for both sides of the comparison."""
        self._unidirectional = True
        return self

    def _dominance(self) -> Dominance:
        views = self._views[:1] if self._unidirectional else list(self._views)
        test = compile_comparison(self._comparison)

        def dominance(structure: Any) -> Dominated:
            return lambda i, j: all(
                structurally_dominates(view, i, j, test, transpose=True)
                for view in views
            )

        return dominance


ComparisonFactory = Callable[[Any], Comparison]


class GenericRolesBuilder(RoleOperatorBuilder[L]):
    """
    Weak roles with a comparator derived from the current role structure.

    The comparator setters take *factories*: functions receiving the role
    structure the operator is applied to and returning the comparator for
    that step. Recomputing the comparator every fixpoint round is therefore
    built in, e.g.

        GenericRolesBuilder(Partition).of(view).comp_weak(
            lambda roles: lambda a, b: roles[a.left] - roles[b.left]
        )

    The traits default to isotone only and can be declared with ``traits``.
    """

    supports_equitable = True

    def __init__(self, element_type: Type[L]):
        super().__init__(element_type)
        self._factory: Optional[ComparisonFactory] = None
        self._declared_traits = self.default_traits

    def traits(self: B, traits: OperatorTraits) -> B:
        self._declared_traits = traits
        return self

    def _operator_traits(self) -> OperatorTraits:
        return self._declared_traits

    def comp_weak(self: B, factory: Callable[[Any], Callable[[Any, Any], int]]) -> B:
        return self._set_factory(WeakComparison, factory)

    def comp_partial(self: B, factory: Callable[[Any], Callable[[Any, Any], Any]]) -> B:
        return self._set_factory(PartialComparison, factory)

    def comp_predicate(
        self: B, factory: Callable[[Any], Callable[..., bool]], swap_aware: bool = False
    ) -> B:
        self._check_predicate(PredicateComparison(factory, swap_aware))
        self._comparison = PredicateComparison(factory, swap_aware)
        self._factory = lambda structure: PredicateComparison(
            factory(structure), swap_aware
        )
        return self

    def comp(self: B, factory: Callable[[Any], Any]) -> B:
        """
        Factory returning any comparator strategy (callables become weak).

        The strategy kind is only known once the factory has produced one, so
        ``make()`` samples it on the top element before accepting the builder.
        """
        self._comparison = None
        self._factory = lambda structure: comparison_of(factory(structure))
        return self

    def _set_factory(self: B, strategy: Type[Any], factory: Callable[[Any], Any]) -> B:
        self._comparison = strategy(factory)
        self._factory = lambda structure: strategy(factory(structure))
        return self

    def _validate(self) -> None:
        super()._validate()
        if self._comparison is None and self._factory is not None:
            top = self._element_type.top(self.view.count_nodes())
            self._check_predicate(self._factory(top))

    def _dominance(self) -> Dominance:
        view, strictness, factory = self.view, self._strictness, self._factory
        element_type, directed = self._element_type, list(self._directed)

        def dominance(structure: Any) -> Dominated:
            comparison = factory(structure) if factory is not None else None
            check_predicate(element_type, directed, comparison)
            test = compile_comparison(comparison)
            return lambda i, j: dominates(view, i, j, test, strictness)

        return dominance


def check_predicate(
    element_type: Type[Any], directed: List[bool], comparison: Optional[Comparison]
) -> None:
    """Reject predicates on orderings and plain bi-predicates on transposable views."""
    if not isinstance(comparison, PredicateComparison):
        return
    if not issubclass(element_type, BinaryRelation):
        UnsupportedConfigurationError.raise_predicate_unsupported(element_type.__name__)
    if not comparison.swap_aware and not all(directed):
        raise UnsupportedConfigurationError(
            "a plain bi-predicate cannot be symmetrized for a transposable "
            "view; wrap it with comparators.swap_aware"
        )


def _split_of_arguments(args: Tuple[Any, ...]) -> Tuple[Optional[int], List[Any]]:
    if args and isinstance(args[0], int):
        return args[0], list(args[1:])
    return None, list(args)
