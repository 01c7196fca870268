"""
Read-only views over a network's ties.

A ``NetworkView`` exposes, for every node, the ties in one direction and the
node each tie leads to. Role algorithms never use it directly; they consume
the ``TransposableNetworkView`` capability, whose accessors additionally
receive the pair of nodes ``(lhs, rhs)`` being compared. This lets a view
re-express a tie between the two compared nodes from the other side, which
is what undirected dyads need.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, Sequence, TypeVar

from netroles.network.network import Network, Tie

T = TypeVar("T")


class Direction(Enum):
    """Which incident ties of a node a view reports."""

    INCOMING = "incoming"
    OUTGOING = "outgoing"

    def reverse(self) -> "Direction":
        return Direction.OUTGOING if self is Direction.INCOMING else Direction.INCOMING


class TransposableNetworkView(ABC, Generic[T]):
    """Tie accessor that is aware of the pair of nodes being compared."""

    @abstractmethod
    def count_nodes(self) -> int:
        """Number of nodes in the underlying network."""

    @abstractmethod
    def ties(self, lhs: int, rhs: int, node: int) -> Sequence[T]:
        """Ties of ``node`` while comparing ``lhs`` against ``rhs``."""

    @abstractmethod
    def tie_target(self, lhs: int, rhs: int, node: int, tie: T) -> int:
        """Node that ``tie`` leads to, seen from ``node`` in the comparison."""

    @abstractmethod
    def tie_index(self, lhs: int, rhs: int, node: int, tie: T) -> int:
        """Stable index of ``tie``."""

    def count_ties(self, lhs: int, rhs: int, node: int) -> int:
        return len(self.ties(lhs, rhs, node))


class NetworkView(ABC, Generic[T]):
    """Directed tie accessor: the comparison context plays no role."""

    @abstractmethod
    def count_nodes(self) -> int:
        """Number of nodes in the underlying network."""

    @abstractmethod
    def ties(self, node: int) -> Sequence[T]:
        """Ties of ``node`` in the view's direction."""

    @abstractmethod
    def inverse_ties(self, node: int) -> Sequence[T]:
        """Ties of ``node`` in the opposite direction."""

    @abstractmethod
    def tie_target(self, node: int, tie: T) -> int:
        """Node reached from ``node`` through ``tie``."""

    @abstractmethod
    def inverse_tie_target(self, node: int, tie: T) -> int:
        """Node reached from ``node`` through ``tie`` in the opposite direction."""

    @abstractmethod
    def tie_index(self, node: int, tie: T) -> int:
        """Stable index of ``tie``."""

    def count_ties(self, node: int) -> int:
        return len(self.ties(node))

    def as_transposable(self) -> "ForwardingTransposableView[T]":
        """The same view behind the comparison-aware accessors."""
        return ForwardingTransposableView(self)

    @staticmethod
    def from_network(network: Network, direction: Direction) -> "RelationView":
        """
        View over a network's ties.

        INCOMING reports the ties ending at a node and leads to their left
        endpoint; OUTGOING reports the ties starting at a node and leads to
        their right endpoint. For undirected networks both directions report
        all incident ties, oriented so that the same rule applies: an
        incoming tie's ``left`` is always the neighbour.
        """
        return RelationView(network, direction)


class RelationView(NetworkView[Tie]):
    """``NetworkView`` over a ``Network`` in a fixed direction."""

    def __init__(self, network: Network, direction: Direction):
        self.network = network
        self.direction = direction

    def count_nodes(self) -> int:
        return self.network.count_nodes()

    def _ties(self, direction: Direction, node: int) -> Sequence[Tie]:
        if direction is Direction.OUTGOING:
            return self.network.ties_from(node)
        return self.network.ties_to(node)

    def _target(self, direction: Direction, node: int, tie: Tie) -> int:
        return tie.right if direction is Direction.OUTGOING else tie.left

    def ties(self, node: int) -> Sequence[Tie]:
        return self._ties(self.direction, node)

    def inverse_ties(self, node: int) -> Sequence[Tie]:
        return self._ties(self.direction.reverse(), node)

    def tie_target(self, node: int, tie: Tie) -> int:
        return self._target(self.direction, node, tie)

    def inverse_tie_target(self, node: int, tie: Tie) -> int:
        return self._target(self.direction.reverse(), node, tie)

    def tie_index(self, node: int, tie: Tie) -> int:
        return tie.index

    def reversed(self) -> "RelationView":
        """View over the same network in the opposite direction."""
        return RelationView(self.network, self.direction.reverse())

    def __repr__(self) -> str:
        return f"RelationView({self.network!r}, {self.direction.name})"


class ForwardingTransposableView(TransposableNetworkView[T]):
    """Transposable view that ignores the comparison pair."""

    def __init__(self, view: NetworkView[T]):
        self.view = view

    def count_nodes(self) -> int:
        return self.view.count_nodes()

    def ties(self, lhs: int, rhs: int, node: int) -> Sequence[T]:
        return self.view.ties(node)

    def tie_target(self, lhs: int, rhs: int, node: int, tie: T) -> int:
        return self.view.tie_target(node, tie)

    def tie_index(self, lhs: int, rhs: int, node: int, tie: T) -> int:
        return self.view.tie_index(node, tie)

    def count_ties(self, lhs: int, rhs: int, node: int) -> int:
        return self.view.count_ties(node)


class SwappingNetworkView(TransposableNetworkView[T]):
    """
    Transposable view for undirected dyads.

    When the ties of the right-hand node ``rhs`` are inspected, a tie leading
    to ``lhs`` is reported as leading to ``rhs`` and vice versa, so that a tie
    between the two compared nodes matches itself from either side.
    """

    def __init__(self, view: NetworkView[T]):
        self.view = view

    def count_nodes(self) -> int:
        return self.view.count_nodes()

    def ties(self, lhs: int, rhs: int, node: int) -> Sequence[T]:
        return self.view.ties(node)

    def tie_target(self, lhs: int, rhs: int, node: int, tie: T) -> int:
        target = self.view.tie_target(node, tie)
        if node == rhs:
            if target == lhs:
                return rhs
            if target == rhs:
                return lhs
        return target

    def tie_index(self, lhs: int, rhs: int, node: int, tie: T) -> int:
        return self.view.tie_index(node, tie)

    def count_ties(self, lhs: int, rhs: int, node: int) -> int:
        return self.view.count_ties(node)


def transposable(view) -> TransposableNetworkView:
    """Return ``view`` as a transposable view, wrapping directed views."""
    if isinstance(view, TransposableNetworkView):
        return view
    if isinstance(view, NetworkView):
        return view.as_transposable()
    raise TypeError(f"expected a network view, got {type(view).__name__}")
