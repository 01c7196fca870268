"""Network storage and the views role operators read ties through."""

from netroles.network.network import Network, Tie
from netroles.network.views import (
    Direction,
    ForwardingTransposableView,
    NetworkView,
    RelationView,
    SwappingNetworkView,
    TransposableNetworkView,
    transposable,
)

__all__ = [
    "Network",
    "Tie",
    "Direction",
    "NetworkView",
    "RelationView",
    "TransposableNetworkView",
    "ForwardingTransposableView",
    "SwappingNetworkView",
    "transposable",
]
