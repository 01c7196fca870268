import logging

import pytest

from netroles.elements import Partition
from netroles.logger import roles_logger
from netroles.network import Direction, Network

z = None

# Undirected 11-node network, lower-triangular adjacency rows.
ELEVEN_NODES = [
    [z],
    [1, z],
    [1, z, z],
    [z, 1, 1, z],
    [z, 1, z, z, z],
    [z, z, 1, z, z, z],
    [z, z, z, z, 1, 1, z],
    [z, z, z, z, z, z, 1, z],
    [z, z, z, z, z, 1, z, z, z],
    [z, z, z, z, z, 1, z, z, 1, z],
    [z, 1, 1, z, z, z, z, z, z, z, z],
]


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Enable role computation tracing
    roles_logger.disabled = False


@pytest.fixture
def network():
    return Network.from_adjacency(ELEVEN_NODES, directed=False)


@pytest.fixture
def incoming(network):
    return network.view(Direction.INCOMING)


@pytest.fixture
def swapping(network):
    return network.swapping_view(Direction.INCOMING)


@pytest.fixture
def three_classes():
    return Partition([0, 0, 0, 0, 1, 1, 1, 2, 2, 2, 2])
