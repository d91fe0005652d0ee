"""
Pytest configuration and shared fixtures.

Graph-building helpers live in helpers.py.
"""

import pytest

from helpers import random_graph


@pytest.fixture
def diamond_edges():
    """A -> B, A -> C, B -> D, C -> D, all cost 1."""
    return {"A": {"B": 1, "C": 1}, "B": {"D": 1}, "C": {"D": 1}}


@pytest.fixture
def fan_edges():
    """Three branches out of S; only the one through A is cheap to reach T."""
    return {
        "S": {"A": 1, "B": 1, "C": 1},
        "A": {"T": 1},
        "B": {"T": 5},
        "C": {"T": 5},
    }


@pytest.fixture(params=range(12))
def random_case(request):
    """(edges, targets) for a seeded random graph; start node is 0."""
    return random_graph(request.param)
