"""Pytest configuration and shared fixtures for algograph tests.

This module provides:
- A deterministic numpy RNG fixture for randomized property tests
- Graph builders shared across test modules
"""

import os
from typing import Iterable, Tuple

import numpy as np
import pytest

from algograph.diagnostics import set_debug_enabled
from algograph.graphs import WeightedDigraph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def debug_mode():
    """Enable debug mode (heap and topo-order self checks) for one test."""
    set_debug_enabled(True)
    try:
        yield
    finally:
        set_debug_enabled(False)


def symmetric_weighted(edges: Iterable[Tuple[str, str, int]]) -> WeightedDigraph:
    """Build a WeightedDigraph holding each edge in both directions."""
    graph = WeightedDigraph()
    for u, v, w in edges:
        graph.insert_edge_weighted(u, v, w)
        graph.insert_edge_weighted(v, u, w)
    return graph


@pytest.fixture
def dijkstra_graph() -> WeightedDigraph:
    """Seven-node weighted graph with a unique shortest path A -> C -> E -> B."""
    graph = WeightedDigraph()
    for node in "ABCDEFG":
        graph.insert_node(node)
    edges = [
        ("A", "C", 3), ("A", "F", 2),
        ("C", "A", 3), ("C", "F", 2), ("C", "E", 1), ("C", "D", 4),
        ("F", "A", 2), ("F", "C", 2), ("F", "E", 3), ("F", "B", 6), ("F", "G", 5),
        ("E", "C", 1), ("E", "F", 3), ("E", "B", 2),
        ("D", "C", 4), ("D", "B", 1),
        ("B", "D", 1), ("B", "E", 2), ("B", "F", 6), ("B", "G", 2),
        ("G", "F", 5), ("G", "B", 2),
    ]
    for u, v, w in edges:
        graph.insert_edge_weighted(u, v, w)
    return graph


@pytest.fixture
def prim_graph() -> WeightedDigraph:
    """Seven-node symmetric weighted graph whose MST weighs 24."""
    return symmetric_weighted(
        [
            ("B", "A", 2), ("B", "C", 4), ("B", "E", 3),
            ("A", "C", 3), ("A", "D", 3),
            ("C", "E", 1), ("C", "F", 6),
            ("D", "F", 7),
            ("E", "F", 8),
            ("F", "G", 9),
        ]
    )


@pytest.fixture
def symmetric():
    """Factory building symmetric weighted graphs from (u, v, w) triples."""
    return symmetric_weighted
