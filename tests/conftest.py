"""Pytest configuration and shared fixtures for plangraph tests.

This module provides:
- A deterministic numpy RNG fixture for randomized checks
- The sample graphs used across the graph test modules
- Debug mode switched on so every mutation re-checks structural invariants
"""

import os

import numpy as np
import pytest

from plangraph import Edge, Graph, WeightedGraph, set_debug_enabled

MST_LINKS = [
    ("A", "B", 6),
    ("A", "D", 4),
    ("B", "D", 7),
    ("B", "E", 7),
    ("B", "C", 10),
    ("C", "D", 8),
    ("C", "E", 5),
    ("C", "F", 6),
    ("D", "E", 12),
    ("E", "F", 7),
]

DAG_LINKS = [
    ("A", "B"),
    ("B", "C"),
    ("C", "G"),
    ("D", "G"),
    ("E", "F"),
    ("F", "H"),
    ("G", "I"),
    ("H", "I"),
]


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_mode():
    """Run every test with invariant checks enabled."""
    set_debug_enabled(True)
    yield
    set_debug_enabled(False)


@pytest.fixture
def weighted_graph() -> WeightedGraph:
    """Six-vertex undirected weighted graph (vertices A..F)."""
    graph = WeightedGraph(10)
    for key in "ABCDEF":
        graph.add_vertex_key(key)
    for origin, destination, weight in MST_LINKS:
        graph.add_edge(Edge(origin, destination, True, weight))
    return graph


@pytest.fixture
def dag() -> Graph:
    """Directed acyclic graph A->B->C->G, D->G, E->F->H->I, G->I."""
    graph = Graph(5)
    for key in "ABCDEFGHI":
        graph.add_vertex_key(key)
    for origin, destination in DAG_LINKS:
        graph.add_edge_oneway(origin, destination)
    return graph


@pytest.fixture
def undirected_graph() -> Graph:
    """Undirected graph with links AC, AD, BC, BE, EF, AE, AG."""
    graph = Graph(5)
    for key in "ABCDEFG":
        graph.add_vertex_key(key)
    for origin, destination in [
        ("A", "C"),
        ("A", "D"),
        ("B", "C"),
        ("B", "E"),
        ("E", "F"),
        ("A", "E"),
        ("A", "G"),
    ]:
        graph.add_edge(origin, destination)
    return graph
