"""Structural invariant checks for graphs and heaps."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from ..graphs.core import Graph
    from ..heap.array import HeapArray


def assert_graph_consistent(graph: "Graph") -> None:
    """
    Assert that the vertex list, the index map and the adjacency buffer agree.

    Parameters
    ----------
    graph:
        Graph (weighted or not) to inspect.

    Raises
    ------
    ValueError
        If any of the three structures disagrees with the others, or the
        buffer holds adjacency outside the active window.
    """
    vertices = graph._vertices
    index = graph._vertex_index
    matrix = graph._matrix
    n = len(vertices)

    if len(index) != n:
        raise ValueError(
            f"Index map holds {len(index)} keys but the graph has {n} vertices."
        )

    for position, vertex in enumerate(vertices):
        if vertex.key is None:
            raise ValueError(f"Vertex at position {position} has a None key.")
        found = index.get(vertex.key)
        if found != position:
            raise ValueError(
                f"Vertex {vertex.key!r} is at position {position} "
                f"but the index map says {found}."
            )

    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1] or matrix.shape[0] < n:
        raise ValueError(
            f"Adjacency buffer of shape {matrix.shape} cannot hold {n} vertices."
        )

    if np.any(matrix[n:, :]) or np.any(matrix[:, n:]):
        raise ValueError("Adjacency buffer holds edges outside the active vertices.")

    if np.any(matrix[:n, :n] < 0):
        raise ValueError("Adjacency matrix holds negative values.")


def is_heap_ordered(heap: "HeapArray") -> bool:
    """
    Check whether no child in the heap compares greater than its parent.

    Only the logical part of the backing array is inspected.

    Parameters
    ----------
    heap:
        Heap to inspect.

    Returns
    -------
    bool
        True if the heap property holds for every node.
    """
    slots = heap._slots
    for position in range(1, heap._size):
        parent = (position - 1) // 2
        if slots[position].key > slots[parent].key:
            return False
    return True


def assert_heap_ordered(heap: "HeapArray") -> None:
    """
    Assert the heap property.

    Raises
    ------
    ValueError
        If some child key compares greater than its parent key.
    """
    if not is_heap_ordered(heap):
        raise ValueError(f"Heap property violated in {heap!r}.")
