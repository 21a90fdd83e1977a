"""
Topological ordering by repeated removal of sink vertices.

References:
    - Lafore, R. "Data Structures and Algorithms in Java", 2nd ed.
      Chapter 13 (Topological sorting with directed graphs).
"""

from collections import deque
from typing import TYPE_CHECKING, Hashable, List

import numpy as np

from ..exceptions import CycleDetectedError
from ..logging import get_logger

if TYPE_CHECKING:
    from .core import Graph

logger = get_logger(__name__)


def first_no_successor(matrix: np.ndarray) -> int:
    """
    Return the first position whose row has no outgoing edge, or -1.

    A vertex with a self loop counts as having a successor.
    """
    sinks = np.flatnonzero(~np.asarray(matrix).any(axis=1))
    return int(sinks[0]) if sinks.size else -1


def topological_order(graph: "Graph") -> List[Hashable]:
    """
    Order keys so that every edge points from an earlier key to a later one.

    Works on a clone: repeatedly removes the first vertex without
    successors and puts its key in front of the result. The graph itself is
    not modified.

    Args:
        graph: Directed graph.

    Returns:
        All keys in topological order.

    Raises:
        CycleDetectedError: If vertices remain but none is free of successors.

    Complexity: O(N^3) (N removals, each O(N^2)).

    Example:
        >>> G = Graph()
        >>> _ = G.add_vertex_key("A").add_vertex_key("B").add_edge_oneway("A", "B")
        >>> topological_order(G)
        ['A', 'B']
    """
    working = graph.clone()
    result: deque = deque()

    while True:
        position = first_no_successor(working._adjacency)
        if position < 0:
            break
        key = working._vertices[position].key
        working.remove_vertex(key)
        result.appendleft(key)

    if len(result) < len(graph):
        logger.warning(
            "Topological order stopped with %d of %d vertices left",
            len(working),
            len(graph),
        )
        raise CycleDetectedError(
            "This graph is not a directed acyclic graph, a cycle was found among "
            f"{working.keys()!r}."
        )
    return list(result)
