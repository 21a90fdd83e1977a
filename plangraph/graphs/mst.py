"""
Spanning trees: breadth-first tree for unweighted graphs and Prim's
minimum spanning tree for weighted graphs.

Both return a brand-new graph of the same class as the input. Vertices are
added to the result in the order they join the tree, and every tree edge is
stored as bidirectional.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2 (Prim).
"""

from typing import TYPE_CHECKING

import numpy as np

from ..exceptions import DisconnectedGraphError
from ..heap.edge_queue import WeightedEdgePriorityQueue
from ..logging import get_logger
from .traversal import bfs_tree_edges
from .types import Edge, EdgeWeight

if TYPE_CHECKING:
    from .core import Graph, WeightedGraph

logger = get_logger(__name__)


def bfs_spanning_tree(graph: "Graph") -> "Graph":
    """
    Breadth-first spanning tree rooted at the first vertex.

    Args:
        graph: Graph to span; all edges are treated as equally heavy.

    Returns:
        New graph with the same vertices and N - 1 edges.

    Raises:
        DisconnectedGraphError: If some vertex is unreachable from the root.

    Complexity: O(N^2).
    """
    tree = type(graph)(graph.capacity_hint)
    if graph.is_empty():
        return tree

    vertices = graph._vertices
    matrix = graph._adjacency
    pairs = bfs_tree_edges(matrix, 0)
    if len(pairs) < len(vertices) - 1:
        logger.warning(
            "Spanning tree reached %d of %d vertices", len(pairs) + 1, len(vertices)
        )
        raise DisconnectedGraphError("The graph is unconnected.")

    root = vertices[0]
    tree.add_vertex(root.key, root.value)
    for parent, child in pairs:
        vertex = vertices[child]
        tree.add_vertex(vertex.key, vertex.value)
        tree._update_adjacency(
            vertices[parent].key, vertex.key, int(matrix[parent, child]), True
        )
    return tree


def prim_mst(graph: "WeightedGraph") -> "WeightedGraph":
    """
    Prim's algorithm for minimum spanning tree.

    Grows one tree from the first vertex, always adding the lightest edge
    that leaves it. Candidate edges wait in a WeightedEdgePriorityQueue,
    which keeps only the lightest pending edge per destination; among equal
    weights the edge discovered first is kept.

    Args:
        graph: Weighted graph; only outgoing cells of tree vertices are
            considered, so undirected graphs should use bidirectional edges.

    Returns:
        New weighted graph holding the tree, N - 1 bidirectional edges.

    Raises:
        DisconnectedGraphError: If the queue runs dry before every vertex
            has joined the tree. The input graph is left untouched.

    Complexity: O(N^2 log N) with the linear-scan decrease-key.

    Example:
        >>> G = WeightedGraph()
        >>> for key in "ABC":
        ...     _ = G.add_vertex_key(key)
        >>> _ = G.add_edge("A", "B", weight=1).add_edge("B", "C", weight=2)
        >>> _ = G.add_edge("A", "C", weight=3)
        >>> prim_mst(G).total_weight()
        3
    """
    tree = type(graph)(graph.capacity_hint)
    if graph.is_empty():
        return tree

    vertices = graph._vertices
    matrix = graph._adjacency
    n = len(vertices)
    in_tree = np.zeros(n, dtype=bool)
    queue = WeightedEdgePriorityQueue(n)

    current = 0
    in_tree[current] = True
    tree.add_vertex(vertices[current].key, vertices[current].value)
    tree_edges = 0

    while tree_edges < n - 1:
        origin = vertices[current].key
        row = matrix[current]
        for column in np.flatnonzero(row):
            column = int(column)
            if column == current or in_tree[column]:
                continue
            weight = EdgeWeight(int(row[column]))
            queue.push(weight, Edge(origin, vertices[column].key, False, weight))

        node = queue.poll()
        if node is None:
            logger.warning(
                "Minimum spanning tree reached %d of %d vertices", tree_edges + 1, n
            )
            raise DisconnectedGraphError("The graph is unconnected.")

        edge = node.value
        current = graph._vertex_index[edge.destination]
        in_tree[current] = True
        tree.add_vertex(vertices[current].key, vertices[current].value)
        tree.add_edge(edge.origin, edge.destination, True, edge.weight.weight)
        tree_edges += 1
        logger.debug("Prim added edge %s", edge)

    return tree
