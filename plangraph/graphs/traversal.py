"""
Graph traversal algorithms: DFS and BFS over the adjacency matrix.

All searches are iterative (explicit stack or queue) and keep visited state
in a per-call boolean array indexed by vertex position. Neighbours are
scanned in position order, which makes results deterministic for a given
construction order.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import TYPE_CHECKING, Hashable, List

import numpy as np

if TYPE_CHECKING:
    from .core import Graph


def next_unvisited(cells: np.ndarray, visited: np.ndarray) -> int:
    """
    Return the first position adjacent per cells and not yet visited.

    Args:
        cells: Matrix row (successors) or column (predecessors).
        visited: Boolean array of the same length.

    Returns:
        Position, or -1 if every adjacent position was visited.
    """
    candidates = np.flatnonzero((cells != 0) & ~visited)
    return int(candidates[0]) if candidates.size else -1


def reachable_positions(matrix: np.ndarray, start: int) -> List[int]:
    """
    Depth-first search from start following outgoing edges.

    Args:
        matrix: N x N adjacency matrix.
        start: Position to start from.

    Returns:
        Positions in discovery order, start first.

    Complexity: O(N^2).
    """
    visited = np.zeros(matrix.shape[0], dtype=bool)
    visited[start] = True
    order = [start]
    stack = [start]

    while stack:
        position = next_unvisited(matrix[stack[-1]], visited)
        if position < 0:
            # Dead end
            stack.pop()
        else:
            visited[position] = True
            stack.append(position)
            order.append(position)

    return order


def connectivity_table(graph: "Graph") -> List[List[Hashable]]:
    """
    For every vertex, list the keys reachable from it.

    Returns:
        One list per vertex in position order; each list starts with the
        vertex's own key followed by keys in DFS discovery order.

    Example:
        >>> G = Graph()
        >>> _ = G.add_vertex_key("A").add_vertex_key("B").add_edge_oneway("A", "B")
        >>> connectivity_table(G)
        [['A', 'B'], ['B']]
    """
    matrix = graph._adjacency
    vertices = graph._vertices
    return [
        [vertices[position].key for position in reachable_positions(matrix, start)]
        for start in range(len(vertices))
    ]


def dfs_path(graph: "Graph", key1: Hashable, key2: Hashable) -> List[Hashable]:
    """
    Find some path from key1 to key2 with depth-first search.

    The search starts at key2 and walks edges backwards (column by column),
    so the stack itself, read from the top, is the path from key1 to key2 as
    soon as key1 is pushed. The path is not necessarily the shortest.

    Args:
        graph: Graph to search.
        key1: Start of the path.
        key2: End of the path.

    Returns:
        Keys from key1 to key2 inclusive, or an empty list if key2 cannot be
        reached from key1.

    Raises:
        UnknownKeyError: If either key is not part of the graph.
    """
    source = graph._position(key1)
    target = graph._position(key2)
    if source == target:
        return [key1]

    matrix = graph._adjacency
    visited = np.zeros(matrix.shape[0], dtype=bool)
    visited[target] = True
    stack = [target]

    while stack:
        position = next_unvisited(matrix[:, stack[-1]], visited)
        if position < 0:
            stack.pop()
            continue
        visited[position] = True
        stack.append(position)
        if position == source:
            break

    return [graph._vertices[position].key for position in reversed(stack)]


def bfs_path(graph: "Graph", key1: Hashable, key2: Hashable) -> List[Hashable]:
    """
    Find a shortest path (fewest edges) from key1 to key2.

    Breadth-first search forward from key1; once key2 is discovered the path
    is rebuilt through the recorded predecessor of each vertex.

    Returns:
        Keys from key1 to key2 inclusive, or an empty list if key2 cannot be
        reached from key1.

    Raises:
        UnknownKeyError: If either key is not part of the graph.

    Complexity: O(N^2).
    """
    source = graph._position(key1)
    target = graph._position(key2)
    if source == target:
        return [key1]

    matrix = graph._adjacency
    n = matrix.shape[0]
    visited = np.zeros(n, dtype=bool)
    parent = np.full(n, -1, dtype=np.int64)
    visited[source] = True
    queue = deque([source])

    while queue:
        position = queue.popleft()
        for neighbour in np.flatnonzero((matrix[position] != 0) & ~visited):
            neighbour = int(neighbour)
            visited[neighbour] = True
            parent[neighbour] = position
            if neighbour == target:
                return _walk_back(graph, parent, target)
            queue.append(neighbour)

    return []


def _walk_back(graph: "Graph", parent: np.ndarray, target: int) -> List[Hashable]:
    path = deque()
    position = target
    while position >= 0:
        path.appendleft(graph._vertices[position].key)
        position = int(parent[position])
    return list(path)


def bfs_tree_edges(matrix: np.ndarray, root: int = 0) -> List[tuple]:
    """
    Breadth-first spanning tree of the vertices reachable from root.

    Returns:
        (parent_position, child_position) pairs in discovery order.
    """
    visited = np.zeros(matrix.shape[0], dtype=bool)
    visited[root] = True
    queue = deque([root])
    tree: List[tuple] = []

    while queue:
        position = queue.popleft()
        for neighbour in np.flatnonzero((matrix[position] != 0) & ~visited):
            neighbour = int(neighbour)
            visited[neighbour] = True
            tree.append((position, neighbour))
            queue.append(neighbour)

    return tree
