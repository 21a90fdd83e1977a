"""
Graph package for plangraph.

This package provides an adjacency-matrix graph engine:
- Graph data structures (Graph, WeightedGraph) and value types (Vertex, Edge)
- Traversal (iterative DFS/BFS, any path, shortest path, connectivity table)
- Transitive closure (Warshall)
- Topological ordering
- Spanning trees (breadth-first tree, Prim's minimum spanning tree)

Neighbours are always scanned in vertex insertion order, so results are
deterministic for a given construction order.
"""

from .closure import transitive_closure
from .core import (
    DEFAULT_MAX_SIZE,
    MAXIMUM_VERTICES_SIZE,
    Graph,
    WeightedGraph,
)
from .mst import bfs_spanning_tree, prim_mst
from .ordering import first_no_successor, topological_order
from .render import format_graph
from .traversal import bfs_path, connectivity_table, dfs_path
from .types import Edge, EdgeWeight, Vertex

__all__ = [
    "Graph",
    "WeightedGraph",
    "Vertex",
    "Edge",
    "EdgeWeight",
    "DEFAULT_MAX_SIZE",
    "MAXIMUM_VERTICES_SIZE",
    "transitive_closure",
    "topological_order",
    "first_no_successor",
    "connectivity_table",
    "dfs_path",
    "bfs_path",
    "bfs_spanning_tree",
    "prim_mst",
    "format_graph",
]

# Example usage:
# from plangraph.graphs import Edge, WeightedGraph
#
# G = WeightedGraph()
# G.add_vertex_key("A").add_vertex_key("B").add_vertex_key("C")
# G.add_edge(Edge("A", "B", True, 1)).add_edge(Edge("B", "C", True, 2))
# tree = G.get_min_spanning_tree()
# tree.total_weight()  # 3
