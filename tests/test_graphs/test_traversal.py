"""Tests for graph traversal algorithms."""

import numpy as np
import pytest

from plangraph import (
    Graph,
    UnknownKeyError,
    bfs_path,
    connectivity_table,
    debug_context,
    dfs_path,
)
from plangraph.graphs.traversal import bfs_tree_edges, next_unvisited, reachable_positions


class TestConnectivityTable:
    """Tests for the per-vertex reachability table."""

    def test_undirected(self, undirected_graph):
        """Test DFS discovery order in an undirected graph."""
        table = undirected_graph.get_connectivity_table()

        assert len(table) == 7
        assert table[0] == ["A", "C", "B", "E", "F", "D", "G"]
        assert table[5] == ["F", "E", "A", "C", "B", "D", "G"]
        assert all(sorted(row) == list("ABCDEFG") for row in table)

    def test_directed(self, dag):
        """Test that only successors are reachable in a directed graph."""
        table = connectivity_table(dag)

        assert table[0] == ["A", "B", "C", "G", "I"]
        assert table[3] == ["D", "G", "I"]
        assert table[8] == ["I"]

    def test_empty_graph(self):
        """Test the table of an empty graph."""
        assert Graph().get_connectivity_table() == []

    def test_repeated_calls_identical(self, dag):
        """Test that no traversal state leaks between calls."""
        assert dag.get_connectivity_table() == dag.get_connectivity_table()


class TestFindPath:
    """Tests for depth-first path finding."""

    def test_undirected_first_found_path(self, undirected_graph):
        """Test that DFS returns the first path found, not the shortest."""
        path = undirected_graph.find_path("F", "D")
        assert path == ["F", "E", "B", "C", "A", "D"]

    def test_directed_path(self, dag):
        """Test a path that follows edge directions."""
        assert dag.find_path("A", "I") == ["A", "B", "C", "G", "I"]

    def test_backtracking(self, dag):
        """Test that dead ends are popped off the path."""
        assert dfs_path(dag, "D", "I") == ["D", "G", "I"]

    def test_no_path(self, dag):
        """Test unreachable destinations."""
        assert dag.find_path("I", "A") == []
        assert dag.find_path("A", "E") == []

    def test_follows_edge_direction(self):
        """Test that a single one-way edge is only a path in its direction."""
        G = Graph().add_vertex_key("A").add_vertex_key("B").add_edge_oneway("A", "B")
        assert G.find_path("A", "B") == ["A", "B"]
        assert G.find_path("B", "A") == []

    def test_same_key(self, dag):
        """Test a path from a vertex to itself."""
        assert dag.find_path("C", "C") == ["C"]

    def test_unknown_key(self, dag):
        """Test that both keys must exist."""
        with pytest.raises(UnknownKeyError):
            dag.find_path("A", "Z")
        with pytest.raises(UnknownKeyError):
            dag.find_path("Z", "A")


class TestFindShortestPath:
    """Tests for breadth-first path finding."""

    def test_undirected_shortest(self, undirected_graph):
        """Test BFS finds the path with fewest edges."""
        assert undirected_graph.find_the_shortest_path("F", "D") == ["F", "E", "A", "D"]

    def test_directed_shortest(self, dag):
        """Test BFS on a directed graph."""
        assert dag.find_the_shortest_path("E", "I") == ["E", "F", "H", "I"]

    def test_shortcut_preferred(self):
        """Test that a direct edge beats a longer chain."""
        G = Graph()
        for key in "ABCD":
            G.add_vertex_key(key)
        G.add_edge_oneway("A", "B").add_edge_oneway("B", "C").add_edge_oneway("C", "D")
        G.add_edge_oneway("A", "D")

        assert bfs_path(G, "A", "D") == ["A", "D"]

    def test_no_path(self, dag):
        """Test unreachable destinations."""
        assert dag.find_the_shortest_path("I", "A") == []

    def test_same_key(self, dag):
        """Test a path from a vertex to itself."""
        assert dag.find_the_shortest_path("I", "I") == ["I"]

    def test_paths_agree_on_chains(self, dag):
        """Test that both searches agree where only one path exists."""
        assert dag.find_path("E", "I") == dag.find_the_shortest_path("E", "I")


class TestHelpers:
    """Tests for position-level helpers."""

    def test_next_unvisited(self):
        """Test that the first adjacent unvisited position is returned."""
        cells = np.array([0, 1, 1, 0])
        visited = np.array([False, True, False, False])
        assert next_unvisited(cells, visited) == 2
        visited[2] = True
        assert next_unvisited(cells, visited) == -1

    def test_reachable_positions(self):
        """Test DFS over a raw matrix."""
        matrix = np.array([[0, 1, 0], [0, 0, 1], [0, 0, 0]])
        assert reachable_positions(matrix, 0) == [0, 1, 2]
        assert reachable_positions(matrix, 2) == [2]

    def test_bfs_tree_edges(self):
        """Test breadth-first tree over a raw matrix."""
        matrix = np.array(
            [
                [0, 1, 1, 0],
                [1, 0, 0, 1],
                [1, 0, 0, 1],
                [0, 1, 1, 0],
            ]
        )
        assert bfs_tree_edges(matrix) == [(0, 1), (0, 2), (1, 3)]

    def test_large_chain_no_recursion_limit(self):
        """Test that deep graphs do not hit the recursion limit."""
        n = 1500
        G = Graph(n)
        with debug_context(False):
            for key in range(n):
                G.add_vertex_key(key)
            for key in range(n - 1):
                G.add_edge_oneway(key, key + 1)

        path = G.find_path(0, n - 1)
        assert len(path) == n
        assert path[0] == 0 and path[-1] == n - 1
