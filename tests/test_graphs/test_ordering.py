"""Tests for topological ordering."""

import numpy as np
import pytest

from plangraph import CycleDetectedError, Graph, first_no_successor, topological_order


def _respects_edges(graph, order):
    position = {key: i for i, key in enumerate(order)}
    return all(
        position[edge.origin] < position[edge.destination] for edge in graph.edges()
    )


class TestTopologicalOrder:
    """Tests for Graph.get_keys_in_topological_order."""

    def test_dag_order(self, dag):
        """Test the order produced by repeated sink removal."""
        order = dag.get_keys_in_topological_order()
        assert order == ["E", "F", "H", "D", "A", "B", "C", "G", "I"]

    def test_every_edge_points_forward(self, dag):
        """Test that the order is a valid topological order."""
        order = topological_order(dag)
        assert sorted(order) == sorted(dag.keys())
        assert _respects_edges(dag, order)

    def test_graph_unchanged(self, dag):
        """Test that ordering works on a copy."""
        before = dag.adjacency_matrix()
        dag.get_keys_in_topological_order()
        assert dag.keys() == list("ABCDEFGHI")
        np.testing.assert_array_equal(dag.adjacency_matrix(), before)

    def test_cycle_detected(self):
        """Test that A -> B -> A is rejected and the graph left as it was."""
        G = Graph().add_vertex_key("A").add_vertex_key("B")
        G.add_edge_oneway("A", "B").add_edge_oneway("B", "A")
        before = G.adjacency_matrix()

        with pytest.raises(CycleDetectedError):
            G.get_keys_in_topological_order()

        assert G.keys() == ["A", "B"]
        np.testing.assert_array_equal(G.adjacency_matrix(), before)

    def test_cycle_closing_dag(self, dag):
        """Test that closing a loop in the DAG names the vertices on it."""
        dag.add_edge_oneway("I", "A")
        with pytest.raises(CycleDetectedError, match="cycle"):
            dag.get_keys_in_topological_order()

    def test_self_loop_is_cycle(self):
        """Test that a self loop blocks ordering."""
        G = Graph().add_vertex_key("A")
        G.add_edge_oneway("A", "A")
        with pytest.raises(CycleDetectedError):
            topological_order(G)

    def test_cycle_error_is_runtime_error(self):
        """Test that cycle errors can be caught as RuntimeError."""
        G = Graph().add_vertex_key("A").add_edge("A", "A")
        with pytest.raises(RuntimeError):
            G.get_keys_in_topological_order()

    def test_disconnected_vertices(self):
        """Test that edgeless vertices come out in reverse insertion order."""
        G = Graph()
        for key in "XYZ":
            G.add_vertex_key(key)
        order = G.get_keys_in_topological_order()
        assert order == ["Z", "Y", "X"]
        assert _respects_edges(G, order)

    def test_empty_graph(self):
        """Test ordering an empty graph."""
        assert Graph().get_keys_in_topological_order() == []


class TestFirstNoSuccessor:
    """Tests for the sink lookup."""

    def test_dag(self, dag):
        """Test that I is the only sink of the sample DAG."""
        assert dag.get_first_no_successor_vertex() == 8

    def test_first_of_many(self):
        """Test that the lowest position wins."""
        matrix = np.array([[0, 1, 0], [0, 0, 0], [0, 0, 0]])
        assert first_no_successor(matrix) == 1

    def test_none(self):
        """Test -1 when every vertex has a successor."""
        matrix = np.array([[0, 1], [1, 0]])
        assert first_no_successor(matrix) == -1

    def test_empty(self):
        """Test -1 for an empty graph."""
        assert Graph().get_first_no_successor_vertex() == -1
