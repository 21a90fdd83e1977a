"""
Core graph data structures.

Provides Graph (unweighted) and WeightedGraph classes with adjacency-matrix
representations. Vertices live in a single list; a key -> position map and a
square numpy buffer are kept in lock-step with it. The only place that
renumbers positions is Graph._compact, called by remove_vertex.

Algorithms keep their visited state in per-call bitsets, so queries never
leave marks on the graph and read-only queries may run concurrently.
Mutations are not thread-safe.
"""

from numbers import Integral
from typing import Any, Dict, Hashable, Iterator, List, Optional

import numpy as np

from ..diagnostics import assert_graph_consistent, is_debug_enabled
from ..exceptions import (
    DuplicateKeyError,
    InvalidCapacityError,
    NullKeyError,
    UnknownKeyError,
)
from ..logging import get_logger
from . import closure, mst, ordering, render, traversal
from .types import Edge, EdgeWeight, Vertex

logger = get_logger(__name__)

# Matrix is N*N, keep N*N below the 32-bit signed integer range.
MAXIMUM_VERTICES_SIZE = 23170

DEFAULT_MAX_SIZE = 8

NOT_ADJACENT = 0

DEFAULT_ADJACENT = 1


class Graph:
    """
    Unweighted graph with adjacency-matrix representation.

    Edges are directed cells of the matrix; a bidirectional edge sets both
    cells. Vertices keep their insertion order, which is also the order
    every algorithm scans neighbours in.

    Attributes:
        capacity_hint: Expected maximum number of vertices; the matrix buffer
            is preallocated to this size and grows to fit beyond it.

    Complexity:
        - add_vertex: O(1) within the capacity hint, O(N^2) past it
        - remove_vertex: O(N^2)
        - add_edge / remove_edge: O(1)
        - are_connected: O(N^3)
        - find_path / find_the_shortest_path / get_connectivity_table: O(N^2) per search
    """

    def __init__(self, capacity_hint: int = DEFAULT_MAX_SIZE):
        """
        Initialize an empty graph.

        Args:
            capacity_hint: Expected maximum amount of vertices.

        Raises:
            InvalidCapacityError: If capacity_hint is not in (0, 23170].
        """
        if (
            not isinstance(capacity_hint, Integral)
            or capacity_hint <= 0
            or capacity_hint > MAXIMUM_VERTICES_SIZE
        ):
            raise InvalidCapacityError(
                "Maximum expected amount of vertices should be >0 and <="
                f"{MAXIMUM_VERTICES_SIZE}, got {capacity_hint!r}"
            )
        self.capacity_hint = int(capacity_hint)
        self._vertices: List[Vertex] = []
        self._vertex_index: Dict[Hashable, int] = {}
        self._matrix = np.zeros((self.capacity_hint, self.capacity_hint), dtype=np.int64)

    # ------------------------------------------------------------------
    # Python protocol

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, key: Hashable) -> bool:
        return self.contains_vertex_key(key)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={len(self)}, "
            f"edges={len(self.edges())}, capacity_hint={self.capacity_hint})"
        )

    def __str__(self) -> str:
        return render.format_graph(self)

    def __copy__(self) -> "Graph":
        return self.clone()

    # ------------------------------------------------------------------
    # Read-only accessors

    @property
    def _adjacency(self) -> np.ndarray:
        """View of the active N x N window of the matrix buffer."""
        n = len(self._vertices)
        return self._matrix[:n, :n]

    def is_empty(self) -> bool:
        return not self._vertices

    def size(self) -> int:
        return len(self._vertices)

    def contains_vertex_key(self, key: Hashable) -> bool:
        return key is not None and key in self._vertex_index

    def keys(self) -> List[Hashable]:
        """Return vertex keys in position order."""
        return [vertex.key for vertex in self._vertices]

    def get_vertex(self, key: Hashable) -> Vertex:
        return self._vertices[self._position(key)]

    def get_vertex_value(self, key: Hashable) -> Any:
        return self.get_vertex(key).value

    def adjacency(self, key1: Hashable, key2: Hashable) -> int:
        """Return the matrix cell for key1 -> key2 (0 means not adjacent)."""
        return int(self._matrix[self._position(key1), self._position(key2)])

    def adjacency_matrix(self) -> np.ndarray:
        """Return a copy of the N x N adjacency matrix in position order."""
        return self._adjacency.copy()

    def neighbors(self, key: Hashable) -> List[Hashable]:
        """Return keys reachable from key by one edge, in position order."""
        row = self._adjacency[self._position(key)]
        return [self._vertices[int(i)].key for i in np.flatnonzero(row)]

    def edges(self) -> List[Edge]:
        """
        Return every stored edge.

        A pair of cells holding the same value is reported once, as a
        bidirectional edge from the lower position to the higher one.
        """
        matrix = self._adjacency
        result: List[Edge] = []
        for i, j in zip(*np.nonzero(matrix)):
            i, j = int(i), int(j)
            value = int(matrix[i, j])
            mirrored = i != j and int(matrix[j, i]) == value
            if mirrored and i > j:
                continue
            result.append(
                Edge(
                    self._vertices[i].key,
                    self._vertices[j].key,
                    mirrored,
                    self._edge_weight(value),
                )
            )
        return result

    def _edge_weight(self, value: int) -> Optional[int]:
        return None

    # ------------------------------------------------------------------
    # Mutation

    def add_vertex(self, key: Hashable, value: Any = None) -> "Graph":
        """
        Add a disconnected vertex.

        Args:
            key: Unique vertex key.
            value: Payload associated with the vertex.

        Returns:
            The graph itself, for chaining.

        Raises:
            NullKeyError: If key is None.
            DuplicateKeyError: If key is already part of the graph.
        """
        if key is None:
            raise NullKeyError("Key representing vertex cannot be null.")
        if self.contains_vertex_key(key):
            raise DuplicateKeyError(key)

        position = len(self._vertices)
        if position + 1 > self._matrix.shape[0]:
            self._resize(max(position + 1, self.capacity_hint))

        self._vertices.append(Vertex(key, value))
        self._vertex_index[key] = position
        logger.debug("Added vertex %r at position %d", key, position)

        if is_debug_enabled():
            assert_graph_consistent(self)
        return self

    def add_vertex_key(self, key: Hashable) -> "Graph":
        return self.add_vertex(key, None)

    def remove_vertex(self, key: Hashable) -> "Graph":
        """
        Remove a vertex together with every edge touching it.

        Vertices positioned after the removed one move up by one.

        Raises:
            NullKeyError: If key is None.
            UnknownKeyError: If key is not part of the graph.
        """
        if key is None:
            raise NullKeyError("Key representing vertex cannot be null.")
        self._compact(self._position(key))
        logger.debug("Removed vertex %r", key)

        if is_debug_enabled():
            assert_graph_consistent(self)
        return self

    def add_edge(self, key1: Hashable, key2: Hashable, bidirectional: bool = True) -> "Graph":
        """
        Connect key1 to key2 (and key2 to key1 when bidirectional).

        Raises:
            UnknownKeyError: If either key is not part of the graph.
        """
        self._update_adjacency(key1, key2, DEFAULT_ADJACENT, bidirectional)
        return self

    def add_edge_oneway(self, key1: Hashable, key2: Hashable) -> "Graph":
        return self.add_edge(key1, key2, False)

    def remove_edge(self, key1: Hashable, key2: Hashable, bidirectional: bool = True) -> "Graph":
        """
        Disconnect key1 from key2 (and key2 from key1 when bidirectional).

        Raises:
            UnknownKeyError: If either key is not part of the graph.
        """
        self._update_adjacency(key1, key2, NOT_ADJACENT, bidirectional)
        return self

    def clone(self) -> "Graph":
        """
        Return a structurally independent copy.

        Vertex records, the index map and the matrix are rebuilt; keys and
        payload objects are shared with this graph.
        """
        copy = type(self)(self.capacity_hint)
        n = len(self._vertices)
        if n > copy._matrix.shape[0]:
            copy._resize(n)
        for vertex in self._vertices:
            copy._vertex_index[vertex.key] = len(copy._vertices)
            copy._vertices.append(Vertex(vertex.key, vertex.value))
        copy._matrix[:n, :n] = self._adjacency
        return copy

    # ------------------------------------------------------------------
    # Algorithms

    def are_connected(self, source: Hashable, destination: Hashable) -> bool:
        """
        Return True if destination is reachable from source.

        The transitive closure is recomputed on every call (Warshall,
        O(N^3)), so the answer always reflects the current edges.

        Raises:
            UnknownKeyError: If either key is not part of the graph.
        """
        i = self._position(source)
        j = self._position(destination)
        return bool(closure.transitive_closure(self._adjacency)[i, j])

    def get_transitive_closure_table(self) -> np.ndarray:
        """Return the boolean N x N reachability matrix in position order."""
        return closure.transitive_closure(self._adjacency)

    def get_keys_in_topological_order(self) -> List[Hashable]:
        return ordering.topological_order(self)

    def get_first_no_successor_vertex(self) -> int:
        return ordering.first_no_successor(self._adjacency)

    def get_connectivity_table(self) -> List[List[Hashable]]:
        return traversal.connectivity_table(self)

    def find_path(self, key1: Hashable, key2: Hashable) -> List[Hashable]:
        """
        Return some path key1 ... key2, or [] if there is none.

        The depth-first search follows incoming edges back from key2, so on
        directed graphs each consecutive pair in the result is an edge pointing
        towards key2.
        A path from a key to itself is [key].
        """
        return traversal.dfs_path(self, key1, key2)

    def find_the_shortest_path(self, key1: Hashable, key2: Hashable) -> List[Hashable]:
        """Return a path with the fewest edges, [] if none, [key1] if key1 == key2."""
        return traversal.bfs_path(self, key1, key2)

    def get_min_spanning_tree(self) -> "Graph":
        """
        Return a spanning tree as a new graph.

        Every edge of an unweighted graph weighs the same, so the
        breadth-first tree rooted at the first vertex is minimal. A graph
        with unreachable vertices raises instead of yielding the tree of the
        first vertex's component.

        Raises:
            DisconnectedGraphError: If some vertex cannot be reached.
        """
        return mst.bfs_spanning_tree(self)

    # ------------------------------------------------------------------
    # Internals

    def _position(self, key: Hashable) -> int:
        if not self.contains_vertex_key(key):
            raise UnknownKeyError(key)
        return self._vertex_index[key]

    def _update_adjacency(
        self, key1: Hashable, key2: Hashable, value: int, bidirectional: bool
    ) -> None:
        index1 = self._position(key1)
        index2 = self._position(key2)
        self._matrix[index1, index2] = value
        if bidirectional:
            self._matrix[index2, index1] = value

        if is_debug_enabled():
            assert_graph_consistent(self)

    def _resize(self, dimension: int) -> None:
        n = len(self._vertices)
        matrix = np.zeros((dimension, dimension), dtype=np.int64)
        matrix[:n, :n] = self._matrix[:n, :n]
        self._matrix = matrix
        logger.debug("Resized adjacency buffer to %d x %d", dimension, dimension)

    def _compact(self, position: int) -> None:
        n = len(self._vertices)
        kept = np.delete(np.delete(self._adjacency, position, axis=0), position, axis=1)
        self._matrix[: n - 1, : n - 1] = kept
        self._matrix[n - 1, :] = NOT_ADJACENT
        self._matrix[:, n - 1] = NOT_ADJACENT

        removed = self._vertices.pop(position)
        del self._vertex_index[removed.key]
        for i in range(position, len(self._vertices)):
            self._vertex_index[self._vertices[i].key] = i


class WeightedGraph(Graph):
    """
    Graph whose matrix cells hold positive integer edge weights.

    0 still means "no edge". The minimum spanning tree is built with Prim's
    algorithm.
    """

    def add_edge(
        self,
        key1: Any,
        key2: Optional[Hashable] = None,
        bidirectional: bool = True,
        weight: Optional[Any] = DEFAULT_ADJACENT,
    ) -> "WeightedGraph":
        """
        Add a weighted edge.

        Either pass an Edge as the only argument, or two keys plus weight.
        A weight of 0 (or an Edge without weight) removes the edge.

        Args:
            key1: Origin key, or an Edge.
            key2: Destination key (ignored when key1 is an Edge).
            bidirectional: Also set destination -> origin.
            weight: Non-negative integer or EdgeWeight.

        Returns:
            The graph itself, for chaining.

        Raises:
            NullKeyError: If the Edge has a None origin or destination.
            UnknownKeyError: If either key is not part of the graph.
            ValueError: If the weight is not a non-negative integer.

        Example:
            >>> G = WeightedGraph()
            >>> _ = G.add_vertex_key("A").add_vertex_key("B")
            >>> _ = G.add_edge(Edge("A", "B", True, 6))
            >>> G.adjacency("B", "A")
            6
        """
        if isinstance(key1, Edge):
            edge = key1
            if edge.origin is None:
                raise NullKeyError("Edge object should contain not null origin vertex key.")
            if edge.destination is None:
                raise NullKeyError("Edge object should contain not null destination vertex key.")
            key1, key2 = edge.origin, edge.destination
            bidirectional = edge.bidirectional
            weight = edge.weight

        self._update_adjacency(key1, key2, _weight_value(weight), bidirectional)
        return self

    def get_edge(self, key1: Hashable, key2: Hashable) -> Optional[Edge]:
        """Return the edge key1 -> key2, or None if the cell is empty."""
        value = self.adjacency(key1, key2)
        if value == NOT_ADJACENT:
            return None
        return Edge(key1, key2, self.adjacency(key2, key1) == value, value)

    def total_weight(self) -> int:
        return sum(edge.weight for edge in self.edges())

    def get_min_spanning_tree(self) -> "WeightedGraph":
        """
        Return the minimum spanning tree as a new weighted graph.

        Raises:
            DisconnectedGraphError: If some vertex cannot be reached.
        """
        return mst.prim_mst(self)

    def _edge_weight(self, value: int) -> Optional[int]:
        return value


def _weight_value(weight: Any) -> int:
    if weight is None:
        return NOT_ADJACENT
    if isinstance(weight, EdgeWeight):
        weight = weight.weight
    if isinstance(weight, bool) or not isinstance(weight, Integral):
        raise ValueError(f"Edge weight should be an integer, got {weight!r}")
    if weight < 0:
        raise ValueError(f"Edge weight should be >= 0, got {weight}")
    return int(weight)
