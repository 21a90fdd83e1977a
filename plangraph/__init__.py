"""plangraph - an adjacency-matrix graph engine with ordering, path finding and spanning trees."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_graph_consistent,
    assert_heap_ordered,
    debug_context,
    is_debug_enabled,
    is_heap_ordered,
    set_debug_enabled,
)

# Errors
from .exceptions import (
    CapacityExceededError,
    CycleDetectedError,
    DisconnectedGraphError,
    DuplicateKeyError,
    InvalidCapacityError,
    NullKeyError,
    PlanGraphError,
    UnknownKeyError,
)

# Graphs
from .graphs import (
    DEFAULT_MAX_SIZE,
    MAXIMUM_VERTICES_SIZE,
    Edge,
    EdgeWeight,
    Graph,
    Vertex,
    WeightedGraph,
    bfs_path,
    bfs_spanning_tree,
    connectivity_table,
    dfs_path,
    first_no_successor,
    format_graph,
    prim_mst,
    topological_order,
    transitive_closure,
)

# Priority queues
from .heap import HeapArray, HeapNode, WeightedEdgePriorityQueue

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
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
    # Priority queues
    "HeapArray",
    "HeapNode",
    "WeightedEdgePriorityQueue",
    # Errors
    "PlanGraphError",
    "NullKeyError",
    "DuplicateKeyError",
    "UnknownKeyError",
    "InvalidCapacityError",
    "CapacityExceededError",
    "CycleDetectedError",
    "DisconnectedGraphError",
    # Diagnostics
    "assert_graph_consistent",
    "assert_heap_ordered",
    "is_heap_ordered",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
