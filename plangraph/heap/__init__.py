"""
Priority queues for plangraph.

- HeapArray: array-backed binary max-heap with doubling growth
- WeightedEdgePriorityQueue: edge queue with per-destination decrease-key,
  used by Prim's minimum spanning tree
"""

from .array import DEFAULT_CAPACITY, MAX_CAPACITY, HeapArray, HeapNode
from .edge_queue import WeightedEdgePriorityQueue

__all__ = [
    "HeapArray",
    "HeapNode",
    "WeightedEdgePriorityQueue",
    "DEFAULT_CAPACITY",
    "MAX_CAPACITY",
]
