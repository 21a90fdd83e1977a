"""
Priority queue of candidate edges used by Prim's algorithm.

Keeps at most one pending edge per destination vertex, always the lightest
one seen so far. Decrease-key is emulated by removing the stale entry (found
by linear scan) and pushing the improved one.
"""

from typing import Dict, Hashable, Optional

from ..diagnostics import assert_heap_ordered, is_debug_enabled
from ..exceptions import NullKeyError
from ..graphs.types import Edge, EdgeWeight
from .array import DEFAULT_CAPACITY, HeapArray, HeapNode


class WeightedEdgePriorityQueue(HeapArray[EdgeWeight, Edge]):
    """
    Min-priority queue of edges keyed by EdgeWeight.

    Attributes:
        weight_by_destination: Best pending weight per destination key.

    Complexity:
        - push: O(n) when an entry is replaced, O(log n) otherwise
        - poll: O(log n)
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        super().__init__(capacity)
        self.weight_by_destination: Dict[Hashable, EdgeWeight] = {}

    def pending_weight(self, destination: Hashable) -> Optional[EdgeWeight]:
        """Return the weight of the pending edge into destination, if any."""
        return self.weight_by_destination.get(destination)

    def push(self, weight: EdgeWeight, edge: Edge) -> bool:
        """
        Offer a candidate edge.

        Args:
            weight: Priority of the edge (lighter compares greater).
            edge: Candidate edge; only its destination is used for tracking.

        Returns:
            True if the edge is now pending, False if an equal or lighter
            edge into the same destination was already pending.

        Raises:
            NullKeyError: If weight or edge is None.
        """
        if weight is None:
            raise NullKeyError("Edge weight should be specified.")
        if edge is None:
            raise NullKeyError("Edge should be specified.")

        destination = edge.destination
        existing = self.weight_by_destination.get(destination)
        if existing is not None:
            if not weight > existing:
                return False
            self._remove_destination(destination)

        self.weight_by_destination[destination] = weight
        return super().push(weight, edge)

    def poll(self) -> Optional[HeapNode[EdgeWeight, Edge]]:
        node = super().poll()
        if node is not None:
            self.weight_by_destination.pop(node.value.destination, None)
        return node

    def _remove_destination(self, destination: Hashable) -> None:
        for position in range(self._size):
            if self._slots[position].value.destination != destination:
                continue
            self._size -= 1
            if position < self._size:
                moved = self._slots[self._size]
                self._slots[position] = moved
                parent = (position - 1) // 2
                # The last element may outrank the parent of the freed slot
                if position > 0 and moved.key > self._slots[parent].key:
                    self._bubble_up(position)
                else:
                    self._bubble_down(position)
            break

        if is_debug_enabled():
            assert_heap_ordered(self)
