"""
Array-backed binary heap.

HeapArray is a max-heap: the root holds the key that compares greatest.
Callers wanting a min-priority queue push keys whose ordering is reversed
(see plangraph.graphs.types.EdgeWeight).

Slots past the logical size are left as they are after a poll and are never
read again; they are overwritten by later pushes.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 6.5 (Priority queues).
"""

from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar

from ..diagnostics import assert_heap_ordered, is_debug_enabled
from ..exceptions import CapacityExceededError, InvalidCapacityError, NullKeyError

K = TypeVar("K")
V = TypeVar("V")

DEFAULT_CAPACITY = 16
MAX_CAPACITY = 2**31 - 1 - 8


@dataclass
class HeapNode(Generic[K, V]):
    """Key/value pair stored in a heap slot."""

    key: K
    value: V

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


class HeapArray(Generic[K, V]):
    """
    Binary max-heap over any ordered key type, paired with opaque values.

    Attributes:
        _slots: Backing array; only the first ``_size`` slots are meaningful.
        _size: Logical number of elements.

    Complexity:
        - push: O(log n) amortized (array doubles when full)
        - poll: O(log n)
        - peek, size, is_empty: O(1)
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Initialize an empty heap.

        Args:
            capacity: Initial number of slots.

        Raises:
            InvalidCapacityError: If capacity is not positive or doubling it
                would pass MAX_CAPACITY.
        """
        if not isinstance(capacity, int) or capacity <= 0 or capacity * 2 > MAX_CAPACITY:
            raise InvalidCapacityError(
                f"Heap capacity [{capacity}] should be > 0 and <= {MAX_CAPACITY // 2}"
            )
        self._slots: List[Optional[HeapNode[K, V]]] = [None] * capacity
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        items = ",".join(str(self._slots[i]) for i in range(self._size))
        return f"{type(self).__name__}([{items}])"

    @property
    def capacity(self) -> int:
        """Number of allocated slots."""
        return len(self._slots)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size <= 0

    def peek(self) -> Optional[HeapNode[K, V]]:
        """Return the root node without removing it, or None if empty."""
        if self.is_empty():
            return None
        return self._slots[0]

    def push(self, key: K, value: V) -> bool:
        """
        Insert a key/value pair.

        Args:
            key: Priority key; must support ``>`` against other keys.
            value: Payload.

        Returns:
            True once the element is stored.

        Raises:
            NullKeyError: If key or value is None.
            CapacityExceededError: If the heap cannot grow any further.
        """
        if key is None or value is None:
            raise NullKeyError("Null keys and values are not allowed.")
        self._ensure_capacity(self._size + 1)

        self._slots[self._size] = HeapNode(key, value)
        self._size += 1
        self._bubble_up(self._size - 1)

        if is_debug_enabled():
            assert_heap_ordered(self)
        return True

    def poll(self) -> Optional[HeapNode[K, V]]:
        """
        Remove and return the root node.

        The last element takes the root slot and sinks until both of its
        children compare lower or equal.

        Returns:
            The node with the greatest key, or None if the heap is empty.
        """
        if self.is_empty():
            return None

        root = self._slots[0]
        self._size -= 1
        self._slots[0] = self._slots[self._size]
        if not self.is_empty():
            self._bubble_down(0)

        if is_debug_enabled():
            assert_heap_ordered(self)
        return root

    def poll_key(self) -> Optional[K]:
        node = self.poll()
        return None if node is None else node.key

    def poll_value(self) -> Optional[V]:
        node = self.poll()
        return None if node is None else node.value

    def format_structured(self, include_keys: bool = True, include_values: bool = False) -> str:
        """
        Render the heap one tree level per line.

        Args:
            include_keys: Print node keys.
            include_values: Print node values (``key=value`` with both).

        Returns:
            Multi-line string, root first.

        Example:
            >>> heap = HeapArray(4)
            >>> for k in (5, 1, 10, 3):
            ...     _ = heap.push(k, str(k))
            >>> print(heap.format_structured())
            10
            3 5
            1
        """
        rows: List[str] = []
        start = 0
        width = 1
        while start < self._size:
            cells = []
            for node in self._slots[start:min(start + width, self._size)]:
                if include_keys and include_values:
                    cells.append(f"{node.key}={node.value}")
                elif include_keys:
                    cells.append(str(node.key))
                elif include_values:
                    cells.append(str(node.value))
            rows.append(" ".join(cells))
            start += width
            width *= 2
        return "\n".join(rows)

    def _ensure_capacity(self, target: int) -> None:
        if target <= 0 or target * 2 > MAX_CAPACITY:
            raise CapacityExceededError(
                f"Target capacity [{target}] should be > 0 and <= {MAX_CAPACITY // 2}"
            )
        if target > len(self._slots):
            # Expand to double of what is needed next
            self._slots.extend([None] * (target * 2 - len(self._slots)))

    def _check_position(self, position: int) -> None:
        if position < 0 or position >= self._size:
            raise IndexError(
                f"Node index [{position}] out of bounds, should be >=0 and <{self._size}"
            )

    def _bubble_up(self, position: int) -> None:
        self._check_position(position)
        bottom = self._slots[position]
        while position > 0:
            parent = (position - 1) // 2
            if bottom.key > self._slots[parent].key:
                self._slots[position] = self._slots[parent]
                position = parent
            else:
                break
        self._slots[position] = bottom

    def _bubble_down(self, position: int) -> None:
        self._check_position(position)
        top = self._slots[position]
        while position < self._size // 2:
            bigger = 2 * position + 1
            right = bigger + 1
            if right < self._size and self._slots[right].key > self._slots[bigger].key:
                bigger = right
            if self._slots[bigger].key > top.key:
                self._slots[position] = self._slots[bigger]
                position = bigger
            else:
                break
        self._slots[position] = top
