"""
Value types shared by the graph containers and the priority queues.

Vertex holds a key and an opaque payload, Edge describes a (possibly
bidirectional, possibly weighted) connection between two keys, and
EdgeWeight wraps an integer weight so that a lighter edge compares as the
greater one, which turns the max-heap in plangraph.heap into a min-priority
queue by weight.
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Hashable, Optional


@dataclass
class Vertex:
    """
    Graph node record.

    Attributes:
        key: Unique, hashable, non-None identifier within one graph.
        value: Opaque caller data associated with the vertex.
    """

    key: Hashable
    value: Any = None

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


@dataclass
class Edge:
    """
    Connection between two vertex keys.

    Attributes:
        origin: Key of the vertex the edge leaves.
        destination: Key of the vertex the edge enters.
        bidirectional: If True, the edge also runs destination -> origin.
        weight: Optional weight (int or EdgeWeight); None on unweighted edges.
    """

    origin: Hashable
    destination: Hashable
    bidirectional: bool = False
    weight: Optional[Any] = None

    def __str__(self) -> str:
        arrow = "<->" if self.bidirectional else "->"
        return f"{self.origin}{arrow}{self.destination}={self.weight}"


@total_ordering
@dataclass(frozen=True)
class EdgeWeight:
    """
    Integer edge weight ordered in reverse.

    ``EdgeWeight(3) > EdgeWeight(5)`` holds, so the lightest edge is the
    largest key of a max-heap.
    """

    weight: int

    def __lt__(self, other: "EdgeWeight") -> bool:
        if not isinstance(other, EdgeWeight):
            return NotImplemented
        return self.weight > other.weight

    def __int__(self) -> int:
        return self.weight

    def __str__(self) -> str:
        return str(self.weight)
