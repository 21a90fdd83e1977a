"""Error types raised by plangraph.

Every error derives from :class:`PlanGraphError` and from the built-in
exception that describes the same situation, so callers can catch either.
"""

from __future__ import annotations

from typing import Hashable


class PlanGraphError(Exception):
    """Base class for all plangraph errors."""


class NullKeyError(PlanGraphError, ValueError):
    """A vertex key (or heap key/value) was ``None``."""


class DuplicateKeyError(PlanGraphError, ValueError):
    """A vertex with the same key is already part of the graph."""

    def __init__(self, key: Hashable):
        super().__init__(f"Vertex with key {key!r} is already part of the graph.")
        self.key = key


class UnknownKeyError(PlanGraphError, KeyError):
    """A vertex key is not part of the graph."""

    def __init__(self, key: Hashable):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Vertex with key {self.key!r} is not part of the graph."


class InvalidCapacityError(PlanGraphError, ValueError):
    """A graph or heap was constructed with an unusable capacity."""


class CapacityExceededError(PlanGraphError, OverflowError):
    """A heap would have to grow past its hard ceiling."""


class CycleDetectedError(PlanGraphError, RuntimeError):
    """A directed acyclic graph was required but a cycle was found."""


class DisconnectedGraphError(PlanGraphError, RuntimeError):
    """A spanning tree was requested for a graph that is not connected."""


__all__ = [
    "PlanGraphError",
    "NullKeyError",
    "DuplicateKeyError",
    "UnknownKeyError",
    "InvalidCapacityError",
    "CapacityExceededError",
    "CycleDetectedError",
    "DisconnectedGraphError",
]
