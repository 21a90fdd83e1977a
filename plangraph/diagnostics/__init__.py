"""Diagnostics and debugging utilities for plangraph."""

from .core import (
    assert_graph_consistent,
    assert_heap_ordered,
    is_heap_ordered,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_graph_consistent",
    "assert_heap_ordered",
    "is_heap_ordered",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
