"""Switch for the structural self-checks run after graph and heap mutations.

With debug mode on, every ``Graph`` mutation (``add_vertex``,
``remove_vertex`` and its ``_compact`` step, edge updates) is followed by
``assert_graph_consistent``, and every ``HeapArray`` push or poll, as well as
the stale-entry removal of ``WeightedEdgePriorityQueue``, by
``assert_heap_ordered``. The checks cost O(N^2) per graph mutation, so the
switch is off unless ``PLANGRAPH_DEBUG`` says otherwise.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

_DEBUG_ENV_VAR = "PLANGRAPH_DEBUG"

_ENABLED_VALUES = ("1", "true", "yes", "on")


def _flag_enabled(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _ENABLED_VALUES


_debug_enabled: bool = _flag_enabled(os.getenv(_DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """
    Return whether mutations currently re-check graph and heap invariants.

    Returns
    -------
    bool
        True while ``assert_graph_consistent`` / ``assert_heap_ordered`` run
        after each mutation.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn the post-mutation invariant checks on or off for the whole process.

    Parameters
    ----------
    enabled:
        New state; overrides whatever ``PLANGRAPH_DEBUG`` selected at import.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Run a block with the invariant checks switched to ``enabled``.

    The previous state is restored on exit, also when the block raises.

    Parameters
    ----------
    enabled:
        State of the checks inside the block.

    Example
    -------
    >>> with debug_context(True):
    ...     graph.remove_vertex("A")  # index map and buffer re-checked
    """
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = previous
