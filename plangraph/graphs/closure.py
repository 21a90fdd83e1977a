"""
Transitive closure: Warshall's algorithm.

References:
    - Warshall, S. "A theorem on Boolean matrices", JACM 9(1), 1962.
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Transitive closure of a directed graph).
"""

import numpy as np


def transitive_closure(matrix: np.ndarray) -> np.ndarray:
    """
    Compute all-pairs reachability.

    ``closure[i, j]`` is True when j can be reached from i through one or
    more edges. A vertex reaches itself only through a cycle (or self loop).
    The input is never modified.

    Args:
        matrix: N x N adjacency matrix (non-zero means adjacent).

    Returns:
        Boolean N x N matrix.

    Complexity: O(N^3) (one vectorized N x N update per intermediate vertex).

    Example:
        >>> m = np.array([[0, 1, 0], [0, 0, 1], [0, 0, 0]])
        >>> transitive_closure(m).astype(int)
        array([[0, 1, 1],
               [0, 0, 1],
               [0, 0, 0]])
    """
    reach = np.asarray(matrix) != 0
    for k in range(reach.shape[0]):
        # i -> k and k -> j gives i -> j
        reach |= np.outer(reach[:, k], reach[k, :])
    return reach
