"""Plain-text dumps of graphs, for debugging and logs."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core import Graph


def format_graph(graph: "Graph") -> str:
    """
    Render keys, the adjacency matrix and the key -> position map.

    The first line lists keys in position order, then one matrix row per
    vertex followed by its key, then the index map.

    Example:
        >>> G = Graph()
        >>> _ = G.add_vertex_key("A").add_vertex_key("B").add_edge("A", "B")
        >>> print(format_graph(G))
        A,B
        0,1 A
        1,0 B
        {'A': 0, 'B': 1}
    """
    keys = graph.keys()
    lines = [",".join("None" if key is None else str(key) for key in keys)]
    matrix = graph._adjacency
    for position, key in enumerate(keys):
        lines.append(",".join(str(int(cell)) for cell in matrix[position]) + f" {key}")
    lines.append(repr(dict(graph._vertex_index)))
    return "\n".join(lines)
