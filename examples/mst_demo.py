"""
Example: Minimum spanning tree of a weighted graph

Builds a six-vertex undirected graph, prints its adjacency matrix, then
builds the minimum spanning tree with Prim's algorithm.
"""

from plangraph import Edge, WeightedGraph


def build_graph() -> WeightedGraph:
    graph = WeightedGraph(10)
    for key in "ABCDEF":
        graph.add_vertex_key(key)

    weighted_links = [
        ("A", "B", 6),
        ("A", "D", 4),
        ("B", "D", 7),
        ("B", "E", 7),
        ("B", "C", 10),
        ("C", "D", 8),
        ("C", "E", 5),
        ("C", "F", 6),
        ("D", "E", 12),
        ("E", "F", 7),
    ]
    for origin, destination, weight in weighted_links:
        graph.add_edge(Edge(origin, destination, True, weight))
    return graph


def main():
    graph = build_graph()
    print("=" * 60)
    print("Weighted graph")
    print("=" * 60)
    print(graph)

    tree = graph.get_min_spanning_tree()
    print()
    print("=" * 60)
    print("Minimum spanning tree")
    print("=" * 60)
    print(tree)
    for edge in tree.edges():
        print(f"  {edge}")
    print(f"Total weight: {tree.total_weight()}")


if __name__ == "__main__":
    main()
