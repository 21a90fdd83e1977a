"""
Example: Ordering dependent work items

Builds a directed graph of work items where an edge X -> Y means "X must be
done before Y", prints the items in topological order, and shows the
reachability queries available on the same graph.
"""

from plangraph import CycleDetectedError, Graph


def build_graph() -> Graph:
    graph = Graph(5)
    for key in "ABCDEFGHI":
        graph.add_vertex_key(key)
    for origin, destination in [
        ("A", "B"),
        ("B", "C"),
        ("C", "G"),
        ("D", "G"),
        ("E", "F"),
        ("F", "H"),
        ("G", "I"),
        ("H", "I"),
    ]:
        graph.add_edge_oneway(origin, destination)
    return graph


def main():
    graph = build_graph()
    print(graph)
    print()

    first = graph.get_first_no_successor_vertex()
    print(f"First vertex without successors: {graph.keys()[first]}")
    print(f"Keys in topological order: {graph.get_keys_in_topological_order()}")
    print(f"Can you travel from D to I? {graph.are_connected('D', 'I')}")
    print(f"Can you travel from I to D? {graph.are_connected('I', 'D')}")
    print(f"Some path A -> I: {graph.find_path('A', 'I')}")
    print(f"Shortest path E -> I: {graph.find_the_shortest_path('E', 'I')}")

    print()
    print("Closing the loop I -> A ...")
    graph.add_edge_oneway("I", "A")
    try:
        graph.get_keys_in_topological_order()
    except CycleDetectedError as exc:
        print(f"Topological order rejected: {exc}")


if __name__ == "__main__":
    main()
