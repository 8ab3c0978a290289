"""Integration tests for the graphs package within algograph."""


def test_graphs_import_from_main():
    """Test that graph types and algorithms are importable from algograph."""
    from algograph import BinaryHeap, DirectedGraph, Graph, WeightedDigraph, dijkstra, prim_mst

    assert Graph is not None
    assert DirectedGraph is not None
    assert WeightedDigraph is not None
    assert BinaryHeap is not None
    assert dijkstra is not None
    assert prim_mst is not None


def test_graphs_in_all_exports():
    """Test that graph exports are in __all__."""
    import algograph

    graph_exports = {
        'Graph', 'DefiniteGraph', 'WeightedGraph', 'MutableGraph', 'WeightedMutableGraph',
        'DirectedGraph', 'UndirectedGraph', 'WeightedDigraph',
        'bfs', 'bfs_layers', 'depth_first_search', 'chart_forest', 'topological_sort',
        'dijkstra', 'dag_shortest_path', 'prim_mst', 'BinaryHeap', 'heapsort',
        'format_forest', 'reconstruct_path',
    }

    all_exports = set(algograph.__all__)
    assert graph_exports.issubset(all_exports), "Graph exports missing from __all__"
    for name in algograph.__all__:
        assert hasattr(algograph, name)


def test_graphs_functional_integration():
    """Test a realistic routing scenario across several algorithms."""
    from algograph import (
        WeightedDigraph,
        dag_shortest_path,
        dijkstra,
        format_forest,
        is_acyclic,
        path_weight,
    )

    G = WeightedDigraph()
    G.insert_edge_weighted('start', 'A', 1.0)
    G.insert_edge_weighted('start', 'B', 4.0)
    G.insert_edge_weighted('A', 'B', 2.0)
    G.insert_edge_weighted('A', 'end', 6.0)
    G.insert_edge_weighted('B', 'end', 1.0)

    assert is_acyclic(G)

    path = dijkstra(G, 'start', 'end')
    assert path == ['start', 'A', 'B', 'end']
    assert path_weight(G, path) == 4.0
    assert dag_shortest_path(G, 'start', 'end') == path

    summary = format_forest(G)
    assert summary.startswith("forest: 4 nodes, 1 tree")


def test_undirected_network_scenario():
    """Test BFS and DFS together on an undirected network."""
    from algograph import UndirectedGraph, bfs, depth_first_search

    G = UndirectedGraph()
    for u, v in [(1, 2), (2, 3), (3, 4), (5, 6)]:
        G.insert_edge(u, v)

    assert bfs(G, 1)[4] == [1, 2, 3]
    assert 5 not in bfs(G, 1)

    roots, order, cyclic = depth_first_search(G)
    assert roots == {1, 5}
    assert sorted(order) == [1, 2, 3, 4, 5, 6]
    assert cyclic is True
