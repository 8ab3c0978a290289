"""Tests for shortest path algorithms."""

from fractions import Fraction

import pytest

from algograph.graphs import (
    WeightedDigraph,
    dag_shortest_path,
    dijkstra,
    path_weight,
)


def _layered_dag(layers):
    """Build a DAG where node (n, m) links to every node of layer n + 1."""
    G = WeightedDigraph()
    for n in range(layers):
        for m in range(n + 1):
            G.insert_node((n, m))
    for n in range(layers - 1):
        for m in range(n + 1):
            for b in range(n + 2):
                G.insert_edge_weighted((n, m), (n + 1, b), (m + 1) * (b + 1))
    return G


class TestDijkstra:
    """Tests for Dijkstra's algorithm."""

    def test_dijkstra_reference_graph(self, dijkstra_graph):
        """Test the seven-node reference scenario."""
        assert dijkstra(dijkstra_graph, "A", "B") == ["A", "C", "E", "B"]

    def test_dijkstra_simple(self):
        """Test that a cheaper detour beats a direct edge."""
        G = WeightedDigraph()
        G.insert_edge_weighted("A", "B", 1)
        G.insert_edge_weighted("B", "C", 2)
        G.insert_edge_weighted("A", "C", 5)

        assert dijkstra(G, "A", "C") == ["A", "B", "C"]

    def test_dijkstra_unreachable(self):
        """Test that an unreachable target gives None."""
        G = WeightedDigraph()
        G.insert_edge_weighted("A", "B", 1)
        G.insert_node("C")

        assert dijkstra(G, "A", "C") is None

    def test_dijkstra_direction_matters(self):
        """Test that edges are not followed backwards."""
        G = WeightedDigraph()
        G.insert_edge_weighted("A", "B", 1)
        assert dijkstra(G, "B", "A") is None

    def test_dijkstra_origin_is_target(self):
        """Test the trivial path."""
        G = WeightedDigraph()
        G.insert_edge_weighted("A", "B", 1)
        assert dijkstra(G, "A", "A") == ["A"]

    def test_dijkstra_unknown_nodes(self):
        """Test origin and target outside the graph."""
        G = WeightedDigraph()
        assert dijkstra(G, "A", "B") is None

    def test_dijkstra_parallel_edges(self):
        """Test that the lightest of parallel edges is used."""
        G = WeightedDigraph()
        G.insert_edge_weighted("A", "B", 10)
        G.insert_edge_weighted("A", "B", 1)
        G.insert_edge_weighted("B", "C", 1)
        G.insert_edge_weighted("A", "C", 5)

        path = dijkstra(G, "A", "C")
        assert path == ["A", "B", "C"]
        assert path_weight(G, path) == 2

    def test_dijkstra_zero_weights(self):
        """Test zero-weight edges."""
        G = WeightedDigraph()
        G.insert_edge_weighted("A", "B", 0)
        G.insert_edge_weighted("B", "C", 0)
        G.insert_edge_weighted("A", "C", 1)
        assert dijkstra(G, "A", "C") == ["A", "B", "C"]

    def test_dijkstra_float_and_fraction_weights(self):
        """Test non-integer weight types."""
        G = WeightedDigraph()
        G.insert_edge_weighted("A", "B", Fraction(1, 3))
        G.insert_edge_weighted("B", "C", Fraction(1, 3))
        G.insert_edge_weighted("A", "C", Fraction(1, 2))
        assert dijkstra(G, "A", "C") == ["A", "C"]

        H = WeightedDigraph()
        H.insert_edge_weighted("A", "B", 0.1)
        H.insert_edge_weighted("B", "C", 0.1)
        H.insert_edge_weighted("A", "C", 0.3)
        assert dijkstra(H, "A", "C") == ["A", "B", "C"]

    def test_dijkstra_with_cycles(self):
        """Test that cycles do not trap the search."""
        G = WeightedDigraph()
        G.insert_edge_weighted(1, 2, 1)
        G.insert_edge_weighted(2, 1, 1)
        G.insert_edge_weighted(2, 3, 1)
        G.insert_edge_weighted(3, 1, 1)
        G.insert_edge_weighted(3, 4, 1)
        assert dijkstra(G, 1, 4) == [1, 2, 3, 4]

    def test_dijkstra_debug_mode(self, dijkstra_graph, debug_mode):
        """Test that heap self checks pass during a search."""
        assert dijkstra(dijkstra_graph, "A", "G") == ["A", "F", "G"]


class TestDagShortestPath:
    """Tests for DAG shortest path."""

    def test_dag_simple(self):
        """Test a detour that beats the direct edge."""
        G = WeightedDigraph()
        G.insert_edge_weighted("A", "B", 4)
        G.insert_edge_weighted("A", "C", 1)
        G.insert_edge_weighted("C", "B", 1)

        assert dag_shortest_path(G, "A", "B") == ["A", "C", "B"]

    def test_dag_negative_weights(self):
        """Test that negative weights are handled in a DAG."""
        G = WeightedDigraph()
        G.insert_edge_weighted("A", "B", 2)
        G.insert_edge_weighted("B", "C", -5)
        G.insert_edge_weighted("A", "C", 0)

        assert dag_shortest_path(G, "A", "C") == ["A", "B", "C"]

    def test_dag_target_before_origin(self):
        """Test that a target upstream of origin is unreachable."""
        G = WeightedDigraph()
        G.insert_edge_weighted("A", "B", 1)
        G.insert_edge_weighted("B", "C", 1)

        assert dag_shortest_path(G, "C", "A") is None
        assert dag_shortest_path(G, "B", "A") is None

    def test_dag_target_in_other_branch(self):
        """Test a target after origin in the order but not reachable."""
        G = WeightedDigraph()
        G.insert_edge_weighted("R", "A", 1)
        G.insert_edge_weighted("R", "B", 1)
        G.insert_edge_weighted("A", "C", 1)

        assert dag_shortest_path(G, "A", "B") is None
        assert dag_shortest_path(G, "B", "C") is None

    def test_dag_origin_missing(self):
        """Test an origin outside the graph."""
        G = WeightedDigraph()
        G.insert_edge_weighted("A", "B", 1)
        assert dag_shortest_path(G, "Z", "B") is None

    def test_dag_origin_is_target(self):
        """Test the trivial path."""
        G = WeightedDigraph()
        G.insert_node("A")
        assert dag_shortest_path(G, "A", "A") == ["A"]

    def test_dag_cyclic_raises(self):
        """Test that a cyclic graph is rejected."""
        G = WeightedDigraph()
        G.insert_edge_weighted("A", "B", 1)
        G.insert_edge_weighted("B", "A", 1)

        with pytest.raises(ValueError, match="acyclic"):
            dag_shortest_path(G, "A", "B")

    def test_dag_layered_matches_dijkstra(self):
        """Test agreement with Dijkstra on growing layered DAGs."""
        for layers in range(2, 9):
            G = _layered_dag(layers)
            origin, target = (0, 0), (layers - 1, layers - 1)

            expected = dijkstra(G, origin, target)
            path = dag_shortest_path(G, origin, target)

            assert path is not None
            assert path[0] == origin and path[-1] == target
            assert path_weight(G, path) == path_weight(G, expected)

    def test_dag_debug_mode(self, debug_mode):
        """Test that the topological self check passes."""
        G = _layered_dag(5)
        assert dag_shortest_path(G, (0, 0), (4, 0)) is not None


class TestPathWeight:
    """Tests for path_weight."""

    def test_path_weight(self, dijkstra_graph):
        assert path_weight(dijkstra_graph, ["A", "C", "E", "B"]) == 6

    def test_single_node(self, dijkstra_graph):
        assert path_weight(dijkstra_graph, ["A"]) == 0

    def test_missing_edge(self, dijkstra_graph):
        with pytest.raises(ValueError, match="No edge"):
            path_weight(dijkstra_graph, ["A", "B"])

    def test_empty_path(self, dijkstra_graph):
        with pytest.raises(ValueError):
            path_weight(dijkstra_graph, [])
