"""
Graph algorithms package for algograph.

This package provides:
- Capability protocols (Graph, DefiniteGraph, WeightedGraph, MutableGraph,
  WeightedMutableGraph) that algorithms are written against
- Graph containers (DirectedGraph, UndirectedGraph, WeightedDigraph)
- Traversal (BFS, DFS with cycle detection and topological order)
- Shortest paths (Dijkstra, DAG relaxation)
- Minimum spanning tree (Prim)

All algorithms visit neighbors in sorted order for reproducibility.
"""

from .capabilities import (
    DefiniteGraph,
    Graph,
    MutableGraph,
    WeightedGraph,
    WeightedMutableGraph,
)
from .core import DirectedGraph, UndirectedGraph, WeightedDigraph
from .mst import prim_mst
from .shortest import dag_shortest_path, dijkstra, path_weight
from .traversal import (
    ForestChart,
    TreeChart,
    bfs,
    bfs_layers,
    chart_forest,
    depth_first_search,
    is_acyclic,
    topological_sort,
)
from .utils import adjacency_matrix, node_index_map, ordered, reconstruct_path

__all__ = [
    "Graph",
    "DefiniteGraph",
    "WeightedGraph",
    "MutableGraph",
    "WeightedMutableGraph",
    "DirectedGraph",
    "UndirectedGraph",
    "WeightedDigraph",
    "bfs",
    "bfs_layers",
    "depth_first_search",
    "chart_forest",
    "ForestChart",
    "TreeChart",
    "is_acyclic",
    "topological_sort",
    "dijkstra",
    "dag_shortest_path",
    "path_weight",
    "prim_mst",
    "adjacency_matrix",
    "node_index_map",
    "ordered",
    "reconstruct_path",
]

# Example usage:
# from algograph.graphs import WeightedDigraph, dijkstra
#
# G = WeightedDigraph()
# G.insert_edge_weighted('A', 'B', 1)
# G.insert_edge_weighted('B', 'C', 2)
# dijkstra(G, 'A', 'C')  # ['A', 'B', 'C']
