"""algograph - generic graph algorithms over a capability model."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_heap_ordered,
    assert_topological_order,
    debug_context,
    format_forest,
    is_debug_enabled,
    is_topological_order,
    set_debug_enabled,
)

# Graphs
from .graphs import (
    DefiniteGraph,
    DirectedGraph,
    ForestChart,
    Graph,
    MutableGraph,
    TreeChart,
    UndirectedGraph,
    WeightedDigraph,
    WeightedGraph,
    WeightedMutableGraph,
    adjacency_matrix,
    bfs,
    bfs_layers,
    chart_forest,
    dag_shortest_path,
    depth_first_search,
    dijkstra,
    is_acyclic,
    node_index_map,
    path_weight,
    prim_mst,
    reconstruct_path,
    topological_sort,
)

# Heap
from .heap import BinaryHeap, heapsort

__all__ = [
    "__version__",
    # Graph capabilities
    "Graph",
    "DefiniteGraph",
    "WeightedGraph",
    "MutableGraph",
    "WeightedMutableGraph",
    # Graph containers
    "DirectedGraph",
    "UndirectedGraph",
    "WeightedDigraph",
    # Traversal
    "bfs",
    "bfs_layers",
    "depth_first_search",
    "chart_forest",
    "ForestChart",
    "TreeChart",
    "is_acyclic",
    "topological_sort",
    # Weighted paths
    "dijkstra",
    "dag_shortest_path",
    "path_weight",
    "prim_mst",
    # Graph utilities
    "adjacency_matrix",
    "node_index_map",
    "reconstruct_path",
    # Heap
    "BinaryHeap",
    "heapsort",
    # Diagnostics
    "is_topological_order",
    "assert_topological_order",
    "assert_heap_ordered",
    "format_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
