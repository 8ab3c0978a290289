"""
Minimum spanning tree: Prim's algorithm.

Grows a tree from a start node by repeatedly adding the lightest edge that
leaves it, using the binary heap as the frontier.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties) and 23.2 (Prim).
"""

from itertools import count
from typing import Any, Hashable, Tuple

from ..heap import BinaryHeap
from ..logging import get_logger
from .capabilities import WeightedGraph
from .core import WeightedDigraph
from .utils import ordered

logger = get_logger(__name__)


def prim_mst(graph: WeightedGraph, start: Hashable) -> Tuple[WeightedDigraph, Any]:
    """
    Prim's algorithm for minimum spanning tree.

    The graph is expected to be symmetric (every edge stored in both
    directions with the same weight), as an undirected weighted graph is.
    Only the connected component containing ``start`` is spanned.

    Args:
        graph: Weighted graph (only ``adjacent_weighted`` is used).
        start: Node to grow the tree from.

    Returns:
        Tuple of:
        - tree: New WeightedDigraph holding the touched nodes and one
          directed edge (tree node -> newly added node) per tree edge
        - total: Sum of the tree's edge weights (0 for a lone start node)

    Complexity: O(E log E) using the binary heap.

    Example:
        >>> G = WeightedDigraph()
        >>> for u, v, w in [('A', 'B', 1), ('B', 'C', 2), ('A', 'C', 3)]:
        ...     G.insert_edge_weighted(u, v, w)
        ...     G.insert_edge_weighted(v, u, w)
        >>> tree, total = prim_mst(G, 'A')
        >>> total
        3
    """
    tree = WeightedDigraph()
    tree.insert_node(start)
    total: Any = 0

    # Entries are (weight, str(source), str(target), seq, source, target).
    seq = count()
    frontier = BinaryHeap()

    def push_edges(source: Hashable) -> None:
        for adj, weight in ordered(graph.adjacent_weighted(source)):
            if not tree.contains(adj):
                frontier.insert((weight, str(source), str(adj), next(seq), source, adj))

    push_edges(start)

    while frontier:
        weight, _, _, _, source, adj = frontier.extract_min()
        if tree.contains(adj):
            continue
        tree.insert_edge_weighted(source, adj, weight)
        total = total + weight
        push_edges(adj)

    logger.debug("prim_mst from %r spans %d nodes, total %r", start, tree.size(), total)
    return tree, total
