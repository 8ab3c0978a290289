"""
Shortest path algorithms: Dijkstra and DAG relaxation.

Dijkstra's algorithm for graphs with non-negative edge weights.
DAG shortest path for acyclic graphs, relaxing edges in topological order.

Weights only need to support ``+`` and ``<`` and to combine with the
integer ``0`` (ints, floats, Fractions and Decimals all work).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.2 (DAG shortest paths) and 24.3 (Dijkstra).
"""

from itertools import count
from typing import Any, Dict, Hashable, List, Optional, Sequence, Set

from ..diagnostics import assert_topological_order, is_debug_enabled
from ..heap import BinaryHeap
from ..logging import get_logger
from .capabilities import DefiniteGraph, WeightedGraph
from .traversal import depth_first_search
from .utils import ordered, reconstruct_path

logger = get_logger(__name__)


def dijkstra(
    graph: WeightedGraph, origin: Hashable, target: Hashable
) -> Optional[List[Hashable]]:
    """
    Dijkstra's algorithm for a single origin/target pair.

    Repeatedly finalizes the unfinalized node with the smallest tentative
    distance and relaxes its outgoing edges. Finalized nodes are never
    reopened. The search stops as soon as the target is finalized.

    Edge weights must be non-negative. This is not checked: negative
    weights give undefined results.

    Ties between equal tentative distances are broken by ``str(node)``,
    then by the order in which the distances were recorded.

    Args:
        graph: Weighted graph (only ``adjacent_weighted`` is used).
        origin: Start node.
        target: Destination node.

    Returns:
        List of nodes of a shortest path from origin to target (both
        included), or None if target is unreachable.

    Complexity: O(E log E) using the binary heap as priority queue.

    Example:
        >>> G = WeightedDigraph()
        >>> G.insert_edge_weighted('A', 'B', 1)
        >>> G.insert_edge_weighted('B', 'C', 2)
        >>> G.insert_edge_weighted('A', 'C', 5)
        >>> dijkstra(G, 'A', 'C')
        ['A', 'B', 'C']
    """
    dist: Dict[Hashable, Any] = {origin: 0}
    prev: Dict[Hashable, Hashable] = {}
    known: Set[Hashable] = set()

    # Entries are (distance, str(node), seq, node); seq is unique so nodes
    # themselves are never compared.
    seq = count()
    queue = BinaryHeap()
    queue.insert((0, str(origin), next(seq), origin))

    while queue:
        distance, _, _, node = queue.extract_min()
        if node in known:
            continue
        known.add(node)

        if node == target:
            logger.debug("dijkstra %r -> %r: distance %r", origin, target, distance)
            return reconstruct_path(prev, origin, target)

        for adj, weight in ordered(graph.adjacent_weighted(node)):
            if adj in known:
                continue
            candidate = distance + weight
            if adj not in dist or candidate < dist[adj]:
                dist[adj] = candidate
                prev[adj] = node
                queue.insert((candidate, str(adj), next(seq), adj))

    logger.debug("dijkstra %r -> %r: target unreachable", origin, target)
    return None


def dag_shortest_path(
    graph: DefiniteGraph, origin: Hashable, target: Hashable
) -> Optional[List[Hashable]]:
    """
    Shortest path in a weighted directed acyclic graph.

    Walks the nodes in topological order and relaxes each outgoing edge of
    every node reachable from origin exactly once. Since every predecessor
    of a node comes before it in the order, its distance is final by the
    time its own edges are relaxed, and no priority queue is needed.

    Unlike Dijkstra, negative edge weights are fine.

    Args:
        graph: Definite, weighted, acyclic graph.
        origin: Start node.
        target: Destination node.

    Returns:
        List of nodes of a shortest path from origin to target (both
        included), or None if target is unreachable.

    Raises:
        ValueError: If the graph contains a cycle. Calling this on a cyclic
            graph is a caller error, not a "no path" outcome.

    Complexity: O(V + E).

    Example:
        >>> G = WeightedDigraph()
        >>> G.insert_edge_weighted('A', 'B', 4)
        >>> G.insert_edge_weighted('A', 'C', 1)
        >>> G.insert_edge_weighted('C', 'B', 1)
        >>> dag_shortest_path(G, 'A', 'B')
        ['A', 'C', 'B']
    """
    _, order, cyclic = depth_first_search(graph)
    if cyclic:
        logger.error("dag_shortest_path called on a cyclic graph")
        raise ValueError("dag_shortest_path requires an acyclic graph")

    if is_debug_enabled():
        assert_topological_order(graph, order)

    if origin == target:
        return [origin]

    dist: Dict[Hashable, Any] = {}
    prev: Dict[Hashable, Hashable] = {}
    found = False

    for node in order:
        if node == origin:
            found = True
            dist[origin] = 0
        elif not found:
            # Nothing reachable from origin comes before it in the order.
            if node == target:
                logger.debug("dag_shortest_path %r -> %r: target precedes origin", origin, target)
                return None
            continue

        if node not in dist:
            continue
        if node == target:
            break

        for adj, weight in ordered(graph.adjacent_weighted(node)):
            candidate = dist[node] + weight
            if adj not in dist or candidate < dist[adj]:
                dist[adj] = candidate
                prev[adj] = node

    if target not in dist:
        return None
    return reconstruct_path(prev, origin, target)


def path_weight(graph: WeightedGraph, path: Sequence[Hashable]) -> Any:
    """
    Total weight of a path.

    Between consecutive nodes joined by parallel edges, the lightest edge
    is used.

    Args:
        graph: Weighted graph the path runs through.
        path: Nodes of the path, in order.

    Returns:
        Sum of edge weights (0 for a single-node path).

    Raises:
        ValueError: If the path is empty or a hop is not an edge.

    Example:
        >>> path_weight(G, ['A', 'C', 'B'])
        2
    """
    if not path:
        raise ValueError("path must contain at least one node")

    total: Any = 0
    for u, v in zip(path, path[1:]):
        weights = [w for adj, w in graph.adjacent_weighted(u) if adj == v]
        if not weights:
            raise ValueError(f"No edge from {u!r} to {v!r}")
        total = total + min(weights)
    return total
