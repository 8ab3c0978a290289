"""
Graph traversal algorithms: BFS and DFS.

Breadth-first search finds fewest-edge paths from an origin; depth-first
search detects cycles and produces a topological order. Neighbors are
visited in sorted order for reproducible results.

DFS uses an explicit stack of (node, neighbor-iterator) frames instead of
recursion, so deep graphs are not limited by the interpreter's recursion
depth. A node is marked gray when its frame is pushed and black when the
frame is popped after all of its neighbors are done.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS), 22.3 (DFS) and 22.4 (Topological sort).
"""

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterator, List, Set, Tuple

from ..logging import get_logger
from .capabilities import DefiniteGraph, Graph
from .utils import ordered

logger = get_logger(__name__)

_GRAY = 1
_BLACK = 2


@dataclass
class TreeChart:
    """
    Summary of one DFS tree.

    Attributes:
        cyclic: True if a back edge was found while exploring this tree
            (or any tree merged into it).
        topo: Nodes of the tree in topological order.
    """

    cyclic: bool = False
    topo: List[Hashable] = field(default_factory=list)


@dataclass
class ForestChart:
    """
    DFS forest of a definite graph grouped by exploration root.

    Attributes:
        graph: The charted graph.
        trees: Mapping root -> TreeChart.
    """

    graph: DefiniteGraph
    trees: Dict[Hashable, TreeChart] = field(default_factory=dict)


def bfs(graph: Graph, origin: Hashable) -> Dict[Hashable, List[Hashable]]:
    """
    Breadth-first search from an origin node.

    Expands the graph one frontier layer at a time. Each newly discovered
    node inherits the path of the node it was found from, extended by that
    node, so the first discovery is always along a fewest-edges path.

    Args:
        graph: Graph to traverse (only ``adjacent`` is used).
        origin: Node to start from. It does not need to be in the graph.

    Returns:
        Dictionary mapping every node reachable from origin (origin
        included) to the nodes of a shortest path leading to it, starting
        at origin and excluding the node itself. Origin maps to [].
        Unreachable nodes are absent.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = DirectedGraph()
        >>> G.insert_edge('A', 'B')
        >>> G.insert_edge('B', 'C')
        >>> bfs(G, 'A')
        {'A': [], 'B': ['A'], 'C': ['A', 'B']}
    """
    known: Dict[Hashable, List[Hashable]] = {origin: []}
    frontier = [origin]

    while frontier:
        next_frontier = []
        for node in frontier:
            prefix = known[node] + [node]
            for adj in ordered(graph.adjacent(node)):
                if adj not in known:
                    known[adj] = prefix
                    next_frontier.append(adj)
        frontier = next_frontier

    logger.debug("bfs from %r reached %d nodes", origin, len(known))
    return known


def bfs_layers(graph: Graph, origin: Hashable) -> Iterator[List[Hashable]]:
    """
    Yield successive BFS frontiers from an origin.

    The first layer yielded holds the nodes one edge away from origin, the
    next those two edges away, and so on. Iteration stops once a layer
    discovers no new nodes.

    Args:
        graph: Graph to traverse.
        origin: Node to start from.

    Yields:
        Lists of newly discovered nodes, one list per distance.

    Example:
        >>> list(bfs_layers(G, 'A'))
        [['B'], ['C']]
    """
    known: Set[Hashable] = {origin}
    frontier = [origin]

    while True:
        next_frontier = []
        for node in frontier:
            for adj in ordered(graph.adjacent(node)):
                if adj not in known:
                    known.add(adj)
                    next_frontier.append(adj)
        if not next_frontier:
            return
        frontier = next_frontier
        yield list(frontier)


def _visit(
    graph: Graph,
    root: Hashable,
    marks: Dict[Hashable, int],
    postorder: List[Hashable],
) -> Tuple[bool, List[Hashable]]:
    # Explore everything reachable from root that is not yet marked.
    # Returns (back edge seen, already-finished nodes that were reached).
    cyclic = False
    finished_hits: List[Hashable] = []

    marks[root] = _GRAY
    stack = [(root, iter(ordered(graph.adjacent(root))))]

    while stack:
        node, neighbors = stack[-1]
        for adj in neighbors:
            mark = marks.get(adj)
            if mark is None:
                marks[adj] = _GRAY
                stack.append((adj, iter(ordered(graph.adjacent(adj)))))
                break
            if mark == _GRAY:
                cyclic = True
            else:
                finished_hits.append(adj)
        else:
            stack.pop()
            marks[node] = _BLACK
            postorder.append(node)

    return cyclic, finished_hits


def depth_first_search(graph: DefiniteGraph) -> Tuple[Set[Hashable], List[Hashable], bool]:
    """
    Depth-first search over every node of a definite graph.

    Starts a new exploration from each node (in ``all_nodes`` order) not
    yet visited. Reaching a node that is still on the stack marks the graph
    cyclic; the traversal continues so that every node still ends up in the
    order.

    Args:
        graph: Definite graph to traverse.

    Returns:
        Tuple of:
        - roots: Nodes that started an exploration and were not reached
          from a later one.
        - order: All visited nodes in reverse post-order. When the graph is
          acyclic this is a topological order: for every edge (u, v), u
          comes before v.
        - cyclic: True if any directed cycle was found.

    Complexity: O(V + E).

    Example:
        >>> G = DirectedGraph()
        >>> G.insert_edge('shirt', 'tie')
        >>> G.insert_edge('tie', 'jacket')
        >>> roots, order, cyclic = depth_first_search(G)
        >>> order
        ['shirt', 'tie', 'jacket']
    """
    roots: Set[Hashable] = set()
    postorder: List[Hashable] = []
    marks: Dict[Hashable, int] = {}
    cyclic = False

    for origin in graph.all_nodes():
        if origin in marks:
            continue
        roots.add(origin)
        found_cycle, finished_hits = _visit(graph, origin, marks, postorder)
        cyclic = cyclic or found_cycle
        roots.difference_update(finished_hits)

    postorder.reverse()
    if cyclic:
        logger.debug("depth_first_search found a cycle among %d nodes", len(postorder))
    return roots, postorder, cyclic


def chart_forest(graph: DefiniteGraph) -> ForestChart:
    """
    Chart the DFS forest of a graph, one TreeChart per root.

    When an exploration reaches the root of an earlier tree, that tree is
    merged into the current one and its entry removed, so each remaining
    entry covers a group of nodes whose earlier roots turned out to be
    reachable from it. A merged tree's cyclic flag carries over.

    Args:
        graph: Definite graph to chart.

    Returns:
        ForestChart keyed by root.
    """
    trees: Dict[Hashable, TreeChart] = {}
    marks: Dict[Hashable, int] = {}

    for root in graph.all_nodes():
        if root in marks:
            continue
        postorder: List[Hashable] = []
        cyclic, finished_hits = _visit(graph, root, marks, postorder)

        # Edges only lead from later trees into earlier ones, so concatenating
        # post-orders oldest first keeps the merged post-order valid.
        hits = set(finished_hits)
        absorbed: List[Hashable] = []
        for key in [key for key in trees if key in hits]:
            other = trees.pop(key)
            cyclic = cyclic or other.cyclic
            absorbed.extend(reversed(other.topo))

        topo = list(reversed(absorbed + postorder))
        trees[root] = TreeChart(cyclic=cyclic, topo=topo)

    return ForestChart(graph=graph, trees=trees)


def is_acyclic(graph: DefiniteGraph) -> bool:
    """Return True if the graph has no directed cycle."""
    _, _, cyclic = depth_first_search(graph)
    return not cyclic


def topological_sort(graph: DefiniteGraph) -> List[Hashable]:
    """
    Return a topological order of an acyclic graph.

    Args:
        graph: Definite, acyclic graph.

    Returns:
        List of all nodes where every edge points forward.

    Raises:
        ValueError: If the graph contains a cycle.
    """
    _, order, cyclic = depth_first_search(graph)
    if cyclic:
        raise ValueError("topological_sort requires an acyclic graph")
    return order
