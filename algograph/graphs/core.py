"""
Core graph data structures.

Provides DirectedGraph, UndirectedGraph and WeightedDigraph, adjacency-set
containers implementing the capability protocols in ``capabilities``.
Adding nodes and edges is O(1) amortized. Node enumeration is returned in
sorted order for deterministic behavior.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Set, Tuple

from .utils import ordered


@dataclass
class DirectedGraph:
    """
    Directed graph with adjacency-set representation.

    Satisfies Graph, DefiniteGraph and MutableGraph. In-edges are not
    tracked: removing a node drops its own adjacency entry but leaves
    references to it in other nodes' adjacency untouched.

    Attributes:
        adj: Mapping node -> set of successors.

    Complexity:
        - insert_node: O(deg(v))
        - insert_edge / remove_edge: O(1) amortized
        - adjacent: O(deg(v))
        - all_nodes: O(V log V)
    """

    adj: Dict[Hashable, Set[Hashable]] = field(default_factory=dict)

    def __init__(self) -> None:
        """Initialize an empty directed graph."""
        self.adj = {}

    def __len__(self) -> int:
        return len(self.adj)

    def __contains__(self, node: Hashable) -> bool:
        return node in self.adj

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.all_nodes())

    def adjacent(self, node: Hashable) -> Set[Hashable]:
        """
        Return successors of a node.

        Args:
            node: Node to look up.

        Returns:
            New set of successors; empty for unknown nodes.
        """
        return set(self.adj.get(node, ()))

    def contains(self, node: Hashable) -> bool:
        return node in self.adj

    def all_nodes(self) -> List[Hashable]:
        """Return all nodes in sorted order."""
        return ordered(self.adj)

    def size(self) -> int:
        return len(self.adj)

    def insert_node(self, node: Hashable, adjacent: Iterable[Hashable] = ()) -> None:
        """
        Insert a node with an initial set of successors.

        Re-inserting an existing node replaces its successors. Successors
        not yet in the graph are registered as nodes.

        Args:
            node: Node to insert.
            adjacent: Initial successors.
        """
        successors = set(adjacent)
        for v in successors:
            self.adj.setdefault(v, set())
        self.adj[node] = successors

    def remove_node(self, node: Hashable) -> None:
        self.adj.pop(node, None)

    def insert_edge(self, u: Hashable, v: Hashable) -> None:
        """
        Add an edge from u to v, registering either endpoint if missing.

        Inserting an existing edge is a no-op.
        """
        self.adj.setdefault(v, set())
        self.adj.setdefault(u, set()).add(v)

    def remove_edge(self, u: Hashable, v: Hashable) -> None:
        if u in self.adj:
            self.adj[u].discard(v)

    def edges(self) -> List[Tuple[Hashable, Hashable]]:
        """Return all (u, v) edges in sorted order."""
        return [(u, v) for u in self.all_nodes() for v in ordered(self.adj[u])]

    def copy(self) -> "DirectedGraph":
        clone = DirectedGraph()
        clone.adj = {node: set(succ) for node, succ in self.adj.items()}
        return clone


@dataclass
class UndirectedGraph:
    """
    Undirected graph with adjacency-set representation.

    Satisfies Graph, DefiniteGraph and MutableGraph. The container keeps
    adjacency symmetric itself: every insert or remove touches both
    endpoints or neither.

    Attributes:
        adj: Mapping node -> set of neighbors.
    """

    adj: Dict[Hashable, Set[Hashable]] = field(default_factory=dict)

    def __init__(self) -> None:
        """Initialize an empty undirected graph."""
        self.adj = {}

    def __len__(self) -> int:
        return len(self.adj)

    def __contains__(self, node: Hashable) -> bool:
        return node in self.adj

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.all_nodes())

    def adjacent(self, node: Hashable) -> Set[Hashable]:
        return set(self.adj.get(node, ()))

    def contains(self, node: Hashable) -> bool:
        return node in self.adj

    def all_nodes(self) -> List[Hashable]:
        return ordered(self.adj)

    def size(self) -> int:
        return len(self.adj)

    def insert_node(self, node: Hashable, adjacent: Iterable[Hashable] = ()) -> None:
        """
        Insert a node linked to the given neighbors.

        Re-inserting an existing node first unlinks its previous neighbors.
        Each neighbor gains the back-link to ``node``.

        Args:
            node: Node to insert.
            adjacent: Initial neighbors.
        """
        self.remove_node(node)
        self.adj[node] = set()
        for v in adjacent:
            self.insert_edge(node, v)

    def remove_node(self, node: Hashable) -> None:
        """Remove a node and every edge touching it."""
        for v in self.adj.pop(node, ()):
            if v in self.adj:
                self.adj[v].discard(node)

    def insert_edge(self, u: Hashable, v: Hashable) -> None:
        """Link u and v in both directions, registering missing endpoints."""
        self.adj.setdefault(u, set()).add(v)
        self.adj.setdefault(v, set()).add(u)

    def remove_edge(self, u: Hashable, v: Hashable) -> None:
        if u in self.adj and v in self.adj:
            self.adj[u].discard(v)
            self.adj[v].discard(u)

    def edges(self) -> List[Tuple[Hashable, Hashable]]:
        """
        Return all edges in sorted order.

        Each edge appears once as (u, v) with u ordered before v.
        """
        nodes = self.all_nodes()
        rank = {node: i for i, node in enumerate(nodes)}
        return [
            (u, v)
            for u in nodes
            for v in ordered(self.adj[u])
            if rank.get(v, -1) >= rank[u]
        ]

    def copy(self) -> "UndirectedGraph":
        clone = UndirectedGraph()
        clone.adj = {node: set(nbrs) for node, nbrs in self.adj.items()}
        return clone


@dataclass
class WeightedDigraph:
    """
    Directed weighted graph with adjacency-set representation.

    Satisfies Graph, DefiniteGraph, WeightedGraph and WeightedMutableGraph.
    Each node maps to a set of (successor, weight) pairs, so parallel edges
    to the same successor with different weights are kept as distinct
    edges, while re-inserting an identical pair is a no-op. For undirected
    use, insert each edge in both directions.

    Attributes:
        adj: Mapping node -> set of (successor, weight) pairs.

    Example:
        >>> G = WeightedDigraph()
        >>> G.insert_edge_weighted('A', 'B', 3)
        >>> G.adjacent_weighted('A')
        {('B', 3)}
    """

    adj: Dict[Hashable, Set[Tuple[Hashable, Any]]] = field(default_factory=dict)

    def __init__(self) -> None:
        """Initialize an empty weighted graph."""
        self.adj = {}

    def __len__(self) -> int:
        return len(self.adj)

    def __contains__(self, node: Hashable) -> bool:
        return node in self.adj

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.all_nodes())

    def adjacent(self, node: Hashable) -> Set[Hashable]:
        """Return successors of a node, ignoring weights."""
        return {v for v, _ in self.adj.get(node, ())}

    def adjacent_weighted(self, node: Hashable) -> Set[Tuple[Hashable, Any]]:
        """Return (successor, weight) pairs; empty for unknown nodes."""
        return set(self.adj.get(node, ()))

    def contains(self, node: Hashable) -> bool:
        return node in self.adj

    def all_nodes(self) -> List[Hashable]:
        return ordered(self.adj)

    def size(self) -> int:
        return len(self.adj)

    def insert_node(self, node: Hashable, adjacent: Iterable[Tuple[Hashable, Any]] = ()) -> None:
        """
        Insert a node with an initial set of weighted out-edges.

        Re-inserting an existing node replaces its out-edges.

        Args:
            node: Node to insert.
            adjacent: Initial (successor, weight) pairs.
        """
        edges = set(adjacent)
        for v, _ in edges:
            self.adj.setdefault(v, set())
        self.adj[node] = edges

    def remove_node(self, node: Hashable) -> None:
        self.adj.pop(node, None)

    def insert_edge_weighted(self, u: Hashable, v: Hashable, weight: Any) -> None:
        """Add an edge u -> v with the given weight, registering missing endpoints."""
        self.adj.setdefault(v, set())
        self.adj.setdefault(u, set()).add((v, weight))

    def remove_edge_weighted(self, u: Hashable, v: Hashable, weight: Any) -> None:
        """Remove the edge u -> v carrying exactly ``weight``, if present."""
        if u in self.adj:
            self.adj[u].discard((v, weight))

    def edges(self) -> List[Tuple[Hashable, Hashable, Any]]:
        """Return all (u, v, weight) edges sorted by node, then weight."""
        result = []
        for u in self.all_nodes():
            by_target: Dict[Hashable, List[Any]] = {}
            for v, weight in self.adj[u]:
                by_target.setdefault(v, []).append(weight)
            for v in ordered(by_target):
                result.extend((u, v, weight) for weight in sorted(by_target[v]))
        return result

    def copy(self) -> "WeightedDigraph":
        clone = WeightedDigraph()
        clone.adj = {node: set(edges) for node, edges in self.adj.items()}
        return clone
