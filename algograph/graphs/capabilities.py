"""
Graph capability protocols.

Algorithms are written against the smallest set of capabilities they need
rather than a concrete container. Each protocol is structural: any object
providing the listed methods satisfies it, and one container may satisfy
several at once (e.g. a weighted, mutable, definite graph).

    Graph                 adjacency query and membership
    DefiniteGraph         plus a finite, enumerable node set
    WeightedGraph         plus weighted adjacency
    MutableGraph          node and edge insert/remove
    WeightedMutableGraph  node and weighted-edge insert/remove
"""

from typing import Any, Hashable, Iterable, List, Protocol, Set, Tuple, runtime_checkable


@runtime_checkable
class Graph(Protocol):
    """Minimal adjacency capability."""

    def adjacent(self, node: Hashable) -> Set[Hashable]:
        """
        Return the neighbors of ``node``.

        Unknown or isolated nodes yield an empty set, never an error. The
        returned set is a copy owned by the caller.
        """
        ...

    def contains(self, node: Hashable) -> bool:
        """Return True if ``node`` is a member of the graph."""
        ...


@runtime_checkable
class DefiniteGraph(Graph, Protocol):
    """Graph whose full node set can be enumerated in finite time."""

    def all_nodes(self) -> List[Hashable]:
        """Return every node in the graph."""
        ...

    def size(self) -> int:
        """Return the number of nodes."""
        ...


@runtime_checkable
class WeightedGraph(Graph, Protocol):
    """Graph whose edges carry weights."""

    def adjacent_weighted(self, node: Hashable) -> Set[Tuple[Hashable, Any]]:
        """
        Return ``(neighbor, weight)`` pairs for the edges leaving ``node``.

        Parallel edges to the same neighbor with distinct weights appear as
        distinct pairs.
        """
        ...


@runtime_checkable
class MutableGraph(Graph, Protocol):
    """Graph supporting node and unweighted edge mutation."""

    def insert_node(self, node: Hashable, adjacent: Iterable[Hashable] = ()) -> None:
        ...

    def remove_node(self, node: Hashable) -> None:
        ...

    def insert_edge(self, u: Hashable, v: Hashable) -> None:
        ...

    def remove_edge(self, u: Hashable, v: Hashable) -> None:
        ...


@runtime_checkable
class WeightedMutableGraph(WeightedGraph, Protocol):
    """Weighted graph supporting node and weighted edge mutation."""

    def insert_node(self, node: Hashable, adjacent: Iterable[Tuple[Hashable, Any]] = ()) -> None:
        ...

    def remove_node(self, node: Hashable) -> None:
        ...

    def insert_edge_weighted(self, u: Hashable, v: Hashable, weight: Any) -> None:
        ...

    def remove_edge_weighted(self, u: Hashable, v: Hashable, weight: Any) -> None:
        ...
