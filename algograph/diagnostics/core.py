"""Core diagnostic functions for graphs, DFS charts and heaps."""

from __future__ import annotations

from typing import Any, Hashable, Optional, Sequence


def is_topological_order(graph: Any, order: Sequence[Hashable]) -> bool:
    """
    Check whether ``order`` is a topological order of ``graph``.

    Parameters
    ----------
    graph:
        Graph providing ``adjacent``.
    order:
        Candidate ordering. Every node must appear at most once, and every
        edge leaving a listed node must point to a node listed after it.

    Returns
    -------
    bool
        True if the order respects every edge.
    """
    position = {}
    for index, node in enumerate(order):
        if node in position:
            return False
        position[node] = index

    for node in order:
        for adj in graph.adjacent(node):
            if position.get(adj, -1) <= position[node]:
                return False
    return True


def assert_topological_order(graph: Any, order: Sequence[Hashable]) -> None:
    """
    Assert that ``order`` is a topological order of ``graph``.

    Raises
    ------
    ValueError
        If some edge points backwards, to an unlisted node, or a node is
        listed twice.
    """
    if not is_topological_order(graph, order):
        raise ValueError("Order is not a topological order of the graph.")


def assert_heap_ordered(heap: Any) -> None:
    """
    Assert that a BinaryHeap satisfies the min-heap property.

    Parameters
    ----------
    heap:
        Heap exposing ``check_invariant()``.

    Raises
    ------
    ValueError
        If some item is smaller than its parent.
    """
    bad = heap.check_invariant()
    if bad is not None:
        raise ValueError(f"Heap order violated at index {bad} (parent index {bad // 2}).")


def format_forest(graph: Any, chart: Optional[Any] = None) -> str:
    """
    Render a human-readable summary of a graph's DFS forest.

    One block per tree: the root, its size, whether a cycle was found and
    the nodes in topological order.

    Parameters
    ----------
    graph:
        Definite graph to describe.
    chart:
        ForestChart previously built for ``graph``. Computed with
        ``chart_forest`` when omitted.

    Returns
    -------
    str
        Multi-line summary.

    Example
    -------
    >>> print(format_forest(G))
    forest: 3 nodes, 1 tree
    tree 'A': 3 nodes, acyclic
      A -> B -> C
    """
    if chart is None:
        from ..graphs.traversal import chart_forest

        chart = chart_forest(graph)

    n_trees = len(chart.trees)
    lines = [f"forest: {graph.size()} nodes, {n_trees} tree{'' if n_trees == 1 else 's'}"]
    for root, tree in chart.trees.items():
        status = "cyclic" if tree.cyclic else "acyclic"
        lines.append(f"tree {root!r}: {len(tree.topo)} nodes, {status}")
        lines.append("  " + " -> ".join(str(node) for node in tree.topo))
    return "\n".join(lines)
