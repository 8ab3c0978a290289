"""
Utility functions for graph algorithms.

Provides helpers for deterministic node ordering, node indexing, dense
adjacency matrices and path reconstruction.
"""

from typing import Dict, Hashable, Iterable, List, Optional, Tuple

import numpy as np

from .capabilities import DefiniteGraph


def ordered(nodes: Iterable[Hashable]) -> List[Hashable]:
    """
    Return nodes in a deterministic order.

    Nodes are sorted by their natural ordering. Mixed node types that cannot
    be compared with each other fall back to ordering by string
    representation.

    Args:
        nodes: Iterable of hashable nodes.

    Returns:
        Sorted list of nodes.
    """
    items = list(nodes)
    try:
        return sorted(items)
    except TypeError:
        return sorted(items, key=lambda x: str(x))


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from nodes to indices 0..n-1.

    Args:
        nodes: Iterable of hashable nodes.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).
        The list provides the node ordering used for indexing.

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'b'])
        >>> node_to_idx
        {'a': 0, 'b': 1, 'c': 2}
        >>> idx_to_node
        ['a', 'b', 'c']
    """
    sorted_nodes = ordered(set(nodes))
    node_to_index = {node: idx for idx, node in enumerate(sorted_nodes)}
    return node_to_index, sorted_nodes


def adjacency_matrix(
    graph: DefiniteGraph, nodes: Optional[List[Hashable]] = None, weighted: bool = False
) -> np.ndarray:
    """
    Build a dense adjacency matrix for a definite graph.

    Entry ``[i, j]`` is 1.0 when an edge leads from node ``i`` to node ``j``
    and 0.0 otherwise. With ``weighted=True`` the entry holds the smallest
    weight among the (possibly parallel) edges from ``i`` to ``j``; the graph
    must then provide ``adjacent_weighted``, and zero-weight edges are
    indistinguishable from missing ones.

    Args:
        graph: Definite graph.
        nodes: Optional subset of nodes (defaults to all nodes).
        weighted: Whether to store edge weights instead of 1.0.

    Returns:
        (n, n) numpy array in ``node_index_map`` order.

    Example:
        >>> G = DirectedGraph()
        >>> G.insert_edge('A', 'B')
        >>> adjacency_matrix(G)
        array([[0., 1.],
               [0., 0.]])
    """
    if nodes is None:
        nodes = graph.all_nodes()

    node_to_idx, idx_to_node = node_index_map(nodes)
    n = len(idx_to_node)
    matrix = np.zeros((n, n))

    for u in idx_to_node:
        i = node_to_idx[u]
        if weighted:
            for v, weight in graph.adjacent_weighted(u):
                if v not in node_to_idx:
                    continue
                j = node_to_idx[v]
                if matrix[i, j] == 0.0 or weight < matrix[i, j]:
                    matrix[i, j] = weight
        else:
            for v in graph.adjacent(u):
                if v in node_to_idx:
                    matrix[i, node_to_idx[v]] = 1.0

    return matrix


def reconstruct_path(
    prev: Dict[Hashable, Hashable], origin: Hashable, target: Hashable
) -> Optional[List[Hashable]]:
    """
    Reconstruct a path from origin to target using a predecessor map.

    ``prev[node]`` is the node preceding ``node`` on the chosen path. The
    origin itself has no entry.

    Args:
        prev: Dictionary mapping node -> predecessor.
        origin: Node the path starts at.
        target: Node the path ends at.

    Returns:
        List of nodes from origin to target (inclusive), or None if the
        predecessor chain from target never reaches origin.

    Example:
        >>> reconstruct_path({'B': 'A', 'C': 'B'}, 'A', 'C')
        ['A', 'B', 'C']
        >>> reconstruct_path({'B': 'A'}, 'A', 'D') is None
        True
    """
    path = [target]
    current = target
    seen = {target}
    while current != origin:
        if current not in prev:
            return None
        current = prev[current]
        if current in seen:
            return None
        seen.add(current)
        path.append(current)

    path.reverse()
    return path
