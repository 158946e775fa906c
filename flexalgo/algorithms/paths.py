"""Path helpers over predecessor maps produced by the shortest-path solver."""

from __future__ import annotations

from typing import Dict, List, Optional

from flexalgo.graph.edges import Adjacency
from flexalgo.types.base import Cost, NodeID


def resolve_path(
    src_node: NodeID,
    dst_node: NodeID,
    pred: Dict[NodeID, NodeID],
) -> Optional[List[NodeID]]:
    """Walk ``pred`` back from ``dst_node`` and return the source-to-target path.

    Args:
        src_node: Node the search started from (has no predecessor).
        dst_node: Node to reach.
        pred: Maps each reached node other than the source to its predecessor.

    Returns:
        Node ids from ``src_node`` to ``dst_node`` inclusive, ``[src_node]``
        when both are the same node, or ``None`` if ``dst_node`` was not reached.
    """
    if dst_node != src_node and dst_node not in pred:
        return None

    path = [dst_node]
    seen = {dst_node}
    node = dst_node
    while node != src_node:
        node = pred[node]
        if node in seen:
            raise ValueError(f"Predecessor map has a cycle through node {node}.")
        seen.add(node)
        path.append(node)
    path.reverse()
    return path


def path_cost(adjacency: Adjacency, path: List[NodeID]) -> Cost:
    """Sum edge weights along ``path``, taking the cheapest of parallel edges.

    Raises:
        ValueError: If two consecutive nodes are not joined by an edge.
    """
    total: Cost = 0
    for u, v in zip(path, path[1:]):
        weights = [w for target, w in adjacency[u] if target == v]
        if not weights:
            raise ValueError(f"No edge from {u} to {v}.")
        total += min(weights)
    return total
