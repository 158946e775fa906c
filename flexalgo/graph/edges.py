"""Edge-list input and adjacency construction for the shortest-path solver.

Nodes are the integers ``0 .. node_count - 1``. Edges are directed
``(source, target, weight)`` triples; parallel edges and self-loops are kept
as given.
"""

from __future__ import annotations

from typing import Any, Iterable, List, NamedTuple, Tuple

from flexalgo.exceptions import InvalidNodeError, NegativeWeightError
from flexalgo.types.base import Cost, NodeID

#: Outgoing ``(target, weight)`` pairs of one node.
Neighbors = Tuple[Tuple[NodeID, Cost], ...]

#: Per-node outgoing neighbors, indexed by node id.
Adjacency = Tuple[Neighbors, ...]


class Edge(NamedTuple):
    """Directed weighted edge."""

    source: NodeID
    target: NodeID
    weight: Cost


def check_node(node: Any, node_count: int, role: str = "node") -> NodeID:
    """Validate a node id against ``[0, node_count)`` and return it.

    Raises:
        InvalidNodeError: If ``node`` is not an int (bools excluded) or is out of range.
    """
    if isinstance(node, bool) or not isinstance(node, int):
        raise InvalidNodeError(node, node_count, role)
    if not 0 <= node < node_count:
        raise InvalidNodeError(node, node_count, role)
    return node


def build_adjacency(
    node_count: int,
    edges: Iterable[Tuple[NodeID, NodeID, Cost]],
    reject_negative_weights: bool = True,
) -> Adjacency:
    """Group ``edges`` by source node into an immutable adjacency.

    Args:
        node_count: Number of nodes; must be non-negative.
        edges: ``(source, target, weight)`` triples.
        reject_negative_weights: Raise on weights below zero.

    Returns:
        Tuple indexed by node id; each entry holds that node's outgoing
        ``(target, weight)`` pairs in input order.

    Raises:
        ValueError: If ``node_count`` is negative or not an int.
        InvalidNodeError: If an edge endpoint is out of range.
        NegativeWeightError: If a weight is negative and rejection is enabled.
    """
    if isinstance(node_count, bool) or not isinstance(node_count, int):
        raise ValueError(f"node_count must be an int, got {node_count!r}.")
    if node_count < 0:
        raise ValueError(f"node_count must be non-negative, got {node_count}.")

    outgoing: List[List[Tuple[NodeID, Cost]]] = [[] for _ in range(node_count)]
    for source, target, weight in edges:
        check_node(source, node_count, "edge source")
        check_node(target, node_count, "edge target")
        if reject_negative_weights and weight < 0:
            raise NegativeWeightError(source, target, weight)
        outgoing[source].append((target, weight))

    return tuple(tuple(neighbors) for neighbors in outgoing)
