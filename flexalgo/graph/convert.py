"""NetworkX to edge-list conversion.

Turns an arbitrary NetworkX graph into the ``(node_count, edges)`` input the
shortest-path solver consumes, plus a :class:`NodeMap` to translate between
the original node names and the solver's integer ids.

Example:
    >>> import networkx as nx
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=3)
    >>> node_count, edges, node_map = from_networkx(G)
    >>> node_count, edges
    (2, [Edge(source=0, target=1, weight=3)])
    >>> node_map.name_of(1)
    'B'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, List, Tuple

import networkx as nx

from flexalgo.graph.edges import Edge
from flexalgo.logging import get_logger
from flexalgo.types.base import Cost, NodeID

logger = get_logger(__name__)


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and solver ids.

    Attributes:
        to_index: Original node name -> integer id.
        to_name: Integer id -> original node name.
    """

    to_index: Dict[Hashable, NodeID] = field(default_factory=dict)
    to_name: Dict[NodeID, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: Iterable[Hashable]) -> NodeMap:
        """Number ``names`` from 0 in iteration order."""
        names = list(names)
        return cls(
            to_index={name: i for i, name in enumerate(names)},
            to_name=dict(enumerate(names)),
        )

    def __len__(self) -> int:
        return len(self.to_index)

    def index_of(self, name: Hashable) -> NodeID:
        """Return the id of ``name``; raises ``KeyError`` if unknown."""
        return self.to_index[name]

    def name_of(self, index: NodeID) -> Hashable:
        """Return the name of node ``index``; raises ``KeyError`` if unknown."""
        return self.to_name[index]

    def names(self, path: Iterable[NodeID]) -> List[Hashable]:
        """Translate a sequence of ids (e.g. a solver path) to names."""
        return [self.to_name[i] for i in path]


def from_networkx(
    G: nx.Graph,
    *,
    weight_attr: str = "weight",
    default_weight: Cost = 1,
) -> Tuple[int, List[Edge], NodeMap]:
    """Convert a NetworkX graph to ``(node_count, edges, node_map)``.

    Nodes are numbered after sorting by ``str`` so the numbering does not
    depend on insertion order. Undirected graphs yield each edge in both
    directions. Multigraphs yield one edge per parallel edge.

    Args:
        G: ``nx.Graph``, ``nx.DiGraph``, ``nx.MultiGraph`` or ``nx.MultiDiGraph``.
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.

    Returns:
        Node count, list of :class:`Edge`, and the :class:`NodeMap`.

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
    """
    if not isinstance(G, nx.Graph):
        raise TypeError(f"Expected a NetworkX graph, got {type(G).__name__}")

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    directed = G.is_directed()

    edges: List[Edge] = []
    for u, v, data in G.edges(data=True):
        weight = data.get(weight_attr, default_weight)
        src, dst = node_map.to_index[u], node_map.to_index[v]
        edges.append(Edge(src, dst, weight))
        if not directed and src != dst:
            edges.append(Edge(dst, src, weight))

    logger.debug(
        f"Converted {type(G).__name__} with {len(node_map)} nodes "
        f"into {len(edges)} directed edges"
    )
    return len(node_map), edges, node_map
