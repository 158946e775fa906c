"""Single-source shortest paths (Dijkstra) over an indexed priority heap.

The solver keeps one heap entry per node. Every node is pushed once at the
start keyed by its live distance, and an improving relaxation re-prioritizes
the existing entry with ``update_priority`` instead of pushing a duplicate.
The heap therefore never holds stale entries and total work is
O((N + E) log N).

Notes:
    - Nodes are the integers ``0 .. node_count - 1``.
    - Weights must be non-negative. Negative weights are rejected at
      construction unless ``SolverConfig.reject_negative_weights`` is False,
      in which case results are undefined.
    - When a target is given and ``SolverConfig.early_exit`` is True, the run
      stops as soon as the target is finalized; nodes still in the heap keep
      their TENTATIVE or UNVISITED state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple

from flexalgo.algorithms.heap import IndexedPriorityHeap
from flexalgo.algorithms.paths import resolve_path
from flexalgo.config import SOLVER_CONFIG, SolverConfig
from flexalgo.graph.edges import Adjacency, Neighbors, build_adjacency, check_node
from flexalgo.logging import get_logger
from flexalgo.types.base import INF, Cost, NodeID, NodeState

if TYPE_CHECKING:
    import networkx as nx

    from flexalgo.graph.convert import NodeMap

logger = get_logger(__name__)


class _DistanceOracle:
    """Ranks node ids by the run's live distance list."""

    __slots__ = ("dist",)

    def __init__(self, dist: List[Cost]) -> None:
        self.dist = dist

    def better(self, a: NodeID, b: NodeID) -> bool:
        return self.dist[a] < self.dist[b]


@dataclass(frozen=True)
class ShortestPathTree:
    """Outcome of one solver run.

    Attributes:
        source: Node the run started from.
        distances: Final cost from ``source`` for every finalized node.
        predecessors: Previous node on the best path for every finalized
            node other than ``source``.
        order: Finalized nodes in the order they were popped.
        states: Lifecycle state of each node when the run ended.
    """

    source: NodeID
    distances: Dict[NodeID, Cost]
    predecessors: Dict[NodeID, NodeID]
    order: List[NodeID]
    states: Tuple[NodeState, ...]

    def is_reachable(self, target: NodeID) -> bool:
        """True if ``target`` was finalized in this run."""
        check_node(target, len(self.states), "target")
        return self.states[target] is NodeState.FINALIZED

    def path_to(self, target: NodeID) -> Optional[Tuple[Cost, List[NodeID]]]:
        """Return ``(cost, path)`` to ``target``, or ``None`` if it was not finalized.

        Raises:
            InvalidNodeError: If ``target`` is out of range.
        """
        if not self.is_reachable(target):
            return None
        path = resolve_path(self.source, target, self.predecessors)
        assert path is not None
        return self.distances[target], path


class ShortestPathSolver:
    """Dijkstra solver over a fixed, read-only adjacency.

    Per-run state lives inside each query call, so one instance can answer
    any number of queries and may be shared between threads.

    Example:
        >>> edges = [(0, 1, 9), (0, 3, 2), (1, 4, 1), (3, 1, 4),
        ...          (3, 4, 6), (2, 1, 3), (4, 2, 7), (2, 0, 5)]
        >>> solver = ShortestPathSolver(5, edges)
        >>> solver.shortest_path(0, 2)
        (14, [0, 3, 1, 4, 2])
    """

    def __init__(
        self,
        node_count: int,
        edges: Iterable[Tuple[NodeID, NodeID, Cost]],
        config: Optional[SolverConfig] = None,
    ) -> None:
        """Build the adjacency from ``edges``.

        Args:
            node_count: Number of nodes.
            edges: Directed ``(source, target, weight)`` triples.
            config: Solver switches; defaults to ``SOLVER_CONFIG``.

        Raises:
            InvalidNodeError: If an edge endpoint is outside ``[0, node_count)``.
            NegativeWeightError: If a weight is negative and rejection is enabled.
        """
        self.config = config if config is not None else SOLVER_CONFIG
        self._adjacency: Adjacency = build_adjacency(
            node_count, edges, self.config.reject_negative_weights
        )
        self.node_count = node_count
        logger.debug(
            f"Built adjacency for {node_count} nodes and "
            f"{sum(len(n) for n in self._adjacency)} edges"
        )

    @classmethod
    def from_networkx(
        cls,
        G: nx.Graph,
        *,
        weight_attr: str = "weight",
        default_weight: Cost = 1,
        config: Optional[SolverConfig] = None,
    ) -> Tuple[ShortestPathSolver, NodeMap]:
        """Build a solver from a NetworkX graph.

        Returns:
            The solver and the :class:`~flexalgo.graph.convert.NodeMap` that
            translates node names to solver ids.
        """
        from flexalgo.graph.convert import from_networkx

        node_count, edges, node_map = from_networkx(
            G, weight_attr=weight_attr, default_weight=default_weight
        )
        return cls(node_count, edges, config=config), node_map

    @property
    def adjacency(self) -> Adjacency:
        return self._adjacency

    def neighbors(self, node: NodeID) -> Neighbors:
        """Return the outgoing ``(target, weight)`` pairs of ``node``."""
        check_node(node, self.node_count)
        return self._adjacency[node]

    def solve(self, source: NodeID, target: Optional[NodeID] = None) -> ShortestPathTree:
        """Run Dijkstra from ``source``.

        Args:
            source: Start node.
            target: Optional node of interest; enables early exit when
                ``config.early_exit`` is set.

        Returns:
            The :class:`ShortestPathTree` of the run.

        Raises:
            InvalidNodeError: If ``source`` or ``target`` is out of range.
        """
        n = self.node_count
        check_node(source, n, "source")
        if target is not None:
            check_node(target, n, "target")
        stop_at = target if self.config.early_exit else None

        dist: List[Cost] = [INF] * n
        dist[source] = 0
        pred: Dict[NodeID, NodeID] = {}
        states = [NodeState.UNVISITED] * n
        states[source] = NodeState.TENTATIVE
        order: List[NodeID] = []

        # Nodes are pushed in id order, so each node's handle equals its id.
        heap = IndexedPriorityHeap.from_oracle(_DistanceOracle(dist), range(n))

        while heap:
            node = heap.pop()
            node_cost = dist[node]
            if node_cost == INF:
                # Everything left in the heap is unreachable.
                break
            states[node] = NodeState.FINALIZED
            order.append(node)

            if node == stop_at:
                logger.debug(f"Target {node} finalized; stopping early")
                break

            for neighbor, weight in self._adjacency[node]:
                if states[neighbor] is NodeState.FINALIZED:
                    continue
                new_cost = node_cost + weight
                if new_cost < dist[neighbor]:
                    dist[neighbor] = new_cost
                    pred[neighbor] = node
                    states[neighbor] = NodeState.TENTATIVE
                    heap.update_priority(neighbor)

        logger.debug(
            f"Shortest-path run from {source}: finalized {len(order)} of {n} nodes"
        )
        return ShortestPathTree(
            source=source,
            distances={node: dist[node] for node in order},
            predecessors={node: pred[node] for node in order if node in pred},
            order=order,
            states=tuple(states),
        )

    def shortest_path(
        self, source: NodeID, target: NodeID
    ) -> Optional[Tuple[Cost, List[NodeID]]]:
        """Return ``(cost, path)`` from ``source`` to ``target``.

        ``path`` lists node ids from ``source`` to ``target`` inclusive and its
        edge weights sum to ``cost``. Returns ``None`` if ``target`` is
        unreachable.

        Raises:
            InvalidNodeError: If ``source`` or ``target`` is out of range.
        """
        return self.solve(source, target).path_to(target)

    def distances(self, source: NodeID) -> Dict[NodeID, Cost]:
        """Return the shortest cost from ``source`` to every reachable node."""
        return self.solve(source).distances

    def network_delay(self, source: NodeID) -> Optional[Tuple[Cost, List[NodeID]]]:
        """Return the time for a signal from ``source`` to reach every node.

        Returns:
            ``(max_cost, order)`` where ``max_cost`` is the largest shortest-path
            cost from ``source`` and ``order`` lists nodes in finalization
            order, or ``None`` if some node is unreachable.
        """
        tree = self.solve(source)
        if len(tree.order) < self.node_count:
            return None
        return max(tree.distances.values()), tree.order

    def paths(self, source: NodeID) -> Dict[NodeID, List[NodeID]]:
        """Return the shortest path from ``source`` to every reachable node."""
        tree = self.solve(source)
        result: Dict[NodeID, List[NodeID]] = {}
        for node in tree.order:
            path = resolve_path(source, node, tree.predecessors)
            assert path is not None
            result[node] = path
        return result


def dijkstra(
    node_count: int,
    edges: Iterable[Tuple[NodeID, NodeID, Cost]],
    source: NodeID,
    target: Optional[NodeID] = None,
    config: Optional[SolverConfig] = None,
) -> ShortestPathTree:
    """One-shot helper: build a solver and run it once."""
    return ShortestPathSolver(node_count, edges, config=config).solve(source, target)
