"""flexalgo: generic algorithmic building blocks.

Primary API:
    IndexedPriorityHeap - Binary heap of stable handles with update_priority()
    ShortestPathSolver - Dijkstra over a node count plus edge triples
    ShortestPathTree - Distances, predecessors and node states of one run
    from_networkx() - Convert a NetworkX graph to solver input

Example:
    from flexalgo import ShortestPathSolver

    solver = ShortestPathSolver(3, [(0, 1, 4), (1, 2, 1), (0, 2, 7)])
    cost, path = solver.shortest_path(0, 2)  # (5, [0, 1, 2])
"""

from __future__ import annotations

from flexalgo import logging
from flexalgo.algorithms.dijkstra import ShortestPathSolver, ShortestPathTree, dijkstra
from flexalgo.algorithms.heap import IndexedPriorityHeap, PriorityOracle
from flexalgo.config import SOLVER_CONFIG, SolverConfig
from flexalgo.exceptions import (
    InvalidHandleError,
    InvalidNodeError,
    NegativeWeightError,
)
from flexalgo.graph.convert import NodeMap, from_networkx
from flexalgo.graph.edges import Edge
from flexalgo.types.base import INF, NodeState

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Algorithms
    "IndexedPriorityHeap",
    "PriorityOracle",
    "ShortestPathSolver",
    "ShortestPathTree",
    "dijkstra",
    # Graph input
    "Edge",
    "NodeMap",
    "from_networkx",
    # Types
    "NodeState",
    "INF",
    # Configuration
    "SolverConfig",
    "SOLVER_CONFIG",
    # Errors
    "InvalidHandleError",
    "InvalidNodeError",
    "NegativeWeightError",
    # Utilities
    "logging",
]
