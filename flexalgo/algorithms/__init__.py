"""Core algorithms: the indexed priority heap and the Dijkstra solver."""

from flexalgo.algorithms.dijkstra import ShortestPathSolver, ShortestPathTree, dijkstra
from flexalgo.algorithms.heap import IndexedPriorityHeap, PriorityOracle
from flexalgo.algorithms.paths import path_cost, resolve_path

__all__ = [
    "IndexedPriorityHeap",
    "PriorityOracle",
    "ShortestPathSolver",
    "ShortestPathTree",
    "dijkstra",
    "path_cost",
    "resolve_path",
]
