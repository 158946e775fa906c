"""Configuration for flexalgo solvers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SolverConfig:
    """Behavior switches for :class:`~flexalgo.algorithms.dijkstra.ShortestPathSolver`."""

    # Refuse edges with negative weight when building the adjacency.
    # Dijkstra's results are undefined for such graphs.
    reject_negative_weights: bool = True

    # Stop a single-target search as soon as the target is finalized.
    early_exit: bool = True


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
