"""Shared typing constructs for flexalgo.

Type aliases, the unreachable-distance sentinel and the node lifecycle enum.
Contains no algorithmic logic.
"""

from flexalgo.types.base import INF, Cost, Handle, NodeID, NodeState

__all__ = [
    # Enums
    "NodeState",
    # Type aliases and constants
    "Cost",
    "Handle",
    "NodeID",
    "INF",
]
