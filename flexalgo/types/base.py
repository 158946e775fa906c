"""Base type aliases, sentinels and enums shared by flexalgo algorithms."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Union

#: Numeric path cost (edge weights and accumulated distances).
Cost = Union[int, float]

#: Node identifier: an integer in ``[0, node_count)``.
NodeID = int

#: Stable identifier of a value pushed into an IndexedPriorityHeap.
Handle = int

#: Distance of a node not yet reached. Never returned to callers as a cost.
INF = math.inf


class NodeState(IntEnum):
    """Lifecycle of a node during one shortest-path run.

    UNVISITED -> TENTATIVE on the first improving relaxation, and
    TENTATIVE -> FINALIZED when popped from the heap. The source starts
    TENTATIVE with distance zero. FINALIZED is terminal.
    """

    UNVISITED = 0
    TENTATIVE = 1
    FINALIZED = 2
