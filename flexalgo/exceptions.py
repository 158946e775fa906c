"""Exceptions raised by flexalgo.

All of them derive from built-in exception types so callers may catch either
the specific class or the built-in one.
"""

from __future__ import annotations

from typing import Any


class InvalidNodeError(ValueError):
    """A node id lies outside ``[0, node_count)`` or is not an integer."""

    def __init__(self, node: Any, node_count: int, role: str = "node") -> None:
        self.node = node
        self.node_count = node_count
        self.role = role
        super().__init__(
            f"Invalid {role} {node!r}: expected an integer in [0, {node_count})."
        )


class NegativeWeightError(ValueError):
    """An edge carries a negative weight."""

    def __init__(self, source: int, target: int, weight: Any) -> None:
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(
            f"Edge {source} -> {target} has negative weight {weight!r}; "
            "shortest paths require non-negative weights."
        )


class InvalidHandleError(KeyError):
    """A heap handle was never issued or its item was already popped."""

    def __init__(self, handle: Any) -> None:
        self.handle = handle
        super().__init__(handle)

    def __str__(self) -> str:
        return f"Heap handle {self.handle!r} is not live."
