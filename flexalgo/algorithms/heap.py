"""Indexed binary heap with in-place re-prioritization.

The heap stores opaque values in an arena and orders *handles* (stable
insertion indices) with a caller-supplied comparator. Priorities usually live
outside the heap, for example in a distance list that the comparator reads.
After the caller changes the priority behind a handle, ``update_priority``
repairs the heap in O(log n) because a handle-to-position index is kept in
lock-step with every swap.

Layout:
    - ``_values[h]``: value pushed under handle ``h`` (kept after pop).
    - ``_heap``: live handles in binary-heap array order; children of slot
      ``i`` sit at ``2i + 1`` and ``2i + 2``.
    - ``_position[h]``: current slot of ``h`` in ``_heap``, or ``None`` once
      ``h`` has been popped.

Invariants:
    - ``_heap[_position[h]] == h`` for every live handle ``h``.
    - For every non-root slot ``i`` with parent ``p``,
      ``compare(value(_heap[i]), value(_heap[p]))`` is false.

Handle policy:
    Operations that take a handle raise ``InvalidHandleError`` when the handle
    was never issued or was already popped.
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    List,
    Optional,
    Protocol,
    Tuple,
    TypeVar,
)

from flexalgo.exceptions import InvalidHandleError
from flexalgo.types.base import Handle

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

#: ``compare(a, b)`` is True iff ``a`` belongs closer to the root than ``b``.
Comparator = Callable[[T, T], bool]


class PriorityOracle(Protocol[T_contra]):
    """Owner of live priorities that can rank two heap values."""

    def better(self, a: T_contra, b: T_contra) -> bool:
        """Return True iff ``a`` should be served before ``b``."""
        ...


class IndexedPriorityHeap(Generic[T]):
    """Binary heap of handles ordered by an external comparator.

    Example:
        >>> dist = [7, 3, 9]
        >>> heap = IndexedPriorityHeap(lambda a, b: dist[a] < dist[b], range(3))
        >>> dist[2] = 1
        >>> heap.update_priority(2)
        True
        >>> heap.pop()
        2
    """

    def __init__(self, compare: Comparator, values: Iterable[T] = ()) -> None:
        """Create a heap and push ``values`` in iteration order.

        Args:
            compare: Ordering predicate; it may read mutable external state.
            values: Initial values. Their handles are ``0, 1, 2, ...``.
        """
        self._compare = compare
        self._values: List[T] = []
        self._heap: List[Handle] = []
        self._position: List[Optional[int]] = []
        for value in values:
            self.push(value)

    @classmethod
    def from_oracle(
        cls, oracle: PriorityOracle[T], values: Iterable[T] = ()
    ) -> IndexedPriorityHeap[T]:
        """Create a heap that ranks values with ``oracle.better``."""
        return cls(oracle.better, values)

    @classmethod
    def min_heap(
        cls, values: Iterable[T] = (), key: Optional[Callable[[T], Any]] = None
    ) -> IndexedPriorityHeap[T]:
        """Create a heap that serves the smallest value (or ``key(value)``) first."""
        if key is None:
            return cls(lambda a, b: a < b, values)
        return cls(lambda a, b: key(a) < key(b), values)

    @classmethod
    def max_heap(
        cls, values: Iterable[T] = (), key: Optional[Callable[[T], Any]] = None
    ) -> IndexedPriorityHeap[T]:
        """Create a heap that serves the largest value (or ``key(value)``) first."""
        if key is None:
            return cls(lambda a, b: a > b, values)
        return cls(lambda a, b: key(a) > key(b), values)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, handle: object) -> bool:
        """Return True if ``handle`` is live (issued and not yet popped)."""
        return (
            isinstance(handle, int)
            and 0 <= handle < len(self._position)
            and self._position[handle] is not None
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._heap)}, issued={len(self._values)})"

    def is_empty(self) -> bool:
        return not self._heap

    #
    # Mutation
    #
    def push(self, value: T) -> Handle:
        """Insert ``value`` and return its handle.

        Duplicate values are allowed; each push gets a distinct handle.
        """
        handle = len(self._values)
        self._values.append(value)
        self._position.append(len(self._heap))
        self._heap.append(handle)
        self._sift_up(len(self._heap) - 1)
        return handle

    def pop(self) -> Optional[T]:
        """Remove and return the best value, or ``None`` if the heap is empty."""
        item = self.pop_with_handle()
        if item is None:
            return None
        return item[1]

    def pop_with_handle(self) -> Optional[Tuple[Handle, T]]:
        """Remove the best entry and return ``(handle, value)``.

        The returned handle stops being live. Returns ``None`` if the heap is
        empty.
        """
        if not self._heap:
            return None
        best = self._heap[0]
        last = len(self._heap) - 1
        if last > 0:
            self._swap(0, last)
        self._heap.pop()
        self._position[best] = None
        if self._heap:
            self._sift_down(0)
        return best, self._values[best]

    def update_priority(self, handle: Handle) -> bool:
        """Restore heap order after the priority behind ``handle`` changed.

        The new priority may be better or worse than before, so a sift-up is
        attempted first and a sift-down only if the entry did not rise.

        Args:
            handle: Live handle whose priority changed.

        Returns:
            True if the entry changed position.

        Raises:
            InvalidHandleError: If ``handle`` is not live.
        """
        pos = self._live_position(handle)
        new_pos = self._sift_up(pos)
        if new_pos == pos:
            new_pos = self._sift_down(pos)
        return new_pos != pos

    #
    # Queries
    #
    def peek(self) -> Optional[T]:
        """Return the best value without removing it, or ``None`` if empty."""
        if not self._heap:
            return None
        return self._values[self._heap[0]]

    def peek_handle(self) -> Optional[Handle]:
        """Return the handle of the best value, or ``None`` if empty."""
        if not self._heap:
            return None
        return self._heap[0]

    def value(self, handle: Handle) -> T:
        """Return the value stored under a live ``handle``.

        Raises:
            InvalidHandleError: If ``handle`` is not live.
        """
        self._live_position(handle)
        return self._values[handle]

    def position_of(self, handle: Handle) -> int:
        """Return the current array slot of a live ``handle``.

        Raises:
            InvalidHandleError: If ``handle`` is not live.
        """
        return self._live_position(handle)

    #
    # Internals
    #
    def _live_position(self, handle: Handle) -> int:
        if handle not in self:
            raise InvalidHandleError(handle)
        pos = self._position[handle]
        assert pos is not None
        return pos

    def _better(self, i: int, j: int) -> bool:
        """True iff the entry at slot ``i`` outranks the entry at slot ``j``."""
        return self._compare(self._values[self._heap[i]], self._values[self._heap[j]])

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._position[heap[i]] = i
        self._position[heap[j]] = j

    def _sift_up(self, pos: int) -> int:
        """Move the entry at ``pos`` toward the root; return its final slot."""
        while pos > 0:
            parent = (pos - 1) // 2
            if not self._better(pos, parent):
                break
            self._swap(pos, parent)
            pos = parent
        return pos

    def _sift_down(self, pos: int) -> int:
        """Move the entry at ``pos`` toward the leaves; return its final slot."""
        size = len(self._heap)
        while True:
            left = 2 * pos + 1
            if left >= size:
                break
            child = left
            right = left + 1
            if right < size and self._better(right, left):
                child = right
            if not self._better(child, pos):
                break
            self._swap(pos, child)
            pos = child
        return pos
