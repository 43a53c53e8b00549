"""Array-backed binary min-heap.

The heap orders items by a numeric key extracted with ``key_func`` (the item
itself when omitted). The smallest key sits at index 0 and every element's key
is greater than or equal to its parent's. Ties are resolved arbitrarily.
"""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

from flowspan.algorithms.base import EmptyQueueError

T = TypeVar("T")
KeyFunc = Callable[[T], float]


class MinHeap(Generic[T]):
    """Binary min-heap with explicit sift-up/sift-down."""

    def __init__(self, key_func: Optional[KeyFunc] = None) -> None:
        self.key_func = key_func
        self.heap: List[T] = []

    def _key(self, item: T):
        return self.key_func(item) if self.key_func else item

    def push(self, item: T) -> None:
        """Add an item in O(log n)."""
        self.heap.append(item)
        self._sift_up(len(self.heap) - 1)

    def peek_min(self) -> T:
        """Return the minimum item without removing it.

        Raises:
            EmptyQueueError: If the heap holds no items.
        """
        if not self.heap:
            raise EmptyQueueError("Priority queue is empty")
        return self.heap[0]

    def pop_min(self) -> T:
        """Remove and return the minimum item in O(log n).

        Raises:
            EmptyQueueError: If the heap holds no items.
        """
        if not self.heap:
            raise EmptyQueueError("Priority queue is empty")

        result = self.heap[0]
        last = self.heap.pop()
        if self.heap:
            self.heap[0] = last
            self._sift_down(0)
        return result

    def is_empty(self) -> bool:
        return not self.heap

    def size(self) -> int:
        return len(self.heap)

    def _sift_up(self, index: int) -> None:
        heap = self.heap
        item = heap[index]
        item_key = self._key(item)
        while index > 0:
            parent_index = (index - 1) // 2
            parent = heap[parent_index]
            if not item_key < self._key(parent):
                break
            heap[index] = parent
            index = parent_index
        heap[index] = item

    def _sift_down(self, index: int) -> None:
        heap = self.heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index

            if left < size and self._key(heap[left]) < self._key(heap[smallest]):
                smallest = left
            if right < size and self._key(heap[right]) < self._key(heap[smallest]):
                smallest = right
            if smallest == index:
                return

            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest

    def __len__(self) -> int:
        return len(self.heap)

    def __bool__(self) -> bool:
        """Return True if the heap holds at least one item."""
        return bool(self.heap)
