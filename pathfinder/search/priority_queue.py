"""
Binary min-heap priority queue used by UCS, A* and Greedy search.

There is no decrease-key. Strategies insert a fresh entry when they find a
cheaper route and skip stale entries at extraction time, so the heap can
hold up to O(edges) entries. Equal priorities come out in whatever order
the heap structure gives; there is no secondary key.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from pathfinder.exceptions import EmptyQueueError

T = TypeVar("T")


@dataclass
class _Entry(Generic[T]):
    element: T
    priority: float


class PriorityQueue(Generic[T]):
    """Array-backed binary min-heap keyed by a numeric priority."""

    def __init__(self) -> None:
        self._items: list[_Entry[T]] = []

    def insert(self, element: T, priority: float) -> None:
        """Add an element in O(log n)."""
        self._items.append(_Entry(element, priority))
        self._sift_up(len(self._items) - 1)

    def extract_min(self) -> T:
        """
        Remove and return the element with the smallest priority.

        Raises:
            EmptyQueueError: If the queue is empty
        """
        if not self._items:
            raise EmptyQueueError("extract_min from an empty priority queue")

        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return root.element

    def peek(self) -> T:
        """Return the minimum element without removing it."""
        if not self._items:
            raise EmptyQueueError("peek into an empty priority queue")
        return self._items[0].element

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def _sift_up(self, index: int) -> None:
        items = self._items
        item = items[index]
        while index > 0:
            parent_index = (index - 1) // 2
            parent = items[parent_index]
            if item.priority >= parent.priority:
                break
            items[index] = parent
            index = parent_index
        items[index] = item

    def _sift_down(self, index: int) -> None:
        items = self._items
        length = len(items)
        item = items[index]

        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = None

            if left < length and items[left].priority < item.priority:
                smallest = left
            if right < length:
                best = item if smallest is None else items[smallest]
                if items[right].priority < best.priority:
                    smallest = right

            if smallest is None:
                break

            items[index] = items[smallest]
            index = smallest

        items[index] = item

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._items)})"
