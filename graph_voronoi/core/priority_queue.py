"""Binary min-heap with decrease-key support."""

import itertools
from typing import Any, Dict, Hashable, List, NamedTuple, Tuple


class _Entry(NamedTuple):
    priority: float
    order: int
    item: Any

    @property
    def key(self) -> Tuple[float, int]:
        return self.priority, self.order


class PriorityQueue:
    """
    Min-priority queue keyed by hashable items.

    An auxiliary map tracks each item's heap slot so a queued item's priority
    can be lowered in place instead of pushing a duplicate. Items with equal
    priority pop in insertion order.
    """

    def __init__(self):
        self._heap: List[_Entry] = []
        self._positions: Dict[Hashable, int] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: Hashable) -> bool:
        return item in self._positions

    def push(self, item: Hashable, priority: float) -> None:
        """Queue a new item. Raises KeyError if it is already queued."""
        if item in self._positions:
            raise KeyError(f"{item!r} is already queued")

        self._heap.append(_Entry(priority, next(self._counter), item))
        self._sift_up(len(self._heap) - 1)

    def decrease_priority(self, item: Hashable, priority: float) -> None:
        """Lower the priority of a queued item."""
        if item not in self._positions:
            raise KeyError(f"{item!r} is not queued")

        index = self._positions[item]
        entry = self._heap[index]
        if priority > entry.priority:
            raise ValueError(
                f"Cannot raise priority from {entry.priority} to {priority}"
            )

        self._heap[index] = entry._replace(priority=priority)
        self._sift_up(index)

    def priority(self, item: Hashable) -> float:
        return self._heap[self._positions[item]].priority

    def peek(self) -> Tuple[Any, float]:
        if not self._heap:
            raise IndexError("peek into an empty priority queue")
        top = self._heap[0]
        return top.item, top.priority

    def pop(self) -> Tuple[Any, float]:
        """Remove and return the (item, priority) pair with the lowest priority."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")

        last = self._heap.pop()
        if not self._heap:
            del self._positions[last.item]
            return last.item, last.priority

        top = self._heap[0]
        del self._positions[top.item]
        self._heap[0] = last
        self._sift_down(0)
        return top.item, top.priority

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        entry = heap[index]

        while index > 0:
            parent = (index - 1) >> 1
            parent_entry = heap[parent]
            if not entry.key < parent_entry.key:
                break
            heap[index] = parent_entry
            self._positions[parent_entry.item] = index
            index = parent

        heap[index] = entry
        self._positions[entry.item] = index

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        entry = heap[index]

        while True:
            child = 2 * index + 1
            if child >= size:
                break
            right = child + 1
            if right < size and heap[right].key < heap[child].key:
                child = right
            if not heap[child].key < entry.key:
                break
            heap[index] = heap[child]
            self._positions[heap[index].item] = index
            index = child

        heap[index] = entry
        self._positions[entry.item] = index
