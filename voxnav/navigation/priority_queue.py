"""Binary heap priority queue used by the graph search."""

import heapq
import itertools
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """
    Min-heap priority queue ordering items by a key function.

    Keys are evaluated when an item is pushed. If an item's key changes while
    it is queued, call :meth:`update` to recompute all keys and restore the
    heap invariant. Items with equal keys come out in insertion order.
    """

    def __init__(self, key: Callable[[T], Any] | None = None) -> None:
        """
        Creates an empty priority queue.

        :param key: Function returning the priority of an item, lowest first.
            Defaults to ordering by the items themselves.
        """
        self._key = key if key is not None else (lambda item: item)
        self._heap: list[list[Any]] = []
        self._counter = itertools.count()

    def push(self, item: T) -> None:
        """
        Inserts an item into the queue.

        :param item: The item to insert.
        """
        heapq.heappush(self._heap, [self._key(item), next(self._counter), item])

    def pop(self) -> T:
        """
        Removes and returns the item with the lowest key.

        :return: The highest priority item.
        :raises IndexError: if the queue is empty.
        """
        if not self._heap:
            raise IndexError("Cannot pop from an empty priority queue.")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> T:
        """
        Returns the item with the lowest key without removing it.

        :return: The highest priority item.
        :raises IndexError: if the queue is empty.
        """
        if not self._heap:
            raise IndexError("Cannot peek into an empty priority queue.")
        return self._heap[0][2]

    def update(self) -> None:
        """Recomputes the key of every queued item and re-heapifies."""
        for entry in self._heap:
            entry[0] = self._key(entry[2])
        heapq.heapify(self._heap)

    def empty(self) -> bool:
        return not self._heap

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)
