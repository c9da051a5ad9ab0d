#!/usr/bin/env python3

"""
Unit tests for the priority queue.
"""

import numpy as np
import pytest

from voxnav.navigation import PriorityQueue


class Item:
    """Mutable item with a priority."""

    def __init__(self, priority: float) -> None:
        self.priority = priority


def test_priority_queue_empty() -> None:
    queue: PriorityQueue[int] = PriorityQueue()
    assert queue.empty()
    assert len(queue) == 0

    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.peek()


def test_priority_queue_push_pop() -> None:
    queue: PriorityQueue[int] = PriorityQueue()
    for value in [5, 1, 4, 2, 3]:
        queue.push(value)

    assert len(queue) == 5
    assert queue.peek() == 1
    assert [queue.pop() for _ in range(5)] == [1, 2, 3, 4, 5]
    assert queue.empty()


def test_priority_queue_key_and_ties() -> None:
    queue: PriorityQueue[str] = PriorityQueue(key=len)
    for word in ["ccc", "a", "bb", "x", "yyy"]:
        queue.push(word)

    # Equal keys come out in insertion order.
    assert [queue.pop() for _ in range(len(queue))] == ["a", "x", "bb", "ccc", "yyy"]


def test_priority_queue_update() -> None:
    items = [Item(priority) for priority in (3.0, 1.0, 2.0)]
    queue: PriorityQueue[Item] = PriorityQueue(key=lambda item: item.priority)
    for item in items:
        queue.push(item)

    # Mutating a queued item only takes effect after an update.
    items[0].priority = 0.5
    assert queue.peek() is items[1]
    queue.update()
    assert queue.pop() is items[0]
    assert queue.pop() is items[1]
    assert queue.pop() is items[2]


def test_priority_queue_clear() -> None:
    queue: PriorityQueue[int] = PriorityQueue()
    queue.push(1)
    queue.push(2)
    queue.clear()
    assert queue.empty()


def test_priority_queue_matches_sorted_model() -> None:
    """Random push / pop / update sequences always pop the minimum remaining item."""
    rng = np.random.default_rng(seed=1234)
    queue: PriorityQueue[Item] = PriorityQueue(key=lambda item: item.priority)
    model: list[Item] = []

    for _ in range(500):
        op = rng.integers(0, 3)
        if op == 0 or not model:
            item = Item(float(rng.uniform(0.0, 100.0)))
            queue.push(item)
            model.append(item)
        elif op == 1:
            popped = queue.pop()
            expected = min(model, key=lambda item: item.priority)
            assert popped.priority == expected.priority
            model.remove(popped)
        else:
            target = model[int(rng.integers(0, len(model)))]
            target.priority = float(rng.uniform(0.0, 100.0))
            queue.update()
        assert len(queue) == len(model)

    remaining = [queue.pop().priority for _ in range(len(queue))]
    assert remaining == sorted(item.priority for item in model)
