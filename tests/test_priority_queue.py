"""Tests for the decrease-key priority queue."""

import numpy as np
import pytest

from graph_voronoi.core.priority_queue import PriorityQueue


class TestPriorityQueue:
    """Test heap ordering and decrease-key."""

    def test_pops_in_priority_order(self):
        queue = PriorityQueue()
        for item, priority in [("c", 3.0), ("a", 1.0), ("d", 4.0), ("b", 2.0)]:
            queue.push(item, priority)

        popped = [queue.pop() for _ in range(4)]

        assert popped == [("a", 1.0), ("b", 2.0), ("c", 3.0), ("d", 4.0)]
        assert not queue

    def test_equal_priorities_pop_in_insertion_order(self):
        queue = PriorityQueue()
        for item in ["first", "second", "third"]:
            queue.push(item, 1.0)

        assert [queue.pop()[0] for _ in range(3)] == ["first", "second", "third"]

    def test_decrease_priority_moves_item_forward(self):
        queue = PriorityQueue()
        queue.push("a", 5.0)
        queue.push("b", 3.0)
        queue.push("c", 4.0)

        queue.decrease_priority("a", 1.0)

        assert queue.priority("a") == 1.0
        assert queue.peek() == ("a", 1.0)
        assert queue.pop() == ("a", 1.0)
        assert queue.pop() == ("b", 3.0)

    def test_membership_and_length(self):
        queue = PriorityQueue()
        queue.push("a", 1.0)
        queue.push("b", 2.0)

        assert "a" in queue
        assert len(queue) == 2

        queue.pop()
        assert "a" not in queue
        assert "b" in queue
        assert len(queue) == 1

    def test_duplicate_push_rejected(self):
        queue = PriorityQueue()
        queue.push("a", 1.0)

        with pytest.raises(KeyError):
            queue.push("a", 0.5)

    def test_decrease_unknown_item_rejected(self):
        queue = PriorityQueue()

        with pytest.raises(KeyError):
            queue.decrease_priority("missing", 1.0)

    def test_priority_increase_rejected(self):
        queue = PriorityQueue()
        queue.push("a", 1.0)

        with pytest.raises(ValueError):
            queue.decrease_priority("a", 2.0)

    def test_empty_queue_errors(self):
        queue = PriorityQueue()

        with pytest.raises(IndexError):
            queue.pop()
        with pytest.raises(IndexError):
            queue.peek()


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_operations_match_sorted_order(seed):
    """Pushes and decreases in random order still pop sorted."""
    rng = np.random.default_rng(seed)
    priorities = {i: float(p) for i, p in enumerate(rng.uniform(0, 100, size=50))}

    queue = PriorityQueue()
    for item, priority in priorities.items():
        queue.push(item, priority)

    for item in rng.choice(50, size=20, replace=False):
        item = int(item)
        priorities[item] = priorities[item] * float(rng.uniform(0, 1))
        queue.decrease_priority(item, priorities[item])

    popped = [queue.pop()[1] for _ in range(len(queue))]

    assert popped == sorted(priorities.values())
