import random

import pytest

from flowspan.algorithms.base import EmptyQueueError
from flowspan.algorithms.heap import MinHeap
from flowspan.algorithms.types import WeightedEdge


def _assert_heap_property(heap: MinHeap) -> None:
    items = heap.heap
    for i in range(1, len(items)):
        assert heap._key(items[i]) >= heap._key(items[(i - 1) // 2])


class TestMinHeapBasic:
    def test_pops_in_ascending_order(self):
        heap = MinHeap()
        for value in [5, 3, 8, 1, 9, 2, 7]:
            heap.push(value)
        assert [heap.pop_min() for _ in range(7)] == [1, 2, 3, 5, 7, 8, 9]
        assert heap.is_empty()

    def test_peek_does_not_remove(self):
        heap = MinHeap()
        heap.push(4)
        heap.push(2)
        assert heap.peek_min() == 2
        assert heap.size() == 2
        assert heap.pop_min() == 2
        assert heap.peek_min() == 4

    def test_size_len_and_bool(self):
        heap = MinHeap()
        assert heap.size() == 0
        assert len(heap) == 0
        assert not heap
        heap.push(1)
        heap.push(1)
        assert heap.size() == 2
        assert len(heap) == 2
        assert heap
        assert not heap.is_empty()

    def test_key_func_orders_edges_by_cost(self):
        heap = MinHeap(key_func=lambda e: e.cost)
        heap.push(WeightedEdge(0, 1, 7))
        heap.push(WeightedEdge(0, 2, 3))
        heap.push(WeightedEdge(2, 1, 5))
        assert heap.pop_min() == WeightedEdge(0, 2, 3)
        assert heap.pop_min() == WeightedEdge(2, 1, 5)
        assert heap.pop_min() == WeightedEdge(0, 1, 7)

    def test_duplicates_are_kept(self):
        heap = MinHeap()
        for value in [2, 2, 1, 2]:
            heap.push(value)
        assert [heap.pop_min() for _ in range(4)] == [1, 2, 2, 2]


class TestMinHeapEmpty:
    def test_pop_empty_raises(self):
        with pytest.raises(EmptyQueueError, match="empty"):
            MinHeap().pop_min()

    def test_peek_empty_raises(self):
        with pytest.raises(EmptyQueueError):
            MinHeap().peek_min()

    def test_empty_queue_error_is_index_error(self):
        heap = MinHeap()
        heap.push(1)
        heap.pop_min()
        with pytest.raises(IndexError):
            heap.pop_min()


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 1234])
def test_random_interleaving_matches_sorted_model(seed):
    """Every pop returns an element whose cost is minimal among those held."""
    rng = random.Random(seed)
    heap: MinHeap[WeightedEdge] = MinHeap(key_func=lambda e: e.cost)
    model = []

    for step in range(500):
        if model and rng.random() < 0.4:
            popped = heap.pop_min()
            assert popped.cost == min(model)
            model.remove(popped.cost)
        else:
            cost = rng.randint(-20, 20)
            heap.push(WeightedEdge(step % 5, (step + 1) % 5, cost))
            model.append(cost)

        assert heap.size() == len(model)
        _assert_heap_property(heap)

    drained = []
    while heap:
        drained.append(heap.pop_min().cost)
    assert drained == sorted(model)
