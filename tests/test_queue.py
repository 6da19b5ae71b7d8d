import pytest

from calgkit.queue import Queue


def _filled(count=1000):
    queue = Queue()
    for value in range(count):
        queue.push_head(value)
    return queue


def _from_values(values):
    queue = Queue()
    for value in values:
        queue.push_tail(value)
    return queue


def test_new_queue_is_empty():
    queue = Queue()
    assert queue.is_empty() is True
    assert len(queue) == 0
    assert list(queue) == []


def test_push_tail_keeps_head_to_tail_order():
    queue = _from_values(["a", "b", "c"])
    assert queue.peek_head() == "a"
    assert queue.peek_tail() == "c"
    assert len(queue) == 3


def test_push_head_then_pop_tail_is_fifo():
    queue = _filled()
    popped = [queue.pop_tail() for _ in range(1000)]
    assert popped == list(range(1000))
    assert queue.is_empty()


def test_push_head_then_pop_head_is_lifo():
    queue = _filled()
    popped = [queue.pop_head() for _ in range(1000)]
    assert popped == list(reversed(range(1000)))
    assert queue.is_empty()


def test_push_tail_then_pop_head_is_fifo():
    queue = Queue()
    for value in range(100):
        queue.push_tail(value)
    assert [queue.pop_head() for _ in range(100)] == list(range(100))


def test_peek_does_not_remove():
    queue = Queue()
    queue.push_tail(1)
    queue.push_tail(2)
    assert queue.peek_head() == 1
    assert queue.peek_tail() == 2
    assert len(queue) == 2
    assert list(queue) == [1, 2]


def test_single_value_is_both_head_and_tail():
    queue = Queue()
    sentinel = object()
    queue.push_head(sentinel)
    assert queue.peek_head() is sentinel
    assert queue.peek_tail() is sentinel
    assert queue.pop_tail() is sentinel
    assert queue.is_empty()


def test_mixed_ends_keep_order():
    queue = Queue()
    queue.push_tail("middle")
    queue.push_head("front")
    queue.push_tail("back")
    assert list(queue) == ["front", "middle", "back"]


def test_empty_queue_pop_head_raises():
    queue = Queue()
    with pytest.raises(IndexError, match="pop from an empty queue"):
        queue.pop_head()
    assert len(queue) == 0


def test_empty_queue_pop_tail_raises():
    queue = Queue()
    with pytest.raises(IndexError, match="pop from an empty queue"):
        queue.pop_tail()
    assert len(queue) == 0


def test_empty_queue_peek_head_raises():
    queue = Queue()
    with pytest.raises(IndexError, match="peek at an empty queue"):
        queue.peek_head()
    assert queue.is_empty() is True


def test_empty_queue_peek_tail_raises():
    queue = Queue()
    with pytest.raises(IndexError, match="peek at an empty queue"):
        queue.peek_tail()
    assert queue.is_empty() is True


def test_pop_after_drain_raises():
    queue = _from_values([1])
    assert queue.pop_head() == 1
    with pytest.raises(IndexError, match="pop from an empty queue"):
        queue.pop_tail()


def test_none_values_can_be_stored():
    queue = Queue()
    queue.push_tail(None)
    assert queue.is_empty() is False
    assert queue.pop_head() is None
    assert queue.is_empty() is True


def test_clear_empties_queue():
    queue = _filled(50)
    queue.clear()
    assert queue.is_empty()
    assert len(queue) == 0
    with pytest.raises(IndexError, match="peek at an empty queue"):
        queue.peek_head()


def test_iteration_is_a_snapshot():
    queue = _from_values([1, 2, 3])
    seen = []
    for value in queue:
        seen.append(value)
        queue.push_tail(value)
    assert seen == [1, 2, 3]
    assert len(queue) == 6


def test_length_tracks_pushes_and_pops():
    queue = Queue()
    for count in range(1, 21):
        queue.push_tail(count)
        assert len(queue) == count
    for remaining in range(19, -1, -1):
        queue.pop_head()
        assert len(queue) == remaining