import pytest

from tinyhttpd.queues import Queue


def test_queue_order_from_source():
    queue = Queue()
    for i in range(10):
        queue.push("".join(chr(ord("a") + i + k) for k in range(3)))
    assert len(queue) == 10
    seen = []
    for _ in range(len(queue)):
        seen.append(queue.peek())
        queue.pop()
    assert seen[0] == "abc"
    assert seen[1] == "bcd"
    assert seen[9] == "jkl"
    assert len(queue) == 0


def test_peek_does_not_remove():
    queue = Queue()
    queue.push(1)
    queue.push(2)
    assert queue.peek() == 1
    assert queue.peek() == 1
    assert len(queue) == 2


def test_truthiness_tracks_contents():
    queue = Queue()
    assert not queue
    queue.push("x")
    assert queue
    queue.pop()
    assert not queue


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Queue().peek()


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Queue().pop()


def test_drain_with_truthiness():
    queue = Queue()
    for item in ["a", "b", "c"]:
        queue.push(item)
    drained = []
    while queue:
        drained.append(queue.peek())
        queue.pop()
    assert drained == ["a", "b", "c"]