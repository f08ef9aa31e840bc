import pytest

from ds_lab.core.errors import Empty
from ds_lab.core.queue import Queue


def test_fifo_order():
    q = Queue()
    for v in [3, 1, 4, 1, 5]:
        q.enqueue(v)
    assert q.size() == 5
    assert [q.dequeue() for _ in range(5)] == [3, 1, 4, 1, 5]
    assert q.is_empty()


def test_peek_does_not_remove():
    q = Queue(["a", "b"])
    assert q.peek() == "a"
    assert q.peek() == "a"
    assert len(q) == 2
    assert q.dequeue() == "a"
    assert q.peek() == "b"


def test_empty_queue_raises():
    q = Queue()
    with pytest.raises(Empty, match="Queue is empty"):
        q.dequeue()
    with pytest.raises(Empty, match="Queue is empty"):
        q.peek()
    # repeating gives the same signal and leaves the queue usable
    with pytest.raises(Empty):
        q.dequeue()
    q.enqueue(7)
    assert q.dequeue() == 7


def test_iter_and_bool():
    q = Queue(range(3))
    assert list(q) == [0, 1, 2]
    assert len(q) == 3
    assert q
    assert not Queue()
    assert repr(q) == "Queue([0, 1, 2])"
