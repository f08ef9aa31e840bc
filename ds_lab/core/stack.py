# ds_lab/core/stack.py
# LIFO stack emulated with two FIFO queues.
from __future__ import annotations
from typing import Generic, TypeVar

from .errors import Empty
from .queue import Queue

T = TypeVar("T")


class QueueStack(Generic[T]):
    """
    Stack on top of two queues, q1 and q2.

    Only one queue holds data at a time (the "active" one). push appends to it;
    pop moves everything but the newest element across to the other queue,
    dequeues the newest, and the other queue becomes active.
    Read front-to-back, the active queue is the stack bottom-to-top.
    """
    def __init__(self):
        self.q1: Queue[T] = Queue()
        self.q2: Queue[T] = Queue()
        self._active = self.q1

    def _inactive(self) -> Queue[T]:
        return self.q2 if self._active is self.q1 else self.q1

    def push(self, value: T) -> None:
        if self.is_empty():
            # both drained: fall back to the default queue
            self._active = self.q1
        self._active.enqueue(value)

    def pop(self) -> T:
        if self.is_empty():
            raise Empty("Stack is empty")
        src, dst = self._active, self._inactive()
        while src.size() > 1:
            dst.enqueue(src.dequeue())
        top = src.dequeue()
        self._active = dst
        return top

    def is_empty(self) -> bool:
        return self.q1.is_empty() and self.q2.is_empty()

    def size(self) -> int:
        return self.q1.size() + self.q2.size()

    def __len__(self): return self.size()
    def __bool__(self): return not self.is_empty()

    def __repr__(self):
        # bottom -> top
        return f"QueueStack({list(self._active)!r})"
