# ds_lab/core/queue.py
# FIFO queue: the building block for the two-queue stack.
from __future__ import annotations
from collections import deque
from typing import Generic, Iterable, Iterator, TypeVar

from .errors import Empty

T = TypeVar("T")


class Queue(Generic[T]):
    """Oldest element out first."""
    def __init__(self, items: Iterable[T] = ()):
        self.q = deque(items)

    def enqueue(self, value: T) -> None:
        self.q.append(value)

    def dequeue(self) -> T:
        if not self.q:
            raise Empty("Queue is empty")
        return self.q.popleft()

    def peek(self) -> T:
        if not self.q:
            raise Empty("Queue is empty")
        return self.q[0]

    def size(self) -> int: return len(self.q)
    def is_empty(self) -> bool: return not self.q

    def __len__(self): return len(self.q)
    def __bool__(self): return bool(self.q)
    def __iter__(self) -> Iterator[T]: return iter(self.q)
    def __repr__(self): return f"Queue({list(self.q)!r})"
