# ds_lab/core/heap.py
# Binary heap with a pluggable "is-better-than" rule (min-heap, max-heap, or anything else).
from __future__ import annotations
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class Heap(Generic[T]):
    """
    Array-backed binary heap ordered by comparator(a, b) -> "a goes above b".

    Layout is 1-based: items[0] is an unused sentinel, the element at i has its
    parent at i // 2 and children at 2i and 2i + 1.

    Removal is the iterator protocol: next(heap) pops the root, so
    `for x in heap` drains the heap in priority order. The drain consumes the
    heap. An empty heap raises StopIteration, but add() refills it and next()
    yields again afterwards, so unlike a plain iterator an exhausted heap is
    not exhausted for good. Re-iterate after refilling to drain the new items.
    """
    def __init__(self, comparator: Callable[[T, T], bool]):
        self._comparator = comparator
        self.items: List[Optional[T]] = [None]
        self.count = 0

    @classmethod
    def new_min(cls) -> "Heap[T]":
        return cls(lambda a, b: a < b)

    @classmethod
    def new_max(cls) -> "Heap[T]":
        return cls(lambda a, b: a > b)

    @property
    def comparator(self) -> Callable[[T, T], bool]:
        return self._comparator

    def len(self) -> int:
        return self.count

    def is_empty(self) -> bool:
        return self.count == 0

    def add(self, value: T) -> None:
        """Insert value at the tail and sift it up."""
        # extraction shrinks storage to count + 1, so the tail slot is always new
        self.count += 1
        self.items.append(value)
        self._sift_up(self.count)

    def extend(self, values: Iterable[T]) -> None:
        for v in values:
            self.add(v)

    def peek(self) -> Optional[T]:
        """Root without removing it, or None if empty."""
        return self.items[1] if self.count else None

    def pop(self) -> Optional[T]:
        """Remove and return the root, or None if empty."""
        return next(self, None)

    # --- index arithmetic ---
    def _parent_idx(self, idx: int) -> int: return idx // 2
    def _left_child_idx(self, idx: int) -> int: return idx * 2
    def _right_child_idx(self, idx: int) -> int: return idx * 2 + 1
    def _children_present(self, idx: int) -> bool: return self._left_child_idx(idx) <= self.count

    def _better(self, i: int, j: int) -> bool:
        return self._comparator(self.items[i], self.items[j])

    def _swap(self, i: int, j: int) -> None:
        self.items[i], self.items[j] = self.items[j], self.items[i]

    def _sift_up(self, idx: int) -> None:
        while idx > 1:
            p = self._parent_idx(idx)
            if not self._better(idx, p):
                break
            self._swap(idx, p)
            idx = p

    def _best_child_idx(self, idx: int) -> int:
        left = self._left_child_idx(idx)
        right = self._right_child_idx(idx)
        if right > self.count:
            return left
        return left if self._better(left, right) else right

    def _sift_down(self, idx: int) -> None:
        while self._children_present(idx):
            child = self._best_child_idx(idx)
            if not self._better(child, idx):
                break
            self._swap(idx, child)
            idx = child

    # --- iterator protocol: each step pops the root ---
    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self.is_empty():
            raise StopIteration
        root = self.items[1]
        if self.count == 1:
            # only the sentinel is left behind
            self.count = 0
            self.items.pop()
            return root
        self.items[1] = self.items.pop()
        self.count -= 1
        self._sift_down(1)
        return root

    def __len__(self): return self.count
    def __bool__(self): return self.count > 0

    def __repr__(self):
        return f"Heap(count={self.count}, items={self.items[1:self.count + 1]!r})"


def MinHeap() -> Heap:
    """Heap whose root is the smallest element."""
    return Heap.new_min()


def MaxHeap() -> Heap:
    """Heap whose root is the largest element."""
    return Heap.new_max()
