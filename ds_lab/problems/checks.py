from __future__ import annotations
from typing import Sequence

from ..core.heap import Heap
from ..core.stack import QueueStack
from .workloads import push_pop_script, random_ints


def check_heap_property(heap: Heap) -> None:
    """No child may be strictly better than its parent under the heap's comparator."""
    if len(heap.items) != heap.count + 1:
        raise AssertionError(f"storage holds {len(heap.items) - 1} slots for count={heap.count}")
    better = heap.comparator
    for i in range(1, heap.count + 1):
        for c in (2 * i, 2 * i + 1):
            if c <= heap.count and better(heap.items[c], heap.items[i]):
                raise AssertionError(f"child {c} ({heap.items[c]!r}) beats parent {i} ({heap.items[i]!r})")


def check_stack_invariant(stack: QueueStack) -> None:
    """At most one of the two queues holds data."""
    if not stack.q1.is_empty() and not stack.q2.is_empty():
        raise AssertionError(f"both queues non-empty: q1={stack.q1!r}, q2={stack.q2!r}")


def check_drain_sorted(values: Sequence, descending: bool = False) -> None:
    for a, b in zip(values, values[1:]):
        if (a < b) if descending else (a > b):
            raise AssertionError(f"out of order: {a!r} then {b!r}")


def sanity_check_structures(n: int = 1_000, seed: int = 0) -> str:
    """Push random data through every structure, checking invariants after each step."""
    values = random_ints(n, seed)
    for descending in (False, True):
        heap = Heap.new_max() if descending else Heap.new_min()
        for v in values:
            heap.add(v)
            check_heap_property(heap)
        drained = []
        while heap:
            drained.append(next(heap))
            check_heap_property(heap)
        check_drain_sorted(drained, descending)
        if len(drained) != n:
            raise AssertionError(f"drained {len(drained)} of {n}")

    stack: QueueStack[int] = QueueStack()
    script = push_pop_script(n, seed)
    for op, v in script:
        if op == "push":
            stack.push(v)
        else:
            stack.pop()
        check_stack_invariant(stack)
    if not stack.is_empty():
        raise AssertionError("stack not empty after script")
    return f"OK: {n} values through min/max heap; {len(script)} stack ops; invariants held."
