# ds_lab/problems/workloads.py
# Random workloads for the structures in core/, plus runners that time them.
# Each run_* function returns a BenchResult; success means the output matched a plain-Python reference.
from __future__ import annotations
import heapq
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..core.heap import Heap
from ..core.metrics import BenchResult, MeasuredRun
from ..core.queue import Queue
from ..core.stack import QueueStack

Op = Tuple[str, Optional[int]]  # ("push", value) or ("pop", None)


def random_ints(n: int, seed: int = 0) -> List[int]:
    """n integers in [0, 10n), duplicates allowed."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, max(10 * n, 1), size=n).tolist()


def push_pop_script(n: int, seed: int = 0, p_push: float = 0.6) -> List[Op]:
    """
    n pushes interleaved with pops, then enough pops to drain.
    A pop is only emitted while something is on the stack, so the script never underflows.
    """
    rng = np.random.default_rng(seed)
    values = rng.integers(0, max(10 * n, 1), size=n).tolist()
    ops: List[Op] = []
    depth = 0
    i = 0
    while i < n:
        if depth > 0 and rng.random() >= p_push:
            ops.append(("pop", None))
            depth -= 1
        else:
            ops.append(("push", values[i]))
            depth += 1
            i += 1
    ops.extend([("pop", None)] * depth)
    return ops


def _reference_pops(script: Sequence[Op]) -> List[int]:
    stack, out = [], []
    for op, v in script:
        if op == "push":
            stack.append(v)
        else:
            out.append(stack.pop())
    return out


def run_heap_sort(values: Sequence[int], descending: bool = False) -> BenchResult:
    expected = sorted(values, reverse=descending)
    heap = Heap.new_max() if descending else Heap.new_min()
    out = []
    with MeasuredRun("Heap(max)" if descending else "Heap(min)", "sort", len(values)) as meter:
        for v in values:
            heap.add(v)
            meter.tick()
        for x in heap:
            out.append(x)
            meter.tick()
    ok = out == expected and heap.is_empty()
    return meter.result(ok, None if ok else "drain order mismatch")


def run_heapq_sort(values: Sequence[int]) -> BenchResult:
    """Baseline: the standard library heap."""
    expected = sorted(values)
    h: List[int] = []
    out = []
    with MeasuredRun("heapq", "sort", len(values)) as meter:
        for v in values:
            heapq.heappush(h, v)
            meter.tick()
        while h:
            out.append(heapq.heappop(h))
            meter.tick()
    ok = out == expected
    return meter.result(ok, None if ok else "drain order mismatch")


def run_stack_script(script: Sequence[Op]) -> BenchResult:
    expected = _reference_pops(script)
    n = sum(1 for op, _ in script if op == "push")
    s: QueueStack[int] = QueueStack()
    out = []
    with MeasuredRun("QueueStack", "push/pop", n) as meter:
        for op, v in script:
            if op == "push":
                s.push(v)
            else:
                out.append(s.pop())
            meter.tick()
    ok = out == expected and s.is_empty()
    return meter.result(ok, None if ok else "pop order mismatch")


def run_list_stack_script(script: Sequence[Op]) -> BenchResult:
    """Baseline: list.append / list.pop."""
    expected = _reference_pops(script)
    n = sum(1 for op, _ in script if op == "push")
    stack: List[int] = []
    out = []
    with MeasuredRun("list", "push/pop", n) as meter:
        for op, v in script:
            if op == "push":
                stack.append(v)
            else:
                out.append(stack.pop())
            meter.tick()
    ok = out == expected and not stack
    return meter.result(ok, None if ok else "pop order mismatch")


def run_queue_fifo(values: Sequence[int]) -> BenchResult:
    q: Queue[int] = Queue()
    out = []
    with MeasuredRun("Queue", "fifo", len(values)) as meter:
        for v in values:
            q.enqueue(v)
            meter.tick()
        while not q.is_empty():
            out.append(q.dequeue())
            meter.tick()
    ok = out == list(values) and q.is_empty()
    return meter.result(ok, None if ok else "dequeue order mismatch")
