# ds_lab/core/metrics.py
from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Optional
import time, tracemalloc

@dataclass
class BenchResult:
    structure: str
    workload: str
    n: int
    success: bool
    ops: int
    time_s: Optional[float]    # None when the workload raised
    peak_kb: Optional[int]
    error: Optional[str] = None

    def as_row(self) -> dict:
        return asdict(self)

class MeasuredRun:
    """
    Times one workload against one structure and tracks its peak traced memory.

    Inside the with-block call .tick() for every push/pop/add the workload makes;
    after it, .result(ok) packs the measurements into a BenchResult.
    """
    def __init__(self, structure: str, workload: str, n: int) -> None:
        self.structure = structure
        self.workload = workload
        self.n = n
        self.ops = 0
        self.elapsed: float = 0.0
        self.peak_kb: int = 0
        self._t0 = 0.0

    def tick(self, k: int = 1) -> None:
        self.ops += k

    def __enter__(self) -> "MeasuredRun":
        tracemalloc.start()
        self._t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.elapsed = time.perf_counter() - self._t0
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
        self.peak_kb = peak // 1024
        return False  # let workload errors reach the runner

    def result(self, ok: bool, error: Optional[str] = None) -> BenchResult:
        return BenchResult(self.structure, self.workload, self.n, ok, self.ops,
                           self.elapsed, self.peak_kb, error)
