# ds_lab/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import os
import time
from pathlib import Path
from typing import Callable, List, Tuple

from ..core.metrics import BenchResult
from ..problems import workloads as wl

# ---- Tunables (overridable via environment variables) -----------------------
SIZES   = os.getenv("DS_LAB_SIZES", "100,1000,5000")   # comma-separated workload sizes
SEED    = int(os.getenv("DS_LAB_SEED", "0"))           # numpy generator seed
REPEATS = int(os.getenv("DS_LAB_REPEATS", "1"))        # best-of-N timing

DEFAULT_OUT = Path(__file__).with_name("results.json")

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def parse_sizes(text: str) -> List[int]:
    sizes = [int(s) for s in text.split(",") if s.strip()]
    if not sizes or any(n < 0 for n in sizes):
        raise ValueError(f"bad sizes: {text!r}")
    return sizes

def _load_workloads(n: int, seed: int) -> List[Tuple[str, Callable[[], BenchResult]]]:
    """(label, thunk) pairs for one size; each thunk runs one timed workload."""
    values = wl.random_ints(n, seed)
    script = wl.push_pop_script(n, seed)
    return [
        ("Queue fifo",       lambda: wl.run_queue_fifo(values)),
        ("QueueStack",       lambda: wl.run_stack_script(script)),
        ("list stack",       lambda: wl.run_list_stack_script(script)),
        ("Heap(min) sort",   lambda: wl.run_heap_sort(values)),
        ("Heap(max) sort",   lambda: wl.run_heap_sort(values, descending=True)),
        ("heapq sort",       lambda: wl.run_heapq_sort(values)),
    ]

def _best_of(fn: Callable[[], BenchResult], repeats: int) -> BenchResult:
    best = fn()
    for _ in range(repeats - 1):
        r = fn()
        if r.time_s < best.time_s:
            best = r
    return best

def run(sizes: List[int], seed: int = SEED, repeats: int = REPEATS) -> List[dict]:
    rows = []
    for n in sizes:
        for name, fn in _load_workloads(n, seed):
            print(f"→ Running {name} (n={n}) ...")
            try:
                r = _best_of(fn, max(repeats, 1))
                print(
                    f"  {r.structure}: "
                    f"{'OK' if r.success else 'FAIL'} "
                    f"ops={r.ops}, "
                    f"time={_fmt_time(r.time_s)}s, "
                    f"peak={r.peak_kb}KB"
                )
                rows.append(r.as_row())
            except Exception as e:
                print(f"  {name}: ERROR {repr(e)}")
                rows.append(BenchResult(name, "n/a", n, False, 0, None, None, repr(e)).as_row())
    return rows

def main(argv=None):
    ap = argparse.ArgumentParser(description="Benchmark the queue, two-queue stack and heap against built-ins.")
    ap.add_argument("--sizes", default=SIZES, help="comma-separated workload sizes")
    ap.add_argument("--seed", type=int, default=SEED, help="random seed")
    ap.add_argument("--repeats", type=int, default=REPEATS, help="repetitions per workload (best time kept)")
    ap.add_argument("--out", default=str(DEFAULT_OUT), help="path of the JSON results file")
    args = ap.parse_args(argv)

    rows = run(parse_sizes(args.sizes), seed=args.seed, repeats=args.repeats)
    out = {"results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    out_path = Path(args.out)
    out_path.write_text(json.dumps(out, indent=2))
    print(f"[saved] {out_path}")
    return out

if __name__ == "__main__":
    main()
