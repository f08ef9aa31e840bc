import json

import pytest

from ds_lab.benchmarks import plot_results, run_all
from ds_lab.core.heap import Heap
from ds_lab.core.metrics import BenchResult, MeasuredRun
from ds_lab.plots.plotting import bar_compare
from ds_lab.problems import checks, workloads


def test_random_ints_is_seeded():
    assert workloads.random_ints(50, seed=3) == workloads.random_ints(50, seed=3)
    assert len(workloads.random_ints(50)) == 50


def test_push_pop_script_never_underflows():
    script = workloads.push_pop_script(300, seed=1)
    depth = 0
    for op, _ in script:
        depth += 1 if op == "push" else -1
        assert depth >= 0
    assert depth == 0
    assert sum(op == "push" for op, _ in script) == 300


@pytest.mark.parametrize("runner", [
    lambda v, s: workloads.run_queue_fifo(v),
    lambda v, s: workloads.run_heap_sort(v),
    lambda v, s: workloads.run_heap_sort(v, descending=True),
    lambda v, s: workloads.run_heapq_sort(v),
    lambda v, s: workloads.run_stack_script(s),
    lambda v, s: workloads.run_list_stack_script(s),
])
def test_runners_succeed(runner):
    values = workloads.random_ints(200, seed=5)
    script = workloads.push_pop_script(200, seed=5)
    r = runner(values, script)
    assert isinstance(r, BenchResult)
    assert r.success, r.error
    assert r.n == 200
    assert r.time_s >= 0


def test_sanity_check_structures():
    assert checks.sanity_check_structures(300, seed=2).startswith("OK:")


def test_check_heap_property_catches_violation():
    heap = Heap.new_min()
    heap.extend([1, 2, 3])
    heap.items[1], heap.items[3] = heap.items[3], heap.items[1]
    with pytest.raises(AssertionError):
        checks.check_heap_property(heap)


def test_check_drain_sorted():
    checks.check_drain_sorted([1, 1, 2, 5])
    checks.check_drain_sorted([5, 2, 2], descending=True)
    with pytest.raises(AssertionError):
        checks.check_drain_sorted([2, 1])


def test_measured_run_builds_result():
    with MeasuredRun("list", "alloc", 10_000) as meter:
        _ = [0] * 10_000
        meter.tick()
        meter.tick(2)
    r = meter.result(True)
    assert isinstance(r, BenchResult)
    assert (r.structure, r.workload, r.n, r.ops) == ("list", "alloc", 10_000, 3)
    assert r.success and r.error is None
    assert r.time_s >= 0
    # a 10k-element list is ~80KB
    assert r.peak_kb > 0


def test_measured_run_does_not_swallow_errors():
    with pytest.raises(KeyError):
        with MeasuredRun("dict", "lookup", 1) as meter:
            {}["missing"]
    assert meter.result(False, "boom").error == "boom"


def test_runner_ops_count_every_operation():
    values = workloads.random_ints(40, seed=4)
    script = workloads.push_pop_script(40, seed=4)
    assert workloads.run_heap_sort(values).ops == 80
    assert workloads.run_queue_fifo(values).ops == 80
    assert workloads.run_stack_script(script).ops == len(script) == 80


def test_error_row_allows_missing_measurements():
    row = BenchResult("Heap(min)", "n/a", 5, False, 0, None, None, "RuntimeError()").as_row()
    assert row["time_s"] is None and row["peak_kb"] is None


def test_parse_sizes():
    assert run_all.parse_sizes("10, 20,30") == [10, 20, 30]
    with pytest.raises(ValueError):
        run_all.parse_sizes("")


def test_run_all_then_plot(tmp_path, capsys):
    out = tmp_path / "results.json"
    doc = run_all.main(["--sizes", "20,50", "--seed", "1", "--out", str(out)])
    assert len(doc["results"]) == 12
    assert all(r["success"] for r in doc["results"])
    assert json.loads(out.read_text())["results"] == doc["results"]
    assert "→ Running Heap(min) sort (n=20)" in capsys.readouterr().out

    plot_results.main(["--results", str(out), "--out-dir", str(tmp_path)])
    assert (tmp_path / "time.png").stat().st_size > 0
    assert (tmp_path / "peak_kb.png").stat().st_size > 0
    md = (tmp_path / "results.md").read_text()
    assert md.startswith("| Structure | Workload |")
    assert "QueueStack" in md


def test_plot_missing_results(tmp_path):
    with pytest.raises(SystemExit):
        plot_results.load_rows(tmp_path / "nope.json")


def test_bar_compare():
    rows = [workloads.run_heap_sort([3, 1, 2]), workloads.run_heapq_sort([3, 1, 2])]
    fig = bar_compare(rows, title="t")
    assert len(fig.axes) == 2
