# ds_lab/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import io
import json
from collections import defaultdict
from pathlib import Path
from typing import Dict, List

import matplotlib.pyplot as plt
import numpy as np

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"

def load_rows(path: Path = RESULTS_JSON) -> List[dict]:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m ds_lab.benchmarks.run_all")
    data = json.loads(path.read_text())
    # Keep only successful runs
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows

def _series(rows: List[dict], metric: str) -> Dict[str, Dict[int, float]]:
    """structure -> {n: metric}"""
    out: Dict[str, Dict[int, float]] = defaultdict(dict)
    for r in rows:
        v = r.get(metric)
        if v is not None:
            out[r["structure"]][int(r["n"])] = v
    return out

def _grouped_bar(ax, rows, metric, title, ylabel):
    series = _series(rows, metric)
    sizes = sorted({int(r["n"]) for r in rows})
    names = sorted(series)
    x = np.arange(len(sizes))
    width = 0.8 / max(len(names), 1)
    for i, name in enumerate(names):
        vals = [series[name].get(n, 0) for n in sizes]
        ax.bar(x + i * width, vals, width, label=name)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x + width * (len(names) - 1) / 2)
    ax.set_xticklabels([f"n={n}" for n in sizes])
    ax.legend(fontsize=8)

def fmt_table(rows):
    # Markdown table
    lines = [
        "| Structure | Workload | n | Ops | Time (s) | Peak KB |",
        "|---|---|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, (int, float)):
            return f"{x:.6f}" if isinstance(x, float) else f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['structure']} | {r['workload']} | {fnum(r.get('n'))} | {fnum(r.get('ops'))} | "
            f"{fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)

def fig_to_png_bytes(fig):
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot benchmark results written by run_all.")
    ap.add_argument("--results", default=str(RESULTS_JSON), help="JSON written by run_all")
    ap.add_argument("--out-dir", default=str(HERE), help="where to write results.md and the PNGs")
    args = ap.parse_args(argv)

    rows = load_rows(Path(args.results))
    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    print(f"Wrote {md_path}")

    for metric, title, ylabel, fname in (
        ("time_s", "Wall Time (lower is better)", "seconds", "time.png"),
        ("peak_kb", "Peak Memory (lower is better)", "KB", "peak_kb.png"),
    ):
        fig, ax = plt.subplots(figsize=(7, 4))
        _grouped_bar(ax, rows, metric, title, ylabel)
        fig.tight_layout()
        (out_dir / fname).write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        print(f"Wrote {out_dir / fname}")

if __name__ == "__main__":
    main()
