# ds_lab/plots/plotting.py
# Side-by-side bar plots (time, peak memory) for a list of BenchResults.
from __future__ import annotations
import matplotlib.pyplot as plt

def bar_compare(results, title="Structure Comparison"):
    names = [f"{r.structure}\n{r.workload} n={r.n}" for r in results]
    times = [r.time_s or 0 for r in results]
    mems  = [r.peak_kb or 0 for r in results]

    fig, axs = plt.subplots(1, 2, figsize=(11, 4.5))
    axs[0].bar(names, times); axs[0].set_title("Time (s)"); axs[0].tick_params(axis='x', rotation=45)
    axs[1].bar(names, mems); axs[1].set_title("Peak Memory (KB)"); axs[1].tick_params(axis='x', rotation=45)
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 1, 0.93])
    return fig
