# search_toolkit/plots/plotting.py
# Bar plots comparing solver runs: nodes expanded, path cost, time taken and peak memory,
# as a 2x2 grid. Rows are the dicts written by benchmarks/run_all.py; missing values plot as 0.
from __future__ import annotations
from typing import Any, Dict, Sequence
import matplotlib.pyplot as plt

PANELS = [
    ("nodes_expanded", "Nodes Expanded"),
    ("cost", "Path Cost"),
    ("time_s", "Time (s)"),
    ("peak_kb", "Peak Memory (KB)"),
]

def bar_compare(rows: Sequence[Dict[str, Any]], title="Search Comparison"):
    names = [r["algo"] for r in rows]

    fig, axs = plt.subplots(2, 2, figsize=(11,8))
    axs = axs.ravel()
    for ax, (key, label) in zip(axs, PANELS):
        ax.bar(names, [r.get(key) or 0 for r in rows])
        ax.set_title(label)
        ax.tick_params(axis='x', rotation=45)
    fig.suptitle(title)
    fig.tight_layout(rect=[0,0,1,0.95])
    return fig
