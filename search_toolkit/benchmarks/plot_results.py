# search_toolkit/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import json
from pathlib import Path
from typing import List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from ..plots.plotting import bar_compare

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"

def load_rows(path: Path):
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m search_toolkit.benchmarks.run_all")
    data = json.loads(path.read_text())
    rows = data.get("results", [])
    # Keep only successful runs
    rows = [r for r in rows if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return data.get("problem", "?"), rows

def fmt_table(rows):
    # Markdown table
    lines = [
        "| Algorithm | Actions | Cost | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, (int, float)):
            return f"{x:.6f}" if isinstance(x, float) else f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r['algo']} | {len(r.get('actions') or [])} | {fnum(r.get('cost'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)

def main(argv: Optional[List[str]] = None) -> List[Path]:
    p = argparse.ArgumentParser(description="Summarise a run_all results file as markdown and a PNG chart.")
    p.add_argument("--in", dest="src", type=Path, default=RESULTS_JSON)
    p.add_argument("--out-dir", type=Path, default=None, help="defaults to the results file's directory")
    args = p.parse_args(argv)
    out_dir = args.out_dir or args.src.parent

    problem, rows = load_rows(args.src)

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows) + "\n")
    print(f"Wrote {md_path}")

    fig = bar_compare(rows, title=f"Search Comparison ({problem})")
    png_path = out_dir / "comparison.png"
    fig.savefig(png_path, dpi=160)
    plt.close(fig)
    print(f"Wrote {png_path}")
    return [md_path, png_path]

if __name__ == "__main__":
    main()
