# search_toolkit/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import os
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..algorithms.astar import a_star_search
from ..algorithms.bfs import breadth_first_search
from ..algorithms.hill_climbing import hill_climbing_search
from ..algorithms.ucs import uniform_cost_search
from ..core.metrics import SearchResult
from ..problems.grid import make_grid_problem, random_grid_problem
from ..problems.romania import romania_problem

# ---- Tunables (overridable via environment variables) -----------------------
PROBLEM        = os.getenv("SEARCH_PROBLEM", "romania")
MAX_EXPANSIONS = os.getenv("SEARCH_MAX_EXPANSIONS")          # unbounded when unset
LOG_LEVEL      = os.getenv("SEARCH_LOG_LEVEL", "WARNING")
DEFAULT_OUT    = Path(__file__).with_name("results.json")

ALGOS: List[Tuple[str, Callable[..., SearchResult]]] = [
    ("BFS", breadth_first_search),
    ("UCS", uniform_cost_search),
    ("A*", a_star_search),
    ("Hill-Climbing", hill_climbing_search),
]

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def load_problem(name: str, seed: Optional[int] = None):
    if name == "romania":
        return romania_problem()
    if name == "grid":
        return make_grid_problem()
    if name == "random-grid":
        return random_grid_problem(20, 20, density=0.25, seed=seed)
    raise ValueError(f"unknown problem {name!r} (expected romania, grid or random-grid)")

def run_algorithms(problem, max_expansions: Optional[int] = None, track_memory: bool = True) -> List[Dict[str, Any]]:
    rows = []
    for name, fn in ALGOS:
        print(f"→ Running {name} ...")
        try:
            r = fn(problem, max_expansions=max_expansions, track_memory=track_memory)
            print(
                f"  {r.algo}: "
                f"{'OK' if r.success else 'FAIL'} "
                f"cost={r.cost} "
                f"expanded={r.nodes_expanded}, "
                f"time={_fmt_time(r.time_s)}s"
            )
            rows.append({
                "algo": r.algo,
                "success": r.success,
                "actions": [list(a) if isinstance(a, tuple) else a for a in r.actions],
                "cost": r.cost if r.success else None,
                "nodes_expanded": r.nodes_expanded,
                "time_s": r.time_s,
                "peak_kb": r.peak_kb,
                "error": r.error,
            })
        except Exception as e:
            print(f"  {name}: ERROR {repr(e)}")
            rows.append({
                "algo": name,
                "success": False,
                "actions": [],
                "error": repr(e),
                "nodes_expanded": None,
                "cost": None,
                "time_s": None,
                "peak_kb": None,
            })
    return rows

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Run every solver on a sample problem and save the metrics as JSON.")
    p.add_argument("--problem", default=PROBLEM, choices=["romania", "grid", "random-grid"])
    p.add_argument("--seed", type=int, default=None, help="seed for random-grid")
    p.add_argument("--max-expansions", type=int,
                   default=int(MAX_EXPANSIONS) if MAX_EXPANSIONS else None)
    p.add_argument("--no-memory", action="store_true", help="skip tracemalloc peak memory tracking")
    p.add_argument("--out", type=Path, default=DEFAULT_OUT)
    p.add_argument("--log-level", default=LOG_LEVEL)
    return p

def main(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    problem = load_problem(args.problem, seed=args.seed)
    rows = run_algorithms(problem, max_expansions=args.max_expansions, track_memory=not args.no_memory)

    out = {"problem": args.problem, "results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))

    args.out.write_text(json.dumps(out, indent=2))
    print(f"Wrote {args.out}")
    return out

if __name__ == "__main__":
    main()
