# pathsearch/benchmarks/run_all.py
from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

from .. import config
from ..algorithms.astar import a_star_search
from ..algorithms.ucs import uniform_cost_search

logger = logging.getLogger(__name__)

Algo = Tuple[str, Callable[[Any], Any]]

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def _load_problem(name: str):
    if name == "romania":
        from ..problems.romania import romania_problem
        return romania_problem()
    if name == "grid":
        from ..problems.grid import make_grid_problem
        return make_grid_problem()
    if name == "diamond":
        from ..problems.graph import diamond
        return diamond()
    raise ValueError(f"unknown problem {name!r}; choose from {', '.join(config.PROBLEMS)}")

def _load_algos(exhaustive: bool = False) -> List[Algo]:
    algos: List[Algo] = [
        ("UCS", uniform_cost_search),
        ("A*", a_star_search),
    ]
    if exhaustive:
        algos.append(("UCS-exhaustive", lambda p: uniform_cost_search(p, exhaustive=True)))
        algos.append(("A*-exhaustive", lambda p: a_star_search(p, exhaustive=True)))
    return algos

def _run_one(name: str, fn: Callable[[Any], Any], problem, repeats: int) -> Dict[str, Any]:
    try:
        runs = [fn(problem) for _ in range(max(1, repeats))]
    except Exception as e:
        logger.exception(f"{name} failed")
        return {
            "algo": name,
            "success": False,
            "error": repr(e),
            "nodes_expanded": None,
            "cost": None,
            "time_s": None,
            "peak_kb": None,
        }
    row = runs[0].as_row()
    row["time_s"] = float(np.median([r.time_s for r in runs]))
    row["peak_kb"] = int(np.max([r.peak_kb for r in runs]))
    row["path"] = list(runs[0].path)
    return row

def run(problem, algos: List[Algo], repeats: int = config.REPEATS) -> List[Dict[str, Any]]:
    rows = []
    for name, fn in algos:
        print(f"→ Running {name} ...")
        row = _run_one(name, fn, problem, repeats)
        if row.get("error"):
            print(f"  {name}: ERROR {row['error']}")
        else:
            print(
                f"  {row['algo']}: "
                f"{'OK' if row['success'] else 'FAIL'} "
                f"cost={row['cost']} "
                f"expanded={row['nodes_expanded']}, "
                f"time={_fmt_time(row['time_s'])}s"
            )
        rows.append(row)
    return rows

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Compare UCS and A* on a sample problem.")
    ap.add_argument("--problem", choices=config.PROBLEMS, default=config.DEFAULT_PROBLEM, help="sample problem to search")
    ap.add_argument("--exhaustive", action="store_true", help="also run the exhaustive variants")
    ap.add_argument("--repeats", type=int, default=config.REPEATS, help="timed runs per algorithm (median reported)")
    ap.add_argument("--out", type=Path, default=config.RESULTS_JSON, help="where to write results JSON")
    ap.add_argument("--log-level", type=str.upper, choices=config.LOG_LEVELS, default=None, help="logging level")
    args = ap.parse_args(argv)

    config.configure_logging(args.log_level)

    problem = _load_problem(args.problem)
    rows = run(problem, _load_algos(args.exhaustive), args.repeats)

    out = {"problem": args.problem, "results": rows, "ts": time.time()}
    args.out.parent.mkdir(parents=True, exist_ok=True)
    # paths may hold tuples (grid cells); JSON turns them into lists
    args.out.write_text(json.dumps(out, indent=2, default=str))
    print(f"Wrote {args.out}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
