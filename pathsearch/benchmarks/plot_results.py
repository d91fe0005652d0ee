# pathsearch/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import io
import json
import math
from pathlib import Path
from typing import List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .. import config

def _load_rows(results_json: Path):
    if not results_json.exists():
        raise SystemExit(f"Missing {results_json}. Run: python -m pathsearch.benchmarks.run_all")
    data = json.loads(results_json.read_text())
    rows = data.get("results", [])
    # Keep only successful runs
    rows = [r for r in rows if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows

def _sorted(rows, key):
    def key_fn(r):
        v = r.get(key)
        if v is None:
            return math.inf
        return v
    return sorted(rows, key=key_fn)

def _bar(ax, rows, metric, title, ylabel):
    algos = [r["algo"] for r in rows]
    vals = [r.get(metric) for r in rows]
    top = max((v for v in vals if v is not None), default=0) or 1

    x = list(range(len(algos)))
    ax.bar(x, [v or 0 for v in vals])
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(algos, rotation=20, ha="right")

    # value labels on top of bars
    for xi, v in zip(x, vals):
        if v is None:
            label, y = "n/a", 0
        elif isinstance(v, float) and v < 0.01:
            label, y = f"{v:.4f}", v
        elif isinstance(v, float):
            label, y = f"{v:.3f}", v
        else:
            label, y = f"{v}", v
        ax.text(xi, y + 0.01 * top, label, ha="center", va="bottom", fontsize=8)

def fmt_table(rows) -> str:
    # Markdown table
    lines = [
        "| Algorithm | Cost | Nodes Expanded | On Optimal Paths | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, bool) or not isinstance(x, (int, float)):
            return "n/a"
        return f"{x:.6f}" if isinstance(x, float) else f"{x}"
    for r in rows:
        lines.append(
            f"| {r['algo']} | {fnum(r.get('cost'))} | {fnum(r.get('nodes_expanded'))} | "
            f"{fnum(r.get('on_path'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)

def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=config.PLOT_DPI)
    plt.close(fig)
    return buf.getvalue()

_CHARTS = (
    ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes", "nodes_expanded.png"),
    ("time_s", "Wall Time (lower is better)", "seconds", "time.png"),
    ("cost", "Path Cost (lower is better)", "cost", "cost.png"),
)

def render(rows, out_dir: Path) -> List[Path]:
    """Write results.md and one bar chart per metric into out_dir."""
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    written.append(md_path)

    for metric, title, ylabel, filename in _CHARTS:
        fig, ax = plt.subplots(figsize=config.PLOT_FIGSIZE)
        _bar(ax, _sorted(rows, metric), metric, title, ylabel)
        fig.tight_layout()
        path = out_dir / filename
        path.write_bytes(fig_to_png_bytes(fig))
        written.append(path)
    return written

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Plot benchmark results written by run_all.")
    ap.add_argument("--results", type=Path, default=config.RESULTS_JSON, help="results JSON from run_all")
    ap.add_argument("--out-dir", type=Path, default=None, help="defaults to the results file's folder")
    args = ap.parse_args(argv)

    rows = _load_rows(args.results)
    for path in render(rows, args.out_dir or args.results.parent):
        print(f"Wrote {path}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
