# pathsearch/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Iterable, List, Optional, Tuple
import time, tracemalloc

@dataclass
class SearchResult:
    algo: str
    success: bool
    cost: Any
    nodes_expanded: int
    time_s: float
    peak_kb: int
    path: List[Hashable] = field(default_factory=list)
    on_path: Optional[int] = None  # exhaustive runs: nodes on some optimal path
    error: Optional[str] = None

    def as_row(self) -> dict:
        return {
            "algo": self.algo,
            "success": self.success,
            "cost": self.cost,
            "nodes_expanded": self.nodes_expanded,
            "time_s": self.time_s,
            "peak_kb": self.peak_kb,
            "path_len": len(self.path),
            "on_path": self.on_path,
            "error": self.error,
        }

class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    """
    def __init__(self) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._owns_trace: bool = False

    def __enter__(self) -> "MeasuredRun":
        # don't stop a trace someone else started
        self._owns_trace = not tracemalloc.is_tracing()
        if self._owns_trace:
            tracemalloc.start()
        self._tracing = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        current, peak = tracemalloc.get_traced_memory()
        if self._owns_trace:
            tracemalloc.stop()
        self._tracing = False
        self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb

class CountingNeighbors:
    """
    Wraps a neighbor function and counts expansions (calls) and generated edges.
    Lets callers measure a search without the engine keeping any counters.
    """
    def __init__(self, fn: Callable[[Hashable], Iterable[Tuple[Hashable, Any]]]) -> None:
        self.fn = fn
        self.calls = 0
        self.edges = 0
        self.expanded: List[Hashable] = []

    def __call__(self, node):
        self.calls += 1
        self.expanded.append(node)
        out = list(self.fn(node))
        self.edges += len(out)
        return out
