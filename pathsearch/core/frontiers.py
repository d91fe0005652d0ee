# pathsearch/core/frontiers.py
# Priority frontier for best-first search: (priority, node) entries, smallest priority first.
from __future__ import annotations
import heapq
from typing import Any, Tuple


class PriorityQueue:
    """Min-heap of (priority, node). Equal priorities pop in insertion order."""
    def __init__(self):
        self.h = []
        self.counter = 0  # tie-breaker for stability; nodes need not be orderable
    def push(self, priority, node) -> None:
        self.counter += 1
        heapq.heappush(self.h, (priority, self.counter, node))
    def pop(self) -> Tuple[Any, Any]:
        priority, _, node = heapq.heappop(self.h)
        return priority, node
    def peek(self) -> Tuple[Any, Any]:
        priority, _, node = self.h[0]
        return priority, node
    def __len__(self): return len(self.h)
    def __bool__(self): return bool(self.h)
