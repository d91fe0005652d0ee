# Uniform Cost Search (Dijkstra) by reusing the generic best-first runner with a zero heuristic.
# pathsearch/algorithms/ucs.py
from __future__ import annotations
from .best_first import best_first_search

def uniform_cost_search(problem, exhaustive: bool = False):
    name = "UCS-exhaustive" if exhaustive else "UCS"
    return best_first_search(problem, h=None, name=name, exhaustive=exhaustive)
