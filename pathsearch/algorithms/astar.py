# pathsearch/algorithms/astar.py
from __future__ import annotations
from typing import Any, Callable, Optional
from .best_first import best_first_search

def _heuristic_from_problem(problem) -> Optional[Callable[[Any], Any]]:
    if hasattr(problem, "heuristic"):
        def h(node) -> Any:
            val = problem.heuristic(node)
            return 0 if val is None else val
        return h
    return None

def a_star_search(problem, heuristic: Optional[Callable[[Any], Any]] = None, exhaustive: bool = False):
    h = heuristic or _heuristic_from_problem(problem)
    name = "A*-exhaustive" if exhaustive else "A*"
    return best_first_search(problem, h=h, name=name, exhaustive=exhaustive)
