# pathsearch/problems/grid.py
from __future__ import annotations
from typing import Iterable, Sequence, Tuple

import numpy as np

Coord = Tuple[int, int]

_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))

class GridProblem:
    """
    4-neighbor grid pathfinding with unit costs.

    - Node: (row, col) tuple
    - neighbors(n): in-bounds, non-wall cells one step away, cost 1
    - is_target(n): n is one of the goal cells
    - heuristic(n): Manhattan distance to the nearest goal (admissible on a 4-neighbor grid)
    """
    def __init__(self, walls: np.ndarray, start: Coord, goals: Sequence[Coord]):
        self.walls = np.asarray(walls, dtype=bool)
        if self.walls.ndim != 2:
            raise ValueError(f"walls must be a 2D mask, got shape {self.walls.shape}")
        if not goals:
            raise ValueError("at least one goal cell is required")
        self._start = tuple(start)
        self.goals = frozenset(tuple(g) for g in goals)
        self._goal_arr = np.array(sorted(self.goals))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.walls.shape

    def start(self) -> Coord:
        return self._start

    def is_target(self, node: Coord) -> bool:
        return node in self.goals

    def neighbors(self, node: Coord) -> Iterable[Tuple[Coord, int]]:
        r, c = node
        rows, cols = self.walls.shape
        out = []
        for dr, dc in _MOVES:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and not self.walls[nr, nc]:
                out.append(((nr, nc), 1))
        return out

    def heuristic(self, node: Coord) -> int:
        d = np.abs(self._goal_arr - np.array(node)).sum(axis=1)
        return int(d.min())

def parse_grid(rows: Sequence[str]) -> GridProblem:
    """Build a problem from text rows: '#' wall, 'S' start, 'G' goal, anything else open."""
    walls = np.array([[ch == "#" for ch in row] for row in rows], dtype=bool)
    start = None
    goals = []
    for r, row in enumerate(rows):
        for c, ch in enumerate(row):
            if ch == "S":
                start = (r, c)
            elif ch == "G":
                goals.append((r, c))
    if start is None:
        raise ValueError("grid has no 'S' cell")
    return GridProblem(walls, start, goals)

def make_grid_problem() -> GridProblem:
    # Example: 5x7 grid, a few walls
    walls = np.zeros((5, 7), dtype=bool)
    for r, c in [(1, 3), (2, 3), (3, 3), (3, 4)]:
        walls[r, c] = True
    return GridProblem(walls, start=(0, 0), goals=[(4, 6)])
