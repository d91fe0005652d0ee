"""
Sample graph problems for the benchmarks and tests.
"""

from .graph import WeightedGraph, diamond, weighted_graph
from .grid import GridProblem, make_grid_problem, parse_grid
from .romania import RomaniaProblem, romania_problem

__all__ = [
    'WeightedGraph', 'diamond', 'weighted_graph',
    'GridProblem', 'make_grid_problem', 'parse_grid',
    'RomaniaProblem', 'romania_problem',
]
