"""
pathsearch: generalized A* / Dijkstra over implicit graphs.

Supports weighted edges, custom heuristics, and an exhaustive mode that keeps
every equal-cost predecessor so all optimal routes can be reconstructed.
"""

from .core.search import a_star, a_star_ex, dijkstra, dijkstra_ex
from .core.predecessors import (
    all_shortest_paths,
    nodes_on_shortest_paths,
    optimal_targets,
    reconstruct_path,
)

__version__ = "0.1.0"

__all__ = [
    'a_star', 'a_star_ex', 'dijkstra', 'dijkstra_ex',
    'all_shortest_paths', 'nodes_on_shortest_paths', 'optimal_targets', 'reconstruct_path',
]
