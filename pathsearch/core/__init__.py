"""
Core search package.
Contains the search engine, its frontier, predecessor helpers and measurement tools.
"""

from .frontiers import PriorityQueue
from .metrics import CountingNeighbors, MeasuredRun, SearchResult
from .problem import GraphProblem
from .search import a_star, a_star_ex, dijkstra, dijkstra_ex

__all__ = [
    'PriorityQueue', 'CountingNeighbors', 'MeasuredRun', 'SearchResult', 'GraphProblem',
    'a_star', 'a_star_ex', 'dijkstra', 'dijkstra_ex',
]
