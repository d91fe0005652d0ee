"""
Problem-level search wrappers returning measured SearchResults.
"""

from .astar import a_star_search
from .best_first import best_first_search
from .ucs import uniform_cost_search

__all__ = ['a_star_search', 'best_first_search', 'uniform_cost_search']
