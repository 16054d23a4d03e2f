"""Search algorithms for the split/combine solver.

This module implements the greedy best-first search that looks for a sequence
of split/combine operations bringing a value within margin of a target.
"""

from .heuristics import DeviationHeuristic, total_deviation, create_heuristic
from .successors import Successor, generate_successors, successor_count
from .terminal import partition
from .best_first import (
    BestFirstSearcher, SearchNode, SearchResult, SearchConfig, SearchStatistics,
    create_searcher, solve
)

__all__ = [
    'DeviationHeuristic',
    'total_deviation',
    'create_heuristic',
    'Successor',
    'generate_successors',
    'successor_count',
    'partition',
    'BestFirstSearcher',
    'SearchNode',
    'SearchResult',
    'SearchConfig',
    'SearchStatistics',
    'create_searcher',
    'solve'
]
