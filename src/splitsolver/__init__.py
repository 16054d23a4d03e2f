"""Split/combine solver.

Searches for a sequence of split-in-two, split-in-three, combine-two and
combine-three operations that brings at least one of a set of real values
within a margin of a target.
"""

from splitsolver.core.data_models import Solution
from splitsolver.search.best_first import SearchConfig, create_searcher, solve

__version__ = "0.1.0"

__all__ = ['solve', 'create_searcher', 'SearchConfig', 'Solution', '__version__']
