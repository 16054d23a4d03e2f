"""Best-first search over split/combine states.

The frontier is ordered by heuristic alone, with no accumulated path-cost
term, so this is a greedy best-first search rather than A*. A depth horizon
bounds the search, and a visited table records the smallest depth at which
each state was enqueued: a state is enqueued again only when reached at a
strictly smaller depth.
"""

import heapq
import itertools
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from splitsolver.core.data_models import PathStep, Problem, Solution, State, describe
from splitsolver.core.scaling import SCALE_FACTOR, scale, scale_all, unscale_all
from splitsolver.search.heuristics import DeviationHeuristic, create_heuristic
from splitsolver.search.successors import generate_successors
from splitsolver.search.terminal import partition

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 6


@dataclass(frozen=True)
class SearchNode:
    """Immutable snapshot in the search tree."""
    values: State
    path: Tuple[PathStep, ...] = ()
    depth: int = 0
    priority: int = 0  # heuristic of ``values`` only

    def path_text(self) -> List[str]:
        return [str(step) for step in self.path]


@dataclass
class SearchStatistics:
    """Detailed search statistics."""
    nodes_expanded: int = 0
    nodes_generated: int = 0
    nodes_enqueued: int = 0
    duplicate_states: int = 0
    depth_relaxations: int = 0
    horizon_discards: int = 0
    max_depth_reached: int = 0
    peak_frontier_size: int = 0
    heuristic_computations: int = 0
    average_branching_factor: float = 0.0

    def update_branching_factor(self, total_successors: int) -> None:
        """Update average branching factor."""
        if self.nodes_expanded > 0:
            self.average_branching_factor = (
                (self.average_branching_factor * (self.nodes_expanded - 1) + total_successors)
                / self.nodes_expanded
            )
        else:
            self.average_branching_factor = total_successors

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'nodes_enqueued': self.nodes_enqueued,
            'duplicate_states': self.duplicate_states,
            'depth_relaxations': self.depth_relaxations,
            'horizon_discards': self.horizon_discards,
            'max_depth_reached': self.max_depth_reached,
            'peak_frontier_size': self.peak_frontier_size,
            'heuristic_computations': self.heuristic_computations,
            'average_branching_factor': self.average_branching_factor
        }


@dataclass
class SearchResult:
    """Result from best-first search."""
    success: bool
    solution: Optional[Solution] = None
    termination_reason: str = "unknown"
    computation_time: float = 0.0
    statistics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        result = {
            'success': self.success,
            'termination_reason': self.termination_reason,
            'computation_time': self.computation_time,
            'search_stats': dict(self.statistics),
        }
        if self.solution is not None:
            result.update(self.solution.to_dict())
        return result


@dataclass
class SearchConfig:
    """Configuration for best-first search."""
    max_depth: int = DEFAULT_MAX_DEPTH  # operation horizon
    scale_factor: int = SCALE_FACTOR
    statistics_tracking: bool = True


class BestFirstSearcher:
    """Greedy best-first search with a depth horizon and depth-relaxed visited table."""

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize searcher.

        Args:
            config: Search configuration parameters
        """
        self.config = config or SearchConfig()
        self.statistics = SearchStatistics()
        self.heuristic: Optional[DeviationHeuristic] = None

    def search(self, inputs: Sequence[float], target: float, margin: float) -> SearchResult:
        """Search for a split/combine path bringing some value within ``margin`` of ``target``.

        Args:
            inputs: Starting real values (non-empty)
            target: Target value
            margin: Maximum absolute deviation for a value to count as final

        Returns:
            SearchResult with the solution (if any) and statistics
        """
        problem = Problem(inputs=tuple(inputs), target=target, margin=margin)
        factor = self.config.scale_factor
        max_depth = self.config.max_depth
        track = self.config.statistics_tracking

        start_time = time.perf_counter()
        self.statistics = SearchStatistics()
        stats = self.statistics

        scaled_target = scale(problem.target, factor)
        scaled_margin = scale(problem.margin, factor)
        self.heuristic = create_heuristic(scaled_target)
        heuristic = self.heuristic

        logger.info(f"Starting best-first search: {len(problem.inputs)} value(s) -> "
                    f"{problem.target} +/- {problem.margin} (max depth {max_depth})")

        root_values = scale_all(problem.inputs, factor)
        root = SearchNode(values=root_values, depth=0, priority=heuristic(root_values))

        counter = itertools.count()
        frontier: List[Tuple[int, int, SearchNode]] = [(root.priority, next(counter), root)]
        visited: Dict[State, int] = {root.values: root.depth}

        while frontier:
            _, _, current = heapq.heappop(frontier)

            if track and current.depth > stats.max_depth_reached:
                stats.max_depth_reached = current.depth

            split = partition(current.values, scaled_target, scaled_margin)
            if split.is_terminal:
                logger.info(f"Solution found at level {current.depth}")
                solution = Solution(
                    final=unscale_all(split.final, factor),
                    remainder=unscale_all(split.remainder, factor),
                    path=current.path_text(),
                )
                return self._create_result(solution, "goal_reached", start_time)

            if current.depth >= max_depth:
                stats.horizon_discards += 1
                continue

            child_depth = current.depth + 1
            generated = 0
            for successor in generate_successors(current.values, factor):
                generated += 1
                known_depth = visited.get(successor.values)
                if known_depth is not None and known_depth <= child_depth:
                    stats.duplicate_states += 1
                    continue
                if known_depth is not None:
                    stats.depth_relaxations += 1

                visited[successor.values] = child_depth
                child = SearchNode(
                    values=successor.values,
                    path=current.path + (successor.step,),
                    depth=child_depth,
                    priority=heuristic(successor.values),
                )
                heapq.heappush(frontier, (child.priority, next(counter), child))
                stats.nodes_enqueued += 1

            stats.nodes_expanded += 1
            stats.nodes_generated += generated
            if track:
                stats.update_branching_factor(generated)
                if len(frontier) > stats.peak_frontier_size:
                    stats.peak_frontier_size = len(frontier)
                logger.debug(f"Expanded depth-{current.depth} node (h={current.priority}): "
                             f"{generated} successors, frontier {len(frontier)}")

        logger.info(f"Search exhausted after expanding {stats.nodes_expanded} nodes")
        return self._create_result(None, "search_exhausted", start_time)

    def _create_result(self, solution: Optional[Solution], termination_reason: str,
                       start_time: float) -> SearchResult:
        computation_time = time.perf_counter() - start_time
        if self.heuristic is not None:
            self.statistics.heuristic_computations = self.heuristic.computation_count
        logger.debug(f"Search finished ({termination_reason}): {describe(solution)}")
        return SearchResult(
            success=solution is not None,
            solution=solution,
            termination_reason=termination_reason,
            computation_time=computation_time,
            statistics=self.statistics.to_dict(),
        )

    def get_search_stats(self) -> Dict[str, Any]:
        """Get detailed search statistics."""
        return {
            'statistics': self.statistics.to_dict(),
            'heuristic_stats': self.heuristic.get_stats() if self.heuristic else {},
            'config': {
                'max_depth': self.config.max_depth,
                'scale_factor': self.config.scale_factor,
            }
        }


def create_searcher(max_depth: int = DEFAULT_MAX_DEPTH,
                    scale_factor: int = SCALE_FACTOR,
                    statistics_tracking: bool = True) -> BestFirstSearcher:
    """Factory function to create a searcher with custom configuration.

    Args:
        max_depth: Maximum number of operations along any path
        scale_factor: Fixed-point scale factor
        statistics_tracking: Track branching/frontier statistics

    Returns:
        Configured BestFirstSearcher instance
    """
    config = SearchConfig(
        max_depth=max_depth,
        scale_factor=scale_factor,
        statistics_tracking=statistics_tracking
    )

    return BestFirstSearcher(config)


def solve(inputs: Sequence[float], target: float, margin: float,
          config: Optional[SearchConfig] = None) -> Optional[Solution]:
    """Find a path bringing at least one value within ``margin`` of ``target``.

    Returns None when the search is exhausted within the depth horizon.
    """
    return BestFirstSearcher(config).search(inputs, target, margin).solution
