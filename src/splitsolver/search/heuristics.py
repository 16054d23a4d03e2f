"""Proximity heuristic for best-first search.

The score of a state is the total absolute deviation of its values from the
target, in scaled-integer units. It ignores how many operations remain, so it
guides the search without certifying optimality.
"""

import time
from typing import Any, Dict, Sequence

import numpy as np


def total_deviation(values: Sequence[int], target: int) -> int:
    """Sum of |value - target| over a scaled state.

    Args:
        values: Scaled state values
        target: Scaled target value

    Returns:
        Total deviation as a Python int
    """
    # object dtype keeps arbitrary-precision ints; int64 overflows past 2**63
    arr = np.asarray(values, dtype=object)
    return int(np.abs(arr - target).sum())


class DeviationHeuristic:
    """Total-deviation heuristic bound to a scaled target, with call statistics."""

    def __init__(self, target: int, name: str = "total_deviation"):
        """Initialize heuristic.

        Args:
            target: Scaled target value
            name: Name reported in statistics
        """
        self.name = name
        self.target = target
        self.computation_count = 0
        self.total_computation_time = 0.0

    def compute(self, values: Sequence[int]) -> int:
        return total_deviation(values, self.target)

    def __call__(self, values: Sequence[int]) -> int:
        """Compute heuristic with timing and statistics."""
        start_time = time.perf_counter()
        value = self.compute(values)
        self.computation_count += 1
        self.total_computation_time += time.perf_counter() - start_time
        return value

    def reset_stats(self) -> None:
        self.computation_count = 0
        self.total_computation_time = 0.0

    def get_stats(self) -> Dict[str, Any]:
        """Get computation statistics."""
        avg_time = (self.total_computation_time / self.computation_count
                    if self.computation_count > 0 else 0.0)

        return {
            'name': self.name,
            'computation_count': self.computation_count,
            'total_time': self.total_computation_time,
            'average_time': avg_time,
            'average_time_us': avg_time * 1000000
        }


def create_heuristic(target: int) -> DeviationHeuristic:
    """Factory function for the search heuristic."""
    return DeviationHeuristic(target)
