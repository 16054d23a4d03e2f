"""Terminal test: split a state into values close enough to the target and the rest."""

from typing import Sequence

from splitsolver.core.data_models import Partition


def partition(values: Sequence[int], target: int, margin: int) -> Partition:
    """Classify each scaled value as final or remainder.

    A value is final when ``|value - target| <= margin``. Input order is kept
    in both groups and the remainder is returned as-is.

    Args:
        values: Scaled state values
        target: Scaled target
        margin: Scaled margin

    Returns:
        Partition of the values
    """
    final = []
    remainder = []
    for value in values:
        if abs(value - target) <= margin:
            final.append(value)
        else:
            remainder.append(value)
    return Partition(final=tuple(final), remainder=tuple(remainder))
