"""Successor generation for split/combine states.

Every successor is a fresh tuple: the operated-on values are removed (keeping
the relative order of the rest) and the results are appended. Arithmetic is
done on unscaled reals and each result is rescaled, so truncation happens once
per produced value.

Generation order is fixed and determines which of several colliding states is
enqueued first: for each index ``i`` ascending, split-in-two, split-in-three,
then combine-two with each ``j > i``, then combine-three with each ``j > i``,
``k > j``.
"""

from dataclasses import dataclass
from math import comb
from typing import Iterator, List, Tuple

from splitsolver.core.data_models import Operation, PathStep, State
from splitsolver.core.scaling import SCALE_FACTOR, scale, unscale


@dataclass(frozen=True)
class Successor:
    """A state reachable by one operation, with the step that produced it."""
    values: State
    step: PathStep


def split_into_two(value: float) -> Tuple[float, float]:
    half = value / 2.0
    return half, half


def split_into_three(value: float) -> Tuple[float, float, float]:
    part = value / 3.0
    return part, part, part


def combine_two(a: float, b: float) -> float:
    return a + b


def combine_three(a: float, b: float, c: float) -> float:
    return a + b + c


def _without(values: State, *indices: int) -> List[int]:
    skip = set(indices)
    return [v for idx, v in enumerate(values) if idx not in skip]


def generate_successors(values: State, factor: int = SCALE_FACTOR) -> Iterator[Successor]:
    """Yield every state reachable from ``values`` by one operation.

    Args:
        values: Parent state (never mutated)
        factor: Fixed-point scale factor

    Yields:
        Successor states in generation order
    """
    n = len(values)
    reals = [unscale(v, factor) for v in values]

    for i in range(n):
        value = reals[i]

        parts = split_into_two(value)
        new_values = _without(values, i)
        new_values.extend(scale(p, factor) for p in parts)
        yield Successor(
            values=tuple(new_values),
            step=PathStep(Operation.SPLIT_TWO, (value,), parts),
        )

        parts = split_into_three(value)
        new_values = _without(values, i)
        new_values.extend(scale(p, factor) for p in parts)
        yield Successor(
            values=tuple(new_values),
            step=PathStep(Operation.SPLIT_THREE, (value,), parts),
        )

        for j in range(i + 1, n):
            other = reals[j]
            combined = combine_two(value, other)
            new_values = _without(values, i, j)
            new_values.append(scale(combined, factor))
            yield Successor(
                values=tuple(new_values),
                step=PathStep(Operation.COMBINE_TWO, (value, other), (combined,)),
            )

        for j in range(i + 1, n):
            for k in range(j + 1, n):
                value_b = reals[j]
                value_c = reals[k]
                combined = combine_three(value, value_b, value_c)
                new_values = _without(values, i, j, k)
                new_values.append(scale(combined, factor))
                yield Successor(
                    values=tuple(new_values),
                    step=PathStep(Operation.COMBINE_THREE, (value, value_b, value_c), (combined,)),
                )


def successor_count(n: int) -> int:
    """Number of successors generated for a state of ``n`` values."""
    if n <= 0:
        return 0
    return n * 2 + comb(n, 2) + comb(n, 3)
