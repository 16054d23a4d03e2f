"""Core data models for the split/combine solver."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from splitsolver.core.scaling import format_value

State = Tuple[int, ...]


class Operation(Enum):
    """Arithmetic operations available to the search."""
    SPLIT_TWO = "split2"
    SPLIT_THREE = "split3"
    COMBINE_TWO = "combine2"
    COMBINE_THREE = "combine3"

    @property
    def is_split(self) -> bool:
        return self in (Operation.SPLIT_TWO, Operation.SPLIT_THREE)


@dataclass(frozen=True)
class PathStep:
    """One applied operation, in unscaled values.

    Operands are the parent's values; results are the real-domain values
    before rescaling.
    """
    operation: Operation
    operands: Tuple[float, ...]
    results: Tuple[float, ...]

    def __str__(self) -> str:
        if self.operation.is_split:
            parts = ", ".join(format_value(r) for r in self.results)
            return f"{format_value(self.operands[0])} -> [{parts}]"
        lhs = " + ".join(format_value(o) for o in self.operands)
        return f"{lhs} -> {format_value(self.results[0])}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'operation': self.operation.value,
            'operands': list(self.operands),
            'results': list(self.results),
            'text': str(self),
        }


@dataclass(frozen=True)
class Partition:
    """Scaled values split into those within margin of the target and the rest."""
    final: State
    remainder: State

    @property
    def is_terminal(self) -> bool:
        """A state terminates as soon as any single value is close enough."""
        return len(self.final) > 0


@dataclass
class Solution:
    """Unscaled outcome of a successful search."""
    final: List[float]
    remainder: List[float]
    path: List[str] = field(default_factory=list)

    @property
    def depth(self) -> int:
        return len(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'final': list(self.final),
            'remainder': list(self.remainder),
            'path': list(self.path),
            'depth': self.depth,
        }


@dataclass(frozen=True)
class Problem:
    """Inputs to a single solve call."""
    inputs: Tuple[float, ...]
    target: float
    margin: float

    def __post_init__(self) -> None:
        if not self.inputs:
            raise ValueError("inputs must contain at least one value")

    @property
    def total(self) -> float:
        return sum(self.inputs)


def describe(solution: Optional[Solution]) -> str:
    """Short one-line description used in log messages."""
    if solution is None:
        return "no solution"
    return f"{len(solution.final)} final value(s) after {solution.depth} operation(s)"
