"""Core value types and fixed-point scaling."""

from .scaling import SCALE_FACTOR, scale, unscale, scale_all, unscale_all, format_value
from .data_models import Operation, PathStep, Partition, Solution, Problem, State

__all__ = [
    'SCALE_FACTOR',
    'scale',
    'unscale',
    'scale_all',
    'unscale_all',
    'format_value',
    'Operation',
    'PathStep',
    'Partition',
    'Solution',
    'Problem',
    'State'
]
