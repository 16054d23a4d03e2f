"""Fixed-point scaling for search states.

States are compared and hashed as integers. Reals are multiplied by a
fixed factor and truncated toward zero, so repeated divisions collapse onto
the same integer states deterministically.
"""

import math
from decimal import Decimal
from typing import Iterable, List, Tuple

SCALE_FACTOR = 1000


def scale(value: float, factor: int = SCALE_FACTOR) -> int:
    """Convert a real to a fixed-point integer, truncating toward zero.

    Args:
        value: Real value to convert
        factor: Fixed-point scale factor

    Returns:
        Scaled integer value

    Raises:
        ValueError: If the value is not finite
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot scale non-finite value: {value}")
    # int() truncates toward zero, unlike round()
    return int(value * factor)


def unscale(value: int, factor: int = SCALE_FACTOR) -> float:
    """Convert a fixed-point integer back to a real."""
    return value / factor


def scale_all(values: Iterable[float], factor: int = SCALE_FACTOR) -> Tuple[int, ...]:
    """Scale a sequence of reals into a state tuple."""
    return tuple(scale(v, factor) for v in values)


def unscale_all(values: Iterable[int], factor: int = SCALE_FACTOR) -> List[float]:
    """Unscale a state tuple into a list of reals."""
    return [unscale(v, factor) for v in values]


def format_value(value: float) -> str:
    """Render a real for path text in plain positional notation.

    Integral values drop the fractional part (``60`` rather than ``60.0``).
    Other values use the shortest round-trip digits, never an exponent
    (``0.00001`` rather than ``1e-05``).
    """
    if value.is_integer():
        return str(int(value))
    if not math.isfinite(value):
        return repr(value)
    return format(Decimal(repr(value)), "f")
