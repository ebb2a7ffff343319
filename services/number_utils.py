"""
Number helpers shared by scoring and analytics
"""

import math
from typing import Any, Union

Number = Union[int, float]

def to_number(value: Any, default: Number = 0) -> Number:
    """
    Coerce a submitted value to a number without raising.

    Integral values come back as int so that "7" scores as 7, not 7.0.
    Anything non-numeric, non-finite, too large for a float or boolean
    resolves to `default`.
    """
    if isinstance(value, bool) or value is None:
        return default

    try:
        if isinstance(value, (int, float)):
            as_float = float(value)
        else:
            as_float = float(str(value).strip())
    except (ValueError, OverflowError):
        return default

    if not math.isfinite(as_float):
        return default
    if isinstance(value, int):
        return value
    if as_float.is_integer():
        return int(as_float)
    return as_float


def round_half_up(value: float, digits: int = 0) -> Number:
    """Round with halves going up (2.5 -> 3, -2.5 -> -2)."""
    factor = 10 ** digits
    rounded = math.floor(value * factor + 0.5) / factor
    if digits == 0:
        return int(rounded)
    return rounded
