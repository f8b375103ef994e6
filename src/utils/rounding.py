"""Half-up rounding used for every displayed score."""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half toward positive infinity (2.5 -> 3.0, 200 / 3 -> 66.67 at two digits)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round half-up to the nearest integer."""
    return int(math.floor(value + 0.5))
