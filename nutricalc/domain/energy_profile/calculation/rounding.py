"""Rounding shared by the calculation services."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity.

    Python's round() uses banker's rounding; calorie figures use the
    schoolbook rule instead.

    Example:
        >>> round_half_up(2.5), round(2.5)
        (3, 2)
    """
    return math.floor(value + 0.5)
