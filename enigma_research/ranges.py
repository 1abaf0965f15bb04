"""Reduction of values to a half-open range."""

from __future__ import annotations

import math


def value_to_range(value: float, lower_limit: float, upper_limit: float) -> float:
    """Shift value by whole range sizes until lower_limit <= value < upper_limit.

    Raises ValueError when the limits do not describe a non-empty range.
    """
    if upper_limit < lower_limit:
        raise ValueError(
            f"upper limit {upper_limit:f} cannot be less than lower limit {lower_limit:f}"
        )
    range_size = upper_limit - lower_limit
    if range_size == 0:
        raise ValueError(f"range between {lower_limit:f} and {upper_limit:f} is empty")

    steps = math.floor((value - lower_limit) / range_size)
    if steps:
        value -= steps * range_size
    while value < lower_limit:
        value += range_size
    while value >= upper_limit:
        value -= range_size
    return value