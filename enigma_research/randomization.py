"""Random numbers and shuffling for constructing control groups.

Random values come from the operating system's secure random source.
"""

from __future__ import annotations

import secrets
from collections.abc import MutableSequence
from typing import TypeVar

T = TypeVar("T")


def get_integers(min_inclusive: int, max_exclusive: int, count: int) -> list[int]:
    """Return count random integers with min_inclusive <= n < max_exclusive.

    Raises ValueError when the range is empty or count is not positive.
    """
    if min_inclusive >= max_exclusive or count <= 0:
        raise ValueError("wrong sequence of parameters")
    range_size = max_exclusive - min_inclusive
    return [secrets.randbelow(range_size) + min_inclusive for _ in range(count)]


def get_integers_with_max(max_exclusive: int, count: int) -> list[int]:
    """Return count random integers with 0 <= n < max_exclusive."""
    return get_integers(0, max_exclusive, count)


def shuffle(data: MutableSequence[T]) -> MutableSequence[T]:
    """Shuffle data in place and return it."""
    n = len(data)
    if n <= 1:
        return data
    random_numbers = get_integers(0, n - 1, n - 1)
    for i in range(n - 1, 0, -1):
        k = random_numbers[n - 1 - i]
        data[i], data[k] = data[k], data[i]
    return data