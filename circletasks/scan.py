"""Exclusive prefix sums and detection of adjacent repeated values."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def exclusive_scan(values: Sequence[int]) -> list[int]:
    """Return the exclusive prefix sums: element i is the sum of values[:i]."""
    return list(accumulate(values, initial=0))[:-1]


def exclusive_scan_tree(values: Sequence[int]) -> list[int]:
    """Exclusive prefix sums by an up-sweep then down-sweep over a balanced tree.

    The length must be a power of two (or zero).
    """
    n = len(values)
    if n == 0:
        return []
    if n & (n - 1):
        raise ValueError(f"length must be a power of two, got {n}")
    output = list(values)

    step = 1
    while step < n // 2:
        stride = 2 * step
        for i in range(0, n, stride):
            output[i + stride - 1] += output[i + step - 1]
        step = stride

    output[n - 1] = 0

    step = n // 2
    while step >= 1:
        stride = 2 * step
        for i in range(0, n, stride):
            left = output[i + step - 1]
            output[i + step - 1] = output[i + stride - 1]
            output[i + stride - 1] += left
        step //= 2
    return output


def find_repeats(values: Sequence[int]) -> list[int]:
    """Return every index i at which values[i] equals values[i + 1]."""
    return [i for i, (a, b) in enumerate(zip(values, values[1:])) if a == b]