"""Merge sort over a list of random values."""

from __future__ import annotations

import heapq
import random
import re
import sys
from collections.abc import Iterable

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a new list with ``values`` in ascending order (stable)."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return list(heapq.merge(merge_sort(items[:mid]), merge_sort(items[mid:])))


def random_data(size: int, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` random integers, each in ``range(size)``."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    rng = rng or random.Random()
    return [rng.randrange(size) for _ in range(size)]


def main(argv: list[str] | None = None) -> int:
    """Sort ``argv[0]`` random numbers and print them one per line."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        return 0
    for value in merge_sort(random_data(_atoi(argv[0]))):
        print(value)
    return 0