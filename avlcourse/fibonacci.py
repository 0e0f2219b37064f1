"""Fibonacci numbers in 32-bit unsigned arithmetic."""

from __future__ import annotations

import re
import sys

_MASK = 0xFFFFFFFF
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _check(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must not be negative: {n}")


def fib_iterative(n: int) -> int:
    """Return the ``n``-th Fibonacci number modulo 2**32, iteratively."""
    _check(n)
    first, second = 0, 1
    for _ in range(2, n + 1):
        first, second = second, (first + second) & _MASK
    return 0 if n == 0 else second


def fib_recursive(n: int) -> int:
    """Return the ``n``-th Fibonacci number modulo 2**32, by plain recursion."""
    _check(n)
    if n <= 1:
        return n
    return (fib_recursive(n - 1) + fib_recursive(n - 2)) & _MASK


def _run(argv: list[str] | None, compute, name: str) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        raise SystemExit(f"usage: {name} N")
    print(compute(_atoi(argv[0])))
    return 0


def main_iterative(argv: list[str] | None = None) -> int:
    """Print the Fibonacci number of ``argv[0]`` computed iteratively."""
    return _run(argv, fib_iterative, "fib-iter")


def main_recursive(argv: list[str] | None = None) -> int:
    """Print the Fibonacci number of ``argv[0]`` computed recursively."""
    return _run(argv, fib_recursive, "fib-rec")