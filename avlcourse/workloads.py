"""Linear and quadratic busy-work used for timing experiments."""

from __future__ import annotations

import math
import os
import re
import struct
import sys

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
DEFAULT_OUTPUT = "blah.txt"


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def fun(x: float, y: float) -> float:
    """Return log(sin(sin(cos(x*y)))) in single precision.

    The result is NaN where the logarithm's argument is negative and
    minus infinity where it is zero.
    """
    z = _f32(_f32(x) * _f32(y))
    inner = math.sin(math.sin(math.cos(z)))
    if inner > 0:
        return _f32(math.log(inner))
    if inner == 0:
        return -math.inf
    return math.nan


def linear_workload(n: int, path: str | os.PathLike[str] = DEFAULT_OUTPUT) -> float | None:
    """Rewrite ``path`` with ``fun(1.23, 4.56)`` ``n`` times; return the last value."""
    value = None
    for _ in range(n):
        value = fun(1.23, 4.56)
        with open(path, "w", encoding="ascii") as out:
            out.write(f"{value:g}")
    return value


def quadratic_workload(n: int) -> int:
    """Run an empty nested loop over ``n``; return how many inner steps ran."""
    steps = 0
    for outer in range(n):
        for _ in range(outer):
            steps += 1
    return steps


def _count(argv: list[str] | None, name: str) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        raise SystemExit(f"usage: {name} N")
    return _atoi(argv[0])


def main_linear(argv: list[str] | None = None) -> int:
    """Run the linear workload ``argv[0]`` times."""
    linear_workload(_count(argv, "lin"))
    return 0


def main_quadratic(argv: list[str] | None = None) -> int:
    """Run the quadratic workload for ``argv[0]``."""
    quadratic_workload(_count(argv, "quad"))
    return 0