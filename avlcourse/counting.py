"""Count occurrences of whitespace-separated numbers and the tree demo."""

from __future__ import annotations

import math
import re
import sys
import time
from collections.abc import Iterable, Iterator
from typing import TextIO

from avlcourse.avl import AVLTree
from avlcourse.cursor import AVLCursor

SHORT_MIN = -32768
SHORT_MAX = 32767

_NUMBER = re.compile(r"[+-]?\d+")


def _wrap_short(value: int) -> int:
    return (value - SHORT_MIN) % 65536 + SHORT_MIN


def read_numbers(stream: TextIO) -> Iterator[int]:
    """Yield 16-bit integers from ``stream`` until one fails to parse.

    Reading stops at the first token that does not start with an integer
    or whose value does not fit in a signed 16-bit integer. A token with
    a numeric prefix yields that prefix and then ends the input.
    """
    for line in stream:
        for token in line.split():
            match = _NUMBER.match(token)
            if match is None:
                return
            value = int(match.group())
            if not SHORT_MIN <= value <= SHORT_MAX:
                return
            yield value
            if match.end() != len(token):
                return


def count_with_avl(numbers: Iterable[int]) -> list[tuple[int, int]]:
    """Count each number with an AVL tree; return ``(number, count)`` ascending."""
    tree = AVLTree()
    cursor = AVLCursor(tree)
    for number in numbers:
        found = cursor.find(number) if len(tree) else None
        if found is None:
            tree.insert(number, [1])
        else:
            cell = found[1]
            cell[0] = _wrap_short(cell[0] + 1)
    return [(key, cell[0]) for key, cell in tree.items()]


def count_with_dict(numbers: Iterable[int]) -> list[tuple[int, int]]:
    """Count each number with a dict; return ``(number, count)`` ascending."""
    counts: dict[int, int] = {}
    for number in numbers:
        counts[number] = _wrap_short(counts.get(number, 0) + 1)
    return sorted(counts.items())


def demo_lines() -> list[str]:
    """Return the lines of the insert/find/list/remove demonstration."""
    tree = AVLTree()
    lines = ["adding items"]
    for value in range(20):
        tree.insert(value, value + 1)
    lines.append("creating iterator")
    cursor = AVLCursor(tree)
    found = cursor.find(3)
    key, item = found if found is not None else (3, None)
    lines.append("Finding 3")
    lines.append(f"key - {key} item - {item}")
    lines.append("Tree contains:")
    lines.extend(_listing(cursor))
    lines.append("removing even keys")
    for value in range(0, 20, 2):
        tree.remove(value)
    lines.extend(_listing(cursor))
    lines.append("removing odd keys")
    for value in range(1, 20, 2):
        tree.remove(value)
    lines.extend(_listing(cursor))
    lines.append("done")
    return lines


def _listing(cursor: AVLCursor) -> list[str]:
    return [f"key - {key} item - {item}" for key, item in cursor]


def _average(seconds: float, count: int) -> float:
    if count:
        return seconds / count
    return math.inf if seconds else math.nan


def avl_ops_main(argv: list[str] | None = None) -> int:
    """Count numbers from standard input with the AVL tree and report."""
    started = time.process_time()
    numbers = list(read_numbers(sys.stdin))
    counts = count_with_avl(numbers)
    seconds = time.process_time() - started
    operations = len(numbers) % 65536
    print(
        "Total time taken = %.3f(s); avg. time per op: %.5f(us)"
        % (seconds, _average(seconds, operations))
    )
    for key, count in counts:
        print(f"{key}: {count}")
    return 0


def map_ops_main(argv: list[str] | None = None) -> int:
    """Count numbers from standard input with a dict and report."""
    started = time.process_time()
    numbers = list(read_numbers(sys.stdin))
    counts = count_with_dict(numbers)
    seconds = time.process_time() - started
    print(
        "Total time taken = %.3f(s); avg. time per op: %.2f(us)"
        % (seconds, _average(seconds, len(numbers)))
    )
    for key, count in counts:
        print(f"{key} : {count}")
    return 0


def demo_main(argv: list[str] | None = None) -> int:
    """Print the tree demonstration."""
    for line in demo_lines():
        print(line)
    return 0