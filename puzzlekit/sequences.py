"""Small puzzles over sequences of numbers."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from itertools import pairwise


def can_make_arithmetic_progression(arr: Iterable[int]) -> bool:
    """Tell whether the values can be arranged into an arithmetic progression."""
    ordered = sorted(arr)
    if len(ordered) < 2:
        raise ValueError("at least two values are needed")
    step = ordered[1] - ordered[0]
    return all(b - a == step for a, b in pairwise(ordered))


def count_odds(low: int, high: int) -> int:
    """Count the odd integers between low and high inclusive."""
    if low > high:
        raise ValueError(f"low ({low}) is greater than high ({high})")
    return (high + 1) // 2 - low // 2


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the other values in order."""
    kept = [value for value in nums if value != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits."""
    if not digits:
        raise ValueError("no digits given")
    head = list(digits)
    trailing_nines = 0
    while head and head[-1] == 9:
        head.pop()
        trailing_nines += 1
    if head:
        head[-1] += 1
    else:
        head = [1]
    return head + [0] * trailing_nines


def cal_points(operations: Iterable[str]) -> int:
    """Total a baseball score record built from the given operations.

    "+" records the sum of the last two scores, "D" doubles the last score,
    "C" cancels the last score, and anything else is a score itself.
    """
    record: list[int] = []
    for op in operations:
        match op:
            case "+":
                if len(record) < 2:
                    raise ValueError("'+' needs two previous scores")
                record.append(record[-1] + record[-2])
            case "D":
                if not record:
                    raise ValueError("'D' needs a previous score")
                record.append(record[-1] * 2)
            case "C":
                if not record:
                    raise ValueError("'C' needs a previous score")
                record.pop()
            case _:
                try:
                    record.append(int(op))
                except ValueError:
                    raise ValueError(f"invalid operation: {op!r}") from None
    return sum(record)


def is_monotonic(nums: Sequence[int]) -> bool:
    """Tell whether the values never decrease or never increase."""
    pairs = list(pairwise(nums))
    return all(a <= b for a, b in pairs) or all(a >= b for a, b in pairs)