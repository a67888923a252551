"""Exercises over lists, matrices and strings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

_WINDOW = 4


def sort_descending(values: Iterable[float]) -> list[float]:
    """Return the values ordered from largest to smallest."""
    return sorted(values, reverse=True)


def frequencies(values: Iterable[int]) -> dict[int, int]:
    """Return how often each value occurs, keyed in ascending order."""
    counts = Counter(values)
    return {value: counts[value] for value in sorted(counts)}


def count_special(s: str) -> int:
    """Count characters that are neither ASCII letters, digits nor spaces."""
    return sum(1 for ch in s if not (ch == " " or (ch.isascii() and ch.isalnum())))


def search_sorted_matrix(
    matrix: Sequence[Sequence[int]], target: int
) -> tuple[int, int]:
    """Find ``target`` in a square matrix sorted along rows and columns.

    Starts at the top-right corner and walks left or down.  Returns
    ``(-1, -1)`` when the target is absent.
    """
    rows = len(matrix)
    row, col = 0, rows - 1
    while row < rows and col >= 0:
        value = matrix[row][col]
        if value == target:
            return row, col
        if value > target:
            col -= 1
        else:
            row += 1
    return -1, -1


def trilogy(
    monsters: Sequence[Sequence[int]], hits: Iterable[Sequence[int]]
) -> list[int]:
    """Track the monster count after each hit.

    ``monsters`` holds ``[start, end, health]`` ranges, each position in a
    range being one monster.  A hit ``[position, power]`` takes one off the
    count for every range covering ``position`` whose health is below
    ``power``.  The count after each hit is returned.
    """
    remaining = sum(max(0, end - start + 1) for start, end, _health in monsters)
    result: list[int] = []
    for position, power in hits:
        remaining -= sum(
            1
            for start, end, health in monsters
            if start <= position <= end and power > health
        )
        result.append(remaining)
    return result


def has_increasing_triplet(values: Sequence[int]) -> bool:
    """Look for three strictly increasing values with a three-pointer scan."""
    n = len(values)
    i, j, k = 0, 1, 2
    while k < n and j < n - 1 and i < n - 2:
        if values[i] < values[j] < values[k]:
            return True
        if values[i] < values[j]:
            j += 1
        else:
            i += 1
        if values[j] < values[k]:
            k += 1
        else:
            j += 1
    return False


def count_unique_windows(s: str) -> int:
    """Count length-4 substrings whose characters are all distinct."""
    return sum(
        1
        for start in range(len(s) - _WINDOW + 1)
        if len(set(s[start : start + _WINDOW])) == _WINDOW
    )