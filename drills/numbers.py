"""Small number puzzles: digit patterns, bases, powers of two and friends."""

from __future__ import annotations

import math
import random
import time
from collections.abc import Sequence

MAX_RANDOM_BYTES = 64

_DIGIT_VALUES = {"A": 1, "B": 2, "C": 3, "D": 4, "E": 5}
_BASE = 5
_WORD_MASK = 0xFFFFFFFF


def balanced_248(limit: int) -> list[int]:
    """Return numbers from 248 to ``limit`` holding 2, 4 and 8 equally often.

    Each of the three digits must appear at least once.  A ``limit`` written
    with fewer than three characters gives an empty list.
    """
    if len(str(limit)) < 3:
        return []
    result: list[int] = []
    for number in range(248, limit + 1):
        text = str(number)
        counts = {digit: text.count(digit) for digit in "248"}
        if 0 in counts.values():
            continue
        if counts["2"] == counts["4"] == counts["8"]:
            result.append(number)
    return result


def new_number_system(num: str) -> int:
    """Read ``num`` as base 5 with digits A=1 .. E=5; other characters count 0."""
    value = 0
    for place, ch in enumerate(reversed(num)):
        value += _DIGIT_VALUES.get(ch, 0) * _BASE**place
    return value


def next_power_of_two(n: int) -> int:
    """Return ``n`` if it is a power of two, else the next power above it.

    Zero gives 1.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n and not n & (n - 1):
        return n
    power = 1
    while power < n:
        power <<= 1
    return power


def survivor(n: int) -> int:
    """Return the last person standing when every second one of ``n`` is removed.

    Uses the closed form based on the next power of two.
    """
    power = next_power_of_two(n)
    margin = (power - 1) - n
    return (power - 1) - margin * 2


def two_egg_drop(floors: int) -> int:
    """Minimum worst-case trials to find the critical floor with two eggs."""
    if floors < 0:
        raise ValueError(f"floors must not be negative, got {floors}")
    return math.ceil(-1.0 + math.sqrt(1 + 8 * floors) / 2)


def monkey_steps(height: float, up: float, down: float) -> float:
    """Jumps a monkey needs to climb ``height``, gaining ``up`` and slipping ``down``.

    The last, partial jump counts as the fraction of ``up`` it takes.
    """
    if up == down:
        raise ValueError("the climb never progresses when up equals down")
    if up == 0:
        raise ValueError("up must not be zero")
    steps = float(math.ceil((height - up) / (up - down)))
    return steps + (height - steps * (up - down)) / up


def binary(n: int) -> str:
    """Return ``n`` as a 32-bit two's complement bit string."""
    return format(n & _WORD_MASK, "032b")


def is_power_of_two(n: int) -> bool:
    """Return True when ``n`` is a positive power of two."""
    return n != 0 and n & (n - 1) == 0


def random_bytes(length: int, seed: int | None = None) -> bytes:
    """Return ``length`` random bytes, at most 64.

    Without a ``seed`` the generator is seeded from the current time.
    """
    if not 0 <= length <= MAX_RANDOM_BYTES:
        raise ValueError(
            f"len {length} given too big, max len allowed {MAX_RANDOM_BYTES}"
        )
    rng = random.Random(int(time.time()) if seed is None else seed)
    return bytes(rng.getrandbits(8) for _ in range(length))


def _format_random_bytes(data: Sequence[int]) -> list[str]:
    return [f"i: {index:2d} | {byte:2x} " for index, byte in enumerate(data, 1)]