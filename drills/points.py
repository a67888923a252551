"""A pair of integers that adds component-wise."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Pair:
    """Two integers ``x`` and ``y``."""

    x: int = 0
    y: int = 0

    def __add__(self, other: object) -> Pair:
        if not isinstance(other, Pair):
            return NotImplemented
        return Pair(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"