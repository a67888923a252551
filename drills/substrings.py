"""Substrings made of a concatenation of all given words."""

from __future__ import annotations

from collections.abc import Sequence


def find_substring(s: str, words: Sequence[str]) -> list[int]:
    """Return start indices where ``s`` holds every word once, in any order.

    All words are taken to have the length of the first one.
    """
    if not words:
        raise ValueError("words must not be empty")
    width = len(words[0])
    if width == 0:
        raise ValueError("words must not be empty strings")

    span = width * len(words)
    target = sorted(words)
    return [
        start
        for start in range(len(s) - span + 1)
        if sorted(s[j : j + width] for j in range(start, start + span, width))
        == target
    ]