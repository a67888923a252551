"""Minimum window substring."""

from __future__ import annotations

from collections import Counter


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` holding every character of ``t``.

    Characters of ``t`` count with multiplicity.  Among windows of the
    shortest length the leftmost is returned; ``""`` when there is none.
    """
    need = Counter(t)
    n = len(s)
    for size in range(len(t), n + 1):
        for start in range(n - size + 1):
            window = s[start : start + size]
            if need <= Counter(window):
                return window
    return ""