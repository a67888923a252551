"""String to 32-bit integer conversion with saturation."""

from __future__ import annotations

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_LIMIT = (INT_MAX + 1) // 10


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def my_atoi(s: str) -> int:
    """Parse a leading signed integer from ``s``, clamped to 32-bit range.

    Leading spaces are skipped, one optional sign is accepted, and parsing
    stops at the first non-digit.  Text without a leading number gives 0.
    """
    n = len(s)
    i = 0
    while i < n and s[i] == " ":
        i += 1

    sign = s[i : i + 1]
    negative = sign == "-"
    if sign in ("-", "+"):
        i += 1

    while i < n and s[i] == "0":
        i += 1

    value = 0
    overflow = False
    while i < n:
        if value > _LIMIT:
            overflow = True
            break
        if not _is_digit(s[i]):
            break
        value = value * 10 + (ord(s[i]) - ord("0"))
        i += 1

    if i < n and not _is_digit(s[i]):
        overflow = False

    if value == 0:
        return 0
    if not negative:
        if not overflow and value < INT_MAX:
            return value
        return INT_MAX
    if not overflow and value < INT_MAX + 1:
        return -value
    return INT_MIN