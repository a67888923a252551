"""Recursive-descent recogniser for the pattern ``(ha+)+``.

Grammar::

    S -> h J
    J -> a S | a J | a
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

_BAD_ENDS = (
    "unexpected tokens at the start/end of input string parsing "
    'stopped, expected "h" at start and "a" at the end'
)
_END_OF_INPUT = "parsing failed: unexpected end of input"

DEFAULT_CASES = ("ha", "haha", "hahaha", "hahaaa", "haah", "ah", "h", "haaaaaah")


def _quoted(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class RegexHa:
    """Matches a whole string against ``(ha+)+`` and explains failures."""

    def __init__(self) -> None:
        self.text = ""
        self.succeeded = False
        self.error = ""
        self._pos = 0

    def _match(self, ch: str) -> bool:
        if self._pos < len(self.text) and self.text[self._pos] == ch:
            self._pos += 1
            return True
        return False

    def _rule_s(self) -> bool:
        if not self._match("h"):
            return False
        # The J alternatives all fail at the same position once an 'a' is
        # missing, so the recursion collapses into a loop.
        while True:
            if not self._match("a"):
                return False
            if self._pos == len(self.text):
                return True
            self._match("h")

    def parse(self, text: str) -> bool:
        """Return True when all of ``text`` matches the pattern."""
        self.text = text
        self._pos = 0
        self.error = ""

        if not (text.startswith("h") and text.endswith("a")):
            self.succeeded = False
            self.error = _BAD_ENDS
            return False

        self.succeeded = self._rule_s() and self._pos == len(text)
        if not self.succeeded:
            if self._pos < len(text):
                self.error = (
                    f"parsing failed at position: {self._pos} (expected more input)"
                )
            else:
                self.error = _END_OF_INPUT
        return self.succeeded

    def __str__(self) -> str:
        outcome = "parsed with success" if self.succeeded else self.error
        return f"{_quoted(self.text)} {outcome}"


def main(argv: Sequence[str] | None = None) -> int:
    """Check each argument (or a demo set) and print the verdict."""
    args = list(sys.argv[1:] if argv is None else argv)
    for text in args or DEFAULT_CASES:
        regex = RegexHa()
        result = regex.parse(text)
        print(f"{'true' if result else 'false'} {regex}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())