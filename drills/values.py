"""A value that holds one of a few basic kinds and prints each its own way."""

from __future__ import annotations

from enum import Enum
from typing import Union

Basic = Union[bool, int, float, str]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1


class Kind(Enum):
    """Which kind of value is held."""

    UNSIGNED = "unsigned"
    SIGNED = "signed"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"


def _quoted(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class CommonDataType:
    """Holds a 64-bit integer, a float, a string or a boolean.

    Without data it holds unsigned zero.
    """

    def __init__(self, data: Basic | None = None) -> None:
        self.kind = Kind.UNSIGNED
        self.value: Basic = 0
        if data is not None:
            self.write(data)

    def write(self, data: Basic) -> None:
        """Replace the held value with ``data``."""
        if isinstance(data, bool):
            self.kind, self.value = Kind.BOOL, data
        elif isinstance(data, int):
            if _INT64_MIN <= data <= _INT64_MAX:
                self.kind = Kind.SIGNED
            elif 0 <= data <= _UINT64_MAX:
                self.kind = Kind.UNSIGNED
            else:
                raise ValueError(f"integer {data} does not fit in 64 bits")
            self.value = data
        elif isinstance(data, float):
            self.kind, self.value = Kind.FLOAT, data
        elif isinstance(data, str):
            self.kind, self.value = Kind.STRING, data
        else:
            raise TypeError(f"unsupported type: {type(data).__name__}")

    def __str__(self) -> str:
        if self.kind is Kind.BOOL:
            return "true" if self.value else "false"
        if self.kind is Kind.STRING:
            return _quoted(str(self.value))
        if self.kind is Kind.FLOAT:
            return f"{self.value:g}"
        return str(self.value)

    def __repr__(self) -> str:
        return f"CommonDataType({self.value!r})"