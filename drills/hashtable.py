"""A 26-slot open-addressing hash table driven by ``A<key>``/``D<key>`` commands.

Keys are lowercase words of at most ten letters.  A key hashes to the slot of
its last letter, and collisions are resolved by linear probing.  Deleted keys
leave a tombstone behind, which a later insertion may reuse.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

TABLE_SIZE = 26
MAX_KEY_LENGTH = 10
DEFAULT_INPUT = "Aapple Agrape Dapple Astrawberry Aorange"


class OpType(Enum):
    """Kind of command found in the input."""

    UNKNOWN = 0
    ADD = 1
    DELETE = 2


_OP_CODES = {"A": OpType.ADD, "D": OpType.DELETE}
_OP_LABELS = {
    OpType.ADD: "Add",
    OpType.DELETE: "Delete",
    OpType.UNKNOWN: "Unknown",
}


@dataclass(frozen=True)
class OpToken:
    """One parsed command: an operation and the key it applies to."""

    operation: OpType
    key: str


def _is_valid_key(key: str) -> bool:
    return len(key) <= MAX_KEY_LENGTH and all("a" <= ch <= "z" for ch in key)


def _format_token(token: OpToken) -> str:
    return f"[{_OP_LABELS[token.operation]}, {token.key}]"


def _report(label: str, key: str, outcome: bool) -> str:
    """Format one command result the way a boolalpha stream prints it."""
    return f"{label}: {key} {str(outcome).lower()}"


class Parser:
    """Splits command text into tokens, dropping anything malformed."""

    def __init__(self, text: str = "") -> None:
        self._tokens: list[OpToken] = []
        self.tokenize(text)

    def tokenize(self, text: str) -> None:
        """Append the valid commands found in ``text``."""
        for word in text.split():
            if len(word) <= 1:
                continue
            operation = _OP_CODES.get(word[0])
            key = word[1:]
            if operation is not None and _is_valid_key(key):
                self._tokens.append(OpToken(operation, key))

    def __iter__(self) -> Iterator[OpToken]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __str__(self) -> str:
        return "".join(f"{_format_token(token)} " for token in self._tokens)


class _CellState(Enum):
    NEVER_USED = "NeverUsed"
    TOMBSTONED = "Tombstoned"
    OCCUPIED = "Occupied"


@dataclass
class _Cell:
    state: _CellState = _CellState.NEVER_USED
    key: str = ""


class HashTable:
    """Fixed-size table with linear probing and tombstones."""

    def __init__(self, text: str = "") -> None:
        self._cells = [_Cell() for _ in range(TABLE_SIZE)]
        self._parser = Parser(text)
        self.log: list[str] = []

    def find(self, key: str) -> int | None:
        """Return the slot holding ``key`` or the first non-occupied slot.

        ``None`` means every slot is occupied by other keys.
        """
        if not key or not "a" <= key[-1] <= "z":
            raise ValueError(f"key must end in a lowercase letter: {key!r}")
        start = ord(key[-1]) - ord("a")
        for step in range(TABLE_SIZE):
            index = (start + step) % TABLE_SIZE
            cell = self._cells[index]
            if cell.state is not _CellState.OCCUPIED or cell.key == key:
                return index
        return None

    def add(self, key: str) -> bool:
        """Store ``key``; False when the table has no room for it."""
        index = self.find(key)
        if index is None:
            return False
        self._cells[index] = _Cell(_CellState.OCCUPIED, key)
        return True

    def delete(self, key: str) -> bool:
        """Tombstone ``key`` if present; False only when the table is full."""
        index = self.find(key)
        if index is None:
            return False
        cell = self._cells[index]
        if cell.state is _CellState.OCCUPIED:
            cell.state = _CellState.TOMBSTONED
        return True

    def tokenize(self, text: str) -> HashTable:
        """Parse more commands from ``text``; returns the table for chaining."""
        self._parser.tokenize(text)
        return self

    def execute(self) -> list[str]:
        """Run every parsed command and return one report line per command."""
        lines: list[str] = []
        for token in self._parser:
            if token.operation is OpType.ADD:
                lines.append(_report("Add", token.key, self.add(token.key)))
            elif token.operation is OpType.DELETE:
                lines.append(_report("Delete", token.key, self.delete(token.key)))
            else:
                lines.append("Error: Unknown type provided...")
        self.log.extend(lines)
        return lines

    def __str__(self) -> str:
        parts = [
            "========== HashTable internal parser state ==========\n",
            f"{self._parser}\n",
            "============== HashTable internal state ==============\n",
        ]
        parts.extend(
            f"[{index:>2}]:: [{cell.state.value:>11}, {cell.key:>10}]\n"
            for index, cell in enumerate(self._cells)
        )
        return "".join(parts)


class HashTableBuilder:
    """Fluent construction of a :class:`HashTable`."""

    def __init__(self) -> None:
        self._data = ""
        self._execute = False

    def with_initial_data(self, data: str) -> HashTableBuilder:
        self._data = data
        return self

    def execute_tokenized_data(self, flag: bool) -> HashTableBuilder:
        self._execute = bool(flag)
        return self

    def build(self) -> HashTable:
        table = HashTable(self._data)
        if self._execute:
            table.execute()
        return table


def main(argv: Sequence[str] | None = None) -> int:
    """Run the commands given as arguments (or a demo set) and show the table."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = " ".join(args) if args else DEFAULT_INPUT
    table = (
        HashTableBuilder().with_initial_data(text).execute_tokenized_data(True).build()
    )
    for line in table.log:
        print(line)
    print(table, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())