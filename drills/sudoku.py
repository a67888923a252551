"""Validation of a partially filled 9x9 sudoku board."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_BOX = 3


def transpose(board: list[list[str]]) -> None:
    """Transpose a square board in place."""
    size = len(board)
    for i in range(size):
        for j in range(i + 1, size):
            board[i][j], board[j][i] = board[j][i], board[i][j]


def _has_repeat(cells: Iterable[str]) -> bool:
    seen: set[str] = set()
    for cell in cells:
        if "0" <= cell <= "9":
            if cell in seen:
                return True
            seen.add(cell)
    return False


def _boxes(board: Sequence[Sequence[str]]) -> Iterable[list[str]]:
    size = len(board)
    for top in range(0, size, _BOX):
        for left in range(0, size, _BOX):
            yield [
                cell
                for row in board[top : top + _BOX]
                for cell in row[left : left + _BOX]
            ]


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Return True when no digit repeats in any row, column or 3x3 box.

    Cells that are not digits (such as ``"."``) are empty.  The board is
    not modified.
    """
    if any(_has_repeat(row) for row in board):
        return False
    if any(_has_repeat(column) for column in zip(*board)):
        return False
    return not any(_has_repeat(box) for box in _boxes(board))