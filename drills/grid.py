"""Card movement on a 2D board of columns (task-board style).

Cards sit in columns; each card is identified by an integer id and placed at a
``(row, column)`` coordinate.  Moving a card onto an occupied cell pushes the
occupant one row down, and the column the occupant is pushed out of closes
its gap.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

Coord = tuple[int, int]

_EMPTY = -1


def _move(pos: dict[Coord, int], old: Coord, new: Coord) -> None:
    """Move the card at ``old`` to ``new``, shifting cards as the rules say."""
    if new not in pos:
        pos[new] = pos[old]
        pos[old] = _EMPTY
        return

    _move(pos, new, (new[0] + 1, new[1]))
    pos[new] = pos[old]
    pos[old] = _EMPTY

    old_row, old_col = old
    # Keys created during the sweep always sort before the current one,
    # so a sorted snapshot visits exactly what an ordered-map walk would.
    for key in sorted(pos):
        value = pos[key]
        row, col = key
        if col == old_col and row > old_row and value > _EMPTY:
            pos[(row - 1, col)] = value
            pos[key] = _EMPTY


def solution(
    cards: Iterable[Sequence[int]],
    moves: Iterable[Sequence[int]],
    query: int,
) -> list[int]:
    """Return ``[row, column]`` of card ``query`` after applying ``moves``.

    ``cards`` holds ``[card_id, row, column]`` entries and ``moves`` holds
    ``[card_id, old_row, old_column, new_row, new_column]`` entries.  An empty
    list is returned when the card is not on the board.
    """
    pos: dict[Coord, int] = {(row, col): card_id for card_id, row, col in cards}

    for _card_id, old_row, old_col, new_row, new_col in moves:
        _move(pos, (old_row, old_col), (new_row, new_col))

    result: list[int] = []
    for key in sorted(pos):
        if pos[key] == query:
            result.extend(key)
    return result