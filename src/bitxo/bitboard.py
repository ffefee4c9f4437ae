"""Bit-set board encoding and win/draw detection for 3x3 tic-tac-toe.

Each player's claimed squares live in a 9-bit integer: bit ``i`` is set when
square ``i`` (row-major, top-left = 0) belongs to that player.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

BOARD_SQUARES = 9

ALL_SQUARES_OCCUPIED = 0b111111111

LINE_SQUARES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


# ---------- Bit operations ----------


def is_occupied(mask: int, index: int) -> bool:
    return bool(mask & (1 << index))


def occupy(mask: int, index: int) -> int:
    """Return ``mask`` with square ``index`` set.

    Callers must only occupy a square that neither player holds.
    """
    assert not is_occupied(mask, index), f"square {index} is already occupied"
    return mask | (1 << index)


def vacate(mask: int, index: int) -> int:
    """Return ``mask`` with square ``index`` cleared."""
    return mask & ~(1 << index)


def union(a: int, b: int) -> int:
    return a | b


def squares(mask: int) -> List[int]:
    """Ascending square indices set in ``mask``."""
    return [i for i in range(BOARD_SQUARES) if mask & (1 << i)]


def from_squares(indices: Iterable[int]) -> int:
    mask = 0
    for index in indices:
        mask |= 1 << index
    return mask


def free_squares(a: int, b: int) -> List[int]:
    """Ascending squares held by neither ``a`` nor ``b``."""
    return squares(ALL_SQUARES_OCCUPIED & ~(a | b))


# Rows, columns, then the two diagonals.
WINNING_LINES: Tuple[int, ...] = tuple(from_squares(line) for line in LINE_SQUARES)


# ---------- Evaluation ----------


def has_won(mask: int) -> bool:
    for line in WINNING_LINES:
        if mask & line == line:
            return True
    return False


def is_draw(union_mask: int) -> bool:
    # Only meaningful once has_won() has been ruled out for both sides.
    return union_mask == ALL_SQUARES_OCCUPIED
