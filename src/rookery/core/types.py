"""Square / direction type aliases and coordinate helpers.

Board layout (row, column), both zero-indexed::

    (0, 0) ... (0, 7)    White's back row
    (1, 0) ... (1, 7)    White's pawns
    ...
    (7, 0) ... (7, 7)    Black's back row

Human-facing labels are one-indexed, so ``(0, 4)`` reads as ``1 5``.
"""

from __future__ import annotations

from itertools import product
from typing import TypeAlias

from rookery.core.enums import Sign

Square: TypeAlias = tuple[int, int]  # (row, column)
Direction: TypeAlias = tuple[Sign, Sign]  # (row sign, column sign)

BOARD_SIZE = 8

ALL_SQUARES: tuple[Square, ...] = tuple(product(range(BOARD_SIZE), range(BOARD_SIZE)))

_INC, _DEC, _ZERO = Sign.INCREASING, Sign.DECREASING, Sign.ZERO

ORTHOGONAL_DIRECTIONS: tuple[Direction, ...] = (
    (_INC, _ZERO),
    (_DEC, _ZERO),
    (_ZERO, _INC),
    (_ZERO, _DEC),
)
DIAGONAL_DIRECTIONS: tuple[Direction, ...] = (
    (_INC, _INC),
    (_DEC, _DEC),
    (_DEC, _INC),
    (_INC, _DEC),
)
ALL_DIRECTIONS: tuple[Direction, ...] = ORTHOGONAL_DIRECTIONS + DIAGONAL_DIRECTIONS


def is_orthogonal(direction: Direction) -> bool:
    """Whether *direction* runs along a row or a column."""
    return Sign.ZERO in direction


def square_label(sq: Square) -> str:
    """One-indexed ``"row col"`` label, e.g. ``(0, 4)`` → ``'1 5'``."""
    return f"{sq[0] + 1} {sq[1] + 1}"


def parse_square(text: str) -> Square:
    """Parse a one-indexed ``"row col"`` label, e.g. ``'1 5'`` → ``(0, 4)``.

    The result is not bounds-checked; callers decide whether an off-board
    square is an error (see :func:`rookery.core.geometry.in_bounds`).
    """
    parts = text.split()
    if len(parts) != 2:
        raise ValueError(f"Invalid square: {text!r}")
    try:
        row, col = (int(p) for p in parts)
    except ValueError:
        raise ValueError(f"Invalid square: {text!r}") from None
    return (row - 1, col - 1)
