"""Check and pin detection.

Attacks are found by looking *outward* from the defended square: along each
of the eight rays for sliders, and at fixed offsets for pawns, knights and
the enemy king.  A ray scan stops at the first occupied square; whatever
stands behind it is shielded.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from rookery.core.enums import Color, PieceType
from rookery.core.geometry import (
    direction_of,
    directed_ray,
    offset_squares,
    path_between,
)
from rookery.core.types import ALL_DIRECTIONS, Direction, Square, is_orthogonal

if TYPE_CHECKING:
    from rookery.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, -1),
    (1, 0),
    (1, 1),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)

# Squares an enemy pawn would capture from, relative to the defended square.
_PAWN_ATTACK_OFFSETS: dict[Color, tuple[tuple[int, int], ...]] = {
    Color.WHITE: ((1, 1), (1, -1)),
    Color.BLACK: ((-1, 1), (-1, -1)),
}

_ORTHOGONAL_SLIDERS = frozenset({PieceType.ROOK, PieceType.QUEEN})
_DIAGONAL_SLIDERS = frozenset({PieceType.BISHOP, PieceType.QUEEN})


def slider_types(direction: Direction) -> frozenset[PieceType]:
    """Piece types that attack along *direction*."""
    return _ORTHOGONAL_SLIDERS if is_orthogonal(direction) else _DIAGONAL_SLIDERS


def _first_match(
    position: Position,
    squares: Iterable[Square],
    color: Color,
    piece_types: frozenset[PieceType],
) -> Square | None:
    """Square of the first occupied square in *squares* if it matches.

    The scan ends at the first piece found, matching or not.
    """
    for sq in squares:
        piece = position[sq]
        if piece is None:
            continue
        if piece.color == color and piece.piece_type in piece_types:
            return sq
        return None
    return None


def _ranged_attackers(position: Position, target: Square, enemy: Color) -> list[Square]:
    found: list[Square] = []
    for direction in ALL_DIRECTIONS:
        sq = _first_match(
            position, directed_ray(target, direction), enemy, slider_types(direction)
        )
        if sq is not None:
            found.append(sq)
    return found


def _offset_attackers(
    position: Position,
    target: Square,
    offsets: tuple[tuple[int, int], ...],
    enemy: Color,
    piece_type: PieceType,
) -> list[Square]:
    found: list[Square] = []
    for sq in offset_squares(target, offsets):
        piece = position[sq]
        if piece is not None and piece.color == enemy and piece.piece_type == piece_type:
            found.append(sq)
    return found


def attackers_of(position: Position, king_square: Square, king_color: Color) -> list[Square]:
    """Enemy squares that would attack a *king_color* king on *king_square*.

    The square itself need not hold a king, which lets the validator ask
    whether a king may step somewhere.  Order: sliders, pawns, knights, king.
    """
    enemy = king_color.other()
    return [
        *_ranged_attackers(position, king_square, enemy),
        *_offset_attackers(
            position,
            king_square,
            _PAWN_ATTACK_OFFSETS[king_color],
            enemy,
            PieceType.PAWN,
        ),
        *_offset_attackers(position, king_square, KNIGHT_OFFSETS, enemy, PieceType.KNIGHT),
        *_offset_attackers(position, king_square, KING_OFFSETS, enemy, PieceType.KING),
    ]


def count_attackers(position: Position, king_square: Square, king_color: Color) -> int:
    return len(attackers_of(position, king_square, king_color))


def pin_direction(
    position: Position,
    blocking_square: Square,
    shielded_square: Square,
    color: Color,
) -> Direction | None:
    """Direction of the pin on *blocking_square*, or ``None`` if it is free.

    The piece is pinned when it has a clear line back to *shielded_square*
    (usually its own king) and the first piece beyond it on the same line is
    an enemy slider able to attack along that line.  The returned direction
    points from the shielded square towards the blocker.
    """
    direction = direction_of(shielded_square, blocking_square)
    if direction is None:
        return None
    if any(position[sq] is not None for sq in path_between(shielded_square, blocking_square)):
        return None
    pinner = _first_match(
        position,
        directed_ray(blocking_square, direction),
        color.other(),
        slider_types(direction),
    )
    return direction if pinner is not None else None
