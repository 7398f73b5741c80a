"""Per-piece movement rules, ignoring check and pins."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from rookery.core.enums import Color, PieceType
from rookery.core.errors import IllegalMoveError, MoveError
from rookery.core.geometry import is_diagonal, is_horizontal, is_vertical, path_between
from rookery.core.piece import Piece
from rookery.core.types import Square

if TYPE_CHECKING:
    from rookery.core.position import Position

# color -> (forward row step, home row)
_PAWN_GEOMETRY: dict[Color, tuple[int, int]] = {
    Color.WHITE: (1, 1),
    Color.BLACK: (-1, 6),
}


def is_clear_path(position: Position, from_sq: Square, to_sq: Square) -> bool:
    """Whether every square strictly between two aligned squares is empty."""
    return all(position[sq] is None for sq in path_between(from_sq, to_sq))


def _pawn(position: Position, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    step, home_row = _PAWN_GEOMETRY[piece.color]
    d_row = to_sq[0] - from_sq[0]
    d_col = to_sq[1] - from_sq[1]
    if position[to_sq] is None:
        if d_col != 0:
            return False
        # The double step only looks at the destination square.
        return d_row == step or (from_sq[0] == home_row and d_row == 2 * step)
    return abs(d_col) == 1 and d_row == step


def _rook(position: Position, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    return (is_horizontal(from_sq, to_sq) or is_vertical(from_sq, to_sq)) and (
        is_clear_path(position, from_sq, to_sq)
    )


def _bishop(position: Position, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    return is_diagonal(from_sq, to_sq) and is_clear_path(position, from_sq, to_sq)


def _queen(position: Position, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    return _rook(position, piece, from_sq, to_sq) or _bishop(
        position, piece, from_sq, to_sq
    )


def _knight(position: Position, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    delta = (abs(to_sq[0] - from_sq[0]), abs(to_sq[1] - from_sq[1]))
    return delta in ((1, 2), (2, 1))


def _king(position: Position, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
    d_row = abs(to_sq[0] - from_sq[0])
    d_col = abs(to_sq[1] - from_sq[1])
    return d_row <= 1 and d_col <= 1 and (d_row, d_col) != (0, 0)


_RULES: dict[PieceType, Callable[[Position, Piece, Square, Square], bool]] = {
    PieceType.PAWN: _pawn,
    PieceType.ROOK: _rook,
    PieceType.KNIGHT: _knight,
    PieceType.BISHOP: _bishop,
    PieceType.QUEEN: _queen,
    PieceType.KING: _king,
}


def can_move(piece: Piece, position: Position, from_sq: Square, to_sq: Square) -> None:
    """Check that *piece* may travel from *from_sq* to *to_sq* on this board.

    Only geometry and occupancy are considered; whether the move exposes
    the king is the validator's business.

    Raises:
        IllegalMoveError: with :attr:`MoveError.INVALID_MOVE`.
    """
    if not _RULES[piece.piece_type](position, piece, from_sq, to_sq):
        raise IllegalMoveError(MoveError.INVALID_MOVE)
