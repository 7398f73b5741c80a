"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from rookery.core import Position, Rules, validate_move

    pos = Position.initial()
    validate_move(pos, (1, 4), (3, 4))
    pos = pos.execute((1, 4), (3, 4))
    print(Rules.legal_moves(pos)[:3])
"""

from rookery.core.attacks import attackers_of, count_attackers, pin_direction
from rookery.core.board import Board
from rookery.core.enums import Color, GameResult, PieceType, Sign
from rookery.core.errors import IllegalMoveError, MoveError, NoLegalMoveError
from rookery.core.geometry import (
    direction_of,
    directed_ray,
    in_bounds,
    is_diagonal,
    is_horizontal,
    is_vertical,
    path_between,
)
from rookery.core.movement import can_move
from rookery.core.notation import (
    BoardFormatError,
    load_position,
    position_from_text,
    position_to_text,
    save_position,
)
from rookery.core.piece import Piece
from rookery.core.position import Position
from rookery.core.rules import Rules
from rookery.core.types import Direction, Square, parse_square, square_label
from rookery.core.validator import is_legal_move, validate_from, validate_move

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    "Sign",
    # Types / helpers
    "Direction",
    "Square",
    "parse_square",
    "square_label",
    # Geometry
    "direction_of",
    "directed_ray",
    "in_bounds",
    "is_diagonal",
    "is_horizontal",
    "is_vertical",
    "path_between",
    # Domain objects
    "Board",
    "Piece",
    "Position",
    "Rules",
    # Rules
    "attackers_of",
    "can_move",
    "count_attackers",
    "is_legal_move",
    "pin_direction",
    "validate_from",
    "validate_move",
    # Errors
    "BoardFormatError",
    "IllegalMoveError",
    "MoveError",
    "NoLegalMoveError",
    # Notation
    "load_position",
    "position_from_text",
    "position_to_text",
    "save_position",
]
