"""High-level rules: check status, terminal positions and move enumeration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookery.core.attacks import attackers_of
from rookery.core.enums import Color, GameResult
from rookery.core.types import ALL_SQUARES, Square
from rookery.core.validator import is_legal_move

if TYPE_CHECKING:
    from rookery.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def checking_squares(position: Position, color: Color | None = None) -> list[Square]:
        """Squares of the pieces currently giving check to *color*'s king."""
        color = position.side_to_move if color is None else color
        return attackers_of(position, position.king_square(color), color)

    @staticmethod
    def num_checking(position: Position, color: Color | None = None) -> int:
        return len(Rules.checking_squares(position, color))

    @staticmethod
    def is_in_check(position: Position, color: Color | None = None) -> bool:
        return Rules.num_checking(position, color) > 0

    @staticmethod
    def has_no_legal_move(position: Position, color: Color | None = None) -> bool:
        """Whether *color* has no legal move at all.

        Does not distinguish checkmate from stalemate; combine with
        :meth:`is_in_check` for that.
        """
        color = position.side_to_move if color is None else color
        for from_sq in position.pieces(color):
            for to_sq in ALL_SQUARES:
                if is_legal_move(position, from_sq, to_sq, color):
                    return False
        return True

    @staticmethod
    def is_checkmate(position: Position, color: Color | None = None) -> bool:
        return Rules.is_in_check(position, color) and Rules.has_no_legal_move(
            position, color
        )

    @staticmethod
    def is_stalemate(position: Position, color: Color | None = None) -> bool:
        return not Rules.is_in_check(position, color) and Rules.has_no_legal_move(
            position, color
        )

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the result for the side to move."""
        color = position.side_to_move
        if not Rules.has_no_legal_move(position, color):
            return GameResult.IN_PROGRESS
        if Rules.is_in_check(position, color):
            return GameResult.win_for(color.other())
        return GameResult.STALEMATE

    @staticmethod
    def legal_destinations(
        position: Position, from_sq: Square, color: Color | None = None
    ) -> list[Square]:
        """Every square the piece on *from_sq* may legally move to."""
        return [
            to_sq
            for to_sq in ALL_SQUARES
            if is_legal_move(position, from_sq, to_sq, color)
        ]

    @staticmethod
    def legal_moves(
        position: Position, color: Color | None = None
    ) -> list[tuple[Square, Square]]:
        """All legal ``(from, to)`` pairs for *color* (default: side to move)."""
        color = position.side_to_move if color is None else color
        return [
            (from_sq, to_sq)
            for from_sq in position.pieces(color)
            for to_sq in Rules.legal_destinations(position, from_sq, color)
        ]
