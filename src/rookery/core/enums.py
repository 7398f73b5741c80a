"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    def other(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.capitalize()


class PieceType(IntEnum):
    """Chess piece types."""

    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6


class Sign(IntEnum):
    """Sign of a coordinate delta; one component of a :data:`Direction`."""

    DECREASING = -1
    ZERO = 0
    INCREASING = 1

    @classmethod
    def from_int(cls, value: int) -> Sign:
        if value < 0:
            return cls.DECREASING
        if value > 0:
            return cls.INCREASING
        return cls.ZERO

    def __str__(self) -> str:
        return self.name.capitalize()


class GameResult(Enum):
    """Outcome of a game."""

    IN_PROGRESS = "in progress"
    WHITE_WINS = "white wins"
    BLACK_WINS = "black wins"
    STALEMATE = "stalemate"

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS
