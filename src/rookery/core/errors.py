"""Exceptions raised by move validation and random-move selection.

Illegal moves are ordinary outcomes and are reported with
:class:`IllegalMoveError`.  Broken caller contracts (non-aligned squares
passed to geometry helpers, executing from an empty square, a missing
king) raise :class:`ValueError` instead and are not meant to be caught.
"""

from __future__ import annotations

from enum import Enum


class MoveError(Enum):
    """Why a move was rejected."""

    OUT_OF_BOUNDS = "out of bounds"
    NO_PIECE = "no piece"
    NOT_YOUR_PIECE = "not your piece"
    CAPTURE_KING = "capture king"
    SQUARE_OCCUPIED = "square occupied"
    INVALID_MOVE = "invalid move"
    STILL_IN_CHECK = "still in check"
    SELF_CHECK = "self check"
    PINNED_NO_LINE = "pinned, no line"
    PINNED_OFF_LINE = "pinned, off line"
    PINNED_IN_CHECK = "pinned while in check"
    MUST_MOVE_KING = "must move king"


_MESSAGES: dict[MoveError, str] = {
    MoveError.OUT_OF_BOUNDS: "Square is out of bounds.",
    MoveError.NO_PIECE: "No piece exists in this location.",
    MoveError.NOT_YOUR_PIECE: "This piece does not belong to you.",
    MoveError.CAPTURE_KING: "Cannot capture the King.",
    MoveError.SQUARE_OCCUPIED: "Can't move here. Square occupied.",
    MoveError.INVALID_MOVE: "Invalid move.",
    MoveError.STILL_IN_CHECK: "King is still in check.",
    MoveError.SELF_CHECK: "King cannot place himself in check.",
    MoveError.PINNED_NO_LINE: "This piece is pinned. It cannot be moved.",
    MoveError.PINNED_OFF_LINE: (
        "This piece is pinned. It cannot be moved in this direction."
    ),
    MoveError.PINNED_IN_CHECK: (
        "This piece is pinned. Move another piece to get King out of check."
    ),
    MoveError.MUST_MOVE_KING: "Must move King out of check.",
}


class IllegalMoveError(Exception):
    """A proposed move breaks the rules; the caller should try another."""

    def __init__(self, reason: MoveError, message: str | None = None) -> None:
        self.reason = reason
        self.message = message or _MESSAGES[reason]
        super().__init__(self.message)


class NoLegalMoveError(Exception):
    """The side to move has no legal move at all."""
