"""Plain-text board format used for save files and checkpoints.

Layout::

    White            <- side to move
    12               <- turn number
     ♖  ♘  ♗ ...     <- eight rows of eight tokens, row 1 first

Each token is a piece glyph or ``_`` for an empty square.  Unknown tokens
read as empty squares.  A file is only accepted when it holds exactly one
king of each color.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rookery.core.board import Board
from rookery.core.enums import Color, PieceType
from rookery.core.piece import Piece
from rookery.core.position import Position
from rookery.core.types import BOARD_SIZE

_LOGGER = logging.getLogger(__name__)

EMPTY_TOKEN = "_"

_COLORS: dict[str, Color] = {str(c): c for c in Color}


class BoardFormatError(ValueError):
    """Text could not be read as a position."""


def position_to_text(position: Position) -> str:
    """Serialise *position* to the board text format."""
    lines = [str(position.side_to_move), str(position.turn)]
    for row in range(BOARD_SIZE):
        cells = []
        for col in range(BOARD_SIZE):
            piece = position[(row, col)]
            cells.append(f" {piece if piece is not None else EMPTY_TOKEN} ")
        lines.append("".join(cells))
    return "\n".join(lines) + "\n"


def _parse_token(token: str) -> Piece | None:
    try:
        return Piece.from_glyph(token)
    except ValueError:
        return None


def position_from_text(text: str) -> Position:
    """Parse the board text format into a :class:`Position`.

    Raises:
        BoardFormatError: on a bad side-to-move or turn line, or when the
            board does not hold exactly one king per color.
    """
    lines = text.splitlines()

    side = _COLORS.get(lines[0].strip()) if lines else None
    if side is None:
        raise BoardFormatError("Couldn't parse player!")

    try:
        turn = int(lines[1].strip())
    except (IndexError, ValueError):
        raise BoardFormatError("Couldn't parse turn number!") from None
    if turn < 0:
        raise BoardFormatError("Couldn't parse turn number!")

    board = Board()
    for row, line in enumerate(lines[2 : 2 + BOARD_SIZE]):
        for col, token in enumerate(line.split()[:BOARD_SIZE]):
            board[(row, col)] = _parse_token(token)

    kings = (
        board.count(Piece(Color.WHITE, PieceType.KING)),
        board.count(Piece(Color.BLACK, PieceType.KING)),
    )
    if kings != (1, 1):
        raise BoardFormatError("Wrong number of Kings on the board.")

    return Position(board, side, turn)


def save_position(position: Position, path: str | Path) -> None:
    """Write *position* to *path*; I/O errors propagate as :class:`OSError`."""
    Path(path).write_text(position_to_text(position), encoding="utf-8")


def load_position(path: str | Path) -> Position:
    """Read a position from *path*.

    Raises:
        OSError: if the file cannot be read.
        BoardFormatError: if its contents are malformed.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        return position_from_text(text)
    except BoardFormatError as exc:
        _LOGGER.warning("Rejected board file %s: %s", path, exc)
        raise
