"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from rookery.core.enums import Color, PieceType
from rookery.core.piece import Piece
from rookery.core.types import ALL_SQUARES, BOARD_SIZE, Square

_BACK_ROW: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid indexed by ``(row, column)``.

    :class:`~rookery.core.position.Position` owns one and never hands it out,
    so mutation only ever happens on a fresh copy.
    """

    __slots__ = ("_rows",)

    def __init__(self) -> None:
        self._rows: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._rows[sq[0]][sq[1]]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._rows[sq[0]][sq[1]] = piece

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """``(square, piece)`` for every occupied square, row by row."""
        for sq in ALL_SQUARES:
            piece = self[sq]
            if piece is not None:
                yield sq, piece

    # -- Query helpers ------------------------------------------------------

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def find_king(self, color: Color) -> Square | None:
        king = Piece(color, PieceType.KING)
        for sq, piece in self.occupied():
            if piece == king:
                return sq
        return None

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*."""
        sq = self.find_king(color)
        if sq is None:
            raise ValueError(f"No {color.name} king on board")
        return sq

    def count(self, piece: Piece) -> int:
        return sum(1 for _, p in self.occupied() if p == piece)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._rows = [row.copy() for row in self._rows]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout."""
        b = cls()
        for col in range(BOARD_SIZE):
            b[(1, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[(6, col)] = Piece(Color.BLACK, PieceType.PAWN)

        for col, pt in enumerate(_BACK_ROW):
            b[(0, col)] = Piece(Color.WHITE, pt)
            b[(7, col)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        rows: list[str] = ["  1 2 3 4 5 6 7 8"]
        for r, row in enumerate(self._rows):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{r + 1} {' '.join(cells)}")
        return "\n".join(rows)
