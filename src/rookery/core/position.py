"""Position: immutable game snapshot of board, side to move and turn counter."""

from __future__ import annotations

from collections.abc import Mapping

from rookery.core.board import Board
from rookery.core.enums import Color, PieceType
from rookery.core.piece import Piece
from rookery.core.geometry import in_bounds
from rookery.core.types import ALL_SQUARES, Square

_PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}


class Position:
    """Full game state as a value.

    Nothing on a Position mutates it: :meth:`execute` and :meth:`with_pieces`
    copy the board and return a new instance.  Validation can therefore be
    run any number of times, in any order, against the same snapshot.

    Well-formedness (exactly one king per color) is only checked when a
    position is read from text; see :mod:`rookery.core.notation.board_text`.
    """

    __slots__ = ("_board", "_side_to_move", "_turn")

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        turn: int = 0,
    ) -> None:
        if turn < 0:
            raise ValueError(f"Turn number must be >= 0, got {turn}")
        self._board = board.copy() if board is not None else Board.initial()
        self._side_to_move = side_to_move
        self._turn = turn

    # ── Constructors ─────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> Position:
        """Standard starting layout, turn 0, White to move."""
        return cls(Board.initial(), Color.WHITE, 0)

    @classmethod
    def empty(cls, side_to_move: Color = Color.WHITE, turn: int = 0) -> Position:
        """Empty board, for tests and scenario set-up."""
        return cls(Board(), side_to_move, turn)

    def with_pieces(self, pieces: Mapping[Square, Piece | None]) -> Position:
        """Copy of this position with the given squares replaced."""
        board = self._board.copy()
        for sq, piece in pieces.items():
            board[sq] = piece
        return Position(board, self._side_to_move, self._turn)

    # ── Accessors ────────────────────────────────────────────────────────

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._board[sq]

    def piece_at(self, sq: Square) -> Piece | None:
        return self._board[sq]

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    @property
    def turn(self) -> int:
        return self._turn

    @property
    def board(self) -> Board:
        """A copy of the underlying grid."""
        return self._board.copy()

    def find_king(self, color: Color | None = None) -> Square | None:
        """King square for *color* (default: side to move), ``None`` if absent."""
        return self._board.find_king(self._color(color))

    def king_square(self, color: Color | None = None) -> Square:
        """King square for *color*; raises :class:`ValueError` if absent."""
        return self._board.king_square(self._color(color))

    def pieces(self, color: Color | None = None) -> list[Square]:
        """Squares occupied by *color* (default: side to move), row by row."""
        return self._board.all_pieces(self._color(color))

    # ── Move execution ───────────────────────────────────────────────────

    def execute(self, from_sq: Square, to_sq: Square) -> Position:
        """Apply an already-validated move and return the next position.

        A pawn reaching the far row becomes a queen.  No legality check is
        made here.

        Raises:
            ValueError: if either square is off the board or *from_sq* is empty.
        """
        if not in_bounds(from_sq) or not in_bounds(to_sq):
            raise ValueError(f"Square out of bounds: {from_sq} -> {to_sq}")
        piece = self._board[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")

        board = self._board.copy()
        board[from_sq] = None
        if (
            piece.piece_type == PieceType.PAWN
            and to_sq[0] == _PROMOTION_ROW[piece.color]
        ):
            piece = Piece(piece.color, PieceType.QUEEN)
        board[to_sq] = piece

        return Position(board, self._side_to_move.other(), self._turn + 1)

    # ── Utilities ────────────────────────────────────────────────────────

    def _color(self, color: Color | None) -> Color:
        return self._side_to_move if color is None else color

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self._board == other._board
            and self._side_to_move == other._side_to_move
            and self._turn == other._turn
        )

    def __hash__(self) -> int:
        cells = tuple(self._board[sq] for sq in ALL_SQUARES)
        return hash((cells, self._side_to_move, self._turn))

    def __repr__(self) -> str:
        return f"Position({self._side_to_move} to move, turn {self._turn})\n{self._board!r}"
