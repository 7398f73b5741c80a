"""Tests for Position snapshots and move execution."""

import pytest

from rookery.core.enums import Color, PieceType
from rookery.core.piece import Piece
from rookery.core.position import Position
from rookery.core.rules import Rules

W_KING = Piece(Color.WHITE, PieceType.KING)
B_KING = Piece(Color.BLACK, PieceType.KING)
W_PAWN = Piece(Color.WHITE, PieceType.PAWN)
B_PAWN = Piece(Color.BLACK, PieceType.PAWN)
W_QUEEN = Piece(Color.WHITE, PieceType.QUEEN)
B_QUEEN = Piece(Color.BLACK, PieceType.QUEEN)


class TestConstruction:
    def test_initial(self) -> None:
        pos = Position.initial()
        assert pos.side_to_move == Color.WHITE
        assert pos.turn == 0
        assert pos[(0, 4)] == W_KING

    def test_empty(self) -> None:
        pos = Position.empty(Color.BLACK, 5)
        assert pos.side_to_move == Color.BLACK
        assert pos.turn == 5
        assert pos.pieces(Color.WHITE) == []
        assert pos.pieces(Color.BLACK) == []

    def test_negative_turn_rejected(self) -> None:
        with pytest.raises(ValueError):
            Position.empty(turn=-1)

    def test_with_pieces_leaves_original(self) -> None:
        base = Position.empty()
        pos = base.with_pieces({(0, 0): W_KING, (7, 7): B_KING})
        assert pos[(0, 0)] == W_KING
        assert base[(0, 0)] is None

    def test_board_accessor_returns_copy(self) -> None:
        pos = Position.initial()
        board = pos.board
        board[(0, 4)] = None
        assert pos[(0, 4)] == W_KING


class TestAccessors:
    def test_pieces_default_to_side_to_move(self) -> None:
        pos = Position.initial()
        assert pos.pieces() == pos.pieces(Color.WHITE)
        assert (0, 0) in pos.pieces()

    def test_king_square(self) -> None:
        pos = Position.initial()
        assert pos.king_square() == (0, 4)
        assert pos.king_square(Color.BLACK) == (7, 4)

    def test_find_king_absent(self) -> None:
        assert Position.empty().find_king() is None

    def test_piece_at(self) -> None:
        pos = Position.initial()
        assert pos.piece_at((6, 0)) == B_PAWN


class TestExecute:
    def test_returns_new_position(self) -> None:
        pos = Position.initial()
        after = pos.execute((1, 4), (3, 4))
        assert after is not pos
        assert pos[(1, 4)] == W_PAWN
        assert after[(1, 4)] is None
        assert after[(3, 4)] == W_PAWN

    def test_flips_side_and_counts_turn(self) -> None:
        pos = Position.initial().execute((1, 4), (3, 4))
        assert pos.side_to_move == Color.BLACK
        assert pos.turn == 1
        pos = pos.execute((6, 4), (4, 4))
        assert pos.side_to_move == Color.WHITE
        assert pos.turn == 2

    def test_capture_replaces_target(self) -> None:
        pos = Position.empty().with_pieces({(3, 3): W_QUEEN, (5, 5): B_PAWN})
        after = pos.execute((3, 3), (5, 5))
        assert after[(5, 5)] == W_QUEEN
        assert after.board.count(B_PAWN) == 0

    def test_white_pawn_promotes(self) -> None:
        pos = Position.empty().with_pieces({(6, 2): W_PAWN})
        after = pos.execute((6, 2), (7, 2))
        assert after[(7, 2)] == W_QUEEN

    def test_black_pawn_promotes(self) -> None:
        pos = Position.empty(Color.BLACK).with_pieces({(1, 5): B_PAWN})
        after = pos.execute((1, 5), (0, 5))
        assert after[(0, 5)] == B_QUEEN

    def test_pawn_short_of_last_row_stays_pawn(self) -> None:
        pos = Position.empty().with_pieces({(5, 2): W_PAWN})
        assert pos.execute((5, 2), (6, 2))[(6, 2)] == W_PAWN

    def test_empty_source_raises(self) -> None:
        with pytest.raises(ValueError):
            Position.empty().execute((3, 3), (4, 4))

    @pytest.mark.parametrize("to_sq", [(-1, 4), (8, 4), (1, -1)])
    def test_off_board_destination_raises(self, to_sq: tuple[int, int]) -> None:
        pos = Position.initial()
        with pytest.raises(ValueError, match="out of bounds"):
            pos.execute((1, 4), to_sq)

    def test_off_board_source_raises(self) -> None:
        with pytest.raises(ValueError, match="out of bounds"):
            Position.initial().execute((-7, 0), (2, 0))

    def test_bookkeeping_for_every_opening_move(self) -> None:
        pos = Position.initial()
        for from_sq, to_sq in Rules.legal_moves(pos):
            after = pos.execute(from_sq, to_sq)
            assert after.turn == pos.turn + 1
            assert after.side_to_move == Color.BLACK


class TestEquality:
    def test_fieldwise(self) -> None:
        assert Position.initial() == Position.initial()
        assert Position.initial() != Position(side_to_move=Color.BLACK)
        assert Position.initial() != Position(turn=3)

    def test_equal_positions_hash_alike(self) -> None:
        a = Position.initial().execute((1, 4), (3, 4))
        b = Position.initial().execute((1, 4), (3, 4))
        assert hash(a) == hash(b)
        assert len({a, b, Position.initial()}) == 2

    def test_repr_mentions_side_and_turn(self) -> None:
        assert "White to move, turn 0" in repr(Position.initial())
