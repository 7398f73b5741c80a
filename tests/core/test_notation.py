"""Tests for the plain-text board format."""

from pathlib import Path

import pytest

from rookery.core.enums import Color, PieceType
from rookery.core.notation import (
    BoardFormatError,
    load_position,
    position_from_text,
    position_to_text,
    save_position,
)
from rookery.core.piece import Piece
from rookery.core.position import Position

_EMPTY_ROW = " _ " * 8


def _text(side: str, turn: str, rows: dict[int, str]) -> str:
    lines = [side, turn]
    lines += [rows.get(r, _EMPTY_ROW) for r in range(8)]
    return "\n".join(lines) + "\n"


_KINGS = {0: " _  _  _  _  ♔  _  _  _ ", 7: " _  _  _  _  ♚  _  _  _ "}


class TestSerialise:
    def test_initial_layout(self) -> None:
        lines = position_to_text(Position.initial()).splitlines()
        assert lines[0] == "White"
        assert lines[1] == "0"
        assert lines[2] == " ♖  ♘  ♗  ♕  ♔  ♗  ♘  ♖ "
        assert lines[5] == _EMPTY_ROW
        assert lines[9] == " ♜  ♞  ♝  ♛  ♚  ♝  ♞  ♜ "
        assert len(lines) == 10

    def test_trailing_newline(self) -> None:
        assert position_to_text(Position.initial()).endswith("\n")


class TestParse:
    def test_round_trip_initial(self) -> None:
        pos = Position.initial()
        assert position_from_text(position_to_text(pos)) == pos

    def test_round_trip_midgame(self) -> None:
        pos = Position.initial().execute((1, 4), (3, 4)).execute((6, 3), (4, 3))
        back = position_from_text(position_to_text(pos))
        assert back == pos
        assert back.turn == 2
        assert back.side_to_move == Color.WHITE

    def test_black_to_move(self) -> None:
        pos = position_from_text(_text("Black", "17", _KINGS))
        assert pos.side_to_move == Color.BLACK
        assert pos.turn == 17
        assert pos[(0, 4)] == Piece(Color.WHITE, PieceType.KING)

    def test_unknown_tokens_are_empty(self) -> None:
        rows = dict(_KINGS)
        rows[3] = " x  ?  ♘  _  _  _  _  _ "
        pos = position_from_text(_text("White", "3", rows))
        assert pos[(3, 0)] is None
        assert pos[(3, 1)] is None
        assert pos[(3, 2)] == Piece(Color.WHITE, PieceType.KNIGHT)

    def test_bad_player(self) -> None:
        with pytest.raises(BoardFormatError, match="Couldn't parse player!"):
            position_from_text(_text("Green", "0", _KINGS))

    def test_empty_text(self) -> None:
        with pytest.raises(BoardFormatError, match="player"):
            position_from_text("")

    @pytest.mark.parametrize("turn", ["x", "-1", ""])
    def test_bad_turn(self, turn: str) -> None:
        with pytest.raises(BoardFormatError, match="Couldn't parse turn number!"):
            position_from_text(_text("White", turn, _KINGS))

    def test_missing_king(self) -> None:
        rows = {0: _KINGS[0]}
        with pytest.raises(BoardFormatError, match="Wrong number of Kings"):
            position_from_text(_text("White", "0", rows))

    def test_two_white_kings(self) -> None:
        rows = dict(_KINGS)
        rows[2] = " ♔  _  _  _  _  _  _  _ "
        with pytest.raises(BoardFormatError, match="Wrong number of Kings"):
            position_from_text(_text("White", "0", rows))

    def test_format_error_is_value_error(self) -> None:
        assert issubclass(BoardFormatError, ValueError)


class TestFiles:
    def test_save_and_load(self, tmp_path: Path) -> None:
        path = tmp_path / "game.board"
        pos = Position.initial().execute((0, 6), (2, 5))
        save_position(pos, path)
        assert load_position(path) == pos

    def test_load_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_position(tmp_path / "nope.board")

    def test_load_malformed_logs_warning(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "bad.board"
        path.write_text("Purple\n0\n", encoding="utf-8")
        with caplog.at_level("WARNING"), pytest.raises(BoardFormatError):
            load_position(path)
        assert "Rejected board file" in caplog.text
