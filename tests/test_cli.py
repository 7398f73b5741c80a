"""Tests for the terminal front end: command parsing and scripted games."""

import random
from collections.abc import Iterable
from pathlib import Path

import pytest

from rookery.cli import (
    Command,
    CommandKind,
    TerminalGame,
    _build_parser,
    _settings_from_args,
    main,
    parse_command,
)
from rookery.config import AppSettings
from rookery.core.enums import Color, PieceType
from rookery.core.piece import Piece
from rookery.core.position import Position
from rookery.game.player import RandomMover

_PLAIN = AppSettings(checkpoint_path=None, use_color=False)


class _Script:
    """Feeds scripted lines to the game and records everything it prints."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.output: list[str] = []

    def read(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError from None

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def _play(
    lines: Iterable[str],
    start: Position | None = None,
    settings: AppSettings = _PLAIN,
) -> tuple[TerminalGame, _Script]:
    script = _Script(lines)
    game = TerminalGame(
        settings,
        mover=RandomMover(random.Random(5)),
        input_fn=script.read,
        output_fn=script.write,
    )
    game.run(start)
    return game, script


class TestParseCommand:
    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("r", CommandKind.RANDOM),
            ("b", CommandKind.BACK),
            ("B", CommandKind.BACK),
            ("q", CommandKind.QUIT),
            ("Q", CommandKind.QUIT),
            ("yes", CommandKind.YES),
            ("Y", CommandKind.YES),
            ("u", CommandKind.UNDO),
            ("U", CommandKind.UNDO),
        ],
    )
    def test_single_letter_commands(self, text: str, kind: CommandKind) -> None:
        assert parse_command(text) == Command(kind)

    def test_location_is_one_indexed(self) -> None:
        assert parse_command(" 2 5\n") == Command(CommandKind.LOCATION, square=(1, 4))

    def test_save_and_load_paths(self) -> None:
        assert parse_command("s my.board") == Command(CommandKind.SAVE, path="my.board")
        assert parse_command("l  other.board ") == Command(
            CommandKind.LOAD, path="other.board"
        )

    @pytest.mark.parametrize("text", ["", "hello", "1", "1 2 3", "one two"])
    def test_garbage(self, text: str) -> None:
        assert parse_command(text) is None


class TestTerminalGame:
    def test_quit_immediately(self) -> None:
        _, script = _play(["q"])
        assert script.output[0] == "Turn: 0, White to move."
        assert script.output[-1] == "Thanks for playing. Bye bye now!"

    def test_end_of_input_quits(self) -> None:
        _, script = _play([])
        assert script.output[-1] == "Thanks for playing. Bye bye now!"

    def test_plays_a_move(self) -> None:
        game, script = _play(["2 5", "4 5", "q"])
        assert game.session.position.turn == 1
        assert game.session.position[(3, 4)] == Piece(Color.WHITE, PieceType.PAWN)
        assert "Turn: 1, Black to move." in script.output

    def test_bad_input_reprompts(self) -> None:
        _, script = _play(["hello", "q"])
        assert "Input not received in proper format. Try again please:" in script.output

    def test_illegal_selection_reprompts(self) -> None:
        _, script = _play(["4 4", "q"])
        assert "No piece exists in this location. Try again please:" in script.output

    def test_illegal_destination_reprompts(self) -> None:
        game, script = _play(["2 5", "5 5", "q"])
        assert "Invalid move. Try again please:" in script.output
        assert game.session.position.turn == 0

    def test_back_restarts_turn(self) -> None:
        _, script = _play(["2 5", "b", "q"])
        assert script.output.count("Turn: 0, White to move.") == 2

    def test_undo(self) -> None:
        game, _ = _play(["2 5", "4 5", "u", "q"])
        assert game.session.position == Position.initial()

    def test_random_move(self) -> None:
        game, script = _play(["r", "q"])
        assert game.session.position.turn == 1
        moved = [line for line in script.output if line.startswith("Moving ")]
        assert moved and moved[0][len("Moving ")] in "♙♘"

    def test_check_is_announced(self) -> None:
        start = Position.empty().with_pieces(
            {
                (0, 4): Piece(Color.WHITE, PieceType.KING),
                (7, 4): Piece(Color.BLACK, PieceType.ROOK),
                (7, 0): Piece(Color.BLACK, PieceType.KING),
            }
        )
        _, script = _play(["q"], start=start)
        assert "White's king is in check by 1 opposing pieces." in script.output

    def test_checkmate_then_quit(self) -> None:
        start = Position.empty().with_pieces(
            {
                (5, 6): Piece(Color.WHITE, PieceType.KING),
                (1, 0): Piece(Color.WHITE, PieceType.ROOK),
                (7, 7): Piece(Color.BLACK, PieceType.KING),
            }
        )
        _, script = _play(["2 1", "8 1", "q"], start=start)
        assert any(line.startswith("White wins!") for line in script.output)
        assert "Play Again? Enter Yes (Y) or Quit (Q)" in script.output

    def test_stalemate_then_play_again(self) -> None:
        start = Position.empty(Color.BLACK).with_pieces(
            {
                (7, 7): Piece(Color.BLACK, PieceType.KING),
                (5, 6): Piece(Color.WHITE, PieceType.QUEEN),
                (0, 1): Piece(Color.WHITE, PieceType.KING),
            }
        )
        game, script = _play(["y", "q"], start=start)
        assert any(line.startswith("Stalemate. Nobody wins.") for line in script.output)
        # The second game starts from the standard layout
        assert "Turn: 0, White to move." in script.output
        assert game.session.position == Position.initial()

    def test_save_and_load(self, tmp_path: Path) -> None:
        path = tmp_path / "saved.board"
        _play(["2 5", "4 5", f"s {path}", "q"])
        assert path.is_file()

        game, _ = _play([f"l {path}", "q"])
        assert game.session.position.turn == 1
        assert game.session.can_undo

    def test_load_error_is_reported(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.board"
        game, script = _play([f"l {missing}", "q"])
        errors = [line for line in script.output if line.endswith("Try again please:")]
        assert errors and "missing.board" in errors[0]
        assert game.session.position == Position.initial()

    def test_checkpoint_written_each_turn(self, tmp_path: Path) -> None:
        path = tmp_path / "checkpoint.board"
        settings = AppSettings(checkpoint_path=path, use_color=False)
        _play(["2 5", "4 5", "q"], settings=settings)
        assert path.read_text(encoding="utf-8").startswith("Black\n1\n")


class TestMain:
    def test_settings_from_args(self) -> None:
        args = _build_parser().parse_args(
            ["--seed", "3", "--no-checkpoint", "--no-color", "--log-level", "info"]
        )
        settings = _settings_from_args(args, AppSettings())
        assert settings.seed == 3
        assert settings.checkpoint_path is None
        assert not settings.use_color
        assert settings.log_level == "INFO"

    def test_checkpoint_arg(self) -> None:
        args = _build_parser().parse_args(["--checkpoint", "auto.board"])
        settings = _settings_from_args(args, AppSettings())
        assert settings.checkpoint_path == Path("auto.board")

    def test_load_failure_exit_code(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--load", str(tmp_path / "missing.board")]) == 1
        assert "Could not load" in capsys.readouterr().err

    def test_unknown_log_level_arg(self) -> None:
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["--log-level", "loud"])

    def test_bad_environment_exit_code(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("ROOKERY_LOG_LEVEL", "loud")
        assert main([]) == 1
        assert "Invalid environment" in capsys.readouterr().err
