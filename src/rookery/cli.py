"""Interactive terminal game.

Squares are typed as one-indexed ``row col`` pairs.  Other commands:

====== ==========================================
``r``  play a random move for the side to move
``b``  go back to piece selection
``u``  undo the last move
``s``  ``s <file>`` save the position
``l``  ``l <file>`` load a position
``q``  quit
``y``  yes (play again)
====== ==========================================
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from enum import Enum, auto
from pathlib import Path

from rookery.config import LOG_LEVELS, AppSettings
from rookery.core.errors import IllegalMoveError
from rookery.core.notation import BoardFormatError, load_position
from rookery.core.position import Position
from rookery.core.types import Square, parse_square, square_label
from rookery.display import render_board
from rookery.game.player import RandomMover
from rookery.game.session import GameSession

_LOGGER = logging.getLogger(__name__)

_BAD_INPUT = "Input not received in proper format."


class CommandKind(Enum):
    LOCATION = auto()
    BACK = auto()
    QUIT = auto()
    UNDO = auto()
    YES = auto()
    RANDOM = auto()
    SAVE = auto()
    LOAD = auto()


@dataclass(frozen=True, slots=True)
class Command:
    """One parsed line of user input."""

    kind: CommandKind
    square: Square | None = None
    path: str | None = None


def parse_command(text: str) -> Command | None:
    """Parse a line of input; ``None`` if it is not a command or a square."""
    text = text.strip()
    if text == "r":
        return Command(CommandKind.RANDOM)
    if text in ("b", "B"):
        return Command(CommandKind.BACK)
    if text in ("q", "Q"):
        return Command(CommandKind.QUIT)
    if text in ("Yes", "yes", "Y", "y"):
        return Command(CommandKind.YES)
    if text in ("u", "U"):
        return Command(CommandKind.UNDO)
    if text.startswith("s"):
        return Command(CommandKind.SAVE, path=text[1:].strip())
    if text.startswith("l"):
        return Command(CommandKind.LOAD, path=text[1:].strip())

    try:
        square = parse_square(text)
    except ValueError:
        return None
    return Command(CommandKind.LOCATION, square=square)


class _Restart(Exception):
    """Abandon the current prompt and start the turn over."""


class _Quit(Exception):
    """The player asked to leave."""


class TerminalGame:
    """Turn loop reading commands from *input_fn* and writing to *output_fn*.

    Both default to the console; tests pass scripted replacements.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        mover: RandomMover | None = None,
        input_fn: Callable[[], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._settings = settings if settings is not None else AppSettings()
        if mover is None:
            mover = RandomMover(random.Random(self._settings.seed))
        self._mover = mover
        self._read = input_fn
        self._write = output_fn
        self.session = GameSession()

    # ── Top level ────────────────────────────────────────────────────────

    def run(self, start: Position | None = None) -> None:
        """Play games until the player quits."""
        try:
            while True:
                self.session.new_game(start)
                start = None
                self._play_game()
                if not self._ask_play_again():
                    break
        except _Quit:
            pass
        self._write("Thanks for playing. Bye bye now!")

    def _play_game(self) -> None:
        while True:
            self._autosave()
            status = self.session.status
            if status.is_game_over:
                board = self._render()
                if status.in_check:
                    self._write(f"{status.side_to_move.other()} wins!\n{board}")
                else:
                    self._write(f"Stalemate. Nobody wins.\n{board}")
                return
            try:
                self._play_turn()
            except _Restart:
                continue

    def _play_turn(self) -> None:
        status = self.session.status
        self._write(f"Turn: {status.turn}, {status.side_to_move} to move.")
        if status.in_check:
            self._write(
                f"{status.side_to_move}'s king is in check by "
                f"{status.checking} opposing pieces."
            )
        self._write(self._render())
        self._write(
            "Select a piece to move by specifying the row then the column, "
            "separated by whitespace. Then press enter:"
        )
        from_sq = self._prompt_square(self.session.select, back_restarts=False)

        self._write("Enter the square to which you would like to move this piece:")
        to_sq = self._prompt_square(
            lambda sq: self.session.submit_move(from_sq, sq), back_restarts=True
        )
        _LOGGER.debug("Player moved %s -> %s", square_label(from_sq), square_label(to_sq))
        self._write("\n\n")

    # ── Prompts ──────────────────────────────────────────────────────────

    def _prompt_square(
        self, accept: Callable[[Square], object], *, back_restarts: bool
    ) -> Square:
        """Read commands until *accept* takes a square without raising."""
        while True:
            command = self._next_command()
            if command is None or command.kind == CommandKind.YES:
                error = _BAD_INPUT
            elif command.kind == CommandKind.LOCATION:
                assert command.square is not None
                try:
                    accept(command.square)
                except IllegalMoveError as exc:
                    error = exc.message
                else:
                    return command.square
            elif command.kind == CommandKind.BACK:
                if back_restarts:
                    raise _Restart
                continue
            else:
                error = self._run_command(command)
            self._write(f"{error} Try again please:")

    def _run_command(self, command: Command) -> str:
        """Handle a non-square command; returns an error message or restarts."""
        if command.kind == CommandKind.QUIT:
            raise _Quit
        if command.kind == CommandKind.UNDO:
            self.session.undo()
            raise _Restart
        if command.kind == CommandKind.RANDOM:
            before = self.session.position
            from_sq, to_sq = self.session.play_random(self._mover)
            self._write(f"Moving {before[from_sq]} to {square_label(to_sq)}")
            raise _Restart
        if command.kind == CommandKind.SAVE:
            try:
                self.session.save(command.path or "")
            except OSError as exc:
                return str(exc)
            raise _Restart
        if command.kind == CommandKind.LOAD:
            try:
                self.session.load(command.path or "")
            except (OSError, BoardFormatError) as exc:
                return str(exc)
            raise _Restart
        return _BAD_INPUT

    def _ask_play_again(self) -> bool:
        while True:
            self._write("Play Again? Enter Yes (Y) or Quit (Q)")
            command = self._next_command()
            if command is None:
                continue
            if command.kind == CommandKind.YES:
                return True
            if command.kind == CommandKind.QUIT:
                return False

    # ── Helpers ──────────────────────────────────────────────────────────

    def _next_command(self) -> Command | None:
        try:
            line = self._read()
        except EOFError:
            raise _Quit from None
        return parse_command(line)

    def _render(self) -> str:
        return render_board(self.session.position, color=self._settings.use_color)

    def _autosave(self) -> None:
        path = self._settings.checkpoint_path
        if path is not None:
            self.session.checkpoint(path)


# ── Entry point ──────────────────────────────────────────────────────────────


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rookery", description="Play chess in the terminal.")
    parser.add_argument("--load", type=Path, help="start from a saved board file")
    parser.add_argument("--seed", type=int, help="seed for random moves")
    parser.add_argument("--checkpoint", type=Path, help="autosave file written every turn")
    parser.add_argument(
        "--no-checkpoint", action="store_true", help="do not autosave between turns"
    )
    parser.add_argument("--no-color", action="store_true", help="plain text board")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, help="logging level"
    )
    return parser


def _settings_from_args(args: argparse.Namespace, base: AppSettings) -> AppSettings:
    settings = base
    if args.seed is not None:
        settings = replace(settings, seed=args.seed)
    if args.checkpoint is not None:
        settings = replace(settings, checkpoint_path=args.checkpoint)
    if args.no_checkpoint:
        settings = replace(settings, checkpoint_path=None)
    if args.no_color:
        settings = replace(settings, use_color=False)
    if args.log_level:
        settings = replace(settings, log_level=args.log_level)
    return settings


def main(argv: Sequence[str] | None = None) -> int:
    """Run the terminal game. Returns a process exit code."""
    args = _build_parser().parse_args(argv)
    try:
        env_settings = AppSettings.from_env()
    except ValueError as exc:
        print(f"Invalid environment: {exc}", file=sys.stderr)
        return 1
    settings = _settings_from_args(args, env_settings)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    start: Position | None = None
    if args.load is not None:
        try:
            start = load_position(args.load)
        except (OSError, BoardFormatError) as exc:
            print(f"Could not load {args.load}: {exc}", file=sys.stderr)
            return 1

    TerminalGame(settings).run(start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
