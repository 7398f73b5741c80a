"""GameSession: validates and applies moves and keeps the undo history.

Emits events via simple callbacks so front ends / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from rookery.core.enums import Color, GameResult
from rookery.core.notation import load_position, save_position
from rookery.core.position import Position
from rookery.core.rules import Rules
from rookery.core.types import Square, square_label
from rookery.core.validator import validate_from, validate_move
from rookery.game.player import RandomMover

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Square, Square, Position], None]  # from, to, new position
GameOverCallback = Callable[[GameResult], None]
PositionCallback = Callable[[Position], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_position_changed: list[PositionCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class GameStatus:
    """What a front end needs to describe the current turn."""

    side_to_move: Color
    turn: int
    checking: int
    result: GameResult

    @property
    def in_check(self) -> bool:
        return self.checking > 0

    @property
    def is_game_over(self) -> bool:
        return self.result != GameResult.IN_PROGRESS


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Owns the current position and the stack of previous ones.

    Positions are immutable, so the history is simply every position the
    game has passed through; undo pops the last one back.
    """

    __slots__ = ("_position", "_history", "events")

    def __init__(self, position: Position | None = None) -> None:
        self._position = position if position is not None else Position.initial()
        self._history: list[Position] = []
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def history(self) -> tuple[Position, ...]:
        return tuple(self._history)

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    @property
    def status(self) -> GameStatus:
        pos = self._position
        return GameStatus(
            side_to_move=pos.side_to_move,
            turn=pos.turn,
            checking=Rules.num_checking(pos),
            result=Rules.game_result(pos),
        )

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(self, position: Position | None = None) -> None:
        """Start over from *position* (default: the standard layout)."""
        self._position = position if position is not None else Position.initial()
        self._history = []
        self._emit_position_changed()

    def select(self, from_sq: Square) -> list[Square]:
        """Validate a piece selection and return its legal destinations.

        Raises:
            IllegalMoveError: if *from_sq* is not a piece of the side to move.
        """
        validate_from(self._position, from_sq)
        return Rules.legal_destinations(self._position, from_sq)

    def submit_move(self, from_sq: Square, to_sq: Square) -> Position:
        """Validate and play a move for the side to move.

        Raises:
            IllegalMoveError: if the move is illegal; the session is unchanged.
        """
        validate_move(self._position, from_sq, to_sq)
        return self._apply(from_sq, to_sq)

    def play_random(self, mover: RandomMover) -> tuple[Square, Square]:
        """Let *mover* pick and play a move.

        Raises:
            NoLegalMoveError: if the side to move has no legal move.
        """
        from_sq, to_sq = mover.choose(self._position)
        self._apply(from_sq, to_sq)
        return from_sq, to_sq

    def undo(self) -> bool:
        """Step back one move. Returns False if there is nothing to undo."""
        if not self._history:
            return False
        self._position = self._history.pop()
        _LOGGER.debug("Undo to turn %d", self._position.turn)
        self._emit_position_changed()
        return True

    # ── Persistence ──────────────────────────────────────────────────────

    def save(self, path: str | Path) -> None:
        """Write the current position to *path*."""
        save_position(self._position, path)
        _LOGGER.debug("Saved turn %d to %s", self._position.turn, path)

    def load(self, path: str | Path) -> None:
        """Replace the current position with the one stored in *path*.

        The replaced position goes onto the undo stack.  On any error the
        session is left untouched.

        Raises:
            OSError: if the file cannot be read.
            BoardFormatError: if it is malformed.
        """
        position = load_position(path)
        self._history.append(self._position)
        self._position = position
        _LOGGER.debug("Loaded turn %d from %s", position.turn, path)
        self._emit_position_changed()

    def checkpoint(self, path: str | Path) -> bool:
        """Best-effort autosave. Returns False (and logs) on I/O failure."""
        try:
            self.save(path)
        except OSError as exc:
            _LOGGER.warning("Could not write checkpoint %s: %s", path, exc)
            return False
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply(self, from_sq: Square, to_sq: Square) -> Position:
        self._history.append(self._position)
        self._position = self._position.execute(from_sq, to_sq)
        _LOGGER.debug(
            "Turn %d: %s -> %s",
            self._position.turn,
            square_label(from_sq),
            square_label(to_sq),
        )

        self._emit_move(from_sq, to_sq)
        self._emit_position_changed()

        result = Rules.game_result(self._position)
        if result != GameResult.IN_PROGRESS:
            _LOGGER.info("Game over on turn %d: %s", self._position.turn, result.value)
            self._emit_game_over(result)
        return self._position

    def _emit_move(self, from_sq: Square, to_sq: Square) -> None:
        for cb in self.events.on_move:
            cb(from_sq, to_sq, self._position)

    def _emit_game_over(self, result: GameResult) -> None:
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_position_changed(self) -> None:
        for cb in self.events.on_position_changed:
            cb(self._position)
