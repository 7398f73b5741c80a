"""Top-level window: board, toolbar actions and status line."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from pathlib import Path

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QFileDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QToolBar,
)

from rookery.config import AppSettings
from rookery.core.enums import GameResult
from rookery.core.errors import IllegalMoveError, NoLegalMoveError
from rookery.core.notation import BoardFormatError
from rookery.core.position import Position
from rookery.core.types import Square, square_label
from rookery.game.player import RandomMover
from rookery.game.session import GameSession
from rookery.ui.board_widget import BoardWidget

_LOGGER = logging.getLogger(__name__)

_FILE_FILTER = "Board files (*.board);;All files (*)"


class MainWindow(QMainWindow):
    """Main application window for Rookery."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        session: GameSession | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Rookery")
        self.setMinimumSize(480, 540)
        self.resize(640, 700)

        self._settings = settings if settings is not None else AppSettings()
        self._session = session if session is not None else GameSession()
        self._mover = RandomMover(random.Random(self._settings.seed))
        self._message: str | None = None

        self._setup_ui()
        self._setup_actions()
        self._connect_session()
        self._sync_board()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def board_widget(self) -> BoardWidget:
        return self._board

    @property
    def status_text(self) -> str:
        return self._status_label.text()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._board = BoardWidget()
        self.setCentralWidget(self._board)
        self._board.move_requested.connect(self._on_move_requested)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_actions(self) -> None:
        toolbar = QToolBar("Game")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        keys = QKeySequence.StandardKey
        self._act_new = self._add_action(toolbar, "New", keys.New, self.new_game)
        self._act_undo = self._add_action(toolbar, "Undo", keys.Undo, self.undo)
        self._act_random = self._add_action(toolbar, "Random", "Ctrl+R", self.play_random)
        toolbar.addSeparator()
        self._act_save = self._add_action(toolbar, "Save…", keys.Save, self._on_save)
        self._act_load = self._add_action(toolbar, "Load…", keys.Open, self._on_load)
        toolbar.addSeparator()
        self._act_flip = self._add_action(toolbar, "Flip", "Ctrl+F", self.flip_board)

    def _add_action(
        self,
        toolbar: QToolBar,
        text: str,
        shortcut: QKeySequence.StandardKey | str,
        slot: Callable[[], None],
    ) -> QAction:
        action = QAction(text, self)
        action.setShortcut(shortcut)
        action.triggered.connect(lambda _checked=False: slot())
        toolbar.addAction(action)
        return action

    def _connect_session(self) -> None:
        events = self._session.events
        events.on_position_changed.append(lambda _pos: self._sync_board())

    # ── Actions ──────────────────────────────────────────────────────────

    def new_game(self, position: Position | None = None) -> None:
        self._message = None
        self._session.new_game(position)

    def undo(self) -> None:
        self._message = None if self._session.undo() else "Nothing to undo."
        self._refresh_status()

    def play_random(self) -> None:
        before = self._session.position
        try:
            from_sq, to_sq = self._session.play_random(self._mover)
        except NoLegalMoveError as exc:
            self._message = str(exc)
            self._refresh_status()
            return
        self._message = f"Moved {before[from_sq]} to {square_label(to_sq)}."
        self._refresh_status()

    def flip_board(self) -> None:
        self._board.set_flipped(not self._board.is_flipped())

    def save_to(self, path: str | Path) -> bool:
        try:
            self._session.save(path)
        except OSError as exc:
            _LOGGER.warning("Save to %s failed: %s", path, exc)
            QMessageBox.warning(self, "Save failed", str(exc))
            return False
        self._message = f"Saved to {path}."
        self._refresh_status()
        return True

    def load_from(self, path: str | Path) -> bool:
        try:
            self._session.load(path)
        except (OSError, BoardFormatError) as exc:
            QMessageBox.warning(self, "Load failed", str(exc))
            return False
        self._message = f"Loaded {path}."
        self._refresh_status()
        return True

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_move_requested(self, from_sq: Square, to_sq: Square) -> None:
        try:
            self._session.submit_move(from_sq, to_sq)
        except IllegalMoveError as exc:
            self._message = exc.message
            self._refresh_status()
            return
        self._message = None
        self._refresh_status()

    def _on_save(self) -> None:
        path, _ = QFileDialog.getSaveFileName(self, "Save board", "", _FILE_FILTER)
        if path:
            self.save_to(path)

    def _on_load(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Load board", "", _FILE_FILTER)
        if path:
            self.load_from(path)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _sync_board(self) -> None:
        status = self._session.status
        self._board.set_position(self._session.position)
        self._board.set_interactive(not status.is_game_over)
        self._act_random.setEnabled(not status.is_game_over)
        self._act_undo.setEnabled(self._session.can_undo)
        self._refresh_status()

    def _refresh_status(self) -> None:
        status = self._session.status
        if status.result == GameResult.STALEMATE:
            text = "Stalemate. Nobody wins."
        elif status.is_game_over:
            text = f"Checkmate. {status.side_to_move.other()} wins!"
        else:
            text = f"Turn {status.turn}: {status.side_to_move} to move"
            if status.in_check:
                text += f" (in check by {status.checking})"
        if self._message:
            text += f" | {self._message}"
        self._status_label.setText(text)
