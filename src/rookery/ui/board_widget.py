"""Board widget that paints the board and turns clicks into move requests."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QFont, QMouseEvent, QPainter, QPaintEvent
from PyQt6.QtWidgets import QSizePolicy, QWidget

from rookery.core.position import Position
from rookery.core.rules import Rules
from rookery.core.types import BOARD_SIZE, Square
from rookery.ui.theme import BoardTheme


class BoardWidget(QWidget):
    """Click-to-move board.

    The first click selects a piece of the side to move and highlights its
    legal destinations; the second click requests the move.  The widget
    never applies moves itself.

    Signals:
        move_requested(from_sq, to_sq): Emitted with two ``(row, col)`` tuples.
    """

    move_requested = pyqtSignal(object, object)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._position = Position.initial()
        self._flipped = False
        self._interactive = True

        # Interaction state
        self._selected_sq: Square | None = None
        self._destinations: list[Square] = []

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(320, 320)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def selected_square(self) -> Square | None:
        return self._selected_sq

    @property
    def destinations(self) -> list[Square]:
        return list(self._destinations)

    def set_position(self, position: Position) -> None:
        """Update the displayed position and drop any selection."""
        self._position = position
        self._clear_selection()
        self.update()

    def set_flipped(self, flipped: bool) -> None:
        """Show Black's home row at the bottom when *flipped*."""
        self._flipped = flipped
        self.update()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive
        if not interactive:
            self._clear_selection()
            self.update()

    # ── Geometry ─────────────────────────────────────────────────────────

    def _tile(self) -> float:
        return min(self.width(), self.height()) / BOARD_SIZE

    def _origin(self) -> QPointF:
        side = self._tile() * BOARD_SIZE
        return QPointF((self.width() - side) / 2, (self.height() - side) / 2)

    def _square_rect(self, sq: Square) -> QRectF:
        row, col = sq
        if self._flipped:
            vis_row, vis_col = row, BOARD_SIZE - 1 - col
        else:
            vis_row, vis_col = BOARD_SIZE - 1 - row, col
        tile = self._tile()
        origin = self._origin()
        return QRectF(origin.x() + vis_col * tile, origin.y() + vis_row * tile, tile, tile)

    def _square_at(self, point: QPointF) -> Square | None:
        tile = self._tile()
        if tile <= 0:
            return None
        origin = self._origin()
        vis_col = int((point.x() - origin.x()) // tile)
        vis_row = int((point.y() - origin.y()) // tile)
        if not (0 <= vis_row < BOARD_SIZE and 0 <= vis_col < BOARD_SIZE):
            return None
        if self._flipped:
            return (vis_row, BOARD_SIZE - 1 - vis_col)
        return (BOARD_SIZE - 1 - vis_row, vis_col)

    # ── Interaction ──────────────────────────────────────────────────────

    def mousePressEvent(self, event: QMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return
        sq = self._square_at(event.position())
        if sq is not None:
            self.handle_click(sq)

    def handle_click(self, sq: Square) -> None:
        """Select, reselect, deselect or request a move for a clicked square."""
        if not self._interactive:
            return
        piece = self._position[sq]
        own_piece = piece is not None and piece.color == self._position.side_to_move

        if self._selected_sq is None or sq == self._selected_sq:
            if own_piece and sq != self._selected_sq:
                self._select(sq)
            else:
                self._clear_selection()
        elif own_piece:
            self._select(sq)
        else:
            from_sq = self._selected_sq
            self._clear_selection()
            self.move_requested.emit(from_sq, sq)
        self.update()

    def _select(self, sq: Square) -> None:
        self._selected_sq = sq
        self._destinations = Rules.legal_destinations(self._position, sq)

    def _clear_selection(self) -> None:
        self._selected_sq = None
        self._destinations = []

    # ── Painting ─────────────────────────────────────────────────────────

    def paintEvent(self, event: QPaintEvent | None) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        theme = self._theme
        tile = self._tile()

        king_sq = self._position.find_king()
        in_check = king_sq is not None and Rules.is_in_check(self._position)

        piece_font = QFont()
        piece_font.setPixelSize(max(1, int(tile * 0.75)))
        coord_font = QFont()
        coord_font.setPixelSize(max(1, int(tile * 0.16)))

        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                sq = (row, col)
                rect = self._square_rect(sq)
                dark = (row + col) % 2 == 0
                painter.fillRect(rect, theme.dark_square if dark else theme.light_square)

                if sq == self._selected_sq:
                    painter.fillRect(rect, theme.highlight_from)
                elif sq in self._destinations:
                    painter.fillRect(rect, theme.highlight_to)
                if in_check and sq == king_sq:
                    painter.fillRect(rect, theme.highlight_check)

                piece = self._position[sq]
                if piece is not None:
                    painter.setPen(theme.piece_text)
                    painter.setFont(piece_font)
                    painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, str(piece))

        # One-indexed labels along the left and bottom edges
        painter.setPen(theme.coord_text)
        painter.setFont(coord_font)
        for i in range(BOARD_SIZE):
            left = self._square_rect((i, 0) if not self._flipped else (i, BOARD_SIZE - 1))
            painter.drawText(
                left.adjusted(2, 2, 0, 0),
                Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop,
                str(i + 1),
            )
            bottom = self._square_rect((0, i) if not self._flipped else (BOARD_SIZE - 1, i))
            painter.drawText(
                bottom.adjusted(0, 0, -2, -2),
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignBottom,
                str(i + 1),
            )
        painter.end()
