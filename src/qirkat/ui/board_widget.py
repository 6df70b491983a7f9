"""BoardWidget — paints the Qirkat board and turns clicks into moves."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, QSize, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QMouseEvent, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import QSizePolicy, QWidget

from qirkat.core.board import Board, BoardChange, ReadOnlyBoard
from qirkat.core.enums import PieceColor
from qirkat.core.types import SIDE, Square, col_of, is_valid_neighbor, make_square, row_of
from qirkat.ui.selection import MoveSelector
from qirkat.ui.styles.theme import BoardTheme

_SQUARE_SIZE = 50  # preferred pixels per square
_PIECE_RATIO = 0.3  # piece radius relative to the square size

# Offsets that join a square to a later one; each board line is drawn once.
_FORWARD_OFFSETS = (1, 4, 5, 6)


class BoardWidget(QWidget):
    """Displays a board and lets a manual player pick moves by clicking.

    Signals:
        move_made(object): A complete legal :class:`Move` picked by clicks.
    """

    move_made = pyqtSignal(object)

    def __init__(
        self,
        board: Board | ReadOnlyBoard | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._board: Board | ReadOnlyBoard | None = None
        self._theme = BoardTheme.default()
        self._selector = MoveSelector()
        self._interactive = True

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(SIDE * _SQUARE_SIZE // 2, SIDE * _SQUARE_SIZE // 2)
        if board is not None:
            self.set_board(board)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def selector(self) -> MoveSelector:
        return self._selector

    def set_board(self, board: Board | ReadOnlyBoard) -> None:
        """Display *board* and repaint whenever it changes."""
        if self._board is not None:
            self._board.unsubscribe(self._on_board_changed)
        self._board = board
        board.subscribe(self._on_board_changed)
        self._selector.reset()
        self.update()

    def set_interactive(self, interactive: bool) -> None:
        """Enable or disable move input; disabling drops any selection."""
        self._interactive = interactive
        if not interactive:
            self.clear_selection()

    def is_interactive(self) -> bool:
        return self._interactive

    def clear_selection(self) -> None:
        self._selector.reset()
        self.update()

    def sizeHint(self) -> QSize:
        return QSize(SIDE * _SQUARE_SIZE, SIDE * _SQUARE_SIZE)

    # ── Geometry ─────────────────────────────────────────────────────────

    def _square_size(self) -> float:
        return min(self.width(), self.height()) / SIDE

    def _origin(self) -> QPointF:
        size = self._square_size() * SIDE
        return QPointF((self.width() - size) / 2, (self.height() - size) / 2)

    def square_center(self, sq: Square) -> QPointF:
        """Widget coordinates of the point where *sq*'s lines meet."""
        size = self._square_size()
        origin = self._origin()
        return QPointF(
            origin.x() + (col_of(sq) + 0.5) * size,
            origin.y() + (SIDE - 1 - row_of(sq) + 0.5) * size,
        )

    def square_at(self, pos: QPointF) -> Square | None:
        """Square under *pos*, or ``None`` outside a1..e5."""
        size = self._square_size()
        if size <= 0:
            return None
        origin = self._origin()
        col = int((pos.x() - origin.x()) // size)
        row = SIDE - 1 - int((pos.y() - origin.y()) // size)
        if not (0 <= col < SIDE and 0 <= row < SIDE):
            return None
        return make_square(col, row)

    # ── Events ───────────────────────────────────────────────────────────

    def mousePressEvent(self, event: QMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return
        sq = self.square_at(event.position())
        if sq is None:
            return
        if not self._interactive or self._board is None:
            return
        move = self._selector.click(self._board, sq)
        self.update()
        if move is not None:
            self.move_made.emit(move)

    def _on_board_changed(self, _board: Board | ReadOnlyBoard, _change: BoardChange) -> None:
        self._selector.reset()
        self.update()

    # ── Painting ─────────────────────────────────────────────────────────

    def paintEvent(self, event: QPaintEvent | None) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        theme = self._theme
        size = self._square_size()
        origin = self._origin()

        painter.fillRect(QRectF(origin.x(), origin.y(), size * SIDE, size * SIDE), theme.background)

        painter.setPen(QPen(theme.line, theme.line_width))
        for sq in range(SIDE * SIDE):
            for offset in _FORWARD_OFFSETS:
                if is_valid_neighbor(sq, offset):
                    painter.drawLine(self.square_center(sq), self.square_center(sq + offset))

        radius = size * _PIECE_RATIO
        painter.setPen(Qt.PenStyle.NoPen)
        selected = self._selector.selected_sq
        if selected is not None:
            for sq in self._selector.path:
                painter.setBrush(QBrush(theme.selected))
                painter.drawRect(self._piece_rect(sq, radius * 1.2))
            painter.setBrush(QBrush(theme.possible))
            for sq in self._selector.targets():
                painter.drawEllipse(self._piece_rect(sq, radius))
        elif self._selector.bad_sq is not None:
            painter.setBrush(QBrush(theme.bad_selection))
            painter.drawRect(self._piece_rect(self._selector.bad_sq, radius * 1.2))

        if self._board is not None:
            painter.setPen(QPen(theme.piece_outline, 1.5))
            for sq, color in enumerate(self._board.cells()):
                if color == PieceColor.EMPTY:
                    continue
                fill = theme.white_piece if color == PieceColor.WHITE else theme.black_piece
                painter.setBrush(QBrush(fill))
                painter.drawEllipse(self._piece_rect(sq, radius))

        painter.end()

    def _piece_rect(self, sq: Square, radius: float) -> QRectF:
        center = self.square_center(sq)
        return QRectF(center.x() - radius, center.y() - radius, 2 * radius, 2 * radius)
