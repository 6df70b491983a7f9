"""Dialog for editing every square and choosing who moves next."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QButtonGroup,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from qirkat.core.board import Board, ReadOnlyBoard
from qirkat.core.enums import PieceColor
from qirkat.core.types import SIDE, Square, make_square, square_name

_CHOICES: tuple[PieceColor, ...] = (PieceColor.EMPTY, PieceColor.WHITE, PieceColor.BLACK)
_CHOICE_LABELS = {
    PieceColor.EMPTY: "Empty",
    PieceColor.WHITE: "White",
    PieceColor.BLACK: "Black",
}


class _SetPiecesResult:
    """Plain data returned by SetPiecesDialog."""

    __slots__ = ("next_mover", "description")

    def __init__(self, next_mover: PieceColor, description: str) -> None:
        self.next_mover = next_mover
        self.description = description


class SetPiecesDialog(QDialog):
    """Modal dialog with one selector per square, row 5 at the top."""

    def __init__(
        self,
        board: Board | ReadOnlyBoard | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setWindowTitle("Set Pieces")
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._combos: dict[Square, QComboBox] = {}
        self._result: _SetPiecesResult | None = None
        self._setup_ui()
        if board is not None:
            self.load_board(board)

    def _setup_ui(self) -> None:
        main = QVBoxLayout(self)

        grid = QGridLayout()
        grid.setSpacing(6)
        for row in range(SIDE):
            grid_row = SIDE - 1 - row
            grid.addWidget(QLabel(str(row + 1)), grid_row, 0)
            for col in range(SIDE):
                sq = make_square(col, row)
                combo = QComboBox()
                combo.setToolTip(square_name(sq))
                for color in _CHOICES:
                    combo.addItem(_CHOICE_LABELS[color], color)
                self._combos[sq] = combo
                grid.addWidget(combo, grid_row, col + 1)
        for col, letter in enumerate("abcde"):
            label = QLabel(letter)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            grid.addWidget(label, SIDE, col + 1)
        main.addLayout(grid)

        start_row = QHBoxLayout()
        self._grp_start = QButtonGroup(self)
        self._rb_white = QRadioButton("White Start")
        self._rb_black = QRadioButton("Black Start")
        self._rb_white.setChecked(True)
        self._grp_start.addButton(self._rb_white, 0)
        self._grp_start.addButton(self._rb_black, 1)
        start_row.addWidget(self._rb_white)
        start_row.addWidget(self._rb_black)
        main.addLayout(start_row)

        self._buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self._buttons.accepted.connect(self._on_accept)
        self._buttons.rejected.connect(self.reject)
        main.addWidget(self._buttons)

    # ── Values ───────────────────────────────────────────────────────────

    def load_board(self, board: Board | ReadOnlyBoard) -> None:
        """Preset the selectors from *board*."""
        for sq, color in enumerate(board.cells()):
            self.set_square(sq, color)
        self.set_next_mover(board.side_to_move)

    def set_square(self, sq: Square, color: PieceColor) -> None:
        self._combos[sq].setCurrentIndex(_CHOICES.index(color))

    def set_next_mover(self, color: PieceColor) -> None:
        if color == PieceColor.BLACK:
            self._rb_black.setChecked(True)
        else:
            self._rb_white.setChecked(True)

    def next_mover(self) -> PieceColor:
        return PieceColor.WHITE if self._rb_white.isChecked() else PieceColor.BLACK

    def description(self) -> str:
        """Board description, squares a1..e1, a2..e2, ..., a5..e5."""
        return "".join(
            _CHOICES[self._combos[sq].currentIndex()].short_name
            for sq in range(SIDE * SIDE)
        )

    def _on_accept(self) -> None:
        self._result = _SetPiecesResult(self.next_mover(), self.description())
        self.accept()

    @property
    def result_value(self) -> _SetPiecesResult | None:
        return self._result

    @staticmethod
    def ask(
        board: Board | ReadOnlyBoard | None = None,
        parent: QWidget | None = None,
    ) -> _SetPiecesResult | None:
        dlg = SetPiecesDialog(board, parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.result_value
        return None
