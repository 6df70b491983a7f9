"""Visual theme constants and QSS styles for Qirkat."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the board."""

    background: QColor  # board surface
    line: QColor  # grid and diagonal lines
    white_piece: QColor
    black_piece: QColor
    piece_outline: QColor
    selected: QColor  # origin of a pending move
    bad_selection: QColor  # clicked square with no moves
    possible: QColor  # next landing squares
    line_width: float = 3.0

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            background=QColor(216, 123, 30),  # orange wood
            line=QColor(0, 0, 0),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(0, 0, 0),
            piece_outline=QColor(40, 40, 40),
            selected=QColor(182, 228, 156),  # green
            bad_selection=QColor(233, 2, 5),  # red
            possible=QColor(168, 228, 214),  # teal
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}

QComboBox {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    padding: 2px 6px;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}

QStatusBar {
    color: #e0e0e0;
}
"""
