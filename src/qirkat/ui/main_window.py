"""MainWindow — top-level window assembling the board, menus and engine."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QThread, pyqtSignal
from PyQt6.QtGui import QAction, QActionGroup, QCloseEvent
from PyQt6.QtWidgets import (
    QInputDialog,
    QLabel,
    QMainWindow,
    QMenu,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from qirkat.core.board import ReadOnlyBoard
from qirkat.core.enums import GameResult, PieceColor
from qirkat.core.errors import QirkatError
from qirkat.core.move import Move
from qirkat.engine.qt_bridge import EngineWorker
from qirkat.game.controller import GameController, outcome_message
from qirkat.game.interfaces import GamePhase, IPlayer
from qirkat.game.player import AIPlayer, HumanPlayer
from qirkat.runtime_assets import read_asset_text
from qirkat.settings import AppSettings
from qirkat.ui.board_widget import BoardWidget
from qirkat.ui.set_pieces_dialog import SetPiecesDialog

_LOGGER = logging.getLogger(__name__)

_PHASE_LABELS = {
    GamePhase.SETUP: "Setting up",
    GamePhase.AWAITING_MOVE: "Your move",
    GamePhase.THINKING: "Thinking…",
    GamePhase.GAME_OVER: "Game over",
}


class MainWindow(QMainWindow):
    """Main application window for Qirkat."""

    engine_request = pyqtSignal(object, int)
    depth_requested = pyqtSignal(int)

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Qirkat")
        self.setMinimumSize(320, 360)
        self.resize(420, 480)

        self._settings = settings if settings is not None else AppSettings()
        self._controller = GameController()
        self._controller.set_manual(PieceColor.WHITE, self._settings.white_manual)
        self._controller.set_manual(PieceColor.BLACK, self._settings.black_manual)
        if self._settings.seed is not None:
            self._controller.seed(self._settings.seed)

        self._engine_thread = QThread(self)
        self._engine_worker = EngineWorker(max_depth=self._settings.engine_depth)
        self._engine_request_id = 0
        self._pending_engine_request: int | None = None

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()
        self._setup_engine()

        self._sync_board_interactivity()
        self._update_status()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)

        self._board_widget = BoardWidget(self._controller.board)
        root.addWidget(self._board_widget, stretch=1)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        # Game menu
        self._menu_game = menu_bar.addMenu("Game")
        assert self._menu_game is not None

        self._act_new_game = QAction("New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        self._menu_game.addAction(self._act_new_game)

        self._act_start = QAction("Start", self)
        self._act_start.setShortcut("Ctrl+R")
        self._act_start.triggered.connect(self._on_start)
        self._menu_game.addAction(self._act_start)

        self._act_undo = QAction("Undo", self)
        self._act_undo.setShortcut("Ctrl+Z")
        self._act_undo.triggered.connect(self._on_undo)
        self._menu_game.addAction(self._act_undo)

        self._act_set_pieces = QAction("Set Pieces...", self)
        self._act_set_pieces.triggered.connect(self._on_set_pieces)
        self._menu_game.addAction(self._act_set_pieces)

        self._menu_game.addSeparator()

        self._act_quit = QAction("Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

        # Options menu
        self._menu_options = menu_bar.addMenu("Options")
        assert self._menu_options is not None

        self._act_seed = QAction("Seed...", self)
        self._act_seed.triggered.connect(self._on_seed)
        self._menu_options.addAction(self._act_seed)

        self._act_depth = QAction("Search Depth...", self)
        self._act_depth.triggered.connect(self._on_depth)
        self._menu_options.addAction(self._act_depth)

        # Player menus
        self._player_actions: dict[PieceColor, tuple[QAction, QAction]] = {}
        for color in (PieceColor.WHITE, PieceColor.BLACK):
            menu = menu_bar.addMenu(color.display_name)
            assert menu is not None
            self._add_player_menu(menu, color)

        # Info menu
        self._menu_info = menu_bar.addMenu("Info")
        assert self._menu_info is not None

        self._act_help = QAction("Help", self)
        self._act_help.setShortcut("F1")
        self._act_help.triggered.connect(self._on_help)
        self._menu_info.addAction(self._act_help)

    def _add_player_menu(self, menu: QMenu, color: PieceColor) -> None:
        group = QActionGroup(self)
        group.setExclusive(True)
        act_ai = QAction(f"AI {color.display_name}", self)
        act_manual = QAction(f"Manual {color.display_name}", self)
        act_ai.setCheckable(True)
        act_manual.setCheckable(True)
        group.addAction(act_ai)
        group.addAction(act_manual)
        if self._controller.is_manual(color):
            act_manual.setChecked(True)
        else:
            act_ai.setChecked(True)
        act_ai.triggered.connect(lambda _checked=False, c=color: self._on_set_manual(c, False))
        act_manual.triggered.connect(lambda _checked=False, c=color: self._on_set_manual(c, True))
        menu.addAction(act_ai)
        menu.addAction(act_manual)
        self._player_actions[color] = (act_ai, act_manual)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_widget.move_made.connect(self._on_user_move)

    def _setup_engine(self) -> None:
        """Set up engine worker in a dedicated QThread."""
        self._engine_worker.moveToThread(self._engine_thread)
        self.engine_request.connect(self._engine_worker.request_move)
        self.depth_requested.connect(self._engine_worker.set_depth)
        self._engine_worker.best_move_ready.connect(self._on_engine_best_move)
        self._engine_worker.search_no_move.connect(self._on_engine_no_move)
        self._engine_worker.search_error.connect(self._on_engine_error)
        self._engine_thread.start()

    def _connect_game_events(self) -> None:
        """Subscribe to GameController callbacks."""
        events = self._controller.events
        events.on_move.append(self._on_game_move)
        events.on_game_over.append(self._on_game_over)
        events.on_phase_changed.append(self._on_phase_changed)

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_widget(self) -> BoardWidget:
        return self._board_widget

    # ── Game lifecycle ───────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._controller.clear()
        self._sync_board_interactivity()
        self._update_status()

    def _on_start(self) -> None:
        white = self._create_player(PieceColor.WHITE)
        black = self._create_player(PieceColor.BLACK)
        self._controller.start(white, black)
        self._sync_board_interactivity()
        self._update_status()

    def _create_player(self, color: PieceColor) -> IPlayer:
        if self._controller.is_manual(color):
            return HumanPlayer(color)
        return AIPlayer(
            color,
            on_request_move=self._request_ai_move,
            on_cancel=self._cancel_ai_search,
        )

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._cancel_ai_search()
        self._engine_thread.quit()
        self._engine_thread.wait(2000)
        super().closeEvent(event)

    # ── User actions ─────────────────────────────────────────────────────

    def _on_user_move(self, move: object) -> None:
        """Handle a move picked on the board."""
        if not isinstance(move, Move):
            return
        if not self._controller.submit_move(move):
            self._status_label.setText("Move not allowed")

    def _on_undo(self) -> None:
        self._controller.undo_move()
        self._sync_board_interactivity()
        self._update_status()

    def _on_set_pieces(self) -> None:
        result = SetPiecesDialog.ask(self._controller.board, self)
        if result is None:
            return
        try:
            self._controller.set_pieces(result.next_mover, result.description)
        except QirkatError as exc:
            self._show_error(str(exc))
        self._sync_board_interactivity()
        self._update_status()

    def _on_set_manual(self, color: PieceColor, manual: bool) -> None:
        self._controller.set_manual(color, manual)
        self._sync_board_interactivity()
        self._update_status()

    def _on_seed(self) -> None:
        value, ok = QInputDialog.getInt(self, "Random Seed", "Seed:", 0, 0)
        if ok:
            self._controller.seed(value)

    def _on_depth(self) -> None:
        current = self._engine_worker.limits.max_depth
        value, ok = QInputDialog.getInt(self, "Search Depth", "Depth:", current, 1, 20)
        if not ok:
            return
        self._settings.engine_depth = value
        self.depth_requested.emit(value)

    def _on_help(self) -> None:
        text = read_asset_text("help.txt")
        if text is None:
            self._show_error("No help available.")
            return
        QMessageBox.information(self, "Help", text)

    # ── Game event callbacks ─────────────────────────────────────────────

    def _on_game_move(self, move: Move, mover: PieceColor, _board: ReadOnlyBoard) -> None:
        """Called after every move (manual and AI)."""
        self._sync_board_interactivity()
        self._update_status()
        self._status_label.setText(
            f"{mover.display_name} moves {move}. {self._status_label.text()}"
        )

    def _on_game_over(self, result: GameResult) -> None:
        self._board_widget.set_interactive(False)
        text = outcome_message(result)
        self._status_label.setText(text)
        QMessageBox.information(self, "Game Over!", text)

    def _on_phase_changed(self, _phase: GamePhase) -> None:
        self._sync_board_interactivity()
        self._update_status()

    # ── Engine callbacks ─────────────────────────────────────────────────

    def _request_ai_move(self, board: ReadOnlyBoard) -> None:
        self._cancel_ai_search()
        self._engine_request_id += 1
        request_id = self._engine_request_id
        self._pending_engine_request = request_id
        self.engine_request.emit(board.copy(), request_id)

    def _cancel_ai_search(self) -> None:
        # The worker finishes its search; the stale result is then ignored.
        self._pending_engine_request = None

    def _on_engine_best_move(
        self,
        request_id: int,
        move_obj: object,
        _score: int,
        _depth: int,
        _nodes: int,
    ) -> None:
        if request_id != self._pending_engine_request:
            return
        if not isinstance(move_obj, Move):
            return
        if self._controller.phase != GamePhase.THINKING:
            return

        self._pending_engine_request = None
        if not self._controller.submit_move(move_obj):
            _LOGGER.warning("Engine proposed illegal move %s", move_obj)
        self._sync_board_interactivity()

    def _on_engine_no_move(self, request_id: int, _score: int) -> None:
        if request_id != self._pending_engine_request:
            return
        self._pending_engine_request = None
        _LOGGER.warning("Engine found no move")
        self._sync_board_interactivity()

    def _on_engine_error(self, request_id: int, message: str) -> None:
        if request_id != self._pending_engine_request:
            return
        self._pending_engine_request = None
        if self._controller.phase != GamePhase.THINKING:
            return

        self._show_error(f"Engine error: {message}")
        legal = self._controller.board.legal_moves
        if legal:
            self._controller.submit_move(legal[self._controller.next_random(len(legal))])
            return
        self._sync_board_interactivity()

    # ── Helpers ──────────────────────────────────────────────────────────

    def _sync_board_interactivity(self) -> None:
        phase = self._controller.phase
        if phase == GamePhase.AWAITING_MOVE:
            interactive = True
        elif phase == GamePhase.SETUP:
            interactive = self._controller.is_manual(self._controller.side_to_move)
        else:
            interactive = False
        self._board_widget.set_interactive(interactive)

    def _update_status(self) -> None:
        if self._controller.phase == GamePhase.GAME_OVER:
            return
        side = self._controller.side_to_move.display_name
        phase = _PHASE_LABELS[self._controller.phase]
        self._status_label.setText(f"{side} to move | {phase}")

    def _show_error(self, message: str) -> None:
        QMessageBox.warning(self, "Error", message)
