"""GameController — the central orchestrator of a Qirkat game.

Coordinates: Players, the live Board, and the setup/playing phases.
Emits events via simple callbacks so the text session, the GUI and the
tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from qirkat.core.board import Board, ReadOnlyBoard
from qirkat.core.enums import GameResult, PieceColor
from qirkat.core.move import Move
from qirkat.game.interfaces import GamePhase, IPlayer

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, PieceColor, ReadOnlyBoard], None]  # move, mover, board
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]

_OUTCOME_MESSAGES: dict[GameResult, str] = {
    GameResult.WHITE_WINS: "White wins.",
    GameResult.BLACK_WINS: "Black wins.",
}


def outcome_message(result: GameResult) -> str:
    """Announcement for a finished game, e.g. ``'White wins.'``."""
    return _OUTCOME_MESSAGES.get(result, "")


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns the live board, validates moves, switches turns and notifies
    listeners.

    In ``SETUP`` the board may be cleared, set up or moved on freely and
    no player is prompted.  :meth:`start` attaches players and hands the
    turn to whoever is to move; the game ends when that side has no
    legal move, and the side to move loses.

    Thread-safety: all methods are meant to be called from one thread
    (the command loop or the Qt main thread).
    """

    __slots__ = (
        "_board",
        "_view",
        "_players",
        "_manual",
        "_phase",
        "_result",
        "_random",
        "events",
    )

    def __init__(self, board: Board | None = None) -> None:
        self._board = board if board is not None else Board()
        self._view = ReadOnlyBoard(self._board)
        self._players: dict[PieceColor, IPlayer] = {}
        self._manual: dict[PieceColor, bool] = {
            PieceColor.WHITE: True,
            PieceColor.BLACK: False,
        }
        self._phase = GamePhase.SETUP
        self._result = GameResult.IN_PROGRESS
        self._random = random.Random()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> ReadOnlyBoard:
        """Read-only view of the live board."""
        return self._view

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def is_playing(self) -> bool:
        return self._phase in (GamePhase.AWAITING_MOVE, GamePhase.THINKING)

    @property
    def side_to_move(self) -> PieceColor:
        return self._board.side_to_move

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._board.side_to_move)

    def player(self, color: PieceColor) -> IPlayer | None:
        return self._players.get(color)

    def is_manual(self, color: PieceColor) -> bool:
        return self._manual[color]

    def winner(self) -> PieceColor | None:
        if self._result == GameResult.WHITE_WINS:
            return PieceColor.WHITE
        if self._result == GameResult.BLACK_WINS:
            return PieceColor.BLACK
        return None

    # ── Setup commands ───────────────────────────────────────────────────

    def set_manual(self, color: PieceColor, manual: bool = True) -> None:
        """Choose between a manual player and the AI for *color*."""
        self._enter_setup()
        self._manual[color] = manual

    def clear(self) -> None:
        """Abandon any game and reset the board to the opening."""
        self._enter_setup()
        self._board.clear()

    def set_pieces(self, next_mover: PieceColor, description: str) -> None:
        """Abandon any game and set up the board from *description*."""
        self._enter_setup()
        self._board.set_pieces(description, next_mover)

    def seed(self, value: int) -> None:
        """Seed the random source shared with the players."""
        self._random.seed(value)

    def next_random(self, limit: int) -> int:
        """Random integer in ``[0, limit)``."""
        return self._random.randrange(limit)

    # ── Play ─────────────────────────────────────────────────────────────

    def start(self, white: IPlayer, black: IPlayer) -> None:
        """Attach players and begin play from the current board."""
        self._players = {PieceColor.WHITE: white, PieceColor.BLACK: black}
        self._result = GameResult.IN_PROGRESS
        if self._board.game_over:
            self._finish()
            return
        self._prompt_current_player()

    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""
        if self._phase == GamePhase.GAME_OVER:
            return False
        if not self._board.is_legal_move(move):
            _LOGGER.debug("Rejected illegal move %s", move)
            return False

        mover = self._board.side_to_move
        self._board.make_move(move)
        self._emit_move(move, mover)

        if self._phase == GamePhase.SETUP:
            return True
        if self._board.game_over:
            self._finish()
            return True
        self._prompt_current_player()
        return True

    def undo_move(self, plies: int = 2) -> bool:
        """Take back *plies* moves (by default one move of each side).

        Returns True if anything was undone.
        """
        if self._board.undo_depth == 0:
            return False

        cp = self.current_player
        if self.is_playing and cp is not None and not cp.is_human:
            cp.cancel()

        for _ in range(plies):
            self._board.undo()

        if self._phase == GamePhase.SETUP:
            return True
        self._result = GameResult.IN_PROGRESS
        self._prompt_current_player()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _enter_setup(self) -> None:
        cp = self.current_player
        if self.is_playing and cp is not None and not cp.is_human:
            cp.cancel()
        self._players = {}
        self._result = GameResult.IN_PROGRESS
        self._set_phase(GamePhase.SETUP)

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._set_phase(GamePhase.AWAITING_MOVE)
        else:
            self._set_phase(GamePhase.THINKING)
            cp.request_move(self._view)

    def _finish(self) -> None:
        loser = self._board.side_to_move
        self._result = (
            GameResult.BLACK_WINS if loser == PieceColor.WHITE else GameResult.WHITE_WINS
        )
        _LOGGER.info("Game over: %s", outcome_message(self._result))
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(self._result)

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_move(self, move: Move, mover: PieceColor) -> None:
        for cb in self.events.on_move:
            cb(move, mover, self._view)
