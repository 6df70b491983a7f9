"""Abstract interfaces for the game layer.

The :class:`~qirkat.game.controller.GameController` depends on these
types, not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from qirkat.core.enums import PieceColor

if TYPE_CHECKING:
    from qirkat.core.board import ReadOnlyBoard


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a Qirkat session."""

    SETUP = auto()  # board may be edited, no players attached
    AWAITING_MOVE = auto()  # a manual player is to move
    THINKING = auto()  # an AI player is computing
    GAME_OVER = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (manual or AI)."""

    @property
    @abstractmethod
    def color(self) -> PieceColor: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: ReadOnlyBoard) -> None:
        """Begin the move-selection process.

        For manual players this is a no-op (moves arrive as commands or
        clicks).  For AI players this kicks off a search.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing move computation (AI only, no-op for manual)."""
