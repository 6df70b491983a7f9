"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from qirkat.core.board import Board, ReadOnlyBoard
    from qirkat.core.move import Move

# Maximum minimax depth before falling back to the static evaluator.
MAX_DEPTH = 8
# Score magnitude of a won position (positive: white wins).
WINNING_VALUE = 2**31 - 2
# A magnitude greater than any score.
INFINITY = 2**31 - 1


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation."""

    max_depth: int = MAX_DEPTH


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search.

    ``score`` is from white's point of view.
    """

    best_move: Move | None
    score: int
    depth: int
    nodes: int


class IEngine(Protocol):
    """Protocol for engines used by the game and UI layers."""

    def search(
        self,
        board: Board | ReadOnlyBoard,
        limits: SearchLimits,
    ) -> SearchResult: ...
