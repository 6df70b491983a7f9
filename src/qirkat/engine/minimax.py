"""Fixed-depth alpha-beta minimax over the Qirkat board."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import TYPE_CHECKING

from qirkat.core.enums import PieceColor
from qirkat.engine.evaluation import static_score
from qirkat.engine.search import (
    INFINITY,
    WINNING_VALUE,
    IEngine,
    SearchLimits,
    SearchResult,
)

if TYPE_CHECKING:
    from qirkat.core.board import Board, ReadOnlyBoard
    from qirkat.core.move import Move

_LOGGER = logging.getLogger(__name__)


class AlphaBetaEngine(IEngine):
    """Minimax searcher with alpha-beta pruning and a static evaluator.

    Scores are always from white's point of view: white (``sense=1``)
    maximises, black (``sense=-1``) minimises.  The search runs on a copy
    of the board it is given.
    """

    __slots__ = ("_nodes", "_last_found_move")

    def __init__(self) -> None:
        self._nodes = 0
        self._last_found_move: Move | None = None

    def search(
        self,
        board: Board | ReadOnlyBoard,
        limits: SearchLimits,
    ) -> SearchResult:
        if limits.max_depth <= 0:
            raise ValueError("Search depth must be >= 1")

        work = board.copy()
        sense = 1 if work.side_to_move == PieceColor.WHITE else -1
        self._nodes = 0
        self._last_found_move = None

        if work.game_over:
            return SearchResult(None, -sense * WINNING_VALUE, 0, self._nodes)

        started = perf_counter()
        score = self.find_move(
            work, limits.max_depth, True, sense, -INFINITY, INFINITY
        )
        _LOGGER.info(
            "%s search: depth=%d nodes=%d score=%d in %.2fs",
            work.side_to_move.display_name,
            limits.max_depth,
            self._nodes,
            score,
            perf_counter() - started,
        )
        return SearchResult(self._last_found_move, score, limits.max_depth, self._nodes)

    def find_move(
        self,
        board: Board,
        depth: int,
        save_move: bool,
        sense: int,
        alpha: int,
        beta: int,
    ) -> int:
        """Value of *board* searched *depth* plies deep.

        The best move is recorded for :meth:`search` iff *save_move*.
        With ``sense == 1`` the result is maximal or at least *beta*;
        with ``sense == -1`` it is minimal or at most *alpha*.  Every
        child is made and undone here, so *board* is unchanged on return.
        """
        self._nodes += 1
        if board.game_over:
            # The side to move has no moves and loses.
            return -sense * WINNING_VALUE
        if depth == 0:
            return static_score(board)

        best_move: Move | None = None
        best_score = -sense * WINNING_VALUE

        for move in board.legal_moves:
            board.make_move(move)
            if sense == 1:
                score = self.find_move(board, depth - 1, False, -1, best_score, beta)
            else:
                score = self.find_move(board, depth - 1, False, 1, alpha, best_score)
            board.undo()

            if sense * score >= sense * best_score:
                best_score = score
                best_move = move
                if sense == 1 and best_score >= beta:
                    break
                if sense == -1 and best_score <= alpha:
                    break

        if save_move:
            self._last_found_move = best_move
        return best_score
