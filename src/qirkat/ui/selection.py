"""Click-to-move state machine turning square clicks into a legal move.

The first click picks a piece; each further click names the next landing
square.  A move is complete as soon as the clicked squares spell out a
legal move, so a chained capture takes one click per hop.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from qirkat.core.types import Square

if TYPE_CHECKING:
    from qirkat.core.board import Board, ReadOnlyBoard
    from qirkat.core.move import Move


def move_squares(move: Move) -> list[Square]:
    """Origin followed by every landing square of *move*."""
    return [move.from_sq, *(hop.to_sq for hop in move.hops())]


class MoveSelector:
    """Click state machine, independent of any widget."""

    __slots__ = ("_path", "_candidates", "_bad_sq")

    def __init__(self) -> None:
        self._path: list[Square] = []
        self._candidates: list[Move] = []
        self._bad_sq: Square | None = None

    # ── State ────────────────────────────────────────────────────────────

    @property
    def path(self) -> list[Square]:
        """Squares clicked so far for the pending move."""
        return list(self._path)

    @property
    def selected_sq(self) -> Square | None:
        return self._path[0] if self._path else None

    @property
    def bad_sq(self) -> Square | None:
        """Last clicked square that has no legal move, if any."""
        return self._bad_sq

    @property
    def is_active(self) -> bool:
        return bool(self._path)

    def targets(self) -> list[Square]:
        """Squares that may be clicked next to continue the pending move."""
        depth = len(self._path)
        found: list[Square] = []
        for move in self._candidates:
            squares = move_squares(move)
            if len(squares) > depth and squares[depth] not in found:
                found.append(squares[depth])
        return found

    def reset(self) -> None:
        self._path = []
        self._candidates = []
        self._bad_sq = None

    # ── Input ────────────────────────────────────────────────────────────

    def click(self, board: Board | ReadOnlyBoard, sq: Square) -> Move | None:
        """Feed one click; return the move once it is complete."""
        if not self._path:
            self._start(board, sq)
            return None

        path = [*self._path, sq]
        matching = [m for m in self._candidates if move_squares(m)[: len(path)] == path]
        for move in matching:
            if len(move_squares(move)) == len(path):
                self.reset()
                return move
        if not matching:
            self.reset()
            return None
        self._path = path
        self._candidates = matching
        return None

    def _start(self, board: Board | ReadOnlyBoard, sq: Square) -> None:
        candidates = [m for m in board.legal_moves if m.from_sq == sq]
        if not candidates:
            # A second click on the same bad square clears the mark.
            self._bad_sq = None if self._bad_sq == sq else sq
            return
        self._path = [sq]
        self._candidates = candidates
        self._bad_sq = None
