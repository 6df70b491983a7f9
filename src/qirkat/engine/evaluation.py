"""Static position evaluation, positive scores favouring white."""

from __future__ import annotations

from typing import TYPE_CHECKING

from qirkat.core.enums import PieceColor
from qirkat.core.types import MAX_INDEX, SIDE, Square, col_of, row_of

if TYPE_CHECKING:
    from qirkat.core.board import Board, ReadOnlyBoard


def static_score(board: Board | ReadOnlyBoard) -> int:
    """Heuristic value of *board*: sum of :func:`square_value` over all squares."""
    return sum(square_value(board, sq) for sq in range(MAX_INDEX + 1))


def square_value(board: Board | ReadOnlyBoard, sq: Square) -> int:
    """Contribution of the piece on *sq* (zero for an empty square).

    Pieces on their promotion row are dead ends and count zero.  A piece
    whose horizontal return is blocked loses points according to how
    much of its row lies on the blocked side.
    """
    piece = board[sq]
    if piece == PieceColor.EMPTY:
        return 0

    row = row_of(sq) + 1
    col = col_of(sq) + 1
    if piece == PieceColor.WHITE:
        if row == SIDE:
            return 0
        raw = (SIDE - row + 1) * 4
    else:
        if row == 1:
            return 0
        raw = row * 4

    for blocked in board.illegal_horizontals(piece):
        if blocked.from_sq != sq:
            continue
        if blocked.is_right_move:
            raw -= 5 - col
        else:
            raw -= col - 1

    return raw if piece == PieceColor.WHITE else -raw
