"""Legal move generation: forward steps and maximal capture chains."""

from __future__ import annotations

from typing import TYPE_CHECKING

from qirkat.core.enums import PieceColor
from qirkat.core.move import Move
from qirkat.core.types import (
    MAX_INDEX,
    NEIGHBOR_OFFSETS,
    SIDE,
    Square,
    is_valid_neighbor,
    row_of,
)

if TYPE_CHECKING:
    from qirkat.core.board import Board


# Offsets a non-capturing step may not use, per side.
_BACKWARD_OFFSETS: dict[PieceColor, tuple[int, ...]] = {
    PieceColor.WHITE: (-6, -5, -4),
    PieceColor.BLACK: (4, 5, 6),
}

# Row (0-based) from which a side may not step.
_NO_STEP_ROW: dict[PieceColor, int] = {
    PieceColor.WHITE: SIDE - 1,
    PieceColor.BLACK: 0,
}


def is_possible_step(sq: Square, offset: int, color: PieceColor) -> bool:
    """Whether *color* may step from *sq* by *offset* on an empty board."""
    return is_valid_neighbor(sq, offset) and offset not in _BACKWARD_OFFSETS[color]


class MoveGenerator:
    """Generates the legal moves for the side to move on a :class:`Board`.

    Capture chains are explored on a scratch copy of the cells, so the
    board itself is never touched.
    """

    __slots__ = ("_board", "_cells", "_color")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._cells = board.cells()
        self._color = board.side_to_move

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """All legal moves; only captures when any capture exists."""
        if self.jump_possible():
            return self.generate_jumps()
        return self.generate_steps()

    def generate_steps(self) -> list[Move]:
        """Non-capturing moves, ignoring the mandatory-capture rule."""
        moves: list[Move] = []
        for sq in range(MAX_INDEX + 1):
            self._gen_steps(sq, moves)
        return moves

    def generate_jumps(self) -> list[Move]:
        """Every maximal capture chain for the side to move."""
        moves: list[Move] = []
        for sq in range(MAX_INDEX + 1):
            if self.jump_possible_at(sq):
                moves.extend(self._jump_chains(sq))
        return moves

    def jump_possible(self) -> bool:
        """Whether any piece of the side to move can capture."""
        return any(self.jump_possible_at(sq) for sq in range(MAX_INDEX + 1))

    def jump_possible_at(self, sq: Square) -> bool:
        """Whether the piece on *sq* belongs to the mover and can capture."""
        cells = self._cells
        if cells[sq] != self._color:
            return False
        enemy = self._color.opposite
        for offset in NEIGHBOR_OFFSETS:
            if not is_valid_neighbor(sq, offset):
                continue
            mid = sq + offset
            if cells[mid] != enemy or not is_valid_neighbor(mid, offset):
                continue
            if cells[mid + offset] == PieceColor.EMPTY:
                return True
        return False

    # -- Steps --------------------------------------------------------------

    def _gen_steps(self, sq: Square, moves: list[Move]) -> None:
        color = self._color
        cells = self._cells
        if cells[sq] != color or row_of(sq) == _NO_STEP_ROW[color]:
            return
        forbidden = self._board.illegal_horizontals(color)
        for offset in NEIGHBOR_OFFSETS:
            if not is_possible_step(sq, offset, color):
                continue
            if cells[sq + offset] != PieceColor.EMPTY:
                continue
            move = Move(sq, sq + offset)
            if move in forbidden:
                continue
            moves.append(move)

    # -- Jumps --------------------------------------------------------------

    def _jump_chains(self, sq: Square) -> list[Move]:
        """Maximal chains starting at *sq* in the current scratch state."""
        result: list[Move] = []
        if not self.jump_possible_at(sq):
            return result

        cells = self._cells
        color = self._color
        enemy = color.opposite
        for offset in NEIGHBOR_OFFSETS:
            if not is_valid_neighbor(sq, offset):
                continue
            mid = sq + offset
            if cells[mid] != enemy or not is_valid_neighbor(mid, offset):
                continue
            dest = mid + offset
            if cells[dest] != PieceColor.EMPTY:
                continue

            cells[sq] = PieceColor.EMPTY
            cells[mid] = PieceColor.EMPTY
            cells[dest] = color
            continuations = self._jump_chains(dest)
            cells[dest] = PieceColor.EMPTY
            cells[sq] = color
            cells[mid] = enemy

            if continuations:
                result.extend(Move(sq, dest, tail) for tail in continuations)
            else:
                result.append(Move(sq, dest))
        return result
