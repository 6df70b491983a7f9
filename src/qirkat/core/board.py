"""Board — the 5x5 Qirkat grid plus side to move, move cache and undo stack."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import IntEnum, auto

from qirkat.core.enums import PieceColor
from qirkat.core.errors import BadColorError, BadDescriptionError, IllegalMoveError
from qirkat.core.move import Move
from qirkat.core.move_generator import MoveGenerator
from qirkat.core.types import (
    MAX_INDEX,
    SIDE,
    Square,
    is_valid_square,
    make_square,
    parse_square,
)

_DESCRIPTION_RE = re.compile(r"[bwBW-]{%d}" % (MAX_INDEX + 1))
_WHITESPACE_RE = re.compile(r"\s")

_DESCRIPTION_CHARS: dict[str, PieceColor] = {
    "-": PieceColor.EMPTY,
    "w": PieceColor.WHITE,
    "W": PieceColor.WHITE,
    "b": PieceColor.BLACK,
    "B": PieceColor.BLACK,
}


class BoardChange(IntEnum):
    """Kind of mutation reported to board observers."""

    CLEARED = auto()
    PIECES_SET = auto()
    MOVE_MADE = auto()
    UNDONE = auto()
    COPIED = auto()


BoardObserver = Callable[["Board | ReadOnlyBoard", BoardChange], None]


def _opening_cells() -> list[PieceColor]:
    cells = [PieceColor.WHITE] * 10
    cells += [PieceColor.BLACK, PieceColor.BLACK, PieceColor.EMPTY]
    cells += [PieceColor.WHITE, PieceColor.WHITE]
    cells += [PieceColor.BLACK] * 10
    return cells


@dataclass(frozen=True, slots=True)
class _BoardSnapshot:
    """Board state saved before each move so it can be undone."""

    cells: tuple[PieceColor, ...]
    side_to_move: PieceColor
    game_over: bool
    legal_moves: tuple[Move, ...]
    illegal_white: tuple[Move, ...]
    illegal_black: tuple[Move, ...]


class Board:
    """Mutable Qirkat board.

    The legal-move list is recomputed after every mutation, so
    :attr:`game_over` is simply "the side to move has no moves".
    :meth:`make_move` pushes a snapshot that :meth:`undo` restores.
    Observers are called synchronously after every mutation and must not
    mutate the board themselves.
    """

    __slots__ = (
        "_cells",
        "_side_to_move",
        "_game_over",
        "_legal_moves",
        "_illegal_horizontals",
        "_history",
        "_observers",
    )

    def __init__(self, observers: Iterable[BoardObserver] = ()) -> None:
        self._observers: list[BoardObserver] = list(observers)
        self._cells: list[PieceColor] = []
        self._side_to_move = PieceColor.WHITE
        self._game_over = False
        self._legal_moves: list[Move] = []
        # [color] -> return moves blocked by a horizontal step of that color.
        self._illegal_horizontals: dict[PieceColor, list[Move]] = {}
        self._history: list[_BoardSnapshot] = []
        self.clear()

    # -- Observers ----------------------------------------------------------

    def subscribe(self, observer: BoardObserver) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: BoardObserver) -> None:
        self._observers.remove(observer)

    def _notify(self, change: BoardChange) -> None:
        for observer in list(self._observers):
            observer(self, change)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> PieceColor:
        if not is_valid_square(sq):
            raise IndexError(f"Square out of range: {sq}")
        return self._cells[sq]

    def get(self, sq: Square | str) -> PieceColor:
        """Contents of *sq*, given as an index or a name such as ``'c3'``."""
        if isinstance(sq, str):
            sq = parse_square(sq)
        return self[sq]

    def cells(self) -> list[PieceColor]:
        """Copy of all 25 cells in index order."""
        return self._cells.copy()

    @property
    def side_to_move(self) -> PieceColor:
        """Side whose turn it is (arbitrary once the game is over)."""
        return self._side_to_move

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def legal_moves(self) -> list[Move]:
        """Copy of the cached legal-move list, in generation order."""
        return self._legal_moves.copy()

    def is_legal_move(self, move: Move) -> bool:
        return move in self._legal_moves

    def illegal_horizontals(self, color: PieceColor) -> list[Move]:
        """Horizontal return moves currently forbidden to *color*."""
        if not color.is_piece:
            raise BadColorError("EMPTY has no illegal horizontal moves")
        return self._illegal_horizontals[color].copy()

    @property
    def undo_depth(self) -> int:
        """Number of moves that :meth:`undo` can take back."""
        return len(self._history)

    # -- Move queries -------------------------------------------------------

    def jump_possible(self) -> bool:
        """Whether the side to move has any capture."""
        return MoveGenerator(self).jump_possible()

    def jump_possible_at(self, sq: Square | str) -> bool:
        """Whether the piece on *sq* belongs to the side to move and can capture."""
        if isinstance(sq, str):
            sq = parse_square(sq)
        return MoveGenerator(self).jump_possible_at(sq)

    def check_jump(self, move: Move | None, allow_partial: bool = False) -> bool:
        """Whether *move* is a legal jump sequence.

        ``None`` is always accepted.  With *allow_partial*, a move that is
        a hop-by-hop prefix of a legal chain is accepted too.
        """
        if move is None:
            return True
        if not all(hop.is_jump for hop in move.hops()):
            return False
        if move in self._legal_moves:
            return True
        if not allow_partial:
            return False
        prefix = list(move.hops())
        for legal in self._legal_moves:
            hops = list(legal.hops())
            if len(hops) <= len(prefix):
                continue
            if all(
                (a.from_sq, a.to_sq) == (b.from_sq, b.to_sq)
                for a, b in zip(prefix, hops)
            ):
                return True
        return False

    # -- Mutation -----------------------------------------------------------

    def clear(self) -> None:
        """Reset to the opening position with white to move."""
        self._cells = _opening_cells()
        self._side_to_move = PieceColor.WHITE
        self._reset_aux_state()
        self._notify(BoardChange.CLEARED)

    def set_pieces(self, description: str, next_mover: PieceColor) -> None:
        """Replace all cells from a 25-character description.

        *description* holds ``b``, ``w`` or ``-`` per square (either case,
        whitespace ignored) in row-major order from a1 to e5.
        """
        if not next_mover.is_piece:
            raise BadColorError("Side to move must be WHITE or BLACK")
        compact = _WHITESPACE_RE.sub("", description)
        if not _DESCRIPTION_RE.fullmatch(compact):
            raise BadDescriptionError(f"Invalid board description: {description!r}")

        self._cells = [_DESCRIPTION_CHARS[ch] for ch in compact]
        self._side_to_move = next_mover
        self._reset_aux_state()
        self._notify(BoardChange.PIECES_SET)

    def make_move(self, move: Move) -> None:
        """Apply the legal *move*, pushing undo state onto the history stack."""
        if move not in self._legal_moves:
            raise IllegalMoveError(f"Illegal move: {move}")

        self._history.append(self._snapshot())
        color = self._side_to_move
        cells = self._cells

        cells[move.from_sq] = PieceColor.EMPTY
        if move.is_jump:
            for hop in move.hops():
                cells[hop.jumped_sq] = PieceColor.EMPTY
        cells[move.final_sq] = color

        self._update_illegal_horizontals(move, color)
        self._side_to_move = color.opposite
        self._refresh_legal_moves()
        self._notify(BoardChange.MOVE_MADE)

    def undo(self) -> None:
        """Take back the last move; does nothing when there is none."""
        if not self._history:
            return
        self._restore(self._history.pop())
        self._notify(BoardChange.UNDONE)

    def copy_from(self, other: Board | ReadOnlyBoard) -> None:
        """Make this board an independent copy of *other*, undo stack included."""
        source = other._board if isinstance(other, ReadOnlyBoard) else other
        self._restore(source._snapshot())
        self._history = source._history.copy()
        self._notify(BoardChange.COPIED)

    def copy(self) -> Board:
        """Independent deep copy (without observers)."""
        b = Board()
        b._restore(self._snapshot())
        b._history = self._history.copy()
        return b

    # -- Internal helpers ---------------------------------------------------

    def _reset_aux_state(self) -> None:
        self._illegal_horizontals = {PieceColor.WHITE: [], PieceColor.BLACK: []}
        self._history = []
        self._refresh_legal_moves()

    def _refresh_legal_moves(self) -> None:
        self._legal_moves = MoveGenerator(self).generate_legal_moves()
        self._game_over = not self._legal_moves

    def _update_illegal_horizontals(self, move: Move, color: PieceColor) -> None:
        cells = self._cells
        for entries in self._illegal_horizontals.values():
            entries[:] = [m for m in entries if cells[m.from_sq] != PieceColor.EMPTY]
        if move.is_left_move or move.is_right_move:
            self._illegal_horizontals[color].append(Move(move.to_sq, move.from_sq))

    def _snapshot(self) -> _BoardSnapshot:
        return _BoardSnapshot(
            cells=tuple(self._cells),
            side_to_move=self._side_to_move,
            game_over=self._game_over,
            legal_moves=tuple(self._legal_moves),
            illegal_white=tuple(self._illegal_horizontals[PieceColor.WHITE]),
            illegal_black=tuple(self._illegal_horizontals[PieceColor.BLACK]),
        )

    def _restore(self, snapshot: _BoardSnapshot) -> None:
        self._cells = list(snapshot.cells)
        self._side_to_move = snapshot.side_to_move
        self._game_over = snapshot.game_over
        self._legal_moves = list(snapshot.legal_moves)
        self._illegal_horizontals = {
            PieceColor.WHITE: list(snapshot.illegal_white),
            PieceColor.BLACK: list(snapshot.illegal_black),
        }

    # -- Rendering ----------------------------------------------------------

    def render(self, legend: bool = False) -> str:
        """Text picture, row 5 first; *legend* adds row digits and columns."""
        rows: list[str] = []
        for row in range(SIDE - 1, -1, -1):
            pieces = " ".join(
                self._cells[make_square(col, row)].short_name for col in range(SIDE)
            )
            prefix = str(row + 1) if legend else ""
            rows.append(f"{prefix}  {pieces}")
        if legend:
            rows.append("  a b c d e")
        return "\n".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return self.render(legend=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._cells == other._cells
            and self._side_to_move == other._side_to_move
            and self._game_over == other._game_over
            and self._legal_moves == other._legal_moves
            and self._illegal_horizontals == other._illegal_horizontals
            and self._history == other._history
        )

    __hash__ = None  # type: ignore[assignment]


class ReadOnlyBoard:
    """Read-only handle on a :class:`Board`.

    Exposes every accessor of the wrapped board but no mutator, and
    re-emits the board's notifications to its own observers.
    """

    __slots__ = ("_board", "_observers")

    def __init__(self, board: Board) -> None:
        self._board = board
        self._observers: list[BoardObserver] = []
        board.subscribe(self._forward)

    def subscribe(self, observer: BoardObserver) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: BoardObserver) -> None:
        self._observers.remove(observer)

    def _forward(self, _board: Board | ReadOnlyBoard, change: BoardChange) -> None:
        for observer in list(self._observers):
            observer(self, change)

    # -- Delegated accessors ------------------------------------------------

    def __getitem__(self, sq: Square) -> PieceColor:
        return self._board[sq]

    def get(self, sq: Square | str) -> PieceColor:
        return self._board.get(sq)

    def cells(self) -> list[PieceColor]:
        return self._board.cells()

    @property
    def side_to_move(self) -> PieceColor:
        return self._board.side_to_move

    @property
    def game_over(self) -> bool:
        return self._board.game_over

    @property
    def legal_moves(self) -> list[Move]:
        return self._board.legal_moves

    def is_legal_move(self, move: Move) -> bool:
        return self._board.is_legal_move(move)

    def illegal_horizontals(self, color: PieceColor) -> list[Move]:
        return self._board.illegal_horizontals(color)

    @property
    def undo_depth(self) -> int:
        return self._board.undo_depth

    def jump_possible(self) -> bool:
        return self._board.jump_possible()

    def jump_possible_at(self, sq: Square | str) -> bool:
        return self._board.jump_possible_at(sq)

    def check_jump(self, move: Move | None, allow_partial: bool = False) -> bool:
        return self._board.check_jump(move, allow_partial)

    def copy(self) -> Board:
        """Independent mutable copy of the wrapped board."""
        return self._board.copy()

    def render(self, legend: bool = False) -> str:
        return self._board.render(legend)

    def __str__(self) -> str:
        return str(self._board)

    def __repr__(self) -> str:
        return f"ReadOnlyBoard(\n{self._board!r}\n)"
