"""Core domain layer — pure Qirkat logic with zero external dependencies.

Quick start::

    from qirkat.core import Board, parse_move

    board = Board()
    board.make_move(parse_move("c2-c3"))
    print(board)
"""

from qirkat.core.board import Board, BoardChange, BoardObserver, ReadOnlyBoard
from qirkat.core.enums import GameResult, PieceColor
from qirkat.core.errors import (
    BadColorError,
    BadDescriptionError,
    BadMoveSyntaxError,
    IllegalMoveError,
    QirkatError,
)
from qirkat.core.move import Move, parse_move
from qirkat.core.move_generator import MoveGenerator
from qirkat.core.types import (
    MAX_INDEX,
    NEIGHBOR_OFFSETS,
    SIDE,
    Square,
    col_of,
    is_valid_neighbor,
    is_valid_square,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "GameResult",
    "PieceColor",
    # Errors
    "BadColorError",
    "BadDescriptionError",
    "BadMoveSyntaxError",
    "IllegalMoveError",
    "QirkatError",
    # Types / geometry
    "MAX_INDEX",
    "NEIGHBOR_OFFSETS",
    "SIDE",
    "Square",
    "col_of",
    "is_valid_neighbor",
    "is_valid_square",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "BoardChange",
    "BoardObserver",
    "Move",
    "MoveGenerator",
    "ReadOnlyBoard",
    "parse_move",
]
