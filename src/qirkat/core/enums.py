"""Core enumerations for the Qirkat domain."""

from __future__ import annotations

from enum import IntEnum

from qirkat.core.errors import BadColorError


class PieceColor(IntEnum):
    """Contents of a square: empty, or a piece of one side."""

    EMPTY = 0
    WHITE = 1
    BLACK = 2

    @property
    def opposite(self) -> PieceColor:
        if self == PieceColor.WHITE:
            return PieceColor.BLACK
        if self == PieceColor.BLACK:
            return PieceColor.WHITE
        raise BadColorError("EMPTY has no opposite color")

    @property
    def is_piece(self) -> bool:
        return self != PieceColor.EMPTY

    @property
    def short_name(self) -> str:
        """Single-letter code used in board dumps: ``w``, ``b`` or ``-``."""
        return _SHORT_NAMES[self]

    @property
    def display_name(self) -> str:
        """Capitalised name, e.g. ``White``."""
        return self.name.capitalize()

    @classmethod
    def parse(cls, name: str) -> PieceColor:
        """Side named by *name* (``white``/``black``, any case)."""
        try:
            color = cls[name.strip().upper()]
        except KeyError:
            raise BadColorError(f"Invalid color: {name!r}") from None
        if color == cls.EMPTY:
            raise BadColorError(f"Invalid color: {name!r}")
        return color

    def __str__(self) -> str:
        return self.name.lower()


_SHORT_NAMES: dict[PieceColor, str] = {
    PieceColor.EMPTY: "-",
    PieceColor.WHITE: "w",
    PieceColor.BLACK: "b",
}


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
