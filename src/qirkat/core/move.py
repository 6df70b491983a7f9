"""Move value object: a step, a jump, or a chain of jumps."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from qirkat.core.errors import BadMoveSyntaxError
from qirkat.core.types import (
    Square,
    col_of,
    is_valid_square,
    make_square,
    parse_square,
    row_of,
    square_name,
)

_MOVE_RE = re.compile(r"[a-e][1-5](?:-[a-e][1-5])+")


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable hop from ``from_sq`` to ``to_sq``.

    A multi-jump is a hop whose ``tail`` holds the remaining hops; the
    tail starts where this hop ends.
    """

    from_sq: Square
    to_sq: Square
    tail: Move | None = None

    def __post_init__(self) -> None:
        if not (is_valid_square(self.from_sq) and is_valid_square(self.to_sq)):
            raise ValueError(f"Square out of range: {self.from_sq}, {self.to_sq}")
        if self.from_sq == self.to_sq:
            raise ValueError(f"Move must change square: {square_name(self.from_sq)}")
        if self.tail is not None:
            if self.tail.from_sq != self.to_sq:
                raise ValueError(
                    f"Chained hop {self.tail} does not start at {square_name(self.to_sq)}"
                )
            if not self.tail.is_jump:
                raise ValueError(f"Chained hop {self.tail} is not a jump")

    # ── Classification ───────────────────────────────────────────────────

    @property
    def is_jump(self) -> bool:
        """Whether this hop covers two cells in one of the eight directions."""
        dc = abs(col_of(self.to_sq) - col_of(self.from_sq))
        dr = abs(row_of(self.to_sq) - row_of(self.from_sq))
        return dc in (0, 2) and dr in (0, 2)

    @property
    def is_left_move(self) -> bool:
        """One column to the left along the same row."""
        return (
            row_of(self.from_sq) == row_of(self.to_sq)
            and col_of(self.to_sq) == col_of(self.from_sq) - 1
        )

    @property
    def is_right_move(self) -> bool:
        """One column to the right along the same row."""
        return (
            row_of(self.from_sq) == row_of(self.to_sq)
            and col_of(self.to_sq) == col_of(self.from_sq) + 1
        )

    @property
    def jumped_sq(self) -> Square:
        """Square midway between the endpoints of a jump, else ``to_sq``."""
        if not self.is_jump:
            return self.to_sq
        return make_square(
            (col_of(self.from_sq) + col_of(self.to_sq)) // 2,
            (row_of(self.from_sq) + row_of(self.to_sq)) // 2,
        )

    @property
    def final_sq(self) -> Square:
        """Landing square of the last hop."""
        move = self
        while move.tail is not None:
            move = move.tail
        return move.to_sq

    def hops(self) -> Iterator[Move]:
        """Yield this hop and every chained hop after it."""
        move: Move | None = self
        while move is not None:
            yield move
            move = move.tail

    def then(self, other: Move) -> Move:
        """Concatenate *other* after the last hop of this move."""
        if self.tail is None:
            return Move(self.from_sq, self.to_sq, other)
        return Move(self.from_sq, self.to_sq, self.tail.then(other))

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        parts = [square_name(self.from_sq)]
        parts.extend(square_name(hop.to_sq) for hop in self.hops())
        return "-".join(parts)

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse ``c0r0-c1r1[-c2r2...]``, e.g. ``'a3-a5-c3'``."""
        if not _MOVE_RE.fullmatch(text):
            raise BadMoveSyntaxError(f"Invalid move: {text!r}")
        squares = [parse_square(name) for name in text.split("-")]
        try:
            move: Move | None = None
            for from_sq, to_sq in reversed(list(zip(squares, squares[1:]))):
                move = cls(from_sq, to_sq, move)
        except ValueError as exc:
            raise BadMoveSyntaxError(f"Invalid move: {text!r} ({exc})") from exc
        assert move is not None
        return move


def parse_move(text: str) -> Move:
    """Parse a move string; see :meth:`Move.parse`."""
    return Move.parse(text)
