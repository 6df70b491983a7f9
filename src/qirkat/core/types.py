"""Square type alias and board geometry.

Board layout (row-major, row 1 is the side white starts from)::

    a1=0,  b1=1,  ..., e1=4
    a2=5,  b2=6,  ..., e2=9
    ...
    a5=20, b5=21, ..., e5=24

Only even-indexed squares carry diagonal lines.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0–24

SIDE = 5
MAX_INDEX = SIDE * SIDE - 1

# Linearized offsets of the eight neighbours, in generation order.
NEIGHBOR_OFFSETS: tuple[int, ...] = (-6, -5, -4, -1, 1, 4, 5, 6)

_COLUMNS = "abcde"
_ROWS = "12345"


def col_of(sq: Square) -> int:
    """Column index 0–4 (a–e)."""
    return sq % SIDE


def row_of(sq: Square) -> int:
    """Row index 0–4 (1–5)."""
    return sq // SIDE


def make_square(col: int, row: int) -> Square:
    """Create square from column (0–4) and row (0–4)."""
    return row * SIDE + col


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 24 → 'e5'."""
    return _COLUMNS[col_of(sq)] + _ROWS[row_of(sq)]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'c3' → 12."""
    if len(name) != 2 or name[0] not in _COLUMNS or name[1] not in _ROWS:
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(_COLUMNS.index(name[0]), _ROWS.index(name[1]))


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq <= MAX_INDEX


def diagonal_fail(offset: int) -> bool:
    """Whether *offset* needs a diagonal line (absent on odd squares)."""
    return offset % 2 == 0


def left_edge_fail(offset: int) -> bool:
    """Whether *offset* would wrap off the left column."""
    return offset in (-6, -1, 4)


def right_edge_fail(offset: int) -> bool:
    """Whether *offset* would wrap off the right column."""
    return offset in (6, 1, -4)


def is_valid_neighbor(sq: Square, offset: int) -> bool:
    """Whether ``sq + offset`` is joined to *sq* by a board line."""
    if not is_valid_square(sq + offset):
        return False
    if sq % 2 == 1 and diagonal_fail(offset):
        return False
    if col_of(sq) == 0 and left_edge_fail(offset):
        return False
    if col_of(sq) == SIDE - 1 and right_edge_fail(offset):
        return False
    return True


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1 = range(0, 5)
A2, B2, C2, D2, E2 = range(5, 10)
A3, B3, C3, D3, E3 = range(10, 15)
A4, B4, C4, D4, E4 = range(15, 20)
A5, B5, C5, D5, E5 = range(20, 25)
