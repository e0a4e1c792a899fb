"""Square type alias and coordinate helpers.

Board layout (row-major, black starts at the top):
    row 0 = squares 0..7    (black home row)
    row 1 = squares 8..15
    ...
    row 7 = squares 56..63  (white home row)
"""

from __future__ import annotations

from typing import Final, TypeAlias

Square: TypeAlias = int  # 0–63

BOARD_SIZE: Final = 8
SQUARE_COUNT: Final = BOARD_SIZE * BOARD_SIZE

# Row a piece of each colour must reach to be promoted.
WHITE_PROMOTION_ROW: Final = 0
BLACK_PROMOTION_ROW: Final = BOARD_SIZE - 1


def row_of(sq: Square) -> int:
    """Row index 0–7."""
    return sq // BOARD_SIZE


def col_of(sq: Square) -> int:
    """Column index 0–7."""
    return sq % BOARD_SIZE


def make_square(row: int, col: int) -> Square:
    """Create square from row (0–7) and column (0–7)."""
    return row * BOARD_SIZE + col


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < SQUARE_COUNT


def is_dark_square(sq: Square) -> bool:
    """Whether *sq* lies on the playable diagonals."""
    return (row_of(sq) + col_of(sq)) % 2 == 1


def validate_square(sq: int) -> Square:
    """Return *sq* unchanged, or raise ``ValueError`` if it is off the board."""
    if not is_valid_square(sq):
        raise ValueError(f"Square out of range 0..{SQUARE_COUNT - 1}: {sq!r}")
    return sq
