"""Board - immutable field placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from checkie.core.enums import Colour, Role
from checkie.core.field import BLACK_PAWN, EMPTY, WHITE_PAWN, Field, Piece
from checkie.core.types import (
    BLACK_PROMOTION_ROW,
    BOARD_SIZE,
    SQUARE_COUNT,
    WHITE_PROMOTION_ROW,
    Square,
    col_of,
    is_dark_square,
    is_valid_square,
    make_square,
    row_of,
    validate_square,
)

# Index offsets of the two diagonals for a one-row step.
_DIAGONAL_OFFSETS: tuple[int, int] = (BOARD_SIZE - 1, BOARD_SIZE + 1)
_PAWN_ROWS = 3


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Board:
    """Immutable 64-square board.

    Every operation that changes the position returns a new :class:`Board`;
    boards compare and hash by value so they can be collected in sets.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Field] | None = None) -> None:
        fields = (EMPTY,) * SQUARE_COUNT if squares is None else tuple(squares)
        if len(fields) != SQUARE_COUNT:
            raise ValueError(
                f"Board needs exactly {SQUARE_COUNT} fields, got {len(fields)}"
            )
        self._squares: tuple[Field, ...] = fields

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position: twelve pawns per side on dark squares."""
        squares: list[Field] = []
        for sq in range(SQUARE_COUNT):
            row = row_of(sq)
            if not is_dark_square(sq):
                squares.append(EMPTY)
            elif row < _PAWN_ROWS:
                squares.append(BLACK_PAWN)
            elif row >= BOARD_SIZE - _PAWN_ROWS:
                squares.append(WHITE_PAWN)
            else:
                squares.append(EMPTY)
        return cls(squares)

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def from_fields(cls, fields: Mapping[Square, Field]) -> Board:
        """Board holding *fields* (square → field), every other square empty."""
        squares = [EMPTY] * SQUARE_COUNT
        for sq, field in fields.items():
            squares[validate_square(sq)] = field
        return cls(squares)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Field:
        return self._squares[sq]

    def __len__(self) -> int:
        return SQUARE_COUNT

    def __iter__(self) -> Iterator[Field]:
        return iter(self._squares)

    # -- Query helpers ------------------------------------------------------

    def pieces(self, colour: Colour) -> list[Square]:
        """Squares occupied by *colour*."""
        return [sq for sq, field in enumerate(self._squares) if field.has_colour(colour)]

    def count(self, colour: Colour | None = None, role: Role | None = None) -> int:
        """Number of pieces, optionally restricted to a colour and/or role."""
        total = 0
        for field in self._squares:
            if not isinstance(field, Piece):
                continue
            if colour is not None and field.colour != colour:
                continue
            if role is not None and field.role != role:
                continue
            total += 1
        return total

    # -- Geometry -----------------------------------------------------------

    @staticmethod
    def fields_between(start: Square, end: Square) -> range:
        """Squares on the diagonal from *start* to *end*, both included."""
        dy = row_of(end) - row_of(start)
        dx = col_of(end) - col_of(start)
        if dy == 0 or abs(dy) != abs(dx):
            raise ValueError(f"Squares {start} and {end} do not share a diagonal")
        step = _sign(dy) * BOARD_SIZE + _sign(dx)
        return range(start, end + step, step)

    def count_pieces(self, start: Square, end: Square) -> int:
        """Occupied squares swept by a move from *start* to *end*."""
        return sum(
            1 for sq in self.fields_between(start, end) if not self._squares[sq].is_empty
        )

    def can_move(self, start: Square, end: Square, jump: bool) -> bool:
        """Whether the piece on *start* may step (or jump) to *end*.

        A simple move sweeps exactly one occupied square, the mover itself.
        A jump sweeps exactly two: the mover and one opposing piece.
        """
        if not is_valid_square(end) or not self._squares[end].is_empty:
            return False
        mover = self._squares[start]
        if not isinstance(mover, Piece):
            return False

        dy = abs(row_of(end) - row_of(start))
        if dy != abs(col_of(end) - col_of(start)):
            return False
        min_distance = 2 if jump else 1
        if dy < min_distance:
            return False

        occupied = [
            self._squares[sq]
            for sq in self.fields_between(start, end)
            if not self._squares[sq].is_empty
        ]
        if len(occupied) != min_distance:
            return False
        # The mover comes first on the path, so the last entry is the captured piece.
        return not (jump and occupied[-1].has_colour(mover.colour))

    def allowed_moves(self, start: Square, jump: bool, player: Colour) -> list[Square]:
        """Destinations reachable from *start* in a single step by *player*."""
        field = self._squares[start]
        if not field.has_colour(player):
            return []

        row = row_of(start)
        ends: list[Square] = []
        for dy in range(field.min_step(row, jump), field.max_step(row, jump) + 1):
            for offset in _DIAGONAL_OFFSETS:
                end = start + dy * offset
                if self.can_move(start, end, jump):
                    ends.append(end)
        return ends

    # -- Transformation -----------------------------------------------------

    def move_piece(self, start: Square, end: Square) -> Board:
        """Relocate the piece on *start* to *end*, capturing anything passed over.

        Promotion is applied as part of the move, so a pawn that lands on
        its last row is already a queen on the returned board.
        """
        squares = list(self._squares)
        piece = squares[start]
        for sq in self.fields_between(start, end):
            squares[sq] = EMPTY
        squares[end] = piece
        return Board(squares).promote_all()

    def promote_all(self) -> Board:
        """Promote every white piece on row 0 and every black piece on row 7."""
        squares = list(self._squares)
        for col in range(BOARD_SIZE):
            white_sq = make_square(WHITE_PROMOTION_ROW, col)
            if squares[white_sq].is_white:
                squares[white_sq] = squares[white_sq].promoted()
            black_sq = make_square(BLACK_PROMOTION_ROW, col)
            if squares[black_sq].is_black:
                squares[black_sq] = squares[black_sq].promoted()
        return Board(squares)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __str__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            start = make_square(row, 0)
            rows.append(
                "".join(f"|{field}" for field in self._squares[start : start + BOARD_SIZE])
            )
        return "\n".join(rows)

    def __repr__(self) -> str:
        return f"Board(\n{self}\n)"
