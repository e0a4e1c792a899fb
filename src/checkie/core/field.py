"""Field value objects: the contents of a single board square.

A field is a closed sum type, ``Piece | Empty``. All derived queries are
answered by pattern matching over the two variants, so every square value
has a defined answer (an empty square has direction 0 and never promotes).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from checkie.core.enums import Colour, Role
from checkie.core.types import BOARD_SIZE

_MAX_DY = BOARD_SIZE - 1


class _FieldQueries:
    """Queries shared by both field variants."""

    __slots__ = ()

    @property
    def is_empty(self) -> bool:
        return isinstance(self, Empty)

    @property
    def is_queen(self) -> bool:
        match self:
            case Piece(role=Role.QUEEN):
                return True
            case _:
                return False

    @property
    def is_white(self) -> bool:
        return self.has_colour(Colour.WHITE)

    @property
    def is_black(self) -> bool:
        return self.has_colour(Colour.BLACK)

    def has_colour(self, colour: Colour) -> bool:
        match self:
            case Piece(colour=own):
                return own == colour
            case _:
                return False

    def promoted(self) -> Field:
        """Pawn becomes a queen of the same colour; anything else is unchanged."""
        match self:
            case Piece(role=Role.PAWN, colour=colour):
                return Piece(Role.QUEEN, colour)
            case _:
                return self  # type: ignore[return-value]

    def direction(self) -> int:
        """Row step sign for forward movement: white -1, black +1, empty 0."""
        match self:
            case Piece(colour=Colour.WHITE):
                return -1
            case Piece(colour=Colour.BLACK):
                return 1
            case _:
                return 0

    # ── Movement geometry ────────────────────────────────────────────────

    def min_dy(self, jump: bool) -> int:
        """Smallest row displacement allowed for a move of this piece."""
        if self.is_queen:
            return -_MAX_DY
        return 2 * self.direction() if jump else self.direction()

    def max_dy(self, jump: bool) -> int:
        """Largest row displacement allowed for a move of this piece."""
        if self.is_queen:
            return _MAX_DY
        return 2 * self.direction() if jump else self.direction()

    def min_step(self, row: int, jump: bool) -> int:
        """:meth:`min_dy` clamped so the destination row stays on the board."""
        return max(self.min_dy(jump), -row)

    def max_step(self, row: int, jump: bool) -> int:
        """:meth:`max_dy` clamped so the destination row stays on the board."""
        return min(self.max_dy(jump), _MAX_DY - row)


@dataclass(frozen=True, slots=True)
class Piece(_FieldQueries):
    """A pawn or queen of a given colour."""

    role: Role
    colour: Colour

    def __str__(self) -> str:
        return _SYMBOLS[self]


@dataclass(frozen=True, slots=True)
class Empty(_FieldQueries):
    """An unoccupied square."""

    def __str__(self) -> str:
        return _EMPTY_SYMBOL


Field: TypeAlias = Piece | Empty

EMPTY = Empty()
WHITE_PAWN = Piece(Role.PAWN, Colour.WHITE)
WHITE_QUEEN = Piece(Role.QUEEN, Colour.WHITE)
BLACK_PAWN = Piece(Role.PAWN, Colour.BLACK)
BLACK_QUEEN = Piece(Role.QUEEN, Colour.BLACK)

_EMPTY_SYMBOL = "-"
_SYMBOLS: dict[Piece, str] = {
    WHITE_PAWN: "w",
    WHITE_QUEEN: "W",
    BLACK_PAWN: "b",
    BLACK_QUEEN: "B",
}
_CHAR_MAP: dict[str, Field] = {
    _EMPTY_SYMBOL: EMPTY,
    **{symbol: piece for piece, symbol in _SYMBOLS.items()},
}


def field_from_char(char: str) -> Field:
    """Create a field from its display symbol, e.g. 'W' → white queen."""
    try:
        return _CHAR_MAP[char]
    except KeyError:
        raise ValueError(f"Invalid field character: {char!r}") from None
