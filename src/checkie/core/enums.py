"""Core enumerations for the checkers domain."""

from __future__ import annotations

from enum import IntEnum


class Colour(IntEnum):
    """Side colour."""

    BLACK = 0
    WHITE = 1

    def invert(self) -> Colour:
        return Colour(1 - self.value)

    @property
    def opposite(self) -> Colour:
        return self.invert()

    def __str__(self) -> str:
        return self.name.lower()


class Role(IntEnum):
    """Piece roles: pawns step forward only, queens slide along any diagonal."""

    PAWN = 1
    QUEEN = 2
