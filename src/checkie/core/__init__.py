"""Core domain layer — pure checkers rules with zero external dependencies.

Quick start::

    from checkie.core import Board, Colour, legal_boards

    board = Board.initial()
    for result in legal_boards(board, Colour.BLACK):
        print(result, end="\n\n")
"""

from checkie.core.board import Board
from checkie.core.enums import Colour, Role
from checkie.core.field import (
    BLACK_PAWN,
    BLACK_QUEEN,
    EMPTY,
    WHITE_PAWN,
    WHITE_QUEEN,
    Empty,
    Field,
    Piece,
    field_from_char,
)
from checkie.core.move_generator import MoveGenerator, legal_boards
from checkie.core.notation import (
    STARTING_TEXT,
    board_from_rows,
    board_from_text,
    board_to_text,
)
from checkie.core.types import (
    Square,
    col_of,
    is_dark_square,
    is_valid_square,
    make_square,
    row_of,
    validate_square,
)

__all__ = [
    # Enums
    "Colour",
    "Role",
    # Types / helpers
    "Square",
    "col_of",
    "is_dark_square",
    "is_valid_square",
    "make_square",
    "row_of",
    "validate_square",
    # Fields
    "BLACK_PAWN",
    "BLACK_QUEEN",
    "EMPTY",
    "WHITE_PAWN",
    "WHITE_QUEEN",
    "Empty",
    "Field",
    "Piece",
    "field_from_char",
    # Domain objects
    "Board",
    "MoveGenerator",
    "legal_boards",
    # Notation
    "STARTING_TEXT",
    "board_from_rows",
    "board_from_text",
    "board_to_text",
]
