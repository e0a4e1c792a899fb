"""Board text notation: the ``|``-separated row dump and its parser.

Each row is written as eight ``|<symbol>`` cells, top row (row 0) first::

    |-|b|-|b|-|b|-|b
    |b|-|b|-|b|-|b|-
    ...

Symbols are ``-`` (empty), ``w``/``W`` (white pawn/queen) and ``b``/``B``
(black pawn/queen).
"""

from __future__ import annotations

from collections.abc import Sequence

from checkie.core.board import Board
from checkie.core.field import Field, field_from_char
from checkie.core.types import BOARD_SIZE

STARTING_TEXT = str(Board.initial())


def board_to_text(board: Board) -> str:
    """Render *board* as one ``|``-separated line per row."""
    return str(board)


def board_from_text(text: str) -> Board:
    """Parse the row dump produced by :func:`board_to_text`."""
    lines = [line.strip() for line in text.strip().splitlines()]
    if len(lines) != BOARD_SIZE:
        raise ValueError(f"Invalid board text (need {BOARD_SIZE} rows): {text!r}")

    rows: list[str] = []
    for line in lines:
        if not line.startswith("|"):
            raise ValueError(f"Invalid board row (must start with '|'): {line!r}")
        cells = line[1:].split("|")
        if any(len(cell) != 1 for cell in cells):
            raise ValueError(f"Invalid board row cell: {line!r}")
        rows.append("".join(cells))
    return board_from_rows(rows)


def board_from_rows(rows: Sequence[str]) -> Board:
    """Build a board from eight compact rows, e.g. ``"-b-b-b-b"``."""
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid board (need {BOARD_SIZE} rows): {rows!r}")

    fields: list[Field] = []
    for row in rows:
        if len(row) != BOARD_SIZE:
            raise ValueError(f"Invalid board row width: {row!r}")
        fields.extend(field_from_char(ch) for ch in row)
    return Board(fields)
