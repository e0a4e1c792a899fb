"""Legal turn generation: simple moves, jump chains and mandatory capture."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from checkie.core.board import Board
from checkie.core.enums import Colour
from checkie.core.types import SQUARE_COUNT, Square

_LOGGER = logging.getLogger(__name__)

# (square of the piece still to move, board) pair explored by the jump search.
_ChainPosition = tuple[Square, Board]


class MoveGenerator:
    """Generates every board reachable by one legal turn of *player*.

    The generator never mutates its board; each step derives a new
    :class:`Board`, so many snapshots can be live during the jump search.
    """

    __slots__ = ("_board", "_player")

    def __init__(self, board: Board, player: Colour) -> None:
        self._board = board
        self._player = player

    @property
    def board(self) -> Board:
        return self._board

    @property
    def player(self) -> Colour:
        return self._player

    # -- Public API ---------------------------------------------------------

    def generate_legal_boards(self) -> list[Board]:
        """All boards reachable by one legal turn.

        If any capture exists anywhere on the board, only jump results are
        legal; otherwise every simple move is.
        """
        jumps = _unique(
            board for sq in range(SQUARE_COUNT) for board in self.jumps_from(sq)
        )
        if jumps:
            _LOGGER.debug(
                "%s must capture: %d resulting boards", self._player, len(jumps)
            )
            return jumps

        moves = _unique(
            board for sq in range(SQUARE_COUNT) for board in self.non_jumps_from(sq)
        )
        _LOGGER.debug("%s has %d simple moves", self._player, len(moves))
        return moves

    def has_jump(self) -> bool:
        """Whether *player* has a capture available somewhere on the board."""
        return any(self.possible(sq, jump=True) for sq in range(SQUARE_COUNT))

    def possible(
        self, start: Square, jump: bool, board: Board | None = None
    ) -> list[_ChainPosition]:
        """Single-step destinations from *start*, each with its resulting board."""
        board = self._board if board is None else board
        return [
            (end, board.move_piece(start, end))
            for end in board.allowed_moves(start, jump, self._player)
        ]

    def non_jumps_from(self, start: Square) -> list[Board]:
        """Boards after each simple (non-capturing) move of the piece on *start*."""
        return [board for _, board in self.possible(start, jump=False)]

    def jumps_from(self, start: Square) -> list[Board]:
        """Every board reachable by a chain of one or more jumps from *start*.

        Breadth-first over chain positions. Stopping part-way through a chain
        is legal, so intermediate boards are part of the result as well as
        the ones where no further jump exists.
        """
        result: list[Board] = []
        live: deque[_ChainPosition] = deque([(start, self._board)])
        while live:
            square, board = live.popleft()
            for end, next_board in self.possible(square, jump=True, board=board):
                result.append(next_board)
                live.append((end, next_board))
        return result


def legal_boards(board: Board, player: Colour) -> list[Board]:
    """Convenience wrapper around :meth:`MoveGenerator.generate_legal_boards`."""
    return MoveGenerator(board, player).generate_legal_boards()


def _unique(boards: Iterable[Board]) -> list[Board]:
    """Drop duplicate boards, keeping first-seen order."""
    return list(dict.fromkeys(boards))
