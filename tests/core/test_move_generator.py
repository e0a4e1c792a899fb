"""Tests for turn generation: simple moves, mandatory capture and jump chains."""

import logging

import pytest

from checkie.core.board import Board
from checkie.core.enums import Colour, Role
from checkie.core.field import BLACK_PAWN, EMPTY, WHITE_PAWN, WHITE_QUEEN
from checkie.core.move_generator import MoveGenerator, legal_boards
from checkie.core.notation import board_from_rows

# White pawn on 36 can capture the black pawn on 27; the white pawn on 46
# could otherwise make a simple move.
CAPTURE_AVAILABLE = board_from_rows(
    [
        "--------",
        "--------",
        "--------",
        "---b----",
        "----w---",
        "------w-",
        "--------",
        "--------",
    ]
)

# White pawn on 54 can capture 45 and then 27.
DOUBLE_JUMP = board_from_rows(
    [
        "--------",
        "--------",
        "--------",
        "---b----",
        "--------",
        "-----b--",
        "------w-",
        "--------",
    ]
)

# White pawn on 40 is blocked by black pawns on 33 and 26.
WHITE_BLOCKED = board_from_rows(
    [
        "--------",
        "--------",
        "--------",
        "--b-----",
        "-b------",
        "w-------",
        "--------",
        "--------",
    ]
)


class TestInitialPosition:
    @pytest.mark.parametrize("player", [Colour.BLACK, Colour.WHITE])
    def test_seven_opening_moves(self, initial_board: Board, player: Colour) -> None:
        assert len(legal_boards(initial_board, player)) == 7

    def test_simple_moves_keep_piece_count(self, initial_board: Board) -> None:
        for board in legal_boards(initial_board, Colour.BLACK):
            assert board.count(Colour.BLACK) == 12
            assert board.count(Colour.WHITE) == 12

    def test_input_board_not_mutated(self, initial_board: Board) -> None:
        legal_boards(initial_board, Colour.WHITE)
        assert initial_board == Board.initial()

    def test_no_jumps_at_start(self, initial_board: Board) -> None:
        assert not MoveGenerator(initial_board, Colour.BLACK).has_jump()


class TestPossible:
    def test_pairs_destination_with_board(self, initial_board: Board) -> None:
        steps = MoveGenerator(initial_board, Colour.BLACK).possible(17, jump=False)
        assert [end for end, _ in steps] == [24, 26]
        for end, board in steps:
            assert board[end] == BLACK_PAWN
            assert board[17] == EMPTY

    def test_wrong_colour_yields_nothing(self, initial_board: Board) -> None:
        assert MoveGenerator(initial_board, Colour.WHITE).possible(17, jump=False) == []

    def test_non_jumps_from(self, initial_board: Board) -> None:
        boards = MoveGenerator(initial_board, Colour.BLACK).non_jumps_from(23)
        assert len(boards) == 1
        assert boards[0][30] == BLACK_PAWN


class TestMandatoryCapture:
    def test_only_capture_is_legal(self) -> None:
        results = legal_boards(CAPTURE_AVAILABLE, Colour.WHITE)
        assert len(results) == 1
        (board,) = results
        assert board[18] == WHITE_PAWN
        assert board[46] == WHITE_PAWN
        assert board.count(Colour.BLACK) == 0

    def test_no_simple_moves_when_capturing(self) -> None:
        results = legal_boards(CAPTURE_AVAILABLE, Colour.WHITE)
        assert all(board.count() == CAPTURE_AVAILABLE.count() - 1 for board in results)

    def test_has_jump(self) -> None:
        assert MoveGenerator(CAPTURE_AVAILABLE, Colour.WHITE).has_jump()
        assert MoveGenerator(CAPTURE_AVAILABLE, Colour.BLACK).has_jump()

    def test_logs_capture(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="checkie.core.move_generator"):
            legal_boards(CAPTURE_AVAILABLE, Colour.WHITE)
        assert "must capture" in caplog.text


class TestJumpChains:
    def test_partial_and_full_chain(self) -> None:
        one_jump = DOUBLE_JUMP.move_piece(54, 36)
        two_jumps = one_jump.move_piece(36, 18)
        results = legal_boards(DOUBLE_JUMP, Colour.WHITE)
        assert results == [one_jump, two_jumps]
        assert one_jump.count(Colour.BLACK) == 1
        assert two_jumps.count(Colour.BLACK) == 0

    def test_jumps_from_single_square(self) -> None:
        gen = MoveGenerator(DOUBLE_JUMP, Colour.WHITE)
        assert len(gen.jumps_from(54)) == 2
        assert gen.jumps_from(27) == []

    def test_promotion_mid_chain_enables_queen_jumps(self) -> None:
        board = board_from_rows(
            [
                "--------",
                "---b----",
                "----w---",
                "-----b--",
                "--------",
                "--------",
                "--------",
                "--------",
            ]
        )
        results = legal_boards(board, Colour.WHITE)
        assert len(results) == 3
        promoted, *continued = results
        assert promoted[2] == WHITE_QUEEN
        assert promoted.count(Colour.BLACK) == 1
        assert continued[0][38] == WHITE_QUEEN
        assert continued[1][47] == WHITE_QUEEN
        for after in continued:
            assert after.count(Colour.BLACK) == 0
            assert after.count(Colour.WHITE, Role.QUEEN) == 1


class TestNoMoves:
    def test_blocked_player(self) -> None:
        assert legal_boards(WHITE_BLOCKED, Colour.WHITE) == []

    def test_player_without_pieces(self) -> None:
        board = Board.from_fields({27: BLACK_PAWN})
        assert legal_boards(board, Colour.WHITE) == []


class TestTurnSequence:
    def test_alternating_turns(self, initial_board: Board) -> None:
        board = initial_board
        player = Colour.BLACK
        for _ in range(4):
            results = legal_boards(board, player)
            assert results
            assert all(result.count() <= board.count() for result in results)
            board = results[0]
            player = player.invert()
