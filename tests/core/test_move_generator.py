"""Move generator tests, including small perft counts from the opening."""

import random

import pytest

from qirkat.core.board import Board
from qirkat.core.enums import PieceColor
from qirkat.core.move_generator import MoveGenerator, is_possible_step
from qirkat.core.move import parse_move
from qirkat.core.types import B2, C3, E3


def perft(board: Board, depth: int) -> int:
    """Count leaf nodes at *depth* using make/undo."""
    if depth == 0:
        return 1
    nodes = 0
    for move in board.legal_moves:
        board.make_move(move)
        nodes += perft(board, depth - 1)
        board.undo()
    return nodes


def random_playout(board: Board, rng: random.Random, limit: int = 40) -> list:
    """Play random legal moves until the game ends or *limit* is reached."""
    moves = []
    while not board.game_over and len(moves) < limit:
        move = rng.choice(board.legal_moves)
        board.make_move(move)
        moves.append(move)
    return moves


def _board(description: str, mover: PieceColor = PieceColor.WHITE) -> Board:
    board = Board()
    board.set_pieces(description, mover)
    return board


def _names(moves: list) -> list[str]:
    return [str(m) for m in moves]


class TestPerftOpening:
    def test_depth_1(self) -> None:
        assert perft(Board(), 1) == 4

    def test_depth_2(self) -> None:
        # Every white opening move offers black a capture.
        assert perft(Board(), 2) == 5

    def test_perft_leaves_board_unchanged(self) -> None:
        board = Board()
        perft(board, 3)
        assert board == Board()


class TestRandomPlayout:
    @pytest.mark.parametrize("seed", [0, 7, 2024])
    def test_undo_and_replay(self, seed: int) -> None:
        board = Board()
        moves = random_playout(board, random.Random(seed))
        assert moves
        after = board.copy()

        for _ in moves:
            board.undo()
        assert board == Board()

        for move in moves:
            assert board.is_legal_move(move)
            board.make_move(move)
        assert board == after


class TestSteps:
    def test_white_steps_forward_and_sideways(self) -> None:
        board = _board("----- ----- --w-- ----- -----")
        assert _names(board.legal_moves) == ["c3-b3", "c3-d3", "c3-b4", "c3-c4", "c3-d4"]

    def test_black_steps_forward_and_sideways(self) -> None:
        board = _board("----- ----- --b-- ----- -----", PieceColor.BLACK)
        assert _names(board.legal_moves) == ["c3-b2", "c3-c2", "c3-d2", "c3-b3", "c3-d3"]

    def test_odd_square_has_no_diagonal_steps(self) -> None:
        board = _board("----- ----- ---w- ----- -----")
        assert _names(board.legal_moves) == ["d3-c3", "d3-e3", "d3-d4"]

    def test_black_cannot_step_from_first_row(self) -> None:
        board = _board("--b-- ----- ----- ----- -----", PieceColor.BLACK)
        assert board.legal_moves == []
        assert board.game_over

    def test_white_cannot_step_from_last_row(self) -> None:
        board = _board("----- ----- ----- ----- --w--")
        assert board.game_over

    def test_is_possible_step(self) -> None:
        assert is_possible_step(B2, 6, PieceColor.WHITE)
        assert not is_possible_step(B2, -6, PieceColor.WHITE)
        assert is_possible_step(C3, -6, PieceColor.BLACK)
        assert not is_possible_step(C3, 5, PieceColor.BLACK)
        assert not is_possible_step(E3, 1, PieceColor.WHITE)


class TestJumps:
    def test_jumps_replace_steps(self) -> None:
        board = _board("----- --w-- --b-- ----- w----")
        gen = MoveGenerator(board)
        assert gen.jump_possible()
        assert _names(gen.generate_legal_moves()) == ["c2-c4"]
        assert _names(gen.generate_steps()) == ["c2-b2", "c2-d2"]

    def test_backward_capture_allowed(self) -> None:
        board = _board("----- ----- --b-- --w-- -----")
        assert _names(board.legal_moves) == ["c4-c2"]

    def test_chain_is_extended_to_its_end(self) -> None:
        board = _board("w---- -b--- ----- ---b- -----")
        assert _names(board.legal_moves) == ["a1-c3-e5"]

    def test_branching_chains(self) -> None:
        board = _board("--wb---b-b---b-----------")
        assert sorted(_names(board.legal_moves)) == ["c1-c3-e3-e1-c1", "c1-e1-e3-c3-c1"]

    def test_no_jump_over_own_piece(self) -> None:
        board = _board("----- ----- --w-- --w-- -----")
        assert not MoveGenerator(board).jump_possible()

    def test_no_jump_over_edge(self) -> None:
        board = _board("----- ----- ---bw ----- -----", PieceColor.BLACK)
        assert not board.jump_possible()

    def test_generation_does_not_touch_board(self) -> None:
        board = _board("--wb---b-b---b-----------")
        before = board.cells()
        MoveGenerator(board).generate_jumps()
        assert board.cells() == before

    @pytest.mark.parametrize("sq", ["a1", "b1", "d1", "e5"])
    def test_jump_possible_at_other_squares(self, sq: str) -> None:
        board = _board("--wb---b-b---b-----------")
        assert not board.jump_possible_at(sq)
