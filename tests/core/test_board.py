"""Tests for Board."""

import pytest

from qirkat.core.board import Board, BoardChange, ReadOnlyBoard
from qirkat.core.enums import PieceColor
from qirkat.core.errors import BadColorError, BadDescriptionError, IllegalMoveError
from qirkat.core.move import Move, parse_move
from qirkat.core.types import A2, B2, C3

INIT_BOARD = "  b b b b b\n  b b b b b\n  b b - w w\n  w w w w w\n  w w w w w"

GAME1 = ["c2-c3", "c4-c2", "c1-c3", "a3-c1", "c3-a3", "c5-c4", "a3-c5-c3"]

GAME1_BOARD = "  b b - b b\n  b - - b b\n  - - w w w\n  w - - w w\n  w w b w w"


def _play(board: Board, moves: list[str]) -> None:
    for text in moves:
        board.make_move(parse_move(text))


def _description(board: Board) -> str:
    return "".join(color.short_name for color in board.cells())


class TestBoardInitial:
    def test_render(self) -> None:
        assert str(Board()) == INIT_BOARD

    def test_render_with_legend(self) -> None:
        assert Board().render(legend=True) == (
            "5  b b b b b\n4  b b b b b\n3  b b - w w\n2  w w w w w\n1  w w w w w\n  a b c d e"
        )

    def test_white_moves_first(self) -> None:
        board = Board()
        assert board.side_to_move == PieceColor.WHITE
        assert not board.game_over

    def test_get_by_name(self) -> None:
        assert Board().get("b3") == PieceColor.BLACK
        assert Board().get("c3") == PieceColor.EMPTY
        assert Board()[B2] == PieceColor.WHITE

    @pytest.mark.parametrize("sq", [-1, -25, 25, 99])
    def test_out_of_range_square_raises(self, sq: int) -> None:
        board = Board()
        with pytest.raises(IndexError):
            board[sq]
        with pytest.raises(IndexError):
            board.get(sq)
        with pytest.raises(IndexError):
            ReadOnlyBoard(board)[sq]

    def test_no_jump_at_start(self) -> None:
        assert not Board().jump_possible()

    def test_four_opening_moves(self) -> None:
        moves = Board().legal_moves
        assert [str(m) for m in moves] == ["b2-c3", "c2-c3", "d2-c3", "d3-c3"]

    def test_legal_moves_is_a_copy(self) -> None:
        board = Board()
        board.legal_moves.clear()
        assert len(board.legal_moves) == 4


class TestMakeMove:
    def test_game1(self) -> None:
        board = Board()
        _play(board, GAME1)
        assert str(board) == GAME1_BOARD
        assert board.side_to_move == PieceColor.BLACK

    def test_multi_jump_clears_every_captured_piece(self) -> None:
        board = Board()
        board.set_pieces("--wb---b-b---b-----------", PieceColor.WHITE)
        board.make_move(parse_move("c1-c3-e3-e1-c1"))
        assert _description(board) == "--w----------------------"

    def test_side_with_no_pieces_has_lost(self) -> None:
        board = Board()
        board.set_pieces("--wb---b-b---b-----------", PieceColor.WHITE)
        board.make_move(parse_move("c1-c3-e3-e1-c1"))
        assert board.side_to_move == PieceColor.BLACK
        assert board.game_over

    def test_steps_and_sideways_moves(self) -> None:
        board = Board()
        board.set_pieces("----- -w--- ----- ----- ----b", PieceColor.WHITE)
        _play(board, ["b2-a2", "e5-e4", "a2-a3", "e4-e3", "a3-b3", "e3-e2"])
        expected = Board()
        expected.set_pieces("----- ----b -w--- ----- -----", PieceColor.WHITE)
        assert str(board) == str(expected)

    def test_backward_step_rejected(self) -> None:
        board = Board()
        board.set_pieces("----- ----- ----- ----b --w--", PieceColor.WHITE)
        with pytest.raises(IllegalMoveError):
            board.make_move(parse_move("c5-c4"))

    def test_no_step_from_last_row(self) -> None:
        board = Board()
        board.set_pieces("w---- ----b ----- ----b --w--", PieceColor.WHITE)
        with pytest.raises(IllegalMoveError):
            board.make_move(parse_move("c5-b5"))

    def test_capture_is_mandatory(self) -> None:
        board = Board()
        _play(board, ["c2-c3"])
        with pytest.raises(IllegalMoveError):
            board.make_move(parse_move("b3-c3"))
        assert [str(m) for m in board.legal_moves] == ["c4-c2"]

    def test_illegal_move_leaves_board_untouched(self) -> None:
        board = Board()
        before = board.copy()
        with pytest.raises(IllegalMoveError):
            board.make_move(parse_move("a1-a2"))
        assert board == before

    def test_illegal_move_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Board().make_move(parse_move("c2-c4"))


class TestIllegalHorizontals:
    def test_sideways_step_blocks_its_return(self) -> None:
        board = Board()
        board.set_pieces("----- -w--- ----- ----- ----b", PieceColor.WHITE)
        _play(board, ["b2-a2"])
        assert board.illegal_horizontals(PieceColor.WHITE) == [Move(A2, B2)]
        assert board.illegal_horizontals(PieceColor.BLACK) == []

        _play(board, ["e5-e4"])
        assert [str(m) for m in board.legal_moves] == ["a2-a3"]

    def test_entry_dropped_once_piece_leaves(self) -> None:
        board = Board()
        board.set_pieces("----- -w--- ----- ----- ----b", PieceColor.WHITE)
        _play(board, ["b2-a2", "e5-e4", "a2-a3"])
        assert board.illegal_horizontals(PieceColor.WHITE) == []

    def test_new_entry_after_each_sideways_step(self) -> None:
        board = Board()
        board.set_pieces("----- -w--- ----- ----- ----b", PieceColor.WHITE)
        _play(board, ["b2-a2", "e5-e4", "a2-a3", "e4-e3", "a3-b3"])
        assert board.illegal_horizontals(PieceColor.WHITE) == [parse_move("b3-a3")]

    def test_empty_color_rejected(self) -> None:
        with pytest.raises(BadColorError):
            Board().illegal_horizontals(PieceColor.EMPTY)

    def test_set_pieces_resets_lists(self) -> None:
        board = Board()
        board.set_pieces("----- -w--- ----- ----- ----b", PieceColor.WHITE)
        _play(board, ["b2-a2"])
        board.set_pieces("----- -w--- ----- ----- ----b", PieceColor.WHITE)
        assert board.illegal_horizontals(PieceColor.WHITE) == []


class TestSetPieces:
    def test_matches_played_position(self) -> None:
        played = Board()
        _play(played, GAME1)
        board = Board()
        board.set_pieces("w wbw ww - - w w  - - w w wb - - b bb b - b b", PieceColor.BLACK)
        assert str(board) == str(played)

    def test_upper_case_accepted(self) -> None:
        board = Board()
        board.set_pieces("WW--- ----- ----- ----- ---BB", PieceColor.BLACK)
        assert _description(board) == "ww" + "-" * 21 + "bb"

    def test_history_cleared(self) -> None:
        board = Board()
        _play(board, ["c2-c3"])
        board.set_pieces("----- -w--- ----- ----- ----b", PieceColor.WHITE)
        assert board.undo_depth == 0

    @pytest.mark.parametrize(
        "description",
        ["", "w" * 24, "w" * 26, "x" * 25, "wwwww wwwww bb-ww bbbbb bbbbq"],
    )
    def test_bad_description(self, description: str) -> None:
        with pytest.raises(BadDescriptionError):
            Board().set_pieces(description, PieceColor.WHITE)

    def test_bad_color(self) -> None:
        with pytest.raises(BadColorError):
            Board().set_pieces("-" * 25, PieceColor.EMPTY)

    def test_no_pieces_means_game_over(self) -> None:
        board = Board()
        board.set_pieces("-" * 25, PieceColor.WHITE)
        assert board.game_over
        assert board.legal_moves == []


class TestUndo:
    def test_undo_restores_start(self) -> None:
        b0 = Board()
        b1 = b0.copy()
        _play(b0, GAME1)
        b2 = b0.copy()
        for _ in GAME1:
            b0.undo()
        assert b0 == b1
        assert b0 != b2

        _play(b0, GAME1)
        assert b0 == b2
        assert b1 != b2
        for _ in GAME1:
            b2.undo()
        assert b2 == b1

    def test_undo_restores_illegal_horizontals(self) -> None:
        board = Board()
        board.set_pieces("----- -w--- ----- ----- ----b", PieceColor.WHITE)
        _play(board, ["b2-a2", "e5-e4", "a2-a3"])
        board.undo()
        assert board.illegal_horizontals(PieceColor.WHITE) == [Move(A2, B2)]
        assert board.side_to_move == PieceColor.WHITE

    def test_undo_on_fresh_board_is_noop(self) -> None:
        board = Board()
        board.undo()
        assert board == Board()

    def test_undo_depth(self) -> None:
        board = Board()
        _play(board, GAME1[:3])
        assert board.undo_depth == 3


class TestClearAndCopy:
    def test_clear(self) -> None:
        b0 = Board()
        _play(b0, GAME1)
        assert b0 != Board()
        b0.clear()
        assert b0 == Board()

    def test_copy_equal(self) -> None:
        board = Board()
        _play(board, GAME1)
        assert board.copy() == board

    def test_copy_is_independent(self) -> None:
        board = Board()
        copy = board.copy()
        _play(copy, ["c2-c3"])
        assert board == Board()
        assert board[C3] == PieceColor.EMPTY

    def test_copy_from(self) -> None:
        source = Board()
        _play(source, GAME1[:2])
        target = Board()
        target.copy_from(source)
        assert target == source
        target.undo()
        assert target != source

    def test_copy_from_read_only(self) -> None:
        source = Board()
        _play(source, ["c2-c3"])
        target = Board()
        target.copy_from(ReadOnlyBoard(source))
        assert target == source


class TestJumps:
    def _chain_board(self) -> Board:
        board = Board()
        board.set_pieces("--wb---b-b---b-----------", PieceColor.WHITE)
        return board

    def test_jump_possible_at(self) -> None:
        board = self._chain_board()
        assert board.jump_possible()
        assert board.jump_possible_at("c1")
        assert not board.jump_possible_at("c2")
        assert not board.jump_possible_at("a1")

    def test_only_maximal_chains_are_legal(self) -> None:
        moves = {str(m) for m in self._chain_board().legal_moves}
        assert moves == {"c1-e1-e3-c3-c1", "c1-c3-e3-e1-c1"}

    def test_check_jump(self) -> None:
        board = self._chain_board()
        assert board.check_jump(None)
        assert board.check_jump(parse_move("c1-c3-e3-e1-c1"))
        assert not board.check_jump(parse_move("c1-c3"))

    def test_check_jump_partial(self) -> None:
        board = self._chain_board()
        assert board.check_jump(parse_move("c1-c3"), allow_partial=True)
        assert board.check_jump(parse_move("c1-c3-e3"), allow_partial=True)
        assert not board.check_jump(parse_move("c1-a3"), allow_partial=True)

    def test_check_jump_rejects_steps(self) -> None:
        assert not Board().check_jump(parse_move("c2-c3"), allow_partial=True)


class TestObservers:
    def test_notifications(self) -> None:
        seen: list[BoardChange] = []
        board = Board()
        board.subscribe(lambda _b, change: seen.append(change))

        _play(board, ["c2-c3"])
        board.undo()
        board.undo()
        board.set_pieces("-" * 25, PieceColor.WHITE)
        board.clear()
        board.copy_from(Board())

        assert seen == [
            BoardChange.MOVE_MADE,
            BoardChange.UNDONE,
            BoardChange.PIECES_SET,
            BoardChange.CLEARED,
            BoardChange.COPIED,
        ]

    def test_constructor_observers(self) -> None:
        seen: list[BoardChange] = []
        board = Board(observers=[lambda _b, change: seen.append(change)])
        _play(board, ["c2-c3"])
        assert seen[-1] == BoardChange.MOVE_MADE

    def test_unsubscribe(self) -> None:
        seen: list[BoardChange] = []

        def observer(_b: object, change: BoardChange) -> None:
            seen.append(change)

        board = Board()
        board.subscribe(observer)
        board.unsubscribe(observer)
        _play(board, ["c2-c3"])
        assert seen == []

    def test_copy_has_no_observers(self) -> None:
        seen: list[BoardChange] = []
        board = Board()
        board.subscribe(lambda _b, change: seen.append(change))
        _play(board.copy(), ["c2-c3"])
        assert seen == []


class TestReadOnlyBoard:
    def test_reflects_live_board(self) -> None:
        board = Board()
        view = ReadOnlyBoard(board)
        _play(board, ["c2-c3"])
        assert view[C3] == PieceColor.WHITE
        assert view.side_to_move == PieceColor.BLACK
        assert str(view) == str(board)
        assert view.legal_moves == board.legal_moves

    def test_forwards_notifications_as_itself(self) -> None:
        board = Board()
        view = ReadOnlyBoard(board)
        seen: list[tuple[object, BoardChange]] = []
        view.subscribe(lambda b, change: seen.append((b, change)))
        _play(board, ["c2-c3"])
        assert seen == [(view, BoardChange.MOVE_MADE)]

    def test_has_no_mutators(self) -> None:
        view = ReadOnlyBoard(Board())
        assert not hasattr(view, "make_move")
        assert not hasattr(view, "undo")
        assert not hasattr(view, "set_pieces")

    def test_copy_is_mutable_and_detached(self) -> None:
        board = Board()
        view = ReadOnlyBoard(board)
        copy = view.copy()
        _play(copy, ["c2-c3"])
        assert board == Board()
