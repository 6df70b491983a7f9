"""Tests for TextSession — the command interpreter."""

from __future__ import annotations

import io
import random
from pathlib import Path

from qirkat.core.enums import PieceColor
from qirkat.engine.search import SearchLimits
from qirkat.game.controller import GameController
from qirkat.game.interfaces import GamePhase
from qirkat.game.text_session import TextSession

OPENING_DUMP = (
    "===\n"
    "  b b b b b\n"
    "  b b b b b\n"
    "  b b - w w\n"
    "  w w w w w\n"
    "  w w w w w\n"
    "===\n"
)


def _run(
    script: str,
    controller: GameController | None = None,
    prompting: bool = False,
) -> tuple[str, str, TextSession]:
    out = io.StringIO()
    err = io.StringIO()
    session = TextSession(
        controller,
        limits=SearchLimits(max_depth=1),
        source=io.StringIO(script),
        out=out,
        err=err,
        prompting=prompting,
    )
    session.run()
    return out.getvalue(), err.getvalue(), session


class TestCommands:
    def test_dump(self) -> None:
        out, err, _ = _run("dump\n")
        assert out == OPENING_DUMP
        assert err == ""

    def test_blank_lines_and_comments_are_skipped(self) -> None:
        out, err, _ = _run("\n# nothing here\n   \ndump\n")
        assert out == OPENING_DUMP
        assert err == ""

    def test_unknown_command(self) -> None:
        _, err, _ = _run("fly away\n")
        assert err == "Command not understood\n"

    def test_illegal_move(self) -> None:
        _, err, _ = _run("manual black\nstart\nc2-c4\n")
        assert err == "Move not allowed\n"

    def test_bad_board_description_is_reported(self) -> None:
        _, err, session = _run("set white wwww\ndump\n")
        assert err != ""
        assert session.controller.phase == GamePhase.SETUP

    def test_quit_stops_reading(self) -> None:
        out, _, _ = _run("quit\ndump\n")
        assert out == ""

    def test_auto_and_manual(self) -> None:
        _, _, session = _run("auto white\nmanual black\n")
        assert not session.controller.is_manual(PieceColor.WHITE)
        assert session.controller.is_manual(PieceColor.BLACK)

    def test_seed(self) -> None:
        _, _, session = _run("seed 42\n")
        expected = random.Random(42)
        assert session.controller.next_random(1000) == expected.randrange(1000)

    def test_help(self) -> None:
        out, err, _ = _run("help\n")
        assert out.startswith("Commands")
        assert err == ""


class TestPlay:
    def test_manual_win(self) -> None:
        out, err, session = _run(
            "manual black\n"
            "set white --wb---b-b---b-----------\n"
            "start\n"
            "c1-c3-e3-e1-c1\n"
        )
        assert out == "White wins.\n"
        assert err == ""
        assert session.controller.phase == GamePhase.GAME_OVER

    def test_ai_replies(self) -> None:
        out, err, session = _run("start\nc2-c3\n")
        assert out == "Black moves c4-c2.\n"
        assert err == ""
        assert session.controller.phase == GamePhase.AWAITING_MOVE
        assert session.controller.side_to_move == PieceColor.WHITE

    def test_ai_win_is_announced(self) -> None:
        out, _, _ = _run("set black ----- ----- --w-- --b-- -----\nstart\n")
        assert out == "Black moves c4-c2.\nBlack wins.\n"

    def test_undo_after_ai_reply(self) -> None:
        out, _, _ = _run("start\nc2-c3\nundo\ndump\n")
        assert out == "Black moves c4-c2.\n" + OPENING_DUMP

    def test_moves_during_setup_do_not_start_play(self) -> None:
        out, _, session = _run("c2-c3\nc4-c2\n")
        assert out == ""
        assert session.controller.phase == GamePhase.SETUP
        assert session.controller.board.undo_depth == 2


class TestSources:
    def test_load_file(self, tmp_path: Path) -> None:
        script = tmp_path / "setup.txt"
        script.write_text("manual black\nstart\nc2-c3\n", encoding="utf-8")
        _, err, session = _run(f"load {script}\nc4-c2\n")
        assert err == ""
        assert session.controller.board.undo_depth == 2

    def test_missing_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.txt"
        _, err, _ = _run(f"load {missing}\n")
        assert err == f"Cannot open file {missing}\n"

    def test_push_file_before_run(self, tmp_path: Path) -> None:
        script = tmp_path / "cmds.txt"
        script.write_text("dump\n", encoding="utf-8")
        out = io.StringIO()
        session = TextSession(
            source=io.StringIO("quit\n"),
            out=out,
            err=io.StringIO(),
            prompting=False,
        )
        assert session.push_file(str(script))
        session.run()
        assert out.getvalue() == OPENING_DUMP

    def test_prompts(self) -> None:
        out, _, _ = _run("clear\nmanual black\nstart\n", prompting=True)
        assert out == "qirkat: qirkat: qirkat: white: "

    def test_controller_is_reused(self) -> None:
        controller = GameController()
        _, _, session = _run("manual black\n", controller=controller)
        assert session.controller is controller
        assert controller.is_manual(PieceColor.BLACK)
