"""TextSession — the interactive command interpreter for terminal play."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from typing import TYPE_CHECKING, TextIO

from qirkat.core.enums import GameResult, PieceColor
from qirkat.core.errors import QirkatError
from qirkat.core.move import parse_move
from qirkat.engine.minimax import AlphaBetaEngine
from qirkat.engine.search import IEngine, SearchLimits
from qirkat.game.commands import Command, CommandType, is_blank, parse_command
from qirkat.game.controller import GameController, outcome_message
from qirkat.game.interfaces import GamePhase, IPlayer
from qirkat.game.player import AIPlayer, HumanPlayer
from qirkat.runtime_assets import read_asset_text

if TYPE_CHECKING:
    from qirkat.core.board import ReadOnlyBoard

_LOGGER = logging.getLogger(__name__)


class _LineSource:
    """One input stream on the source stack."""

    __slots__ = ("stream", "prompting", "owned")

    def __init__(self, stream: TextIO, *, prompting: bool, owned: bool) -> None:
        self.stream = stream
        self.prompting = prompting
        self.owned = owned

    def close(self) -> None:
        if self.owned:
            self.stream.close()


class TextSession:
    """Reads commands line by line and drives a :class:`GameController`.

    Commands come from a stack of sources: the base stream, plus any file
    pushed by ``load``.  End of a loaded file returns to the source below;
    end of the base stream (or ``quit``) ends the session.  AI moves are
    computed synchronously between commands.
    """

    __slots__ = (
        "_controller",
        "_engine",
        "_limits",
        "_sources",
        "_out",
        "_err",
        "_pending_ai",
        "_running",
        "_handlers",
    )

    def __init__(
        self,
        controller: GameController | None = None,
        *,
        engine: IEngine | None = None,
        limits: SearchLimits | None = None,
        source: TextIO | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
        prompting: bool | None = None,
    ) -> None:
        self._controller = controller if controller is not None else GameController()
        self._engine = engine if engine is not None else AlphaBetaEngine()
        self._limits = limits if limits is not None else SearchLimits()
        base = source if source is not None else sys.stdin
        if prompting is None:
            prompting = base.isatty()
        self._sources = [_LineSource(base, prompting=prompting, owned=False)]
        self._out = out if out is not None else sys.stdout
        self._err = err if err is not None else sys.stderr
        self._pending_ai = False
        self._running = False
        self._handlers: dict[CommandType, Callable[[tuple[str, ...]], None]] = {
            CommandType.AUTO: self._do_auto,
            CommandType.CLEAR: self._do_clear,
            CommandType.DUMP: self._do_dump,
            CommandType.HELP: self._do_help,
            CommandType.LOAD: self._do_load,
            CommandType.MANUAL: self._do_manual,
            CommandType.PIECEMOVE: self._do_move,
            CommandType.QUIT: self._do_quit,
            CommandType.SEED: self._do_seed,
            CommandType.SETBOARD: self._do_set,
            CommandType.START: self._do_start,
            CommandType.UNDO: self._do_undo,
            CommandType.ERROR: self._do_error,
            CommandType.EOF: self._do_eof,
        }
        self._controller.events.on_game_over.append(self._on_game_over)

    @property
    def controller(self) -> GameController:
        return self._controller

    # ── Main loop ────────────────────────────────────────────────────────

    def run(self) -> None:
        """Process commands until ``quit`` or end of input."""
        self._controller.clear()
        self._running = True
        try:
            while self._running:
                if self._pending_ai:
                    self._play_ai_move()
                    continue
                self.execute(self._read_command())
        finally:
            while len(self._sources) > 1:
                self._sources.pop().close()

    def execute(self, command: Command) -> None:
        """Run one parsed command, reporting core errors to the error stream."""
        _LOGGER.debug("Command %s %s", command.command_type.name, command.operands)
        try:
            self._handlers[command.command_type](command.operands)
        except QirkatError as exc:
            self._error(str(exc))

    def push_file(self, path: str) -> bool:
        """Read commands from *path* until its end, then resume the current source."""
        try:
            stream = open(path, encoding="utf-8")
        except OSError:
            self._error(f"Cannot open file {path}")
            return False
        self._sources.append(_LineSource(stream, prompting=False, owned=True))
        return True

    # ── Input ────────────────────────────────────────────────────────────

    def _prompt(self) -> str:
        if self._controller.phase == GamePhase.AWAITING_MOVE:
            return f"{self._controller.side_to_move}: "
        return "qirkat: "

    def _read_command(self) -> Command:
        source = self._sources[-1]
        while True:
            if source.prompting:
                self._out.write(self._prompt())
                self._out.flush()
            line = source.stream.readline()
            if not line:
                return parse_command(None)
            if not is_blank(line):
                return parse_command(line)

    # ── Output ───────────────────────────────────────────────────────────

    def _message(self, text: str) -> None:
        print(text, file=self._out)

    def _error(self, text: str) -> None:
        print(text, file=self._err)

    # ── Players ──────────────────────────────────────────────────────────

    def _make_player(self, color: PieceColor) -> IPlayer:
        if self._controller.is_manual(color):
            return HumanPlayer(color)
        return AIPlayer(
            color,
            on_request_move=self._schedule_ai_move,
            on_cancel=self._cancel_ai_move,
        )

    def _schedule_ai_move(self, _board: ReadOnlyBoard) -> None:
        self._pending_ai = True

    def _cancel_ai_move(self) -> None:
        self._pending_ai = False

    def _play_ai_move(self) -> None:
        self._pending_ai = False
        if self._controller.phase != GamePhase.THINKING:
            return
        color = self._controller.side_to_move
        result = self._engine.search(self._controller.board, self._limits)
        if result.best_move is None:
            _LOGGER.warning("Engine found no move for %s", color)
            return
        self._message(f"{color.display_name} moves {result.best_move}.")
        self._controller.submit_move(result.best_move)

    def _on_game_over(self, result: GameResult) -> None:
        self._message(outcome_message(result))

    # ── Command processors ───────────────────────────────────────────────

    def _do_auto(self, operands: tuple[str, ...]) -> None:
        self._controller.set_manual(PieceColor.parse(operands[0]), False)

    def _do_manual(self, operands: tuple[str, ...]) -> None:
        self._controller.set_manual(PieceColor.parse(operands[0]), True)

    def _do_clear(self, _operands: tuple[str, ...]) -> None:
        self._controller.clear()

    def _do_dump(self, _operands: tuple[str, ...]) -> None:
        self._message(f"===\n{self._controller.board.render()}\n===")

    def _do_help(self, _operands: tuple[str, ...]) -> None:
        text = read_asset_text("help.txt")
        if text is None:
            self._error("No help available.")
            return
        self._out.write(text)

    def _do_load(self, operands: tuple[str, ...]) -> None:
        self.push_file(operands[0])

    def _do_move(self, operands: tuple[str, ...]) -> None:
        move = parse_move(operands[0])
        if not self._controller.submit_move(move):
            self._error("Move not allowed")

    def _do_quit(self, _operands: tuple[str, ...]) -> None:
        self._running = False

    def _do_seed(self, operands: tuple[str, ...]) -> None:
        self._controller.seed(int(operands[0]))

    def _do_set(self, operands: tuple[str, ...]) -> None:
        self._controller.set_pieces(PieceColor.parse(operands[0]), operands[1])

    def _do_start(self, _operands: tuple[str, ...]) -> None:
        self._controller.start(
            self._make_player(PieceColor.WHITE),
            self._make_player(PieceColor.BLACK),
        )

    def _do_undo(self, _operands: tuple[str, ...]) -> None:
        self._controller.undo_move()

    def _do_error(self, _operands: tuple[str, ...]) -> None:
        self._error("Command not understood")

    def _do_eof(self, _operands: tuple[str, ...]) -> None:
        if len(self._sources) > 1:
            self._sources.pop().close()
            return
        self._running = False
