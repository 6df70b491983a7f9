"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from qirkat.core.enums import PieceColor
from qirkat.game.interfaces import IPlayer

if TYPE_CHECKING:
    from qirkat.core.board import ReadOnlyBoard


class HumanPlayer(IPlayer):
    """A manual participant whose moves come from typed commands or the GUI.

    ``request_move`` is a no-op because manual players choose interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: PieceColor, name: str = "") -> None:
        self._color = color
        self._name = name or color.display_name

    @property
    def color(self) -> PieceColor:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: ReadOnlyBoard) -> None:
        pass  # Manual moves arrive via controller.submit_move()

    def cancel(self) -> None:
        pass


class AIPlayer(IPlayer):
    """An AI participant that delegates computation to a callback.

    The text session runs the search synchronously from its command loop;
    the GUI dispatches it to an ``EngineWorker`` on a ``QThread``.

    Args:
        color: Side the AI plays.
        name: Display name.
        on_request_move: ``(ReadOnlyBoard) -> None`` — called when the
            game controller asks the AI to start thinking.
        on_cancel: ``() -> None`` — called to abort a pending search.
    """

    __slots__ = ("_color", "_name", "_on_request_move", "_on_cancel")

    def __init__(
        self,
        color: PieceColor,
        name: str = "",
        on_request_move: Callable[[ReadOnlyBoard], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._color = color
        self._name = name or f"AI ({color.display_name})"
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def color(self) -> PieceColor:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, board: ReadOnlyBoard) -> None:
        if self._on_request_move is not None:
            self._on_request_move(board)

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()
