"""Game management layer: controller, players and the command interpreter.

Quick start::

    from qirkat.core import PieceColor
    from qirkat.game import GameController, HumanPlayer

    ctrl = GameController()
    ctrl.start(
        white=HumanPlayer(PieceColor.WHITE),
        black=HumanPlayer(PieceColor.BLACK),
    )
"""

from qirkat.game.commands import Command, CommandType, parse_command
from qirkat.game.controller import GameController, GameEvents, outcome_message
from qirkat.game.interfaces import GamePhase, IPlayer
from qirkat.game.player import AIPlayer, HumanPlayer
from qirkat.game.text_session import TextSession

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "HumanPlayer",
    "TextSession",
    # Commands
    "Command",
    "CommandType",
    "outcome_message",
    "parse_command",
]
