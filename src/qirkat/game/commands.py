"""Parsing of the text command language.

One command per line::

    auto white|black        manual white|black
    clear                   dump
    help                    load FILE
    quit                    seed N
    set white|black BOARD   start
    undo                    c2-c3 (a move)

Command words are case-insensitive; blank lines and ``#`` comments are
skipped by the reader.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto


class CommandType(Enum):
    """Kinds of command understood by the text session."""

    AUTO = auto()
    CLEAR = auto()
    DUMP = auto()
    HELP = auto()
    LOAD = auto()
    MANUAL = auto()
    PIECEMOVE = auto()
    QUIT = auto()
    SEED = auto()
    SETBOARD = auto()
    START = auto()
    UNDO = auto()
    ERROR = auto()
    EOF = auto()


_COLOR = r"(white|black)"

_PATTERNS: tuple[tuple[CommandType, re.Pattern[str]], ...] = (
    (CommandType.AUTO, re.compile(rf"auto\s+{_COLOR}", re.IGNORECASE)),
    (CommandType.CLEAR, re.compile(r"clear", re.IGNORECASE)),
    (CommandType.DUMP, re.compile(r"dump", re.IGNORECASE)),
    (CommandType.HELP, re.compile(r"help|\?", re.IGNORECASE)),
    (CommandType.LOAD, re.compile(r"load\s+(\S+)", re.IGNORECASE)),
    (CommandType.MANUAL, re.compile(rf"manual\s+{_COLOR}", re.IGNORECASE)),
    (CommandType.PIECEMOVE, re.compile(r"([a-e][1-5](?:-[a-e][1-5])+)")),
    (CommandType.QUIT, re.compile(r"quit", re.IGNORECASE)),
    (CommandType.SEED, re.compile(r"seed\s+(\d+)", re.IGNORECASE)),
    (
        CommandType.SETBOARD,
        re.compile(rf"set\s+{_COLOR}\s+([-bwBW\s]+)", re.IGNORECASE),
    ),
    (CommandType.START, re.compile(r"start", re.IGNORECASE)),
    (CommandType.UNDO, re.compile(r"undo", re.IGNORECASE)),
)

# Commands whose first operand names a side.
_COLOR_COMMANDS = frozenset({CommandType.AUTO, CommandType.MANUAL, CommandType.SETBOARD})


@dataclass(frozen=True, slots=True)
class Command:
    """A parsed command line: its type and operand strings."""

    command_type: CommandType
    operands: tuple[str, ...] = ()


def is_blank(line: str) -> bool:
    """Whether *line* carries no command (empty or a ``#`` comment)."""
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def parse_command(line: str | None) -> Command:
    """Parse one input line; ``None`` denotes end of input.

    Lines that match no command yield an ``ERROR`` command carrying the
    original text.
    """
    if line is None:
        return Command(CommandType.EOF)
    text = line.strip()
    for command_type, pattern in _PATTERNS:
        match = pattern.fullmatch(text)
        if match is not None:
            operands = tuple(group.strip() for group in match.groups())
            if command_type in _COLOR_COMMANDS:
                operands = (operands[0].lower(), *operands[1:])
            return Command(command_type, operands)
    return Command(CommandType.ERROR, (text,))
