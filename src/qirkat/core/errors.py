"""Exceptions raised by the Qirkat core."""

from __future__ import annotations


class QirkatError(Exception):
    """Base class for every error the core surfaces to its callers."""


class BadDescriptionError(QirkatError, ValueError):
    """A board description is not 25 of ``b``, ``w`` or ``-``."""


class BadColorError(QirkatError, ValueError):
    """``EMPTY`` was used where a side has to be named."""


class IllegalMoveError(QirkatError, ValueError):
    """A move is not in the current legal-move list."""


class BadMoveSyntaxError(QirkatError, ValueError):
    """A string does not follow the move grammar."""
