"""Qirkat engine package: static evaluation and alpha-beta search.

The Qt worker lives in :mod:`qirkat.engine.qt_bridge` and is imported
from there, so the text interface runs without a Qt installation loaded.
"""

from qirkat.engine.evaluation import square_value, static_score
from qirkat.engine.minimax import AlphaBetaEngine
from qirkat.engine.search import (
    INFINITY,
    MAX_DEPTH,
    WINNING_VALUE,
    IEngine,
    SearchLimits,
    SearchResult,
)

__all__ = [
    "INFINITY",
    "MAX_DEPTH",
    "WINNING_VALUE",
    "AlphaBetaEngine",
    "IEngine",
    "SearchLimits",
    "SearchResult",
    "square_value",
    "static_score",
]
