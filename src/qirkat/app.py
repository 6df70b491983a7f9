"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from qirkat.core.enums import PieceColor
from qirkat.engine.search import MAX_DEPTH
from qirkat.settings import AppSettings

_LOGGER = logging.getLogger(__name__)
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Command-line interface of the ``qirkat`` program."""
    parser = argparse.ArgumentParser(
        prog="qirkat",
        description="Play Qirkat against the computer or another person.",
    )
    parser.add_argument(
        "--display",
        action="store_true",
        help="use the graphical board instead of the text interpreter",
    )
    parser.add_argument(
        "--depth",
        type=_positive_int,
        default=MAX_DEPTH,
        metavar="N",
        help=f"search depth of the AI player (default: {MAX_DEPTH})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        metavar="N",
        help="seed for the random number generator",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default="WARNING",
        help="logging threshold (default: WARNING)",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="command files read before the standard input",
    )
    return parser


def settings_from_args(argv: Sequence[str] | None = None) -> AppSettings:
    """Parse *argv* (default: ``sys.argv[1:]``) into :class:`AppSettings`."""
    args = build_parser().parse_args(argv)
    return AppSettings(
        display=args.display,
        command_files=list(args.files),
        seed=args.seed,
        engine_depth=args.depth,
        log_level=args.log_level,
    )


def run_text(settings: AppSettings) -> int:
    """Run the text interpreter on standard input, after any command files."""
    from qirkat.game.controller import GameController
    from qirkat.game.text_session import TextSession

    controller = GameController()
    controller.set_manual(PieceColor.WHITE, settings.white_manual)
    controller.set_manual(PieceColor.BLACK, settings.black_manual)
    if settings.seed is not None:
        controller.seed(settings.seed)

    session = TextSession(controller, limits=settings.search_limits())
    for path in reversed(settings.command_files):
        session.push_file(path)
    session.run()
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Launch the Qirkat application."""
    settings = settings_from_args(argv)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _LOGGER.debug("Starting with %s", settings)

    if settings.display:
        from qirkat.ui.bootstrap import run_application

        sys.exit(run_application(settings))
    sys.exit(run_text(settings))


if __name__ == "__main__":
    main()
