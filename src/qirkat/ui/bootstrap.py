"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from qirkat.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from qirkat.ui.styles.theme import APP_STYLE

    app.setApplicationName("Qirkat")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    settings: AppSettings | None = None,
    argv: list[str] | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from qirkat.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings if settings is not None else AppSettings())
    window.show()
    _LOGGER.info("Qirkat window shown")

    for path in settings.command_files if settings is not None else ():
        _LOGGER.warning("Command file %s ignored in display mode", path)

    return app.exec()
