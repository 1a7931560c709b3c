"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from shogiban.ui.styles.theme import APP_STYLE

    app.setApplicationName("Shogiban")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def _document_argument(arguments: list[str]) -> Path | None:
    """First non-option argument after the program name, if any."""
    for arg in arguments[1:]:
        if not arg.startswith("-"):
            return Path(arg)
    return None


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from shogiban.ui.main_window import DocumentWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = DocumentWindow()
    document = _document_argument(app.arguments())
    if document is not None:
        _LOGGER.info("Opening %s", document)
        window.open_path(document)
    window.show()

    return app.exec()
