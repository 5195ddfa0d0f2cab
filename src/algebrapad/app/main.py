"""
Run with: python -m algebrapad
"""
from __future__ import annotations

import logging
import sys

from PySide6.QtCore import QSettings

from algebrapad.app.application import create_app
from algebrapad.app.ui.main_window import MainWindow
from algebrapad.logging_config import setup_logging
from algebrapad.model.document import Document

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the application."""
    app = create_app()

    # e.g. log_level=DEBUG in the [app] section of the settings file
    level_name = QSettings().value("app/log_level", "INFO", type=str)
    setup_logging(level=getattr(logging, level_name.upper(), logging.INFO))

    win = MainWindow(Document())
    win.show()
    logger.info("Editor window shown.")
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
