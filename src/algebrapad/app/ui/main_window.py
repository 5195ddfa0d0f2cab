"""
Main Application Window
=======================
The window holding the editor canvas, a File menu and a status bar.
"""
from __future__ import annotations

import logging

from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QLabel, QMainWindow, QStatusBar

from algebrapad.app.application import VISIBLE_APP_NAME
from algebrapad.app.ui.canvas import EditorCanvas
from algebrapad.config import WINDOW_SIZE, WINDOW_TITLE
from algebrapad.model.document import Document

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, document: Document) -> None:
        super().__init__()
        self.document = document

        self.setWindowTitle(f"{VISIBLE_APP_NAME}: {WINDOW_TITLE}")
        self.resize(*WINDOW_SIZE)

        self.canvas = EditorCanvas(document, parent=self)
        self.setCentralWidget(self.canvas)
        self.canvas.setFocus()

        self._build_menu()

        self.position_label = QLabel()
        status = QStatusBar(self)
        status.addPermanentWidget(self.position_label)
        self.setStatusBar(status)

        self.canvas.edited.connect(self._update_status)
        self._update_status()

    def _build_menu(self) -> None:
        file_menu = self.menuBar().addMenu(self.tr("&File"))

        self.action_new = QAction(self.tr("&New"), self)
        self.action_new.setShortcut(QKeySequence.StandardKey.New)
        self.action_new.triggered.connect(self._on_new)
        file_menu.addAction(self.action_new)

        action_quit = QAction(self.tr("&Quit"), self)
        action_quit.setShortcut(QKeySequence.StandardKey.Quit)
        action_quit.triggered.connect(self.close)
        file_menu.addAction(action_quit)

    def _on_new(self) -> None:
        self.document.reset()
        self.canvas.update()
        self._update_status()

    def _update_status(self) -> None:
        cursor = self.document.cursor
        self.position_label.setText(
            self.tr("Line {line}, depth {depth}").format(line=cursor.line + 1, depth=cursor.value.depth)
        )
