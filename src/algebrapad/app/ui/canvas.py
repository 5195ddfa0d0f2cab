from __future__ import annotations

import logging
import os
from typing import Callable

from PySide6.QtCore import Qt, QRect, QSettings, Signal
from PySide6.QtGui import QColor, QFont, QFontDatabase, QFontMetrics, QKeyEvent, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from algebrapad.config import CARET_WIDTH, DIVIDER_THICKNESS, FONT_FAMILY, FONT_PATH, FONT_SIZE
from algebrapad.model.document import Document
from algebrapad.model.geometry import halve
from algebrapad.model.primitives import CursorMark, DividerLine, Primitive, TextRun

logger = logging.getLogger(__name__)

# Keys with a dedicated editing action; everything else is typed as text
KEY_ACTIONS: dict[Qt.Key, Callable[[Document], None]] = {
    Qt.Key.Key_Backspace: Document.delete_before,
    Qt.Key.Key_Delete: Document.delete_after,
    Qt.Key.Key_Return: Document.new_line,
    Qt.Key.Key_Enter: Document.new_line,
    Qt.Key.Key_Left: Document.move_left,
    Qt.Key.Key_Right: Document.move_right,
    Qt.Key.Key_Up: Document.move_up,
    Qt.Key.Key_Down: Document.move_down,
}

BACKGROUND_COLOR = QColor(255, 255, 255)
HIGHLIGHT_COLOR = QColor(200, 200, 200)
INK_COLOR = QColor(0, 0, 0)


def load_editor_font(pixel_size: int) -> QFont:
    """The bundled monospace font if present, otherwise the system one."""
    family = FONT_FAMILY
    if os.path.exists(FONT_PATH):
        font_id = QFontDatabase.addApplicationFont(FONT_PATH)
        families = QFontDatabase.applicationFontFamilies(font_id) if font_id >= 0 else []
        if families:
            family = families[0]
        else:
            logger.warning(f"Could not load font from '{FONT_PATH}', using '{family}'.")

    font = QFont(family)
    font.setStyleHint(QFont.StyleHint.Monospace)
    font.setPixelSize(pixel_size)
    return font


class EditorCanvas(QWidget):
    """
    Draws a Document and turns key presses into editing operations.

    Settings:
        editor/font_size: Pixel size of the text and height of the caret.
        editor/show_bounds: Fill the document's bounding rectangle in grey.
    """
    edited = Signal()

    def __init__(self, document: Document, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.document = document
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        settings = QSettings()
        self.caret_height: int = settings.value("editor/font_size", FONT_SIZE, type=int)
        self.show_bounds: bool = settings.value("editor/show_bounds", False, type=bool)

        self._font = load_editor_font(self.caret_height)
        self._metrics = QFontMetrics(self._font)
        self._sizes: dict[str, tuple[int, int]] = {}

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def measure_text(self, text: str) -> tuple[int, int]:
        """Pixel size of `text` in the editor font; cached, since every repaint asks again."""
        size = self._sizes.get(text)
        if size is None:
            size = (self._metrics.horizontalAdvance(text), self._metrics.height())
            self._sizes[text] = size
        return size

    def handle_key(self, key: int, text: str) -> bool:
        """
        Apply one key press to the document.

        Returns:
            False if the key means nothing to the editor.
        """
        action = KEY_ACTIONS.get(key)
        if action is not None:
            action(self.document)
        elif text and text.isprintable():
            self.document.type_text(text)
        else:
            return False

        self.edited.emit()
        self.update()
        return True

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if not self.handle_key(event.key(), event.text()):
            super().keyPressEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        primitives: list[Primitive] = []
        bounds = self.document.render(
            self.width(), self.height(), self.measure_text, primitives.append, caret_height=self.caret_height
        )

        painter = QPainter(self)
        painter.fillRect(self.rect(), BACKGROUND_COLOR)

        if self.show_bounds:
            painter.fillRect(QRect(bounds.x, bounds.y, bounds.width, bounds.height), HIGHLIGHT_COLOR)

        painter.setFont(self._font)
        painter.setPen(INK_COLOR)
        for primitive in primitives:
            self._draw(painter, primitive)

        painter.end()

    def _draw(self, painter: QPainter, primitive: Primitive) -> None:
        match primitive:
            case TextRun(x=x, y=y, text=text):
                # drawText places the baseline, primitives carry the top edge
                painter.drawText(x, y + self._metrics.ascent(), text)
            case DividerLine(x=x, y=y, width=width):
                painter.fillRect(x, y - halve(DIVIDER_THICKNESS), width, DIVIDER_THICKNESS, INK_COLOR)
            case CursorMark(x=x, y=y):
                painter.fillRect(x, y, CARET_WIDTH, self.caret_height, INK_COLOR)
