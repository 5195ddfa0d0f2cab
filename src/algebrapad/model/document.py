"""
Document (Data Model)
=====================
This module defines the central editable state of the running application.

Why is this file needed?
------------------------
1. State Management: It holds the lines of the expression and the cursor in
   one place. Views read from this object; key handlers call its methods.
2. Line handling: Operations that cross line boundaries (splitting, merging,
   moving between lines) live here. Everything inside a line is delegated to
   `algebrapad.model.navigation`.

Classes:
    Document: The list of lines plus the cursor.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import List

from algebrapad.config import FONT_SIZE
from algebrapad.model import navigation
from algebrapad.model.cursor import DocumentCursor, ValueCursor
from algebrapad.model.geometry import Rect
from algebrapad.model.layout import MeasureFn, Typesetter
from algebrapad.model.primitives import EmitFn
from algebrapad.model.terms import TermSequence

logger = logging.getLogger(__name__)

FRACTION_OPERATOR = "/"


@dataclass
class Document:
    """
    Lines of terms and the cursor. There is always at least one line.
    """
    lines: List[TermSequence] = field(default_factory=lambda: [TermSequence()])
    cursor: DocumentCursor = field(default_factory=DocumentCursor)

    def __post_init__(self) -> None:
        if not self.lines:
            raise ValueError("A document needs at least one line.")

    @property
    def line(self) -> TermSequence:
        """The line the cursor is on."""
        return self.lines[self.cursor.line]

    def reset(self) -> None:
        """Clear all content for a new expression"""
        self.lines = [TermSequence()]
        self.cursor = DocumentCursor()
        logger.info("Document has been reset.")

    def to_text(self) -> str:
        return "\n".join(line.to_text() for line in self.lines)

    def _log_edit(self, action: str) -> None:
        logger.debug(f"{action}: line {self.cursor.line} = {self.line.to_text()!r}")

    # ------------------------------------------------------------------------------
    # Typing
    # ------------------------------------------------------------------------------

    def type_text(self, text: str) -> None:
        """Handle a text input event; the fraction operator wraps instead of inserting."""
        if text == FRACTION_OPERATOR:
            self.wrap_as_fraction()
        else:
            self.insert_leaf(text)

    def insert_leaf(self, text: str) -> None:
        navigation.insert_leaf(self.line, self.cursor.value, text)
        self._log_edit(f"Inserted {text!r}")

    def wrap_as_fraction(self) -> None:
        if navigation.wrap_as_fraction(self.line, self.cursor.value):
            self._log_edit("Created fraction")

    def new_line(self) -> None:
        """Split the line at the cursor. Only possible outside of fractions."""
        value = self.cursor.value
        if value.follow is not None:
            return

        rest = self.line.split_off(value.index)

        self.cursor.line += 1
        self.cursor.value = ValueCursor()
        self.lines.insert(self.cursor.line, rest)
        logger.debug(f"Split line {self.cursor.line - 1}, {len(self.lines)} line(s).")

    # ------------------------------------------------------------------------------
    # Deleting
    # ------------------------------------------------------------------------------

    def delete_before(self) -> None:
        value = self.cursor.value
        if value.follow is None and value.index == 0:
            self._merge_into_previous_line()
            return

        navigation.delete_before(self.line, value)
        self._log_edit("Deleted")

    def delete_after(self) -> None:
        value = self.cursor.value
        if value.follow is None and value.index == len(self.line):
            self._merge_next_line()
            return

        self.move_right()
        self.delete_before()

    def _merge_into_previous_line(self) -> None:
        if self.cursor.line == 0:
            return

        removed = self.lines.pop(self.cursor.line)
        self.cursor.line -= 1
        self.cursor.value = ValueCursor(len(self.line))
        self.line.extend(removed)
        logger.debug(f"Merged line {self.cursor.line + 1} into line {self.cursor.line}.")

    def _merge_next_line(self) -> None:
        if self.cursor.line >= len(self.lines) - 1:
            return

        following = self.lines.pop(self.cursor.line + 1)
        self.line.extend(following)
        logger.debug(f"Merged line {self.cursor.line + 1} into line {self.cursor.line}.")

    # ------------------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------------------

    def move_left(self) -> None:
        if not navigation.move_left(self.line, self.cursor.value) and self.cursor.line > 0:
            self.cursor.line -= 1
            self.cursor.value = ValueCursor(len(self.line))

    def move_right(self) -> None:
        if not navigation.move_right(self.line, self.cursor.value) and self.cursor.line < len(self.lines) - 1:
            self.cursor.line += 1
            self.cursor.value = ValueCursor()

    def move_up(self) -> None:
        if navigation.move_up(self.line, self.cursor.value):
            return
        if self.cursor.value.follow is None and self.cursor.line > 0:
            self.cursor.line -= 1
            self._clamp_index()

    def move_down(self) -> None:
        if navigation.move_down(self.line, self.cursor.value):
            return
        if self.cursor.value.follow is None and self.cursor.line < len(self.lines) - 1:
            self.cursor.line += 1
            self._clamp_index()

    def _clamp_index(self) -> None:
        self.cursor.value.index = min(self.cursor.value.index, len(self.line))

    # ------------------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------------------

    def render(
        self,
        viewport_width: int,
        viewport_height: int,
        measure_text: MeasureFn,
        emit: EmitFn,
        caret_height: int = FONT_SIZE
    ) -> Rect:
        """
        Lay out the whole document centred in the viewport and pass every
        primitive to `emit`.

        Returns:
            The bounding rectangle of the laid-out document.
        """
        layout = Typesetter(measure_text, caret_height).document(
            self.lines, self.cursor, viewport_width, viewport_height
        )
        layout.emit(emit)
        return layout.rect
