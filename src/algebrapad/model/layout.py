"""
Layout
======
Turns the term tree into positioned draw primitives.

Geometry is computed bottom-up: a leaf gets its size from the text measuring
function, a sequence places its terms left to right, and a fraction stacks
its two branches around a divider line. Layout only reads the tree.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from algebrapad.config import FONT_SIZE
from algebrapad.model.cursor import DocumentCursor, Follow, Side, ValueCursor
from algebrapad.model.geometry import Rect, halve
from algebrapad.model.primitives import CursorMark, DividerLine, Layout, TextRun
from algebrapad.model.terms import Fraction, Leaf, Term, TermSequence

logger = logging.getLogger(__name__)

# text -> (width, height) in pixels
MeasureFn = Callable[[str], Tuple[int, int]]


class Typesetter:
    """
    Lays out sequences, terms and whole documents.

    Args:
        measure_text: Returns the pixel size of a piece of text.
        caret_height: Height of the caret drawn at a CursorMark, used to
            centre the mark vertically on the term it follows.
    """
    def __init__(self, measure_text: MeasureFn, caret_height: int = FONT_SIZE) -> None:
        self.measure_text = measure_text
        self.caret_height = caret_height

    # ---- cursor marks ----

    @staticmethod
    def _caret_at(x: int, y: int) -> Layout:
        return Layout.single(Rect.empty(x, y), CursorMark(x, y))

    def _caret_after(self, rect: Rect) -> Layout:
        x = rect.x + rect.width
        y = rect.y + halve(rect.height) - halve(self.caret_height)
        return self._caret_at(x, y)

    # ---- tree ----

    def sequence(self, sequence: TermSequence, cursor: Optional[ValueCursor], x: int, y: int) -> Layout:
        """Lay out `sequence` with its top-left at (x, y); `cursor` is set when it points into it."""
        result = Layout.empty(Rect.empty(x, y))

        if cursor is not None and cursor.index == 0 and cursor.follow is None:
            result.combine(self._caret_at(x, y))

        for index, term in enumerate(sequence, start=1):
            here = cursor is not None and cursor.index == index
            follow = cursor.follow if here else None

            laid = self.term(term, follow, x + result.rect.width, y)
            rect = laid.rect
            result.combine(laid)

            if here and follow is None:
                result.combine(self._caret_after(rect))

        return result

    def term(self, term: Term, follow: Optional[Follow], x: int, y: int) -> Layout:
        match term:
            case Leaf(text=text):
                width, height = self.measure_text(text)
                return Layout.single(Rect(x, y, width, height), TextRun(x, y, text))
            case Fraction(top=top, bottom=bottom):
                return self._fraction(top, bottom, follow, x, y)
            case _:
                raise TypeError(f"Cannot lay out {term!r}.")

    def _fraction(
        self,
        top: TermSequence,
        bottom: TermSequence,
        follow: Optional[Follow],
        x: int,
        y: int
    ) -> Layout:
        top_cursor = follow.cursor if follow is not None and follow.side is Side.TOP else None
        bottom_cursor = follow.cursor if follow is not None and follow.side is Side.BOTTOM else None

        upper = self.sequence(top, top_cursor, x, y)
        lower = self.sequence(bottom, bottom_cursor, x, y)

        # Centre the narrower branch over the wider one
        if upper.rect.width < lower.rect.width:
            upper_shift_x, lower_shift_x = halve(lower.rect.width - upper.rect.width), 0
        else:
            upper_shift_x, lower_shift_x = 0, halve(upper.rect.width - lower.rect.width)

        offset_y = halve(max(upper.rect.height, lower.rect.height))
        upper.shift(upper_shift_x, -offset_y)
        lower.shift(lower_shift_x, offset_y)

        width = max(upper.rect.width, lower.rect.width)
        line_y = halve(upper.rect.y + upper.rect.height + lower.rect.y)

        primitives: List = upper.primitives + lower.primitives
        primitives.append(DividerLine(x, line_y, width))

        return Layout(rect=lower.rect.combine(upper.rect), primitives=primitives)

    # ---- document ----

    def document(
        self,
        lines: List[TermSequence],
        cursor: DocumentCursor,
        viewport_width: int,
        viewport_height: int
    ) -> Layout:
        """
        Stack the lines top to bottom, centre the result in the viewport and
        pull it back in if it overflows the top or left edge.
        """
        result = Layout.empty(Rect.empty())

        for index, line in enumerate(lines):
            line_cursor = cursor.value if cursor.line == index else None

            y = result.rect.y + result.rect.height
            laid = self.sequence(line, line_cursor, 0, y)
            # Fractions reach above the baseline row; align the line's top edge to y
            laid.shift(0, y - laid.rect.y)

            result.combine(laid)

        result.shift(
            halve(viewport_width - result.rect.width) - result.rect.x,
            halve(viewport_height - result.rect.height) - result.rect.y,
        )

        if result.rect.y < 0:
            result.shift(0, -result.rect.y)
        if result.rect.x < 0:
            result.shift(-result.rect.x, 0)

        logger.debug(f"Laid out {len(lines)} line(s) into {result.rect}, {len(result.primitives)} primitive(s).")
        return result
