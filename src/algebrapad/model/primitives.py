"""
Draw Primitives
===============
The flat, positioned output of the layout pass.

A layout never draws anything itself. It produces primitives with absolute
coordinates and hands them to a consumer (the Qt canvas, or a list in tests).

Classes:
    TextRun: A piece of text with its top-left corner at (x, y).
    DividerLine: A fraction bar starting at (x, y), `width` pixels long.
    CursorMark: The caret position; zero-size, the painter picks its size.
    Layout: A list of primitives paired with their combined bounding rectangle.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Union

from algebrapad.model.geometry import Rect


@dataclass
class TextRun:
    x: int
    y: int
    text: str

    def shift(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy


@dataclass
class DividerLine:
    x: int
    y: int
    width: int

    def shift(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy


@dataclass
class CursorMark:
    x: int
    y: int

    def shift(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy


# Union type for list handling
Primitive = Union[TextRun, DividerLine, CursorMark]

# Consumer of finished primitives
EmitFn = Callable[[Primitive], None]


@dataclass
class Layout:
    """
    Primitives of a laid-out subtree and the rectangle that bounds them.

    The rectangle of a layout holding nothing but a cursor marker is never
    merged into another layout's rectangle (see `combine`).
    """
    rect: Rect
    primitives: List[Primitive] = field(default_factory=list)

    @classmethod
    def empty(cls, rect: Rect) -> Layout:
        return cls(rect=rect)

    @classmethod
    def single(cls, rect: Rect, primitive: Primitive) -> Layout:
        return cls(rect=rect, primitives=[primitive])

    def is_cursor(self) -> bool:
        return len(self.primitives) == 1 and isinstance(self.primitives[0], CursorMark)

    def combine(self, other: Layout) -> Layout:
        """Append `other` to this layout in place and return self."""
        if not other.is_cursor():
            self.rect = self.rect.combine(other.rect)

        self.primitives.extend(other.primitives)
        return self

    def shift(self, dx: int, dy: int) -> None:
        self.rect.shift(dx, dy)
        for primitive in self.primitives:
            primitive.shift(dx, dy)

    def emit(self, emit: EmitFn) -> None:
        for primitive in self.primitives:
            emit(primitive)
