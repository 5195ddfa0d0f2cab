"""
Geometric Primitives for Layout.
"""
from __future__ import annotations
from dataclasses import dataclass


def halve(value: int) -> int:
    """Integer half, truncated toward zero."""
    return int(value / 2)


@dataclass
class Rect:
    """An axis-aligned rectangle in integer pixel coordinates."""
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def empty(cls, x: int = 0, y: int = 0) -> Rect:
        return cls(x, y, 0, 0)

    def end(self) -> tuple[int, int]:
        """Bottom-right corner."""
        return self.x + self.width, self.y + self.height

    def combine(self, other: Rect) -> Rect:
        """
        Smallest rectangle containing both rectangles.
        Neither input is modified.
        """
        x = min(self.x, other.x)
        y = min(self.y, other.y)

        this_end_x, this_end_y = self.end()
        other_end_x, other_end_y = other.end()
        end_x = max(this_end_x, other_end_x)
        end_y = max(this_end_y, other_end_y)

        return Rect(x, y, end_x - x, end_y - y)

    def shift(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy

    def contains(self, other: Rect) -> bool:
        end_x, end_y = self.end()
        other_end_x, other_end_y = other.end()
        return (
            self.x <= other.x and self.y <= other.y
            and other_end_x <= end_x and other_end_y <= end_y
        )
