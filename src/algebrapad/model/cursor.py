"""
Cursor Position
===============
A cursor mirrors the nesting of the term tree.

At each depth, `index` is a gap in the current sequence (0 = before the first
term, len = after the last). When `follow` is set, the term just left of that
gap is a fraction and the position continues inside one of its branches.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import List, Optional


class Side(StrEnum):
    """Branch of a fraction."""
    TOP = "top"
    BOTTOM = "bottom"

    def opposite(self) -> Side:
        return Side.BOTTOM if self is Side.TOP else Side.TOP


@dataclass
class Follow:
    side: Side
    cursor: ValueCursor


@dataclass
class ValueCursor:
    index: int = 0
    follow: Optional[Follow] = None

    def chain(self) -> List[ValueCursor]:
        """This cursor and every nested one, outermost first."""
        cursors = [self]
        while cursors[-1].follow is not None:
            cursors.append(cursors[-1].follow.cursor)
        return cursors

    def innermost(self) -> ValueCursor:
        return self.chain()[-1]

    @property
    def depth(self) -> int:
        return len(self.chain()) - 1

    def advance(self) -> None:
        """Step the innermost position past a term that was just inserted."""
        self.innermost().index += 1

    def descend(self, side: Side, index: int = 0) -> None:
        """Continue the innermost position into a branch of the fraction on its left."""
        self.innermost().follow = Follow(side, ValueCursor(index))


@dataclass
class DocumentCursor:
    line: int = 0
    value: ValueCursor = field(default_factory=ValueCursor)
