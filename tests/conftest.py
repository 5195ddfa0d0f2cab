from __future__ import annotations

import pytest

from algebrapad.model.cursor import Follow, Side, ValueCursor
from algebrapad.model.document import Document
from algebrapad.model.navigation import resolve_path
from algebrapad.model.terms import TermSequence

CHAR_WIDTH = 10
LINE_HEIGHT = 20


def fixed_measure(text: str) -> tuple[int, int]:
    return CHAR_WIDTH * len(text), LINE_HEIGHT


def at(index: int, side: Side | None = None, inner: ValueCursor | None = None) -> ValueCursor:
    """Shorthand for nested cursors: at(1, Side.BOTTOM, at(0))."""
    if side is None:
        return ValueCursor(index)
    return ValueCursor(index, Follow(side, inner if inner is not None else ValueCursor()))


def assert_valid(sequence: TermSequence, cursor: ValueCursor) -> None:
    """Raises CursorInvariantError if the cursor does not fit the tree."""
    resolve_path(sequence, cursor)


@pytest.fixture
def measure():
    return fixed_measure


@pytest.fixture
def document() -> Document:
    return Document()
