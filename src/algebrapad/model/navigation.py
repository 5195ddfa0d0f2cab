"""
Navigation and Mutation
=======================
Editing operations on a term sequence, driven by a cursor that points into it.

Every operation walks the cursor's `follow` chain down the tree together with
the sequences it refers to, and acts at the innermost level. The cursor is
updated in place, in lock-step with the tree.

Functions return a flag where the caller (the document) has to react:
    - `move_left` / `move_right` return False when the cursor is already at
      the start / end of the outermost sequence.
    - `move_up` / `move_down` return False when no branch switch happened.
    - `delete_before` returns True when there was nothing to delete at the
      outermost level.
"""
from __future__ import annotations

import logging
from typing import List, Tuple

from algebrapad.model.cursor import Follow, Side, ValueCursor
from algebrapad.model.geometry import halve
from algebrapad.model.terms import CursorInvariantError, Fraction, Leaf, TermSequence

logger = logging.getLogger(__name__)

# A sequence and the cursor positioned in it
Frame = Tuple[TermSequence, ValueCursor]


def branch(fraction: Fraction, side: Side) -> TermSequence:
    match side:
        case Side.TOP:
            return fraction.top
        case Side.BOTTOM:
            return fraction.bottom


def resolve_path(sequence: TermSequence, cursor: ValueCursor) -> List[Frame]:
    """
    Pair every level of the cursor with the sequence it points into.

    Raises:
        CursorInvariantError: If an index is out of range or a `follow` does
            not sit right after a fraction.
    """
    frames: List[Frame] = []
    while True:
        if not 0 <= cursor.index <= len(sequence):
            raise CursorInvariantError(
                f"Cursor index {cursor.index} outside of a sequence of {len(sequence)} terms."
            )
        frames.append((sequence, cursor))
        if cursor.follow is None:
            return frames
        fraction = sequence.fraction_at(cursor.index - 1)
        sequence = branch(fraction, cursor.follow.side)
        cursor = cursor.follow.cursor


def resolve(sequence: TermSequence, cursor: ValueCursor) -> Frame:
    """The innermost sequence and the cursor level positioned in it."""
    return resolve_path(sequence, cursor)[-1]


# ------------------------------------------------------------------------------
# Mutation
# ------------------------------------------------------------------------------

def insert_leaf(sequence: TermSequence, cursor: ValueCursor, text: str) -> None:
    """Insert one new leaf at the cursor and step past it."""
    owner, position = resolve(sequence, cursor)
    owner.insert(position.index, Leaf(text))
    cursor.advance()


def wrap_as_fraction(sequence: TermSequence, cursor: ValueCursor) -> bool:
    """
    Turn the term left of the cursor into the numerator of a new fraction and
    move the cursor into the (empty) denominator.

    Returns:
        False if there is no term to the left of the cursor.
    """
    owner, position = resolve(sequence, cursor)
    if position.index == 0:
        return False

    numerator = owner[position.index - 1]
    owner[position.index - 1] = Fraction(top=TermSequence([numerator]), bottom=TermSequence())
    position.descend(Side.BOTTOM)
    return True


def delete_before(sequence: TermSequence, cursor: ValueCursor) -> bool:
    """
    Delete the term left of the cursor.

    At the start of a fraction branch the fraction is dissolved instead: it is
    replaced by the content of the other branch. Removing the bottom leaves the
    cursor after the spliced numerator terms, removing the top leaves it before
    the spliced denominator terms.

    Returns:
        True if the cursor is at the start of `sequence` itself, so nothing
        could be deleted at this level.
    """
    if cursor.follow is None:
        if cursor.index == 0:
            return True
        cursor.index -= 1
        sequence.pop(cursor.index)
        return False

    position = cursor.index - 1
    fraction = sequence.fraction_at(position)
    side = cursor.follow.side

    if delete_before(branch(fraction, side), cursor.follow.cursor):
        survivor = branch(fraction, side.opposite())
        sequence.replace(position, survivor)
        cursor.follow = None
        cursor.index = position + len(survivor) if side is Side.BOTTOM else position
        logger.debug(f"Dissolved fraction at {position}, kept {len(survivor)} term(s) of the {side.opposite()}.")

    return False


# ------------------------------------------------------------------------------
# Horizontal movement
# ------------------------------------------------------------------------------

def move_left(sequence: TermSequence, cursor: ValueCursor) -> bool:
    frames = resolve_path(sequence, cursor)
    owner, position = frames[-1]

    if position.index > 0:
        term = owner[position.index - 1]
        if isinstance(term, Fraction):
            # Step into the numerator from its right end
            position.follow = Follow(Side.TOP, ValueCursor(len(term.top)))
        else:
            position.index -= 1
        return True

    if len(frames) == 1:
        return False

    # Leave the fraction, ending up just before it
    _, parent = frames[-2]
    parent.follow = None
    parent.index -= 1
    return True


def move_right(sequence: TermSequence, cursor: ValueCursor) -> bool:
    frames = resolve_path(sequence, cursor)
    owner, position = frames[-1]

    if position.index < len(owner):
        position.index += 1
        if isinstance(owner[position.index - 1], Fraction):
            # Step into the numerator from its left end
            position.follow = Follow(Side.TOP, ValueCursor(0))
        return True

    if len(frames) == 1:
        return False

    # Leave the fraction, ending up just after it
    _, parent = frames[-2]
    parent.follow = None
    return True


# ------------------------------------------------------------------------------
# Vertical movement
# ------------------------------------------------------------------------------

def _switch_branch(sequence: TermSequence, cursor: ValueCursor, source: Side) -> bool:
    """
    Move from the `source` branch of the innermost fraction to the other one,
    keeping the horizontal position roughly in place.
    """
    frames = resolve_path(sequence, cursor)
    if len(frames) < 2:
        return False

    owner, position = frames[-2]
    follow = position.follow
    if follow.side is not source:
        return False

    fraction = owner.fraction_at(position.index - 1)
    left_len = len(branch(fraction, source))
    entered_len = len(branch(fraction, source.opposite()))

    follow.side = source.opposite()
    shifted = follow.cursor.index - halve(left_len - entered_len)
    follow.cursor.index = min(max(shifted, 0), entered_len)
    return True


def move_up(sequence: TermSequence, cursor: ValueCursor) -> bool:
    return _switch_branch(sequence, cursor, Side.BOTTOM)


def move_down(sequence: TermSequence, cursor: ValueCursor) -> bool:
    return _switch_branch(sequence, cursor, Side.TOP)
