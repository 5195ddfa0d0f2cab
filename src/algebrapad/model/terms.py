"""
Term Tree
=========
The structure of an expression: a line is a sequence of terms, and a term is
either a piece of text or a fraction holding two nested sequences.

Classes:
    Leaf: A text term.
    Fraction: A term owning a numerator (`top`) and a denominator (`bottom`).
    TermSequence: An ordered, possibly empty, list of terms.
    CursorInvariantError: Raised when a cursor points at a path the tree does not have.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Union


class CursorInvariantError(AssertionError):
    """A cursor descends through something that is not a fraction."""


@dataclass
class Leaf:
    text: str = ""

    def to_text(self) -> str:
        return self.text


@dataclass
class Fraction:
    top: TermSequence = field(default_factory=lambda: TermSequence())
    bottom: TermSequence = field(default_factory=lambda: TermSequence())

    def to_text(self) -> str:
        return f"({self.top.to_text()})/({self.bottom.to_text()})"


# Closed union, dispatched with `match` throughout
Term = Union[Leaf, Fraction]


@dataclass
class TermSequence:
    terms: List[Term] = field(default_factory=list)

    @classmethod
    def of(cls, *terms: Union[Term, str]) -> TermSequence:
        """Build a sequence, wrapping bare strings in leaves."""
        return cls([Leaf(t) if isinstance(t, str) else t for t in terms])

    def __len__(self) -> int:
        return len(self.terms)

    def __getitem__(self, index: int) -> Term:
        return self.terms[index]

    def __setitem__(self, index: int, term: Term) -> None:
        self.terms[index] = term

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def insert(self, index: int, term: Term) -> None:
        self.terms.insert(index, term)

    def pop(self, index: int) -> Term:
        return self.terms.pop(index)

    def extend(self, other: Iterable[Term]) -> None:
        self.terms.extend(other)

    def replace(self, index: int, other: TermSequence) -> None:
        """Remove the term at `index` and splice the terms of `other` in its place."""
        self.terms[index:index + 1] = other.terms

    def split_off(self, index: int) -> TermSequence:
        """Truncate to `index` terms and return the removed tail."""
        tail = TermSequence(self.terms[index:])
        del self.terms[index:]
        return tail

    def fraction_at(self, index: int) -> Fraction:
        term: Optional[Term] = self.terms[index] if 0 <= index < len(self.terms) else None
        if not isinstance(term, Fraction):
            raise CursorInvariantError(
                f"Expected a fraction at position {index}, found {term!r}."
            )
        return term

    def to_text(self) -> str:
        return "".join(term.to_text() for term in self.terms)
