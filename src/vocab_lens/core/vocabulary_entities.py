"""Vocabulary entities shared by the store, highlighter and lookup workflow."""

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class VocabRecord:
    """One learned word.

    ``front`` is the case-folded lookup key. Records are never edited in place;
    a re-lookup after a clear produces a new record that replaces the old one.
    """

    front: str
    back: str
    notes: str = ""
    context: str = ""

    def __post_init__(self):
        if not self.front:
            raise ValueError("VocabRecord.front must not be empty")
        if self.front != self.front.casefold():
            raise ValueError(f"VocabRecord.front must be case-folded: {self.front!r}")


class HighlightMark(NamedTuple):
    """A matched occurrence of a vocabulary word; end_col is exclusive."""

    line_index: int
    start_col: int
    end_col: int


@dataclass
class PendingLookup:
    """An enrichment request that has been dispatched but not yet answered."""

    word: str
    context: str
    interested: bool = True
