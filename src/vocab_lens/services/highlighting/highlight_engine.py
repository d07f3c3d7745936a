"""Highlight Engine - locates every learned word in the displayed document."""

from typing import Iterable, List, Sequence

from vocab_lens.core import HighlightMark
from vocab_lens.services.text_processing import find_folded_spans, fold_with_offsets


def compute_marks(document_lines: Sequence[str], vocabulary_keys: Iterable[str]) -> List[HighlightMark]:
    """
    Compute the full set of highlight marks for a document.

    Every call starts from nothing: callers clear all existing highlights and
    apply the returned marks, so the result is correct after any store change.
    Cost is lines x keys x line length, which is fine for the few hundred words
    and lines a reading session holds.

    Args:
        document_lines: Lines of the displayed document.
        vocabulary_keys: Normalized vocabulary keys; blank keys are ignored.

    Returns:
        Marks sorted by line, then start column.
    """
    keys = [key for key in set(vocabulary_keys) if key]
    if not keys:
        return []

    marks = []
    for line_index, line in enumerate(document_lines):
        folded, offsets = fold_with_offsets(line)
        for key in keys:
            for start, end in find_folded_spans(folded, offsets, key):
                marks.append(HighlightMark(line_index, start, end))
    marks.sort()
    return marks
