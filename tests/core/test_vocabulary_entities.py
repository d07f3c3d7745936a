"""Unit tests for vocabulary entities."""

import dataclasses

import pytest

from vocab_lens.core import HighlightMark, PendingLookup, VocabRecord


class TestVocabRecord:
    def test_valid_record(self):
        record = VocabRecord(front="haus", back="house")
        assert record.notes == ""
        assert record.context == ""

    def test_empty_front_rejected(self):
        with pytest.raises(ValueError):
            VocabRecord(front="", back="nothing")

    def test_front_must_be_case_folded(self):
        with pytest.raises(ValueError):
            VocabRecord(front="Haus", back="house")

    def test_sharp_s_front_must_be_folded(self):
        """"straße" case-folds to "strasse"; the unfolded form is not a valid key."""
        with pytest.raises(ValueError):
            VocabRecord(front="straße", back="street")
        assert VocabRecord(front="strasse", back="street").front == "strasse"

    def test_record_is_immutable(self):
        record = VocabRecord(front="haus", back="house")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.back = "home"


def test_highlight_marks_sort_by_line_then_column():
    marks = [HighlightMark(1, 0, 3), HighlightMark(0, 5, 8), HighlightMark(0, 1, 2)]
    assert sorted(marks) == [HighlightMark(0, 1, 2), HighlightMark(0, 5, 8), HighlightMark(1, 0, 3)]


def test_pending_lookup_is_interested_by_default():
    pending = PendingLookup(word="haus", context="Das Haus")
    assert pending.interested is True
