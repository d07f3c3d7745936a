"""Unit tests for the pipe-delimited vocabulary file."""

import os

import pytest

from vocab_lens.core import VocabRecord
from vocab_lens.io import DelimitedVocabularyFile, StorageError


@pytest.fixture
def vocab_path(tmp_path):
    return tmp_path / "vocabulary.tsv"


@pytest.fixture
def vocab_file(vocab_path):
    return DelimitedVocabularyFile(vocab_path)


class TestDelimitedVocabularyFileRead:
    def test_missing_file_reads_empty(self, vocab_file):
        assert vocab_file.read_all() == []

    def test_header_line_is_skipped(self, vocab_path, vocab_file):
        vocab_path.write_text("front|back|notes|context\nhaus|house||Das Haus\n", encoding="utf-8")

        records = vocab_file.read_all()

        assert records == [VocabRecord(front="haus", back="house", notes="", context="Das Haus")]

    def test_malformed_lines_are_skipped(self, vocab_path, vocab_file):
        vocab_path.write_text(
            "front|back|notes|context\n"
            "only|three|fields\n"
            "haus|house||Das Haus\n"
            "no separators at all\n"
            "|empty|front|field\n",
            encoding="utf-8",
        )

        records = vocab_file.read_all()

        assert [r.front for r in records] == ["haus"]

    def test_context_may_contain_separator(self, vocab_path, vocab_file):
        vocab_path.write_text("front|back|notes|context\nja|yes||ja | nein\n", encoding="utf-8")

        records = vocab_file.read_all()

        assert records[0].context == "ja | nein"

    def test_front_is_case_folded_on_read(self, vocab_path, vocab_file):
        vocab_path.write_text("front|back|notes|context\nHaus|house||\n", encoding="utf-8")

        assert vocab_file.read_all()[0].front == "haus"

    def test_undecodable_line_is_skipped(self, vocab_path, vocab_file, caplog):
        vocab_path.write_bytes(
            b"front|back|notes|context\n"
            b"haus|house||ein Haus\n"
            b"baum|tree||ein \xff Baum\n"
            b"katze|cat||die Katze\n"
        )

        with caplog.at_level("WARNING"):
            records = vocab_file.read_all()

        assert [r.front for r in records] == ["haus", "katze"]
        assert "line 3" in caplog.text

    def test_undecodable_header_keeps_records(self, vocab_path, vocab_file):
        vocab_path.write_bytes(b"\xfffront|back|notes|context\nhaus|house||\n")

        assert [r.front for r in vocab_file.read_all()] == ["haus"]

    def test_unreadable_file_raises_storage_error(self, vocab_path, vocab_file):
        vocab_path.mkdir()

        with pytest.raises(StorageError):
            vocab_file.read_all()


class TestDelimitedVocabularyFileWrite:
    def test_write_includes_header_and_one_row_per_record(self, vocab_path, vocab_file):
        vocab_file.write_all([
            VocabRecord(front="haus", back="house"),
            VocabRecord(front="verneinung", back="negation", notes="from 'nein'", context="Das ist eine <b>Verneinung</b>."),
        ])

        lines = vocab_path.read_text(encoding="utf-8").splitlines()

        assert lines == [
            "front|back|notes|context",
            "haus|house||",
            "verneinung|negation|from 'nein'|Das ist eine <b>Verneinung</b>.",
        ]

    def test_newlines_are_flattened(self, vocab_path, vocab_file):
        vocab_file.write_all([
            VocabRecord(front="haus", back="house", notes="line one\nline two", context="a\r\nb\rc\nd"),
        ])

        lines = vocab_path.read_text(encoding="utf-8").splitlines()

        assert len(lines) == 2
        assert lines[1] == "haus|house|line one line two|a b c d"

    def test_separator_in_notes_does_not_shift_fields(self, vocab_file):
        vocab_file.write_all([VocabRecord(front="haus", back="house|home", notes="a|b", context="x|y")])

        record = vocab_file.read_all()[0]

        assert record.back == "house/home"
        assert record.notes == "a/b"
        assert record.context == "x|y"

    def test_write_replaces_whole_file(self, vocab_file):
        vocab_file.write_all([VocabRecord(front="haus", back="house")])
        vocab_file.write_all([VocabRecord(front="baum", back="tree")])

        assert [r.front for r in vocab_file.read_all()] == ["baum"]

    def test_write_leaves_no_temporary_files(self, tmp_path, vocab_file):
        vocab_file.write_all([VocabRecord(front="haus", back="house")])

        assert os.listdir(tmp_path) == ["vocabulary.tsv"]

    def test_write_creates_missing_directory(self, tmp_path):
        vocab_file = DelimitedVocabularyFile(tmp_path / "nested" / "vocabulary.tsv")

        vocab_file.write_all([VocabRecord(front="haus", back="house")])

        assert (tmp_path / "nested" / "vocabulary.tsv").exists()

    def test_unwritable_target_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        vocab_file = DelimitedVocabularyFile(blocker / "vocabulary.tsv")

        with pytest.raises(StorageError):
            vocab_file.write_all([VocabRecord(front="haus", back="house")])


def test_round_trip_modulo_newline_flattening(vocab_file):
    """Saved and reloaded records match the originals with line breaks replaced by spaces."""
    originals = [
        VocabRecord(front="haus", back="house", notes="", context="Das Haus\nist groß."),
        VocabRecord(front="strasse", back="street", notes="From Latin\nstrata", context="Die Straße"),
        VocabRecord(front="schön", back="beautiful", notes="no newline", context="Schön\n\nist es."),
    ]

    vocab_file.write_all(originals)
    loaded = {record.front: record for record in vocab_file.read_all()}

    assert len(loaded) == len(originals)
    for original in originals:
        restored = loaded[original.front]
        assert restored.back == original.back
        assert restored.notes == original.notes.replace("\n", " ")
        assert restored.context == original.context.replace("\n", " ")
