"""Pipe-delimited vocabulary file - one header line, then one record per line."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional

from vocab_lens.core import VocabRecord
from vocab_lens.io.vocabulary_repository import StorageError, VocabularyRepository

logger = logging.getLogger(__name__)


class DelimitedVocabularyFile(VocabularyRepository):
    """
    File-based repository storing the whole vocabulary in a flat text file.

    Format (UTF-8):
        front|back|notes|context
        verneinung|negation|from 'nein'|Das ist eine <b>Verneinung</b>.

    ``context`` is the last field and may itself contain the separator. Free-text
    fields never contain line breaks on disk: they are collapsed to a single
    space when written, and the collapse is not undone on read.
    """

    SEPARATOR = "|"
    HEADER = "front|back|notes|context"
    FIELD_COUNT = 4

    def __init__(self, path: Path):
        self.path = Path(path)

    def read_all(self) -> List[VocabRecord]:
        """Parse the file, skipping lines that do not hold a full record.

        Lines are decoded one at a time, so a line that is not valid UTF-8 is
        skipped like any other malformed line instead of hiding the rest.
        """
        if not self.path.exists():
            return []

        try:
            data = self.path.read_bytes()
        except OSError as e:
            raise StorageError(f"Cannot read vocabulary file {self.path}: {e}") from e

        records = []
        raw_lines = data.split(b"\n")
        for line_number, raw_line in enumerate(raw_lines[1:], start=2):
            raw_line = raw_line.rstrip(b"\r")
            if not raw_line:
                continue
            try:
                line = raw_line.decode("utf-8")
            except UnicodeDecodeError:
                logger.warning("Skipping malformed line %d in %s", line_number, self.path)
                continue
            record = self._parse_line(line)
            if record is None:
                logger.warning("Skipping malformed line %d in %s", line_number, self.path)
                continue
            records.append(record)
        return records

    def write_all(self, records: Iterable[VocabRecord]) -> None:
        """Rewrite the whole file through a temporary file in the same directory."""
        lines = [self.HEADER]
        lines.extend(self._format_record(record) for record in records)
        content = "\n".join(lines) + "\n"

        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(content)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Cannot write vocabulary file {self.path}: {e}") from e

    def _parse_line(self, line: str) -> Optional[VocabRecord]:
        fields = line.split(self.SEPARATOR, self.FIELD_COUNT - 1)
        if len(fields) != self.FIELD_COUNT:
            return None

        front, back, notes, context = fields
        front = front.strip().casefold()
        if not front:
            return None
        return VocabRecord(front=front, back=back, notes=notes, context=context)

    def _format_record(self, record: VocabRecord) -> str:
        fields = [
            self._inline(record.front, keep_separator=False),
            self._inline(record.back, keep_separator=False),
            self._inline(record.notes, keep_separator=False),
            self._inline(record.context, keep_separator=True),
        ]
        return self.SEPARATOR.join(fields)

    def _inline(self, value: str, keep_separator: bool) -> str:
        value = value.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")
        if not keep_separator:
            value = value.replace(self.SEPARATOR, "/")
        return value
