"""Append-only log of positional reading notes."""

import logging
from pathlib import Path

from vocab_lens.io.vocabulary_repository import StorageError

logger = logging.getLogger(__name__)


class NoteLog:
    """Appends ``file<TAB>line<TAB>text`` rows to a UTF-8 text file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def append(self, file_path: str, line: int, text: str) -> None:
        """
        Append one note.

        Args:
            file_path: Document the note refers to (may be empty for unsaved text).
            line: 1-based line number in that document.
            text: Note text; tabs and line breaks are flattened to spaces.

        Raises:
            StorageError: If the log cannot be written.
        """
        clean = " ".join(text.replace("\t", " ").splitlines()).strip()
        row = f"{file_path}\t{line}\t{clean}\n"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(row)
        except OSError as e:
            raise StorageError(f"Cannot write to {self.path}: {e}") from e
        logger.info("Note appended to %s (%s:%d)", self.path, file_path, line)
