"""Reader Controller - Central coordinator for the reading session."""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QObject, Slot

from vocab_lens.io import NoteLog, StorageError
from vocab_lens.services import VocabularyStore, compute_marks
from vocab_lens.ui import MainWindow, TextCanvas

logger = logging.getLogger(__name__)


class ReaderController(QObject):
    """
    Manages the open document and keeps its vocabulary highlights current.
    """

    def __init__(self, main_window: MainWindow, canvas: TextCanvas, store: VocabularyStore, note_log: NoteLog):
        super().__init__()

        self.main_window = main_window
        self.canvas = canvas
        self.store = store
        self.note_log = note_log

        # Session state
        self.current_path: Optional[Path] = None

    @Slot(Path)
    def handle_file_opened(self, file_path: Path):
        """
        Handle when user selects a text file.

        Args:
            file_path: Path to the selected file
        """
        file_path = Path(file_path)
        try:
            text = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error("Cannot open %s: %s", file_path, e)
            self.main_window.show_error(
                "File Load Error",
                f"Failed to load file:\n{file_path}\n\n{e}"
            )
            return

        self.current_path = file_path
        self.canvas.set_document(text)
        self.main_window.setWindowTitle(f"{file_path.name} - Vocab Lens")
        self.refresh_highlights()
        self.main_window.show_status(f"Opened {file_path.name}")

    @Slot()
    def refresh_highlights(self):
        """Clear every highlight and mark all vocabulary occurrences again."""
        self.canvas.clear_highlights()
        marks = compute_marks(self.canvas.document_lines(), self.store.keys())
        self.canvas.apply_highlights(marks)

    @Slot(str)
    def handle_add_note(self, text: str):
        """Append a note tied to the current file and cursor line."""
        if not text.strip():
            self.main_window.show_info("Add Note", "Usage: type the note text to save.")
            return

        file_name = str(self.current_path) if self.current_path is not None else ""
        line = self.canvas.cursor_line_index() + 1
        try:
            self.note_log.append(file_name, line, text)
        except StorageError as e:
            self.main_window.show_error("Note Not Saved", str(e))
            return

        self.main_window.show_status("Note saved")
