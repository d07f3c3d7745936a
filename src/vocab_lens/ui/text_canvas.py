"""Text Canvas - Plain-text reading surface with vocabulary highlights."""

from typing import List

from PySide6.QtCore import Signal
from PySide6.QtGui import QColor, QTextCharFormat, QTextCursor
from PySide6.QtWidgets import QPlainTextEdit, QTextEdit

from vocab_lens.core import HighlightMark
from vocab_lens.ui.preview_popup import PreviewPopup


def _utf16_length(text: str) -> int:
    """Length of ``text`` in UTF-16 code units, the unit Qt positions use."""
    return len(text.encode("utf-16-le")) // 2


class TextCanvas(QPlainTextEdit):
    """
    Shows the document being read and hosts the preview popup.

    Signals:
    - content_changed: emitted on every text change (highlights are recomputed)
    - cursor_moved: emitted on every cursor move (used to dismiss the preview)
    """

    HIGHLIGHT_COLOR = "#89b4fa"

    content_changed = Signal()
    cursor_moved = Signal()

    def __init__(self):
        super().__init__()
        self.setLineWrapMode(QPlainTextEdit.LineWrapMode.WidgetWidth)

        self._highlight_format = QTextCharFormat()
        self._highlight_format.setFontUnderline(True)
        self._highlight_format.setForeground(QColor(self.HIGHLIGHT_COLOR))

        self.textChanged.connect(self.content_changed.emit)
        self.cursorPositionChanged.connect(self.cursor_moved.emit)

    def set_document(self, text: str):
        """Replace the displayed text."""
        self.setPlainText(text)

    def document_lines(self) -> List[str]:
        return self.toPlainText().split("\n")

    def cursor_line_index(self) -> int:
        return self.textCursor().blockNumber()

    def word_under_cursor(self) -> str:
        cursor = self.textCursor()
        cursor.select(QTextCursor.SelectionType.WordUnderCursor)
        return cursor.selectedText()

    def selected_text(self) -> str:
        # Qt reports paragraph breaks inside a selection as U+2029
        return self.textCursor().selectedText().replace("\u2029", "\n")

    def apply_highlights(self, marks: List[HighlightMark]):
        """Replace every vocabulary highlight with ``marks``."""
        document = self.document()
        selections = []
        for mark in marks:
            block = document.findBlockByNumber(mark.line_index)
            if not block.isValid():
                continue
            text = block.text()
            start = block.position() + _utf16_length(text[:mark.start_col])
            end = start + _utf16_length(text[mark.start_col:mark.end_col])

            cursor = QTextCursor(document)
            cursor.setPosition(start)
            cursor.setPosition(end, QTextCursor.MoveMode.KeepAnchor)

            selection = QTextEdit.ExtraSelection()
            selection.cursor = cursor
            selection.format = self._highlight_format
            selections.append(selection)
        self.setExtraSelections(selections)

    def clear_highlights(self):
        self.setExtraSelections([])

    def highlight_count(self) -> int:
        return len(self.extraSelections())

    def open_preview(self, lines: List[str], width: int, height: int, emphasis: int = 0) -> PreviewPopup:
        """Open a preview popup just below the text cursor."""
        popup = PreviewPopup(self)
        popup.set_content(lines, width, height, emphasis)
        anchor = self.cursorRect().bottomLeft()
        popup.move(self.viewport().mapToGlobal(anchor))
        popup.show()
        return popup
