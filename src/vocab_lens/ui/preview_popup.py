"""Preview Popup - floating surface showing a word's translation."""

import html
from typing import List

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget


class PreviewPopup(QFrame):
    """
    Borderless tool window placed under the text cursor.

    Size is given in character cells and converted with the label's font
    metrics. It never takes keyboard focus, so the reader keeps typing and
    moving in the canvas.
    """

    PADDING = 8

    def __init__(self, parent: QWidget = None):
        super().__init__(parent, Qt.WindowType.ToolTip | Qt.WindowType.FramelessWindowHint)
        self.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating)
        self.setObjectName("previewPopup")
        self.setStyleSheet(
            "#previewPopup { background: #1e1e2e; border: 1px solid #89b4fa; border-radius: 6px; }"
            "QLabel { color: #cdd6f4; }"
        )

        layout = QVBoxLayout(self)
        layout.setContentsMargins(self.PADDING, self.PADDING // 2, self.PADDING, self.PADDING // 2)

        self.label = QLabel()
        self.label.setTextFormat(Qt.TextFormat.RichText)
        self.label.setWordWrap(True)
        self.label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        layout.addWidget(self.label)

        self.lines: List[str] = []

    def set_content(self, lines: List[str], width: int, height: int, emphasis: int = 0):
        """
        Replace the shown lines and resize.

        Args:
            lines: Text lines to show.
            width: Width in character cells.
            height: Height in wrapped rows.
            emphasis: Number of leading characters of the first line to show in bold.
        """
        self.lines = list(lines)
        self.label.setText(self._to_html(self.lines, emphasis))

        metrics = self.label.fontMetrics()
        pixel_width = width * metrics.horizontalAdvance("0") + 2 * self.PADDING
        pixel_height = height * metrics.lineSpacing() + self.PADDING + 2
        self.setFixedSize(pixel_width, pixel_height)

    def focus_surface(self):
        """Bring the popup back to the reader's attention."""
        self.show()
        self.raise_()

    def is_open(self) -> bool:
        return self.isVisible()

    def dispose(self):
        """Hide the popup and schedule it for deletion."""
        self.hide()
        self.deleteLater()

    def _to_html(self, lines: List[str], emphasis: int) -> str:
        parts = []
        for index, line in enumerate(lines):
            if index == 0 and emphasis > 0:
                parts.append(f"<b>{html.escape(line[:emphasis])}</b>{html.escape(line[emphasis:])}")
            else:
                parts.append(html.escape(line) or "&nbsp;")
        return "<br>".join(parts)
