"""UI layer - PySide6 presentation components."""

from .main_window import MainWindow
from .preview_popup import PreviewPopup
from .text_canvas import TextCanvas

__all__ = ["MainWindow", "TextCanvas", "PreviewPopup"]
