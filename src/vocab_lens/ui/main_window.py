"""Main Window - Application shell with menus and shortcuts."""

from pathlib import Path

from PySide6.QtCore import Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QFileDialog, QInputDialog, QMainWindow, QMessageBox, QVBoxLayout, QWidget


class MainWindow(QMainWindow):
    """Provides the application shell, menus, and user notifications."""

    # Signal emitted when user selects a text file
    file_opened = Signal(Path)
    # Vocabulary commands
    lookup_requested = Signal()
    clear_requested = Signal()
    translate_requested = Signal()
    note_requested = Signal(str)

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Vocab Lens")
        self.setGeometry(100, 100, 900, 700)

        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)

    def _create_menu_bar(self):
        """Create the application menu bar."""
        menu_bar = self.menuBar()

        # File menu
        file_menu = menu_bar.addMenu("&File")

        open_action = QAction("&Open Text...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._on_open_file)
        file_menu.addAction(open_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # Vocabulary menu
        vocabulary_menu = menu_bar.addMenu("&Vocabulary")

        lookup_action = QAction("&Look Up Word", self)
        lookup_action.setShortcut("Ctrl+D")
        lookup_action.triggered.connect(self.lookup_requested.emit)
        vocabulary_menu.addAction(lookup_action)

        clear_action = QAction("&Clear Word", self)
        clear_action.setShortcut("Ctrl+Shift+D")
        clear_action.triggered.connect(self.clear_requested.emit)
        vocabulary_menu.addAction(clear_action)

        vocabulary_menu.addSeparator()

        translate_action = QAction("&Translate Selection", self)
        translate_action.setShortcut("Ctrl+T")
        translate_action.triggered.connect(self.translate_requested.emit)
        vocabulary_menu.addAction(translate_action)

        note_action = QAction("Add &Note...", self)
        note_action.setShortcut("Ctrl+N")
        note_action.triggered.connect(self._on_add_note)
        vocabulary_menu.addAction(note_action)

    def _on_open_file(self):
        """Handle the Open Text menu action."""
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Open Text",
            str(Path.home()),
            "Text files (*.txt *.md);;All files (*)",
        )
        if file_path:
            self.file_opened.emit(Path(file_path))

    def _on_add_note(self):
        """Ask for note text and forward it."""
        text, accepted = QInputDialog.getText(self, "Add Note", "Note:")
        if accepted:
            self.note_requested.emit(text)

    def set_canvas(self, canvas):
        """Set the text canvas widget in the main layout."""
        self.main_layout.addWidget(canvas)

    def show_error(self, title: str, message: str):
        """Display an error message to the user."""
        QMessageBox.critical(self, title, message)

    def show_info(self, title: str, message: str):
        """Display an information message to the user."""
        QMessageBox.information(self, title, message)

    def show_status(self, message: str, timeout_ms: int = 3000):
        """Show a transient message in the status bar."""
        self.statusBar().showMessage(message, timeout_ms)
