"""Main entry point for the vocab lens application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from vocab_lens.coordinators import PreviewOverlayController, ReaderController, WordLookupCoordinator
from vocab_lens.io import DelimitedVocabularyFile, NoteLog
from vocab_lens.services import GeminiEnrichmentService, SettingsManager, VocabularyStore
from vocab_lens.ui import MainWindow, TextCanvas


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Vocab Lens")
    app.setOrganizationName("VocabLens")

    # 2. Configuration and logging
    settings = SettingsManager()
    logging.basicConfig(
        level=settings.get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 3. Initialize Infrastructure
    store = VocabularyStore(DelimitedVocabularyFile(settings.get_vocabulary_path())).load()
    note_log = NoteLog(settings.get_notes_path())
    enrichment_service = GeminiEnrichmentService(model_name=settings.get_model_name())

    # 4. Construct UI
    canvas = TextCanvas()
    main_window = MainWindow()
    main_window.set_canvas(canvas)

    # 5. Instantiate Coordinators (Dependency Injection)
    overlay = PreviewOverlayController(canvas)
    reader_controller = ReaderController(
        main_window=main_window,
        canvas=canvas,
        store=store,
        note_log=note_log,
    )
    lookup_coordinator = WordLookupCoordinator(
        canvas=canvas,
        main_window=main_window,
        store=store,
        enrichment_service=enrichment_service,
        settings_manager=settings,
        overlay=overlay,
    )

    # 6. Signal Wiring (Connect UI signals to Controller slots)
    main_window.file_opened.connect(reader_controller.handle_file_opened)
    main_window.note_requested.connect(reader_controller.handle_add_note)
    main_window.lookup_requested.connect(lookup_coordinator.handle_lookup)
    main_window.clear_requested.connect(lookup_coordinator.handle_clear)
    main_window.translate_requested.connect(lookup_coordinator.handle_translate_selection)
    canvas.content_changed.connect(reader_controller.refresh_highlights)
    lookup_coordinator.vocabulary_changed.connect(reader_controller.refresh_highlights)

    # 7. Open a file passed on the command line
    arguments = app.arguments()[1:]
    if arguments:
        reader_controller.handle_file_opened(arguments[0])

    # 8. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
