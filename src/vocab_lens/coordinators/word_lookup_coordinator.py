"""Word Lookup Coordinator - Handles lookup, clear and translate commands."""

import logging
from typing import Dict, Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from vocab_lens.core import PendingLookup, VocabRecord
from vocab_lens.io import StorageError
from vocab_lens.services import (
    ConfigError,
    EnrichmentError,
    EnrichmentResult,
    EnrichmentService,
    EnrichmentWorker,
    ParseError,
    SettingsManager,
    TranslationWorker,
    VocabularyStore,
    emphasize_word,
    extract_context,
    flatten_lines,
    loading_preview_lines,
    normalize_word,
    word_preview_lines,
)
from vocab_lens.services.text_processing import LOADING_TEXT
from vocab_lens.ui import MainWindow, TextCanvas

from .preview_overlay_controller import PreviewOverlayController

logger = logging.getLogger(__name__)


class _EnrichmentRequest(QObject):
    """Helper that routes one enrichment result back to the coordinator on the GUI thread."""

    def __init__(self, pending: PendingLookup, parent: "WordLookupCoordinator"):
        super().__init__()
        self.pending = pending
        self.parent_ref = parent

    @Slot(object)
    def on_result(self, result):
        self.parent_ref._handle_enrichment_result(result, self.pending)

    @Slot()
    def on_finished(self):
        self.parent_ref._release_request_helper(self.pending.word, self)


class _TranslationRequest(QObject):
    """Helper that routes one free-form translation result back to the coordinator."""

    def __init__(self, key: str, parent: "WordLookupCoordinator"):
        super().__init__()
        self.key = key
        self.parent_ref = parent

    @Slot(object)
    def on_result(self, result):
        self.parent_ref._handle_translation_result(result, self.key)

    @Slot()
    def on_finished(self):
        self.parent_ref._release_request_helper(self.key, self)


class WordLookupCoordinator(QObject):
    """
    Orchestrates the word lookup workflow.

    Responsibilities:
    - Show cached words immediately, fetch unknown ones in the background
    - Keep at most one request in flight per word
    - Persist fetched words and request highlight recomputation
    - Clear words from the vocabulary
    - Translate free-form selections without touching the vocabulary
    """

    vocabulary_changed = Signal()
    lookup_completed = Signal(str)
    lookup_failed = Signal(str, str)

    TRANSLATION_KEY_PREFIX = "translation:"

    def __init__(
        self,
        canvas: TextCanvas,
        main_window: MainWindow,
        store: VocabularyStore,
        enrichment_service: EnrichmentService,
        settings_manager: SettingsManager,
        overlay: PreviewOverlayController,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        self.canvas = canvas
        self.main_window = main_window
        self.store = store
        self.enrichment_service = enrichment_service
        self.settings_manager = settings_manager
        self.overlay = overlay

        # Thread pool for async API calls
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        # In-flight lookups by word; a second lookup for the same word joins the first
        self._pending: Dict[str, PendingLookup] = {}
        # Keep helpers alive while their workers run in background threads
        self._request_helpers: Dict[str, QObject] = {}
        self._translation_counter = 0

        self.overlay.surface_released.connect(self._on_surface_released)

    def is_pending(self, word: str) -> bool:
        return normalize_word(word) in self._pending

    @Slot()
    def handle_lookup(self) -> None:
        """Look up the word under the cursor."""
        word = normalize_word(self.canvas.word_under_cursor())
        if not word:
            return

        record = self.store.get(word)
        if record is not None:
            self.overlay.open_cached(
                word, word_preview_lines(word, record.back, record.notes), emphasis=len(word)
            )
            return

        pending = self._pending.get(word)
        if pending is not None:
            logger.debug("Lookup for %r already in flight; joining it", word)
            self.overlay.open_loading(word, loading_preview_lines(word), emphasis=len(word))
            pending.interested = True
            return

        api_key = self._current_api_key()
        if not api_key:
            self._report_error(ConfigError("GEMINI_API_KEY not set. Add it to the .env file."))
            return

        context = extract_context(self.canvas.document_lines(), self.canvas.cursor_line_index())

        # Show the placeholder instantly, fill it when the reply arrives
        self.overlay.open_loading(word, loading_preview_lines(word), emphasis=len(word))

        pending = PendingLookup(word=word, context=context)
        self._pending[word] = pending

        worker = EnrichmentWorker(
            enrichment_service=self.enrichment_service,
            word=word,
            context=context,
            api_key=api_key,
        )
        request_helper = _EnrichmentRequest(pending, self)
        self._request_helpers[word] = request_helper
        worker.signals.result.connect(request_helper.on_result)
        worker.signals.finished.connect(request_helper.on_finished)

        logger.info("Looking up %r", word)
        self.thread_pool.start(worker)

    def _handle_enrichment_result(self, result: EnrichmentResult, pending: PendingLookup) -> None:
        """Apply an enrichment reply (runs on the GUI thread)."""
        word = pending.word
        self._pending.pop(word, None)

        if result.is_error:
            if pending.interested:
                self.overlay.release(word)
            self.lookup_failed.emit(word, str(result.error))
            self._report_error(result.error)
            return

        record = VocabRecord(
            front=word,
            back=flatten_lines(result.translation),
            notes=flatten_lines(result.notes),
            context=emphasize_word(flatten_lines(pending.context), word),
        )

        storage_error = None
        try:
            self.store.put(record)
        except StorageError as e:
            storage_error = e

        self.vocabulary_changed.emit()

        if pending.interested:
            self.overlay.show_fresh(
                word, word_preview_lines(word, record.back, record.notes), emphasis=len(word)
            )
        else:
            logger.info("Preview for %r was dismissed; saved without showing", word)

        self.lookup_completed.emit(word)

        if storage_error is not None:
            self._report_storage_error(storage_error)

    @Slot()
    def handle_clear(self) -> None:
        """Forget the word under the cursor; does nothing if it is unknown."""
        word = normalize_word(self.canvas.word_under_cursor())
        if not word:
            return

        try:
            removed = self.store.remove(word)
        except StorageError as e:
            self.vocabulary_changed.emit()
            self._report_storage_error(e)
            return

        if removed:
            logger.info("Cleared %r", word)
            self.vocabulary_changed.emit()

    @Slot()
    def handle_translate_selection(self) -> None:
        """Translate the selected text in a preview; the vocabulary is left alone."""
        text = self.canvas.selected_text()
        if not text.strip():
            return

        api_key = self._current_api_key()
        if not api_key:
            self._report_error(ConfigError("GEMINI_API_KEY not set. Add it to the .env file."))
            return

        self._translation_counter += 1
        key = f"{self.TRANSLATION_KEY_PREFIX}{self._translation_counter}"
        self.overlay.open_loading(key, [LOADING_TEXT])

        worker = TranslationWorker(
            enrichment_service=self.enrichment_service,
            text=text,
            api_key=api_key,
        )
        request_helper = _TranslationRequest(key, self)
        self._request_helpers[key] = request_helper
        worker.signals.result.connect(request_helper.on_result)
        worker.signals.finished.connect(request_helper.on_finished)

        self.thread_pool.start(worker)

    def _handle_translation_result(self, result: EnrichmentResult, key: str) -> None:
        """Apply a free-form translation reply (runs on the GUI thread)."""
        if result.is_error:
            self.overlay.release(key)
            self._report_error(result.error)
            return

        self.overlay.show_fresh(key, result.translation.splitlines() or [""])

    def _release_request_helper(self, key: str, helper: QObject) -> None:
        # A newer request for the same word may already own the slot
        if self._request_helpers.get(key) is helper:
            del self._request_helpers[key]

    @Slot(str)
    def _on_surface_released(self, key: str) -> None:
        pending = self._pending.get(key)
        if pending is not None:
            pending.interested = False

    def _report_error(self, error: EnrichmentError) -> None:
        if isinstance(error, ConfigError):
            title = "API Key Missing"
        elif isinstance(error, ParseError):
            title = "Unreadable Reply"
        else:
            title = "Lookup Failed"
        logger.warning("%s: %s", title, error)
        self.main_window.show_error(title, str(error))

    def _report_storage_error(self, error: StorageError) -> None:
        logger.error("Vocabulary not saved: %s", error)
        self.main_window.show_error(
            "Vocabulary Not Saved",
            f"{error}\n\nChanges are kept for this session only.",
        )

    def _current_api_key(self) -> Optional[str]:
        """Fetch the latest API key from settings."""
        return self.settings_manager.get_gemini_api_key()
