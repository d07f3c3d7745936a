"""Async workers for non-blocking lookup calls using Qt threading."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from vocab_lens.services.enrichment import EnrichmentResult, EnrichmentService, TransportError

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals. It is created on the GUI thread, so
    receivers there get results through queued connections.
    """
    finished = Signal()
    result = Signal(object)  # EnrichmentResult


class EnrichmentWorker(QRunnable):
    """
    Worker that runs a word enrichment call in a background thread.

    Always emits exactly one ``result``; unexpected exceptions become a
    TransportError result instead of escaping the thread.
    """

    def __init__(
        self,
        enrichment_service: EnrichmentService,
        word: str,
        context: str,
        api_key: Optional[str],
    ):
        super().__init__()
        self.enrichment_service = enrichment_service
        self.word = word
        self.context = context
        self.api_key = api_key
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the enrichment call in background thread."""
        try:
            result = self.enrichment_service.enrich(
                word=self.word,
                context=self.context,
                api_key=self.api_key,
            )
        except Exception as e:
            logger.exception("Unexpected enrichment error for %r", self.word)
            result = EnrichmentResult.failure(TransportError(f"Unexpected enrichment error: {e}"))
        self.signals.result.emit(result)
        self.signals.finished.emit()


class TranslationWorker(QRunnable):
    """Worker that runs a free-form translation call in a background thread."""

    def __init__(
        self,
        enrichment_service: EnrichmentService,
        text: str,
        api_key: Optional[str],
    ):
        super().__init__()
        self.enrichment_service = enrichment_service
        self.text = text
        self.api_key = api_key
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation call in background thread."""
        try:
            result = self.enrichment_service.translate(
                text=self.text,
                api_key=self.api_key,
            )
        except Exception as e:
            logger.exception("Unexpected translation error")
            result = EnrichmentResult.failure(TransportError(f"Unexpected translation error: {e}"))
        self.signals.result.emit(result)
        self.signals.finished.emit()
