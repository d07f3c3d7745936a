"""Unit tests for the background lookup workers (run synchronously)."""

from unittest.mock import MagicMock

from vocab_lens.services import EnrichmentResult, EnrichmentWorker, TransportError, TranslationWorker


def _collect(worker):
    results = []
    worker.signals.result.connect(results.append)
    return results


def test_enrichment_worker_emits_service_result():
    service = MagicMock()
    service.enrich.return_value = EnrichmentResult(translation="house", notes="")
    worker = EnrichmentWorker(service, word="haus", context="Das Haus", api_key="key-123")
    results = _collect(worker)

    worker.run()

    service.enrich.assert_called_once_with(word="haus", context="Das Haus", api_key="key-123")
    assert results == [EnrichmentResult(translation="house", notes="")]


def test_enrichment_worker_converts_unexpected_exception():
    service = MagicMock()
    service.enrich.side_effect = RuntimeError("boom")
    worker = EnrichmentWorker(service, word="haus", context="", api_key="key-123")
    results = _collect(worker)

    worker.run()

    assert len(results) == 1
    assert isinstance(results[0].error, TransportError)
    assert "boom" in str(results[0].error)


def test_translation_worker_emits_service_result():
    service = MagicMock()
    service.translate.return_value = EnrichmentResult(translation="Good morning")
    worker = TranslationWorker(service, text="Guten Morgen", api_key="key-123")
    results = _collect(worker)
    finished = MagicMock()
    worker.signals.finished.connect(finished)

    worker.run()

    service.translate.assert_called_once_with(text="Guten Morgen", api_key="key-123")
    assert results[0].translation == "Good morning"
    finished.assert_called_once()
