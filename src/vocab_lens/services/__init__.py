"""Services layer - business logic and external integrations."""

from vocab_lens.services.vocabulary_store import VocabularyStore
from vocab_lens.services.settings_manager import SettingsManager

# Text processing services
from vocab_lens.services.text_processing import (
    compute_preview_size,
    emphasize_word,
    extract_context,
    flatten_lines,
    loading_preview_lines,
    normalize_word,
    word_preview_lines,
)

# Highlighting services
from vocab_lens.services.highlighting import compute_marks

# Enrichment services
from vocab_lens.services.enrichment import (
    ConfigError,
    EnrichmentError,
    EnrichmentResult,
    EnrichmentService,
    GeminiEnrichmentService,
    MissingFieldError,
    ParseError,
    TransportError,
)
from vocab_lens.services.api_workers import EnrichmentWorker, TranslationWorker, WorkerSignals

__all__ = [
	"VocabularyStore",
	"SettingsManager",
	"normalize_word",
	"flatten_lines",
	"extract_context",
	"emphasize_word",
	"compute_preview_size",
	"word_preview_lines",
	"loading_preview_lines",
	"compute_marks",
	"EnrichmentService",
	"EnrichmentResult",
	"EnrichmentError",
	"ConfigError",
	"TransportError",
	"ParseError",
	"MissingFieldError",
	"GeminiEnrichmentService",
	"EnrichmentWorker",
	"TranslationWorker",
	"WorkerSignals",
]
