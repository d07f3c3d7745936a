"""Enrichment services - abstract interface, reply parsing and Gemini implementation."""

from vocab_lens.services.enrichment.enrichment_service import (
    ConfigError,
    EnrichmentError,
    EnrichmentResult,
    EnrichmentService,
    MissingFieldError,
    ParseError,
    TransportError,
)
from vocab_lens.services.enrichment.reply_parser import parse_reply, strip_fences
from vocab_lens.services.enrichment.gemini_enrichment_service import GeminiEnrichmentService

__all__ = [
    "EnrichmentService",
    "EnrichmentResult",
    "EnrichmentError",
    "ConfigError",
    "TransportError",
    "ParseError",
    "MissingFieldError",
    "parse_reply",
    "strip_fences",
    "GeminiEnrichmentService",
]
