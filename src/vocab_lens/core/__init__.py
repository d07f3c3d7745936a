"""Domain layer - Pure entities for vocabulary tracking."""

from .vocabulary_entities import HighlightMark, PendingLookup, VocabRecord

__all__ = ["VocabRecord", "HighlightMark", "PendingLookup"]
