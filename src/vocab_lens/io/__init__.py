"""I/O layer - Data access for vocabulary persistence and note logging."""

from .delimited_vocabulary_file import DelimitedVocabularyFile
from .note_log import NoteLog
from .vocabulary_repository import InMemoryVocabularyRepository, StorageError, VocabularyRepository

__all__ = [
    "VocabularyRepository",
    "InMemoryVocabularyRepository",
    "DelimitedVocabularyFile",
    "NoteLog",
    "StorageError",
]
