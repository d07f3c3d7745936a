"""Vocabulary Store - session-wide mapping from normalized word to its record."""

import logging
from typing import Dict, List, Optional

from vocab_lens.core import VocabRecord
from vocab_lens.io import StorageError, VocabularyRepository
from vocab_lens.services.text_processing import normalize_word

logger = logging.getLogger(__name__)


class VocabularyStore:
    """Application service owning every learned word for the session.

    Constructed once and passed by reference to the coordinators. The whole
    vocabulary is read from the repository on load and rewritten to it after
    every successful mutation.
    """

    def __init__(self, repository: VocabularyRepository) -> None:
        self._repository = repository
        self._records: Dict[str, VocabRecord] = {}

    def load(self) -> "VocabularyStore":
        """Rebuild the in-memory mapping from persisted storage.

        Unreadable storage degrades to an empty vocabulary instead of failing startup.
        """
        try:
            records = self._repository.read_all()
        except StorageError as e:
            logger.warning("Vocabulary could not be loaded, starting empty: %s", e)
            records = []

        self._records = {record.front: record for record in records}
        logger.info("Loaded %d vocabulary record(s)", len(self._records))
        return self

    def get(self, word: str) -> Optional[VocabRecord]:
        return self._records.get(normalize_word(word))

    def put(self, record: VocabRecord) -> None:
        """Insert or replace ``record`` and persist.

        Raises:
            StorageError: If persisting fails; the record stays in memory.
        """
        self._records[record.front] = record
        self.save()

    def remove(self, word: str) -> bool:
        """Remove a word and persist.

        Returns:
            True if the word was known and removed, False if nothing changed.

        Raises:
            StorageError: If persisting fails; the removal stays in memory.
        """
        if self._records.pop(normalize_word(word), None) is None:
            return False
        self.save()
        return True

    def save(self) -> None:
        """Rewrite persisted storage with every record."""
        self._repository.write_all(sorted(self._records.values(), key=lambda record: record.front))

    def keys(self) -> List[str]:
        return list(self._records)

    def records(self) -> List[VocabRecord]:
        return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize_word(word) in self._records
