"""Vocabulary persistence port - plugin interface for reading/writing all records."""

from abc import ABC, abstractmethod
from typing import Iterable, List

from vocab_lens.core import VocabRecord


class StorageError(Exception):
    """Raised when persisted vocabulary cannot be read or written."""


class VocabularyRepository(ABC):
    """
    Abstract interface over whole-collection persistence.

    The store always hands over every record and always reads every record back,
    so implementations never need per-record updates.
    """

    @abstractmethod
    def read_all(self) -> List[VocabRecord]:
        """
        Read every persisted record.

        Returns:
            List of records; empty when nothing has been persisted yet.

        Raises:
            StorageError: If the backing storage exists but cannot be read.
        """
        pass

    @abstractmethod
    def write_all(self, records: Iterable[VocabRecord]) -> None:
        """
        Replace the persisted collection with ``records``.

        Raises:
            StorageError: If the backing storage cannot be written.
        """
        pass


class InMemoryVocabularyRepository(VocabularyRepository):
    """
    Simple in-memory repository.

    Used for testing and throwaway sessions. No persistence.
    """

    def __init__(self, records: Iterable[VocabRecord] = ()):
        self._records: List[VocabRecord] = list(records)
        self.write_count = 0

    def read_all(self) -> List[VocabRecord]:
        return list(self._records)

    def write_all(self, records: Iterable[VocabRecord]) -> None:
        self._records = list(records)
        self.write_count += 1
