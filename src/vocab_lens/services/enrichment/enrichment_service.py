"""Enrichment Service - abstract word lookup plus its result and error types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class EnrichmentError(Exception):
    """Base class for every recoverable lookup failure."""


class ConfigError(EnrichmentError):
    """No credential is configured for the lookup service."""


class TransportError(EnrichmentError):
    """The call to the lookup service failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(EnrichmentError):
    """The reply could not be decoded into the expected structure."""

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text

    def __str__(self) -> str:
        message = super().__str__()
        if self.raw_text:
            return f"{message}: {self.raw_text}"
        return message


class MissingFieldError(ParseError):
    """The reply decoded but lacked an expected field."""


@dataclass
class EnrichmentResult:
    """Result of an enrichment or translation request."""

    translation: str
    notes: str = ""
    model: Optional[str] = None
    error: Optional[EnrichmentError] = None

    @property
    def is_error(self) -> bool:
        """True if the request failed."""
        return self.error is not None

    @classmethod
    def failure(cls, error: EnrichmentError, model: Optional[str] = None) -> "EnrichmentResult":
        return cls(translation="", notes="", model=model, error=error)


class EnrichmentService(ABC):
    """
    Abstract service for looking up foreign words.

    Implementations (e.g., GeminiEnrichmentService) handle API calls and must
    report every failure through ``EnrichmentResult.error`` instead of raising.
    """

    @abstractmethod
    def enrich(self, word: str, context: str, api_key: Optional[str]) -> EnrichmentResult:
        """
        Translate a word in context and add a short memorization note.

        Args:
            word: Normalized word to look up.
            context: Surrounding text captured at lookup time.
            api_key: Lookup service key; missing keys yield a ConfigError result.

        Returns:
            EnrichmentResult with translation and notes, or an error.
        """
        pass

    @abstractmethod
    def translate(self, text: str, api_key: Optional[str]) -> EnrichmentResult:
        """
        Translate free-form text without any vocabulary side effects.

        Args:
            text: Literal text selected by the reader.
            api_key: Lookup service key; missing keys yield a ConfigError result.

        Returns:
            EnrichmentResult with translation (notes empty), or an error.
        """
        pass
