"""Gemini Enrichment Service - Implements word lookups via Google Gemini API."""

import logging
from typing import Optional, Sequence

import google.genai as genai
from google.genai import errors as genai_errors
from google.genai import types

from vocab_lens.services.enrichment.enrichment_service import (
    ConfigError,
    EnrichmentError,
    EnrichmentResult,
    EnrichmentService,
    MissingFieldError,
    TransportError,
)
from vocab_lens.services.enrichment.reply_parser import parse_reply

logger = logging.getLogger(__name__)


class GeminiEnrichmentService(EnrichmentService):
    """
    Enrichment service using Google Gemini API.

    Uses a low temperature and asks for a JSON reply. Failures are never
    retried here: the reader re-issues the lookup to try again.
    """

    DEFAULT_MODEL = "gemini-2.5-flash-lite"

    ENRICH_PROMPT = """Translate the word "{word}" to English using context below. \
Notes: max 15 words. Only something that helps memorize: etymology, word roots, word structure, or a fun fact. \
No grammar info, no tense, no repeating context. Empty string if nothing useful. Examples:
- Kutsche→carriage: "From Hungarian kocsi, named after the town Kocs"
- Schmetterling→butterfly: "From Schmetten (cream), butterflies were thought to steal milk"
- Angst→fear: "Same word borrowed into English as-is"
- Zeitgeist→spirit of the time: ""
Return ONLY valid JSON: {{"translation":"...","notes":"..."}}

Context:
{context}"""

    TRANSLATE_PROMPT = """You are a translator. Your ONLY job is to translate the exact text between the delimiters below to English. \
Do NOT paraphrase, summarize, or translate any other text. \
Return ONLY valid JSON: {{"translation":"..."}}

===BEGIN===
{text}
===END==="""

    def __init__(self, model_name: Optional[str] = None, temperature: float = 0.2):
        self.model_name = model_name or self.DEFAULT_MODEL
        self.temperature = temperature

    def enrich(self, word: str, context: str, api_key: Optional[str]) -> EnrichmentResult:
        """Look up ``word`` in ``context``; reply must hold translation and notes."""
        prompt = self.ENRICH_PROMPT.format(word=word, context=context)
        logger.debug("Enrichment request for %r (context %d chars)", word, len(context))
        return self._request(prompt, api_key, optional=("notes",))

    def translate(self, text: str, api_key: Optional[str]) -> EnrichmentResult:
        """Translate a free-form selection; reply must hold a translation."""
        prompt = self.TRANSLATE_PROMPT.format(text=text)
        logger.debug("Translation request (%d chars)", len(text))
        return self._request(prompt, api_key, optional=())

    def _request(self, prompt: str, api_key: Optional[str], optional: Sequence[str]) -> EnrichmentResult:
        if not api_key:
            return EnrichmentResult.failure(
                ConfigError("GEMINI_API_KEY not set"), model=self.model_name
            )

        try:
            raw_text = self._generate(prompt, api_key)
            fields = parse_reply(raw_text, required=("translation",), optional=optional)
        except EnrichmentError as e:
            logger.error("Gemini request failed: %s", e)
            return EnrichmentResult.failure(e, model=self.model_name)

        logger.info("Gemini reply received from %s", self.model_name)
        return EnrichmentResult(
            translation=fields["translation"],
            notes=fields.get("notes", ""),
            model=self.model_name,
        )

    def _generate(self, prompt: str, api_key: str) -> str:
        """Send ``prompt`` and return the reply text.

        Raises:
            TransportError: If the client call fails for any reason.
            MissingFieldError: If the response carries no text.
        """
        try:
            client = genai.Client(api_key=api_key)
            response = client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=self.temperature,
                    response_mime_type="application/json",
                ),
            )
        except genai_errors.APIError as e:
            raise TransportError(
                f"Gemini request failed ({e.code}): {e.message or e}", status_code=e.code
            ) from e
        except Exception as e:
            raise TransportError(f"Gemini request failed: {e}") from e

        text = response.text
        if not text:
            raise MissingFieldError("Unexpected Gemini response format: no text in reply")
        return text
