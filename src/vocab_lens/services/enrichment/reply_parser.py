"""Reply parsing - turns the lookup service's text reply into structured fields."""

import json
import re
from typing import Dict, Sequence

from vocab_lens.services.enrichment.enrichment_service import MissingFieldError, ParseError

_LEADING_FENCE = re.compile(r"^```[A-Za-z0-9_-]*[ \t]*\r?\n?")
_TRAILING_FENCE = re.compile(r"\r?\n?```$")


def strip_fences(text: str) -> str:
    """Remove surrounding whitespace and a Markdown code fence, if present."""
    text = text.strip()
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def parse_reply(
    raw_text: str,
    required: Sequence[str] = ("translation",),
    optional: Sequence[str] = ("notes",),
) -> Dict[str, str]:
    """
    Decode a JSON object reply.

    Args:
        raw_text: Reply text exactly as returned by the service.
        required: Fields that must be present and hold strings.
        optional: Fields that default to "" when absent but must be strings if present.

    Returns:
        Mapping with every required and optional field.

    Raises:
        ParseError: If the reply is not a JSON object.
        MissingFieldError: If a required field is absent or a field is not a string.
    """
    text = strip_fences(raw_text or "")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Reply is not valid JSON ({e.msg})", raw_text=raw_text) from e

    if not isinstance(data, dict):
        raise ParseError("Reply is not a JSON object", raw_text=raw_text)

    fields = {}
    for name in required:
        value = data.get(name)
        if not isinstance(value, str):
            raise MissingFieldError(f"Reply has no '{name}' string", raw_text=raw_text)
        fields[name] = value.strip()

    for name in optional:
        value = data.get(name)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise MissingFieldError(f"Reply field '{name}' is not a string", raw_text=raw_text)
        fields[name] = value.strip()

    return fields
