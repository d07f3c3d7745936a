"""Text normalization utilities for consistent vocabulary keying."""

from typing import List, Tuple


def normalize_word(word: str) -> str:
    """
    Normalize a word for use as a vocabulary key.

    Rules:
    - Trim leading and trailing whitespace
    - Case-fold (so "Straße", "STRASSE" and "strasse" share one key)

    Args:
        word: Word as it appears in the document.

    Returns:
        Normalized key; empty string if the word was blank.
    """
    return word.strip().casefold()


def is_word_char(char: str) -> bool:
    """True for characters that belong to a word (letters, digits, underscore)."""
    return char.isalnum() or char == "_"


def flatten_lines(text: str) -> str:
    """Replace every line break with a single space."""
    return text.replace("\r\n", " ").replace("\r", " ").replace("\n", " ")


def extract_context(lines: List[str], line_index: int, radius: int = 1) -> str:
    """
    Capture the lines surrounding a lookup position.

    Args:
        lines: Document lines.
        line_index: 0-based line of the cursor.
        radius: Number of lines to include above and below.

    Returns:
        The selected lines joined with newlines.
    """
    if not lines:
        return ""
    start = max(0, line_index - radius)
    end = min(len(lines), line_index + radius + 1)
    return "\n".join(lines[start:end])


def fold_with_offsets(text: str) -> Tuple[str, List[int]]:
    """
    Case-fold ``text`` and remember where each folded character came from.

    Case folding can change length ("ß" becomes "ss"), so ``offsets[i]`` gives the
    index in ``text`` of folded character ``i``. A trailing sentinel equal to
    ``len(text)`` is appended.
    """
    folded_parts = []
    offsets = []
    for index, char in enumerate(text):
        folded_char = char.casefold()
        folded_parts.append(folded_char)
        offsets.extend([index] * len(folded_char))
    offsets.append(len(text))
    return "".join(folded_parts), offsets


def find_word_spans(text: str, key: str) -> List[Tuple[int, int]]:
    """
    Find every boundary-delimited occurrence of ``key`` in ``text``.

    ``key`` must already be normalized. Matching is a literal, case-insensitive
    substring search; an occurrence only counts if the characters on either side
    (or the line edges) are not word characters. Scanning always resumes after
    the end of the candidate, so occurrences never overlap.

    Returns:
        (start, end) index pairs into the original ``text``; end is exclusive.
    """
    folded, offsets = fold_with_offsets(text)
    return find_folded_spans(folded, offsets, key)


def find_folded_spans(folded: str, offsets: List[int], key: str) -> List[Tuple[int, int]]:
    """Boundary-delimited search over text already passed through ``fold_with_offsets``."""
    if not key:
        return []

    spans = []
    start = 0
    while True:
        found = folded.find(key, start)
        if found < 0:
            break
        end = found + len(key)
        before = folded[found - 1] if found > 0 else " "
        after = folded[end] if end < len(folded) else " "
        if not is_word_char(before) and not is_word_char(after):
            spans.append((offsets[found], offsets[end - 1] + 1))
        start = end
    return spans


def emphasize_word(text: str, word: str) -> str:
    """
    Wrap every boundary-delimited, case-insensitive occurrence of ``word`` in <b> tags.

    Example:
        >>> emphasize_word("Das ist eine Verneinung.", "verneinung")
        'Das ist eine <b>Verneinung</b>.'
    """
    spans = find_word_spans(text, normalize_word(word))
    for start, end in reversed(spans):
        text = f"{text[:start]}<b>{text[start:end]}</b>{text[end:]}"
    return text
