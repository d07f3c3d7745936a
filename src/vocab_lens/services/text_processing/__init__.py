"""Text processing services - normalization, context capture and preview layout."""

from vocab_lens.services.text_processing.text_normalization import (
    emphasize_word,
    extract_context,
    find_folded_spans,
    find_word_spans,
    flatten_lines,
    fold_with_offsets,
    is_word_char,
    normalize_word,
)
from vocab_lens.services.text_processing.preview_layout import (
    LOADING_TEXT,
    compute_preview_size,
    display_width,
    loading_preview_lines,
    word_preview_lines,
)

__all__ = [
    "normalize_word",
    "is_word_char",
    "flatten_lines",
    "extract_context",
    "fold_with_offsets",
    "find_word_spans",
    "find_folded_spans",
    "emphasize_word",
    "display_width",
    "compute_preview_size",
    "word_preview_lines",
    "loading_preview_lines",
    "LOADING_TEXT",
]
