"""
Vocab Lens - A reading companion for learners of foreign languages.

This package provides a desktop application for reading plain text with:
- Word lookups (translation plus a short mnemonic) via Google Gemini
- A persistent vocabulary file of looked-up words
- Highlighting of every learned word in the open document
- Free-form translation of selections and positional reading notes
"""

__version__ = "0.1.0"
__author__ = "Pablo-mercado"

# Make key components available at package level
from vocab_lens.core import HighlightMark, PendingLookup, VocabRecord
from vocab_lens.io import DelimitedVocabularyFile

__all__ = [
    "VocabRecord",
    "HighlightMark",
    "PendingLookup",
    "DelimitedVocabularyFile",
]
