"""Highlighting services - boundary-delimited word matching."""

from vocab_lens.services.highlighting.highlight_engine import compute_marks

__all__ = ["compute_marks"]
