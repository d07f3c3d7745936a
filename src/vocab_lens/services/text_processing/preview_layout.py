"""Preview layout - content lines and cell size for the floating preview surface."""

import math
import unicodedata
from typing import List, Tuple

MAX_PREVIEW_WIDTH = 60
LOADING_TEXT = "Loading..."
ARROW = " → "


def display_width(text: str) -> int:
    """Number of terminal-style cells ``text`` occupies (wide CJK characters count two)."""
    width = 0
    for char in text:
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def compute_preview_size(lines: List[str], max_width: int = MAX_PREVIEW_WIDTH) -> Tuple[int, int]:
    """
    Compute the (width, height) in cells needed to show ``lines`` with wrapping.

    Width is the widest line plus two cells of padding, capped at ``max_width``.
    Height counts how many wrapped rows each line needs (at least one per line).
    """
    widest = max((display_width(line) for line in lines), default=0)
    width = min(widest + 2, max_width)
    height = sum(max(1, math.ceil(display_width(line) / width)) for line in lines)
    return width, height


def word_preview_lines(word: str, translation: str, notes: str = "") -> List[str]:
    """Lines shown for a known word: "word → translation", then the notes if any."""
    lines = [f"{word}{ARROW}{translation}"]
    if notes:
        lines.extend(["", notes])
    return lines


def loading_preview_lines(word: str) -> List[str]:
    """Placeholder shown while a word is being looked up."""
    return [f"{word}{ARROW}..."]
