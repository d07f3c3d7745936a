"""Coordinators - Orchestration layer connecting UI with business logic."""

from .preview_overlay_controller import OverlayState, PreviewOverlayController
from .reader_controller import ReaderController
from .word_lookup_coordinator import WordLookupCoordinator

__all__ = [
    "ReaderController",
    "WordLookupCoordinator",
    "PreviewOverlayController",
    "OverlayState",
]
