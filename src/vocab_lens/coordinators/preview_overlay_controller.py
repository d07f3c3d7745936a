"""Preview Overlay Controller - owns the single floating preview surface."""

import logging
from enum import Enum
from typing import List, Optional

from PySide6.QtCore import QObject, Signal, Slot

from vocab_lens.services import compute_preview_size
from vocab_lens.ui import PreviewPopup, TextCanvas

logger = logging.getLogger(__name__)


class OverlayState(Enum):
    CLOSED = "closed"
    SHOWING_CACHED = "showing_cached"
    LOADING = "loading"
    SHOWING_FRESH = "showing_fresh"


class PreviewOverlayController(QObject):
    """
    Keeps at most one preview surface alive and tracks what it shows.

    Every surface belongs to a key (a normalized word, or a one-off key for
    free-form translations). Activating the key that already owns the open
    surface only focuses it; activating another key retargets the same surface.
    The surface is dismissed the first time the canvas cursor moves after it
    was opened.

    Signals:
    - surface_released(str): a key lost the surface (dismissed, retargeted or released)
    """

    surface_released = Signal(str)

    def __init__(self, canvas: TextCanvas):
        super().__init__()
        self.canvas = canvas

        self.state = OverlayState.CLOSED
        self.current_key: Optional[str] = None
        self._surface: Optional[PreviewPopup] = None
        self._dismissal_armed = False

    @property
    def is_open(self) -> bool:
        return self._surface_alive()

    def open_cached(self, key: str, lines: List[str], emphasis: int = 0) -> None:
        """Show already-known content for ``key``."""
        self._activate(key, lines, emphasis, OverlayState.SHOWING_CACHED)

    def open_loading(self, key: str, lines: List[str], emphasis: int = 0) -> None:
        """Show a placeholder for ``key`` while its content is fetched."""
        self._activate(key, lines, emphasis, OverlayState.LOADING)

    def show_fresh(self, key: str, lines: List[str], emphasis: int = 0) -> bool:
        """
        Replace the loading placeholder of ``key`` with fetched content.

        Returns:
            True if the surface was updated; False if it was dismissed or now
            shows something else (the content is then dropped).
        """
        if not self._surface_alive() or self.current_key != key or self.state != OverlayState.LOADING:
            logger.debug("Discarding preview update for %r (state %s)", key, self.state.value)
            return False

        width, height = compute_preview_size(lines)
        self._surface.set_content(lines, width, height, emphasis)
        self.state = OverlayState.SHOWING_FRESH
        return True

    def release(self, key: str) -> None:
        """Close the surface if ``key`` currently owns it."""
        if self.current_key == key and self.state != OverlayState.CLOSED:
            self.close()

    def close(self) -> None:
        """Dismiss the surface from any state."""
        released_key = self.current_key
        if self._surface is not None and self._surface_alive():
            self._surface.dispose()
        self._surface = None
        self.current_key = None
        self.state = OverlayState.CLOSED
        self._disarm_dismissal()
        if released_key is not None:
            self.surface_released.emit(released_key)

    @Slot()
    def handle_navigated_away(self) -> None:
        """Single-shot dismissal triggered by the canvas cursor moving."""
        self._disarm_dismissal()
        if self.state != OverlayState.CLOSED:
            self.close()

    def _activate(self, key: str, lines: List[str], emphasis: int, state: OverlayState) -> None:
        width, height = compute_preview_size(lines)

        if self._surface_alive():
            if key == self.current_key:
                if state == OverlayState.LOADING and self.state != OverlayState.LOADING:
                    # Shown content is stale (e.g. the word was cleared); wait for the new reply
                    self._surface.set_content(lines, width, height, emphasis)
                    self.state = state
                self._surface.focus_surface()
                return

            previous_key = self.current_key
            self._surface.set_content(lines, width, height, emphasis)
            self.current_key = key
            self.state = state
            if previous_key is not None:
                self.surface_released.emit(previous_key)
            return

        stale_key = self.current_key
        self._surface = self.canvas.open_preview(lines, width, height, emphasis)
        self.current_key = key
        if stale_key is not None and stale_key != key:
            self.surface_released.emit(stale_key)
        self.state = state
        self._arm_dismissal()

    def _surface_alive(self) -> bool:
        if self._surface is None:
            return False
        try:
            return bool(self._surface.is_open())
        except RuntimeError:
            # Underlying Qt object already deleted
            self._surface = None
            return False

    def _arm_dismissal(self) -> None:
        if not self._dismissal_armed:
            self.canvas.cursor_moved.connect(self.handle_navigated_away)
            self._dismissal_armed = True

    def _disarm_dismissal(self) -> None:
        if self._dismissal_armed:
            self.canvas.cursor_moved.disconnect(self.handle_navigated_away)
            self._dismissal_armed = False
