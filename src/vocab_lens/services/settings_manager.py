"""Settings Manager - Handles API key, model and data location configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from PySide6.QtCore import QStandardPaths

from vocab_lens.services.enrichment import GeminiEnrichmentService


class SettingsManager:
    """
    Manages settings read from the environment.

    Values come from the process environment after loading the .env file in
    the project root. Blank values count as unset.
    """

    VOCABULARY_FILENAME = "vocabulary.tsv"
    NOTES_FILENAME = "notes.tsv"

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        return self._get("GEMINI_API_KEY")

    def get_model_name(self) -> str:
        """Get the Gemini model used for lookups."""
        return self._get("GEMINI_MODEL") or GeminiEnrichmentService.DEFAULT_MODEL

    def get_data_dir(self) -> Path:
        """Directory holding the vocabulary and notes files."""
        configured = self._get("VOCAB_LENS_DATA_DIR")
        if configured:
            return Path(configured).expanduser()
        location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
        if location:
            return Path(location)
        return Path.home() / ".vocab_lens"

    def get_vocabulary_path(self) -> Path:
        return self.get_data_dir() / self.VOCABULARY_FILENAME

    def get_notes_path(self) -> Path:
        return self.get_data_dir() / self.NOTES_FILENAME

    def get_log_level(self) -> int:
        """Root log level; unknown names fall back to INFO."""
        name = (self._get("VOCAB_LENS_LOG_LEVEL") or "INFO").upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    def _get(self, name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
