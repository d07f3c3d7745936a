"""Unit tests for SettingsManager."""

import logging
import os
from pathlib import Path

import pytest

from vocab_lens.services import GeminiEnrichmentService, SettingsManager

SETTINGS_VARIABLES = ("GEMINI_API_KEY", "GEMINI_MODEL", "VOCAB_LENS_DATA_DIR", "VOCAB_LENS_LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every setting from the environment for the duration of a test."""
    for name in SETTINGS_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    yield
    # load_dotenv writes straight into os.environ; drop whatever it added
    for name in SETTINGS_VARIABLES:
        os.environ.pop(name, None)


@pytest.fixture
def settings(tmp_path, clean_env):
    """Provide a SettingsManager with an empty .env file."""
    (tmp_path / ".env").write_text("GEMINI_API_KEY=\n")
    return SettingsManager(project_root=tmp_path)


class TestSettingsManagerAPIKey:
    def test_get_api_key_returns_none_when_empty(self, settings):
        assert settings.get_gemini_api_key() is None

    def test_get_api_key_read_from_env_file(self, tmp_path, clean_env):
        (tmp_path / ".env").write_text("GEMINI_API_KEY=test-key-123\n")

        settings = SettingsManager(project_root=tmp_path)

        assert settings.get_gemini_api_key() == "test-key-123"

    def test_get_api_key_strips_whitespace(self, tmp_path, clean_env, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "  test-key  ")

        settings = SettingsManager(project_root=tmp_path)

        assert settings.get_gemini_api_key() == "test-key"

    def test_get_api_key_returns_none_for_whitespace_only(self, tmp_path, clean_env, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "   ")

        settings = SettingsManager(project_root=tmp_path)

        assert settings.get_gemini_api_key() is None

    def test_reload_env_updates_api_key(self, tmp_path, clean_env):
        env_file = tmp_path / ".env"
        env_file.write_text("GEMINI_API_KEY=old-key\n")
        settings = SettingsManager(project_root=tmp_path)
        assert settings.get_gemini_api_key() == "old-key"

        env_file.write_text("GEMINI_API_KEY=new-key\n")
        settings.reload_env()

        assert settings.get_gemini_api_key() == "new-key"

    def test_missing_env_file_returns_none(self, tmp_path, clean_env):
        settings = SettingsManager(project_root=tmp_path)
        assert settings.get_gemini_api_key() is None


class TestSettingsManagerOtherSettings:
    def test_model_defaults_to_service_default(self, settings):
        assert settings.get_model_name() == GeminiEnrichmentService.DEFAULT_MODEL

    def test_model_override(self, settings, monkeypatch):
        monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-flash")
        assert settings.get_model_name() == "gemini-2.5-flash"

    def test_data_dir_override(self, settings, monkeypatch, tmp_path):
        monkeypatch.setenv("VOCAB_LENS_DATA_DIR", str(tmp_path / "data"))

        assert settings.get_data_dir() == tmp_path / "data"
        assert settings.get_vocabulary_path() == tmp_path / "data" / "vocabulary.tsv"
        assert settings.get_notes_path() == tmp_path / "data" / "notes.tsv"

    def test_data_dir_default_is_a_path(self, settings):
        assert isinstance(settings.get_data_dir(), Path)

    def test_log_level_default(self, settings):
        assert settings.get_log_level() == logging.INFO

    def test_log_level_override(self, settings, monkeypatch):
        monkeypatch.setenv("VOCAB_LENS_LOG_LEVEL", "debug")
        assert settings.get_log_level() == logging.DEBUG

    def test_unknown_log_level_falls_back_to_info(self, settings, monkeypatch):
        monkeypatch.setenv("VOCAB_LENS_LOG_LEVEL", "chatty")
        assert settings.get_log_level() == logging.INFO
