"""Unit tests for SettingsManager."""

import os
import tempfile
from pathlib import Path

import pytest

from mandarin_reader.services import SettingsManager

SETTINGS_VARS = (
    "GEMINI_API_KEY",
    "MANDARIN_READER_DATA_DIR",
    "MANDARIN_READER_DB_PATH",
    "MANDARIN_READER_REPLICA_PATH",
    "MANDARIN_READER_LOG_LEVEL",
)


@pytest.fixture
def temp_env_dir():
    """Provide a temporary directory for .env files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def clean_env():
    """Remove settings variables from the environment for the test's duration."""
    saved = {name: os.environ.pop(name, None) for name in SETTINGS_VARS}
    yield
    for name, value in saved.items():
        if value is not None:
            os.environ[name] = value
        else:
            os.environ.pop(name, None)


@pytest.fixture
def settings(temp_env_dir, clean_env):
    """Provide a SettingsManager with an empty .env file."""
    env_file = temp_env_dir / ".env"
    env_file.write_text("GEMINI_API_KEY=\n")
    return SettingsManager(project_root=temp_env_dir)


class TestSettingsManagerAPIKey:
    """Tests for API key management from .env file."""

    def test_get_api_key_returns_none_when_empty(self, settings):
        """API key should be None when .env has empty value."""
        assert settings.get_gemini_api_key() is None

    def test_get_api_key_returns_value_from_env_file(self, temp_env_dir, clean_env):
        """API key should be read from .env file."""
        (temp_env_dir / ".env").write_text("GEMINI_API_KEY=test-key-123\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() == "test-key-123"

    def test_get_api_key_strips_whitespace(self, temp_env_dir, clean_env):
        """API key should strip leading/trailing whitespace."""
        os.environ["GEMINI_API_KEY"] = "  test-key  "

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() == "test-key"

    def test_get_api_key_returns_none_for_whitespace_only(self, temp_env_dir, clean_env):
        os.environ["GEMINI_API_KEY"] = "   "

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() is None

    def test_reload_env_updates_api_key(self, temp_env_dir, clean_env):
        """reload_env should pick up changes to .env file."""
        env_file = temp_env_dir / ".env"
        env_file.write_text("GEMINI_API_KEY=old-key\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() == "old-key"

        env_file.write_text("GEMINI_API_KEY=new-key\n")
        settings.reload_env()
        assert settings.get_gemini_api_key() == "new-key"

    def test_missing_env_file_returns_none(self, temp_env_dir, clean_env):
        """SettingsManager should handle missing .env file gracefully."""
        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_gemini_api_key() is None


class TestSettingsManagerPaths:
    """Tests for data, database and replica locations."""

    def test_defaults_resolve_against_project_root(self, settings, temp_env_dir):
        assert settings.get_data_dir() == temp_env_dir / "data"
        assert settings.get_database_path() == temp_env_dir / "vocabulary.db"
        assert settings.get_replica_path() == temp_env_dir / "vocab_sync.json"

    def test_relative_override_is_resolved_against_root(self, temp_env_dir, clean_env):
        (temp_env_dir / ".env").write_text("MANDARIN_READER_DATA_DIR=resources/zh\n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_data_dir() == temp_env_dir / "resources" / "zh"

    def test_absolute_override_is_kept(self, temp_env_dir, clean_env, tmp_path):
        target = tmp_path / "elsewhere" / "vocab.db"
        os.environ["MANDARIN_READER_DB_PATH"] = str(target)

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_database_path() == target


class TestSettingsManagerLogLevel:
    def test_default_level(self, settings):
        assert settings.get_log_level() == "INFO"

    def test_level_is_uppercased(self, temp_env_dir, clean_env):
        (temp_env_dir / ".env").write_text("MANDARIN_READER_LOG_LEVEL= debug \n")

        settings = SettingsManager(project_root=temp_env_dir)
        assert settings.get_log_level() == "DEBUG"
