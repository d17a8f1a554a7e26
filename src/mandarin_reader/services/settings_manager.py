"""Settings Manager - Handles API key, data locations and logging configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class SettingsManager:
    """
    Manages settings read from a .env file in the project root.

    Paths given relative in the environment are resolved against the
    project root.
    """

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
        key = os.getenv("GEMINI_API_KEY")
        return key.strip() if key and key.strip() else None

    def get_data_dir(self) -> Path:
        """Directory holding cedict.json, unihan.json, radicals.json and hsk.json."""
        return self._path_setting("MANDARIN_READER_DATA_DIR", "data")

    def get_database_path(self) -> Path:
        return self._path_setting("MANDARIN_READER_DB_PATH", "vocabulary.db")

    def get_replica_path(self) -> Path:
        return self._path_setting("MANDARIN_READER_REPLICA_PATH", "vocab_sync.json")

    def get_log_level(self) -> str:
        level = os.getenv("MANDARIN_READER_LOG_LEVEL")
        return level.strip().upper() if level and level.strip() else "INFO"

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    def _path_setting(self, name: str, default: str) -> Path:
        value = os.getenv(name)
        path = Path(value.strip()) if value and value.strip() else Path(default)
        return path if path.is_absolute() else self._project_root / path
