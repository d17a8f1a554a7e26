"""Lazy, process-wide loading of the static dictionary and character resources."""

import json
import logging
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping

from mandarin_reader.core import DataUnavailableError

logger = logging.getLogger(__name__)

CEDICT_FILENAME = "cedict.json"
UNIHAN_FILENAME = "unihan.json"
RADICALS_FILENAME = "radicals.json"
HSK_FILENAME = "hsk.json"

_EMPTY: Mapping[str, Any] = MappingProxyType({})

_cache: Dict[Path, Mapping[str, Any]] = {}
_cache_lock = threading.Lock()


def read_json_resource(path: Path) -> Mapping[str, Any]:
    """Read a JSON object from disk, raising DataUnavailableError on failure."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise DataUnavailableError(f"Failed to load resource {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise DataUnavailableError(f"Resource {path} is not a JSON object")
    return MappingProxyType(data)


def load_resource(path: Path) -> Mapping[str, Any]:
    """
    Return the shared, read-only mapping stored at path.

    The first load is cached for the process lifetime. A failed load is logged
    once and cached as an empty mapping; clear_resource_cache() makes the next
    call retry.
    """
    key = Path(path).resolve()
    with _cache_lock:
        cached = _cache.get(key)
        if cached is not None:
            return cached
        try:
            data = read_json_resource(key)
        except DataUnavailableError as exc:
            logger.error("%s", exc)
            _cache[key] = _EMPTY
            return _EMPTY
        _cache[key] = data
        logger.info("Loaded %s (%d keys)", key.name, len(data))
        return data


def clear_resource_cache() -> None:
    """Drop all cached resources, failed loads included."""
    with _cache_lock:
        _cache.clear()


class ResourceRepository:
    """Resolves the four static resources inside a data directory."""

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = Path(data_dir)

    def cedict(self) -> Mapping[str, Any]:
        return load_resource(self.data_dir / CEDICT_FILENAME)

    def unihan(self) -> Mapping[str, Any]:
        return load_resource(self.data_dir / UNIHAN_FILENAME)

    def radicals(self) -> Mapping[str, Any]:
        return load_resource(self.data_dir / RADICALS_FILENAME)

    def hsk(self) -> Mapping[str, Any]:
        return load_resource(self.data_dir / HSK_FILENAME)

    def preload(self) -> None:
        """Load every resource up front so the first lookup does no I/O."""
        self.cedict()
        self.unihan()
        self.radicals()
        self.hsk()
