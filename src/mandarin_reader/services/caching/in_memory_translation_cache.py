"""Session translation cache for the lookup coordinator."""

from typing import Optional

from mandarin_reader.services.caching.translation_cache import CacheRecord, TranslationCache


class InMemoryTranslationCache(TranslationCache):
    """Keeps the last max_size selections; older ones are dropped first."""

    def __init__(self, max_size: int = 100):
        self._store: dict[tuple[str, str], CacheRecord] = {}
        self._max_size = max_size

    def get(self, normalized_text: str, lang: str = "en") -> Optional[CacheRecord]:
        return self._store.get((normalized_text, lang))

    def put(self, record: CacheRecord) -> None:
        key = (record.normalized_text, record.lang)
        self._store.pop(key, None)
        self._store[key] = record

        if len(self._store) > self._max_size:
            oldest = next(iter(self._store))
            del self._store[oldest]
