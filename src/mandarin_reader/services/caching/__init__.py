"""Caching services - abstract interface and in-memory implementation."""

from mandarin_reader.services.caching.translation_cache import TranslationCache, CacheRecord
from mandarin_reader.services.caching.in_memory_translation_cache import InMemoryTranslationCache

__all__ = [
    "TranslationCache",
    "CacheRecord",
    "InMemoryTranslationCache",
]
