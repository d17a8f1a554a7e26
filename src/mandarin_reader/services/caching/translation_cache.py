"""Storage for Gemini translations of looked-up selections."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class CacheRecord:
    """Translation of one selection, keyed by its normalize_text() form."""

    normalized_text: str
    lang: str
    translation: str
    model: str
    updated_at: datetime


class TranslationCache(ABC):
    """
    Selection text to translation store used by the lookup coordinator.

    A hit fills LookupResult.natural_translation without calling Gemini again.
    """

    @abstractmethod
    def get(self, normalized_text: str, lang: str = "en") -> Optional[CacheRecord]:
        """Return the stored translation of a normalized selection, or None."""
        pass

    @abstractmethod
    def put(self, record: CacheRecord) -> None:
        """Store a translation, replacing any earlier one for the same selection."""
        pass
