"""Natural translation of a looked-up Chinese selection."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class TranslationResult:
    """English rendering of a selection, or the reason there is none."""

    text: str
    model: str
    error: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


class TranslationService(ABC):
    """
    Produces the sentence-level English shown next to the segmented words.

    A lookup is complete without it: failures come back in
    TranslationResult.error and the coordinator leaves natural_translation unset.
    """

    @abstractmethod
    def translate(self, text: str, api_key: str) -> TranslationResult:
        """Translate the selection text using the given Gemini API key."""
        pass
