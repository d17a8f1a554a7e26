"""Translation services - abstract interface and Gemini implementation."""

from mandarin_reader.services.translation.translation_service import TranslationService, TranslationResult
from mandarin_reader.services.translation.gemini_translation_service import GeminiTranslationService

__all__ = [
    "TranslationService",
    "TranslationResult",
    "GeminiTranslationService",
]
