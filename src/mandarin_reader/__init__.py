"""
Mandarin Reader - A vocabulary companion for Chinese readers.

This package provides the core of a reading assistant:
- Dictionary segmentation of selected Chinese text (CC-CEDICT)
- Tone-marked pinyin and character metadata
- A personal lexicon replicated across devices in a compact form
"""

__version__ = "0.1.0"

# Make key components available at package level
from mandarin_reader.core import LookupResult, VocabularyEntry, WordSegment
from mandarin_reader.services import DictionaryService, LookupService, VocabularyService

__all__ = [
    "LookupResult",
    "VocabularyEntry",
    "WordSegment",
    "DictionaryService",
    "LookupService",
    "VocabularyService",
]
