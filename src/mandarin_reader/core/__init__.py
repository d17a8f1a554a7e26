"""Domain layer - Pure entities for lookups and vocabulary."""

from .dictionary_entities import (
    CharacterInfo,
    DictionaryEntry,
    LookupRequest,
    LookupResponse,
    LookupResult,
    WordSegment,
)
from .errors import (
    DataUnavailableError,
    MandarinReaderError,
    QuotaExceededError,
    ReplicaTransportError,
)
from .vocabulary_entities import CompactRecord, ContextEntry, VocabularyEntry, word_id

__all__ = [
    "CharacterInfo",
    "DictionaryEntry",
    "LookupRequest",
    "LookupResponse",
    "LookupResult",
    "WordSegment",
    "CompactRecord",
    "ContextEntry",
    "VocabularyEntry",
    "word_id",
    "MandarinReaderError",
    "DataUnavailableError",
    "QuotaExceededError",
    "ReplicaTransportError",
]
