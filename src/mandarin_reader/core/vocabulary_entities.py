"""Vocabulary entities used across services, persistence and replication."""

import unicodedata
from dataclasses import dataclass, field
from typing import List, Optional

from .dictionary_entities import CharacterInfo


def word_id(word: str) -> str:
    """Normalized key for a word; the sole identity of a vocabulary record."""
    return unicodedata.normalize("NFC", word)


@dataclass
class ContextEntry:
    sentence: str
    source_url: str
    timestamp: int


@dataclass
class VocabularyEntry:
    id: str
    word: str
    pinyin_display: str
    definitions: List[str]
    lookup_count: int
    first_seen_at: int
    last_seen_at: int
    contexts: List[ContextEntry] = field(default_factory=list)
    characters: List[CharacterInfo] = field(default_factory=list)
    hsk_level: Optional[int] = None


@dataclass(frozen=True)
class CompactRecord:
    """Lossy projection of a VocabularyEntry sent across the replica boundary."""

    word: str
    pinyin_display: str
    definitions: List[str]
    lookup_count: int
    first_seen_at: int
    last_seen_at: int
