"""Lookup entities produced by the segmentation pipeline."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class DictionaryEntry:
    """One matched dictionary span with its ranked definitions."""

    headword: str
    """Form actually matched in the input (simplified or traditional)"""

    traditional: str
    simplified: str

    pinyin_raw: str
    """Numeric-tone pinyin as stored in the dictionary (e.g. "ni3 hao3")"""

    pinyin_display: str
    """Diacritic pinyin (e.g. "nǐ hǎo")"""

    definitions: List[str]


@dataclass(frozen=True)
class CharacterInfo:
    character: str
    radical: str
    stroke_count: int = 0
    radical_meaning: Optional[str] = None
    components: Optional[List[str]] = None

    def component_keys(self) -> List[str]:
        """Radical first, then listed components, without duplicates."""
        keys: List[str] = []
        for key in [self.radical, *(self.components or [])]:
            if key and key not in keys:
                keys.append(key)
        return keys


@dataclass
class WordSegment:
    word: str
    pinyin_raw: str
    pinyin_display: str
    definitions: List[str]
    characters: List[CharacterInfo]
    is_already_known: bool = False
    hsk_level: Optional[int] = None


@dataclass
class LookupResult:
    """Assembled result for one lookup; ephemeral, feeds vocabulary saves."""

    original_text: str
    full_pinyin_display: str
    segments: List[WordSegment]
    component_occurrences: Dict[str, List[str]] = field(default_factory=dict)
    natural_translation: Optional[str] = None


@dataclass
class LookupRequest:
    text: str
    context: Optional[str] = None
    source_url: Optional[str] = None
    skip_save: bool = False


@dataclass
class LookupResponse:
    success: bool
    result: Optional[LookupResult] = None
    error: Optional[str] = None
