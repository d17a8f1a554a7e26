"""Dictionary Service - CC-CEDICT segmentation, ranking and character metadata."""

import re
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from mandarin_reader.core import CharacterInfo, DictionaryEntry
from mandarin_reader.io import ResourceRepository
from mandarin_reader.services.text_processing import (
    is_han,
    normalize_chinese_text,
    parse_cedict_pinyin,
)

MAX_WORD_LENGTH = 6
NO_DEFINITION = "(no definition found)"

_REFERENCE = re.compile(r"^(variant of|see |old variant|archaic variant|same as)")
_REGISTER = re.compile(r"\b(archaic|literary|dialect|old-fashioned)\b")
_PRONUNCIATION = re.compile(r"(Taiwan pr\.|also pr\.|Taiwan variant)", re.IGNORECASE)
_ABBREVIATION = re.compile(r"^(abbr\.|abbreviation)")
_EUPHEMISM = re.compile(r"\beuphemism\b")
_VERB_LIKE = re.compile(r"^to [a-z]")
_NOUN_LIKE = re.compile(r"^(a|the) [a-z]")

# One raw CEDICT sense as stored in cedict.json: {"t", "s", "p", "d"}.
Sense = Mapping[str, Any]


def is_reference_definition(definition: str) -> bool:
    """True for glosses that only point at another entry ("variant of 個")."""
    return bool(_REFERENCE.match(definition.lower()))


def score_definition(definition: str) -> int:
    """Relevance score of a gloss; higher sorts first."""
    lower = definition.lower()
    score = 100

    if is_reference_definition(definition):
        score -= 80
    if _REGISTER.search(lower):
        score -= 40
    if _PRONUNCIATION.search(definition):
        score -= 30
    if _ABBREVIATION.match(lower):
        score -= 25
    if _EUPHEMISM.search(lower):
        score -= 20
    if lower.startswith("lit. "):
        score -= 15
    if lower.startswith("fig. "):
        score -= 10
    if definition.startswith("CL:"):
        score -= 35
    if len(definition) < 5:
        score -= 20
    if _VERB_LIKE.match(lower):
        score += 10
    if _NOUN_LIKE.match(lower):
        score += 5

    return score


def select_best_entry(senses: Sequence[Sense]) -> Tuple[Sense, List[str]]:
    """
    Pick the canonical sense and pool the definitions of all senses.

    The canonical sense (used for pinyin) is the one with the most
    non-reference definitions, first one winning ties. Pooled definitions are
    deduplicated in source order, then stably sorted by score.
    """
    best = senses[0]
    best_count = 0
    pooled: List[str] = []

    for sense in senses:
        definitions = list(sense.get("d") or [])
        real_count = sum(1 for d in definitions if not is_reference_definition(d))
        if real_count > best_count:
            best_count = real_count
            best = sense
        for definition in definitions:
            if definition not in pooled:
                pooled.append(definition)

    pooled.sort(key=score_definition, reverse=True)
    return best, pooled


class DictionaryService:
    """
    Segments Chinese text against CC-CEDICT and resolves character metadata.

    Resources come from a ResourceRepository and are loaded on first use; a
    missing resource behaves as an empty index, so every call returns a value.
    """

    def __init__(self, resources: ResourceRepository) -> None:
        self._resources = resources

    def lookup_word(self, text: str) -> Optional[DictionaryEntry]:
        """Exact dictionary lookup of the normalized text."""
        normalized = normalize_chinese_text(text)
        if not normalized:
            return None
        return self._entry_for(self._resources.cedict(), normalized)

    def segment(self, text: str) -> List[DictionaryEntry]:
        """
        Split text into dictionary entries, longest match first.

        A whole-string match is returned alone, ahead of any decomposition.
        Unmatched Han characters become NO_DEFINITION placeholders; unmatched
        non-Han characters are skipped.
        """
        normalized = normalize_chinese_text(text)
        if not normalized:
            return []

        cedict = self._resources.cedict()
        whole = self._entry_for(cedict, normalized)
        if whole is not None:
            return [whole]

        results: List[DictionaryEntry] = []
        pos = 0
        while pos < len(normalized):
            matched = None
            for length in range(min(MAX_WORD_LENGTH, len(normalized) - pos), 0, -1):
                matched = self._entry_for(cedict, normalized[pos:pos + length])
                if matched is not None:
                    break

            if matched is not None:
                results.append(matched)
                pos += len(matched.headword)
                continue

            char = normalized[pos]
            if is_han(char):
                results.append(self._placeholder(char))
            pos += 1

        return results

    def resolve_character(self, char: str) -> CharacterInfo:
        """Radical, stroke count and components of char; degraded on a miss."""
        return self._character_info(self._resources.unihan(), self._resources.radicals(), char)

    @staticmethod
    def _character_info(
        unihan: Mapping[str, Any], radicals: Mapping[str, Any], char: str
    ) -> CharacterInfo:
        data = unihan.get(char)
        if not data:
            return CharacterInfo(character=char, radical=char, stroke_count=0)

        radical = data.get("r") or char
        components = data.get("c")
        return CharacterInfo(
            character=char,
            radical=radical,
            stroke_count=int(data.get("sc") or 0),
            radical_meaning=radicals.get(radical),
            components=list(components) if components else None,
        )

    def resolve_characters(self, word: str) -> List[CharacterInfo]:
        unihan = self._resources.unihan()
        radicals = self._resources.radicals()
        return [self._character_info(unihan, radicals, char) for char in word if is_han(char)]

    def get_hsk_level(self, word: str) -> Optional[int]:
        level = self._resources.hsk().get(word)
        return int(level) if level is not None else None

    @staticmethod
    def _entry_for(cedict: Mapping[str, Any], key: str) -> Optional[DictionaryEntry]:
        senses = cedict.get(key)
        if not senses:
            return None

        best, definitions = select_best_entry(senses)
        pinyin_raw = best.get("p", "")
        return DictionaryEntry(
            headword=key,
            traditional=best.get("t", key),
            simplified=best.get("s", key),
            pinyin_raw=pinyin_raw,
            pinyin_display=parse_cedict_pinyin(pinyin_raw),
            definitions=definitions,
        )

    @staticmethod
    def _placeholder(char: str) -> DictionaryEntry:
        return DictionaryEntry(
            headword=char,
            traditional=char,
            simplified=char,
            pinyin_raw="",
            pinyin_display="",
            definitions=[NO_DEFINITION],
        )
