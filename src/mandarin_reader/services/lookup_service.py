"""Lookup Service - assembles a LookupResult and records it in the lexicon."""

import logging
from typing import Dict, List, Optional

from mandarin_reader.core import (
    LookupRequest,
    LookupResponse,
    LookupResult,
    VocabularyEntry,
    WordSegment,
)
from mandarin_reader.services.component_index import ComponentIndexService
from mandarin_reader.services.dictionary_service import DictionaryService
from mandarin_reader.services.text_processing import normalize_chinese_text
from mandarin_reader.services.vocabulary_service import VocabularyService

logger = logging.getLogger(__name__)


class LookupService:
    """
    Runs the lookup pipeline: segmentation, character metadata, component
    index updates and vocabulary saves.
    """

    def __init__(
        self,
        dictionary: DictionaryService,
        vocabulary: VocabularyService,
        component_index: ComponentIndexService,
    ) -> None:
        self._dictionary = dictionary
        self._vocabulary = vocabulary
        self._component_index = component_index

    def lookup(
        self,
        text: str,
        context: Optional[str] = None,
        source_url: Optional[str] = None,
        skip_save: bool = False,
    ) -> LookupResult:
        """
        Look up text and return segments in reading order.

        Args:
            text: Raw selected text; may contain punctuation or non-Chinese.
            context: Sentence the selection came from, stored with the word.
            source_url: Where the sentence was read.
            skip_save: Run the pipeline and update the component index but
                leave the vocabulary untouched (re-display of a prior result).
        """
        segments: List[WordSegment] = []
        for entry in self._dictionary.segment(text):
            segments.append(
                WordSegment(
                    word=entry.headword,
                    pinyin_raw=entry.pinyin_raw,
                    pinyin_display=entry.pinyin_display,
                    definitions=entry.definitions,
                    characters=self._dictionary.resolve_characters(entry.headword),
                    is_already_known=self._vocabulary.is_word_known(entry.headword),
                    hsk_level=self._dictionary.get_hsk_level(entry.headword),
                )
            )

        occurrences: Dict[str, List[str]] = {}
        for segment in segments:
            for info in segment.characters:
                occurrences.update(self._component_index.record_character(info))

            if not skip_save:
                self._vocabulary.save_or_update(
                    segment.word,
                    segment.pinyin_display,
                    segment.definitions,
                    segment.characters,
                    context=context,
                    source_url=source_url,
                    hsk_level=segment.hsk_level,
                )

        return LookupResult(
            original_text=normalize_chinese_text(text),
            full_pinyin_display=" ".join(s.pinyin_display for s in segments),
            segments=segments,
            component_occurrences=occurrences,
        )

    def handle_request(self, request: LookupRequest) -> LookupResponse:
        """Lookup call boundary: never raises, failures become error responses."""
        try:
            result = self.lookup(
                request.text,
                context=request.context,
                source_url=request.source_url,
                skip_save=request.skip_save,
            )
        except Exception as exc:
            logger.exception("Lookup failed for %r", request.text)
            return LookupResponse(success=False, error=str(exc))
        return LookupResponse(success=True, result=result)

    def get_vocabulary(self, order_by: Optional[str] = None) -> List[VocabularyEntry]:
        """Fetch-all boundary; order_by as VocabularyService.get_sorted."""
        if order_by is None:
            return self._vocabulary.get_all()
        return self._vocabulary.get_sorted(order_by)

    def get_word(self, word: str) -> Optional[VocabularyEntry]:
        return self._vocabulary.get_entry(word)
