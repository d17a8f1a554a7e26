"""Services layer - business logic and external integrations."""

from mandarin_reader.services.dictionary_service import (
	NO_DEFINITION,
	DictionaryService,
	score_definition,
	select_best_entry,
)
from mandarin_reader.services.component_index import ComponentIndexService
from mandarin_reader.services.vocabulary_service import VocabularyService
from mandarin_reader.services.lookup_service import LookupService
from mandarin_reader.services.settings_manager import SettingsManager

# Text processing services
from mandarin_reader.services.text_processing import (
	convert_numbers_in_text,
	normalize_chinese_text,
	normalize_text,
	number_to_pinyin,
	numeric_to_tone_mark,
	parse_cedict_pinyin,
)

# Translation services
from mandarin_reader.services.translation import TranslationService, TranslationResult, GeminiTranslationService

# Caching services
from mandarin_reader.services.caching import TranslationCache, CacheRecord, InMemoryTranslationCache

# Replication services
from mandarin_reader.services.replication import ReplicaStore, InMemoryReplicaStore, FileReplicaStore

__all__ = [
	"NO_DEFINITION",
	"DictionaryService",
	"score_definition",
	"select_best_entry",
	"ComponentIndexService",
	"VocabularyService",
	"LookupService",
	"SettingsManager",
	"convert_numbers_in_text",
	"normalize_chinese_text",
	"normalize_text",
	"number_to_pinyin",
	"numeric_to_tone_mark",
	"parse_cedict_pinyin",
	"TranslationService",
	"TranslationResult",
	"GeminiTranslationService",
	"TranslationCache",
	"CacheRecord",
	"InMemoryTranslationCache",
	"ReplicaStore",
	"InMemoryReplicaStore",
	"FileReplicaStore",
]
