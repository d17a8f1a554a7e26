"""Text processing services - normalization and pinyin rendering."""

from mandarin_reader.services.text_processing.text_normalization import (
    is_han,
    normalize_chinese_text,
    normalize_text,
)
from mandarin_reader.services.text_processing.pinyin import (
    convert_numbers_in_text,
    detect_tone,
    normalize_pinyin,
    number_to_pinyin,
    numeric_to_tone_mark,
    parse_cedict_pinyin,
)

__all__ = [
    "is_han",
    "normalize_chinese_text",
    "normalize_text",
    "convert_numbers_in_text",
    "detect_tone",
    "normalize_pinyin",
    "number_to_pinyin",
    "numeric_to_tone_mark",
    "parse_cedict_pinyin",
]
