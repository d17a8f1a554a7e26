"""Text normalization utilities for segmentation and cache keying."""

import re
import unicodedata

HAN_START = 0x4E00
HAN_END = 0x9FFF

_LEADING_NON_HAN = re.compile(r"^[^\u4e00-\u9fff]+")
_TRAILING_NON_HAN = re.compile(r"[^\u4e00-\u9fff]+$")


def is_han(char: str) -> bool:
    """True if char is a CJK Unified Ideograph (U+4E00..U+9FFF)."""
    return len(char) == 1 and HAN_START <= ord(char) <= HAN_END


def normalize_chinese_text(text: str) -> str:
    """
    Normalize a raw selection before dictionary lookup.

    Rules:
    - Trim leading and trailing whitespace
    - Strip leading and trailing runs of non-Han characters
    - Apply Unicode canonical composition (NFC)
    - Interior non-Han characters are kept; segmentation skips them

    Args:
        text: Raw selected text.

    Returns:
        Normalized text, empty when no Han character remains.
    """
    text = text.strip()
    text = _LEADING_NON_HAN.sub("", text)
    text = _TRAILING_NON_HAN.sub("", text)
    return unicodedata.normalize("NFC", text)


def normalize_text(text: str) -> str:
    """
    Normalize text for consistent translation cache keying.

    Rules:
    - Trim leading and trailing whitespace
    - Collapse runs of whitespace (spaces, tabs, newlines) to single spaces
    - Preserve Chinese characters, punctuation, and emoji as-is

    Args:
        text: Original text to normalize.

    Returns:
        Normalized text string.
    """
    text = text.strip()
    text = re.sub(r'\s+', ' ', text)
    return text
