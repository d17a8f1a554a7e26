"""Pinyin rendering - numeric tones to diacritics, numerals to readings."""

import re
from typing import List, Optional

TONE_MARKS = {
    "a": ("ā", "á", "ǎ", "à", "a"),
    "e": ("ē", "é", "ě", "è", "e"),
    "i": ("ī", "í", "ǐ", "ì", "i"),
    "o": ("ō", "ó", "ǒ", "ò", "o"),
    "u": ("ū", "ú", "ǔ", "ù", "u"),
    "ü": ("ǖ", "ǘ", "ǚ", "ǜ", "ü"),
    "v": ("ǖ", "ǘ", "ǚ", "ǜ", "ü"),
}

_SYLLABLE = re.compile(r"^([a-züv]+)(\d)?$", re.IGNORECASE)
_TRAILING_DIGIT = re.compile(r"^(.+?)(\d)$")
_ARABIC_NUMBER = re.compile(r"[0-9]+")

_MARKED_BY_TONE = (
    (1, frozenset("āēīōūǖĀĒĪŌŪǕ")),
    (2, frozenset("áéíóúǘÁÉÍÓÚǗ")),
    (3, frozenset("ǎěǐǒǔǚǍĚǏǑǓǙ")),
    (4, frozenset("àèìòùǜÀÈÌÒÙǛ")),
)

DIGIT_READINGS = ("líng", "yī", "èr", "sān", "sì", "wǔ", "liù", "qī", "bā", "jiǔ")
TEN = "shí"
HUNDRED = "bǎi"
THOUSAND = "qiān"
TEN_THOUSAND = "wàn"
NEGATIVE = "fù"


def _tone_vowel(letters: str) -> Optional[int]:
    """Index of the vowel that carries the tone mark, or None."""
    lower = letters.lower()
    if "a" in lower:
        return lower.index("a")
    if "e" in lower:
        return lower.index("e")
    if "ou" in lower:
        return lower.index("ou")
    positions = [lower.rfind(v) for v in ("i", "o", "u", "ü", "v")]
    rightmost = max(positions)
    return rightmost if rightmost >= 0 else None


def _mark_syllable(syllable: str) -> str:
    match = _SYLLABLE.match(syllable)
    if not match:
        return syllable

    letters, tone_digit = match.groups()
    if tone_digit is None:
        return letters

    tone = int(tone_digit)
    if tone < 1 or tone > 5:
        return syllable

    index = _tone_vowel(letters)
    if index is None:
        return letters

    vowel = letters[index]
    marked = TONE_MARKS[vowel.lower()][tone - 1]
    if vowel.isupper():
        marked = marked.upper()
    return letters[:index] + marked + letters[index + 1:]


def numeric_to_tone_mark(pinyin: str) -> str:
    """
    Convert numeric-tone pinyin to diacritic form, syllable by syllable.

    "ni3 hao3" -> "nǐ hǎo"; "nv3" -> "nǚ"; tone 5 renders the bare vowel.
    Tokens that are not letters plus an optional tone digit pass through.
    """
    return " ".join(_mark_syllable(syllable) for syllable in pinyin.split())


def normalize_pinyin(pinyin: str) -> str:
    """Rewrite the CEDICT ü spellings (u:, v) to ü."""
    return (
        pinyin.replace("u:", "ü")
        .replace("U:", "Ü")
        .replace("v", "ü")
        .replace("V", "Ü")
    )


def parse_cedict_pinyin(pinyin: str) -> str:
    """Render raw CEDICT pinyin (e.g. "nu:3") for display (e.g. "nǚ")."""
    return numeric_to_tone_mark(normalize_pinyin(pinyin))


def detect_tone(syllable: str) -> int:
    """Tone number 1-5 of a numeric or diacritic syllable; 5 when unmarked."""
    numeric = _TRAILING_DIGIT.match(syllable)
    if numeric:
        return int(numeric.group(2))
    for tone, marks in _MARKED_BY_TONE:
        if any(char in marks for char in syllable):
            return tone
    return 5


def _below_ten_thousand(num: int, leading: bool) -> List[str]:
    parts: List[str] = []
    for value, name in ((1000, THOUSAND), (100, HUNDRED)):
        if num >= value:
            parts.extend((DIGIT_READINGS[num // value], name))
            num %= value
            if 0 < num < value // 10:
                parts.append(DIGIT_READINGS[0])

    if num >= 10:
        tens = num // 10
        # A leading "one ten" is read shí, not yī shí.
        if tens > 1 or not (leading and not parts):
            parts.append(DIGIT_READINGS[tens])
        parts.append(TEN)
        num %= 10

    if num > 0:
        parts.append(DIGIT_READINGS[num])
    return parts


def number_to_pinyin(num: int) -> str:
    """
    Read an integer aloud in Mandarin pinyin.

    Skipped internal places insert líng, e.g. 105 -> "yī bǎi líng wǔ".
    """
    if num == 0:
        return DIGIT_READINGS[0]
    if num < 0:
        return f"{NEGATIVE} {number_to_pinyin(-num)}"

    parts: List[str] = []
    if num >= 10000:
        parts.extend(number_to_pinyin(num // 10000).split())
        parts.append(TEN_THOUSAND)
        num %= 10000
        if 0 < num < 1000:
            parts.append(DIGIT_READINGS[0])

    parts.extend(_below_ten_thousand(num, leading=not parts))
    return " ".join(parts)


def convert_numbers_in_text(text: str) -> str:
    """Replace every run of Arabic digits in text with its pinyin reading."""
    return _ARABIC_NUMBER.sub(lambda match: number_to_pinyin(int(match.group(0))), text)
