"""Character classification helpers for Japanese text."""

from __future__ import annotations

from typing import List

_KANJI_RANGES = (
    (0x4E00, 0x9FFF),
    (0x3400, 0x4DBF),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2B73F),
    (0x2B740, 0x2B81F),
    (0x2B820, 0x2CEAF),
    (0x2CEB0, 0x2EBEF),
    (0x30000, 0x3134F),
    (0xF900, 0xFAFF),
    (0x2F800, 0x2FA1F),
)

_KANJI_MARKS = {"々", "〆", "ヵ", "ヶ"}


def is_kanji(char: str) -> bool:
    if not char:
        return False
    if char in _KANJI_MARKS:
        return True
    code = ord(char)
    return any(low <= code <= high for low, high in _KANJI_RANGES)


def contains_kanji(text: str) -> bool:
    return any(is_kanji(char) for char in text)


def kanji_characters(text: str) -> List[str]:
    """Return the ideographs of ``text`` in order of appearance."""

    return [char for char in text if is_kanji(char)]


__all__ = [
    "contains_kanji",
    "is_kanji",
    "kanji_characters",
]
