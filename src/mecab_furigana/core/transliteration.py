"""Script conversion between katakana, hiragana and Hepburn romaji."""

from __future__ import annotations

import re
import threading
from typing import List, Optional, Tuple

from pykakasi import kakasi

from .models import Transliteration

LONG_VOWEL_MARK = "ー"

_KATAKANA_START = ord("ァ")
_KATAKANA_END = ord("ヶ")
_KANA_OFFSET = 0x60

_ITERATION_MARKS = {"ヽ": "ゝ", "ヾ": "ゞ"}
_ITERATION_MARKS_REVERSED = {hira: kata for kata, hira in _ITERATION_MARKS.items()}

_VOWEL_ROWS = (
    ("あ", "あかがさざただなはばぱまやらわぁゃゎゕ"),
    ("い", "いきぎしじちぢにひびぴみりぃゐ"),
    ("う", "うくぐすずつづぬふぶぷむゆるぅゅゔ"),
    ("え", "えけげせぜてでねへべぺめれぇゑゖ"),
    # a long mark after an o-row kana is written with う
    ("う", "おこごそぞとどのほぼぽもよろをぉょ"),
)
_VOWEL_CLASS = {char: vowel for vowel, row in _VOWEL_ROWS for char in row}
_DEFAULT_VOWEL = "う"

_HIRAGANA_RUN = re.compile(r"[ぁ-ゖゝゞ]+")


def vowel_class(hiragana: str) -> str:
    """Return the vowel a following long-vowel mark stands for."""

    if not hiragana:
        return _DEFAULT_VOWEL
    return _VOWEL_CLASS.get(hiragana[-1], _DEFAULT_VOWEL)


def _katakana_char_to_hiragana(char: str) -> str:
    code = ord(char)
    if _KATAKANA_START <= code <= _KATAKANA_END:
        return chr(code - _KANA_OFFSET)
    return _ITERATION_MARKS.get(char, char)


def katakana_to_hiragana(text: str) -> str:
    """Convert katakana to hiragana, resolving long-vowel marks.

    Each ``ー`` becomes the vowel of the character before it (``コーヒー`` ->
    ``こうひい``). A mark with nothing before it is dropped. Characters outside
    the katakana block are copied unchanged.
    """

    result: List[str] = []
    previous_vowel: Optional[str] = None
    for char in text:
        if char == LONG_VOWEL_MARK:
            if previous_vowel is not None:
                result.append(previous_vowel)
            continue
        converted = _katakana_char_to_hiragana(char)
        result.append(converted)
        previous_vowel = vowel_class(converted)
    return "".join(result)


def hiragana_to_katakana(text: str) -> str:
    result: List[str] = []
    for char in text:
        code = ord(char)
        if _KATAKANA_START - _KANA_OFFSET <= code <= _KATAKANA_END - _KANA_OFFSET:
            result.append(chr(code + _KANA_OFFSET))
        else:
            result.append(_ITERATION_MARKS_REVERSED.get(char, char))
    return "".join(result)


class TransliterationConverter:
    """Render kana readings in a :class:`Transliteration` using :mod:`pykakasi`."""

    def __init__(self) -> None:
        self._kakasi = kakasi()

    def convert(self, text: str, mode: Transliteration) -> str:
        if not text:
            return text
        mode = Transliteration(mode)
        if mode is Transliteration.HIRAGANA:
            return katakana_to_hiragana(text)
        if mode is Transliteration.KATAKANA:
            return hiragana_to_katakana(text)
        return self.romanize(text)

    def romanize(self, text: str) -> str:
        """Hepburn romanisation of kana, applied after the hiragana step.

        Long-vowel marks are only meaningful in kana, so they are resolved
        first. Non-kana characters are passed through.
        """

        hiragana = katakana_to_hiragana(text)
        return _HIRAGANA_RUN.sub(lambda match: self._hepburn(match.group()), hiragana)

    def segment(self, text: str) -> List[Tuple[str, str]]:
        """Split ``text`` with kakasi, returning ``(surface, katakana)`` pairs."""

        if not text:
            return []
        return [(entry["orig"], entry["kana"]) for entry in self._kakasi.convert(text)]

    def _hepburn(self, hiragana: str) -> str:
        return "".join(entry["hepburn"] for entry in self._kakasi.convert(hiragana))


_default_converter: Optional[TransliterationConverter] = None
_default_lock = threading.Lock()


def default_converter() -> TransliterationConverter:
    """Process-wide converter used by lazily rendered annotation fields."""

    global _default_converter
    if _default_converter is None:
        with _default_lock:
            if _default_converter is None:
                _default_converter = TransliterationConverter()
    return _default_converter


__all__ = [
    "LONG_VOWEL_MARK",
    "TransliterationConverter",
    "default_converter",
    "hiragana_to_katakana",
    "katakana_to_hiragana",
    "vowel_class",
]
