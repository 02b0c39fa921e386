import pytest

from mecab_furigana.core.models import Transliteration
from mecab_furigana.core.transliteration import (
    TransliterationConverter,
    hiragana_to_katakana,
    katakana_to_hiragana,
    vowel_class,
)


class RecordingKakasi:
    def __init__(self) -> None:
        self.inputs: list[str] = []

    def convert(self, text: str):
        self.inputs.append(text)
        return [{"orig": text, "hira": text, "kana": text, "hepburn": f"<{text}>"}]


@pytest.mark.parametrize(
    ("katakana", "expected"),
    [
        ("コーヒー", "こうひい"),
        ("ラーメン", "らあめん"),
        ("ケーキ", "けえき"),
        ("スープ", "すうぷ"),
        ("ボール", "ぼうる"),
        ("キョー", "きょう"),
        ("トーキョー", "とうきょう"),
    ],
)
def test_long_vowel_mark_takes_the_previous_vowel(katakana, expected):
    assert katakana_to_hiragana(katakana) == expected


def test_leading_long_vowel_mark_is_dropped():
    assert katakana_to_hiragana("ーアー") == "ああ"


def test_consecutive_long_vowel_marks_repeat_the_vowel():
    assert katakana_to_hiragana("ワーー") == "わああ"


def test_characters_outside_katakana_pass_through():
    assert katakana_to_hiragana("漢字とABC、123") == "漢字とABC、123"
    assert katakana_to_hiragana("ヴァヽ") == "ゔぁゝ"


def test_vowel_class_folds_o_row_to_u():
    assert vowel_class("こ") == "う"
    assert vowel_class("き") == "い"
    assert vowel_class("ゃ") == "あ"
    assert vowel_class("ん") == "う"
    assert vowel_class("") == "う"


def test_hiragana_to_katakana_keeps_other_characters():
    assert hiragana_to_katakana("きょうは晴れ") == "キョウハ晴レ"
    assert hiragana_to_katakana("ゔゝー") == "ヴヽー"


def test_convert_dispatches_on_mode():
    converter = TransliterationConverter()

    assert converter.convert("キョウ", Transliteration.HIRAGANA) == "きょう"
    assert converter.convert("きょう", Transliteration.KATAKANA) == "キョウ"
    assert converter.convert("キョウ", Transliteration.KATAKANA) == "キョウ"
    assert converter.convert("", Transliteration.ROMAJI) == ""


def test_romaji_uses_hepburn():
    converter = TransliterationConverter()

    assert converter.convert("ネコ", Transliteration.ROMAJI) == "neko"
    assert converter.convert("すし", "romaji") == "sushi"


def test_romaji_resolves_long_vowels_before_romanising():
    converter = TransliterationConverter()
    recorder = RecordingKakasi()
    converter._kakasi = recorder

    result = converter.convert("コーヒーとABC", Transliteration.ROMAJI)

    assert recorder.inputs == ["こうひいと"]
    assert result == "<こうひいと>ABC"


def test_segment_returns_surface_and_katakana_pairs():
    converter = TransliterationConverter()
    converter._kakasi = RecordingKakasi()

    assert converter.segment("東京") == [("東京", "東京")]
    assert converter.segment("") == []
