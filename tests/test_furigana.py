from mecab_furigana.core.models import KANJI_ONLY, FuriganaSpan, KanjiFilter, TextRange, Transliteration
from mecab_furigana.services.furigana import FuriganaExtractor, strip_ruby


def test_kanji_only_spans(annotator):
    spans = annotator.furigana_annotations("今日は晴れです")

    assert spans == [
        FuriganaSpan(reading="きょう", range=TextRange(0, 2)),
        FuriganaSpan(reading="はれ", range=TextRange(3, 5)),
    ]


def test_kanji_only_never_returns_kana_tokens(annotator):
    text = "コーヒーが好き、猫は今日です"

    for span in annotator.furigana_annotations(text, options=[KANJI_ONLY]):
        surface = text[span.range.as_slice()]
        assert any("一" <= char <= "鿿" for char in surface)


def test_without_options_every_token_gets_a_span(annotator):
    spans = annotator.furigana_annotations("今日は晴れです", Transliteration.KATAKANA, options=())

    assert [span.reading for span in spans] == ["キョウ", "ハ", "ハレ", "デス"]


def test_strict_filter_rejects_any_disallowed_kanji(annotator):
    spans = annotator.furigana_annotations(
        "今日は晴れです", options=[KANJI_ONLY, KanjiFilter.of("晴", strict=True)]
    )

    assert [span.reading for span in spans] == ["きょう"]


def test_lenient_filter_rejects_fully_disallowed_tokens(annotator):
    partly = annotator.furigana_annotations("今日は晴れです", options=[KanjiFilter.of("今")])
    fully = annotator.furigana_annotations("今日は晴れです", options=[KanjiFilter.of("今日")])

    assert [span.reading for span in partly] == ["きょう", "はれ"]
    assert [span.reading for span in fully] == ["はれ"]


def test_lenient_filter_drops_tokens_without_kanji(annotator):
    spans = annotator.furigana_annotations("今日は晴れです", options=[KanjiFilter.of("雨")])

    assert [span.reading for span in spans] == ["きょう", "はれ"]


def test_strict_filter_keeps_tokens_without_kanji(annotator):
    spans = annotator.furigana_annotations("今日は晴れです", options=[KanjiFilter.of("雨", strict=True)])

    assert [span.reading for span in spans] == ["きょう", "は", "はれ", "です"]


def test_add_ruby_tags_wraps_kanji_tokens(annotator):
    markup = annotator.add_ruby_tags("今日は晴れです")

    assert markup == "<ruby>今日<rt>きょう</rt></ruby>は<ruby>晴れ<rt>はれ</rt></ruby>です"


def test_add_ruby_tags_preserves_surrounding_text(annotator):
    html = '<p class="x">\n  今日は 晴れ です。</p>'

    markup = FuriganaExtractor(annotator).add_ruby_tags(html)

    assert markup.startswith('<p class="x">\n  <ruby>今日<rt>きょう</rt></ruby>は ')
    assert strip_ruby(markup) == html


def test_add_ruby_tags_with_romaji(annotator):
    markup = annotator.add_ruby_tags("晴れ", Transliteration.ROMAJI)

    assert markup == "<ruby>晴れ<rt>hare</rt></ruby>"


def test_text_without_kanji_is_unchanged(annotator):
    assert annotator.add_ruby_tags("はです") == "はです"
