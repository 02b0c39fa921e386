"""Shared fakes standing in for the MeCab engine."""

from __future__ import annotations

from typing import Dict, Iterator, List

import pytest

from mecab_furigana.core.engine import DictionaryProvider
from mecab_furigana.core.models import DictionarySchema, RawToken
from mecab_furigana.services.annotator import Annotator

IPADIC_VOCABULARY = {
    "今日": "名詞,副詞可能,*,*,*,*,今日,キョウ,キョー",
    "は": "助詞,係助詞,*,*,*,*,は,ハ,ワ",
    "晴れ": "名詞,一般,*,*,*,*,晴れ,ハレ,ハレ",
    "です": "助動詞,*,*,*,特殊・デス,基本形,です,デス,デス",
    "コーヒー": "名詞,一般,*,*,*,*,コーヒー,コーヒー,コーヒー",
    "猫": "名詞,一般,*,*,*,*,猫,ネコ,ネコ",
    "が": "助詞,格助詞,一般,*,*,*,が,ガ,ガ",
    "好き": "名詞,形容動詞語幹,*,*,*,*,好き,スキ,スキ",
}

UNIDIC_VOCABULARY = {
    "東京": "名詞,固有名詞,地名,一般,*,*,トウキョウ,トウキョウ,東京,トーキョー,東京,トーキョー,固",
    "で": "助詞,格助詞,*,*,*,*,デ,で,で,デ,で,デ,和",
    "コーヒー": "名詞,普通名詞,一般,*,*,*,コーヒー,コーヒー-coffee,コーヒー,コーヒー,コーヒー,コーヒー,外",
    "を": "助詞,格助詞,*,*,*,*,ヲ,を,を,オ,を,オ,和",
    "飲ん": "動詞,一般,*,*,五段-マ行,連用形-撥音便,ノム,飲む,飲ん,ノン,飲む,ノム,和",
    "だ": "助動詞,*,*,*,助動詞-タ,終止形-一般,タ,た,だ,ダ,た,タ,和",
}


class DummyEngine:
    """Greedy longest-match segmenter over a fixed vocabulary.

    Whitespace is skipped like MeCab does, unknown characters become symbol
    tokens and every analysis ends with an empty-surface boundary node.
    """

    version = "dummy-1.0"

    def __init__(self, vocabulary: Dict[str, str]) -> None:
        self.vocabulary = vocabulary
        self.longest = max(len(word) for word in vocabulary)
        self.calls: List[str] = []
        self.close_count = 0

    def analyze(self, text: str) -> Iterator[RawToken]:
        self.calls.append(text)
        index = 0
        while index < len(text):
            if text[index].isspace():
                index += 1
                continue
            for length in range(min(self.longest, len(text) - index), 0, -1):
                piece = text[index : index + length]
                if piece in self.vocabulary:
                    yield RawToken(piece, tuple(self.vocabulary[piece].split(",")))
                    index += length
                    break
            else:
                yield RawToken(text[index], ("記号", "一般", "*", "*", "*", "*", text[index]))
                index += 1
        yield RawToken("", ("BOS/EOS", "*", "*", "*", "*", "*", "*", "*", "*"))

    def close(self) -> None:
        self.close_count += 1


@pytest.fixture
def ipadic_engine() -> DummyEngine:
    return DummyEngine(IPADIC_VOCABULARY)


@pytest.fixture
def unidic_engine() -> DummyEngine:
    return DummyEngine(UNIDIC_VOCABULARY)


@pytest.fixture
def annotator(ipadic_engine: DummyEngine) -> Iterator[Annotator]:
    provider = DictionaryProvider("/usr/lib/mecab/dic/ipadic", DictionarySchema.STANDARD)
    instance = Annotator(provider, engine_factory=lambda path: ipadic_engine)
    yield instance
    instance.close()


@pytest.fixture
def unidic_annotator(unidic_engine: DummyEngine) -> Iterator[Annotator]:
    provider = DictionaryProvider("/usr/lib/mecab/dic/unidic", DictionarySchema.EXTENDED)
    instance = Annotator(provider, engine_factory=lambda path: unidic_engine)
    yield instance
    instance.close()
