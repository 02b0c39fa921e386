"""Data models shared across the annotation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Tuple, Union

from ..utils.text import contains_kanji


class Transliteration(str, Enum):
    """Script used to render readings and dictionary forms."""

    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    ROMAJI = "romaji"


class DictionarySchema(str, Enum):
    """Feature layout of the dictionary loaded into the analyzer.

    ``STANDARD`` follows the IPADIC column order, ``EXTENDED`` the UniDic one.
    """

    STANDARD = "standard"
    EXTENDED = "extended"


class PartOfSpeech(Enum):
    NOUN = "noun"
    VERB = "verb"
    PARTICLE = "particle"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    ATTRIBUTIVE = "attributive"
    PREFIX = "prefix"
    INTERJECTION = "interjection"
    CONJUNCTION = "conjunction"
    AUXILIARY_VERB = "auxiliary_verb"
    SYMBOL = "symbol"
    UNKNOWN = "unknown"

    @property
    def description(self) -> str:
        """The native Japanese label of the tag."""

        return _DESCRIPTIONS[self]

    @classmethod
    def from_label(cls, label: Optional[str]) -> "PartOfSpeech":
        if not label:
            return cls.UNKNOWN
        return _LABELS.get(label.strip(), cls.UNKNOWN)


_DESCRIPTIONS = {
    PartOfSpeech.NOUN: "名詞",
    PartOfSpeech.VERB: "動詞",
    PartOfSpeech.PARTICLE: "助詞",
    PartOfSpeech.ADJECTIVE: "形容詞",
    PartOfSpeech.ADVERB: "副詞",
    PartOfSpeech.ATTRIBUTIVE: "連体詞",
    PartOfSpeech.PREFIX: "接頭詞",
    PartOfSpeech.INTERJECTION: "感動詞",
    PartOfSpeech.CONJUNCTION: "接続詞",
    PartOfSpeech.AUXILIARY_VERB: "助動詞",
    PartOfSpeech.SYMBOL: "記号",
    PartOfSpeech.UNKNOWN: "未知",
}

_LABELS = {label: pos for pos, label in _DESCRIPTIONS.items() if pos is not PartOfSpeech.UNKNOWN}
# UniDic spellings of the coarse tags.
_LABELS.update(
    {
        "接頭辞": PartOfSpeech.PREFIX,
        "補助記号": PartOfSpeech.SYMBOL,
        "空白": PartOfSpeech.SYMBOL,
        "代名詞": PartOfSpeech.NOUN,
        "形状詞": PartOfSpeech.ADJECTIVE,
    }
)


@dataclass(frozen=True, slots=True)
class RawToken:
    """A single node as emitted by the analyzer engine."""

    surface: str
    features: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DecodedToken:
    """A raw token whose feature fields have been interpreted."""

    surface: str
    reading: str
    lemma: str
    part_of_speech: PartOfSpeech = PartOfSpeech.UNKNOWN
    features: Tuple[str, ...] = ()
    schema: DictionarySchema = DictionarySchema.STANDARD


@dataclass(frozen=True, slots=True)
class TextRange:
    """Half-open ``[start, end)`` character offsets into the original text."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def as_slice(self) -> slice:
        return slice(self.start, self.end)


@dataclass(frozen=True, slots=True)
class FuriganaSpan:
    """The reading to display over ``range`` of the annotated text."""

    reading: str
    range: TextRange


@dataclass(frozen=True, slots=True)
class KanjiOnly:
    """Only keep tokens containing at least one ideograph."""


@dataclass(frozen=True, slots=True)
class KanjiFilter:
    """Reject tokens based on the ideographs they contain.

    With ``strict`` set any overlap with ``disallowed`` rejects the token.
    Otherwise a token is rejected when every one of its ideographs is
    disallowed, which includes tokens without any ideograph.
    """

    disallowed: FrozenSet[str]
    strict: bool = False

    @classmethod
    def of(cls, characters: Iterable[str], strict: bool = False) -> "KanjiFilter":
        return cls(disallowed=frozenset(characters), strict=strict)


AnnotationOption = Union[KanjiOnly, KanjiFilter]

KANJI_ONLY = KanjiOnly()


@dataclass(frozen=True, slots=True)
class Annotation:
    """A token of the analysed text, located in the original input.

    ``base_reading`` and ``lemma`` are already rendered in ``transliteration``.
    For the extended schema :attr:`reading` is derived from the current-form
    pronunciation field each time it is accessed.
    """

    surface: str
    range: TextRange
    base_reading: str
    lemma: str
    part_of_speech: PartOfSpeech = PartOfSpeech.UNKNOWN
    features: Tuple[str, ...] = field(default=(), repr=False)
    schema: DictionarySchema = DictionarySchema.STANDARD
    transliteration: Transliteration = Transliteration.HIRAGANA

    @property
    def is_extended(self) -> bool:
        return self.schema is DictionarySchema.EXTENDED

    @property
    def reading(self) -> str:
        if self.is_extended:
            pronunciation = self._current_pronunciation()
            if pronunciation:
                return pronunciation
        return self.base_reading

    @property
    def contains_kanji(self) -> bool:
        return contains_kanji(self.surface)

    @property
    def pos(self) -> str:
        """Coarse part-of-speech label.

        The extended schema reports the dictionary's own tag, everything else
        the native label of :attr:`part_of_speech`.
        """

        if self.is_extended:
            from .schema import EXTENDED_SCHEMA

            return EXTENDED_SCHEMA.field(self.features, EXTENDED_SCHEMA.pos_index) or ""
        return self.part_of_speech.description

    @property
    def original_form(self) -> str:
        if self.is_extended:
            from .schema import EXTENDED_SCHEMA

            return EXTENDED_SCHEMA.field(self.features, EXTENDED_SCHEMA.lemma_index) or ""
        return self.lemma

    @property
    def pronunciation(self) -> str:
        if self.is_extended:
            return self._current_pronunciation()
        return self.base_reading

    def _current_pronunciation(self) -> str:
        from .schema import EXTENDED_SCHEMA
        from .transliteration import default_converter

        raw = EXTENDED_SCHEMA.current_reading(self.features)
        if not raw:
            return ""
        return default_converter().convert(raw, self.transliteration)

    def furigana_span(self) -> FuriganaSpan:
        return FuriganaSpan(reading=self.reading, range=self.range)

    def __str__(self) -> str:
        return f"Base: {self.surface}, reading: {self.reading}, POS: {self.part_of_speech.description}"


__all__ = [
    "Annotation",
    "AnnotationOption",
    "DecodedToken",
    "DictionarySchema",
    "FuriganaSpan",
    "KANJI_ONLY",
    "KanjiFilter",
    "KanjiOnly",
    "PartOfSpeech",
    "RawToken",
    "TextRange",
    "Transliteration",
]
