"""Furigana spans and ``<ruby>`` markup derived from annotations."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Iterable, List, Sequence

from ..core.models import (
    KANJI_ONLY,
    Annotation,
    AnnotationOption,
    FuriganaSpan,
    KanjiFilter,
    KanjiOnly,
    Transliteration,
)
from ..utils.text import kanji_characters

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .annotator import Annotator

RUBY_TEMPLATE = "<ruby>{base}<rt>{reading}</rt></ruby>"
_RUBY_MARKUP = re.compile(r"<ruby>(.*?)<rt>.*?</rt></ruby>", re.DOTALL)


def accepts(annotation: Annotation, options: Iterable[AnnotationOption]) -> bool:
    """Return whether ``annotation`` passes every option, checked in order."""

    for option in options:
        if isinstance(option, KanjiOnly):
            if not annotation.contains_kanji:
                return False
        elif isinstance(option, KanjiFilter):
            kanji = set(kanji_characters(annotation.surface))
            # a token without kanji is always contained in the disallowed set
            if option.strict and not kanji.isdisjoint(option.disallowed):
                return False
            if not option.strict and kanji <= option.disallowed:
                return False
        else:
            raise TypeError(f"Unsupported annotation option: {option!r}")
    return True


def select_spans(annotations: Iterable[Annotation], options: Sequence[AnnotationOption]) -> List[FuriganaSpan]:
    return [
        annotation.furigana_span()
        for annotation in annotations
        if annotation.surface and accepts(annotation, options)
    ]


def insert_ruby(text: str, spans: Iterable[FuriganaSpan]) -> str:
    """Wrap each span of ``text`` in ruby markup, copying the rest verbatim.

    ``spans`` must be ordered and non-overlapping.
    """

    pieces: List[str] = []
    cursor = 0
    for span in spans:
        pieces.append(text[cursor : span.range.start])
        pieces.append(RUBY_TEMPLATE.format(base=text[span.range.as_slice()], reading=span.reading))
        cursor = span.range.end
    pieces.append(text[cursor:])
    return "".join(pieces)


def strip_ruby(markup: str) -> str:
    """Remove ruby markup produced by :func:`insert_ruby`, keeping the base text."""

    return _RUBY_MARKUP.sub(lambda match: match.group(1), markup)


class FuriganaExtractor:
    """Filter an annotator's output into renderable reading spans."""

    def __init__(self, annotator: "Annotator") -> None:
        self.annotator = annotator

    def furigana_annotations(
        self,
        text: str,
        transliteration: Transliteration | None = None,
        options: Sequence[AnnotationOption] = (KANJI_ONLY,),
    ) -> List[FuriganaSpan]:
        return select_spans(self.annotator.tokenize(text, transliteration), options)

    def add_ruby_tags(
        self,
        text: str,
        transliteration: Transliteration | None = None,
        options: Sequence[AnnotationOption] = (KANJI_ONLY,),
    ) -> str:
        """Return ``text`` with ``<ruby>`` tags around every selected token.

        Tags are inserted regardless of surrounding markup, which can disrupt
        scripts or attributes when ``text`` is a full HTML document.
        """

        return insert_ruby(text, self.furigana_annotations(text, transliteration, options))


__all__ = [
    "FuriganaExtractor",
    "RUBY_TEMPLATE",
    "accepts",
    "insert_ruby",
    "select_spans",
    "strip_ruby",
]
