"""Orchestration of the engine -> decoding -> alignment -> cache pipeline."""

from __future__ import annotations

import logging
import threading
import weakref
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..config import AnnotatorConfig, CacheConfig
from ..core.cache import AnnotationCache, CacheInfo
from ..core.engine import DictionaryProvider, EngineFactory, InitializationError, MecabEngine
from ..core.models import (
    KANJI_ONLY,
    Annotation,
    AnnotationOption,
    DecodedToken,
    FuriganaSpan,
    TextRange,
    Transliteration,
)
from ..core.ranges import RangeMapper
from ..core.tokenization import EngineTokenSource, SegmenterTokenSource, TokenDecoder, TokenSource
from ..core.transliteration import TransliterationConverter
from .furigana import FuriganaExtractor

logger = logging.getLogger(__name__)


@dataclass
class AnnotatorDependencies:
    """Convenience container for the collaborating services."""

    source: TokenSource
    converter: TransliterationConverter


class Annotator:
    """Tokenise Japanese text into annotations aligned with the input.

    The token source is chosen once at construction: ``"mecab"`` opens the
    dictionary described by ``dictionary`` through ``engine_factory``,
    ``"segmenter"`` uses the lightweight kakasi segmenter. Either way callers
    receive the same :class:`Annotation` objects.

    Instances are not thread safe; the cache update is not atomic against
    concurrent calls. Use one instance per thread or serialise access.
    """

    def __init__(
        self,
        dictionary: DictionaryProvider | None = None,
        config: AnnotatorConfig | None = None,
        deps: AnnotatorDependencies | None = None,
        engine_factory: EngineFactory | None = None,
    ) -> None:
        self.config = config or AnnotatorConfig()
        self.dictionary = dictionary
        self.converter = deps.converter if deps else TransliterationConverter()
        self._source = deps.source if deps else self._build_source(
            self.config.backend, engine_factory or MecabEngine.open
        )
        # Registered only once the source exists, so a failed open releases nothing.
        self._finalizer = weakref.finalize(self, self._source.close)
        self._cache = AnnotationCache(self.config.cache.max_size)
        self._mapper = RangeMapper()

    def _build_source(self, backend: str, engine_factory: EngineFactory) -> TokenSource:
        backend = backend.lower()
        if backend == "segmenter":
            return SegmenterTokenSource(self.converter)
        if backend != "mecab":
            raise ValueError(f"Unknown tokenizer backend: {backend!r}")
        if self.dictionary is None:
            raise InitializationError("The MeCab backend requires a dictionary provider.")
        engine = engine_factory(self.dictionary.path)
        return EngineTokenSource(
            engine,
            TokenDecoder(self.dictionary.schema),
            normalization=self.config.normalization,
        )

    @property
    def version(self) -> str:
        """Version of the underlying engine."""

        return self._source.version

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def tokenize(self, text: str, transliteration: Transliteration | None = None) -> List[Annotation]:
        """Return the annotations of ``text`` with readings in ``transliteration``.

        Readings and lemmas are converted as kana; other characters pass
        through unchanged, so in romaji mode a lemma such as ``飲む`` becomes
        ``飲mu``. Use :attr:`Annotation.reading` for a fully romanised form.
        """

        mode = Transliteration(transliteration or self.config.transliteration)
        key = self._cache.key(text, mode)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for %r (%s)", text[:20], mode.value)
            return list(cached)
        logger.debug("Cache miss for %r (%s)", text[:20], mode.value)
        annotations = self._annotate(text, mode)
        self._cache.put(key, annotations)
        return annotations

    def furigana_annotations(
        self,
        text: str,
        transliteration: Transliteration | None = None,
        options: Sequence[AnnotationOption] = (KANJI_ONLY,),
    ) -> List[FuriganaSpan]:
        return FuriganaExtractor(self).furigana_annotations(text, transliteration, options)

    def add_ruby_tags(
        self,
        text: str,
        transliteration: Transliteration | None = None,
        options: Sequence[AnnotationOption] = (KANJI_ONLY,),
    ) -> str:
        return FuriganaExtractor(self).add_ruby_tags(text, transliteration, options)

    def clear_cache(self) -> None:
        self._cache.clear()

    def set_max_cache_size(self, size: int) -> None:
        """Change the cache capacity, evicting entries beyond it.

        A size of zero or less keeps nothing: every call recomputes.
        """

        self._cache.resize(size)

    def cache_info(self) -> CacheInfo:
        return self._cache.info()

    def close(self) -> None:
        """Release the engine handle. Further calls are no-ops."""

        self._finalizer()

    def __enter__(self) -> "Annotator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _annotate(self, text: str, mode: Transliteration) -> List[Annotation]:
        if not text:
            return []
        tokens = self._source.tokenize(text)
        return [self._build_annotation(token, span, mode) for token, span in self._mapper.map(text, tokens)]

    def _build_annotation(self, token: DecodedToken, span: TextRange, mode: Transliteration) -> Annotation:
        return Annotation(
            surface=token.surface,
            range=span,
            base_reading=self.converter.convert(token.reading, mode),
            lemma=self.converter.convert(token.lemma, mode),
            part_of_speech=token.part_of_speech,
            features=token.features,
            schema=token.schema,
            transliteration=mode,
        )


_system_annotator: Optional[Annotator] = None
_system_lock = threading.Lock()


def system_annotator() -> Annotator:
    """Return the process-wide segmenter-backed annotator.

    The instance, and therefore its cache, is shared by every caller in the
    process. Callers that need isolation or run on several threads should
    construct their own :class:`Annotator`.
    """

    global _system_annotator
    with _system_lock:
        if _system_annotator is None:
            _system_annotator = Annotator(
                config=AnnotatorConfig(backend="segmenter", cache=CacheConfig()),
            )
        return _system_annotator


__all__ = ["Annotator", "AnnotatorDependencies", "system_annotator"]
