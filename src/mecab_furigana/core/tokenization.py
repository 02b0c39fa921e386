"""Turn raw analyzer output into decoded tokens."""

from __future__ import annotations

import unicodedata
from importlib import metadata
from typing import Iterable, List, Optional, Protocol

from .engine import AnalyzerEngine
from .models import DecodedToken, DictionarySchema, PartOfSpeech, RawToken
from .schema import FeatureSchema, schema_for
from .transliteration import TransliterationConverter, katakana_to_hiragana


class TokenDecoder:
    """Decode raw tokens according to one dictionary schema."""

    def __init__(self, schema: DictionarySchema | FeatureSchema = DictionarySchema.STANDARD) -> None:
        if isinstance(schema, FeatureSchema):
            self.layout = schema
        else:
            self.layout = schema_for(schema)

    @property
    def schema(self) -> DictionarySchema:
        return self.layout.schema

    def decode(self, token: RawToken) -> Optional[DecodedToken]:
        surface = token.surface
        if not surface:
            return None
        features = tuple(token.features)
        lemma = self.layout.lemma(features) or surface
        return DecodedToken(
            surface=surface,
            reading=self._extract_reading(surface, features),
            lemma=lemma,
            part_of_speech=PartOfSpeech.from_label(self.layout.pos_label(features)),
            features=features,
            schema=self.schema,
        )

    def decode_all(self, tokens: Iterable[RawToken]) -> List[DecodedToken]:
        decoded: List[DecodedToken] = []
        for token in tokens:
            item = self.decode(token)
            if item is not None:
                decoded.append(item)
        return decoded

    def _extract_reading(self, surface: str, features: tuple) -> str:
        if self.schema is DictionarySchema.EXTENDED:
            # UniDic's current-form pronunciation keeps unresolved ー marks.
            current = self.layout.current_reading(features)
            if current:
                return katakana_to_hiragana(current)
        return self.layout.reading(features) or surface


class TokenSource(Protocol):
    """Anything able to split text into decoded tokens."""

    @property
    def version(self) -> str:
        """Version string of the backend."""

    def tokenize(self, text: str) -> List[DecodedToken]:
        """Return decoded tokens for ``text`` in order."""

    def close(self) -> None:
        """Release resources held by the backend."""


class EngineTokenSource:
    """Feeds normalised text through an analyzer engine and decodes the nodes."""

    def __init__(
        self,
        engine: AnalyzerEngine,
        decoder: TokenDecoder,
        normalization: str | None = "NFC",
    ) -> None:
        self._engine = engine
        self.decoder = decoder
        self.normalization = normalization

    @property
    def version(self) -> str:
        return self._engine.version

    def tokenize(self, text: str) -> List[DecodedToken]:
        if not text:
            return []
        normalized = unicodedata.normalize(self.normalization, text) if self.normalization else text
        return self.decoder.decode_all(self._engine.analyze(normalized))

    def close(self) -> None:
        self._engine.close()


class SegmenterTokenSource:
    """Lightweight segmentation through :mod:`pykakasi`.

    No dictionary features are available, so tokens carry an empty feature
    array and :attr:`PartOfSpeech.UNKNOWN`.
    """

    def __init__(self, converter: TransliterationConverter | None = None) -> None:
        self._converter = converter or TransliterationConverter()

    @property
    def version(self) -> str:
        try:
            return metadata.version("pykakasi")
        except metadata.PackageNotFoundError:  # pragma: no cover - used during development
            return "0.0.0"

    def tokenize(self, text: str) -> List[DecodedToken]:
        tokens: List[DecodedToken] = []
        for surface, reading in self._converter.segment(text):
            if not surface:
                continue
            tokens.append(
                DecodedToken(
                    surface=surface,
                    reading=reading or surface,
                    lemma=surface,
                )
            )
        return tokens

    def close(self) -> None:
        return None


__all__ = ["EngineTokenSource", "SegmenterTokenSource", "TokenDecoder", "TokenSource"]
