"""Application level configuration objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .core.models import Transliteration

BACKENDS = ("mecab", "segmenter")


@dataclass(slots=True)
class CacheConfig:
    """Configuration of the per-annotator result cache."""

    max_size: int = 1000
    """Maximum number of ``(text, transliteration)`` entries; ``<= 0`` disables caching."""


@dataclass(slots=True)
class AnnotatorConfig:
    """Configuration that controls how text is analysed."""

    backend: str = "mecab"
    """Token source identifier (``"mecab"`` or ``"segmenter"``)."""

    normalization: Optional[str] = "NFC"
    """Unicode normal form applied to the text handed to the engine."""

    transliteration: Transliteration = Transliteration.HIRAGANA
    """Default script for readings when a call does not specify one."""

    cache: CacheConfig = field(default_factory=CacheConfig)


@dataclass(slots=True)
class RubyConfig:
    """Defaults for furigana extraction."""

    kanji_only: bool = True


@dataclass(slots=True)
class AppConfig:
    """Top level configuration container used by the command line."""

    annotator: AnnotatorConfig = field(default_factory=AnnotatorConfig)
    ruby: RubyConfig = field(default_factory=RubyConfig)


__all__ = ["AppConfig", "AnnotatorConfig", "BACKENDS", "CacheConfig", "RubyConfig"]
