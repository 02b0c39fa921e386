"""Core services for decoding, aligning and transliterating analyzer output."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "AnalyzerEngine",
    "Annotation",
    "AnnotationCache",
    "DecodedToken",
    "DictionaryProvider",
    "DictionarySchema",
    "FeatureSchema",
    "FuriganaSpan",
    "InitializationError",
    "KanjiFilter",
    "MecabEngine",
    "PartOfSpeech",
    "RangeMapper",
    "RawToken",
    "TextRange",
    "TokenDecoder",
    "TokenizerError",
    "Transliteration",
    "TransliterationConverter",
]


def __getattr__(name: str) -> Any:  # pragma: no cover - thin lazy import layer
    if name in __all__:
        module_map = {
            "AnalyzerEngine": "engine",
            "DictionaryProvider": "engine",
            "InitializationError": "engine",
            "MecabEngine": "engine",
            "TokenizerError": "engine",
            "AnnotationCache": "cache",
            "FeatureSchema": "schema",
            "RangeMapper": "ranges",
            "TokenDecoder": "tokenization",
            "TransliterationConverter": "transliteration",
            "Annotation": "models",
            "DecodedToken": "models",
            "DictionarySchema": "models",
            "FuriganaSpan": "models",
            "KanjiFilter": "models",
            "PartOfSpeech": "models",
            "RawToken": "models",
            "TextRange": "models",
            "Transliteration": "models",
        }
        module_name = module_map[name]
        module = import_module(f"{__name__}.{module_name}")
        return getattr(module, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


def __dir__() -> list[str]:  # pragma: no cover - aids interactive use
    return sorted(__all__ + list(globals().keys()))
