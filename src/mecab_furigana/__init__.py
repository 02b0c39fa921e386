"""Top-level package for aligning MeCab analysis with text and deriving furigana."""

from importlib import import_module, metadata
from typing import Any

_EXPORTS = {
    "Annotator": "services.annotator",
    "system_annotator": "services.annotator",
    "DictionaryProvider": "core.engine",
    "InitializationError": "core.engine",
    "TokenizerError": "core.engine",
    "Annotation": "core.models",
    "DictionarySchema": "core.models",
    "FuriganaSpan": "core.models",
    "KANJI_ONLY": "core.models",
    "KanjiFilter": "core.models",
    "PartOfSpeech": "core.models",
    "Transliteration": "core.models",
}


def __getattr__(name: str) -> Any:
    if name == "__version__":
        try:
            return metadata.version("mecab-furigana")
        except metadata.PackageNotFoundError:  # pragma: no cover - used during development
            return "0.0.0"
    if name in _EXPORTS:
        module = import_module(f"{__name__}.{_EXPORTS[name]}")
        return getattr(module, name)
    raise AttributeError(name)


__all__ = ["__version__", *_EXPORTS]
