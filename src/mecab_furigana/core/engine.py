"""The analyzer engine boundary, backed by :mod:`fugashi`."""

from __future__ import annotations

import logging
import shlex
from dataclasses import dataclass
from importlib import metadata
from pathlib import Path
from typing import Callable, Iterator, Protocol, Union

from fugashi import GenericTagger

from .models import DictionarySchema, RawToken

logger = logging.getLogger(__name__)


class TokenizerError(RuntimeError):
    """Base class for errors raised by the annotation pipeline."""


class InitializationError(TokenizerError):
    """Raised when the analyzer engine cannot be opened."""


@dataclass(frozen=True, slots=True)
class DictionaryProvider:
    """Location and feature layout of a MeCab dictionary."""

    path: Union[str, Path]
    schema: DictionarySchema = DictionarySchema.STANDARD

    def __post_init__(self) -> None:
        object.__setattr__(self, "schema", DictionarySchema(self.schema))


class AnalyzerEngine(Protocol):
    """Common interface for morphological analyzer handles."""

    @property
    def version(self) -> str:
        """Version string of the underlying engine."""

    def analyze(self, text: str) -> Iterator[RawToken]:
        """Yield the raw tokens of ``text`` in order."""

    def close(self) -> None:
        """Release the engine handle."""


EngineFactory = Callable[[Union[str, Path]], AnalyzerEngine]


def dictionary_arguments(path: Union[str, Path]) -> str:
    """Build the MeCab ``-d`` option, quoting paths that contain spaces."""

    return f"-d {shlex.quote(str(path))}"


class MecabEngine:
    """Wraps a :class:`fugashi.GenericTagger` opened on one dictionary."""

    def __init__(self, tagger: GenericTagger, path: Union[str, Path]) -> None:
        self._tagger = tagger
        self.path = path

    @classmethod
    def open(cls, path: Union[str, Path]) -> "MecabEngine":
        try:
            tagger = GenericTagger(dictionary_arguments(path))
        except RuntimeError as exc:
            raise InitializationError(f"Opening dictionary failed at '{path}': {exc}") from exc
        logger.info("Opened MeCab dictionary at %s", path)
        return cls(tagger, path)

    @property
    def version(self) -> str:
        return version_string()

    @property
    def closed(self) -> bool:
        return self._tagger is None

    def analyze(self, text: str) -> Iterator[RawToken]:
        if self._tagger is None:
            raise TokenizerError("The MeCab engine has been closed.")
        for node in self._tagger(text):
            feature = node.feature
            if isinstance(feature, str):
                features = tuple(feature.split(","))
            else:
                features = tuple(str(item) for item in feature)
            yield RawToken(surface=str(node.surface), features=features)

    def close(self) -> None:
        if self._tagger is not None:
            logger.debug("Closing MeCab dictionary at %s", self.path)
        self._tagger = None


def version_string() -> str:
    """Version of the fugashi binding.

    fugashi does not expose the version of the MeCab library it links, so the
    binding release stands in for it.
    """

    try:
        return metadata.version("fugashi")
    except metadata.PackageNotFoundError:  # pragma: no cover - used during development
        return "0.0.0"


__all__ = [
    "AnalyzerEngine",
    "DictionaryProvider",
    "EngineFactory",
    "InitializationError",
    "MecabEngine",
    "TokenizerError",
    "dictionary_arguments",
    "version_string",
]
