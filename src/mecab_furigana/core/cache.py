"""Bounded result cache for the annotator."""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import NamedTuple, Optional, Sequence, Tuple

from .models import Annotation, Transliteration

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, Transliteration]


class CacheInfo(NamedTuple):
    hits: int
    misses: int
    size: int
    max_size: int


class AnnotationCache:
    """Maps ``(text, transliteration)`` to the annotations computed for it.

    Entries are evicted in insertion order once ``max_size`` is reached. A
    ``max_size`` of zero or less disables retention entirely.
    """

    def __init__(self, max_size: int = 1000) -> None:
        self._entries: "OrderedDict[CacheKey, Tuple[Annotation, ...]]" = OrderedDict()
        self._max_size = max_size
        self.hits = 0
        self.misses = 0

    @staticmethod
    def key(text: str, transliteration: Transliteration) -> CacheKey:
        return (text, Transliteration(transliteration))

    @property
    def max_size(self) -> int:
        return self._max_size

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: CacheKey) -> Optional[Tuple[Annotation, ...]]:
        result = self._entries.get(key)
        if result is None:
            self.misses += 1
        else:
            self.hits += 1
        return result

    def put(self, key: CacheKey, annotations: Sequence[Annotation]) -> None:
        if self._max_size <= 0:
            return
        if key not in self._entries:
            while len(self._entries) >= self._max_size:
                self._evict_one()
        self._entries[key] = tuple(annotations)

    def resize(self, max_size: int) -> None:
        self._max_size = max_size
        while self._entries and len(self._entries) > max(max_size, 0):
            self._evict_one()

    def clear(self) -> None:
        self._entries.clear()

    def info(self) -> CacheInfo:
        return CacheInfo(self.hits, self.misses, len(self._entries), self._max_size)

    def _evict_one(self) -> None:
        key, _ = self._entries.popitem(last=False)
        logger.debug("Evicted cache entry for %r (%s)", key[0][:20], key[1].value)


__all__ = ["AnnotationCache", "CacheInfo", "CacheKey"]
