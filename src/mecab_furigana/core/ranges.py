"""Locate decoded tokens in the original, un-normalised text."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Tuple

from .models import DecodedToken, TextRange

logger = logging.getLogger(__name__)


class RangeMapper:
    """Assign each token a range of the original text by forward scanning.

    The search window only ever moves right, so ranges come out ordered and
    non-overlapping. Tokens whose surface cannot be found in the remaining
    window (normalisation drift) are dropped.
    """

    def map(self, text: str, tokens: Iterable[DecodedToken]) -> Iterator[Tuple[DecodedToken, TextRange]]:
        search_start = 0
        text_end = len(text)
        for token in tokens:
            surface = token.surface
            if not surface:
                continue
            found = text.find(surface, search_start, text_end)
            if found < 0:
                logger.debug("Dropping token %r: not found after offset %d", surface, search_start)
                continue
            upper = found + len(surface)
            yield token, TextRange(found, upper)
            search_start = min(upper, text_end)


__all__ = ["RangeMapper"]
