"""Shared utility helpers."""

from .text import contains_kanji, is_kanji, kanji_characters

__all__ = ["contains_kanji", "is_kanji", "kanji_characters"]
