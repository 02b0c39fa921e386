"""High level services exposing the annotation workflow."""

from .annotator import Annotator, AnnotatorDependencies, system_annotator
from .furigana import FuriganaExtractor

__all__ = ["Annotator", "AnnotatorDependencies", "FuriganaExtractor", "system_annotator"]
