"""Command line entry point."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from .config import BACKENDS, AppConfig
from .core.engine import DictionaryProvider, TokenizerError
from .core.models import KANJI_ONLY, Annotation, DictionarySchema, Transliteration
from .services.annotator import Annotator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mecab-furigana",
        description="Annotate Japanese text with readings and furigana.",
    )
    parser.add_argument("text", nargs="*", help="Text to annotate; read from stdin when omitted.")
    parser.add_argument("-d", "--dictionary", help="Path to the MeCab dictionary directory.")
    parser.add_argument(
        "--schema",
        choices=[schema.value for schema in DictionarySchema],
        default=DictionarySchema.STANDARD.value,
        help="Feature layout of the dictionary (standard = IPADIC, extended = UniDic).",
    )
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default=None,
        help="Token source; defaults to mecab when a dictionary is given, otherwise segmenter.",
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=[mode.value for mode in Transliteration],
        default=Transliteration.HIRAGANA.value,
        help="Script used for readings.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=("ruby", "spans", "tokens"),
        default="ruby",
        help="Output ruby markup, furigana spans as JSON or all annotations as JSON.",
    )
    parser.add_argument(
        "--all-tokens",
        action="store_true",
        help="Annotate tokens without kanji as well.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING).")
    return parser


def _annotation_to_dict(annotation: Annotation) -> dict:
    return {
        "surface": annotation.surface,
        "start": annotation.range.start,
        "end": annotation.range.end,
        "reading": annotation.reading,
        "lemma": annotation.lemma,
        "pos": annotation.pos,
    }


def render(annotator: Annotator, text: str, output_format: str, mode: Transliteration, kanji_only: bool) -> str:
    options = (KANJI_ONLY,) if kanji_only else ()
    if output_format == "ruby":
        return annotator.add_ruby_tags(text, mode, options)
    if output_format == "spans":
        spans = annotator.furigana_annotations(text, mode, options)
        payload: List[dict] = [
            {"reading": span.reading, "start": span.range.start, "end": span.range.end} for span in spans
        ]
    else:
        payload = [_annotation_to_dict(annotation) for annotation in annotator.tokenize(text, mode)]
    return json.dumps(payload, ensure_ascii=False)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point used by both console scripts and ``python -m``."""

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = AppConfig()
    config.annotator.backend = args.backend or ("mecab" if args.dictionary else "segmenter")
    config.annotator.transliteration = Transliteration(args.mode)
    config.ruby.kanji_only = not args.all_tokens

    provider = DictionaryProvider(args.dictionary, DictionarySchema(args.schema)) if args.dictionary else None
    try:
        annotator = Annotator(provider, config.annotator)
    except TokenizerError as exc:
        print(f"mecab-furigana: {exc}", file=sys.stderr)
        return 1

    text = " ".join(args.text) if args.text else sys.stdin.read()
    with annotator:
        for line in text.splitlines():
            print(render(annotator, line, args.format, config.annotator.transliteration, config.ruby.kanji_only))
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation only
    raise SystemExit(main())
