#!/usr/bin/env python3
"""
Build Suggestion Word Lists

Writes the most frequent words of a language from the wordfreq corpora,
one per line and most frequent first, in the format the dictionary
loader reads. Only purely alphabetic words are kept; numbers, contractions
and other tokens with punctuation are skipped.

Usage:
    uv run python scripts/build_wordlists.py --lang en
    uv run python scripts/build_wordlists.py --lang de --count 20000 --output my_de.txt

Requires the ``corpus`` extra (wordfreq).
"""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

from wordfreq import top_n_list

PROJECT_ROOT = Path(__file__).parent.parent
CORPUS_DIR = PROJECT_ROOT / "ocrrepair" / "corpus"

LANGUAGE_NAMES = {"en": "English", "de": "German"}
DEFAULT_COUNT = 5000


def collect_words(lang: str, count: int) -> list[str]:
    """Top ``count`` alphabetic words for ``lang``, most frequent first."""
    words = []
    seen = set()
    # Over-fetch so filtering still leaves enough words
    for word in top_n_list(lang, count * 2):
        lowered = word.lower()
        if not lowered.isalpha() or lowered in seen:
            continue
        seen.add(lowered)
        words.append(lowered)
        if len(words) == count:
            break
    return words


def render_word_list(lang: str, words: list[str]) -> str:
    name = LANGUAGE_NAMES.get(lang, lang)
    header = [
        f"# {name} word list for ocrrepair suggestions.",
        f"# Generated {date.today().isoformat()} from wordfreq ({len(words)} words).",
        "# One word per line, most frequent first; blank lines and lines starting",
        "# with '#' are ignored, words are lowercased on load.",
        f"# Regenerate with: python scripts/build_wordlists.py --lang {lang} --count {len(words)}",
    ]
    return "\n".join(header + words) + "\n"


def main():
    parser = argparse.ArgumentParser(description="Build word lists from wordfreq")
    parser.add_argument("--lang", required=True, help="wordfreq language code (e.g. en, de)")
    parser.add_argument(
        "--count", type=int, default=DEFAULT_COUNT, help=f"Words to keep (default: {DEFAULT_COUNT})"
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output file (default: ocrrepair/corpus/<lang>_words.txt)",
    )

    args = parser.parse_args()

    if args.count < 1:
        parser.error("--count must be at least 1")

    words = collect_words(args.lang, args.count)
    if not words:
        print(f"No words found for language '{args.lang}'", file=sys.stderr)
        sys.exit(1)

    output = args.output or CORPUS_DIR / f"{args.lang}_words.txt"
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_word_list(args.lang, words), encoding="utf-8")
    print(f"Wrote {len(words)} words to {output}")


if __name__ == "__main__":
    main()
