"""
Text primitives shared by every pipeline stage.

Text is plain ``str``: immutable, indexed by code point, compared and hashed
by code-point sequence. This module holds the handful of code-point
classifications and measurements the pipeline builds on, so that the
stages themselves read as short compositions.
"""

from __future__ import annotations

import math
from collections import Counter

import regex
from rapidfuzz.distance import Levenshtein

from ocrrepair.exceptions import UnrepresentableTextError

# Tokens are maximal runs of code points that are neither whitespace,
# punctuation, nor symbols.
TOKEN_SEPARATOR_PATTERN = regex.compile(r"[\s\p{P}\p{S}]+")

SURROGATE_RANGE = range(0xD800, 0xE000)


def validate_text(text: str) -> str:
    """
    Return ``text`` unchanged if it is a sequence of Unicode scalar values.

    Lone surrogates (which JSON escapes such as ``"\\ud800"`` can produce)
    have no encoding and are rejected.

    Raises:
        UnrepresentableTextError: If ``text`` is not a str or holds surrogates.
    """
    if not isinstance(text, str):
        raise UnrepresentableTextError(f"Expected str, got {type(text).__name__}")
    for offset, ch in enumerate(text):
        if ord(ch) in SURROGATE_RANGE:
            raise UnrepresentableTextError(
                f"Unpaired surrogate U+{ord(ch):04X} at offset {offset}"
            )
    return text


# =============================================================================
# CODE-POINT CLASSIFICATION
# =============================================================================


def is_space(ch: str) -> bool:
    """Space-like: ASCII and Unicode whitespace, tabs and line breaks."""
    return ch.isspace()


def is_printable(ch: str) -> bool:
    return ch.isprintable()


def is_ascii(ch: str) -> bool:
    return ord(ch) < 128


def is_identifier(text: str) -> bool:
    """Identifier-shaped: letters, digits and underscores, not led by a digit."""
    return text.isidentifier()


# =============================================================================
# TOKENS AND DISTANCES
# =============================================================================


def tokenize(text: str) -> list[str]:
    """Split on whitespace, punctuation and symbols, preserving order."""
    return [token for token in TOKEN_SEPARATOR_PATTERN.split(text) if token]


def distance(a: str, b: str, score_cutoff: int | None = None) -> int:
    """
    Levenshtein distance between two strings, in code points.

    With ``score_cutoff``, any distance above the cutoff is reported as
    ``score_cutoff + 1``.
    """
    return Levenshtein.distance(a, b, score_cutoff=score_cutoff)


def similarity(a: str, b: str) -> float:
    """Normalized Levenshtein similarity in [0, 1]; 1.0 means identical."""
    return Levenshtein.normalized_similarity(a, b)


# =============================================================================
# FREQUENCIES
# =============================================================================


def tally(text: str) -> Counter[str]:
    """Occurrence count per code point, in first-encountered order."""
    return Counter(text)


def bigrams(text: str) -> list[str]:
    """Adjacent code-point pairs, left to right."""
    return [text[i : i + 2] for i in range(len(text) - 1)]


def shannon_entropy(counts: Counter[str]) -> float:
    """
    Shannon entropy (natural log) of a frequency distribution.

    Returns ``nan`` for an empty distribution.
    """
    total = sum(counts.values())
    if total == 0:
        return math.nan
    entropy = 0.0
    for count in counts.values():
        p = count / total
        entropy -= p * math.log(p)
    return entropy
