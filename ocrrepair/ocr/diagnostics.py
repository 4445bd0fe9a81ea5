"""
Quality diagnostics comparing original and cleaned text.

Diagnostics quantify how much cleaning changed the text (similarity, edit
distance) and characterize the cleaned text's composition (printable and
ASCII ratios, Shannon diversity, most frequent characters and bigrams).
"""

from __future__ import annotations

import logging
import math
from collections import Counter

from ocrrepair.models import Diagnostics
from ocrrepair.text import (
    bigrams,
    distance,
    is_ascii,
    is_printable,
    shannon_entropy,
    similarity,
    tally,
)

logger = logging.getLogger(__name__)

TOP_N = 5


def composition_ratios(text: str) -> tuple[float, float]:
    """Return (printable_ratio, ascii_ratio), both 1.0 for empty text."""
    total = len(text)
    if total == 0:
        return 1.0, 1.0

    printable_count = 0
    ascii_count = 0
    for ch, occurrences in tally(text).items():
        if is_printable(ch):
            printable_count += occurrences
        if is_ascii(ch):
            ascii_count += occurrences
    return printable_count / total, ascii_count / total


def compute_diversity(text: str) -> float:
    """Shannon diversity of the code points in ``text``, nan if undefined."""
    if not text:
        return math.nan
    try:
        return shannon_entropy(tally(text))
    except (ArithmeticError, ValueError) as e:
        logger.warning("Diversity computation failed: %s", e)
        return math.nan


def top_entries(counts: Counter[str], limit: int = TOP_N) -> dict[str, int]:
    """Top ``limit`` entries by descending count; ties keep tally order."""
    return dict(counts.most_common(limit))


def diagnose(original: str, cleaned: str, top_n: int = TOP_N) -> Diagnostics:
    """
    Collect diagnostics comparing original and cleaned text.

    Args:
        original: Text as received.
        cleaned: Text after normalize/correct/trim.
        top_n: Entries kept in each frequency table.

    Returns:
        Diagnostics for the pair. Never raises.

    Example:
        >>> d = diagnose("he11o", "hello")
        >>> d.edit_distance
        2
        >>> d.top_characters
        {'l': 2, 'h': 1, 'e': 1, 'o': 1}
    """
    printable_ratio, ascii_ratio = composition_ratios(cleaned)
    return Diagnostics(
        similarity=similarity(cleaned, original),
        edit_distance=distance(cleaned, original),
        printable_ratio=printable_ratio,
        ascii_ratio=ascii_ratio,
        diversity=compute_diversity(cleaned),
        top_characters=top_entries(tally(cleaned), top_n),
        top_bigrams=top_entries(Counter(bigrams(cleaned)), top_n),
    )
