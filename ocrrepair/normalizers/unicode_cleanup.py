"""
Unicode housekeeping for raw OCR text.

normalize() canonicalizes to NFKC, turns every exotic space into a plain
space, collapses space runs, and drops non-printable code points. It does
not trim; trim() runs once, after correction, as the final step.
"""

from __future__ import annotations

import logging
import unicodedata

import regex

from ocrrepair.text import is_printable, is_space

logger = logging.getLogger(__name__)

# Dropping a control character can leave two spaces adjacent, so the
# sequence is repeated until the text stops changing.
MAX_NORMALIZE_PASSES = 4

SPACE_RUN_PATTERN = regex.compile(r" {2,}")


def canonicalize(text: str) -> str:
    """Compatibility decomposition plus canonical recomposition.

    e.g. "ﬁ" (U+FB01) becomes "fi".
    """
    return unicodedata.normalize("NFKC", text)


def replace_exotic_spaces(text: str) -> str:
    """e.g. "Hello\\u00A0World" becomes "Hello World"."""
    return "".join(" " if is_space(ch) else ch for ch in text)


def collapse_space_runs(text: str) -> str:
    return SPACE_RUN_PATTERN.sub(" ", text)


def drop_non_printable(text: str) -> str:
    """e.g. "Hello\\u0000World" becomes "HelloWorld"."""
    return "".join(ch for ch in text if is_printable(ch))


def _normalize_once(text: str) -> str:
    text = canonicalize(text)
    text = replace_exotic_spaces(text)
    text = collapse_space_runs(text)
    return drop_non_printable(text)


def normalize(text: str) -> str:
    """
    Canonicalize Unicode form and whitespace, strip non-printable code points.

    Args:
        text: Raw text.

    Returns:
        Text with canonical characters, single-space-separated words
        and no control noise. Leading/trailing spaces are kept.

    Example:
        >>> normalize("Hello\\u00A0\\u00A0World")
        'Hello World'
    """
    for _ in range(MAX_NORMALIZE_PASSES):
        normalized = _normalize_once(text)
        if normalized == text:
            return normalized
        text = normalized
    logger.debug("normalize did not settle after %d passes", MAX_NORMALIZE_PASSES)
    return text


def trim(text: str) -> str:
    """Strip leading and trailing space-like code points only."""
    return text.strip()
