"""
Dictionary-backed correction suggestions.

For every out-of-dictionary token in the cleaned text, a pruned scan of the
dictionary finds the closest entry by Levenshtein distance. This is a
greedy, single-pass, per-token nearest-neighbour search:

- ties go to the earliest dictionary entry
- tokens are visited in text order and the scan stops once enough
  distinct suggestions are collected, so earlier tokens win the cap

Levenshtein: https://en.wikipedia.org/wiki/Levenshtein_distance
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ocrrepair.ocr.dictionary import Dictionary
from ocrrepair.text import distance, is_identifier, tokenize

if TYPE_CHECKING:
    from ocrrepair.config import RepairConfig

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

MAX_SUGGESTIONS = 5
MIN_TOKEN_LENGTH = 3
MAX_TOKEN_LENGTH = 20
MAX_EDIT_DISTANCE = 2
MAX_LENGTH_GAP = 2
# With a different first character, lengths must be this close
MAX_LENGTH_GAP_WITHOUT_LEADING_MATCH = 1


# =============================================================================
# DATA STRUCTURES
# =============================================================================


@dataclass(frozen=True)
class Suggestion:
    """The chosen dictionary word for a token, with its edit distance."""

    word: str
    distance: int


# =============================================================================
# SEARCH
# =============================================================================


def is_candidate_token(
    token: str,
    dictionary: Dictionary,
    min_length: int = MIN_TOKEN_LENGTH,
    max_length: int = MAX_TOKEN_LENGTH,
) -> bool:
    """
    Whether a token is worth a dictionary search.

    A candidate is not too short or long, not already a known word
    (case-insensitive), and shaped like a word.
    """
    if not min_length <= len(token) <= max_length:
        return False
    lower = token.lower()
    if lower in dictionary.lookup:
        return False
    return is_identifier(lower)


def shares_viable_leading_character(token: str, entry: str, length_gap: int) -> bool:
    """
    Whether an entry may be compared with a token.

    Entries must start with the token's first character unless their
    lengths are within one of each other.
    """
    if not token or not entry:
        return True
    if entry[0] == token[0]:
        return True
    return length_gap <= MAX_LENGTH_GAP_WITHOUT_LEADING_MATCH


def find_closest(
    token: str,
    entries: Sequence[str],
    max_distance: int = MAX_EDIT_DISTANCE,
    max_length_gap: int = MAX_LENGTH_GAP,
) -> Suggestion | None:
    """
    Find the closest dictionary entry to a token.

    Args:
        token: The token as it appears in the text.
        entries: Dictionary entries in search order.
        max_distance: Largest edit distance worth suggesting.
        max_length_gap: Entries whose length differs by more are skipped.

    Returns:
        Suggestion for the first entry at the minimum distance, if that
        distance is between 1 and max_distance; otherwise None.

    Example:
        >>> find_closest("tset", ["test", "toast"])
        Suggestion(word='test', distance=2)
    """
    # Distances beyond max_distance are never suggested, so the search
    # starts with that as the bar to beat.
    best_distance = max_distance + 1
    best_word: str | None = None
    token_length = len(token)

    for entry in entries:
        length_gap = abs(len(entry) - token_length)
        if length_gap > max_length_gap:
            continue
        if not shares_viable_leading_character(token, entry, length_gap):
            continue

        d = distance(token, entry, score_cutoff=best_distance - 1)
        if d < best_distance:
            best_distance = d
            best_word = entry
            if d == 0:
                break

    if best_word is None or best_distance == 0:
        return None
    return Suggestion(word=best_word, distance=best_distance)


def suggest(
    text: str,
    dictionary: Dictionary,
    config: RepairConfig | None = None,
) -> list[str]:
    """
    Suggest dictionary words for unknown tokens in cleaned text.

    Args:
        text: Cleaned text.
        dictionary: Dictionary selected for the request.
        config: Optional limits; defaults match the module constants.

    Returns:
        Up to max_suggestions distinct words, in the order they were found.
    """
    if config is None:
        limit, min_length, max_length = MAX_SUGGESTIONS, MIN_TOKEN_LENGTH, MAX_TOKEN_LENGTH
        max_distance, max_gap = MAX_EDIT_DISTANCE, MAX_LENGTH_GAP
    else:
        limit, min_length, max_length = (
            config.max_suggestions,
            config.min_token_length,
            config.max_token_length,
        )
        max_distance, max_gap = config.max_edit_distance, config.max_length_gap

    tokens = tokenize(text)
    if not tokens or not dictionary.entries:
        return []

    # dict keys keep insertion order and drop duplicates
    matches: dict[str, None] = {}
    for token in tokens:
        if not is_candidate_token(token, dictionary, min_length, max_length):
            continue

        suggestion = find_closest(token, dictionary.entries, max_distance, max_gap)
        if suggestion is not None:
            logger.debug(
                "Suggesting %r for %r (distance %d)", suggestion.word, token, suggestion.distance
            )
            matches[suggestion.word] = None

        if len(matches) >= limit:
            break

    return list(matches)
