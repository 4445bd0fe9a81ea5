"""
Heuristic OCR corrections.

The corrector is an ordered chain of small, explainable substitutions
targeting common OCR misreads. Rules live in CORRECTION_RULES as data, in
the order they run; later groups assume earlier ones already ran:

1. lookalikes  - digits read in place of letters (he11o, f00d, Th1s)
2. quotes      - typographic quotes and backticks to ASCII
3. ligatures   - rn->m, vv->w, ellipsis, dashes, cent sign
4. hyphenation - line-break hyphens, letters inside numbers, I/| for l

Known trade-off: the lookalike rules are purely local pattern matches, so
alphanumeric codes such as "AB1C" or "X5" are rewritten too. A 1 between
consonants is read as i only when the word continues or ends in s, so
"wor1d" becomes "world" but "wor1ds" becomes "worids" and "b1g" becomes
"blg". The ligature rules are unconditional, so "modern" becomes "modem".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

import regex

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Rewriting can create a new match for an earlier rule (a removed hyphen
# joins "r" and "n"), so the chain is repeated until the text is stable.
MAX_CORRECTION_PASSES = 8

VOWELS = "aeiouyäöüAEIOUYÄÖÜ"
CONSONANT = r"[^\W\d_" + VOWELS + r"]"


# =============================================================================
# RULES
# =============================================================================


@lru_cache(maxsize=None)
def _compile(pattern: str) -> regex.Pattern:
    return regex.compile(pattern)


@dataclass(frozen=True)
class CorrectionRule:
    """A single substitution in the correction chain."""

    name: str
    group: str
    pattern: str
    replacement: str
    literal: bool = False  # plain substring replacement, not a regex

    def apply(self, text: str) -> str:
        if self.literal:
            return text.replace(self.pattern, self.replacement)
        return _compile(self.pattern).sub(self.replacement, text)


def _rule(name: str, group: str, pattern: str, replacement: str) -> CorrectionRule:
    return CorrectionRule(name, group, pattern, replacement)


def _literal(name: str, group: str, pattern: str, replacement: str) -> CorrectionRule:
    return CorrectionRule(name, group, pattern, replacement, literal=True)


CORRECTION_RULES: tuple[CorrectionRule, ...] = (
    # --- Digit/letter lookalikes ---
    # A lone 1 between consonants reads as i when the word goes on past the
    # second consonant, or ends in s: "Th1s", "th1nk". "wor1d" is left to
    # the 1 -> l rules below.
    _rule(
        "one_between_consonants",
        "lookalikes",
        r"(?<=" + CONSONANT + r")1(?=[sS]\b|" + CONSONANT + r"\w)",
        "i",
    ),
    _rule("one_after_letter", "lookalikes", r"(?<=\p{L}1*)1", "l"),
    _rule("one_before_letter", "lookalikes", r"1(?=1*\p{L})", "l"),
    _rule("zero_between_letters", "lookalikes", r"(?<=\p{L}0*)0(?=0*\p{L})", "o"),
    _rule("zero_at_word_start", "lookalikes", r"\b0(?=\p{L})", "O"),
    _rule("five_after_letter", "lookalikes", r"(?<=\p{L})5", "S"),
    _rule("six_after_letter", "lookalikes", r"(?<=\p{L})6", "G"),
    _rule("eight_after_letter", "lookalikes", r"(?<=\p{L})8", "B"),
    # --- Typographic punctuation ---
    _literal("left_double_quote", "quotes", "“", '"'),
    _literal("right_double_quote", "quotes", "”", '"'),
    _literal("left_single_quote", "quotes", "‘", "'"),
    _literal("right_single_quote", "quotes", "’", "'"),
    _literal("backtick", "quotes", "`", "'"),
    # --- Ligature and sequence artifacts ---
    _literal("rn_as_m", "ligatures", "rn", "m"),
    _literal("vv_as_w", "ligatures", "vv", "w"),
    _literal("ellipsis", "ligatures", "…", "..."),
    _literal("em_dash", "ligatures", "—", "-"),
    _literal("en_dash", "ligatures", "–", "-"),
    _literal("cent_sign", "ligatures", "¢", "c"),
    # --- Hyphenation and numeric mixups ---
    _rule("line_break_hyphen", "hyphenation", r"(?<=\p{L})-\s+(?=\p{L})", ""),
    _rule("l_inside_number", "hyphenation", r"(?<=\d)l(?=\d)", "1"),
    _rule("o_inside_number", "hyphenation", r"(?<=\d)[Oo](?=\d)", "0"),
    _rule("leading_i_or_pipe", "hyphenation", r"(?<![\w|])[I|](?=\p{Ll}{2})", "l"),
)

RULE_GROUPS = ("lookalikes", "quotes", "ligatures", "hyphenation")


def rules_in_group(group: str) -> tuple[CorrectionRule, ...]:
    """Return the rules of one group, in chain order."""
    if group not in RULE_GROUPS:
        raise ValueError(f"group must be one of {RULE_GROUPS}, got {group!r}")
    return tuple(rule for rule in CORRECTION_RULES if rule.group == group)


# =============================================================================
# CORRECTOR
# =============================================================================


def apply_rules(text: str, rules: tuple[CorrectionRule, ...] = CORRECTION_RULES) -> str:
    """Run each rule once, in order."""
    for rule in rules:
        text = rule.apply(text)
    return text


def correct(text: str) -> str:
    """
    Apply the heuristic correction chain.

    Args:
        text: Normalized text.

    Returns:
        Corrected text. Applying correct() again changes nothing.

    Example:
        >>> correct("he11o f00d")
        'hello food'
        >>> correct("room 101")
        'room 101'
    """
    for _ in range(MAX_CORRECTION_PASSES):
        corrected = apply_rules(text)
        if corrected == text:
            return corrected
        text = corrected
    logger.debug("correct did not settle after %d passes", MAX_CORRECTION_PASSES)
    return text
