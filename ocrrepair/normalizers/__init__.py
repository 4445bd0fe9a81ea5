"""
Normalizers for transforming raw OCR text into cleaned text.

The cleaning sequence is normalize -> correct -> trim:
- normalize: NFKC, plain spaces, collapsed space runs, no control noise
- correct: ordered heuristic substitutions (CORRECTION_RULES)
- trim: strip leading/trailing spaces
"""

from ocrrepair.normalizers.heuristics import (
    CORRECTION_RULES,
    RULE_GROUPS,
    CorrectionRule,
    apply_rules,
    correct,
    rules_in_group,
)
from ocrrepair.normalizers.unicode_cleanup import normalize, trim


def clean(text: str) -> str:
    """Run the full cleaning sequence: normalize, correct, trim."""
    return trim(correct(normalize(text)))


__all__ = [
    "clean",
    "normalize",
    "correct",
    "trim",
    "apply_rules",
    "rules_in_group",
    "CorrectionRule",
    "CORRECTION_RULES",
    "RULE_GROUPS",
]
