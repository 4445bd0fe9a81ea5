"""
Data models for OCRRepair requests and results.

A Request carries the raw OCR text and its language hints; a
CorrectionResult carries everything sent back for it.
"""

import math
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Request:
    """One repair request, as decoded from an input line."""

    text: str
    languages: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Diagnostics:
    """
    Metrics recorded for one correction round.

    Attributes:
        similarity: Normalized Levenshtein similarity, 1.0 = identical.
        edit_distance: Raw Levenshtein distance.
        printable_ratio: Share of printable code points (by occurrence).
        ascii_ratio: Share of ASCII code points (by occurrence).
        diversity: Shannon entropy of the code points; nan when undefined.
        top_characters: Most frequent code points, descending.
        top_bigrams: Most frequent adjacent pairs, descending.
    """

    similarity: float = 1.0
    edit_distance: int = 0
    printable_ratio: float = 1.0
    ascii_ratio: float = 1.0
    diversity: float = math.nan
    top_characters: dict[str, int] = field(default_factory=dict)
    top_bigrams: dict[str, int] = field(default_factory=dict)

    @classmethod
    def identity(cls) -> "Diagnostics":
        """The no-op diagnostics used when text could not be processed."""
        return cls()

    @property
    def has_diversity(self) -> bool:
        return not math.isnan(self.diversity)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire representation; undefined diversity is None."""
        return {
            "similarity": self.similarity,
            "editDistance": self.edit_distance,
            "printableRatio": self.printable_ratio,
            "asciiRatio": self.ascii_ratio,
            "diversity": self.diversity if self.has_diversity else None,
            "topCharacters": dict(self.top_characters),
            "topBigrams": dict(self.top_bigrams),
        }


@dataclass
class CorrectionResult:
    """
    The cleaned text, the original text, diagnostics and suggestions.

    Example:
        >>> result = pipeline.repair("f00d", ["en"])
        >>> result.cleaned
        'food'
        >>> result.diagnostics.edit_distance
        2
    """

    cleaned: str
    original: str
    diagnostics: Diagnostics
    suggestions: list[str] = field(default_factory=list)

    @classmethod
    def fallback(cls, text: str) -> "CorrectionResult":
        """Echo ``text`` unchanged with identity diagnostics and no suggestions."""
        return cls(cleaned=text, original=text, diagnostics=Diagnostics.identity())

    @property
    def was_modified(self) -> bool:
        """Whether cleaning changed the text."""
        return self.cleaned != self.original

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for JSON serialization.

        Returns:
            Mapping with "text", "original", "diagnostics" and "suggestions".
        """
        return {
            "text": self.cleaned,
            "original": self.original,
            "diagnostics": self.diagnostics.to_dict(),
            "suggestions": list(self.suggestions),
        }
