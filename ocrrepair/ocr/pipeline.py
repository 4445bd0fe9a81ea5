"""
Repair pipeline orchestrator.

One request flows through:
1. Validation (text must be representable)
2. normalize -> correct -> trim (cleaned text)
3. Dictionary selection from the request's language hints
4. Suggestions for unknown tokens in the cleaned text
5. Diagnostics comparing original and cleaned text

The pipeline holds no per-request state; the DictionaryStore it shares is
read-only.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from ocrrepair.config import RepairConfig
from ocrrepair.exceptions import UnrepresentableTextError
from ocrrepair.models import CorrectionResult, Request
from ocrrepair.normalizers import clean
from ocrrepair.ocr.diagnostics import diagnose
from ocrrepair.ocr.dictionary import DictionaryStore
from ocrrepair.ocr.suggester import suggest
from ocrrepair.text import validate_text

logger = logging.getLogger(__name__)


@dataclass
class RepairPipeline:
    """
    Main text-repair pipeline.

    Attributes:
        store: Dictionaries shared by every request.
        config: Suggestion and diagnostics limits.

    Example:
        >>> from ocrrepair.ocr.pipeline import create_pipeline
        >>> pipeline = create_pipeline()
        >>> result = pipeline.repair("Th1s is a smal1 tost.", ["en"])
        >>> result.cleaned
        'This is a small tost.'
    """

    store: DictionaryStore
    config: RepairConfig = field(default_factory=RepairConfig)

    def process(self, request: Request) -> CorrectionResult:
        """
        Process one request.

        Args:
            request: Decoded request.

        Returns:
            CorrectionResult. Text that cannot be represented is echoed back
            with identity diagnostics and no suggestions.
        """
        try:
            original = validate_text(request.text)
        except UnrepresentableTextError as e:
            logger.warning("Returning fallback result: %s", e)
            return CorrectionResult.fallback(request.text)

        cleaned = clean(original)
        dictionary = self.store.select(request.languages)
        suggestions = suggest(cleaned, dictionary, self.config)
        diagnostics = diagnose(original, cleaned, self.config.top_n)

        logger.debug(
            "Processed %d chars -> %d chars, %d suggestions",
            len(original),
            len(cleaned),
            len(suggestions),
        )
        return CorrectionResult(
            cleaned=cleaned,
            original=original,
            diagnostics=diagnostics,
            suggestions=suggestions,
        )

    def repair(self, text: str, languages: Sequence[str] = ()) -> CorrectionResult:
        """Convenience wrapper around process() for plain arguments."""
        return self.process(Request(text=text, languages=list(languages)))


def create_pipeline(config: RepairConfig | None = None) -> RepairPipeline:
    """
    Create a pipeline, loading every configured dictionary.

    Args:
        config: Configuration; defaults to RepairConfig().

    Returns:
        Ready-to-use RepairPipeline.

    Raises:
        DictionaryLoadError: If a configured word list is missing or empty.
    """
    if config is None:
        config = RepairConfig()
    store = DictionaryStore.load(config)
    logger.info("Dictionaries loaded: %s", ", ".join(store.keys()))
    return RepairPipeline(store=store, config=config)
