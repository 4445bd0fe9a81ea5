"""
Dictionary lookup, suggestions, diagnostics and the pipeline tying them together.

Example:
    >>> from ocrrepair.ocr import create_pipeline
    >>> pipeline = create_pipeline()
    >>> pipeline.repair("he11o", ["en"]).cleaned
    'hello'
"""

from ocrrepair.models import Diagnostics
from ocrrepair.ocr.diagnostics import diagnose
from ocrrepair.ocr.dictionary import (
    Dictionary,
    DictionaryStore,
    load_word_list,
    normalize_language_code,
    resolve_resource,
)
from ocrrepair.ocr.pipeline import RepairPipeline, create_pipeline
from ocrrepair.ocr.suggester import (
    Suggestion,
    find_closest,
    is_candidate_token,
    suggest,
)

__all__ = [
    # Pipeline
    "RepairPipeline",
    "create_pipeline",
    # Dictionary
    "Dictionary",
    "DictionaryStore",
    "load_word_list",
    "normalize_language_code",
    "resolve_resource",
    # Suggestions
    "Suggestion",
    "find_closest",
    "is_candidate_token",
    "suggest",
    # Diagnostics
    "Diagnostics",
    "diagnose",
]
