"""
OCRRepair: heuristic cleanup and correction suggestions for OCR text.

Raw OCR output goes through Unicode normalization and a conservative chain
of OCR-misread corrections; unknown words get dictionary suggestions, and
diagnostics describe how much the text changed.

Example:
    >>> import ocrrepair
    >>> pipeline = ocrrepair.create_pipeline()
    >>> result = pipeline.repair("Th1s is a smal1 tost.", ["en"])
    >>> result.cleaned
    'This is a small tost.'
    >>> result.diagnostics.edit_distance
    2
"""

__version__ = "0.1.0"

from ocrrepair.config import RepairConfig, load_config
from ocrrepair.exceptions import (
    ConfigurationError,
    DictionaryLoadError,
    OCRRepairError,
    UnrepresentableTextError,
)
from ocrrepair.models import CorrectionResult, Diagnostics, Request
from ocrrepair.normalizers import clean, correct, normalize, trim
from ocrrepair.ocr import (
    Dictionary,
    DictionaryStore,
    RepairPipeline,
    create_pipeline,
    diagnose,
    suggest,
)
from ocrrepair.protocol import encode_response, parse_request, serve

__all__ = [
    # Main API
    "create_pipeline",
    "RepairPipeline",
    # Cleaning stages
    "clean",
    "normalize",
    "correct",
    "trim",
    # Dictionaries and suggestions
    "Dictionary",
    "DictionaryStore",
    "suggest",
    "diagnose",
    # Models
    "Request",
    "CorrectionResult",
    "Diagnostics",
    # Line protocol
    "parse_request",
    "encode_response",
    "serve",
    # Configuration
    "RepairConfig",
    "load_config",
    # Exceptions
    "OCRRepairError",
    "DictionaryLoadError",
    "UnrepresentableTextError",
    "ConfigurationError",
]
