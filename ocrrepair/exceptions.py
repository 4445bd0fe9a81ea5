"""
Exception classes for OCRRepair.

All OCRRepair exceptions inherit from OCRRepairError,
making it easy to catch all library errors.

Example:
    >>> try:
    ...     pipeline = ocrrepair.create_pipeline()
    ... except ocrrepair.DictionaryLoadError as e:
    ...     print(f"Cannot start: {e}")
    ... except ocrrepair.OCRRepairError as e:
    ...     print(f"OCRRepair error: {e}")
"""


class OCRRepairError(Exception):
    """
    Base exception for all OCRRepair errors.

    Catch this to handle any OCRRepair-specific error.
    """

    pass


class DictionaryLoadError(OCRRepairError):
    """
    Raised when a configured word list is missing or empty.

    This is fatal at startup: a pipeline is never built around a
    dictionary that failed to load.

    Example:
        >>> load_word_list("corpus/xx_words.txt")
        DictionaryLoadError: Word list not found: corpus/xx_words.txt
    """

    def __init__(self, message: str, resource: str | None = None):
        super().__init__(message)
        self.resource = resource


class UnrepresentableTextError(OCRRepairError):
    """
    Raised when input cannot be treated as text at all.

    The pipeline catches this and answers with a fallback result, so it
    never reaches the caller of the line protocol.
    """

    pass


class ConfigurationError(OCRRepairError):
    """
    Raised for invalid configuration.

    Example:
        >>> RepairConfig(max_suggestions=0)
        ConfigurationError: max_suggestions must be >= 1, got 0
    """

    pass
