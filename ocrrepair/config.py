"""
Configuration for OCRRepair.

Defaults reproduce the documented pipeline exactly; a config only needs to
be created to point at different word lists or to tune suggestion limits.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from ocrrepair.exceptions import ConfigurationError


def _default_languages() -> dict[str, str]:
    return {
        "en": "corpus/en_words.txt",
        "de": "corpus/de_words.txt",
    }


@dataclass
class RepairConfig:
    """
    Configuration for the repair pipeline.

    All options have sensible defaults. Create a config only
    if you need to customize behavior.

    Example:
        >>> config = RepairConfig(
        ...     languages={"en": "corpus/en_words.txt"},
        ...     resource_dirs=[Path("/opt/wordlists")],
        ... )
        >>> pipeline = create_pipeline(config)
    """

    # Dictionary key -> word-list resource (relative to a search location)
    languages: dict[str, str] = field(default_factory=_default_languages)
    default_language: str = "en"

    # Extra directories searched after the bundled/dev/cwd locations
    resource_dirs: list[Path] = field(default_factory=list)

    # Suggestion limits
    max_suggestions: int = 5
    min_token_length: int = 3
    max_token_length: int = 20
    max_edit_distance: int = 2
    max_length_gap: int = 2

    # Diagnostics
    top_n: int = 5

    def __post_init__(self):
        """Validate configuration."""
        if not self.languages:
            raise ConfigurationError("languages must name at least one word list")
        for key, resource in self.languages.items():
            if not isinstance(key, str) or not key.strip():
                raise ConfigurationError(f"language keys must be non-empty strings, got {key!r}")
            if not isinstance(resource, str) or not resource.strip():
                raise ConfigurationError(
                    f"word-list resource for {key!r} must be a non-empty string, got {resource!r}"
                )

        self.resource_dirs = [Path(p) for p in self.resource_dirs]

        for name in ("max_suggestions", "min_token_length", "max_edit_distance", "top_n"):
            value = getattr(self, name)
            if value < 1:
                raise ConfigurationError(f"{name} must be >= 1, got {value}")
        if self.max_length_gap < 0:
            raise ConfigurationError(f"max_length_gap must be >= 0, got {self.max_length_gap}")
        if self.max_token_length < self.min_token_length:
            raise ConfigurationError(
                f"max_token_length ({self.max_token_length}) must be >= "
                f"min_token_length ({self.min_token_length})"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RepairConfig:
        """Build a config from a plain mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)


def load_config(path: str | Path) -> RepairConfig:
    """Load a RepairConfig from a YAML file.

    Args:
        path: Path to a YAML mapping whose keys are RepairConfig fields.

    Returns:
        The validated configuration.

    Raises:
        ConfigurationError: If the file is missing, malformed, or invalid.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed config file {path}: {e}") from e

    if data is None:
        return RepairConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    try:
        return RepairConfig.from_dict(data)
    except TypeError as e:
        raise ConfigurationError(f"Invalid config file {path}: {e}") from e
