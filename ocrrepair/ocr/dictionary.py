"""
Per-language word lists for suggestion lookup.

Each configured language is loaded once, at startup, from a newline-
delimited word list into an immutable Dictionary. The DictionaryStore maps
free-form language hints ("en-US", "ger", "de_AT") onto those dictionaries
with an explicit fallback to the default language.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from ocrrepair.exceptions import DictionaryLoadError

if TYPE_CHECKING:
    from ocrrepair.config import RepairConfig

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

PACKAGE_NAME = "ocrrepair"

# Development tree: <repo>/resources/<resource>
DEVELOPMENT_RESOURCE_DIR = Path(__file__).resolve().parent.parent.parent / "resources"

COMMENT_PREFIX = "#"

# Language-code prefixes mapped onto dictionary keys, checked in order
LANGUAGE_PREFIXES: tuple[tuple[str, str], ...] = (
    ("en", "en"),
    ("de", "de"),
    ("ger", "de"),
)


# =============================================================================
# DATA STRUCTURES
# =============================================================================


@dataclass(frozen=True)
class Dictionary:
    """
    Word list for one language.

    Attributes:
        entries: Lowercase words in load order (search order for suggestions).
        lookup: The same words as a set, for membership checks.

    Example:
        >>> d = Dictionary.from_words(["The", "test", "the"])
        >>> d.entries
        ('the', 'test')
        >>> "TEST" in d
        True
    """

    entries: tuple[str, ...] = ()
    lookup: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Dictionary:
        """Lowercase and deduplicate ``words``, keeping first-seen order."""
        ordered = tuple(dict.fromkeys(word.lower() for word in words))
        return cls(entries=ordered, lookup=frozenset(ordered))

    @classmethod
    def empty(cls) -> Dictionary:
        return cls()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self.lookup

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)


# =============================================================================
# LANGUAGE CODES
# =============================================================================


def normalize_language_code(code: str) -> str:
    """
    Map a language hint onto a dictionary key.

    Codes starting with "en" map to "en"; codes starting with "de" or "ger"
    map to "de"; anything else maps to its own lowercased value.

    Example:
        >>> normalize_language_code("en-US")
        'en'
        >>> normalize_language_code("German")
        'de'
        >>> normalize_language_code("FR")
        'fr'
    """
    lower = code.strip().lower()
    for prefix, key in LANGUAGE_PREFIXES:
        if lower.startswith(prefix):
            return key
    return lower


# =============================================================================
# LOADING
# =============================================================================


def resolve_resource(resource: str, extra_dirs: Sequence[Path] = ()) -> Path | None:
    """
    Find a word-list resource on disk.

    Tries, in order:
    1. The bundled package data (``ocrrepair/<resource>``)
    2. The development tree (``<repo>/resources/<resource>``)
    3. The current working directory
    4. Any extra directories, in the given order

    Args:
        resource: Relative path such as "corpus/en_words.txt". An absolute
            path is used as-is.
        extra_dirs: Additional directories to search last.

    Returns:
        The first existing path, or None.
    """
    path = Path(resource)
    if path.is_absolute():
        return path if path.is_file() else None

    bundled = resources.files(PACKAGE_NAME).joinpath(resource)
    candidates: list[Path] = []
    if isinstance(bundled, Path):
        candidates.append(bundled)
    candidates.append(DEVELOPMENT_RESOURCE_DIR / path)
    candidates.append(Path.cwd() / path)
    candidates.extend(Path(d) / path for d in extra_dirs)

    for candidate in candidates:
        if candidate.is_file():
            logger.debug("Resolved %s to %s", resource, candidate)
            return candidate
    return None


def read_words(lines: Iterable[str]) -> Iterator[str]:
    """Yield words from word-list lines, skipping blanks and # comments."""
    for line in lines:
        word = line.strip()
        if not word or word.startswith(COMMENT_PREFIX):
            continue
        yield word


def load_word_list(resource: str, extra_dirs: Sequence[Path] = ()) -> Dictionary:
    """
    Load a newline-delimited word list into a Dictionary.

    Args:
        resource: Resource path, resolved with resolve_resource().
        extra_dirs: Additional search directories.

    Returns:
        Dictionary with lowercase, deduplicated entries in file order.

    Raises:
        DictionaryLoadError: If the resource is missing, unreadable, or
            holds no words.
    """
    path = resolve_resource(resource, extra_dirs)
    if path is None:
        raise DictionaryLoadError(f"Word list not found: {resource}", resource=resource)

    try:
        with open(path, encoding="utf-8") as f:
            dictionary = Dictionary.from_words(read_words(f))
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(
            f"Failed to load word list: {resource}: {e}", resource=resource
        ) from e

    if not dictionary:
        raise DictionaryLoadError(f"Word list is empty: {resource}", resource=resource)

    logger.info("Loaded %d words from %s", len(dictionary), path)
    return dictionary


# =============================================================================
# DICTIONARY STORE
# =============================================================================


class DictionaryStore:
    """
    Read-only collection of dictionaries keyed by language.

    Built once before the first request and shared by every request; it
    is never modified afterwards.

    Example:
        >>> store = DictionaryStore({"en": Dictionary.from_words(["test"])})
        >>> store.select(["fr"]) is store.get("en")
        True
        >>> len(store.select([]))
        1
    """

    def __init__(self, dictionaries: Mapping[str, Dictionary], default_key: str = "en"):
        self._dictionaries = MappingProxyType(dict(dictionaries))
        self.default_key = default_key

    @classmethod
    def load(cls, config: RepairConfig) -> DictionaryStore:
        """
        Load every configured word list.

        Raises:
            DictionaryLoadError: If any configured word list is missing or empty.
        """
        dictionaries = {
            key: load_word_list(resource, config.resource_dirs)
            for key, resource in config.languages.items()
        }
        return cls(dictionaries, default_key=config.default_language)

    def keys(self) -> list[str]:
        return list(self._dictionaries)

    def get(self, key: str) -> Dictionary | None:
        return self._dictionaries.get(key)

    def select(self, languages: Sequence[str | None] | None) -> Dictionary:
        """
        Pick the dictionary for a request's language hints.

        Returns the dictionary of the first hint whose normalized key is
        loaded. Otherwise falls back to the default language if loaded,
        else to an empty Dictionary. Never fails.
        """
        for language in languages or ():
            if not language:
                continue
            dictionary = self._dictionaries.get(normalize_language_code(language))
            if dictionary is not None:
                return dictionary
        return self._dictionaries.get(self.default_key, Dictionary.empty())
