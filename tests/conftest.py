"""
Pytest configuration and fixtures for OCRRepair tests.
"""

import pytest

from ocrrepair import RepairConfig
from ocrrepair.ocr import Dictionary, DictionaryStore, RepairPipeline

ENGLISH_WORDS = ["the", "test", "lost", "hello", "world", "small", "this", "is", "food"]
GERMAN_WORDS = ["der", "die", "und", "haus", "hallo", "welt"]


@pytest.fixture(scope="session")
def english() -> Dictionary:
    """Small English dictionary, in search order."""
    return Dictionary.from_words(ENGLISH_WORDS)


@pytest.fixture(scope="session")
def german() -> Dictionary:
    """Small German dictionary, in search order."""
    return Dictionary.from_words(GERMAN_WORDS)


@pytest.fixture(scope="session")
def store(english, german) -> DictionaryStore:
    """In-memory store with en and de loaded, en as default."""
    return DictionaryStore({"en": english, "de": german}, default_key="en")


@pytest.fixture(scope="session")
def pipeline(store) -> RepairPipeline:
    """Pipeline over the in-memory store; no word lists are read."""
    return RepairPipeline(store=store, config=RepairConfig())


@pytest.fixture
def word_list(tmp_path):
    """Factory writing a word list under tmp_path and returning its path."""

    def _write(name: str, content: str):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
