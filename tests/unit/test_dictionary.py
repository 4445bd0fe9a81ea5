"""Tests for word-list loading and the dictionary store."""

import pytest

from ocrrepair import DictionaryLoadError, RepairConfig
from ocrrepair.ocr.dictionary import (
    Dictionary,
    DictionaryStore,
    load_word_list,
    normalize_language_code,
    read_words,
    resolve_resource,
)

# =============================================================================
# DICTIONARY TESTS
# =============================================================================


class TestDictionary:
    """Tests for the Dictionary value."""

    def test_from_words_lowercases_and_deduplicates(self):
        d = Dictionary.from_words(["The", "test", "the", "TEST", "lost"])
        assert d.entries == ("the", "test", "lost")
        assert len(d) == 3
        assert list(d) == ["the", "test", "lost"]

    def test_membership_is_case_insensitive(self):
        d = Dictionary.from_words(["test"])
        assert "test" in d
        assert "TeSt" in d
        assert "tost" not in d

    def test_non_string_not_contained(self):
        d = Dictionary.from_words(["1"])
        assert 1 not in d
        assert None not in d

    def test_empty(self):
        d = Dictionary.empty()
        assert len(d) == 0
        assert not d
        assert "anything" not in d

    def test_is_immutable(self):
        d = Dictionary.from_words(["test"])
        with pytest.raises(AttributeError):
            d.entries = ()


# =============================================================================
# LANGUAGE CODE TESTS
# =============================================================================


class TestNormalizeLanguageCode:
    """Tests for normalize_language_code()."""

    @pytest.mark.parametrize(
        "code,expected",
        [
            ("en", "en"),
            ("EN-us", "en"),
            ("english", "en"),
            ("de", "de"),
            ("de_AT", "de"),
            ("deu", "de"),
            ("ger", "de"),
            ("German", "de"),
            (" fr ", "fr"),
            ("pt-BR", "pt-br"),
            ("", ""),
        ],
    )
    def test_mapping(self, code, expected):
        assert normalize_language_code(code) == expected


# =============================================================================
# LOADING TESTS
# =============================================================================


class TestReadWords:
    """Tests for read_words()."""

    def test_skips_blank_lines_and_comments(self):
        lines = ["# header\n", "\n", "  the \n", "#test\n", "lost\n", "   \n"]
        assert list(read_words(lines)) == ["the", "lost"]


class TestResolveResource:
    """Tests for resolve_resource() search order."""

    def test_bundled_word_list(self):
        path = resolve_resource("corpus/en_words.txt")
        assert path is not None
        assert path.name == "en_words.txt"
        assert path.parent.name == "corpus"

    def test_absolute_path(self, word_list):
        path = word_list("abs_words.txt", "word\n")
        assert resolve_resource(str(path)) == path

    def test_absolute_path_missing(self, tmp_path):
        assert resolve_resource(str(tmp_path / "missing.txt")) is None

    def test_extra_dirs_searched(self, tmp_path, monkeypatch, word_list):
        monkeypatch.chdir(tmp_path)
        word_list("lists/xx_ocrrepair_words.txt", "word\n")
        found = resolve_resource("xx_ocrrepair_words.txt", [tmp_path / "lists"])
        assert found == tmp_path / "lists" / "xx_ocrrepair_words.txt"

    def test_working_directory_before_extra_dirs(self, tmp_path, monkeypatch, word_list):
        work = tmp_path / "work"
        work.mkdir()
        monkeypatch.chdir(work)
        word_list("work/yy_ocrrepair_words.txt", "cwd\n")
        word_list("lists/yy_ocrrepair_words.txt", "extra\n")

        found = resolve_resource("yy_ocrrepair_words.txt", [tmp_path / "lists"])
        assert found == work / "yy_ocrrepair_words.txt"

    def test_not_found(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_resource("zz_ocrrepair_words.txt", [tmp_path]) is None


class TestLoadWordList:
    """Tests for load_word_list()."""

    def test_loads_in_file_order(self, word_list):
        path = word_list("words.txt", "# comment\nThe\ntest\n\nthe\nLost\n")
        d = load_word_list(str(path))
        assert d.entries == ("the", "test", "lost")

    def test_bundled_english(self):
        d = load_word_list("corpus/en_words.txt")
        assert "test" in d
        assert "lost" in d
        assert "this" in d

    def test_bundled_german(self):
        d = load_word_list("corpus/de_words.txt")
        assert "haus" in d
        assert "und" in d

    @pytest.mark.parametrize("resource", ["corpus/en_words.txt", "corpus/de_words.txt"])
    def test_bundled_lists_have_no_repeated_words(self, resource):
        with open(resolve_resource(resource), encoding="utf-8") as f:
            words = [word.lower() for word in read_words(f)]
        assert len(words) == len(set(words))

    def test_missing_word_list(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(DictionaryLoadError, match="not found") as exc_info:
            load_word_list("corpus/xx_words.txt")
        assert exc_info.value.resource == "corpus/xx_words.txt"

    def test_empty_word_list(self, word_list):
        path = word_list("empty.txt", "# only a comment\n\n")
        with pytest.raises(DictionaryLoadError, match="empty"):
            load_word_list(str(path))

    def test_undecodable_word_list(self, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"caf\xe9\n")
        with pytest.raises(DictionaryLoadError, match="Failed to load"):
            load_word_list(str(path))


# =============================================================================
# STORE TESTS
# =============================================================================


class TestDictionaryStore:
    """Tests for DictionaryStore selection and loading."""

    def test_select_first_loaded_hint(self, store, german):
        assert store.select(["de"]) is german
        assert store.select(["de-AT"]) is german
        assert store.select(["fr", "ger"]) is german

    def test_unknown_language_falls_back_to_default(self, store, english):
        assert store.select(["fr"]) is english

    def test_no_hints_uses_default(self, store, english):
        assert store.select([]) is english
        assert store.select(None) is english

    def test_empty_hints_skipped(self, store, german):
        assert store.select([None, "", "de"]) is german

    def test_missing_default_gives_empty_dictionary(self, german):
        store = DictionaryStore({"de": german}, default_key="en")
        d = store.select(["fr"])
        assert len(d) == 0

    def test_keys_and_get(self, store):
        assert store.keys() == ["en", "de"]
        assert store.get("fr") is None

    def test_store_is_read_only(self, english):
        source = {"en": english}
        store = DictionaryStore(source)
        source["de"] = english
        assert store.keys() == ["en"]

    def test_load_from_config(self, word_list, tmp_path):
        word_list("lists/en.txt", "alpha\nbeta\n")
        word_list("lists/de.txt", "gamma\n")
        config = RepairConfig(
            languages={"en": "lists/en.txt", "de": "lists/de.txt"},
            resource_dirs=[tmp_path],
        )
        store = DictionaryStore.load(config)
        assert store.keys() == ["en", "de"]
        assert store.get("de").entries == ("gamma",)

    def test_load_fails_on_missing_list(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = RepairConfig(languages={"en": "lists/none.txt"})
        with pytest.raises(DictionaryLoadError):
            DictionaryStore.load(config)
