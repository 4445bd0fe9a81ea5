"""Tests for RepairConfig and YAML loading."""

from pathlib import Path

import pytest

from ocrrepair import ConfigurationError, RepairConfig, load_config


class TestRepairConfig:
    """Tests for RepairConfig validation."""

    def test_defaults(self):
        config = RepairConfig()
        assert config.languages == {"en": "corpus/en_words.txt", "de": "corpus/de_words.txt"}
        assert config.default_language == "en"
        assert config.max_suggestions == 5
        assert config.min_token_length == 3
        assert config.max_token_length == 20
        assert config.max_edit_distance == 2
        assert config.max_length_gap == 2
        assert config.top_n == 5

    def test_resource_dirs_become_paths(self):
        config = RepairConfig(resource_dirs=["wordlists"])
        assert config.resource_dirs == [Path("wordlists")]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_suggestions": 0},
            {"min_token_length": 0},
            {"max_edit_distance": 0},
            {"top_n": 0},
            {"max_length_gap": -1},
            {"max_token_length": 2},
            {"languages": {}},
            {"languages": {"en": ""}},
            {"languages": {"": "corpus/en_words.txt"}},
            {"languages": {"en": 5}},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigurationError):
            RepairConfig(**kwargs)

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ConfigurationError, match="Unknown configuration keys: bogus"):
            RepairConfig.from_dict({"bogus": 1})


class TestLoadConfig:
    """Tests for load_config()."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "ocrrepair.yaml"
        path.write_text(
            "languages:\n"
            "  en: lists/en.txt\n"
            "max_suggestions: 3\n"
            "resource_dirs:\n"
            "  - /opt/wordlists\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.languages == {"en": "lists/en.txt"}
        assert config.max_suggestions == 3
        assert config.resource_dirs == [Path("/opt/wordlists")]

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == RepairConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_config(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("languages: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Malformed"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(path)

    def test_wrong_value_type(self, tmp_path):
        path = tmp_path / "types.yaml"
        path.write_text("max_suggestions: five\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid config file"):
            load_config(path)
