from __future__ import annotations

import pytest

from ucfinder.core.config import DATA_ENV_VAR, FinderConfig, config_from_mapping, load_config
from ucfinder.core.exceptions import ConfigError


def test_defaults(monkeypatch):
    monkeypatch.delenv(DATA_ENV_VAR, raising=False)
    config = FinderConfig()
    assert config.data_source == "char-data-nounihan.txt"
    assert config.regex_timeout == 1.0
    assert config.regex_match_alias is False
    assert not config.is_remote


def test_environment_overrides_default_source(monkeypatch):
    monkeypatch.setenv(DATA_ENV_VAR, "https://example.com/data.txt")
    config = FinderConfig()
    assert config.data_source == "https://example.com/data.txt"
    assert config.is_remote


def test_load_config_reads_table(tmp_path):
    path = tmp_path / "ucfinder.toml"
    path.write_text(
        '[ucfinder]\ndata_source = "chars.txt"\nregex_timeout = 0.5\nregex_match_alias = true\n',
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.data_source == "chars.txt"
    assert config.regex_timeout == 0.5
    assert config.regex_match_alias is True


def test_load_config_overrides_win(tmp_path):
    path = tmp_path / "ucfinder.toml"
    path.write_text('data_source = "chars.txt"\n', encoding="utf-8")
    config = load_config(path, data_source="other.txt", regex_timeout=None)
    assert config.data_source == "other.txt"
    assert config.regex_timeout == 1.0


def test_unknown_keys_are_rejected():
    with pytest.raises(ConfigError):
        config_from_mapping({"data_file": "chars.txt"})


def test_invalid_values_are_rejected():
    with pytest.raises(ConfigError):
        config_from_mapping({"regex_timeout": -1})


def test_malformed_toml(tmp_path):
    path = tmp_path / "ucfinder.toml"
    path.write_text("data_source = \n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Malformed"):
        load_config(path)


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError, match="Unable to read"):
        load_config(tmp_path / "absent.toml")


@pytest.mark.parametrize("value", ['"oops"', "3", "[1, 2]"])
def test_settings_key_must_be_a_table(tmp_path, value):
    path = tmp_path / "ucfinder.toml"
    path.write_text(f"ucfinder = {value}\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="must be a table"):
        load_config(path, data_source="chars.txt")


def test_mapping_settings_key_must_be_a_table():
    with pytest.raises(ConfigError, match="must be a table"):
        config_from_mapping({"ucfinder": "oops"})
