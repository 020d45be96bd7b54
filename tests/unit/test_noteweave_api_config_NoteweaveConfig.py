"""Tests for NoteweaveConfig loading and saving."""

import json

import pytest

from noteweave.api.config.get_home_dir import get_home_dir
from noteweave.api.config.NoteweaveConfig import NoteweaveConfig
from tests.conftest import minimal_config_dict


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("NOTEWEAVE_HOME", str(tmp_path))
    return tmp_path


def _write(home, data) -> None:
    (home / "config.json").write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")


def test_home_dir_from_env(home):
    assert get_home_dir() == home.resolve()
    assert get_home_dir("config.json") == home.resolve() / "config.json"


def test_home_dir_default(monkeypatch, tmp_path):
    monkeypatch.delenv("NOTEWEAVE_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_home_dir() == tmp_path / ".noteweave"


def test_load_minimal_uses_defaults(home, tmp_path):
    _write(home, minimal_config_dict(str(tmp_path)))
    config = NoteweaveConfig.load()
    assert config.vault.base_dir == str(tmp_path)
    assert config.render.max_depth == 5
    assert config.cache.max_entries == 100
    assert config.cache.max_size_bytes == 50 * 1024 * 1024
    assert config.log.level == "INFO"
    assert config.path == home.resolve() / "config.json"


def test_load_full(home, tmp_path):
    data = minimal_config_dict(str(tmp_path))
    data["render"] = {"max_depth": 2}
    data["cache"] = {"max_entries": 10, "max_size_bytes": 1024}
    data["log"] = {"level": "DEBUG"}
    _write(home, data)
    config = NoteweaveConfig.load()
    assert config.render.max_depth == 2
    assert config.cache.max_entries == 10
    assert config.log.level == "DEBUG"


def test_missing_file(home):
    with pytest.raises(ValueError, match="Configuration file not found"):
        NoteweaveConfig.load()


def test_invalid_json(home):
    _write(home, "{not json")
    with pytest.raises(ValueError, match="Invalid JSON"):
        NoteweaveConfig.load()


@pytest.mark.parametrize(
    ("section", "value", "field"),
    [
        ("render", {"max_depth": -1}, "render.max_depth"),
        ("cache", {"max_entries": 0}, "cache.max_entries"),
        ("cache", {"max_size_bytes": 0}, "cache.max_size_bytes"),
        ("log", {"level": "TRACE"}, "log.level"),
    ],
)
def test_validation_error_names_field(home, tmp_path, section, value, field):
    data = minimal_config_dict(str(tmp_path))
    data[section] = value
    _write(home, data)
    with pytest.raises(ValueError, match=f"Configuration validation error: {field}"):
        NoteweaveConfig.load()


def test_missing_vault_section(home):
    _write(home, {})
    with pytest.raises(ValueError, match="vault"):
        NoteweaveConfig.load()


def test_unknown_section_rejected(home, tmp_path):
    data = minimal_config_dict(str(tmp_path))
    data["monitor"] = {}
    _write(home, data)
    with pytest.raises(ValueError, match="monitor"):
        NoteweaveConfig.load()


def test_save_round_trip(home, tmp_path):
    _write(home, minimal_config_dict(str(tmp_path)))
    config = NoteweaveConfig.load()
    config.render.max_depth = 3
    config.save()
    assert not (home / "config.json.tmp").exists()
    assert NoteweaveConfig.load().render.max_depth == 3


@pytest.mark.parametrize("payload", ["[]", "42", '"vault"', "null"])
def test_non_object_json_rejected(home, payload):
    _write(home, payload)
    with pytest.raises(ValueError, match="must contain a JSON object"):
        NoteweaveConfig.load()
