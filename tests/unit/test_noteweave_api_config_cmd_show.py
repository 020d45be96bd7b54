"""Tests for cmd_show."""

from noteweave.api.config.cmd_show import cmd_show
from tests.conftest import run_cmd


def test_lists_sections(noteweave_home):
    result = run_cmd(cmd_show)
    assert result.success
    assert result.output["content"] == {"sections": ["vault", "render", "cache", "log"]}


def test_shows_section(noteweave_home, vault_dir):
    result = run_cmd(cmd_show, "vault")
    assert result.success
    assert result.output["content"] == {"type": "obsidian", "base_dir": str(vault_dir)}
    assert result.result == "Retrieved configuration for 'vault'"


def test_unknown_section(noteweave_home):
    result = run_cmd(cmd_show, "monitor")
    assert not result.success
    assert result.output["errors"] == ["Unknown section: monitor"]


def test_missing_config(tmp_path, monkeypatch):
    monkeypatch.setenv("NOTEWEAVE_HOME", str(tmp_path))
    result = run_cmd(cmd_show)
    assert not result.success
    assert "Configuration file not found" in result.output["errors"][0]
