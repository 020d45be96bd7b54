"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from noteweave.api.config.NoteweaveConfig import NoteweaveConfig


def pytest_configure(config):
    for marker in ("unit", "integration"):
        config.addinivalue_line("markers", f"{marker}: tests under tests/{marker}/")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(base_dir: str = "~/_vault") -> dict:
    """Minimal valid noteweave configuration dict for testing."""
    return {
        "vault": {
            "type": "obsidian",
            "base_dir": base_dir,
        },
    }


def minimal_noteweave_config(base_dir: str = "~/_vault") -> NoteweaveConfig:
    """Build a NoteweaveConfig from the minimal config dict."""
    return NoteweaveConfig(**minimal_config_dict(base_dir))


def write_notes(root: Path, notes: dict[str, str]) -> Path:
    """Create ``notes`` (relative path -> content) under ``root``."""
    for rel, content in notes.items():
        note = root / rel
        note.parent.mkdir(parents=True, exist_ok=True)
        note.write_text(content, encoding="utf-8")
    return root


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """Empty vault directory."""
    root = tmp_path / "vault"
    root.mkdir()
    return root


@pytest.fixture
def noteweave_home(tmp_path: Path, monkeypatch, vault_dir: Path) -> Path:
    """Set up NOTEWEAVE_HOME with a config pointing at ``vault_dir``.

    Returns:
        Path to the noteweave home directory
    """
    home = tmp_path / ".noteweave"
    home.mkdir()
    monkeypatch.setenv("NOTEWEAVE_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict(str(vault_dir))), encoding="utf-8")
    return home


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
