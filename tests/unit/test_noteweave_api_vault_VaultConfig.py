"""Tests for VaultConfig."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from noteweave.api.vault.VaultConfig import VaultConfig


def test_defaults_to_obsidian(tmp_path):
    config = VaultConfig(base_dir=str(tmp_path))
    assert config.type == "obsidian"
    assert config.base_dir == str(tmp_path)


def test_base_dir_expanded():
    config = VaultConfig(base_dir="~/_vault")
    assert config.base_dir == str(Path.home() / "_vault")


def test_unsupported_type():
    with pytest.raises(ValidationError, match="vault.type must be one of"):
        VaultConfig(base_dir="/tmp", type="logseq")


def test_empty_base_dir():
    with pytest.raises(ValidationError, match="non-empty"):
        VaultConfig(base_dir="  ")


def test_extra_fields_forbidden():
    with pytest.raises(ValidationError):
        VaultConfig(base_dir="/tmp", database="vault")


def test_from_config_dict(tmp_path):
    config = VaultConfig.from_config_dict({"vault": {"base_dir": str(tmp_path)}})
    assert config.base_dir == str(tmp_path)
    with pytest.raises(ValueError, match="vault section is required"):
        VaultConfig.from_config_dict({})
