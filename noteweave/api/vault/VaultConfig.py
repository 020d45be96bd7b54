"""Vault configuration management."""

from __future__ import annotations

__all__ = ["VaultConfig"]

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_SUPPORTED_TYPES = ("obsidian",)


class VaultConfig(BaseModel):
    """Vault configuration model."""

    model_config = ConfigDict(extra="forbid")

    type: str = Field("obsidian", description="Vault link dialect")
    base_dir: str = Field(..., description="Path to vault root directory")

    @field_validator("type")
    @classmethod
    def _check_type(cls, v: str) -> str:
        if v not in _SUPPORTED_TYPES:
            raise ValueError(f"vault.type must be one of {list(_SUPPORTED_TYPES)} (found: {v!r})")
        return v

    @field_validator("base_dir")
    @classmethod
    def _normalize_base_dir(cls, v: str) -> str:
        from noteweave.api.config.normalize_path import normalize_path

        if not v.strip():
            raise ValueError("vault.base_dir must be a non-empty path")
        return str(normalize_path(v))

    @classmethod
    def from_config_dict(cls, config: dict[str, Any]) -> VaultConfig:
        """Load vault config from config dict."""
        vault_config = config.get("vault")
        if not vault_config:
            raise ValueError("vault section is required in config")
        return cls(**vault_config)
