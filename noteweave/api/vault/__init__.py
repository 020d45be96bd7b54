"""Vault API module."""

from pydantic import BaseModel, ConfigDict


class VaultRenderOutput(BaseModel):
    """Output of ``noteweave vault render``."""

    model_config = ConfigDict(extra="forbid")

    errors: list[str]
    warnings: list[str]
    path: str
    html: str
    output_path: str | None
    cache: dict[str, int]
    success: bool


class VaultResolveOutput(BaseModel):
    """Output of ``noteweave vault resolve``."""

    model_config = ConfigDict(extra="forbid")

    errors: list[str]
    warnings: list[str]
    link: str
    target: str
    subtarget: str | None
    alias: str | None
    status: str
    resolved_path: str | None
    success: bool


class VaultIndexOutput(BaseModel):
    """Output of ``noteweave vault index``."""

    model_config = ConfigDict(extra="forbid")

    errors: list[str]
    warnings: list[str]
    vault_path: str
    note_count: int
    ambiguous: dict[str, list[str]]
    success: bool


__all__ = [
    "VaultIndexOutput",
    "VaultRenderOutput",
    "VaultResolveOutput",
]
