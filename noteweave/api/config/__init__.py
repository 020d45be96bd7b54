"""Config API module."""

from pydantic import BaseModel, ConfigDict


class ConfigShowOutput(BaseModel):
    """Output of ``noteweave config show``."""

    model_config = ConfigDict(extra="forbid")

    errors: list[str]
    warnings: list[str]
    section: str
    content: dict
    config_path: str


__all__ = ["ConfigShowOutput"]
