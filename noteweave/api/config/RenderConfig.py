"""Render configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ..embed._constants import DEFAULT_MAX_DEPTH


class RenderConfig(BaseModel):
    """Embed expansion settings."""

    model_config = ConfigDict(extra="forbid")

    max_depth: int = Field(DEFAULT_MAX_DEPTH, ge=0, description="Deepest embed level that is still inlined")
