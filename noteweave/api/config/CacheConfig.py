"""Render cache configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ..embed._constants import MAX_CACHE_ENTRIES, MAX_CACHE_SIZE_BYTES


class CacheConfig(BaseModel):
    """Bounds for the in-memory render cache."""

    model_config = ConfigDict(extra="forbid")

    max_entries: int = Field(MAX_CACHE_ENTRIES, gt=0, description="Maximum number of cached notes")
    max_size_bytes: int = Field(MAX_CACHE_SIZE_BYTES, gt=0, description="Maximum total size of cached HTML")
