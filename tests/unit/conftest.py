"""Unit test fixtures for the embed engine."""

from pathlib import Path

import pytest

from noteweave.api.embed.RenderCache import RenderCache
from noteweave.api.embed.RenderContext import RenderContext
from noteweave.api.embed.VaultIndex import VaultIndex
from tests.conftest import write_notes


@pytest.fixture
def make_ctx(vault_dir: Path):
    """Factory: write notes into the vault and return a fresh RenderContext."""

    def _make(notes: dict[str, str] | None = None, max_depth: int = 5, cache: RenderCache | None = None):
        write_notes(vault_dir, notes or {})
        index = VaultIndex.build_index(vault_dir)
        return RenderContext.for_index(index, cache or RenderCache(), max_depth=max_depth)

    return _make
