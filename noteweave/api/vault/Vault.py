"""Vault public API."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

from ..config.CacheConfig import CacheConfig
from ..config.RenderConfig import RenderConfig
from ..embed._constants import NOTE_SUFFIX
from ..embed.CacheStats import CacheStats
from ..embed.parse_wikilink_inner import parse_wikilink_inner
from ..embed.render_markdown_safe import render_markdown_safe
from ..embed.render_markdown_with_embeds import render_markdown_with_embeds
from ..embed.RenderCache import RenderCache
from ..embed.RenderContext import RenderContext
from ..embed.resolve_target import resolve_target
from ..embed.ResolveResult import ResolveResult
from ..embed.VaultIndex import VaultIndex
from .VaultConfig import VaultConfig

logger = logging.getLogger(__name__)

INITIAL_NOTE_NAME = "index.md"


class Vault:
    """Facade for one opened vault.

    Owns the vault index and render cache and serializes every render on a
    lock, so a single instance can be shared between threads. Acts as a
    context manager: the index is built on ``__enter__``.
    """

    def __init__(
        self,
        vault_config: VaultConfig,
        render_config: RenderConfig | None = None,
        cache_config: CacheConfig | None = None,
    ):
        self.vault_config = vault_config
        self.render_config = render_config or RenderConfig()
        self.cache_config = cache_config or CacheConfig()
        self._lock = threading.Lock()
        self._index: VaultIndex | None = None
        self._cache: RenderCache | None = None

    def __enter__(self) -> Vault:
        self.open()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def open(self) -> None:
        """Build the index and an empty cache.

        Raises:
            VaultIndexError: If the vault cannot be indexed
        """
        index = VaultIndex.build_index(self.vault_config.base_dir)
        with self._lock:
            self._index = index
            self._cache = RenderCache(
                max_entries=self.cache_config.max_entries,
                max_size_bytes=self.cache_config.max_size_bytes,
            )

    def close(self) -> None:
        with self._lock:
            self._index = None
            self._cache = None

    @property
    def index(self) -> VaultIndex:
        if self._index is None:
            raise RuntimeError("Vault not opened (use 'with Vault(...)')")
        return self._index

    @property
    def cache(self) -> RenderCache:
        if self._cache is None:
            raise RuntimeError("Vault not opened (use 'with Vault(...)')")
        return self._cache

    @property
    def vault_path(self) -> Path:
        """Canonical root directory of the vault."""
        return self.index.root

    def render(self, path: Path | str) -> str:
        """Render a note with wikilinks resolved and embeds expanded."""
        with self._lock:
            ctx = RenderContext.for_index(self.index, self.cache, max_depth=self.render_config.max_depth)
            return render_markdown_with_embeds(path, ctx)

    @staticmethod
    def render_plain(path: Path | str) -> str:
        """Render a note on its own, leaving link syntax as written.

        Raises:
            OSError: If the note cannot be read
        """
        return render_markdown_safe(Path(path).read_text(encoding="utf-8"))

    def resolve(self, raw_link: str) -> ResolveResult:
        """Resolve the text between ``[[`` and ``]]`` against the index."""
        return resolve_target(parse_wikilink_inner(raw_link), self.index)

    def initial_note(self) -> Path | None:
        """The note to show when the vault opens.

        ``index.md`` at the vault root if present, else the first markdown
        file in the root by name.
        """
        root = self.vault_path
        candidate = root / INITIAL_NOTE_NAME
        if candidate.is_file():
            return candidate
        notes = sorted(
            (p for p in root.iterdir() if p.is_file() and p.suffix == NOTE_SUFFIX),
            key=lambda p: p.name,
        )
        return notes[0] if notes else None

    def rebuild_index(self) -> None:
        """Re-walk the vault and drop every cached render.

        Raises:
            RuntimeError: If the vault is not open
            VaultIndexError: If the vault cannot be indexed
        """
        index = VaultIndex.build_index(self.vault_config.base_dir)
        with self._lock:
            if self._cache is None:
                raise RuntimeError("Vault not opened (use 'with Vault(...)')")
            self._index = index
            self._cache.clear()
        logger.info("Rebuilt vault index for %s", index.root)

    def cache_stats(self) -> CacheStats:
        with self._lock:
            return self.cache.get_stats()

    def clear_cache(self) -> None:
        with self._lock:
            self.cache.clear()
