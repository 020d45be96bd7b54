"""Render cache (UNO: single class)."""

from __future__ import annotations

import logging
import time
from collections import OrderedDict
from pathlib import Path

from ._constants import MAX_CACHE_ENTRIES, MAX_CACHE_SIZE_BYTES
from .CachedEntry import CachedEntry
from .CacheStats import CacheStats

logger = logging.getLogger(__name__)


class RenderCache:
    """LRU cache of rendered notes bounded by entry count and total HTML size.

    Entries are keyed by canonical path and only served while the probe
    mtime equals the stored one. The OrderedDict keeps recency order: the
    first key is the least recently used.
    """

    def __init__(self, max_entries: int = MAX_CACHE_ENTRIES, max_size_bytes: int = MAX_CACHE_SIZE_BYTES):
        if max_entries <= 0:
            raise ValueError(f"max_entries must be positive (found: {max_entries})")
        if max_size_bytes <= 0:
            raise ValueError(f"max_size_bytes must be positive (found: {max_size_bytes})")
        self.max_entries = max_entries
        self.max_size_bytes = max_size_bytes
        self._entries: OrderedDict[Path, CachedEntry] = OrderedDict()
        self._size_bytes = 0
        self._hits = 0
        self._misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def get(self, path: Path, mtime: int) -> str | None:
        """Return cached HTML if the entry was built from exactly ``mtime``."""
        entry = self._entries.get(path)
        if entry is not None and entry.mtime == mtime:
            self._entries.move_to_end(path)
            entry.last_accessed = time.time()
            self._hits += 1
            logger.debug("Render cache hit: %s", path)
            return entry.html
        self._misses += 1
        logger.debug("Render cache miss: %s", path)
        return None

    def insert(self, path: Path, mtime: int, html: str) -> None:
        """Store HTML for ``path``, evicting least recently used entries first.

        An entry larger than the size budget is still admitted once the
        cache has been emptied.
        """
        size_bytes = len(html.encode("utf-8"))
        old = self._entries.pop(path, None)
        if old is not None:
            self._size_bytes -= old.size_bytes

        while self._entries and (
            len(self._entries) >= self.max_entries or self._size_bytes + size_bytes > self.max_size_bytes
        ):
            self._evict_lru()

        self._entries[path] = CachedEntry(
            mtime=mtime,
            html=html,
            size_bytes=size_bytes,
            last_accessed=time.time(),
        )
        self._size_bytes += size_bytes

    def _evict_lru(self) -> None:
        path, entry = self._entries.popitem(last=False)
        self._size_bytes -= entry.size_bytes
        logger.debug("Render cache evicted %s (%d bytes)", path, entry.size_bytes)

    def clear(self) -> None:
        """Drop every entry and reset the counters."""
        self._entries.clear()
        self._size_bytes = 0
        self._hits = 0
        self._misses = 0

    def get_stats(self) -> CacheStats:
        return CacheStats(
            count=len(self._entries),
            size_bytes=self._size_bytes,
            hits=self._hits,
            misses=self._misses,
        )
