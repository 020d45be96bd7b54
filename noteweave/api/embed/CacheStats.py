"""CacheStats model (UNO: single model)."""

from typing import NamedTuple


class CacheStats(NamedTuple):
    count: int
    size_bytes: int
    hits: int
    misses: int
