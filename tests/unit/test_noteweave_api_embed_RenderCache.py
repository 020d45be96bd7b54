"""Tests for RenderCache."""

from pathlib import Path

import pytest

from noteweave.api.embed.CacheStats import CacheStats
from noteweave.api.embed.RenderCache import RenderCache


def _p(i: int) -> Path:
    return Path(f"/vault/note{i}.md")


def test_defaults():
    cache = RenderCache()
    assert cache.max_entries == 100
    assert cache.max_size_bytes == 50 * 1024 * 1024


@pytest.mark.parametrize("kwargs", [{"max_entries": 0}, {"max_size_bytes": 0}, {"max_entries": -1}])
def test_rejects_non_positive_limits(kwargs):
    with pytest.raises(ValueError, match="must be positive"):
        RenderCache(**kwargs)


def test_hit_requires_exact_mtime():
    cache = RenderCache()
    cache.insert(_p(1), 10, "<p>x</p>")
    assert cache.get(_p(1), 10) == "<p>x</p>"
    assert cache.get(_p(1), 11) is None
    assert cache.get(_p(2), 10) is None
    assert cache.get_stats() == CacheStats(count=1, size_bytes=8, hits=1, misses=2)


def test_size_is_utf8_bytes():
    cache = RenderCache()
    cache.insert(_p(1), 1, "é")
    assert cache.get_stats().size_bytes == 2


def test_replace_same_path_updates_size():
    cache = RenderCache()
    cache.insert(_p(1), 1, "aaaa")
    cache.insert(_p(1), 2, "bb")
    assert len(cache) == 1
    assert cache.get_stats().size_bytes == 2
    assert cache.get(_p(1), 2) == "bb"


def test_entry_cap_evicts_oldest_first():
    cache = RenderCache()
    for i in range(105):
        cache.insert(_p(i), 1, "x")
    assert len(cache) == 100
    for i in range(5):
        assert _p(i) not in cache
    assert _p(5) in cache
    assert _p(104) in cache


def test_access_protects_from_eviction():
    cache = RenderCache(max_entries=3)
    for i in range(3):
        cache.insert(_p(i), 1, "x")
    assert cache.get(_p(0), 1) == "x"
    cache.insert(_p(3), 1, "x")
    assert _p(0) in cache
    assert _p(1) not in cache


def test_size_cap_evicts_until_fit():
    cache = RenderCache(max_size_bytes=10)
    cache.insert(_p(1), 1, "aaaa")
    cache.insert(_p(2), 1, "bbbb")
    cache.insert(_p(3), 1, "cccc")
    assert _p(1) not in cache
    assert len(cache) == 2
    assert cache.get_stats().size_bytes == 8


def test_oversized_entry_admitted_into_empty_cache():
    cache = RenderCache(max_size_bytes=4)
    cache.insert(_p(1), 1, "ab")
    cache.insert(_p(2), 1, "x" * 100)
    assert len(cache) == 1
    assert _p(2) in cache
    assert cache.get_stats().size_bytes == 100


def test_bounds_hold_after_many_inserts():
    cache = RenderCache(max_entries=10, max_size_bytes=1000)
    for i in range(200):
        cache.insert(_p(i % 37), i, "y" * (i % 90 + 1))
        stats = cache.get_stats()
        assert stats.count <= 10
        assert stats.size_bytes <= 1000


def test_clear_resets_counters():
    cache = RenderCache()
    cache.insert(_p(1), 1, "x")
    cache.get(_p(1), 1)
    cache.get(_p(2), 1)
    cache.clear()
    assert cache.get_stats() == CacheStats(count=0, size_bytes=0, hits=0, misses=0)
