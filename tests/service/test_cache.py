"""Tests for the transpile response cache."""

import pytest

from emojiscript.service.cache import TranspileCache, cache_key


class TestCacheKey:

    def test_is_sha256_hex(self):
        key = cache_key("code", "javascript", True)
        assert len(key) == 64
        assert int(key, 16) >= 0

    def test_depends_on_every_part(self):
        base = cache_key("code", "javascript", False)
        assert cache_key("code", "javascript", False) == base
        assert cache_key("other", "javascript", False) != base
        assert cache_key("code", "typescript", False) != base
        assert cache_key("code", "javascript", True) != base


class TestTranspileCache:

    def test_miss_then_hit(self, cache):
        assert cache.get("k") is None
        cache.set("k", "v")
        assert cache.get("k") == "v"
        assert cache.stats == {"hits": 1, "misses": 1, "evictions": 0}

    def test_entry_expires_after_ttl(self, cache, clock):
        cache.set("k", "v")
        clock.advance(59)
        assert cache.get("k") == "v"
        clock.advance(1)
        assert cache.get("k") is None
        assert "k" not in cache
        assert len(cache) == 0

    def test_oldest_entry_evicted_when_full(self, clock):
        cache = TranspileCache(max_size=2, ttl=60.0, clock=clock)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("c", 3)
        assert "a" not in cache
        assert cache.get("b") == 2
        assert cache.get("c") == 3
        assert cache.stats["evictions"] == 1

    def test_expired_entries_purged_before_eviction(self, clock):
        cache = TranspileCache(max_size=2, ttl=10.0, clock=clock)
        cache.set("old", 1)
        clock.advance(5)
        cache.set("fresh", 2)
        clock.advance(6)
        cache.set("new", 3)
        assert "old" not in cache
        assert cache.get("fresh") == 2
        assert cache.get("new") == 3

    def test_overwrite_does_not_evict(self, clock):
        cache = TranspileCache(max_size=1, ttl=60.0, clock=clock)
        cache.set("k", 1)
        cache.set("k", 2)
        assert cache.get("k") == 2
        assert cache.stats["evictions"] == 0

    def test_clear(self, cache):
        cache.set("a", 1)
        cache.set("b", 2)
        cache.clear()
        assert len(cache) == 0

    def test_max_size_must_be_positive(self):
        with pytest.raises(ValueError):
            TranspileCache(max_size=0)
