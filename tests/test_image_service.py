"""Tests for the image memory cache."""

from infrastructure.image_service import _LRUCache


class TestLRUCache:
    def test_evicts_least_recently_used(self):
        cache = _LRUCache(2)
        cache.put("a", "img-a")
        cache.put("b", "img-b")
        assert cache.get("a") == "img-a"  # a becomes most recent
        cache.put("c", "img-c")
        assert cache.get("b") is None
        assert cache.get("a") == "img-a"
        assert cache.get("c") == "img-c"

    def test_update_replaces_value(self):
        cache = _LRUCache(1)
        cache.put("a", "old")
        cache.put("a", "new")
        assert cache.get("a") == "new"

    def test_capacity_at_least_one(self):
        cache = _LRUCache(0)
        cache.put("a", "img-a")
        assert cache.get("a") == "img-a"
