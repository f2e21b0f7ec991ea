"""KeyedCache and CacheFacade tests"""

import threading

import pytest

from repoforge.services.cache import ORGANISATIONS, CacheFacade, KeyedCache


class TestKeyedCache:

    def test_compute_if_absent_populates_once(self):
        cache = KeyedCache("test")
        calls = []

        def populate(key):
            calls.append(key)
            return key.upper()

        assert cache.compute_if_absent("a", populate) == "A"
        assert cache.compute_if_absent("a", populate) == "A"
        assert calls == ["a"]
        assert "a" in cache

    def test_none_is_not_cached(self):
        cache = KeyedCache("test")
        calls = []

        def populate(key):
            calls.append(key)
            return None

        assert cache.compute_if_absent("a", populate) is None
        assert cache.compute_if_absent("a", populate) is None
        assert len(calls) == 2
        assert len(cache) == 0

    def test_error_is_raised_and_not_cached(self):
        cache = KeyedCache("test")

        def boom(key):
            raise RuntimeError("remote down")

        with pytest.raises(RuntimeError, match="remote down"):
            cache.compute_if_absent("a", boom)
        assert cache.compute_if_absent("a", lambda key: "ok") == "ok"

    def test_concurrent_callers_share_one_population(self):
        cache = KeyedCache("test")
        started = threading.Event()
        release = threading.Event()
        calls = []

        def slow(key):
            calls.append(key)
            started.set()
            release.wait(5)
            return ["alice", "bravo-team"]

        results = []
        first = threading.Thread(target=lambda: results.append(cache.compute_if_absent("k", slow)))
        first.start()
        assert started.wait(5)

        waiters = [
            threading.Thread(target=lambda: results.append(cache.compute_if_absent("k", slow)))
            for _ in range(3)
        ]
        for t in waiters:
            t.start()
        release.set()
        for t in [first, *waiters]:
            t.join(5)

        assert calls == ["k"]
        assert len(results) == 4
        assert all(r is results[0] for r in results)

    def test_different_keys_populate_independently(self):
        cache = KeyedCache("test")
        assert cache.compute_if_absent("a", lambda key: 1) == 1
        assert cache.compute_if_absent("b", lambda key: 2) == 2
        assert len(cache) == 2

    def test_ttl_expiry(self):
        now = [100.0]
        cache = KeyedCache("test", ttl=30, clock=lambda: now[0])
        cache.put("a", "old")
        assert cache.get("a") == "old"

        now[0] += 30
        assert cache.get("a") is None
        assert cache.compute_if_absent("a", lambda key: "new") == "new"

    def test_invalidate_and_clear(self):
        cache = KeyedCache("test")
        cache.put("a", 1)
        cache.put("b", 2)
        cache.invalidate("a")
        assert cache.get("a") is None
        cache.clear()
        assert len(cache) == 0


class TestCacheFacade:

    def test_same_cache_per_name(self):
        facade = CacheFacade(ttls={ORGANISATIONS: 10})
        cache = facade.get_cache(ORGANISATIONS)
        assert facade.get_cache(ORGANISATIONS) is cache
        assert cache.ttl == 10
        assert facade.get_cache("other").ttl is None

    def test_default_ttl_from_environment(self, monkeypatch):
        monkeypatch.setenv("REPOFORGE_ORGANISATION_CACHE_TTL", "5")
        facade = CacheFacade()
        assert facade.get_cache(ORGANISATIONS).ttl == 5.0
