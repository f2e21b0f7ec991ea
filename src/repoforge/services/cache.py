""" Named in-process caches with single-flight population.
"""

import logging
import threading
import time
from concurrent.futures import Future

from repoforge.config import get_organisation_cache_ttl

logger = logging.getLogger(__name__)

ACCOUNT_FROM_SECRET = "git-account-from-secret"
ORGANISATIONS = "git-organisations"


class KeyedCache:
    """ Thread safe string keyed cache.

    compute_if_absent runs the populating function at most once per key at a
    time; other callers asking for the same key wait for that result. A None
    result or an exception is handed to the waiters but not stored.
    """

    def __init__(self, name, ttl=None, clock=time.monotonic):
        self.name = name
        self.ttl = ttl
        self._clock = clock
        self._lock = threading.Lock()
        self._entries = {}
        self._pending = {}

    def _expired(self, stored_at):
        return self.ttl is not None and self._clock() - stored_at >= self.ttl

    def get(self, key):
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, stored_at = entry
            if self._expired(stored_at):
                del self._entries[key]
                return None
            return value

    def put(self, key, value):
        with self._lock:
            self._entries[key] = (value, self._clock())

    def invalidate(self, key):
        with self._lock:
            self._entries.pop(key, None)

    def clear(self):
        with self._lock:
            self._entries.clear()

    def __contains__(self, key):
        return self.get(key) is not None

    def __len__(self):
        with self._lock:
            return len(self._entries)

    def compute_if_absent(self, key, populate):
        """ Return the cached value for key, populating it if missing.

        Args:
            key: Cache key
            populate: Callable taking the key and returning the value
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                value, stored_at = entry
                if not self._expired(stored_at):
                    return value
                del self._entries[key]

            future = self._pending.get(key)
            owner = future is None
            if owner:
                future = Future()
                self._pending[key] = future

        if not owner:
            logger.debug(f"Waiting for in-flight population of {self.name}[{key}]")
            return future.result()

        try:
            value = populate(key)
        except BaseException as e:
            with self._lock:
                del self._pending[key]
            future.set_exception(e)
            raise

        with self._lock:
            if value is not None:
                self._entries[key] = (value, self._clock())
            del self._pending[key]
        future.set_result(value)
        return value


class CacheFacade:
    """ Hands out named caches, creating them on first use.
    """

    def __init__(self, ttls=None):
        self._ttls = ttls if ttls is not None else default_ttls()
        self._caches = {}
        self._lock = threading.Lock()

    def get_cache(self, name):
        with self._lock:
            cache = self._caches.get(name)
            if cache is None:
                cache = KeyedCache(name, ttl=self._ttls.get(name))
                self._caches[name] = cache
            return cache


def default_ttls():
    return {ORGANISATIONS: get_organisation_cache_ttl()}


_cache_facade = None


def get_cache_facade():
    """Get singleton instance."""
    global _cache_facade
    if _cache_facade is None:
        _cache_facade = CacheFacade()
    return _cache_facade
