"""Short-lived, thread-safe cache of successful listing envelopes."""
from __future__ import annotations

import threading
from typing import Any, Optional

from cachetools import TTLCache

from models import SanitizedRequest


class ResultCache:
    """A thin thread-safe wrapper around cachetools.TTLCache.

    Only successful envelopes go in; keys are (subreddit, sort, limit).
    A ttl of 0 turns the cache into a no-op.

    Usage:
        cache = ResultCache(maxsize=256, ttl=60)
        cache.get(request)
        cache.set(request, envelope)
    """

    def __init__(self, maxsize: int = 256, ttl: int = 60):
        self.enabled = ttl > 0
        self._cache = TTLCache(maxsize=maxsize, ttl=ttl) if self.enabled else None
        self._lock = threading.RLock()

    def get(self, request: SanitizedRequest) -> Optional[dict[str, Any]]:
        if not self.enabled:
            return None
        with self._lock:
            return self._cache.get(request.cache_key)

    def set(self, request: SanitizedRequest, envelope: dict[str, Any]) -> None:
        if not self.enabled:
            return
        with self._lock:
            self._cache[request.cache_key] = envelope

    def clear(self) -> None:
        if not self.enabled:
            return
        with self._lock:
            self._cache.clear()

    def stats(self) -> dict:
        if not self.enabled:
            return {"currsize": 0, "maxsize": 0}
        with self._lock:
            return {"currsize": self._cache.currsize, "maxsize": self._cache.maxsize}
