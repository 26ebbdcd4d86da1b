"""TTL response cache for transpile results.

Features:
- TTL-based expiration (default 1 hour)
- Bounded size (default 1000 entries); expired entries are purged first,
  then the oldest entry is evicted
- Content-based keys (code + target + syntax)
- Thread-safe operations
- Cache statistics (hits, misses, evictions)
"""

from __future__ import annotations

import hashlib
import threading
import time
from collections import OrderedDict
from typing import Any, Callable, Dict, Optional, Tuple

from emojiscript.observability.logging import get_logger

logger = get_logger(__name__)


def cache_key(code: str, target: str, markup: bool) -> str:
    """SHA-256 of ``code:target:markup``."""
    payload = f"{code}:{target}:{'true' if markup else 'false'}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class TranspileCache:
    """Thread-safe TTL cache for transpile responses."""

    def __init__(
        self,
        max_size: int = 1000,
        ttl: float = 3600.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize cache.

        Args:
            max_size: Maximum number of cached responses
            ttl: Time-to-live in seconds (default 1 hour)
            clock: Time source, injectable for tests
        """
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self.ttl = ttl
        self._clock = clock
        self._entries: "OrderedDict[str, Tuple[Any, float]]" = OrderedDict()
        self._lock = threading.RLock()
        self.stats: Dict[str, int] = {"hits": 0, "misses": 0, "evictions": 0}

    def _expired(self, stored_at: float, now: float) -> bool:
        return now - stored_at >= self.ttl

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or ``None`` when absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self.stats["misses"] += 1
                return None

            value, stored_at = entry
            if self._expired(stored_at, self._clock()):
                del self._entries[key]
                self.stats["misses"] += 1
                return None

            self.stats["hits"] += 1
            return value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            now = self._clock()
            if key in self._entries:
                del self._entries[key]
            elif len(self._entries) >= self.max_size:
                self._make_room(now)
            self._entries[key] = (value, now)

    def _make_room(self, now: float) -> None:
        expired = [k for k, (_, stored_at) in self._entries.items() if self._expired(stored_at, now)]
        for key in expired:
            del self._entries[key]
        self.stats["evictions"] += len(expired)

        while len(self._entries) >= self.max_size:
            oldest, _ = self._entries.popitem(last=False)
            self.stats["evictions"] += 1
            logger.debug("Evicted cache entry %s", oldest[:12])

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and not self._expired(entry[1], self._clock())


__all__ = ["TranspileCache", "cache_key"]
