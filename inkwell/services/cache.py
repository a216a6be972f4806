"""Rendered-content cache: a small TTL cache with LRU eviction."""

import time
from collections import OrderedDict
from collections.abc import Hashable
from typing import Any


class TTLCache:
    """In-memory cache with time-to-live and max-size eviction.

    Usage::

        cache = TTLCache(ttl=300, max_size=100)
        cache.set(("article", 1), nodes)
        hit = cache.get(("article", 1))  # value, or None if expired/missing
    """

    def __init__(self, ttl: float = 300, max_size: int = 100) -> None:
        self._ttl = ttl
        self._max_size = max_size
        # OrderedDict preserves insertion order for LRU eviction
        self._store: OrderedDict[Hashable, tuple[Any, float]] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._store)

    def get(self, key: Hashable) -> Any | None:
        """Return the cached value if present and not expired, else None."""
        entry = self._store.get(key)
        if entry is None:
            self.misses += 1
            return None
        value, ts = entry
        if time.monotonic() - ts > self._ttl:
            del self._store[key]
            self.misses += 1
            return None
        # Move to end (most recently used)
        self._store.move_to_end(key)
        self.hits += 1
        return value

    def set(self, key: Hashable, value: Any) -> None:
        """Store a value under *key*, evicting the oldest entry if at capacity."""
        if key in self._store:
            self._store.move_to_end(key)
        self._store[key] = (value, time.monotonic())
        while len(self._store) > self._max_size:
            self._store.popitem(last=False)

    def clear(self) -> None:
        self._store.clear()
        self.hits = 0
        self.misses = 0
