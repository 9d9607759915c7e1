"""In-memory cache adapter.

This adapter implements CachePort for the sitemap component.
For multi-process deployments, consider a Redis or file backed implementation.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class InMemoryCache:
    """In-memory cache with per-key expiry - suitable for single-process deployments."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._items: dict[str, tuple[Any, float | None]] = {}
        self._lock = threading.RLock()

    def get(self, key: str) -> Any | None:
        """Get a value, None when missing or expired."""
        with self._lock:
            item = self._items.get(key)
            if item is None:
                return None
            value, expires_at = item
            if expires_at is not None and expires_at <= self._clock():
                del self._items[key]
                return None
            return value

    def set(self, key: str, value: Any, ttl: int = 0) -> None:
        """Store a value; ttl in seconds, 0 for no expiry."""
        expires_at = self._clock() + ttl if ttl > 0 else None
        with self._lock:
            self._items[key] = (value, expires_at)

    def get_or_set(self, key: str, producer: Callable[[], Any], ttl: int = 0) -> Any:
        """
        Get a value or compute and store it.

        The lock is held while computing, so concurrent callers wait for
        the first build instead of repeating it.
        """
        with self._lock:
            value = self.get(key)
            if value is not None:
                logger.debug("Cache hit for %s", key)
                return value

            value = producer()
            self.set(key, value, ttl)
            return value

    def delete(self, key: str) -> None:
        with self._lock:
            self._items.pop(key, None)

    def flush(self) -> None:
        """Remove every key - useful for testing."""
        with self._lock:
            self._items.clear()
