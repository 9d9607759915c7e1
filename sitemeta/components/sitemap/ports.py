"""
Sitemap component port definitions.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol


class CachePort(Protocol):
    """Key-value cache used to memoize rendered documents."""

    def get(self, key: str) -> Any | None:
        """Get a cached value, None when missing or expired."""
        ...

    def set(self, key: str, value: Any, ttl: int = 0) -> None:
        """Store a value; ttl in seconds, 0 for no expiry."""
        ...

    def get_or_set(self, key: str, producer: Callable[[], Any], ttl: int = 0) -> Any:
        """Get a cached value or compute, store and return it."""
        ...

    def delete(self, key: str) -> None:
        """Remove a single key."""
        ...

    def flush(self) -> None:
        """Remove every key."""
        ...
