"""
Render component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from sitemeta.components.meta import Field, PagePort


class FieldResolverPort(Protocol):
    """Port for resolving metadata fields of one page."""

    page: PagePort

    def get(self, key: str, fallback: bool = True) -> Field:
        """Resolve a metadata field."""
        ...
