"""
Meta component port definitions.

The page and site objects are owned by the host application. These
protocols describe the subset this package reads from them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from typing import Any, Protocol


class LanguagePort(Protocol):
    """A site language."""

    code: str
    locale: str | None


class ImagePort(Protocol):
    """An image file attached to a page."""

    url: str
    width: int | None
    height: int | None
    alt: str | None

    def resize(self, width: int) -> ImagePort:
        """Return a copy fitted into a ``width`` bounding box."""
        ...


class SitePort(Protocol):
    """The site: root content, languages and the full page index."""

    content: Mapping[str, Any]
    languages: Sequence[LanguagePort]
    language: LanguagePort | None

    def url(self, language: str | None = None) -> str:
        """Get the site home URL."""
        ...

    def index(self) -> Iterable[PagePort]:
        """Iterate every page, root to leaves, pre-order."""
        ...

    def error_page(self) -> str:
        """Get the rendered error page body."""
        ...


class PagePort(Protocol):
    """A content node."""

    id: str
    template: str
    content: Mapping[str, Any]
    modified: datetime
    options: Mapping[str, Any]
    site: SitePort
    parent: PagePort | None

    def url(self, language: str | None = None) -> str:
        """Get the page URL, optionally for a specific language."""
        ...

    def file(self, filename: str) -> ImagePort | None:
        """Find a file of this page by name."""
        ...
