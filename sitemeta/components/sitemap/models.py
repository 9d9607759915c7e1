"""
Sitemap component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sitemeta.components.meta import SitePort


@dataclass(frozen=True)
class AlternateLink:
    """Alternate language link of a sitemap entry."""

    hreflang: str
    href: str


@dataclass
class SitemapEntry:
    """Entry for sitemap generation."""

    loc: str
    lastmod: str
    priority: float = 0.5
    changefreq: str | None = None
    alternates: list[AlternateLink] = field(default_factory=list)


# --- Input Models ---


@dataclass(frozen=True)
class BuildSitemapInput:
    """Input for building (or fetching the cached) sitemap.xml."""

    site: SitePort


@dataclass(frozen=True)
class RobotsTxtInput:
    """Input for rendering robots.txt."""

    site: SitePort


# --- Output Models ---


@dataclass(frozen=True)
class SitemapOutput:
    """Rendered document with its media type."""

    body: str
    media_type: str
