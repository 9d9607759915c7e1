"""
SitemapBuilder - XML sitemap and robots.txt for the whole site.

Key behaviors:
- Walks the full site index, root to leaves
- Skips excluded templates, excluded page ids and pages opting out
- Alternate hreflang links under multi-language sites
- Whole document memoized under a single cache key
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from sitemeta.components.meta import LanguagePort, PageMeta, PagePort, SitePort
from sitemeta.core.errors import ConfigurationError
from sitemeta.core.html import escape
from sitemeta.rules.models import SiteMetaConfig, resolve_option

from .models import AlternateLink, SitemapEntry
from .ports import CachePort

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_SCHEMA = (
    'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" '
    'xmlns:xhtml="http://www.w3.org/1999/xhtml" '
    'xsi:schemaLocation="http://www.sitemaps.org/schemas/sitemap/0.9 '
    "http://www.sitemaps.org/schemas/sitemap/0.9/sitemap.xsd "
    "http://www.w3.org/1999/xhtml "
    'http://www.w3.org/2002/08/xhtml/xhtml1-strict.xsd"'
)
X_DEFAULT = "x-default"

_UTF8_SUFFIX = re.compile(r"\.utf-?8$", re.IGNORECASE)
_NON_SLUG = re.compile(r"[^a-z0-9]+")


class SitemapConfigError(ConfigurationError):
    """Raised when sitemap exclusion options cannot be used."""


# --- Formatting ---


def slugify(text: str) -> str:
    """Lowercase, runs of non-alphanumerics to single hyphens."""
    return _NON_SLUG.sub("-", text.lower()).strip("-")


def language_to_hreflang(language: LanguagePort) -> str:
    """
    Normalize a language to a hreflang code.

    ``de_DE.utf8`` -> ``de-de``, ``en_US`` -> ``en-us``.
    """
    locale = language.locale or language.code
    return slugify(_UTF8_SUFFIX.sub("", locale))


def format_priority(priority: float) -> str:
    """Clamp to [0, 1] and format with one decimal digit, rounding half up."""
    clamped = min(1.0, max(0.0, float(priority)))
    return str(Decimal(str(clamped)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


# --- Exclusion policy ---


def compile_exclude_pattern(pages: Any) -> re.Pattern[str] | None:
    """
    Compile excluded page patterns into one anchored, case-insensitive regex.

    Raises:
        SitemapConfigError: If the patterns are not a list or do not compile.
    """
    if pages is None:
        return None
    if isinstance(pages, str) or not isinstance(pages, Iterable):
        raise SitemapConfigError(
            "sitemap.exclude.pages", f"must be a list of patterns, got {type(pages).__name__}"
        )

    patterns = [str(pattern) for pattern in pages]
    if not patterns:
        return None

    try:
        return re.compile("^(?:" + "|".join(patterns) + ")$", re.IGNORECASE)
    except re.error as e:
        raise SitemapConfigError("sitemap.exclude.pages", f"is not a valid pattern: {e}") from e


def opts_out(page: PagePort) -> bool:
    """Check the per-page ``sitemap: false`` option."""
    options = page.options or {}
    return "sitemap" in options and options["sitemap"] is False


# --- Rendering ---


def render_sitemap_xml(entries: list[SitemapEntry], multilang: bool = False) -> str:
    """
    Render sitemap entries to an XML string.

    Args:
        entries: Entries in output order
        multilang: Declare the xhtml namespace for alternate links

    Returns:
        Valid sitemap.xml content
    """
    schema = f" {XHTML_SCHEMA}" if multilang else ""
    xml_parts = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<urlset xmlns="{SITEMAP_NAMESPACE}"{schema}>',
    ]

    for entry in entries:
        xml_parts.append("<url>")
        xml_parts.append(f"  <loc>{escape(entry.loc)}</loc>")
        xml_parts.append(f"  <lastmod>{entry.lastmod}</lastmod>")
        xml_parts.append(f"  <priority>{format_priority(entry.priority)}</priority>")
        if entry.changefreq:
            xml_parts.append(f"  <changefreq>{escape(entry.changefreq)}</changefreq>")
        for link in entry.alternates:
            xml_parts.append(
                f'  <xhtml:link rel="alternate" hreflang="{escape(link.hreflang)}" '
                f'href="{escape(link.href)}" />'
            )
        xml_parts.append("</url>")

    xml_parts.append("</urlset>")
    return "\n".join(xml_parts)


def render_robots_txt(site_url: str) -> str:
    """Allow everything and point crawlers at the sitemap."""
    return "\n".join(
        [
            "User-agent: *",
            "Allow: /",
            f"Sitemap: {site_url.rstrip('/')}/sitemap.xml",
        ]
    )


# --- Builder ---


class SitemapBuilder:
    """
    Sitemap builder for one site.

    The rendered document is memoized in ``cache``; invalidation is left
    to the cache (ttl) or an explicit delete/flush.
    """

    def __init__(
        self,
        site: SitePort,
        cache: CachePort,
        config: SiteMetaConfig | None = None,
    ) -> None:
        self._site = site
        self._cache = cache
        self._config = config or SiteMetaConfig()

    @property
    def cache_key(self) -> str:
        return self._config.sitemap.cache_key

    def render(self) -> str:
        """Get the sitemap, building it only on a cache miss."""
        rules = self._config.sitemap
        return self._cache.get_or_set(rules.cache_key, self.build, rules.cache_ttl)

    def build(self) -> str:
        """Build the sitemap document, bypassing the cache."""
        entries = self.collect_entries()
        logger.info("Sitemap built with %d entries", len(entries))
        return render_sitemap_xml(entries, multilang=bool(self._site.languages))

    def collect_entries(self) -> list[SitemapEntry]:
        """
        Walk the site index and build entries for every included page.

        Raises:
            SitemapConfigError: If the excluded pages option is invalid.
        """
        rules = self._config.sitemap
        exclude_templates = set(rules.exclude.templates)
        # Producers are evaluated once per build
        exclude_pattern = compile_exclude_pattern(resolve_option(rules.exclude.pages))
        hidden: set[str] = set()
        entries: list[SitemapEntry] = []

        for page in self._site.index():
            if rules.hide_descendants:
                parent = page.parent
                if parent is not None and parent.id in hidden:
                    hidden.add(page.id)
                    continue

            if page.template in exclude_templates:
                continue

            if exclude_pattern is not None and exclude_pattern.match(page.id):
                continue

            if opts_out(page):
                hidden.add(page.id)
                continue

            entries.append(self.build_entry(page))

        return entries

    def build_entry(self, page: PagePort) -> SitemapEntry:
        meta = PageMeta(page, self._config.meta)
        changefreq = meta.changefreq()

        entry = SitemapEntry(
            loc=page.url(),
            lastmod=page.modified.strftime("%Y-%m-%d"),
            priority=meta.priority(),
            changefreq=str(changefreq) if changefreq.is_not_empty() else None,
        )

        if self._site.languages:
            for language in self._site.languages:
                entry.alternates.append(
                    AlternateLink(language_to_hreflang(language), page.url(language.code))
                )
            entry.alternates.append(AlternateLink(X_DEFAULT, page.url()))

        return entry


# --- Factory ---


def create_sitemap_builder(
    site: SitePort,
    cache: CachePort,
    config: SiteMetaConfig | None = None,
) -> SitemapBuilder:
    return SitemapBuilder(site, cache, config)
