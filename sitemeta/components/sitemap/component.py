"""
Sitemap component - sitemap.xml and robots.txt documents.

Invariants:
- Excluded templates and pages never appear in <loc>
- Priority is clamped to [0, 1] with one decimal digit
- Repeated requests are served from the cache until it is invalidated
"""

from __future__ import annotations

from sitemeta.rules.models import SiteMetaConfig

from ._impl import SitemapBuilder, render_robots_txt
from .models import BuildSitemapInput, RobotsTxtInput, SitemapOutput
from .ports import CachePort

SITEMAP_MEDIA_TYPE = "application/xml"
ROBOTS_MEDIA_TYPE = "text/plain"


def run_sitemap(
    inp: BuildSitemapInput,
    *,
    cache: CachePort,
    config: SiteMetaConfig | None = None,
) -> SitemapOutput:
    """
    Get sitemap.xml, building it on a cache miss.

    Raises:
        SitemapConfigError: If exclusion patterns are invalid.
    """
    builder = SitemapBuilder(inp.site, cache, config)
    return SitemapOutput(body=builder.render(), media_type=SITEMAP_MEDIA_TYPE)


def run_robots_txt(inp: RobotsTxtInput) -> SitemapOutput:
    """Render robots.txt pointing at the sitemap."""
    return SitemapOutput(body=render_robots_txt(inp.site.url()), media_type=ROBOTS_MEDIA_TYPE)
