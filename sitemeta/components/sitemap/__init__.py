"""
Sitemap component - XML sitemap and robots.txt.
"""

from ._impl import (
    SITEMAP_NAMESPACE,
    SitemapBuilder,
    SitemapConfigError,
    compile_exclude_pattern,
    create_sitemap_builder,
    format_priority,
    language_to_hreflang,
    opts_out,
    render_robots_txt,
    render_sitemap_xml,
    slugify,
)
from .component import ROBOTS_MEDIA_TYPE, SITEMAP_MEDIA_TYPE, run_robots_txt, run_sitemap
from .models import (
    AlternateLink,
    BuildSitemapInput,
    RobotsTxtInput,
    SitemapEntry,
    SitemapOutput,
)
from .ports import CachePort

__all__ = [
    # Entry points
    "run_robots_txt",
    "run_sitemap",
    # Models
    "AlternateLink",
    "BuildSitemapInput",
    "RobotsTxtInput",
    "SitemapEntry",
    "SitemapOutput",
    # Ports
    "CachePort",
    # Builder
    "SitemapBuilder",
    "SitemapConfigError",
    "create_sitemap_builder",
    # Functions
    "compile_exclude_pattern",
    "format_priority",
    "language_to_hreflang",
    "opts_out",
    "render_robots_txt",
    "render_sitemap_xml",
    "slugify",
    # Constants
    "ROBOTS_MEDIA_TYPE",
    "SITEMAP_MEDIA_TYPE",
    "SITEMAP_NAMESPACE",
]
