"""
Site meta routes - robots.txt and sitemap.xml.

Each router is included only when its option is enabled, so a disabled
route falls through to the redirect fallback.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from sitemeta.api.deps import get_context
from sitemeta.components.sitemap import (
    BuildSitemapInput,
    RobotsTxtInput,
    run_robots_txt,
    run_sitemap,
)
from sitemeta.context import SiteContext

robots_router = APIRouter()
sitemap_router = APIRouter()

SITEMAP_CACHE_CONTROL = "public, max-age=3600"


@robots_router.get(
    "/robots.txt",
    response_class=Response,
    summary="Robots",
    description="Allows every crawler and points to the sitemap.",
)
def robots_txt(context: SiteContext = Depends(get_context)) -> Response:
    output = run_robots_txt(RobotsTxtInput(site=context.site))
    return Response(content=output.body, media_type=output.media_type)


@sitemap_router.get(
    "/sitemap.xml",
    response_class=Response,
    summary="XML Sitemap",
    description="Sitemap for search engines, with language alternates on multilingual sites.",
)
def sitemap_xml(context: SiteContext = Depends(get_context)) -> Response:
    """
    Serve the cached sitemap, building it on first request.

    Excluded templates, excluded pages and pages that opt out are left out.
    """
    output = run_sitemap(
        BuildSitemapInput(site=context.site),
        cache=context.cache,
        config=context.config,
    )

    return Response(
        content=output.body,
        media_type=output.media_type,
        headers={
            "Cache-Control": SITEMAP_CACHE_CONTROL,
        },
    )
