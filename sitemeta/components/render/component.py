"""
Render component - head markup builder.

Builds deterministic head markup from resolved page metadata.

Invariants:
- Output is escaped HTML
- Explicit values are never overwritten by computed fallbacks
- Empty fields produce no tag
- Twitter card is either summary or summary_large_image, never both
"""

from __future__ import annotations

from sitemeta.components.meta import PageMeta
from sitemeta.rules.models import SiteMetaConfig

from ._impl import TagRenderer
from .models import (
    RenderHeadInput,
    RenderJsonLdInput,
    RenderOpenSearchInput,
    RenderOutput,
    RenderRobotsInput,
    RenderSocialInput,
)


def _create_renderer(config: SiteMetaConfig | None) -> TagRenderer:
    return TagRenderer(config)


# --- Component Entry Points ---


def run_social(inp: RenderSocialInput, *, config: SiteMetaConfig | None = None) -> RenderOutput:
    """
    Render meta, OpenGraph and Twitter Card tags.

    Raises:
        MetaConfigError: If meta defaults or templates are misconfigured.
    """
    renderer = _create_renderer(config)
    return RenderOutput(html=renderer.social(renderer.page_meta(inp.page)))


def run_jsonld(inp: RenderJsonLdInput, *, config: SiteMetaConfig | None = None) -> RenderOutput:
    """Render JSON-LD script blocks."""
    renderer = _create_renderer(config)
    return RenderOutput(html=renderer.jsonld(renderer.page_meta(inp.page)))


def run_robots(inp: RenderRobotsInput, *, config: SiteMetaConfig | None = None) -> RenderOutput:
    """Render the robots meta tag and canonical link."""
    renderer = _create_renderer(config)
    return RenderOutput(html=renderer.robots(renderer.page_meta(inp.page)))


def run_opensearch(
    inp: RenderOpenSearchInput, *, config: SiteMetaConfig | None = None
) -> RenderOutput:
    """Render the OpenSearch description link."""
    renderer = _create_renderer(config)
    return RenderOutput(html=renderer.opensearch(renderer.page_meta(inp.page)))


def run_head(inp: RenderHeadInput, *, config: SiteMetaConfig | None = None) -> RenderOutput:
    """Render every head surface, resolving metadata once."""
    renderer = _create_renderer(config)
    meta: PageMeta = renderer.page_meta(inp.page)
    return RenderOutput(html=renderer.head(meta))


def run(
    inp: (
        RenderSocialInput
        | RenderJsonLdInput
        | RenderRobotsInput
        | RenderOpenSearchInput
        | RenderHeadInput
    ),
    *,
    config: SiteMetaConfig | None = None,
) -> RenderOutput:
    """
    Main entry point for the render component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, RenderSocialInput):
        return run_social(inp, config=config)
    elif isinstance(inp, RenderJsonLdInput):
        return run_jsonld(inp, config=config)
    elif isinstance(inp, RenderRobotsInput):
        return run_robots(inp, config=config)
    elif isinstance(inp, RenderOpenSearchInput):
        return run_opensearch(inp, config=config)
    elif isinstance(inp, RenderHeadInput):
        return run_head(inp, config=config)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
