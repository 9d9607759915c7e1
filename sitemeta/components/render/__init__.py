"""
Render component - head markup for SEO and social previews.
"""

from ._impl import (
    DEFAULT_TWITTER_CARD,
    FALLBACK_TWITTER_CARD,
    SCHEMA_ORG_CONTEXT,
    THUMBNAIL_WIDTH,
    TagRenderer,
    build_jsonld_schema,
    build_social_meta,
    create_tag_renderer,
    encode_jsonld,
    generate_opengraph_meta,
    generate_social_meta_tags,
    generate_twitter_card_meta,
    language_locale,
    render_meta_tag,
    resolve_handle,
)
from .component import (
    run,
    run_head,
    run_jsonld,
    run_opensearch,
    run_robots,
    run_social,
)
from .models import (
    MetaTag,
    RenderHeadInput,
    RenderJsonLdInput,
    RenderOpenSearchInput,
    RenderOutput,
    RenderRobotsInput,
    RenderSocialInput,
    SocialMeta,
)
from .ports import FieldResolverPort

__all__ = [
    # Entry points
    "run",
    "run_head",
    "run_jsonld",
    "run_opensearch",
    "run_robots",
    "run_social",
    # Input models
    "RenderHeadInput",
    "RenderJsonLdInput",
    "RenderOpenSearchInput",
    "RenderRobotsInput",
    "RenderSocialInput",
    # Output models
    "MetaTag",
    "RenderOutput",
    "SocialMeta",
    # Ports
    "FieldResolverPort",
    # Renderer
    "TagRenderer",
    "create_tag_renderer",
    # Functions
    "build_jsonld_schema",
    "build_social_meta",
    "encode_jsonld",
    "generate_opengraph_meta",
    "generate_social_meta_tags",
    "generate_twitter_card_meta",
    "language_locale",
    "render_meta_tag",
    "resolve_handle",
    # Constants
    "DEFAULT_TWITTER_CARD",
    "FALLBACK_TWITTER_CARD",
    "SCHEMA_ORG_CONTEXT",
    "THUMBNAIL_WIDTH",
]
