"""
TagRenderer - head markup for SEO and social previews.

Turns resolved metadata fields into HTML strings:
- social(): meta description, OpenGraph and Twitter Card tags
- jsonld(): one application/ld+json script per schema
- robots(): robots meta tag and canonical link
- opensearch(): OpenSearch description link

Key behaviors:
- Explicit values always win; computed fallbacks use set-if-absent
- None values are skipped, never rendered as empty tags
- Tag order follows mapping insertion order
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from sitemeta.components.meta import (
    ImagePort,
    LanguagePort,
    PageMeta,
    PagePort,
    page_title,
    site_title,
)
from sitemeta.core.html import tag
from sitemeta.rules.models import HandleOption, SiteMetaConfig, TwitterRules

from .models import MetaTag, SocialMeta
from .ports import FieldResolverPort

THUMBNAIL_WIDTH = 1200
DEFAULT_TWITTER_CARD = "summary_large_image"
FALLBACK_TWITTER_CARD = "summary"
DEFAULT_OG_TYPE = "website"
SCHEMA_ORG_CONTEXT = "https://schema.org"
NAMESPACE_MARKER = "namespace:"
OPENSEARCH_PATH = "open-search.xml"

_SCRIPT_ESCAPES = str.maketrans({"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"})


def _join_lines(lines: list[str]) -> str:
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


# --- Locale helpers ---


def language_locale(language: LanguagePort) -> str:
    """Language locale (or code) in OpenGraph form, e.g. ``en_US``."""
    return (language.locale or language.code).replace("-", "_")


def resolve_handle(option: HandleOption, language: LanguagePort | None) -> str | None:
    """Pick a Twitter handle, per language when the option is a mapping."""
    if option is None or isinstance(option, str):
        return option or None
    if language is not None and language.code in option:
        return option[language.code] or None
    return None


# --- Social Meta ---


def generate_opengraph_meta(
    opengraph: dict[str, Any],
    page: PagePort,
    description: str | None = None,
    image: ImagePort | None = None,
    image_alt: str | None = None,
) -> dict[str, Any]:
    """
    Apply OpenGraph defaults to ``opengraph`` in place.

    Returns:
        The same mapping, for chaining.
    """
    site = page.site
    opengraph.setdefault("site_name", site_title(site))
    opengraph.setdefault("url", page.url())
    opengraph.setdefault("type", DEFAULT_OG_TYPE)
    opengraph.setdefault("title", page_title(page))

    if description is not None:
        opengraph.setdefault("description", description)

    if image is not None:
        opengraph.setdefault("image", image.url)
        opengraph.setdefault("image:width", image.width)
        opengraph.setdefault("image:height", image.height)
        if image_alt:
            opengraph.setdefault("image:alt", image_alt)

    if site.languages:
        current = site.language
        if current is not None:
            opengraph.setdefault("locale", language_locale(current))

        alternates = [
            language_locale(language)
            for language in site.languages
            if current is None or language.code != current.code
        ]
        if alternates:
            opengraph.setdefault("locale:alternate", alternates)

    return opengraph


def generate_twitter_card_meta(
    twitter: dict[str, Any],
    page: PagePort,
    rules: TwitterRules,
    description: str | None = None,
    image: ImagePort | None = None,
    image_alt: str | None = None,
) -> dict[str, Any]:
    """
    Apply Twitter Card defaults to ``twitter`` in place.

    The large image card is downgraded to ``summary`` when there is no
    image, unless the card was chosen explicitly.
    """
    explicit_card = "card" in twitter
    twitter.setdefault("card", DEFAULT_TWITTER_CARD)
    twitter.setdefault("title", page_title(page))

    language = page.site.language
    handle_site = resolve_handle(rules.site, language)
    handle_creator = resolve_handle(rules.creator, language)
    if handle_site:
        twitter.setdefault("site", handle_site)
    if handle_creator:
        twitter.setdefault("creator", handle_creator)

    if description is not None:
        twitter.setdefault("description", description)

    if image is not None:
        twitter.setdefault("image", image.url)
        if image_alt:
            twitter.setdefault("image:alt", image_alt)
    elif (
        not explicit_card
        and twitter.get("image") is None
        and twitter["card"] == DEFAULT_TWITTER_CARD
    ):
        twitter["card"] = FALLBACK_TWITTER_CARD

    return twitter


def build_social_meta(meta: FieldResolverPort, rules: TwitterRules) -> SocialMeta:
    """
    Resolve and default the meta, OpenGraph and Twitter mappings of a page.
    """
    page = meta.page
    social = SocialMeta(
        meta=meta.get("meta", False).as_mapping(),
        opengraph=meta.get("opengraph", False).as_mapping(),
        twitter=meta.get("twitter", False).as_mapping(),
    )

    description_field = meta.get("description")
    description = str(description_field) if description_field.is_not_empty() else None
    thumbnail = meta.get("thumbnail").to_file()
    image = thumbnail.resize(THUMBNAIL_WIDTH) if thumbnail is not None else None
    image_alt = thumbnail.alt if thumbnail is not None else None

    if description is not None:
        social.meta.setdefault("description", description)

    generate_opengraph_meta(social.opengraph, page, description, image, image_alt)
    generate_twitter_card_meta(social.twitter, page, rules, description, image, image_alt)
    return social


def generate_social_meta_tags(social: SocialMeta) -> list[MetaTag]:
    """
    Flatten social metadata into ordered meta tags.

    - meta: ``name="{key}"``
    - opengraph scalars: ``property="og:{key}"``
    - opengraph mappings: ``property="{prefix}:{subkey}"`` with prefix
      ``og:{key}``, or the text after ``namespace:``
    - opengraph lists: one ``property="og:{key}"`` tag per item
    - twitter: ``name="twitter:{key}"``
    """
    tags: list[MetaTag] = []

    for name, content in social.meta.items():
        if content is None:
            continue
        tags.append(MetaTag(name=name, content=content))

    for prop, content in social.opengraph.items():
        if content is None:
            continue

        if isinstance(content, Mapping):
            if prop.startswith(NAMESPACE_MARKER):
                prefix = prop[len(NAMESPACE_MARKER) :]
            else:
                prefix = f"og:{prop}"

            for sub_prop, sub_content in content.items():
                if sub_content is None:
                    continue
                tags.append(MetaTag(property=f"{prefix}:{sub_prop}", content=sub_content))
        elif isinstance(content, (list, tuple)):
            for item in content:
                if item is None:
                    continue
                tags.append(MetaTag(property=f"og:{prop}", content=item))
        else:
            tags.append(MetaTag(property=f"og:{prop}", content=content))

    for name, content in social.twitter.items():
        if content is None:
            continue
        tags.append(MetaTag(name=f"twitter:{name}", content=content))

    return tags


def render_meta_tag(meta_tag: MetaTag) -> str:
    if meta_tag.property:
        return tag("meta", {"property": meta_tag.property, "content": meta_tag.content})
    return tag("meta", {"name": meta_tag.name, "content": meta_tag.content})


# --- JSON-LD ---


def build_jsonld_schema(type_key: str, schema: Mapping[str, Any]) -> dict[str, Any]:
    """
    Build one schema object.

    ``@context`` and ``@type`` are filled in only when missing; every other
    key passes through unchanged.
    """
    result: dict[str, Any] = {
        "@context": schema.get("@context", SCHEMA_ORG_CONTEXT),
        "@type": schema.get("@type", type_key[:1].upper() + type_key[1:]),
    }
    for key, value in schema.items():
        if key not in ("@context", "@type"):
            result[key] = value
    return result


def encode_jsonld(schema: Mapping[str, Any], pretty: bool = False) -> str:
    """
    Encode a schema for a script block.

    Forward slashes and non-ASCII stay as they are; ``<``, ``>`` and ``&``
    become unicode escapes so a value can never close the block.
    """
    if pretty:
        encoded = json.dumps(schema, ensure_ascii=False, indent=4)
    else:
        encoded = json.dumps(schema, ensure_ascii=False, separators=(",", ":"))
    return encoded.translate(_SCRIPT_ESCAPES)


# --- Tag Renderer ---


class TagRenderer:
    """
    Head markup renderer.

    Stateless apart from configuration; safe to share across requests.
    """

    def __init__(self, config: SiteMetaConfig | None = None) -> None:
        self._config = config or SiteMetaConfig()

    def page_meta(self, page: PagePort) -> PageMeta:
        return PageMeta(page, self._config.meta)

    def social(self, meta: FieldResolverPort) -> str:
        social = build_social_meta(meta, self._config.meta.twitter)
        return _join_lines([render_meta_tag(t) for t in generate_social_meta_tags(social)])

    def jsonld(self, meta: FieldResolverPort) -> str:
        html: list[str] = []
        jsonld = meta.get("jsonld", False).as_mapping()

        for type_key, schema in jsonld.items():
            if not isinstance(schema, Mapping):
                continue

            html.append('<script type="application/ld+json">')
            schema = build_jsonld_schema(str(type_key), schema)
            html.append(encode_jsonld(schema, self._config.debug))
            html.append("</script>")

        return _join_lines(html)

    def robots(self, meta: FieldResolverPort) -> str:
        html: list[str] = []
        robots = meta.get("robots")
        canonical = meta.get("canonical")

        if robots.is_not_empty():
            html.append(tag("meta", {"name": "robots", "content": robots.value}))

        html.append(tag("link", {"rel": "canonical", "href": canonical.value_or(meta.page.url())}))
        return _join_lines(html)

    def opensearch(self, meta: FieldResolverPort) -> str:
        site = meta.page.site
        href = f"{site.url().rstrip('/')}/{OPENSEARCH_PATH}"
        return _join_lines(
            [
                tag(
                    "link",
                    {
                        "rel": "search",
                        "type": "application/opensearchdescription+xml",
                        "title": site_title(site),
                        "href": href,
                    },
                )
            ]
        )

    def head(self, meta: FieldResolverPort) -> str:
        """Robots, social, JSON-LD and OpenSearch markup in one string."""
        return "".join(
            [
                self.robots(meta),
                self.social(meta),
                self.jsonld(meta),
                self.opensearch(meta),
            ]
        )


# --- Factory ---


def create_tag_renderer(config: SiteMetaConfig | None = None) -> TagRenderer:
    return TagRenderer(config)
