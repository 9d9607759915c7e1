"""
Tests for social meta rendering (meta, OpenGraph, Twitter Card).
"""

from __future__ import annotations

import pytest

from sitemeta.components.render import (
    MetaTag,
    RenderSocialInput,
    SocialMeta,
    TagRenderer,
    generate_social_meta_tags,
    render_meta_tag,
    resolve_handle,
    run,
    run_social,
)
from sitemeta.rules.models import MetaRules, SiteMetaConfig, TwitterRules
from tests.fakes import FakeImage, FakeLanguage, FakePage, FakeSite


def render(page: FakePage, config: SiteMetaConfig | None = None) -> str:
    renderer = TagRenderer(config)
    return renderer.social(renderer.page_meta(page))


@pytest.fixture
def cover() -> FakeImage:
    return FakeImage("https://example.com/media/cover.jpg", width=2400, height=1200, alt="Cover")


# --- Twitter Card Tests ---


class TestTwitterCard:
    """Test card selection."""

    def test_no_thumbnail_uses_summary(self, page: FakePage) -> None:
        html = render(page)

        assert '<meta name="twitter:card" content="summary">' in html
        assert "summary_large_image" not in html

    def test_thumbnail_uses_large_image(self, page: FakePage, cover: FakeImage) -> None:
        page.files["cover.jpg"] = cover
        page.page_metadata = {"thumbnail": "cover.jpg"}

        html = render(page)

        assert '<meta name="twitter:card" content="summary_large_image">' in html
        assert html.count('name="twitter:card"') == 1

    def test_explicit_card_kept_with_thumbnail(self, page: FakePage, cover: FakeImage) -> None:
        page.page_metadata = {"thumbnail": cover, "twitter": {"card": "summary"}}

        html = render(page)

        assert '<meta name="twitter:card" content="summary">' in html
        assert "summary_large_image" not in html

    def test_explicit_large_card_not_downgraded(self, page: FakePage) -> None:
        """An explicitly chosen card survives a missing image."""
        page.page_metadata = {"twitter": {"card": "summary_large_image"}}

        html = render(page)

        assert '<meta name="twitter:card" content="summary_large_image">' in html

    def test_explicit_twitter_image_keeps_large_card(self, page: FakePage) -> None:
        page.page_metadata = {"twitter": {"image": "https://cdn.example.com/x.png"}}

        html = render(page)

        assert '<meta name="twitter:card" content="summary_large_image">' in html
        assert '<meta name="twitter:image" content="https://cdn.example.com/x.png">' in html


class TestTwitterHandles:
    """Test site and creator handles."""

    def test_single_handle(self, page: FakePage) -> None:
        config = SiteMetaConfig(meta=MetaRules(twitter=TwitterRules(site="@site", creator="@me")))

        html = render(page, config)

        assert '<meta name="twitter:site" content="@site">' in html
        assert '<meta name="twitter:creator" content="@me">' in html

    def test_per_language_handle(self, multilang_site: FakeSite, make_page) -> None:
        multilang_site.language = multilang_site.languages[1]
        page = make_page(multilang_site, "home", content={"title": "Start"})
        config = SiteMetaConfig(
            meta=MetaRules(twitter=TwitterRules(site={"en": "@site_en", "de": "@site_de"}))
        )

        html = render(page, config)

        assert '<meta name="twitter:site" content="@site_de">' in html
        assert "@site_en" not in html

    def test_no_handles_configured(self, page: FakePage) -> None:
        html = render(page)
        assert "twitter:site" not in html
        assert "twitter:creator" not in html

    def test_resolve_handle_unknown_language(self) -> None:
        assert resolve_handle({"en": "@en"}, FakeLanguage("fr")) is None
        assert resolve_handle({"en": "@en"}, None) is None
        assert resolve_handle("", None) is None


# --- OpenGraph Tests ---


class TestOpenGraph:
    """Test OpenGraph defaults and flattening."""

    def test_defaults(self, page: FakePage) -> None:
        html = render(page)

        assert '<meta property="og:site_name" content="My Site">' in html
        assert '<meta property="og:url" content="https://example.com/blog/hello">' in html
        assert '<meta property="og:type" content="website">' in html
        assert '<meta property="og:title" content="Hello">' in html

    def test_explicit_values_not_overwritten(self, page: FakePage) -> None:
        page.page_metadata = {"opengraph": {"title": "Custom", "type": "article"}}

        html = render(page)

        assert '<meta property="og:title" content="Custom">' in html
        assert '<meta property="og:type" content="article">' in html
        assert html.count('property="og:title"') == 1

    def test_explicit_none_suppresses_tag(self, page: FakePage) -> None:
        page.page_metadata = {"opengraph": {"type": None}}
        assert "og:type" not in render(page)

    def test_thumbnail_resized(self, page: FakePage, cover: FakeImage) -> None:
        page.page_metadata = {"thumbnail": cover}

        html = render(page)

        assert (
            '<meta property="og:image" content="https://example.com/media/cover.jpg?width=1200">'
            in html
        )
        assert '<meta property="og:image:width" content="1200">' in html
        assert '<meta property="og:image:height" content="600">' in html
        assert '<meta property="og:image:alt" content="Cover">' in html
        assert '<meta name="twitter:image:alt" content="Cover">' in html

    def test_namespace_prefix(self, page: FakePage) -> None:
        """namespace:article emits article:* properties."""
        page.page_metadata = {
            "opengraph": {"namespace:article": {"published_time": "2024-05-17", "author": "Ann"}}
        }

        html = render(page)

        assert '<meta property="article:published_time" content="2024-05-17">' in html
        assert '<meta property="article:author" content="Ann">' in html
        assert "namespace" not in html

    def test_nested_mapping_uses_og_prefix(self, page: FakePage) -> None:
        page.page_metadata = {"opengraph": {"video": {"url": "https://example.com/v.mp4"}}}

        html = render(page)

        assert '<meta property="og:video:url" content="https://example.com/v.mp4">' in html

    def test_locale_and_alternates(self, multilang_site: FakeSite, make_page) -> None:
        page = make_page(multilang_site, "home", content={"title": "Home"})

        html = render(page)

        assert '<meta property="og:locale" content="en_US">' in html
        assert '<meta property="og:locale:alternate" content="de_DE.utf8">' in html
        assert html.count("og:locale:alternate") == 1

    def test_single_language_has_no_locale(self, page: FakePage) -> None:
        assert "og:locale" not in render(page)


# --- Description and Escaping ---


class TestDescription:
    """Test description propagation."""

    def test_description_in_every_surface(self, page: FakePage) -> None:
        page.content["description"] = "About hello"

        html = render(page)

        assert '<meta name="description" content="About hello">' in html
        assert '<meta property="og:description" content="About hello">' in html
        assert '<meta name="twitter:description" content="About hello">' in html

    def test_empty_description_omitted(self, page: FakePage) -> None:
        page.page_metadata = {"description": ""}

        html = render(page)

        assert "description" not in html

    def test_values_escaped(self, page: FakePage) -> None:
        page.content["title"] = 'Tom & "Jerry" <3'

        html = render(page)

        assert 'content="Tom &amp; &quot;Jerry&quot; &lt;3"' in html
        assert "<3" not in html


class TestTagOrder:
    """Test meta, then OpenGraph, then Twitter."""

    def test_surface_order(self, page: FakePage) -> None:
        page.content["description"] = "d"

        html = render(page)

        assert html.index('name="description"') < html.index("og:site_name")
        assert html.index("og:title") < html.index("twitter:card")
        assert html.endswith("\n")

    def test_list_values_emit_one_tag_each(self) -> None:
        social = SocialMeta(opengraph={"image": ["a.png", None, "b.png"]})

        tags = generate_social_meta_tags(social)

        assert tags == [
            MetaTag(property="og:image", content="a.png"),
            MetaTag(property="og:image", content="b.png"),
        ]

    def test_boolean_content(self) -> None:
        assert render_meta_tag(MetaTag(name="x", content=True)) == '<meta name="x" content="true">'


# --- Component Entry Point ---


class TestRunSocial:
    """Test the component entry points."""

    def test_run_social(self, page: FakePage) -> None:
        output = run_social(RenderSocialInput(page=page))

        assert 'property="og:title"' in output.html

    def test_run_dispatches(self, page: FakePage) -> None:
        output = run(RenderSocialInput(page=page))
        assert "twitter:card" in output.html

    def test_run_unknown_input(self) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run(object())  # type: ignore[arg-type]
