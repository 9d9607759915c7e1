from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from tests.fakes import FakeLanguage, FakePage, FakeSite

# --- Fixtures ---


@pytest.fixture
def site() -> FakeSite:
    """Single-language site with a title and description."""
    return FakeSite(content={"title": "My Site", "description": "Site description"})


@pytest.fixture
def multilang_site() -> FakeSite:
    """English/German site, currently rendering English."""
    english = FakeLanguage("en", "en_US")
    german = FakeLanguage("de", "de_DE.utf8")
    return FakeSite(
        content={"title": "My Site"},
        languages=[english, german],
        language=english,
    )


@pytest.fixture
def make_page() -> Callable[..., FakePage]:
    """Factory adding pages to a site's index in creation order."""

    def _make(site: FakeSite, page_id: str, **kwargs: Any) -> FakePage:
        page = FakePage(id=page_id, site=site, **kwargs)
        site.pages.append(page)
        return page

    return _make


@pytest.fixture
def page(site: FakeSite, make_page: Callable[..., FakePage]) -> FakePage:
    """Blog post titled "Hello" with no metadata."""
    return make_page(site, "blog/hello", template="article", content={"title": "Hello"})
