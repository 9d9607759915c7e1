"""
Render component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sitemeta.components.meta import PagePort

# --- Input Models ---


@dataclass(frozen=True)
class RenderSocialInput:
    """Input for rendering meta, OpenGraph and Twitter tags."""

    page: PagePort


@dataclass(frozen=True)
class RenderRobotsInput:
    """Input for rendering the robots meta tag and canonical link."""

    page: PagePort


@dataclass(frozen=True)
class RenderJsonLdInput:
    """Input for rendering JSON-LD script blocks."""

    page: PagePort


@dataclass(frozen=True)
class RenderOpenSearchInput:
    """Input for rendering the OpenSearch description link."""

    page: PagePort


@dataclass(frozen=True)
class RenderHeadInput:
    """Input for rendering every head surface of a page."""

    page: PagePort


# --- Output Models ---


@dataclass(frozen=True)
class MetaTag:
    """HTML meta tag representation."""

    name: str | None = None
    property: str | None = None
    content: Any = ""


@dataclass
class SocialMeta:
    """
    Defaulted social metadata of a page.

    Insertion order of each mapping is the tag order of the output.
    """

    meta: dict[str, Any] = field(default_factory=dict)
    opengraph: dict[str, Any] = field(default_factory=dict)
    twitter: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RenderOutput:
    """Output containing rendered markup."""

    html: str
