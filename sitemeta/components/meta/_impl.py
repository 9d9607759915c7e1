"""
PageMeta - metadata field resolution for a page.

Resolution order for a key:
1. MetadataMap (page metadata > template metadata > global defaults)
2. Page content
3. Site content (unless fallback is disabled)
4. Empty field

Key behaviors:
- Keys are case-insensitive
- A key present in the MetadataMap always wins, even when its value is empty
- Layers are consulted highest precedence first and never deep-merged
- Fields are created fresh on every lookup
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from sitemeta.core.errors import ConfigurationError
from sitemeta.rules.models import MetaRules, resolve_option

from .models import Field, is_empty_value
from .ports import PagePort, SitePort


class MetaConfigError(ConfigurationError):
    """Raised when defaults or templates do not produce a mapping."""


# --- Content helpers ---


def content_value(owner: PagePort | SitePort, key: str) -> Any:
    """Get a content value by case-insensitive key, ``None`` when missing."""
    content = owner.content
    key = key.lower()
    if key in content:
        return content[key]
    for name, value in content.items():
        if name.lower() == key:
            return value
    return None


def site_title(site: SitePort) -> str:
    return str(content_value(site, "title") or "")


def page_title(page: PagePort) -> str:
    """Custom title if set, otherwise the page title."""
    custom = content_value(page, "customtitle")
    if not is_empty_value(custom):
        return str(custom)
    return str(content_value(page, "title") or "")


# --- Metadata Map ---


class MetadataMap(Mapping[str, Any]):
    """
    Ordered, read-only view over metadata layers.

    Layers are given lowest precedence first and consulted highest
    precedence first. A key in a higher layer fully replaces the value of
    a lower one, nested mappings included.
    """

    def __init__(self, *layers: Mapping[str, Any]) -> None:
        self._layers: list[dict[str, Any]] = [
            {str(key).lower(): value for key, value in layer.items()} for layer in layers
        ]

    def __getitem__(self, key: str) -> Any:
        key = key.lower()
        for layer in reversed(self._layers):
            if key in layer:
                return layer[key]
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key = key.lower()
        return any(key in layer for layer in self._layers)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for layer in self._layers:
            for key in layer:
                if key not in seen:
                    seen.add(key)
                    yield key

    def __len__(self) -> int:
        return sum(1 for _ in self)


def _require_mapping(option: str, value: Any) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise MetaConfigError(option, f"must return a mapping, got {type(value).__name__}")
    return value


def build_metadata_map(page: PagePort, rules: MetaRules) -> MetadataMap:
    """
    Build the MetadataMap of a page from configuration.

    Raises:
        MetaConfigError: If defaults or templates do not resolve to mappings.
    """
    site = page.site
    defaults = _require_mapping("meta.defaults", resolve_option(rules.defaults, site, page))
    templates = _require_mapping("meta.templates", resolve_option(rules.templates, page, site))
    template_layer = _require_mapping(
        f"meta.templates.{page.template}", templates.get(page.template)
    )

    page_layer: Mapping[str, Any] = {}
    metadata = getattr(page, "metadata", None)
    if callable(metadata):
        page_layer = _require_mapping(f"{type(page).__name__}.metadata()", metadata())

    return MetadataMap(defaults, template_layer, page_layer)


# --- Page Meta ---


class PageMeta:
    """
    Metadata resolver bound to a single page.

    The MetadataMap is built once on construction; lookups are pure.
    """

    def __init__(self, page: PagePort, rules: MetaRules | None = None) -> None:
        self.page = page
        self.metadata = build_metadata_map(page, rules or MetaRules())

    def get(self, key: str, fallback: bool = True) -> Field:
        """
        Resolve ``key`` for the page.

        Args:
            key: Field name, case-insensitive.
            fallback: Whether to fall back to the site content.

        Returns:
            A fresh Field, empty when nothing matched.
        """
        key = key.lower()

        if key in self.metadata:
            value = self.metadata[key]

            if callable(value):
                result = value(self.page)
                if isinstance(result, Field):
                    return result
                return Field(self.page, key, result)

            return Field(self.page, key, value)

        value = content_value(self.page, key)
        if not is_empty_value(value):
            return Field(self.page, key, value)

        if fallback:
            value = content_value(self.page.site, key)
            if not is_empty_value(value):
                return Field(self.page, key, value)

        return Field(self.page, key, None, exists=False)

    def field(self, name: str) -> Field:
        """Named accessor, same as ``get(name)``."""
        return self.get(name)

    def __getitem__(self, name: str) -> Field:
        return self.get(name)

    def title(self) -> str:
        """Metadata title, else the custom title, else the page title."""
        if "title" in self.metadata:
            return str(self.get("title"))
        return page_title(self.page)

    def description(self) -> str | None:
        description = self.get("description")
        if description.is_empty():
            return None
        return str(description)

    def priority(self) -> float:
        """Sitemap priority clamped to [0, 1], 0.5 by default."""
        value = self.get("priority", False).value_or(0.5)
        try:
            priority = float(value)
        except (TypeError, ValueError):
            priority = 0.5
        return float(min(1.0, max(0.0, priority)))

    def changefreq(self) -> Field:
        return self.get("changefreq", False)
