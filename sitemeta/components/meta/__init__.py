"""
Meta component - layered metadata field resolution.
"""

from ._impl import (
    MetadataMap,
    MetaConfigError,
    PageMeta,
    build_metadata_map,
    content_value,
    page_title,
    site_title,
)
from .models import Field, is_empty_value
from .ports import ImagePort, LanguagePort, PagePort, SitePort

__all__ = [
    # Resolver
    "PageMeta",
    "MetadataMap",
    "MetaConfigError",
    "build_metadata_map",
    # Models
    "Field",
    "is_empty_value",
    # Helpers
    "content_value",
    "page_title",
    "site_title",
    # Ports
    "ImagePort",
    "LanguagePort",
    "PagePort",
    "SitePort",
]
