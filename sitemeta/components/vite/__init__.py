"""
Vite component - build manifest resolution for scripts and stylesheets.
"""

from ._impl import (
    MANIFEST_FILE_NAME,
    VITE_CLIENT,
    ViteAssets,
    ViteManifest,
    collect_css,
    manifest_path,
)
from .models import ManifestAdapter, ManifestEntry

__all__ = [
    "ManifestAdapter",
    "ManifestEntry",
    "ViteAssets",
    "ViteManifest",
    "collect_css",
    "manifest_path",
    "MANIFEST_FILE_NAME",
    "VITE_CLIENT",
]
