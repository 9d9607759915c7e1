"""
Vite asset resolution - dev server URLs or bundled manifest output.

The manifest is read once from ``{root}/{out_dir}/.vite/manifest.json``.
When it cannot be read the site is assumed to run against the Vite dev
server.

Key behaviors:
- Missing or invalid manifest means dev mode, never an error
- The manifest is immutable after loading and safe to share
- The dev client script is injected once per ViteAssets instance
- Stylesheets are collected across the import graph without duplicates
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from sitemeta.core.html import tag
from sitemeta.rules.models import ViteRules

from .models import ManifestAdapter, ManifestEntry

logger = logging.getLogger(__name__)

MANIFEST_DIR = ".vite"
MANIFEST_FILE_NAME = "manifest.json"
VITE_CLIENT = "@vite/client"


def manifest_path(root: Path, out_dir: str) -> Path:
    return root / out_dir / MANIFEST_DIR / MANIFEST_FILE_NAME


def collect_css(manifest: Mapping[str, ManifestEntry], entry: str) -> list[str]:
    """
    Collect stylesheets of an entry and everything it imports.

    Direct stylesheets come first, then those of each import, depth first
    in declaration order. Each entry is visited at most once, so a cyclic
    manifest still terminates.
    """
    files: list[str] = []
    seen_files: set[str] = set()
    visited: set[str] = set()
    stack = [entry]

    while stack:
        key = stack.pop()
        if key in visited:
            continue
        visited.add(key)

        item = manifest.get(key)
        if item is None:
            continue

        for css in item.css:
            if css not in seen_files:
                seen_files.add(css)
                files.append(css)

        stack.extend(reversed(item.imports))

    return files


class ViteManifest:
    """
    Loaded build manifest, or dev mode when there is none.

    Built once per process; never mutated afterwards.
    """

    def __init__(self, entries: Mapping[str, ManifestEntry] | None = None) -> None:
        self._entries = MappingProxyType(dict(entries)) if entries is not None else None

    @classmethod
    def load(cls, root: Path, out_dir: str = "dist") -> ViteManifest:
        path = manifest_path(root, out_dir)
        try:
            entries = ManifestAdapter.validate_json(path.read_bytes())
        except (OSError, ValueError) as e:
            logger.debug("No usable Vite manifest at %s, using dev server: %s", path, e)
            return cls(None)

        logger.info("Loaded Vite manifest with %d entries from %s", len(entries), path)
        return cls(entries)

    @property
    def is_dev(self) -> bool:
        return self._entries is None

    @property
    def entries(self) -> Mapping[str, ManifestEntry]:
        return self._entries if self._entries is not None else MappingProxyType({})

    def get(self, entry: str) -> ManifestEntry | None:
        return self.entries.get(entry)

    def collect_css(self, entry: str) -> list[str]:
        if self._entries is None:
            return []
        return collect_css(self._entries, entry)


class ViteAssets:
    """
    Request-scoped asset tag builder.

    Holds the "dev client already injected" flag, so create one per
    request (or per rendered document) and never share it.
    """

    def __init__(
        self,
        manifest: ViteManifest,
        rules: ViteRules | None = None,
        base_url: str = "",
    ) -> None:
        self._manifest = manifest
        self._rules = rules or ViteRules()
        self._base_url = base_url.rstrip("/")
        self._has_injected_client = False

    @property
    def is_dev(self) -> bool:
        return self._manifest.is_dev

    def dev_url(self, path: str) -> str:
        server = self._rules.server
        scheme = "https" if server.https else "http"
        return f"{scheme}://{server.host}:{server.port}/{path.lstrip('/')}"

    def prod_url(self, path: str) -> str:
        parts = [self._base_url, self._rules.build.out_dir.strip("/"), path.lstrip("/")]
        return "/".join(part for part in parts if part)

    def entry_file(self, entry: str) -> str | None:
        """Get the output file of an entry from the manifest."""
        item = self._manifest.get(entry)
        return item.file if item is not None else None

    def file(self, entry: str) -> str | None:
        """
        Get the URL of an entry.

        Returns:
            Dev server URL in dev mode, bundled URL in production, None if
            the entry is not in the manifest.
        """
        if self.is_dev:
            return self.dev_url(entry)

        file = self.entry_file(entry)
        return self.prod_url(file) if file is not None else None

    def js(self, entry: str) -> str:
        """
        Get ``<script>`` tags for an entry.

        In dev mode the Vite client precedes the first entry.
        """
        tags: list[str] = []

        if self.is_dev and not self._has_injected_client:
            tags.append(tag("script", {"type": "module", "src": self.dev_url(VITE_CLIENT)}))
            self._has_injected_client = True

        url = self.file(entry)
        if url is None:
            logger.warning("Vite entry %s not found in manifest", entry)
        else:
            tags.append(tag("script", {"type": "module", "src": url}))

        return "\n".join(tags)

    def css(self, entry: str) -> str | None:
        """
        Get ``<link>`` tags for the stylesheets of an entry and its imports.

        None in dev mode, where Vite injects styles through JS.
        """
        if self.is_dev:
            return None

        files = self._manifest.collect_css(entry)
        if not files:
            return None

        return "\n".join(
            tag("link", {"rel": "stylesheet", "href": self.prod_url(file)}) for file in files
        )

    def panel_js(self, entries: str | Iterable[str]) -> list[str] | None:
        """Script URLs for admin panel customization."""
        files: list[str] = []

        if self.is_dev:
            files.append(self.dev_url(VITE_CLIENT))

        for entry in _wrap(entries):
            url = self.file(entry)
            if url is not None:
                files.append(url)

        return files or None

    def panel_css(self, entries: str | Iterable[str]) -> list[str] | None:
        """Stylesheet URLs for admin panel customization, None in dev mode."""
        if self.is_dev:
            return None

        files = [
            self.prod_url(css)
            for entry in _wrap(entries)
            for css in self._manifest.collect_css(entry)
        ]
        return files or None


def _wrap(entries: str | Iterable[str]) -> list[str]:
    if isinstance(entries, str):
        return [entries]
    return list(entries)
