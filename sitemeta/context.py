from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sitemeta.adapters.cache import InMemoryCache
from sitemeta.components.env import Env
from sitemeta.components.meta import PageMeta
from sitemeta.components.meta.ports import PagePort, SitePort
from sitemeta.components.redirects import RedirectRouter
from sitemeta.components.render import TagRenderer
from sitemeta.components.sitemap import CachePort, SitemapBuilder
from sitemeta.components.vite import ViteAssets, ViteManifest
from sitemeta.rules.models import SiteMetaConfig


@dataclass
class SiteContext:
    config: SiteMetaConfig
    site: SitePort
    cache: CachePort
    manifest: ViteManifest
    env_repository: Env
    root: Path = Path(".")
    base_url: str = ""
    _renderer: TagRenderer | None = field(default=None, repr=False)
    _router: RedirectRouter | None = field(default=None, repr=False)

    @classmethod
    def create(
        cls,
        config: SiteMetaConfig,
        site: SitePort,
        root: Path | str = ".",
        cache: CachePort | None = None,
        base_url: str | None = None,
        env: Env | None = None,
    ) -> SiteContext:
        root = Path(root)
        manifest = ViteManifest.load(root, config.vite.build.out_dir)

        return cls(
            config=config,
            site=site,
            cache=cache or InMemoryCache(),
            manifest=manifest,
            env_repository=env or Env(),
            root=root,
            base_url=base_url if base_url is not None else site.url(),
        )

    def meta(self, page: PagePort) -> PageMeta:
        return PageMeta(page, self.config.meta)

    def tags(self) -> TagRenderer:
        if self._renderer is None:
            self._renderer = TagRenderer(self.config)
        return self._renderer

    def sitemap(self) -> SitemapBuilder:
        return SitemapBuilder(self.site, self.cache, self.config)

    def assets(self) -> ViteAssets:
        # One per request: the dev client flag must not leak between documents
        return ViteAssets(self.manifest, self.config.vite, self.base_url)

    def redirects(self) -> RedirectRouter:
        if self._router is None:
            self._router = RedirectRouter(self.config.redirects)
        return self._router

    def env(self, key: str, default: Any = None) -> Any:
        if not self.env_repository.is_loaded:
            rules = self.config.env
            path = self.root / rules.path if rules.path else self.root
            self.env_repository.load(path, rules.filename)
        return self.env_repository.get(key, default)
