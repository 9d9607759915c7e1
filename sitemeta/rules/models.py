from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# A handle option is either one handle for every language or a mapping
# language code -> handle.
HandleOption = str | dict[str, str] | None


class TwitterRules(BaseModel):
    site: HandleOption = None
    creator: HandleOption = None


class MetaRules(BaseModel):
    # Literal mapping or producer: defaults(site, page), templates(page, site)
    defaults: dict[str, Any] | Callable[..., Any] = Field(default_factory=dict)
    templates: dict[str, Any] | Callable[..., Any] = Field(default_factory=dict)
    twitter: TwitterRules = Field(default_factory=TwitterRules)


class SitemapExcludeRules(BaseModel):
    templates: list[str] = Field(default_factory=list)
    pages: list[str] | Callable[[], Any] = Field(default_factory=list)


class SitemapRules(BaseModel):
    enable: bool = False
    cache_key: str = "sitemap.xml"
    cache_ttl: int = Field(default=3600, ge=0)
    hide_descendants: bool = False
    exclude: SitemapExcludeRules = Field(default_factory=SitemapExcludeRules)


class RobotsRules(BaseModel):
    enable: bool = False


class ViteServerRules(BaseModel):
    https: bool = False
    host: str = "localhost"
    port: int = 5173


class ViteBuildRules(BaseModel):
    out_dir: str = Field(default="dist", alias="outDir")

    model_config = ConfigDict(populate_by_name=True)


class ViteRules(BaseModel):
    server: ViteServerRules = Field(default_factory=ViteServerRules)
    build: ViteBuildRules = Field(default_factory=ViteBuildRules)


class EnvRules(BaseModel):
    path: str | None = None
    filename: str = ".env"


class SiteMetaConfig(BaseModel):
    debug: bool = False
    meta: MetaRules = Field(default_factory=MetaRules)
    sitemap: SitemapRules = Field(default_factory=SitemapRules)
    robots: RobotsRules = Field(default_factory=RobotsRules)
    vite: ViteRules = Field(default_factory=ViteRules)
    env: EnvRules = Field(default_factory=EnvRules)
    redirects: dict[str, str | Callable[..., Any]] = Field(default_factory=dict)


def resolve_option(value: Any, *args: Any) -> Any:
    """Return ``value`` itself, or the result of calling it with ``args``."""
    if callable(value):
        return value(*args)
    return value
