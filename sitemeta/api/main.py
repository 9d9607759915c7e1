import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from sitemeta.api.deps import Settings, get_settings
from sitemeta.api.routes import redirects, site_meta
from sitemeta.components.meta.ports import SitePort
from sitemeta.context import SiteContext
from sitemeta.core.errors import ConfigurationError
from sitemeta.rules.loader import load_config

logger = logging.getLogger(__name__)


def load_context(site: SitePort, settings: Settings | None = None) -> SiteContext:
    """Load the config file and build the site context (fail-fast)."""
    settings = settings or get_settings()

    try:
        config = load_config(settings.config_path)
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Config load failed: %s", e)
        sys.exit(1)

    logger.info("Config loaded from %s", settings.config_path)
    return SiteContext.create(config, site, settings.base_dir)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    context: SiteContext = app.state.context

    # Compile redirect rules on startup (fail-fast)
    try:
        context.redirects()
    except ConfigurationError as e:
        logger.critical("Redirect rules invalid: %s", e)
        sys.exit(1)

    yield


def create_app(context: SiteContext) -> FastAPI:
    app = FastAPI(
        title="Site Meta",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
    )
    app.state.context = context

    # --- Routers ---
    if context.config.robots.enable:
        app.include_router(site_meta.robots_router, tags=["Site Meta"])
    if context.config.sitemap.enable:
        app.include_router(site_meta.sitemap_router, tags=["Site Meta"])

    @app.get("/health")
    def health_check() -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "service": "sitemeta"}

    # Catch-all, must stay last
    app.include_router(redirects.router, tags=["Redirects"])

    return app
