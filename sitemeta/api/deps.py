import os
from functools import lru_cache
from pathlib import Path

from fastapi import Request

from sitemeta.context import SiteContext


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.environ.get("SITEMETA_ROOT", os.getcwd()))
        self.config_path = Path(
            os.environ.get("SITEMETA_CONFIG", str(self.base_dir / "sitemeta.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Context ---
def get_context(request: Request) -> SiteContext:
    context: SiteContext = request.app.state.context
    return context
