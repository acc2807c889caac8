from __future__ import annotations

import logging
import sys
from typing import Optional

from fastapi import FastAPI

from codesearch.config import Config
from codesearch.routers.search_router import router as search_router
from codesearch.services.search_clients import SearchClientFactory

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_app(
    config: Config | None = None,
    client_factory: Optional[SearchClientFactory] = None,
) -> FastAPI:
    cfg = config or Config()
    configure_logging(cfg.LOG_LEVEL)

    app = FastAPI(title="Code Search API", version=__version__)

    app.state.config = cfg
    app.state.client_factory = client_factory or SearchClientFactory(cfg)
    logger.info("Search backend: %s (env=%s)", cfg.SEARCH_BACKEND_URL, cfg.ENV)

    @app.get("/")
    def root():
        """Service info and the search endpoints it exposes."""
        return {
            "message": "Code Search API",
            "version": __version__,
            "endpoints": sorted(route.path for route in search_router.routes),
        }

    app.include_router(search_router)

    return app
