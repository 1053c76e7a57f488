from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import blocks, health
from .core.config import get_settings

logger = logging.getLogger("doc2json.api")


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s %(message)s")

    application = FastAPI(title="Doc comment to JSON converter")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(health.router, prefix="/api")
    application.include_router(blocks.router, prefix="/api")
    logger.info("Starting %s (%s)", settings.app_name, settings.environment)
    return application


app = create_app()


__all__ = ["app", "create_app"]
