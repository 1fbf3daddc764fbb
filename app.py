from __future__ import annotations

import logging

from fastapi import FastAPI

from dotenv import load_dotenv

from logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    load_dotenv("local.env")

    from endpoints.storage_endpoints import SETTINGS, STORAGE, router as storage_router

    setup_logging(SETTINGS.log_level)
    logger.info("storage file: %s (verbose=%s)", STORAGE.path, SETTINGS.verbose_logging)

    app = FastAPI()
    app.include_router(storage_router)

    return app


app = create_app()
