# artisan_hub/core/lifespan.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from artisan_hub.core.config import get_settings
from artisan_hub.db import mongo, redis as r
from artisan_hub.domain.repositories.catalog_repo import load_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Fixtures are mandatory: a broken fixture aborts start-up
    app.state.catalog = load_catalog(settings.DATA_DIR)

    # Mongo only backs accounts, onboarding, analytics and audit writes
    if settings.MONGO_URI:
        await mongo.connect()
    else:
        logger.warning("No MONGO_URI provided: account, onboarding and analytics routes will fail")

    await r.connect()
    logger.info("%s started env=%s", settings.APP_NAME, settings.APP_ENV)

    try:
        yield
    finally:
        try:
            await r.disconnect()
        except Exception as e:
            logger.warning("Redis disconnect failed: %s", e)
        await mongo.disconnect()
        logger.info("Shutdown complete")
