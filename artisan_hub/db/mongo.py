# artisan_hub/db/mongo.py
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from artisan_hub.core.config import get_settings
from artisan_hub.domain.services.constants import (
    COL_ANALYTICS,
    COL_ARTISANS,
    COL_GENERATED_CONTENT,
    COL_PRODUCTS,
    COL_SOCIAL_SHARES,
    COL_TRANSLATIONS,
    COL_USERS,
)
from pymongo import ASCENDING, DESCENDING
import certifi

logger = logging.getLogger(__name__)

_client: AsyncIOMotorClient | None = None
_db: AsyncIOMotorDatabase | None = None

# (collection, keys, options)
INDEXES = (
    (COL_USERS, [("id", ASCENDING)], {"unique": True}),
    (COL_ARTISANS, [("id", ASCENDING)], {"unique": True}),
    (COL_ARTISANS, [("userId", ASCENDING)], {}),
    (COL_PRODUCTS, [("artisanId", ASCENDING)], {}),
    (COL_ANALYTICS, [("artisanId", ASCENDING)], {"unique": True}),
    (COL_SOCIAL_SHARES, [("productId", ASCENDING), ("platform", ASCENDING)], {}),
    (COL_TRANSLATIONS, [("userId", ASCENDING), ("createdAt", DESCENDING)], {}),
    (COL_GENERATED_CONTENT, [("createdAt", DESCENDING)], {}),
)


def get_client() -> AsyncIOMotorClient:
    assert _client is not None, "Mongo client not initialized"
    return _client


def get_db() -> AsyncIOMotorDatabase:
    assert _db is not None, "Mongo DB not initialized"
    return _db


def get_db_or_none() -> AsyncIOMotorDatabase | None:
    """For best-effort writes (audit, share events) that must not fail the request."""
    return _db


def _client_for(uri: str) -> AsyncIOMotorClient:
    kwargs = dict(
        uuidRepresentation="standard",
        serverSelectionTimeoutMS=6000,
        connectTimeoutMS=6000,
    )
    # Atlas SRV URIs need the certifi CA bundle inside slim containers
    if uri.startswith("mongodb+srv://"):
        kwargs.update(tls=True, tlsCAFile=certifi.where())
    return AsyncIOMotorClient(uri, **kwargs)


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    for name, keys, options in INDEXES:
        try:
            await db[name].create_index(keys, **options)
        except Exception as e:
            logger.warning("Unable to ensure index on %s %s: %s", name, keys, e)


async def connect():
    """
    Open the Motor client. A failed startup ping is not fatal: the client
    stays lazy and the first real query retries the connection.
    """
    global _client, _db
    settings = get_settings()

    try:
        _client = _client_for(settings.MONGO_URI)
    except Exception as e:
        # bad URI; routes that need the DB will assert
        _client = _db = None
        logger.error("Mongo client init failed: %s", e)
        return
    _db = _client[settings.MONGO_DB]

    try:
        await _client.admin.command("ping")
    except Exception as e:
        logger.warning("Mongo ping at startup failed, connecting lazily: %s", e)
        return
    logger.info("Mongo connected (ping ok) db=%s", settings.MONGO_DB)
    await ensure_indexes(_db)


async def disconnect():
    global _client, _db
    if _client:
        _client.close()
    _client = None
    _db = None
