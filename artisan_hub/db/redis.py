# artisan_hub/db/redis.py
import logging

import redis.asyncio as redis
from artisan_hub.core.config import get_settings

logger = logging.getLogger(__name__)

redis_client: redis.Redis | None = None


async def connect():
    """
    Redis only backs the translation cache: when REDIS_URL is missing or the
    server does not answer, the client stays None and translations go straight to the model.
    """
    global redis_client
    url = get_settings().REDIS_URL
    if not url:
        logger.warning("No REDIS_URL configured, translation cache disabled")
        redis_client = None
        return

    candidate = redis.from_url(url, decode_responses=True)
    try:
        await candidate.ping()
    except Exception as e:
        logger.warning("Redis unreachable, translation cache disabled: %s", e)
        await candidate.aclose()
        redis_client = None
        return
    redis_client = candidate
    logger.info("Redis connected")


async def disconnect():
    global redis_client
    client, redis_client = redis_client, None
    if client:
        await client.aclose()
        logger.info("Redis disconnected")


def get_redis() -> redis.Redis | None:
    return redis_client
