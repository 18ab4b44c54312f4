# artisan_hub/utils/cache.py
import hashlib
import json
import logging
from typing import Any, Optional

from redis.asyncio import Redis

logger = logging.getLogger(__name__)


def cache_key(prefix: str, *parts: Any) -> str:
    """Stable short key from arbitrary JSON-able parts."""
    s = json.dumps(parts, sort_keys=True, separators=(",", ":"), ensure_ascii=False, default=str)
    return f"{prefix}:{hashlib.sha1(s.encode('utf-8')).hexdigest()[:16]}"


async def cache_get(redis: Optional[Redis], key: str) -> Optional[Any]:
    """JSON value under `key`, or None when missing / Redis absent / Redis failing."""
    if redis is None:
        return None
    try:
        if val := await redis.get(key):
            return json.loads(val)
    except Exception as e:
        logger.warning("cache_get error key=%s err=%s", key, e)
    return None


async def cache_set(redis: Optional[Redis], key: str, value: Any, ex: int = 60) -> None:
    if redis is None:
        return
    try:
        await redis.set(key, json.dumps(value, ensure_ascii=False), ex=ex)
    except Exception as e:
        logger.warning("cache_set error key=%s err=%s", key, e)
