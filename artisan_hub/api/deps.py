# artisan_hub/api/deps.py
from fastapi import Depends, Request

from artisan_hub.core.config import Settings, get_settings
from artisan_hub.db.mongo import get_db, get_db_or_none
from artisan_hub.db.redis import get_redis
from artisan_hub.domain.models.catalog import CatalogSnapshot
from artisan_hub.domain.services.llm_svc import LLMService

# Dependency for injecting the MongoDB database into endpoints/services
async def mongo_db(db = Depends(get_db)):
    return db

# Same, but None when Mongo is not configured (best-effort writes)
async def optional_mongo_db():
    return get_db_or_none()

# Redis client or None
def redis_dep():
    return get_redis()

# Read-only fixture snapshot built by the lifespan
def catalog_dep(request: Request) -> CatalogSnapshot:
    snapshot = getattr(request.app.state, "catalog", None)
    assert snapshot is not None, "Catalog snapshot not loaded"
    return snapshot

# Model client; one per request, OpenAI client created lazily on first call
def llm_dep(settings: Settings = Depends(get_settings)) -> LLMService:
    return LLMService(settings)
