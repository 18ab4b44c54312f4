# artisan_hub/domain/repositories/content_audit_repo.py

from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from artisan_hub.domain.models.content import GeneratedContentRecord, GenerationResult
from artisan_hub.domain.services.constants import COL_GENERATED_CONTENT

logger = logging.getLogger(__name__)

class ContentAuditRepo:
    """
    Append-only log of model outputs in the 'ai_generated_content' collection.
    Nothing in the API reads it back.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = COL_GENERATED_CONTENT):
        self.col = db[collection_name]

    async def record(self, result: GenerationResult, *, user_id: Optional[str], language: str = "en") -> None:
        rec = GeneratedContentRecord(
            user_id=user_id,
            content_type=result.content_type,
            original_prompt=result.prompt,
            generated_content=result.raw_output or "",
            parsed=result.content,
            language=language,
            created_at=datetime.now(timezone.utc),
        )
        await self.col.insert_one(rec.model_dump(by_alias=True))

    async def record_safely(self, result: GenerationResult, *, user_id: Optional[str], language: str = "en") -> None:
        """Fire-and-forget variant for background tasks: failures are logged, never raised."""
        try:
            await self.record(result, user_id=user_id, language=language)
        except Exception as e:
            logger.warning(f"Audit write failed type={result.content_type}: {e}")
