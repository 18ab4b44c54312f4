# artisan_hub/domain/repositories/share_event_repo.py

from __future__ import annotations
from datetime import datetime
from typing import Dict, Optional
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from artisan_hub.domain.services.constants import COL_SOCIAL_SHARES

logger = logging.getLogger(__name__)

class ShareEventRepo:
    """One document per generated share link in 'social_shares'."""

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = COL_SOCIAL_SHARES):
        self.col = db[collection_name]

    async def record_safely(
        self,
        *,
        post_id: str,
        platform: str,
        product_id: Optional[str],
        shared_at: datetime,
    ) -> None:
        try:
            await self.col.insert_one({
                "postId": post_id,
                "productId": product_id,
                "platform": platform,
                "sharedAt": shared_at,
            })
        except Exception as e:
            logger.warning(f"Share event write failed post_id={post_id} platform={platform}: {e}")

    async def counts_by_platform(self, product_id: str) -> Dict[str, int]:
        pipeline = [
            {"$match": {"productId": product_id}},
            {"$group": {"_id": "$platform", "shares": {"$sum": 1}}},
            {"$sort": {"shares": -1}},
        ]
        docs = await self.col.aggregate(pipeline).to_list(length=None)
        return {d["_id"]: int(d["shares"]) for d in docs if d.get("_id")}
