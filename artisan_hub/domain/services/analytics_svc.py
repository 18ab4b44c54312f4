import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict

from artisan_hub.domain.services.constants import COL_ANALYTICS, COL_ARTISANS, COL_ORDERS, COL_PRODUCTS
from artisan_hub.domain.services.llm_svc import LLMService
from artisan_hub.domain.services.prompts import analytics_prompt

logger = logging.getLogger(__name__)

COMPLETED = "completed"


async def generate_artisan_insights(
    db,
    llm: LLMService,
    *,
    artisan_id: str,
    user_id: str,
    period: str = "monthly",
) -> Dict[str, Any]:
    """
    Metrics from the artisan's completed orders and products, plus model-written
    insights. The artisan profile must belong to the caller (PermissionError otherwise).
    Result is merged into 'analytics/<artisanId>' and returned.
    """
    t0 = time.perf_counter()
    logger.info("analytics start artisan_id=%s period=%s", artisan_id, period)

    artisan = await db[COL_ARTISANS].find_one({"id": artisan_id}, {"_id": 0})
    if not artisan or artisan.get("userId") != user_id:
        raise PermissionError("Access denied")

    orders = await db[COL_ORDERS].find(
        {"artisanId": artisan_id, "status": COMPLETED}, {"_id": 0}
    ).to_list(length=None)
    products = await db[COL_PRODUCTS].find({"artisanId": artisan_id}, {"_id": 0}).to_list(length=None)
    logger.info("analytics db_ok orders=%s products=%s", len(orders), len(products))

    metrics = {
        "sales": len(orders),
        "revenue": round(sum(float(o.get("totalAmount") or 0) for o in orders), 2),
        "views": sum(int(p.get("views") or 0) for p in products),
        "orders": len(orders),
        "products": len(products),
    }

    insights = await llm.complete(analytics_prompt(metrics, period))

    analytics = {
        "artisanId": artisan_id,
        "period": period,
        "metrics": metrics,
        "insights": insights,
        "generatedAt": datetime.now(timezone.utc),
    }
    await db[COL_ANALYTICS].update_one({"artisanId": artisan_id}, {"$set": analytics}, upsert=True)

    logger.info("analytics done artisan_id=%s total_time=%.3fs", artisan_id, time.perf_counter() - t0)
    return analytics
