# artisan_hub/api/v1/routers/marketing.py

from datetime import datetime, timezone
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from typing import Optional
import time

from artisan_hub.api.deps import catalog_dep, llm_dep, optional_mongo_db
from artisan_hub.api.v1.schemas.marketing import DescriptionRequest
from artisan_hub.core.errors import upstream_failure
from artisan_hub.core.identity import current_user_id
from artisan_hub.domain.models.catalog import CatalogSnapshot
from artisan_hub.domain.repositories.content_audit_repo import ContentAuditRepo
from artisan_hub.domain.services.catalog_svc import find_by_id, find_product
from artisan_hub.domain.services.llm_svc import LLMService
from artisan_hub.domain.services.marketing_svc import generate_listing_description, generate_marketing_package

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/marketing", tags=["marketing"])


@router.post("/description")
async def generate_description(
    body: DescriptionRequest,
    background: BackgroundTasks,
    user_id: Optional[str] = Depends(current_user_id),
    llm: LLMService = Depends(llm_dep),
    db = Depends(optional_mongo_db),
):
    """Listing copy from a few photos + basic info. `source` tells model output from fallback."""
    if not body.images:
        raise HTTPException(status_code=400, detail="At least one image is required")

    start = time.perf_counter()
    try:
        result = await generate_listing_description(llm, basic_info=body.basic_info)
    except Exception as e:
        logger.error(f"Description generation error: {e}")
        raise upstream_failure("Failed to generate description", e)

    if db is not None and not result.used_fallback:
        background.add_task(ContentAuditRepo(db).record_safely, result, user_id=user_id)

    logger.info(f"Response: generate_description source={result.source} elapsed={time.perf_counter() - start:.3f}s")
    return {
        "success": True,
        "generated": result.content,
        "source": result.source,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.post("/package/{product_id}")
async def generate_package(
    product_id: str,
    background: BackgroundTasks,
    user_id: Optional[str] = Depends(current_user_id),
    catalog: CatalogSnapshot = Depends(catalog_dep),
    llm: LLMService = Depends(llm_dep),
    db = Depends(optional_mongo_db),
):
    product = find_product(catalog.products, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    artisan = find_by_id(catalog.artisans, product.artisan_id)

    try:
        result = await generate_marketing_package(llm, product=product, artisan=artisan)
    except Exception as e:
        logger.error(f"Marketing package generation error product_id={product_id}: {e}")
        raise upstream_failure("Failed to generate marketing package", e)

    if db is not None and not result.used_fallback:
        background.add_task(ContentAuditRepo(db).record_safely, result, user_id=user_id)

    return {
        "success": True,
        "productId": product.id,
        "marketingPackage": result.content,
        "source": result.source,
        "generatedAt": datetime.now(timezone.utc).isoformat(),
    }
