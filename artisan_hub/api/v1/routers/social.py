# artisan_hub/api/v1/routers/social.py

from datetime import datetime, timezone
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request

from artisan_hub.api.deps import catalog_dep, mongo_db, optional_mongo_db
from artisan_hub.api.v1.schemas.social import GeneratePostsRequest, ShareRequest
from artisan_hub.core.config import Settings, get_settings
from artisan_hub.core.errors import upstream_failure
from artisan_hub.domain.models.catalog import CatalogSnapshot
from artisan_hub.domain.repositories.share_event_repo import ShareEventRepo
from artisan_hub.domain.services.catalog_svc import find_product
from artisan_hub.domain.services.social_svc import (
    UnsupportedPlatformError,
    build_share_link,
    generate_posts,
    parse_platform,
)

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/social", tags=["social"])


def _base_url(request: Request, settings: Settings) -> str:
    return (settings.PUBLIC_BASE_URL or str(request.base_url)).rstrip("/")


@router.post("/generate")
async def generate(
    body: GeneratePostsRequest,
    request: Request,
    catalog: CatalogSnapshot = Depends(catalog_dep),
    settings: Settings = Depends(get_settings),
):
    if not body.product_id or not body.platforms:
        raise HTTPException(status_code=400, detail="Product ID and platforms array are required")

    # slug makes the nicer link when the product is in the catalog
    product = find_product(catalog.products, body.product_id)
    path_id = product.slug if product and product.slug else body.product_id
    product_url = f"{_base_url(request, settings)}/products/{path_id}"

    try:
        generated = generate_posts(body.platforms, product_url, ttl_hours=settings.social_post_ttl_hours)
    except UnsupportedPlatformError as e:
        raise HTTPException(
            status_code=400,
            detail={"error": "No valid platforms specified", "supportedPlatforms": e.supported},
        )

    if generated.skipped:
        logger.info(f"Skipped unsupported platforms product_id={body.product_id}: {generated.skipped}")
    return {
        "success": True,
        "productId": body.product_id,
        "posts": generated.posts,
        "generatedAt": generated.generated_at.isoformat(),
        "expiresAt": generated.expires_at.isoformat(),
    }


@router.post("/share")
async def share(
    body: ShareRequest,
    request: Request,
    background: BackgroundTasks,
    db = Depends(optional_mongo_db),
    settings: Settings = Depends(get_settings),
):
    if not body.post_id or not body.platform:
        raise HTTPException(status_code=400, detail="Post ID and platform are required")

    try:
        platform = parse_platform(body.platform)
    except UnsupportedPlatformError as e:
        raise HTTPException(
            status_code=400,
            detail={"error": "Unsupported platform", "supportedPlatforms": e.supported},
        )

    product_url = body.product_url or f"{_base_url(request, settings)}/products/{body.post_id}"
    link = build_share_link(platform, product_url, body.custom_message)
    shared_at = datetime.now(timezone.utc)

    if db is not None:
        background.add_task(
            ShareEventRepo(db).record_safely,
            post_id=body.post_id,
            platform=platform.value,
            product_id=body.product_id,
            shared_at=shared_at,
        )

    logger.info(f"Share link built post_id={body.post_id} platform={platform.value}")
    out = {
        "success": True,
        "postId": body.post_id,
        "platform": platform.value,
        "shareUrl": link.url,
        "sharedAt": shared_at.isoformat(),
    }
    if link.instructions:
        out["instructions"] = link.instructions
    return out


@router.get("/analytics/{product_id}")
async def share_analytics(product_id: str, db = Depends(mongo_db)):
    try:
        counts = await ShareEventRepo(db).counts_by_platform(product_id)
    except Exception as e:
        logger.error(f"Share analytics error product_id={product_id}: {e}")
        raise upstream_failure("Failed to load share analytics", e)
    return {
        "success": True,
        "productId": product_id,
        "totalShares": sum(counts.values()),
        "platformBreakdown": counts,
    }
