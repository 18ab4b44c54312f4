# artisan_hub/api/v1/routers/artisans.py

from fastapi import APIRouter, Depends, HTTPException

from artisan_hub.api.deps import catalog_dep, llm_dep, mongo_db, redis_dep
from artisan_hub.api.v1.schemas.accounts import OnboardArtisanRequest
from artisan_hub.core.config import Settings, get_settings
from artisan_hub.core.identity import require_user_id
from artisan_hub.domain.models.catalog import CatalogSnapshot, to_wire
from artisan_hub.domain.services.account_svc import onboard_artisan
from artisan_hub.domain.services.catalog_svc import artisan_products, find_by_id
from artisan_hub.domain.services.llm_svc import LLMService
from artisan_hub.domain.services.translation_svc import translate_best_effort

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/artisans", tags=["artisans"])


@router.get("")
async def list_artisans(catalog: CatalogSnapshot = Depends(catalog_dep)):
    return {
        "success": True,
        "data": [to_wire(a) for a in catalog.artisans],
        "count": len(catalog.artisans),
    }


@router.get("/{artisan_id}")
async def get_artisan(artisan_id: str, catalog: CatalogSnapshot = Depends(catalog_dep)):
    artisan = find_by_id(catalog.artisans, artisan_id)
    if not artisan:
        raise HTTPException(status_code=404, detail="Artisan not found")
    return {
        "success": True,
        "data": to_wire(artisan),
        "products": [to_wire(p) for p in artisan_products(catalog, artisan)],
    }


@router.post("", status_code=201)
async def onboard(
    body: OnboardArtisanRequest,
    user_id: str = Depends(require_user_id),
    db = Depends(mongo_db),
    redis = Depends(redis_dep),
    llm: LLMService = Depends(llm_dep),
    settings: Settings = Depends(get_settings),
):
    """
    Onboarding: store the caller's artisan profile. A non-English bio gets an
    English translation when the model is reachable; otherwise the original is kept.
    """
    logger.info(f"Request: onboard_artisan user_id={user_id} language={body.language}")
    translated = await translate_best_effort(
        llm, redis, settings,
        text=body.bio,
        source_language=body.language,
    )
    doc = await onboard_artisan(
        db,
        user_id=user_id,
        name=body.name,
        language=body.language,
        bio=body.bio,
        bio_translated=translated,
        location=body.location,
        profile_image=body.profile_image,
    )
    return {"success": True, "data": doc}
