# artisan_hub/api/v1/routers/ai.py

from datetime import datetime, timezone
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from typing import Optional
import time

from artisan_hub.api.deps import llm_dep, mongo_db, optional_mongo_db, redis_dep
from artisan_hub.api.v1.schemas.ai import AnalyticsRequest, AnalyzeImageRequest, SpeechRequest, TranslateRequest
from artisan_hub.api.v1.schemas.marketing import ContentRequest
from artisan_hub.core.config import Settings, get_settings
from artisan_hub.core.errors import upstream_failure
from artisan_hub.core.identity import current_user_id, require_user_id
from artisan_hub.domain.repositories.content_audit_repo import ContentAuditRepo
from artisan_hub.domain.services.analytics_svc import generate_artisan_insights
from artisan_hub.domain.services.content_svc import generate_product_content
from artisan_hub.domain.services.llm_svc import LLMService
from artisan_hub.domain.services.speech_svc import decode_audio, transcribe
from artisan_hub.domain.services.translation_svc import record_translation, translate_text
from artisan_hub.domain.services.vision_svc import analyze_image

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["ai"])


@router.post("/content")
async def generate_content(
    body: ContentRequest,
    background: BackgroundTasks,
    user_id: str = Depends(require_user_id),
    llm: LLMService = Depends(llm_dep),
    db = Depends(optional_mongo_db),
):
    """
    Title / description / story / social copy for one product.
    Unparseable model replies come back as the fixed fallback object with source="fallback".
    """
    logger.info(f"Request: generate_content type={body.content_type} user_id={user_id} language={body.language}")
    start = time.perf_counter()
    try:
        result = await generate_product_content(
            llm,
            content_type=body.content_type,
            product_data=body.product_data,
            language=body.language,
        )
    except Exception as e:
        logger.error(f"Content generation error type={body.content_type}: {e}")
        raise upstream_failure("Failed to generate content", e)

    if db is not None and not result.used_fallback:
        background.add_task(ContentAuditRepo(db).record_safely, result, user_id=user_id, language=body.language)

    logger.info(f"Response: generate_content source={result.source} elapsed={time.perf_counter() - start:.3f}s")
    return {
        "success": True,
        "contentType": result.content_type,
        "content": result.content,
        "source": result.source,
        "generatedAt": datetime.now(timezone.utc).isoformat(),
    }


@router.post("/translate")
async def translate(
    body: TranslateRequest,
    user_id: Optional[str] = Depends(current_user_id),
    llm: LLMService = Depends(llm_dep),
    redis = Depends(redis_dep),
    db = Depends(optional_mongo_db),
    settings: Settings = Depends(get_settings),
):
    try:
        result = await translate_text(
            llm, redis, settings,
            text=body.text,
            target_language=body.target_language,
            source_language=body.source_language,
        )
    except Exception as e:
        logger.error(f"Translation error target={body.target_language}: {e}")
        raise upstream_failure("Failed to translate text", e)

    if user_id and db is not None and not result.cached:
        try:
            await record_translation(db, user_id=user_id, text=body.text,
                                     target_language=body.target_language, result=result)
        except Exception as e:
            logger.warning(f"Translation history write failed user_id={user_id}: {e}")

    return {"success": True, **result.model_dump(by_alias=True)}


@router.post("/speech-to-text")
async def speech_to_text(
    body: SpeechRequest,
    user_id: str = Depends(require_user_id),
    llm: LLMService = Depends(llm_dep),
):
    try:
        audio = decode_audio(body.audio_content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        text = await transcribe(llm, audio=audio, language_code=body.language_code)
    except Exception as e:
        logger.error(f"Transcription error user_id={user_id}: {e}")
        raise upstream_failure("Failed to transcribe audio", e)
    return {"success": True, "transcription": text}


@router.post("/analyze-image")
async def analyze(
    body: AnalyzeImageRequest,
    user_id: str = Depends(require_user_id),
    llm: LLMService = Depends(llm_dep),
):
    try:
        analysis = await analyze_image(llm, image_url=body.image_url)
    except Exception as e:
        logger.error(f"Image analysis error user_id={user_id}: {e}")
        raise upstream_failure("Failed to analyze image", e)
    return {"success": True, **analysis.model_dump(by_alias=True)}


@router.post("/analytics")
async def artisan_analytics(
    body: AnalyticsRequest,
    user_id: str = Depends(require_user_id),
    db = Depends(mongo_db),
    llm: LLMService = Depends(llm_dep),
):
    try:
        analytics = await generate_artisan_insights(
            db, llm,
            artisan_id=body.artisan_id,
            user_id=user_id,
            period=body.period,
        )
    except PermissionError:
        raise HTTPException(status_code=403, detail="Access denied")
    except Exception as e:
        logger.error(f"Analytics error artisan_id={body.artisan_id}: {e}")
        raise upstream_failure("Failed to generate analytics", e)
    return {"success": True, "data": analytics}
