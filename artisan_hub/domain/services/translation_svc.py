# artisan_hub/domain/services/translation_svc.py

from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional
import logging

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from artisan_hub.core.config import Settings
from artisan_hub.domain.services.constants import COL_TRANSLATIONS
from artisan_hub.domain.services.content_svc import parse_structured
from artisan_hub.domain.services.llm_svc import LLMService
from artisan_hub.domain.services.prompts import translation_prompt
from artisan_hub.utils.cache import cache_get, cache_key, cache_set

logger = logging.getLogger(__name__)

SYSTEM_TRANSLATOR = "You are a professional translator. Return strict JSON only."


class TranslationOut(BaseModel):
    translated_text: str = Field(..., min_length=1)
    detected_language: Optional[str] = None
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class TranslationResult(BaseModel):
    translated_text: str
    detected_language: str
    cached: bool = False
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


async def translate_text(
    llm: LLMService,
    redis,
    settings: Settings,
    *,
    text: str,
    target_language: str,
    source_language: str = "auto",
) -> TranslationResult:
    """
    Translate `text` with the model, caching results in Redis (when available).
    Raises ValueError when the model reply is not a valid translation.
    """
    key = cache_key(settings.translation_cache_prefix, source_language, target_language, text)
    cached = await cache_get(redis, key)
    if cached:
        logger.info("translation cache_hit key=%s", key)
        return TranslationResult.model_validate({**cached, "cached": True})

    raw = await llm.complete(
        translation_prompt(text, target_language, source_language),
        system=SYSTEM_TRANSLATOR,
        json_mode=True,
        temperature=0.0,
    )
    out = parse_structured(raw, TranslationOut)
    detected = out.detected_language or source_language
    result = TranslationResult(translated_text=out.translated_text, detected_language=detected)

    await cache_set(
        redis, key,
        result.model_dump(by_alias=True, exclude={"cached"}),
        ex=settings.translation_cache_ttl,
    )
    logger.info("translation done target=%s detected=%s chars=%s", target_language, detected, len(text))
    return result


async def record_translation(db, *, user_id: str, text: str, target_language: str, result: TranslationResult) -> None:
    """Keep a per-user history in 'translations'."""
    await db[COL_TRANSLATIONS].insert_one({
        "originalText": text,
        "translatedText": result.translated_text,
        "sourceLanguage": result.detected_language,
        "targetLanguage": target_language,
        "userId": user_id,
        "createdAt": datetime.now(timezone.utc),
    })


async def translate_best_effort(llm: LLMService, redis, settings: Settings, *, text: str, source_language: str,
                                target_language: str = "English") -> str:
    """
    Onboarding helper: translated text, or the original text when anything fails.
    """
    if not text:
        return ""
    if source_language.strip().lower() in {target_language.lower(), "en"}:
        return text
    try:
        res = await translate_text(llm, redis, settings, text=text, target_language=target_language,
                                   source_language=source_language)
        return res.translated_text
    except Exception as e:
        logger.warning("bio translation skipped from=%s: %s", source_language, e)
        return text
