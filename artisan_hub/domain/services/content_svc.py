# artisan_hub/domain/services/content_svc.py

from __future__ import annotations
from typing import Any, Dict, Optional, Type
import json
import re
import logging

from pydantic import BaseModel, ValidationError

from artisan_hub.domain.models.content import (
    DescriptionContent,
    GenerationResult,
    MarketingPackage,
    SocialCaptionContent,
    StoryContent,
    TitleContent,
)
from artisan_hub.domain.services.constants import (
    CONTENT_DESCRIPTION,
    CONTENT_LISTING,
    CONTENT_MARKETING_PACKAGE,
    CONTENT_SOCIAL,
    CONTENT_STORY,
    CONTENT_TITLE,
)
from artisan_hub.domain.services.fallbacks import fallback_for
from artisan_hub.domain.services.llm_svc import LLMService
from artisan_hub.domain.services.prompts import SYSTEM_COPYWRITER, content_prompt

logger = logging.getLogger(__name__)

# Expected output schema per content type
SCHEMAS: Dict[str, Type[BaseModel]] = {
    CONTENT_TITLE: TitleContent,
    CONTENT_DESCRIPTION: DescriptionContent,
    CONTENT_STORY: StoryContent,
    CONTENT_SOCIAL: SocialCaptionContent,
    CONTENT_LISTING: DescriptionContent,
    CONTENT_MARKETING_PACKAGE: MarketingPackage,
}

# =============================================================================
#                               STRICT PARSING
# =============================================================================

# Regex to strip code fences (``` or ```json) from LLM output
_CODE_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$", re.MULTILINE)
# First "{" to last "}" of the reply
_BRACE_SPAN_RE = re.compile(r"\{[\s\S]*\}")

def _strip_fences(s: str) -> str:
    """Remove ``` or ```json fences the LLM might add."""
    return _CODE_FENCE_RE.sub("", s).strip()

def _load_json_object(text: str) -> Dict[str, Any]:
    """
    Whole reply as JSON first, then the brace-delimited span inside free text.
    Raises ValueError when neither yields a JSON object.
    """
    raw = _strip_fences(text or "")
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        m = _BRACE_SPAN_RE.search(raw)
        if not m:
            raise ValueError("No JSON found in response")
        try:
            parsed = json.loads(m.group(0))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in response: {e}") from e
    if not isinstance(parsed, dict):
        raise ValueError(f"Expected a JSON object, got {type(parsed).__name__}")
    return parsed

def parse_structured(text: str, schema: Type[BaseModel]) -> BaseModel:
    """
    Parse model output and validate it against `schema`.
    Raises ValueError on any issue.
    """
    parsed = _load_json_object(text)
    logger.debug(f"Parsed JSON keys: {list(parsed.keys())}")
    try:
        return schema.model_validate(parsed)
    except ValidationError as e:
        raise ValueError(f"Invalid LLM JSON: {e}") from e

def resolve_output(content_type: str, prompt: str, raw: str) -> GenerationResult:
    """
    Turn a raw reply into a tagged result: parsed content (`source="model"`)
    or the static fallback object (`source="fallback"`).
    """
    schema = SCHEMAS.get(content_type)
    if schema is None:
        raise ValueError(f"Unknown content type: {content_type}")
    try:
        model = parse_structured(raw, schema)
    except ValueError as e:
        logger.warning(f"Content parse failed type={content_type}, using fallback: {e}")
        return GenerationResult(
            content_type=content_type,
            content=fallback_for(content_type),
            source="fallback",
            prompt=prompt,
            raw_output=raw,
            error=str(e),
        )
    return GenerationResult(
        content_type=content_type,
        content=model.model_dump(by_alias=True),
        source="model",
        prompt=prompt,
        raw_output=raw,
    )

# =============================================================================
#                               PUBLIC API
# =============================================================================

async def generate_structured(
    llm: LLMService,
    *,
    content_type: str,
    prompt: str,
    system: Optional[str] = SYSTEM_COPYWRITER,
) -> GenerationResult:
    """
    Call the model once and parse its reply. Upstream errors propagate;
    only parse/validation problems fall back.
    """
    logger.info(f"Generating content type={content_type} prompt_chars={len(prompt)}")
    raw = await llm.complete(prompt, system=system, json_mode=True)
    result = resolve_output(content_type, prompt, raw)
    logger.info(f"Generated content type={content_type} source={result.source}")
    return result

async def generate_product_content(
    llm: LLMService,
    *,
    content_type: str,
    product_data: Dict[str, Any],
    language: str = "en",
) -> GenerationResult:
    prompt = content_prompt(content_type, product_data, language)
    return await generate_structured(llm, content_type=content_type, prompt=prompt)
