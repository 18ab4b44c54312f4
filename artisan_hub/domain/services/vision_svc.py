# artisan_hub/domain/services/vision_svc.py

from __future__ import annotations
from typing import Dict, List
import logging

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from artisan_hub.domain.services.content_svc import parse_structured
from artisan_hub.domain.services.llm_svc import LLMService
from artisan_hub.domain.services.prompts import SYSTEM_VISION, image_analysis_prompt

logger = logging.getLogger(__name__)

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

MAX_ANNOTATIONS = 10


class Label(BaseModel):
    description: str
    score: float = Field(ge=0.0, le=1.0)

class DetectedObject(BaseModel):
    name: str
    score: float = Field(ge=0.0, le=1.0)

class ImageAnalysis(BaseModel):
    labels: List[Label] = Field(default_factory=list)
    objects: List[DetectedObject] = Field(default_factory=list)
    safe_search: Dict[str, str] = Field(default_factory=dict)
    dominant_colors: List[str] = Field(default_factory=list)
    model_config = _CAMEL


async def analyze_image(llm: LLMService, *, image_url: str) -> ImageAnalysis:
    """Labels, objects, safe-search verdicts and palette for a product photo."""
    raw = await llm.complete(
        image_analysis_prompt(), system=SYSTEM_VISION, image_url=image_url, json_mode=True, temperature=0.0,
    )
    analysis = parse_structured(raw, ImageAnalysis)
    analysis = analysis.model_copy(update={
        "labels": analysis.labels[:MAX_ANNOTATIONS],
        "objects": analysis.objects[:MAX_ANNOTATIONS],
    })
    logger.info(
        "image analyzed labels=%s objects=%s", len(analysis.labels), len(analysis.objects),
    )
    return analysis

