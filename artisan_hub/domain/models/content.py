from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ContentSource = Literal["model", "fallback"]

# Model output uses camelCase keys (same as the JSON contract in the prompts).
_OUTPUT_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


# =============================================================================
#                         EXPECTED MODEL OUTPUT SCHEMAS
# =============================================================================

class TitleContent(BaseModel):
    title: str = Field(..., min_length=1, max_length=60)
    model_config = _OUTPUT_CONFIG

class DescriptionContent(BaseModel):
    """
    Listing copy. Matches the JSON asked for in prompts.py:
      {"title", "shortDescription", "longDescription", "features": [...],
       "careInstructions", "giftText"}
    """
    title: str = Field(..., min_length=1, max_length=80)
    short_description: str = Field(..., min_length=1, max_length=200)
    long_description: str = Field(..., min_length=1)
    features: List[str] = Field(..., min_length=1)
    care_instructions: str = ""
    gift_text: str = ""
    model_config = _OUTPUT_CONFIG

class StoryContent(BaseModel):
    title: str = Field(..., min_length=1)
    story: str = Field(..., min_length=1)
    model_config = _OUTPUT_CONFIG

class SocialCaptionContent(BaseModel):
    instagram: str = Field(..., min_length=1)
    facebook: str = Field(..., min_length=1)
    twitter: str = Field(..., min_length=1, max_length=280)
    hashtags: List[str] = []
    model_config = _OUTPUT_CONFIG

class MarketingPackage(BaseModel):
    seo_title: str = Field(..., min_length=1)
    meta_description: str = Field(..., min_length=1)
    instagram_caption: str = Field(..., min_length=1)
    facebook_post: str = Field(..., min_length=1)
    whatsapp_message: str = Field(..., min_length=1)
    email_subject: str = Field(..., min_length=1)
    product_story: str = Field(..., min_length=1)
    call_to_actions: List[str] = Field(..., min_length=1)
    model_config = _OUTPUT_CONFIG


# =============================================================================
#                               RESULT / AUDIT
# =============================================================================

class GenerationResult(BaseModel):
    """
    Outcome of one generation call. `source` tells genuine model output
    apart from the static fallback object.
    """
    content_type: str
    content: Dict[str, Any]
    source: ContentSource
    prompt: str
    raw_output: Optional[str] = None
    error: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def used_fallback(self) -> bool:
        return self.source == "fallback"

class GeneratedContentRecord(BaseModel):
    """Audit row written to `ai_generated_content`; never read back by the API."""
    user_id: Optional[str] = None
    content_type: str
    original_prompt: str
    generated_content: str
    parsed: Dict[str, Any]
    language: str = "en"
    created_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
