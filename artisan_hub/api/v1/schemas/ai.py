from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TranslateRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=5000)
    target_language: str = Field(..., min_length=2)
    source_language: str = "auto"
    model_config = _CAMEL


class SpeechRequest(BaseModel):
    audio_content: str = Field(..., min_length=1)
    language_code: str = "en-US"
    model_config = _CAMEL


class AnalyzeImageRequest(BaseModel):
    image_url: str = Field(..., min_length=1)
    model_config = _CAMEL


class AnalyticsRequest(BaseModel):
    artisan_id: str = Field(..., min_length=1)
    period: str = "monthly"
    model_config = _CAMEL
