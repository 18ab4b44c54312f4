from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)

ContentTypeIn = Literal["title", "description", "story", "social"]


class DescriptionRequest(BaseModel):
    images: List[str] = Field(default_factory=list)
    basic_info: Optional[Dict[str, Any]] = None
    model_config = _CAMEL


class ContentRequest(BaseModel):
    content_type: ContentTypeIn
    product_data: Dict[str, Any] = Field(default_factory=dict)
    language: str = "en"
    model_config = _CAMEL
