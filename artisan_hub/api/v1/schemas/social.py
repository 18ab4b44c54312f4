from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GeneratePostsRequest(BaseModel):
    # Optional here so the router can answer with the descriptive 400
    product_id: Optional[str] = None
    platforms: Optional[List[str]] = None
    model_config = _CAMEL


class ShareRequest(BaseModel):
    post_id: Optional[str] = None
    platform: Optional[str] = None
    product_url: Optional[str] = None
    custom_message: Optional[str] = None
    product_id: Optional[str] = None
    model_config = _CAMEL
