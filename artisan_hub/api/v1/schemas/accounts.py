from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserProfileRequest(BaseModel):
    email: Optional[str] = None
    name: str = ""
    phone_number: str = ""
    profile_image: str = ""
    model_config = _CAMEL


class OnboardArtisanRequest(BaseModel):
    name: str = Field(..., min_length=1)
    language: str = "English"
    bio: str = ""
    location: str = ""
    profile_image: Optional[str] = None
    model_config = _CAMEL
