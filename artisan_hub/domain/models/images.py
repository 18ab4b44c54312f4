from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


@dataclass(frozen=True)
class IncomingImage:
    """One uploaded file, fully read into memory before validation."""
    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


class ProcessedImage(BaseModel):
    id: str
    original_name: str
    filename: str
    optimized_filename: str
    size: int
    mimetype: str
    path: str
    optimized_path: str
    width: int
    height: int
    uploaded_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
