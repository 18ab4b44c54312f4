from datetime import date, datetime
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Fixtures and API payloads use camelCase keys; python side stays snake_case.
_CATALOG_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,  # immuable = safe to share between requests
)

class Product(BaseModel):
    id: str
    title: str
    slug: str
    short_description: str = ""
    long_description: str = ""
    price: float = Field(ge=0)
    currency: str = "INR"
    images: List[str] = []
    artisan_id: str
    category: str
    stock: int = Field(default=0, ge=0)
    created_at: Optional[date] = None

    model_config = _CATALOG_CONFIG

class Artisan(BaseModel):
    id: str
    name: str
    language: str = "English"
    bio: str = ""
    profile_image: Optional[str] = None
    location: str = ""
    joined_at: Optional[date] = None

    model_config = _CATALOG_CONFIG

class Order(BaseModel):
    id: str
    product_id: str
    product_title: Optional[str] = None
    buyer: str
    amount: float
    currency: str = "INR"
    status: str
    ordered_at: datetime

    model_config = _CATALOG_CONFIG

class CatalogSnapshot(BaseModel):
    """
    Read-only view of the JSON fixtures, built once at start-up and
    injected into handlers. Tuples keep the fixture order.
    """
    products: Tuple[Product, ...] = ()
    artisans: Tuple[Artisan, ...] = ()
    orders: Tuple[Order, ...] = ()

    model_config = {"frozen": True}

def to_wire(record: BaseModel) -> dict:
    """Serialize a catalog record with its camelCase keys (dates as ISO strings)."""
    return record.model_dump(mode="json", by_alias=True)
