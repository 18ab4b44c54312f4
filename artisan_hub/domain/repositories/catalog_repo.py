# artisan_hub/domain/repositories/catalog_repo.py

from __future__ import annotations
from pathlib import Path
from typing import List, Type, TypeVar
import json
import logging

from pydantic import BaseModel

from artisan_hub.domain.models.catalog import Artisan, CatalogSnapshot, Order, Product

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

PRODUCTS_FILE = "products.json"
ARTISANS_FILE = "artisans.json"
ORDERS_FILE = "orders.json"


def _load_records(path: Path, model: Type[T]) -> List[T]:
    """
    Read one fixture file (a JSON array) and validate every record.
    A malformed fixture is a deployment error: let it raise at start-up.
    """
    with path.open("r", encoding="utf-8") as fh:
        raw = json.load(fh)
    if not isinstance(raw, list):
        raise ValueError(f"Fixture {path.name} must contain a JSON array")
    return [model.model_validate(item) for item in raw]


def load_catalog(data_dir: str | Path) -> CatalogSnapshot:
    """
    Build the read-only catalog snapshot from the JSON fixtures in `data_dir`.
    Called once by the lifespan; reloading means restarting the process.
    """
    base = Path(data_dir)
    snapshot = CatalogSnapshot(
        products=tuple(_load_records(base / PRODUCTS_FILE, Product)),
        artisans=tuple(_load_records(base / ARTISANS_FILE, Artisan)),
        orders=tuple(_load_records(base / ORDERS_FILE, Order)),
    )
    logger.info(
        "Catalog loaded from %s products=%s artisans=%s orders=%s",
        base, len(snapshot.products), len(snapshot.artisans), len(snapshot.orders),
    )
    return snapshot
