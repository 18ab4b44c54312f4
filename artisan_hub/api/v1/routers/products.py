# artisan_hub/api/v1/routers/products.py

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from artisan_hub.api.deps import catalog_dep
from artisan_hub.domain.models.catalog import CatalogSnapshot, to_wire
from artisan_hub.domain.services.catalog_svc import filter_products, find_product, parse_limit

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("")
async def list_products(
    category: Optional[str] = Query(None, description="Case-insensitive category name"),
    artisan_id: Optional[str] = Query(None, alias="artisanId"),
    limit: Optional[str] = Query(None, description="Positive integer truncates the list"),
    catalog: CatalogSnapshot = Depends(catalog_dep),
):
    logger.info(f"Request: list_products category={category} artisan_id={artisan_id} limit={limit}")
    items = filter_products(
        catalog.products,
        category=category,
        artisan_id=artisan_id,
        limit=parse_limit(limit),
    )
    logger.info(f"Response: list_products count={len(items)}")
    return {
        "success": True,
        "data": [to_wire(p) for p in items],
        "count": len(items),
        "filters": {
            "category": category or None,
            "artisanId": artisan_id or None,
            "limit": limit or None,
        },
    }


@router.get("/{id_or_slug}")
async def get_product(id_or_slug: str, catalog: CatalogSnapshot = Depends(catalog_dep)):
    product = find_product(catalog.products, id_or_slug)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"success": True, "data": to_wire(product)}
