# artisan_hub/api/v1/routers/orders.py

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from artisan_hub.api.deps import catalog_dep
from artisan_hub.domain.models.catalog import CatalogSnapshot, to_wire
from artisan_hub.domain.services.catalog_svc import filter_orders, find_by_id, parse_limit

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/orders", tags=["orders"])


@router.get("")
async def list_orders(
    status: Optional[str] = Query(None, description="pending / shipped / delivered / cancelled"),
    product_id: Optional[str] = Query(None, alias="productId"),
    limit: Optional[str] = Query(None),
    catalog: CatalogSnapshot = Depends(catalog_dep),
):
    """Newest first. `limit` applies before sorting."""
    logger.info(f"Request: list_orders status={status} product_id={product_id} limit={limit}")
    items = filter_orders(catalog.orders, status=status, product_id=product_id, limit=parse_limit(limit))
    return {
        "success": True,
        "data": [to_wire(o) for o in items],
        "count": len(items),
        "filters": {
            "status": status or None,
            "productId": product_id or None,
            "limit": limit or None,
        },
    }


@router.get("/{order_id}")
async def get_order(order_id: str, catalog: CatalogSnapshot = Depends(catalog_dep)):
    order = find_by_id(catalog.orders, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return {"success": True, "data": to_wire(order)}
