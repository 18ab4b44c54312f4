# artisan_hub/domain/services/catalog_svc.py

from __future__ import annotations
from collections import Counter, OrderedDict
from typing import Any, Dict, Iterable, List, Optional, Sequence, TypeVar
import re
import logging

from artisan_hub.domain.models.catalog import Artisan, CatalogSnapshot, Order, Product, to_wire

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOW_STOCK_THRESHOLD = 5
CANCELLED = "cancelled"

_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_limit(raw: Optional[str]) -> Optional[int]:
    """
    Parse a `limit` query value the lenient way browsers send it:
    leading integer wins ("3abc" -> 3), anything else -> None.
    """
    if raw is None:
        return None
    m = _INT_PREFIX_RE.match(str(raw))
    return int(m.group(1)) if m else None


def _apply_limit(items: List[T], limit: Optional[int]) -> List[T]:
    # Only a positive limit truncates; 0 / negative / None leave the list as-is.
    if limit is not None and limit > 0:
        return items[:limit]
    return items


def _same_text(a: Optional[str], b: str) -> bool:
    return (a or "").lower() == b.lower()


# =============================================================================
#                                   PRODUCTS
# =============================================================================

def filter_products(
    products: Iterable[Product],
    *,
    category: Optional[str] = None,
    artisan_id: Optional[str] = None,
    limit: Optional[int] = None,
) -> List[Product]:
    """Subsequence of `products` matching every given filter, original order kept."""
    out = list(products)
    if category:
        out = [p for p in out if _same_text(p.category, category)]
    if artisan_id:
        out = [p for p in out if p.artisan_id == artisan_id]
    return _apply_limit(out, limit)


def find_product(products: Iterable[Product], id_or_slug: str) -> Optional[Product]:
    return next((p for p in products if p.id == id_or_slug or p.slug == id_or_slug), None)


# =============================================================================
#                                ARTISANS / ORDERS
# =============================================================================

def find_by_id(records: Iterable[T], record_id: str) -> Optional[T]:
    return next((r for r in records if getattr(r, "id", None) == record_id), None)


def filter_orders(
    orders: Iterable[Order],
    *,
    status: Optional[str] = None,
    product_id: Optional[str] = None,
    limit: Optional[int] = None,
) -> List[Order]:
    """
    Filter then truncate in fixture order; the surviving orders are
    returned newest first (sorting happens after the limit).
    """
    out = list(orders)
    if status:
        out = [o for o in out if _same_text(o.status, status)]
    if product_id:
        out = [o for o in out if o.product_id == product_id]
    out = _apply_limit(out, limit)
    out.sort(key=lambda o: o.ordered_at, reverse=True)
    return out


# =============================================================================
#                                   DASHBOARD
# =============================================================================

def dashboard_summary(snapshot: CatalogSnapshot) -> Dict[str, Any]:
    """
    Seller dashboard figures computed from the fixture snapshot.
    Cancelled orders count as orders but not as sales.
    """
    orders: Sequence[Order] = snapshot.orders
    billable = [o for o in orders if (o.status or "").lower() != CANCELLED]

    monthly: "OrderedDict[str, float]" = OrderedDict()
    for o in sorted(billable, key=lambda o: o.ordered_at):
        month = o.ordered_at.strftime("%Y-%m")
        monthly[month] = monthly.get(month, 0.0) + o.amount

    by_status = Counter((o.status or "").lower() for o in orders)
    low_stock = [to_wire(p) for p in snapshot.products if p.stock < LOW_STOCK_THRESHOLD]

    summary = {
        "totalSales": round(sum(o.amount for o in billable), 2),
        "totalOrders": len(orders),
        "totalArtisans": len(snapshot.artisans),
        "totalProducts": len(snapshot.products),
        "ordersByStatus": dict(by_status),
        "monthlySales": [{"month": m, "value": round(v, 2)} for m, v in monthly.items()],
        "lowStockProducts": low_stock,
    }
    logger.debug(
        "dashboard totals sales=%s orders=%s low_stock=%s",
        summary["totalSales"], summary["totalOrders"], len(low_stock),
    )
    return summary


def artisan_products(snapshot: CatalogSnapshot, artisan: Artisan) -> List[Product]:
    return filter_products(snapshot.products, artisan_id=artisan.id)
