from fastapi import APIRouter, Depends

from artisan_hub.api.deps import catalog_dep
from artisan_hub.domain.models.catalog import CatalogSnapshot
from artisan_hub.domain.services.catalog_svc import dashboard_summary

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

@router.get("")
async def get_dashboard(catalog: CatalogSnapshot = Depends(catalog_dep)):
    return {"success": True, "data": dashboard_summary(catalog)}
