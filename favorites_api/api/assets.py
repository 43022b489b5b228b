"""FastAPI router exposing the shared asset catalog."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from favorites_api.schemas.assets import AssetRead, asset_to_schema
from favorites_api.services.dependencies import get_favorites_service
from favorites_api.services.favorites_service import FavoritesService

router = APIRouter()


@router.get("/", response_model=list[AssetRead])
@router.get("", response_model=list[AssetRead], include_in_schema=False)
async def list_assets(
    service: FavoritesService = Depends(get_favorites_service),
) -> list[AssetRead]:
    """Return every asset in the catalog; ordering is not guaranteed."""

    return [asset_to_schema(asset) for asset in service.list_assets()]
