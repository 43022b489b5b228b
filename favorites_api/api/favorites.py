"""FastAPI router exposing per-user favorites operations."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from favorites_api.errors import (
    AssetNotFoundError,
    FavoriteAlreadyExistsError,
    FavoriteNotFoundError,
)
from favorites_api.schemas.favorites import (
    FavoriteCreate,
    FavoriteRead,
    FavoriteUpdate,
)
from favorites_api.services.dependencies import get_favorites_service
from favorites_api.services.favorites_service import FavoritesService

router = APIRouter()


@router.get("/{user_id}/favorites", response_model=list[FavoriteRead])
async def list_favorites(
    user_id: str = Path(..., min_length=1, description="Owner of the favorites"),
    service: FavoritesService = Depends(get_favorites_service),
) -> list[FavoriteRead]:
    """Return the user's favorites joined with their catalog assets.

    Favorites whose asset has disappeared from the catalog are left out. The
    response is always a JSON array, empty for unknown users.
    """

    return [
        FavoriteRead.from_domain(favorite)
        for favorite in service.list_favorites(user_id=user_id)
    ]


@router.post("/{user_id}/favorites", status_code=status.HTTP_201_CREATED)
async def add_favorite(
    payload: FavoriteCreate,
    user_id: str = Path(..., min_length=1, description="Owner of the favorites"),
    service: FavoritesService = Depends(get_favorites_service),
) -> Response:
    """Favorite a catalog asset."""

    asset_id = payload.asset_id.strip()
    if not asset_id:
        raise HTTPException(status_code=400, detail="assetId is required")

    try:
        service.add_favorite(
            user_id=user_id,
            asset_id=asset_id,
            description=payload.description,
        )
    except AssetNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except FavoriteAlreadyExistsError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_201_CREATED)


@router.delete(
    "/{user_id}/favorites/{asset_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def remove_favorite(
    asset_id: str,
    user_id: str = Path(..., min_length=1, description="Owner of the favorites"),
    service: FavoritesService = Depends(get_favorites_service),
) -> Response:
    """Remove a favorite; succeeds even when it was never there."""

    service.remove_favorite(user_id=user_id, asset_id=asset_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{user_id}/favorites/{asset_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def edit_favorite(
    asset_id: str,
    payload: FavoriteUpdate,
    user_id: str = Path(..., min_length=1, description="Owner of the favorites"),
    service: FavoritesService = Depends(get_favorites_service),
) -> Response:
    """Replace the personal note attached to a favorite."""

    try:
        service.edit_favorite(
            user_id=user_id,
            asset_id=asset_id,
            description=payload.description,
        )
    except FavoriteNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
