"""FastAPI dependency wiring for the favorites service.

The catalog and store are created by :func:`favorites_api.main.create_app` and
parked on ``app.state``; the factories below only look them up.  Tests swap
them out through ``app.dependency_overrides`` or by building their own app.
"""

from __future__ import annotations

from fastapi import Depends, Request

from favorites_api.catalog import AssetCatalog
from favorites_api.services.favorites_service import FavoritesService
from favorites_api.store import FavoritesStore


def get_catalog(request: Request) -> AssetCatalog:
    """Return the catalog owned by the running application."""

    return request.app.state.catalog


def get_favorites_store(request: Request) -> FavoritesStore:
    return request.app.state.favorites_store


def get_favorites_service(
    catalog: AssetCatalog = Depends(get_catalog),
    store: FavoritesStore = Depends(get_favorites_store),
) -> FavoritesService:
    """Provide a :class:`FavoritesService` bound to the app's catalog and store."""

    return FavoritesService(catalog=catalog, store=store)


__all__ = ["get_catalog", "get_favorites_service", "get_favorites_store"]
