"""Business logic powering the favorites API endpoints.

:class:`FavoritesService` is the request-handling collaborator sitting between
the FastAPI routers and the in-memory core:

* ``list_assets`` – catalog browsing.
* ``add_favorite`` – rejects unknown assets before delegating to the store.
* ``list_favorites``/``remove_favorite``/``edit_favorite`` – thin pass-through
  to :class:`FavoritesStore`, which owns uniqueness and ordering rules.

Keeping this layer free of HTTP types lets the tests drive the whole workflow
without spinning up an ASGI client.
"""

from __future__ import annotations

from favorites_api.catalog import AssetCatalog
from favorites_api.errors import AssetNotFoundError
from favorites_api.models.assets import Asset
from favorites_api.models.favorites import Favorite, FavoriteWithAsset
from favorites_api.store import FavoritesStore


class FavoritesService:
    """Coordinates catalog existence checks with favorites store mutations."""

    def __init__(self, *, catalog: AssetCatalog, store: FavoritesStore) -> None:
        self._catalog = catalog
        self._store = store

    def list_assets(self) -> list[Asset]:
        return self._catalog.list()

    def list_favorites(self, *, user_id: str) -> list[FavoriteWithAsset]:
        return self._store.list(user_id)

    def add_favorite(
        self, *, user_id: str, asset_id: str, description: str
    ) -> Favorite:
        """Favorite a catalog asset on behalf of ``user_id``.

        Raises:
            AssetNotFoundError: ``asset_id`` is not in the catalog.
            FavoriteAlreadyExistsError: the user already favorited it.
        """

        if not self._catalog.contains(asset_id):
            raise AssetNotFoundError(asset_id)
        return self._store.add(user_id, asset_id, description)

    def remove_favorite(self, *, user_id: str, asset_id: str) -> None:
        self._store.remove(user_id, asset_id)

    def edit_favorite(
        self, *, user_id: str, asset_id: str, description: str
    ) -> Favorite:
        """Replace the note on an existing favorite.

        Raises:
            FavoriteNotFoundError: the user has not favorited ``asset_id``.
        """

        return self._store.edit_description(user_id, asset_id, description)


__all__ = ["FavoritesService"]
