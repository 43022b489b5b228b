"""In-memory favorites store joined against the asset catalog at read time.

Storage model
-------------
Each user owns an ordered list of :class:`Favorite` records, keyed by asset
identifier and unique within that list.  Records only hold the asset id; the
full asset is resolved from the catalog on every :meth:`FavoritesStore.list`
call, so catalog updates show up without touching stored favorites.

Locking
-------
A registry lock guards the user map and each user collection carries its own
lock.  Every operation holds the owning user's lock for its whole duration
(including the catalog lookups performed by ``list``), which keeps operations
on one user linearizable while different users proceed in parallel.

Error semantics
---------------
* ``add`` raises :class:`FavoriteAlreadyExistsError` for duplicates.
* ``remove`` of an absent favorite succeeds silently.
* ``edit_description`` raises :class:`FavoriteNotFoundError` when absent.
* Favorites whose asset is missing from the catalog are skipped by ``list``
  but stay stored so they reappear once the asset is inserted again.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

from favorites_api.catalog import AssetCatalog
from favorites_api.errors import FavoriteAlreadyExistsError, FavoriteNotFoundError
from favorites_api.models.favorites import Favorite, FavoriteWithAsset

__all__ = ["FavoritesStore"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class _UserFavorites:
    lock: threading.Lock = field(default_factory=threading.Lock)
    records: list[Favorite] = field(default_factory=list)

    def index_of(self, asset_id: str) -> int | None:
        for index, record in enumerate(self.records):
            if record.asset_id == asset_id:
                return index
        return None


class FavoritesStore:
    """Per-user ordered favorite collections with a catalog-backed list view."""

    def __init__(
        self,
        catalog: AssetCatalog,
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._catalog = catalog
        self._clock = clock
        self._registry_lock = threading.Lock()
        self._users: dict[str, _UserFavorites] = {}

    def _collection(self, user_id: str, *, create: bool) -> _UserFavorites | None:
        with self._registry_lock:
            collection = self._users.get(user_id)
            if collection is None and create:
                collection = _UserFavorites()
                self._users[user_id] = collection
            return collection

    def add(self, user_id: str, asset_id: str, description: str) -> Favorite:
        """Append a favorite for ``asset_id`` to the end of the user's list.

        The catalog is not consulted, so a favorite may reference an asset that
        does not exist (yet).

        Raises:
            FavoriteAlreadyExistsError: the user already favorited ``asset_id``.
        """

        collection = self._collection(user_id, create=True)
        with collection.lock:
            if collection.index_of(asset_id) is not None:
                raise FavoriteAlreadyExistsError(user_id, asset_id)
            record = Favorite(
                asset_id=asset_id,
                description=description,
                created_at=self._clock(),
            )
            collection.records.append(record)
            return replace(record)

    def list(self, user_id: str) -> list[FavoriteWithAsset]:
        """Return the user's favorites that resolve in the catalog, oldest first."""

        collection = self._collection(user_id, create=False)
        if collection is None:
            return []
        with collection.lock:
            return self._join(collection.records)

    def _join(self, records: Iterable[Favorite]) -> list[FavoriteWithAsset]:
        joined: list[FavoriteWithAsset] = []
        for record in records:
            asset = self._catalog.get(record.asset_id)
            if asset is None:
                continue
            joined.append(
                FavoriteWithAsset(
                    asset_id=record.asset_id,
                    description=record.description,
                    created_at=record.created_at,
                    asset=asset,
                )
            )
        return joined

    def remove(self, user_id: str, asset_id: str) -> None:
        """Drop the favorite for ``asset_id``; absent favorites are a no-op."""

        collection = self._collection(user_id, create=False)
        if collection is None:
            return
        with collection.lock:
            index = collection.index_of(asset_id)
            if index is not None:
                del collection.records[index]

    def edit_description(
        self, user_id: str, asset_id: str, description: str
    ) -> Favorite:
        """Replace the user's note on an existing favorite.

        Raises:
            FavoriteNotFoundError: the user has no favorite for ``asset_id``.
        """

        collection = self._collection(user_id, create=False)
        if collection is None:
            raise FavoriteNotFoundError(user_id, asset_id)
        with collection.lock:
            index = collection.index_of(asset_id)
            if index is None:
                raise FavoriteNotFoundError(user_id, asset_id)
            record = collection.records[index]
            record.description = description
            return replace(record)

    def count(self, user_id: str) -> int:
        """Number of stored favorites for ``user_id``, dangling ones included."""

        collection = self._collection(user_id, create=False)
        if collection is None:
            return 0
        with collection.lock:
            return len(collection.records)
