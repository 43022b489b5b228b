"""Favorite records held by :class:`favorites_api.store.FavoritesStore`."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from favorites_api.models.assets import Asset

__all__ = ["Favorite", "FavoriteWithAsset"]


@dataclass(slots=True)
class Favorite:
    """A user's reference to one catalog asset.

    Only ``description`` ever changes after creation, and only through
    :meth:`FavoritesStore.edit_description`.
    """

    asset_id: str
    description: str
    created_at: datetime


@dataclass(frozen=True, slots=True)
class FavoriteWithAsset:
    """Favorite joined with the asset it resolves to at read time."""

    asset_id: str
    description: str
    created_at: datetime
    asset: Asset
