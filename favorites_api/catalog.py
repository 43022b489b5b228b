"""Shared, read-mostly registry of catalog assets.

The catalog is populated once during application startup (see
:func:`favorites_api.services.catalog_loader.load_seed_file`) and then serves
lookups for every request.  Instances are constructed explicitly and handed to
their consumers; there is no module-level catalog.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from favorites_api.models.assets import Asset, Audience, Chart, Insight, asset_id
from favorites_api.utils.rwlock import ReadWriteLock

__all__ = ["AssetCatalog", "CatalogSeed"]


@dataclass(frozen=True, slots=True)
class CatalogSeed:
    """Startup payload grouping assets by variant, mirroring the seed file."""

    charts: tuple[Chart, ...] = field(default_factory=tuple)
    insights: tuple[Insight, ...] = field(default_factory=tuple)
    audiences: tuple[Audience, ...] = field(default_factory=tuple)

    def assets(self) -> Iterable[Asset]:
        yield from self.charts
        yield from self.insights
        yield from self.audiences


class AssetCatalog:
    """Concurrency-safe mapping of asset identifier to asset variant.

    Reads share the lock; :meth:`insert` and :meth:`load_seed` take it
    exclusively.  No method validates assets, callers run
    :func:`~favorites_api.models.assets.validate_asset` when they need to.
    """

    def __init__(self, assets: Iterable[Asset] | None = None) -> None:
        self._lock = ReadWriteLock()
        self._assets: dict[str, Asset] = {}
        for asset in assets or ():
            self._assets[asset_id(asset)] = asset

    def insert(self, asset_id: str, asset: Asset) -> None:
        """Store ``asset`` under ``asset_id``, replacing any previous entry."""

        with self._lock.write():
            self._assets[asset_id] = asset

    def load_seed(self, seed: CatalogSeed) -> int:
        """Insert every asset of ``seed`` under one write lock.

        Returns the number of records applied; later records overwrite earlier
        ones sharing an identifier.
        """

        applied = 0
        with self._lock.write():
            for asset in seed.assets():
                self._assets[asset_id(asset)] = asset
                applied += 1
        return applied

    def get(self, asset_id: str) -> Asset | None:
        """Return the asset stored under ``asset_id`` or ``None``."""

        with self._lock.read():
            return self._assets.get(asset_id)

    def contains(self, asset_id: str) -> bool:
        with self._lock.read():
            return asset_id in self._assets

    def list(self) -> list[Asset]:
        """Return a snapshot of all assets; ordering is not part of the contract."""

        with self._lock.read():
            return list(self._assets.values())

    def count(self) -> int:
        with self._lock.read():
            return len(self._assets)

    def __len__(self) -> int:
        return self.count()
