"""In-memory domain models for catalog assets and user favorites."""

from .assets import (
    Asset,
    AssetBase,
    AssetKind,
    Audience,
    Chart,
    Insight,
    asset_description,
    asset_id,
    asset_kind,
    asset_name,
    validate_asset,
)
from .favorites import Favorite, FavoriteWithAsset

__all__ = [
    "Asset",
    "AssetBase",
    "AssetKind",
    "Audience",
    "Chart",
    "Favorite",
    "FavoriteWithAsset",
    "Insight",
    "asset_description",
    "asset_id",
    "asset_kind",
    "asset_name",
    "validate_asset",
]
