"""Pydantic schemas that power the favorites API surface."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from favorites_api.models.favorites import FavoriteWithAsset
from favorites_api.schemas.assets import AssetRead, asset_to_schema


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FavoriteCreate(_CamelModel):
    """Payload for adding an asset to a user's favorites."""

    asset_id: str = Field(
        "",
        max_length=256,
        description="Identifier of a catalog asset; blank values are rejected.",
    )
    description: str = Field(
        "",
        max_length=1024,
        description="Personal note stored alongside the favorite.",
    )


class FavoriteUpdate(_CamelModel):
    """Payload for replacing the personal note on a favorite."""

    description: str = Field("", max_length=1024)


class FavoriteRead(_CamelModel):
    """Favorite joined with its catalog asset, as returned by listings."""

    asset_id: str
    description: str
    created_at: datetime = Field(
        ..., description="Timestamp when the asset was favorited."
    )
    asset: AssetRead

    @classmethod
    def from_domain(cls, favorite: FavoriteWithAsset) -> "FavoriteRead":
        return cls(
            asset_id=favorite.asset_id,
            description=favorite.description,
            created_at=favorite.created_at,
            asset=asset_to_schema(favorite.asset),
        )


__all__ = ["FavoriteCreate", "FavoriteRead", "FavoriteUpdate"]
