"""Pydantic schemas for catalog assets on the wire and in seed documents."""

from __future__ import annotations

from typing import Annotated, Any, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from favorites_api.catalog import CatalogSeed
from favorites_api.models.assets import (
    Asset,
    AssetBase,
    AssetKind,
    Audience,
    Chart,
    Insight,
)


class _AssetReadBase(BaseModel):
    """Fields shared by every asset payload returned to clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Catalog identifier of the asset")
    name: str = Field(..., description="Human friendly asset name")
    description: str = Field("", description="Short summary of the asset")


class ChartRead(_AssetReadBase):
    type: Literal[AssetKind.CHART] = AssetKind.CHART
    chart_type: str = Field(..., description="Rendering style, e.g. bar or line")
    data_source: str = ""


class InsightRead(_AssetReadBase):
    type: Literal[AssetKind.INSIGHT] = AssetKind.INSIGHT
    metric: str
    value: str


class AudienceRead(_AssetReadBase):
    type: Literal[AssetKind.AUDIENCE] = AssetKind.AUDIENCE
    segment: str
    size: int = Field(0, description="Estimated number of people in the segment")


AssetRead: TypeAlias = Annotated[
    ChartRead | InsightRead | AudienceRead, Field(discriminator="type")
]


def asset_to_schema(asset: Asset) -> ChartRead | InsightRead | AudienceRead:
    """Convert a domain asset into its response model."""

    base = asset.base
    common = {"id": base.id, "name": base.name, "description": base.description}
    if isinstance(asset, Chart):
        return ChartRead(
            **common, chart_type=asset.chart_type, data_source=asset.data_source
        )
    if isinstance(asset, Insight):
        return InsightRead(**common, metric=asset.metric, value=asset.value)
    if isinstance(asset, Audience):
        return AudienceRead(**common, segment=asset.segment, size=asset.size)
    raise TypeError(f"Unsupported asset variant: {type(asset).__name__}")


def _squash(key: str) -> str:
    return key.replace("_", "").lower()


class _SeedRecord(BaseModel):
    """Lenient seed record accepting ``ID``, ``chartType`` or ``chart_type`` keys.

    Seed files have historically been written by hand with inconsistent
    casing, so keys are matched case-insensitively and underscores ignored.
    Required-field checks are left to :func:`validate_asset`.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    name: str = ""
    description: str = ""

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        lookup = {_squash(name): name for name in cls.model_fields}
        normalized: dict[str, Any] = {}
        for key, value in data.items():
            target = lookup.get(_squash(str(key)))
            if target is not None:
                normalized[target] = value
        return normalized

    def _base(self) -> AssetBase:
        return AssetBase(id=self.id, name=self.name, description=self.description)


class ChartRecord(_SeedRecord):
    chart_type: str = ""
    data_source: str = ""

    def to_asset(self) -> Chart:
        return Chart(
            base=self._base(),
            chart_type=self.chart_type,
            data_source=self.data_source,
        )


class InsightRecord(_SeedRecord):
    metric: str = ""
    value: str = ""

    def to_asset(self) -> Insight:
        return Insight(base=self._base(), metric=self.metric, value=self.value)


class AudienceRecord(_SeedRecord):
    segment: str = ""
    size: int = 0

    def to_asset(self) -> Audience:
        return Audience(base=self._base(), segment=self.segment, size=self.size)


class CatalogSeedDocument(BaseModel):
    """Top-level seed file layout: one list per asset variant."""

    model_config = ConfigDict(extra="ignore")

    charts: list[ChartRecord] = Field(default_factory=list)
    insights: list[InsightRecord] = Field(default_factory=list)
    audiences: list[AudienceRecord] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _lowercase_sections(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {str(key).lower(): value for key, value in data.items()}
        return data

    def to_seed(self) -> CatalogSeed:
        return CatalogSeed(
            charts=tuple(record.to_asset() for record in self.charts),
            insights=tuple(record.to_asset() for record in self.insights),
            audiences=tuple(record.to_asset() for record in self.audiences),
        )


__all__ = [
    "AssetRead",
    "AudienceRead",
    "AudienceRecord",
    "CatalogSeedDocument",
    "ChartRead",
    "ChartRecord",
    "InsightRead",
    "InsightRecord",
    "asset_to_schema",
]
