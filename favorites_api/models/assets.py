"""Catalog asset variants and the capability helpers shared between them.

Assets form a closed union of three variants (:class:`Chart`,
:class:`Insight`, :class:`Audience`).  Every variant embeds an
:class:`AssetBase` rather than inheriting from it, and the shared capabilities
(identify, describe, validate) are resolved through :data:`_ASSET_SPECS`, a
dispatch table keyed on the variant type.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from favorites_api.errors import AssetValidationError

__all__ = [
    "Asset",
    "AssetBase",
    "AssetKind",
    "Audience",
    "Chart",
    "Insight",
    "asset_description",
    "asset_id",
    "asset_kind",
    "asset_name",
    "validate_asset",
]


class AssetKind(str, Enum):
    """Discriminator values used on the wire and in seed documents."""

    CHART = "chart"
    INSIGHT = "insight"
    AUDIENCE = "audience"


@dataclass(frozen=True, slots=True)
class AssetBase:
    """Identity and descriptive fields carried by every asset."""

    id: str
    name: str
    description: str = ""


@dataclass(frozen=True, slots=True)
class Chart:
    """A saved chart, e.g. a bar chart over a sales table."""

    base: AssetBase
    chart_type: str
    data_source: str = ""


@dataclass(frozen=True, slots=True)
class Insight:
    """A single metric/value observation."""

    base: AssetBase
    metric: str
    value: str


@dataclass(frozen=True, slots=True)
class Audience:
    """A named audience segment with an estimated head count."""

    base: AssetBase
    segment: str
    size: int = 0


Asset: TypeAlias = Chart | Insight | Audience


def _validate_base(base: AssetBase) -> None:
    if not base.name:
        raise AssetValidationError("name", "name is required")


def _validate_chart(chart: Chart) -> None:
    if not chart.chart_type:
        raise AssetValidationError("chart_type", "chart type is required")


def _validate_insight(insight: Insight) -> None:
    if not insight.metric:
        raise AssetValidationError("metric", "metric is required")
    if not insight.value:
        raise AssetValidationError("value", "value is required")


def _validate_audience(audience: Audience) -> None:
    if not audience.segment:
        raise AssetValidationError("segment", "segment is required")
    if audience.size < 0:
        raise AssetValidationError("size", "size cannot be negative")


@dataclass(frozen=True, slots=True)
class _AssetSpec:
    kind: AssetKind
    validate: Callable[[Asset], None]


_ASSET_SPECS: dict[type, _AssetSpec] = {
    Chart: _AssetSpec(AssetKind.CHART, _validate_chart),
    Insight: _AssetSpec(AssetKind.INSIGHT, _validate_insight),
    Audience: _AssetSpec(AssetKind.AUDIENCE, _validate_audience),
}


def _spec_for(asset: Asset) -> _AssetSpec:
    try:
        return _ASSET_SPECS[type(asset)]
    except KeyError:
        raise TypeError(f"Unsupported asset variant: {type(asset).__name__}") from None


def asset_kind(asset: Asset) -> AssetKind:
    """Return the discriminator for ``asset``."""

    return _spec_for(asset).kind


def asset_id(asset: Asset) -> str:
    """Return the catalog identifier of ``asset``."""

    _spec_for(asset)
    return asset.base.id


def asset_name(asset: Asset) -> str:
    _spec_for(asset)
    return asset.base.name


def asset_description(asset: Asset) -> str:
    _spec_for(asset)
    return asset.base.description


def validate_asset(asset: Asset) -> None:
    """Check the shared base fields, then the variant-specific ones.

    Validation is a pure check: nothing in the catalog calls it implicitly, so
    callers decide when an invalid asset should be rejected.

    Raises:
        AssetValidationError: naming the first offending field.
        TypeError: if ``asset`` is not one of the known variants.
    """

    spec = _spec_for(asset)
    _validate_base(asset.base)
    spec.validate(asset)
