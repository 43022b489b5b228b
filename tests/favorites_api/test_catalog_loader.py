"""Tests for seed parsing and startup catalog loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from favorites_api.catalog import AssetCatalog
from favorites_api.errors import CatalogSeedError
from favorites_api.models.assets import Audience, Chart, Insight
from favorites_api.services.catalog_loader import (
    drop_invalid_assets,
    load_seed_file,
    parse_seed,
)

_REPO_SEED = Path(__file__).resolve().parents[2] / "data" / "seed_assets.json"


def _write(tmp_path: Path, payload: object) -> Path:
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_missing_seed_file_leaves_catalog_empty(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    catalog = AssetCatalog()

    with caplog.at_level(logging.WARNING):
        inserted = load_seed_file(catalog, tmp_path / "absent.json")

    assert inserted == 0
    assert catalog.count() == 0
    assert "not found" in caplog.text


def test_invalid_json_raises_seed_error(tmp_path: Path) -> None:
    path = tmp_path / "seed.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogSeedError):
        load_seed_file(AssetCatalog(), path)


def test_schema_mismatch_raises_seed_error() -> None:
    with pytest.raises(CatalogSeedError):
        parse_seed(json.dumps({"charts": [{"name": "no id"}]}))


def test_sections_are_optional() -> None:
    seed = parse_seed(json.dumps({"insights": []}))

    assert seed.charts == ()
    assert seed.audiences == ()


def test_parse_accepts_mixed_key_casing() -> None:
    seed = parse_seed(
        json.dumps(
            {
                "Charts": [
                    {"ID": "c1", "Name": "Revenue", "ChartType": "bar", "DataSource": "db"}
                ],
                "insights": [
                    {"id": "i1", "name": "Growth", "metric": "YoY", "value": "15%"}
                ],
                "audiences": [
                    {"id": "a1", "name": "Gen Z", "segment": "18-24", "size": 10}
                ],
            }
        )
    )

    (chart,) = seed.charts
    assert isinstance(chart, Chart)
    assert chart.base.id == "c1"
    assert chart.chart_type == "bar"
    assert chart.data_source == "db"
    assert isinstance(seed.insights[0], Insight)
    assert isinstance(seed.audiences[0], Audience)
    assert seed.audiences[0].size == 10


def test_snake_case_keys_are_accepted() -> None:
    seed = parse_seed(
        json.dumps({"charts": [{"id": "c1", "name": "R", "chart_type": "line"}]})
    )

    assert seed.charts[0].chart_type == "line"


def test_invalid_assets_are_skipped_when_validating(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = _write(
        tmp_path,
        {
            "charts": [
                {"id": "good", "name": "Good", "chartType": "bar"},
                {"id": "nameless", "name": "", "chartType": "bar"},
            ],
            "audiences": [
                {"id": "negative", "name": "Neg", "segment": "s", "size": -5}
            ],
        },
    )
    catalog = AssetCatalog()

    with caplog.at_level(logging.WARNING):
        inserted = load_seed_file(catalog, path)

    assert inserted == 1
    assert catalog.contains("good")
    assert not catalog.contains("nameless")
    assert not catalog.contains("negative")
    assert "nameless" in caplog.text


def test_validation_can_be_disabled(tmp_path: Path) -> None:
    path = _write(tmp_path, {"charts": [{"id": "nameless", "chartType": "bar"}]})
    catalog = AssetCatalog()

    inserted = load_seed_file(catalog, path, validate=False)

    assert inserted == 1
    assert catalog.contains("nameless")


def test_drop_invalid_assets_keeps_order() -> None:
    seed = parse_seed(
        json.dumps(
            {
                "insights": [
                    {"id": "i1", "name": "A", "metric": "m", "value": "v"},
                    {"id": "i2", "name": "B", "metric": "", "value": "v"},
                    {"id": "i3", "name": "C", "metric": "m", "value": "v"},
                ]
            }
        )
    )

    filtered = drop_invalid_assets(seed)

    assert [insight.base.id for insight in filtered.insights] == ["i1", "i3"]


def test_repository_seed_file_loads_cleanly() -> None:
    catalog = AssetCatalog()

    inserted = load_seed_file(catalog, _REPO_SEED)

    assert inserted == 5
    assert catalog.count() == 5
    assert catalog.contains("chart-revenue-2024")
