"""Tests for :class:`favorites_api.catalog.AssetCatalog`."""

from __future__ import annotations

import threading

from favorites_api.catalog import AssetCatalog, CatalogSeed
from favorites_api.models.assets import AssetBase, Audience, Chart, Insight


def _chart(asset_id: str, name: str = "Chart") -> Chart:
    return Chart(base=AssetBase(id=asset_id, name=name), chart_type="bar")


def test_empty_catalog() -> None:
    catalog = AssetCatalog()

    assert catalog.count() == 0
    assert len(catalog) == 0
    assert catalog.list() == []
    assert catalog.get("missing") is None
    assert catalog.contains("missing") is False


def test_insert_and_get(chart: Chart) -> None:
    catalog = AssetCatalog()

    catalog.insert("chart-1", chart)

    assert catalog.get("chart-1") is chart
    assert catalog.contains("chart-1")
    assert catalog.count() == 1


def test_insert_overwrites_existing_entry() -> None:
    catalog = AssetCatalog()
    catalog.insert("c1", _chart("c1", "First"))

    catalog.insert("c1", _chart("c1", "Second"))

    assert catalog.count() == 1
    assert catalog.get("c1").base.name == "Second"


def test_insert_does_not_validate() -> None:
    catalog = AssetCatalog()
    invalid = Chart(base=AssetBase(id="bad", name=""), chart_type="")

    catalog.insert("bad", invalid)

    assert catalog.get("bad") is invalid


def test_list_returns_snapshot(catalog: AssetCatalog) -> None:
    snapshot = catalog.list()
    snapshot.clear()

    assert catalog.count() == 3
    assert {asset.base.id for asset in catalog.list()} == {
        "chart-1",
        "insight-1",
        "audience-1",
    }


def test_load_seed_inserts_every_variant(
    chart: Chart, insight: Insight, audience: Audience
) -> None:
    catalog = AssetCatalog()

    applied = catalog.load_seed(
        CatalogSeed(charts=(chart,), insights=(insight,), audiences=(audience,))
    )

    assert applied == 3
    assert catalog.get("insight-1") is insight
    assert catalog.get("audience-1") is audience


def test_load_seed_last_record_wins() -> None:
    catalog = AssetCatalog()

    catalog.load_seed(CatalogSeed(charts=(_chart("c1", "Old"), _chart("c1", "New"))))

    assert catalog.count() == 1
    assert catalog.get("c1").base.name == "New"


def test_concurrent_readers_and_writers_keep_catalog_consistent() -> None:
    catalog = AssetCatalog()
    errors: list[BaseException] = []

    def writer(offset: int) -> None:
        try:
            for index in range(200):
                catalog.insert(f"c{offset}-{index}", _chart(f"c{offset}-{index}"))
        except BaseException as exc:  # pragma: no cover - surfaced via assertion
            errors.append(exc)

    def reader() -> None:
        try:
            for _ in range(200):
                snapshot = catalog.list()
                assert len(snapshot) <= catalog.count()
                catalog.get("c0-0")
        except BaseException as exc:  # pragma: no cover - surfaced via assertion
            errors.append(exc)

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
    threads += [threading.Thread(target=reader) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert errors == []
    assert catalog.count() == 800
