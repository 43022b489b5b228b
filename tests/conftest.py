"""Shared fixtures for the favorites API test-suite.

Every test builds its own :class:`AssetCatalog` and :class:`FavoritesStore`
so no state leaks between tests.
"""

from __future__ import annotations

import pytest

from tests import _ensure_repo_on_path

_ensure_repo_on_path()

from favorites_api.catalog import AssetCatalog  # noqa: E402
from favorites_api.models.assets import (  # noqa: E402
    AssetBase,
    Audience,
    Chart,
    Insight,
)
from favorites_api.store import FavoritesStore  # noqa: E402


@pytest.fixture
def chart() -> Chart:
    return Chart(
        base=AssetBase(
            id="chart-1",
            name="Revenue Q1",
            description="Shows quarterly revenue",
        ),
        chart_type="bar",
        data_source="db-q1",
    )


@pytest.fixture
def insight() -> Insight:
    return Insight(
        base=AssetBase(
            id="insight-1",
            name="Social Media Insight",
            description="40% engage 3+ hours",
        ),
        metric="Engagement",
        value="High",
    )


@pytest.fixture
def audience() -> Audience:
    return Audience(
        base=AssetBase(
            id="audience-1",
            name="Gen Z Females",
            description="Females aged 18-24",
        ),
        segment="Females 18-24",
        size=12000,
    )


@pytest.fixture
def catalog(chart: Chart, insight: Insight, audience: Audience) -> AssetCatalog:
    """Catalog pre-populated with one asset of each variant."""

    return AssetCatalog([chart, insight, audience])


@pytest.fixture
def store(catalog: AssetCatalog) -> FavoritesStore:
    return FavoritesStore(catalog)
