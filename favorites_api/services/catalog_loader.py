"""Populate an :class:`AssetCatalog` from the JSON seed document at startup.

Expected layout::

    {
        "charts": [{"id": "chart-1", "name": "Revenue", "chartType": "bar"}],
        "insights": [{"id": "insight-1", "name": "Growth", "metric": "YoY", "value": "15%"}],
        "audiences": [{"id": "aud-1", "name": "Gen Z", "segment": "18-24", "size": 1200}]
    }

Any of the three lists may be omitted.  A missing file is not an error: the
API simply starts with an empty catalog.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypeVar

from pydantic import ValidationError

from favorites_api.catalog import AssetCatalog, CatalogSeed
from favorites_api.errors import AssetValidationError, CatalogSeedError
from favorites_api.models.assets import Asset, asset_id, validate_asset
from favorites_api.schemas.assets import CatalogSeedDocument

logger = logging.getLogger(__name__)

_AssetT = TypeVar("_AssetT", bound=Asset)


def parse_seed(raw: str | bytes, *, source: str = "<memory>") -> CatalogSeed:
    """Decode a seed document into domain assets.

    Raises:
        CatalogSeedError: when the payload is not valid JSON or does not match
            the seed layout.
    """

    try:
        document = CatalogSeedDocument.model_validate_json(raw)
    except ValidationError as exc:
        raise CatalogSeedError(
            f"failed to parse catalog seed {source}: {exc.error_count()} error(s)"
        ) from exc
    return document.to_seed()


def _keep_valid(assets: tuple[_AssetT, ...], *, source: str) -> tuple[_AssetT, ...]:
    kept: list[_AssetT] = []
    for asset in assets:
        try:
            validate_asset(asset)
        except AssetValidationError as exc:
            logger.warning(
                "Skipping invalid seed asset %s from %s: %s (%s)",
                asset_id(asset),
                source,
                exc.message,
                exc.field,
            )
            continue
        kept.append(asset)
    return tuple(kept)


def drop_invalid_assets(seed: CatalogSeed, *, source: str = "<memory>") -> CatalogSeed:
    """Return ``seed`` without the assets that fail :func:`validate_asset`."""

    return CatalogSeed(
        charts=_keep_valid(seed.charts, source=source),
        insights=_keep_valid(seed.insights, source=source),
        audiences=_keep_valid(seed.audiences, source=source),
    )


def load_seed_file(
    catalog: AssetCatalog, path: Path | str, *, validate: bool = True
) -> int:
    """Load the seed document at ``path`` into ``catalog``.

    Returns the number of assets inserted (0 when the file does not exist).

    Raises:
        CatalogSeedError: the file exists but cannot be read or parsed.
    """

    seed_path = Path(path)
    if not seed_path.exists():
        logger.warning("Catalog seed %s not found; starting with an empty catalog", seed_path)
        return 0

    try:
        raw = seed_path.read_bytes()
    except OSError as exc:
        raise CatalogSeedError(f"failed to open catalog seed {seed_path}: {exc}") from exc

    seed = parse_seed(raw, source=str(seed_path))
    if validate:
        seed = drop_invalid_assets(seed, source=str(seed_path))

    inserted = catalog.load_seed(seed)
    logger.info(
        "Loaded %d assets from %s (charts=%d, insights=%d, audiences=%d)",
        inserted,
        seed_path,
        len(seed.charts),
        len(seed.insights),
        len(seed.audiences),
    )
    return inserted


__all__ = ["drop_invalid_assets", "load_seed_file", "parse_seed"]
