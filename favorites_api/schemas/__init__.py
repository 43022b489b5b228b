"""Pydantic schemas for API requests, responses, and seed documents."""

from favorites_api.schemas.assets import (  # noqa: F401
    AssetRead,
    AudienceRead,
    CatalogSeedDocument,
    ChartRead,
    InsightRead,
    asset_to_schema,
)
from favorites_api.schemas.favorites import (  # noqa: F401
    FavoriteCreate,
    FavoriteRead,
    FavoriteUpdate,
)
