"""Domain exceptions raised by the catalog, store, and orchestration layers.

Each exception derives from the builtin the HTTP routers already translate
(``ValueError`` -> 409/400, ``LookupError`` -> 404), so callers that only care
about the category can keep catching the builtin.
"""

from __future__ import annotations

__all__ = [
    "AssetNotFoundError",
    "AssetValidationError",
    "CatalogSeedError",
    "FavoriteAlreadyExistsError",
    "FavoriteNotFoundError",
]


class FavoriteAlreadyExistsError(ValueError):
    """Raised when a user tries to favorite the same asset twice."""

    def __init__(self, user_id: str, asset_id: str) -> None:
        super().__init__("asset already favorited")
        self.user_id = user_id
        self.asset_id = asset_id


class FavoriteNotFoundError(LookupError):
    """Raised when editing a favorite the user does not hold."""

    def __init__(self, user_id: str, asset_id: str) -> None:
        super().__init__("favorite not found")
        self.user_id = user_id
        self.asset_id = asset_id


class AssetNotFoundError(LookupError):
    """Raised when an asset identifier does not resolve in the catalog."""

    def __init__(self, asset_id: str) -> None:
        super().__init__("asset not found in catalog")
        self.asset_id = asset_id


class AssetValidationError(ValueError):
    """Raised by :func:`favorites_api.models.assets.validate_asset`."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class CatalogSeedError(RuntimeError):
    """Raised when the seed document exists but cannot be parsed."""
