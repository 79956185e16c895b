"""API schemas."""
from propman.api.schemas.favorite import FavoriteCount, FavoriteRead, FavoriteRemoved
from propman.api.schemas.property import PropertyRead

__all__ = ["FavoriteCount", "FavoriteRead", "FavoriteRemoved", "PropertyRead"]
