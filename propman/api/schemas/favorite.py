"""Favorite schemas."""
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from propman.api.schemas.property import PropertyRead


class FavoriteRead(BaseModel):
    """Serialized as {id, userId, property, createdAt}."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    user_id: int
    property: PropertyRead
    created_at: datetime


class FavoriteRemoved(BaseModel):
    status: str = "removed"
    message: str = "Favorite removed"


class FavoriteCount(BaseModel):
    user_id: int
    count: int
