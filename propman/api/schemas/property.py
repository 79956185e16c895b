"""Property schemas."""
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class PropertyRead(BaseModel):
    """Full property detail, camelCase on the wire (imageUrls, propertyType, ...)."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int
    owner_id: Optional[int] = None
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    rent: Optional[float] = None
    bhk: Optional[int] = None
    bath: Optional[int] = None
    size: Optional[float] = None
    property_type: Optional[str] = None
    furnishing: Optional[str] = None
    image_urls: List[str] = []
    status: str
    created_at: Optional[datetime] = None

    @field_validator("image_urls", mode="before")
    @classmethod
    def default_image_urls(cls, v: Any) -> Any:
        return v or []
