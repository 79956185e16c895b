"""CRUD operations for properties (lookup and seeding only)."""
from typing import Any, Optional

from sqlalchemy.orm import Session

from propman.models.property import Property


def get_property_by_id(db: Session, property_id: int) -> Optional[Property]:
    return db.get(Property, property_id)


def create_property(db: Session, title: str, owner_id: int | None = None, **fields: Any) -> Property:
    """Create a property with the given column values."""
    prop = Property(title=title, owner_id=owner_id, **fields)
    db.add(prop)
    db.commit()
    db.refresh(prop)
    return prop
