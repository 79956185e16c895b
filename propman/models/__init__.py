"""All SQLAlchemy models — single source of truth.

Import models from here:
    from propman.models import User, Property, PropertyFavorite
"""
from propman.models.base import Base
from propman.models.property import Property
from propman.models.property_favorite import PropertyFavorite
from propman.models.user import Role, User

__all__ = [
    "Base",
    "Property",
    "PropertyFavorite",
    "Role",
    "User",
]
