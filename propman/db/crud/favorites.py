"""CRUD operations for property favorites.

The (user_id, property_id) unique constraint on the table is what keeps
favorites unique; callers may check existence first but must be ready for
``save`` to raise ``IntegrityError``.
"""
from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from propman.models.property_favorite import PropertyFavorite


def find_by_user(db: Session, user_id: int) -> list[PropertyFavorite]:
    """All favorites of a user, oldest first."""
    stmt = (
        select(PropertyFavorite)
        .where(PropertyFavorite.user_id == user_id)
        .order_by(PropertyFavorite.id.asc())
    )
    return list(db.scalars(stmt).unique())


def find_by_user_and_property(
    db: Session, user_id: int, property_id: int,
) -> Optional[PropertyFavorite]:
    stmt = select(PropertyFavorite).where(
        PropertyFavorite.user_id == user_id,
        PropertyFavorite.property_id == property_id,
    )
    return db.scalars(stmt).unique().first()


def exists_by_user_and_property(db: Session, user_id: int, property_id: int) -> bool:
    stmt = select(PropertyFavorite.id).where(
        PropertyFavorite.user_id == user_id,
        PropertyFavorite.property_id == property_id,
    )
    return db.execute(stmt.limit(1)).first() is not None


def delete_by_user_and_property(db: Session, user_id: int, property_id: int) -> int:
    """Delete the favorite for the pair. Returns rows deleted (0 if absent). Does not commit."""
    stmt = delete(PropertyFavorite).where(
        PropertyFavorite.user_id == user_id,
        PropertyFavorite.property_id == property_id,
    )
    return db.execute(stmt).rowcount


def count_by_user(db: Session, user_id: int) -> int:
    stmt = select(func.count(PropertyFavorite.id)).where(PropertyFavorite.user_id == user_id)
    return db.execute(stmt).scalar_one()


def save(db: Session, favorite: PropertyFavorite) -> PropertyFavorite:
    """Insert a favorite; the store assigns id and created_at."""
    db.add(favorite)
    db.commit()
    db.refresh(favorite)
    return favorite
