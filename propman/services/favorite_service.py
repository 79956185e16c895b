"""Favorite operations: list, check, idempotent add, idempotent remove."""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from propman.api.schemas.favorite import FavoriteRead
from propman.core.errors import ConflictError, NotFoundError
from propman.db.crud import favorites as favorites_crud
from propman.db.crud.properties import get_property_by_id
from propman.db.crud.users import get_user_by_id
from propman.models.property import Property
from propman.models.property_favorite import PropertyFavorite
from propman.models.user import User

logger = logging.getLogger(__name__)


def to_favorite_read(favorite: PropertyFavorite) -> FavoriteRead:
    return FavoriteRead.model_validate(favorite)


class FavoriteService:
    """Business rules for property favorites, independent of HTTP."""

    def __init__(self, db: Session):
        self.db = db

    def _require_user(self, user_id: int) -> User:
        user = get_user_by_id(self.db, user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def _require_property(self, property_id: int) -> Property:
        prop = get_property_by_id(self.db, property_id)
        if not prop:
            raise NotFoundError("Property not found")
        return prop

    def list_by_user(self, user_id: int) -> list[FavoriteRead]:
        """Favorites of a user in insertion order. Unknown user yields an empty list."""
        if not get_user_by_id(self.db, user_id):
            return []
        return [to_favorite_read(f) for f in favorites_crud.find_by_user(self.db, user_id)]

    def is_favorited(self, user_id: int, property_id: int) -> bool:
        """False when either the user or the property is unknown."""
        if not get_user_by_id(self.db, user_id) or not get_property_by_id(self.db, property_id):
            return False
        return favorites_crud.exists_by_user_and_property(self.db, user_id, property_id)

    def count_by_user(self, user_id: int) -> int:
        self._require_user(user_id)
        return favorites_crud.count_by_user(self.db, user_id)

    def add(self, user_id: int, property_id: int) -> FavoriteRead:
        """
        Favorite a property. Returns the existing favorite unchanged if there is one.
        A concurrent insert for the same pair surfaces as IntegrityError from the
        unique constraint; the winner's row is returned instead.
        """
        self._require_user(user_id)
        self._require_property(property_id)

        existing = favorites_crud.find_by_user_and_property(self.db, user_id, property_id)
        if existing:
            return to_favorite_read(existing)

        try:
            saved = favorites_crud.save(
                self.db, PropertyFavorite(user_id=user_id, property_id=property_id),
            )
        except IntegrityError:
            self.db.rollback()
            logger.info("Concurrent favorite insert for user=%s property=%s; reusing existing row", user_id, property_id)
            existing = favorites_crud.find_by_user_and_property(self.db, user_id, property_id)
            if not existing:
                raise ConflictError("Favorite could not be created")
            return to_favorite_read(existing)

        logger.info("User %s favorited property %s (favorite id=%s)", user_id, property_id, saved.id)
        return to_favorite_read(saved)

    def remove(self, user_id: int, property_id: int) -> None:
        """Delete the favorite for the pair, if any. Runs as a single transaction."""
        self._require_user(user_id)
        self._require_property(property_id)
        try:
            deleted = favorites_crud.delete_by_user_and_property(self.db, user_id, property_id)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        if deleted:
            logger.info("User %s removed favorite on property %s", user_id, property_id)
