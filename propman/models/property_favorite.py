"""Property favorites: renters bookmark properties."""
from datetime import datetime

from sqlalchemy import ForeignKey, Integer, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from propman.models.base import Base
from propman.models.property import Property


class PropertyFavorite(Base):
    """A user's bookmarked property. At most one per (user, property)."""

    __tablename__ = "property_favorites"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    property_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        default=func.now(), server_default=func.now(),
    )

    property: Mapped[Property] = relationship(lazy="joined")

    __table_args__ = (
        UniqueConstraint("user_id", "property_id", name="uq_property_favorite"),
    )
