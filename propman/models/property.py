"""Rental property listing."""
from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from propman.models.base import Base


class Property(Base):
    """A property listed by an owner."""

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    rent: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    bhk: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    bath: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    size: Mapped[Optional[float]] = mapped_column(Float, nullable=True, comment="sq ft")
    property_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    furnishing: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    image_urls: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), default="AVAILABLE", server_default="AVAILABLE", nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        default=func.now(), server_default=func.now(),
    )
