"""User model for authentication and role checks."""
import enum
from datetime import datetime

from sqlalchemy import Boolean, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from propman.models.base import Base


class Role(str, enum.Enum):
    RENTER = "RENTER"
    OWNER = "OWNER"
    ADMIN = "ADMIN"


class User(Base):
    """Application user: email + hashed password + role."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True,
    )
    phone: Mapped[str] = mapped_column(String(30), nullable=False, default="")
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(
        String(20), nullable=False, default=Role.RENTER.value,
        comment="RENTER | OWNER | ADMIN",
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, default=True, server_default="true", nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        default=func.now(), server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        default=func.now(), onupdate=func.now(), server_default=func.now(),
    )

    @property
    def is_renter(self) -> bool:
        return (self.role or "").upper() == Role.RENTER.value

    @property
    def is_admin(self) -> bool:
        return (self.role or "").upper() == Role.ADMIN.value
